"""
Failure Notifications

The side channel source adapters use to tell the user a section could not
be loaded (a toast in the web client). Notifications are one-shot and
never block the refresh that produced them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Notification:
    """A single user-facing failure message."""
    description: str
    title: str = "Error"
    variant: str = "destructive"
    source: Optional[str] = None


class Notifier(ABC):
    """Anything that can show a notification to the user."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass


class NotificationCenter(Notifier):
    """
    Default notifier: records every notification and forwards it to the
    registered listeners (the view layer's toast renderer).
    """

    def __init__(self):
        self._history: List[Notification] = []
        self._listeners: List[Callable[[Notification], None]] = []
        self.logger = logger.bind(component="NotificationCenter")

    def add_listener(self, listener: Callable[[Notification], None]) -> None:
        self._listeners.append(listener)

    def notify(self, notification: Notification) -> None:
        self._history.append(notification)
        self.logger.info(
            "Notification emitted",
            source=notification.source,
            description=notification.description
        )
        for listener in list(self._listeners):
            try:
                listener(notification)
            except Exception as e:
                # A broken toast renderer must not break the refresh
                self.logger.error(
                    "Notification listener failed",
                    error=str(e),
                    error_type=type(e).__name__
                )

    @property
    def history(self) -> List[Notification]:
        return list(self._history)

    def clear(self) -> None:
        self._history.clear()
