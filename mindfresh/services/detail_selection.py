"""
Detail Selection State

At most one book detail view is open. Selecting another book replaces the
open one; nothing stacks.
"""

from enum import Enum
from typing import Iterable, Optional

import structlog

from ..models.content_models import Book
from ..models.state_models import SelectionState

logger = structlog.get_logger(__name__)


class DismissOrigin(Enum):
    """Where a dismiss gesture landed."""
    OVERLAY = "overlay"   # the dimmed area around the detail view
    CONTENT = "content"   # the detail view itself


class DetailSelection:
    """Closed / Open(book_id) state of the book detail view."""

    def __init__(self):
        self._state = SelectionState()
        self.logger = logger.bind(component="DetailSelection")

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected_book_id(self) -> Optional[str]:
        return self._state.selected_book_id

    def select(self, book_id: str) -> SelectionState:
        """Open the detail view for book_id, replacing any open one."""
        self._state = SelectionState(selected_book_id=book_id)
        self.logger.debug("Book detail opened", book_id=book_id)
        return self._state

    def close(self) -> SelectionState:
        """Explicit close action."""
        if self._state.is_open:
            self.logger.debug("Book detail closed", book_id=self._state.selected_book_id)
        self._state = SelectionState()
        return self._state

    def dismiss(self, origin: DismissOrigin) -> SelectionState:
        """A click or tap that may close the view; only the overlay closes it."""
        if origin is DismissOrigin.OVERLAY:
            return self.close()
        return self._state

    def selected_book(self, books: Iterable[Book]) -> Optional[Book]:
        """The open book looked up in the given results, if it is still there."""
        if not self._state.is_open:
            return None
        return next((book for book in books if book.id == self._state.selected_book_id), None)
