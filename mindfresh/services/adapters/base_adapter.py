"""
Source Adapter Base

A source adapter wraps exactly one content provider client. fetch() never
raises: transport failures, error statuses and malformed payloads become an
empty list plus one failure notification for that call. No retries.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Type, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from ...api.exceptions import ProviderError, ProviderPayloadError
from ...models.content_models import ContentSection
from ..notifications import Notification, Notifier

logger = structlog.get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class SourceAdapter(ABC, Generic[T]):
    """
    Normalizes one provider's results into Mindfresh entities.

    Subclasses implement _request() (the provider call) and _normalize()
    (raw payload to entities). The base class owns the failure boundary.
    """

    PAGE_SIZE = 6

    section: ContentSection
    failure_message: str

    def __init__(self, notifier: Notifier):
        self.notifier = notifier
        self.logger = logger.bind(
            component=type(self).__name__,
            section=self.section.value
        )

    async def fetch(self, query: str) -> List[T]:
        """
        Fetch and normalize one page of results for query.

        Returns:
            At most PAGE_SIZE entities; [] if the provider failed
        """
        try:
            payload = await self._request(query)
            results = self._normalize(payload)
        except ProviderError as e:
            self._report_failure(query, e)
            return []
        except Exception as e:
            self.logger.error(
                "Unexpected adapter error",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True
            )
            self._report_failure(query, e)
            return []

        self.logger.info("Source fetched", query=query, results_count=len(results))
        return results

    @abstractmethod
    async def _request(self, query: str) -> Any:
        """Call the provider and return its raw payload."""

    @abstractmethod
    def _normalize(self, payload: Any) -> List[T]:
        """Turn a raw payload into at most PAGE_SIZE entities."""

    def _report_failure(self, query: str, error: Exception) -> None:
        self.logger.error(
            "Failed to fetch source",
            query=query,
            error=str(error),
            error_type=type(error).__name__
        )
        self.notifier.notify(Notification(
            description=self.failure_message,
            source=self.section.value
        ))

    def _item_list(self, payload: Any, key: str) -> List[Any]:
        """
        Pull the item list out of a provider payload.

        A missing list means no results. A payload that is not an object, or
        whose list is not a list, is malformed.
        """
        if not isinstance(payload, dict):
            raise ProviderPayloadError(
                f"Expected a JSON object, got {type(payload).__name__}",
                service=self.section.value
            )
        items = payload.get(key)
        if items is None:
            return []
        if not isinstance(items, list):
            raise ProviderPayloadError(
                f"Expected '{key}' to be a list, got {type(items).__name__}",
                service=self.section.value
            )
        return items

    def _validate_items(self, raw_items: List[Any], model: Type[M]) -> List[M]:
        """Validate each raw item; items that do not fit the schema are dropped."""
        valid: List[M] = []
        for index, raw in enumerate(raw_items):
            try:
                valid.append(model.model_validate(raw))
            except ValidationError as e:
                self.logger.warning(
                    "Dropping malformed item",
                    index=index,
                    error_count=e.error_count()
                )
        return valid
