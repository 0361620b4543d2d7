"""
Book Source Adapter

Reading recommendations from Google Books.
"""

from typing import Any, List

from .base_adapter import SourceAdapter
from ...api.google_books_client import GoogleBooksClient
from ...models.content_models import Book, ContentSection
from ...models.provider_models import GoogleBooksVolume
from ..notifications import Notifier


class BookSourceAdapter(SourceAdapter[Book]):
    """Book recommendations from Google Books."""

    section = ContentSection.BOOKS
    failure_message = "Failed to load book recommendations"

    def __init__(self, client: GoogleBooksClient, notifier: Notifier):
        super().__init__(notifier)
        self.client = client

    async def _request(self, query: str) -> Any:
        return await self.client.search_volumes(query, max_results=self.PAGE_SIZE)

    def _normalize(self, payload: Any) -> List[Book]:
        volumes = self._validate_items(self._item_list(payload, "items"), GoogleBooksVolume)
        books = []
        for volume in volumes[:self.PAGE_SIZE]:
            info = volume.volumeInfo
            books.append(Book(
                id=volume.id,
                title=info.title,
                authors=tuple(info.authors),
                description=info.description or None,
                thumbnail_url=info.imageLinks.thumbnail if info.imageLinks else None,
                published_date=info.publishedDate or None
            ))
        return books
