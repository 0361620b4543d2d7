"""
Google Books API Client

Free-text volume search. The public volumes endpoint needs no credential.
"""

from typing import Any, Dict, Optional

from .base_client import BaseAPIClient


class GoogleBooksClient(BaseAPIClient):
    """Google Books volumes search client."""

    BASE_URL = "https://www.googleapis.com/books/v1"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(
            base_url=base_url or self.BASE_URL,
            timeout=timeout,
            service_name="GoogleBooks"
        )

    def _extract_api_error(self, data: Any) -> Optional[str]:
        """Google APIs report errors as {"error": {"code": ..., "message": ...}}."""
        if isinstance(data, dict) and "error" in data:
            error_info = data["error"]
            if isinstance(error_info, dict):
                return error_info.get("message", f"Error {error_info.get('code', 'unknown')}")
            return str(error_info)
        return None

    async def search_volumes(self, query: str, max_results: int = 6) -> Dict[str, Any]:
        """
        Search volumes by free text.

        Args:
            query: Search query
            max_results: Page size

        Returns:
            Raw response, {"items": [...]} when anything matched
        """
        data = await self._make_request(
            "volumes",
            params={"q": query, "maxResults": max_results}
        )
        self.logger.info("Google Books search completed", query=query, max_results=max_results)
        return data
