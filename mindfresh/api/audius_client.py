"""
Audius API Client

Free-text track search against an Audius discovery provider. Playback needs
no extra lookup: the stream URL is derived from the track id.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from .base_client import BaseAPIClient


class AudiusClient(BaseAPIClient):
    """
    Audius discovery provider client.

    Inherits from BaseAPIClient for consistent HTTP handling across all
    provider clients.
    """

    BASE_URL = "https://discoveryprovider.audius.co"

    def __init__(
        self,
        app_name: str = "mindfresh",
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize Audius client.

        Args:
            app_name: Application name Audius requires on every request
            base_url: Discovery provider root (defaults to the public host)
            timeout: Total request timeout in seconds
        """
        super().__init__(
            base_url=base_url or self.BASE_URL,
            timeout=timeout,
            service_name="Audius"
        )
        self.app_name = app_name

    def _extract_api_error(self, data: Any) -> Optional[str]:
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return None

    async def search_tracks(self, query: str, limit: int = 20) -> Dict[str, Any]:
        """
        Search tracks by free text.

        Args:
            query: Search query
            limit: Page size requested upstream

        Returns:
            Raw Audius response, {"data": [...]} on success
        """
        data = await self._make_request(
            "v1/tracks/search",
            params={
                "query": query,
                "limit": limit,
                "app_name": self.app_name
            }
        )
        self.logger.info(
            "Audius search completed",
            query=query,
            limit=limit
        )
        return data

    def stream_url(self, track_id: str) -> str:
        """Deterministic streaming URL for a track."""
        return (
            f"{self.base_url}/v1/tracks/{quote(track_id, safe='')}/stream"
            f"?app_name={quote(self.app_name, safe='')}"
        )
