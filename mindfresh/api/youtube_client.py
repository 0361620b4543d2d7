"""
YouTube Clients

Two halves of the video path:

- YouTubeSearchClient calls the YouTube Data API directly with the secret
  key. Only the relay service uses it.
- YouTubeRelayClient is what untrusted code uses: it posts the query to the
  relay, which injects the key and passes the raw search JSON back.
"""

from typing import Any, Dict, Optional

import aiohttp

from .base_client import BaseAPIClient
from .exceptions import ProviderConfigurationError, ProviderTransportError

# Error code the relay attaches when it has no API key
RELAY_NOT_CONFIGURED = "relay_not_configured"


def _google_error_message(data: Any) -> Optional[str]:
    if isinstance(data, dict) and "error" in data:
        error_info = data["error"]
        if isinstance(error_info, dict):
            return error_info.get("message", f"Error {error_info.get('code', 'unknown')}")
        return str(error_info)
    return None


class YouTubeSearchClient(BaseAPIClient):
    """YouTube Data API v3 search client holding the server-side key."""

    BASE_URL = "https://www.googleapis.com/youtube/v3"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        super().__init__(
            base_url=base_url or self.BASE_URL,
            timeout=timeout,
            service_name="YouTube"
        )
        self.api_key = api_key

    def _extract_api_error(self, data: Any) -> Optional[str]:
        return _google_error_message(data)

    async def search_videos(self, query: str, max_results: int = 6) -> Dict[str, Any]:
        """
        Search videos by free text.

        Raises:
            ProviderConfigurationError: No API key configured
            ProviderTransportError: Upstream answered with a non-success status
        """
        if not self.api_key:
            self.logger.error("YOUTUBE_API_KEY not configured")
            raise ProviderConfigurationError(
                "YouTube API key not configured",
                service=self.service_name
            )

        data = await self._make_request(
            "search",
            params={
                "part": "snippet",
                "q": query,
                "type": "video",
                "maxResults": max_results,
                "key": self.api_key
            }
        )
        self.logger.info("YouTube search completed", query=query, max_results=max_results)
        return data


class YouTubeRelayClient(BaseAPIClient):
    """Client side of the trusted video search relay."""

    def __init__(self, relay_url: str, timeout: Optional[float] = None):
        """
        Args:
            relay_url: Full URL of the relay's search endpoint
            timeout: Total request timeout in seconds
        """
        super().__init__(
            base_url=relay_url,
            timeout=timeout,
            service_name="YouTubeRelay"
        )

    def _extract_api_error(self, data: Any) -> Optional[str]:
        if isinstance(data, dict) and data.get("error"):
            return _google_error_message(data)
        return None

    async def _handle_http_error(self, response: aiohttp.ClientResponse, endpoint: str):
        """Surface the relay's own error body, and tell a missing key apart."""
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = {}
        message = body.get("error") if isinstance(body, dict) else None

        self.logger.warning(
            "Relay returned an error",
            status=response.status,
            error=message
        )

        if isinstance(body, dict) and body.get("code") == RELAY_NOT_CONFIGURED:
            raise ProviderConfigurationError(
                message or "Relay is missing its credential",
                service=self.service_name
            )
        raise ProviderTransportError(
            f"{self.service_name} returned HTTP {response.status}: {message or 'no detail'}",
            service=self.service_name,
            status=response.status
        )

    async def search_videos(self, query: str) -> Dict[str, Any]:
        """
        Ask the relay for videos matching query.

        Returns:
            Raw YouTube search JSON, {"items": [...]}
        """
        data = await self._make_request("", method="POST", json_body={"query": query})
        self.logger.info("Relay video search completed", query=query)
        return data
