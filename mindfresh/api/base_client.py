"""
Base API Client

Provides unified HTTP request handling and error mapping for all external
content provider clients in Mindfresh.

Requests are issued exactly once: a provider error is terminal for the
refresh cycle that triggered it.
"""

import asyncio
import json
from typing import Dict, Optional, Any
from abc import ABC, abstractmethod

import aiohttp
import structlog

from .exceptions import ProviderPayloadError, ProviderTransportError

logger = structlog.get_logger(__name__)


class BaseAPIClient(ABC):
    """
    Base HTTP client with unified request handling and error mapping.

    All provider clients (Audius, YouTube relay, Google Books, Supabase)
    inherit from this class so that transport failures, non-success
    statuses and unreadable bodies surface as the same exception types.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        service_name: str = "api"
    ):
        """
        Initialize base API client.

        Args:
            base_url: Base URL for the API
            timeout: Total request timeout in seconds (None waits forever)
            service_name: Service name for logging and identification
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.service_name = service_name
        self.session: Optional[aiohttp.ClientSession] = None

        self.logger = logger.bind(
            service=service_name,
            component="BaseAPIClient",
            base_url=self.base_url
        )

        self.logger.debug("Base API client initialized", timeout=timeout)

    async def __aenter__(self):
        """Async context manager entry."""
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        self.logger.debug("API client session started")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.session:
            await self.session.close()
            self.session = None
            self.logger.debug("API client session closed")

    def _build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}" if endpoint else self.base_url

    async def _make_request(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make a single HTTP request and return the parsed JSON body.

        Args:
            endpoint: API endpoint (relative to base_url)
            params: Query parameters
            method: HTTP method (GET, POST, etc.)
            headers: Additional headers
            json_body: JSON request body for POST requests

        Returns:
            Parsed JSON response data

        Raises:
            ProviderTransportError: Network failure, timeout or non-success status
            ProviderPayloadError: Body is not valid JSON or carries an API error
        """
        if not self.session:
            self.logger.error("Client not initialized")
            raise RuntimeError(
                f"{self.service_name} client not initialized. Use async context manager."
            )

        url = self._build_url(endpoint)
        request_headers = dict(headers or {})
        request_headers.setdefault('User-Agent', f'Mindfresh-{self.service_name}/1.0')

        self.logger.debug(
            "Making API request",
            method=method,
            endpoint=endpoint,
            param_count=len(params or {})
        )

        try:
            async with self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=request_headers
            ) as response:
                if response.status != 200:
                    await self._handle_http_error(response, endpoint)

                data = await self._parse_response(response)

                error_info = self._extract_api_error(data)
                if error_info:
                    self.logger.error(
                        "API error in response body",
                        error=error_info,
                        endpoint=endpoint
                    )
                    raise ProviderPayloadError(
                        f"{self.service_name} API error: {error_info}",
                        service=self.service_name
                    )

                self.logger.debug(
                    "API request successful",
                    endpoint=endpoint,
                    status=response.status
                )
                return data

        except asyncio.TimeoutError as e:
            self.logger.warning("Request timeout", endpoint=endpoint, timeout=self.timeout)
            raise ProviderTransportError(
                f"{self.service_name} request timed out",
                service=self.service_name
            ) from e

        except aiohttp.ClientError as e:
            self.logger.error(
                "HTTP client error",
                error=str(e),
                error_type=type(e).__name__,
                endpoint=endpoint
            )
            raise ProviderTransportError(
                f"{self.service_name} client error: {e}",
                service=self.service_name
            ) from e

    async def _parse_response(self, response: aiohttp.ClientResponse) -> Any:
        """
        Parse API response. Can be overridden by subclasses for custom parsing.

        Args:
            response: HTTP response object

        Returns:
            Parsed response data
        """
        try:
            return await response.json(content_type=None)
        except (json.JSONDecodeError, aiohttp.ContentTypeError) as e:
            self.logger.error(f"{self.service_name} invalid JSON response", error=str(e))
            raise ProviderPayloadError(
                f"{self.service_name} returned invalid JSON",
                service=self.service_name
            ) from e

    async def _handle_http_error(
        self,
        response: aiohttp.ClientResponse,
        endpoint: str
    ):
        """
        Map a non-success response to ProviderTransportError.

        Args:
            response: HTTP response object
            endpoint: Request endpoint
        """
        body = await response.text()
        self.logger.warning(
            f"{self.service_name} HTTP error",
            status=response.status,
            endpoint=endpoint,
            body=body[:200]
        )
        raise ProviderTransportError(
            f"{self.service_name} returned HTTP {response.status}",
            service=self.service_name,
            status=response.status
        )

    @abstractmethod
    def _extract_api_error(self, data: Any) -> Optional[str]:
        """
        Extract API-specific error information from response data.
        Must be implemented by subclasses.

        Args:
            data: Parsed response data

        Returns:
            Error message if found, None otherwise
        """
        pass

    def get_service_info(self) -> Dict[str, Any]:
        """Service configuration and status for diagnostics."""
        return {
            "service_name": self.service_name,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "session_active": self.session is not None,
        }
