"""
Provider Exceptions

Errors raised by the provider clients and caught at the source adapter
boundary. Nothing above the adapters ever sees these.
"""

from typing import Optional


class ProviderError(Exception):
    """Base class for every content provider failure."""

    def __init__(self, message: str, service: Optional[str] = None):
        super().__init__(message)
        self.service = service


class ProviderTransportError(ProviderError):
    """Provider unreachable or answered with a non-success status."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        status: Optional[int] = None
    ):
        super().__init__(message, service=service)
        self.status = status


class ProviderPayloadError(ProviderError):
    """Response body does not have the expected shape."""


class ProviderConfigurationError(ProviderError):
    """A provider credential or endpoint is missing."""
