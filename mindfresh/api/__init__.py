"""
API Module

Provider clients for every external service Mindfresh talks to, plus the
video search relay service.
Provides consistent HTTP handling and error mapping.
"""

from .base_client import BaseAPIClient
from .exceptions import (
    ProviderConfigurationError,
    ProviderError,
    ProviderPayloadError,
    ProviderTransportError,
)
from .audius_client import AudiusClient
from .youtube_client import YouTubeRelayClient, YouTubeSearchClient
from .google_books_client import GoogleBooksClient
from .mood_store import InMemoryMoodStore, MoodStore, SupabaseMoodStore
from .client_factory import APIClientFactory

__all__ = [
    # Base infrastructure
    "BaseAPIClient",
    "ProviderError",
    "ProviderTransportError",
    "ProviderPayloadError",
    "ProviderConfigurationError",

    # Content providers
    "AudiusClient",
    "YouTubeRelayClient",
    "YouTubeSearchClient",
    "GoogleBooksClient",

    # Mood store
    "MoodStore",
    "InMemoryMoodStore",
    "SupabaseMoodStore",

    # Client factory
    "APIClientFactory",
]
