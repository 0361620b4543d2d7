"""
API Client Factory

Provides standardized creation and configuration of all provider clients
from a single MindfreshConfig.
"""

from typing import Optional

import structlog

from .audius_client import AudiusClient
from .google_books_client import GoogleBooksClient
from .mood_store import InMemoryMoodStore, MoodStore, SupabaseMoodStore
from .youtube_client import YouTubeRelayClient, YouTubeSearchClient
from ..config import MindfreshConfig

logger = structlog.get_logger(__name__)


class APIClientFactory:
    """
    Factory for creating configured provider clients.

    Clients are returned unopened; the caller enters them with
    ``async with`` (or lets RecommendationService do it).
    """

    def __init__(self, config: Optional[MindfreshConfig] = None):
        """
        Initialize client factory.

        Args:
            config: System configuration (defaults to the environment)
        """
        self.config = config or MindfreshConfig.from_env()
        self.logger = logger.bind(service="APIClientFactory")
        self.logger.info("API Client Factory initialized")

    def create_audius_client(self) -> AudiusClient:
        client = AudiusClient(
            app_name=self.config.audius_app_name,
            base_url=self.config.audius_base_url,
            timeout=self.config.request_timeout
        )
        self.logger.info("Audius client created", app_name=self.config.audius_app_name)
        return client

    def create_youtube_relay_client(self) -> YouTubeRelayClient:
        client = YouTubeRelayClient(
            relay_url=self.config.youtube_relay_url,
            timeout=self.config.request_timeout
        )
        self.logger.info("YouTube relay client created", relay_url=self.config.youtube_relay_url)
        return client

    def create_youtube_search_client(self) -> YouTubeSearchClient:
        """Server-side YouTube client; only the relay should call this."""
        client = YouTubeSearchClient(
            api_key=self.config.youtube_api_key,
            timeout=self.config.request_timeout
        )
        self.logger.info(
            "YouTube search client created",
            has_api_key=bool(self.config.youtube_api_key)
        )
        return client

    def create_google_books_client(self) -> GoogleBooksClient:
        client = GoogleBooksClient(
            base_url=self.config.google_books_base_url,
            timeout=self.config.request_timeout
        )
        self.logger.info("Google Books client created")
        return client

    def create_mood_store(self) -> MoodStore:
        """
        Supabase-backed store when credentials are configured, otherwise an
        empty in-memory store (every user then gets the default mood).
        """
        if self.config.has_mood_store:
            self.logger.info("Supabase mood store created")
            return SupabaseMoodStore(
                url=self.config.supabase_url,
                anon_key=self.config.supabase_anon_key,
                timeout=self.config.request_timeout
            )

        self.logger.warning("Supabase credentials not provided, using in-memory mood store")
        return InMemoryMoodStore()
