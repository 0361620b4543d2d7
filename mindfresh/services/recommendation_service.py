"""
Recommendation Service

The handle the view layer holds: it builds the provider clients, the three
source adapters, the orchestrator, the playback machine and the detail
selection, and manages the client sessions' lifecycle.

Usage:
    async with RecommendationService.from_config(config) as service:
        await service.start(current_user_id)
        service.playback.toggle(service.batch.tracks[0].id)
"""

from contextlib import AsyncExitStack
from typing import Optional

import structlog

from .adapters import BookSourceAdapter, TrackSourceAdapter, VideoSourceAdapter
from .detail_selection import DetailSelection
from .mood_classifier import MoodDescription, describe
from .notifications import NotificationCenter, Notifier
from .playback_state_machine import PlaybackStateMachine
from .recommendation_orchestrator import RecommendationOrchestrator
from ..api.audius_client import AudiusClient
from ..api.base_client import BaseAPIClient
from ..api.client_factory import APIClientFactory
from ..api.google_books_client import GoogleBooksClient
from ..api.mood_store import MoodStore
from ..api.youtube_client import YouTubeRelayClient
from ..config import MindfreshConfig
from ..models.state_models import DEFAULT_MOOD, RecommendationBatch

logger = structlog.get_logger(__name__)


class RecommendationService:
    """
    Wires the recommendation core together.

    Provides:
    - One orchestrator, playback machine and detail selection per session
    - Shared provider clients whose sessions open and close together
    - A notifier the view subscribes to for failure toasts
    """

    def __init__(
        self,
        audius_client: AudiusClient,
        youtube_relay_client: YouTubeRelayClient,
        google_books_client: GoogleBooksClient,
        mood_store: Optional[MoodStore] = None,
        notifier: Optional[Notifier] = None
    ):
        """
        Initialize the service from already built clients.

        Args:
            audius_client: Track provider client
            youtube_relay_client: Video relay client
            google_books_client: Book provider client
            mood_store: Latest-mood source (None means always the default mood)
            notifier: Failure notification sink (defaults to a NotificationCenter)
        """
        self.logger = logger.bind(service="RecommendationService")

        self.notifier = notifier or NotificationCenter()
        self.mood_store = mood_store
        self._clients = [audius_client, youtube_relay_client, google_books_client]
        if isinstance(mood_store, BaseAPIClient):
            self._clients.append(mood_store)
        self._exit_stack: Optional[AsyncExitStack] = None

        self.orchestrator = RecommendationOrchestrator(
            track_adapter=TrackSourceAdapter(audius_client, self.notifier),
            video_adapter=VideoSourceAdapter(youtube_relay_client, self.notifier),
            book_adapter=BookSourceAdapter(google_books_client, self.notifier),
            mood_store=mood_store
        )
        self.playback = PlaybackStateMachine()
        self.selection = DetailSelection()

        self.logger.info(
            "Recommendation service initialized",
            has_mood_store=mood_store is not None,
            client_count=len(self._clients)
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[MindfreshConfig] = None,
        notifier: Optional[Notifier] = None
    ) -> "RecommendationService":
        factory = APIClientFactory(config)
        return cls(
            audius_client=factory.create_audius_client(),
            youtube_relay_client=factory.create_youtube_relay_client(),
            google_books_client=factory.create_google_books_client(),
            mood_store=factory.create_mood_store(),
            notifier=notifier
        )

    async def __aenter__(self):
        """Open every client session."""
        self._exit_stack = AsyncExitStack()
        try:
            for client in self._clients:
                await self._exit_stack.enter_async_context(client)
        except BaseException:
            await self._exit_stack.aclose()
            self._exit_stack = None
            raise
        self.logger.debug("Client sessions opened")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close all client sessions."""
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
            self._exit_stack = None
            self.logger.info("Recommendation service closed")

    # Delegated to the orchestrator

    @property
    def batch(self) -> RecommendationBatch:
        return self.orchestrator.batch

    @property
    def mood_description(self) -> MoodDescription:
        mood = self.orchestrator.current_mood
        return describe(mood if mood is not None else DEFAULT_MOOD)

    async def start(self, user_id: Optional[str]) -> RecommendationBatch:
        """Initial load for the signed-in user."""
        return await self.orchestrator.load_initial(user_id)

    async def on_mood_changed(self, mood: int) -> bool:
        return await self.orchestrator.observe_mood(mood)

    async def refresh(self) -> RecommendationBatch:
        """User-triggered refresh with the last known mood."""
        return await self.orchestrator.refresh()
