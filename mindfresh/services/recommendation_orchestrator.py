"""
Recommendation Orchestrator

Owns the RecommendationBatch. A refresh classifies the mood, marks the batch
as loading, runs the three source adapters concurrently and, once all three
have settled, replaces every section wholesale with what its adapter
returned (possibly nothing).

Refreshes are never cancelled. Each one is stamped with a generation number
and its results are applied only if no newer refresh started meanwhile, so a
slow, stale response cannot overwrite fresher results.
"""

import asyncio
from dataclasses import replace
from typing import Callable, List, Optional

import structlog

from .adapters import BookSourceAdapter, TrackSourceAdapter, VideoSourceAdapter
from .mood_classifier import classify
from ..api.mood_store import MoodStore
from ..models.state_models import DEFAULT_MOOD, RecommendationBatch

logger = structlog.get_logger(__name__)

BatchListener = Callable[[RecommendationBatch], None]


class RecommendationOrchestrator:
    """
    Fans out one refresh to the track, video and book adapters.

    The batch is only ever written here; readers get immutable snapshots
    through ``batch`` or through listeners registered with add_listener().
    """

    def __init__(
        self,
        track_adapter: TrackSourceAdapter,
        video_adapter: VideoSourceAdapter,
        book_adapter: BookSourceAdapter,
        mood_store: Optional[MoodStore] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            track_adapter: Music source
            video_adapter: Podcast/video source
            book_adapter: Book source
            mood_store: Where load_initial() reads the user's latest mood
        """
        self.track_adapter = track_adapter
        self.video_adapter = video_adapter
        self.book_adapter = book_adapter
        self.mood_store = mood_store

        self._batch = RecommendationBatch()
        self._generation = 0
        self._current_mood: Optional[int] = None
        self._observed_mood: Optional[int] = None
        self._listeners: List[BatchListener] = []

        self.logger = logger.bind(component="RecommendationOrchestrator")

    @property
    def batch(self) -> RecommendationBatch:
        return self._batch

    @property
    def current_mood(self) -> Optional[int]:
        """Mood used by the latest refresh."""
        return self._current_mood

    @property
    def generation(self) -> int:
        return self._generation

    def add_listener(self, listener: BatchListener) -> None:
        """Call listener with every batch snapshot published from now on."""
        self._listeners.append(listener)

    async def load_initial(self, user_id: Optional[str]) -> RecommendationBatch:
        """
        First load for a user: read the latest mood once, then refresh once.

        No user, no stored reading, or an unreachable mood store all fall
        back to DEFAULT_MOOD instead of waiting.
        """
        reading = None
        if user_id and self.mood_store is not None:
            try:
                reading = await self.mood_store.fetch_latest_mood(user_id)
            except Exception as e:
                self.logger.warning(
                    "Failed to fetch mood, using default",
                    user_id=user_id,
                    error=str(e),
                    error_type=type(e).__name__
                )

        mood = reading.value if reading is not None else DEFAULT_MOOD
        self.logger.info(
            "Initial mood resolved",
            user_id=user_id,
            mood=mood,
            defaulted=reading is None
        )
        await self.observe_mood(mood)
        return self._batch

    async def observe_mood(self, mood: int) -> bool:
        """
        Feed a newly observed mood value.

        Returns:
            True if the value changed and a refresh ran
        """
        if mood == self._observed_mood:
            self.logger.debug("Mood unchanged, no refresh", mood=mood)
            return False

        self._observed_mood = mood
        await self.refresh(mood)
        return True

    async def refresh(self, mood: Optional[int] = None) -> RecommendationBatch:
        """
        Reload all three sections.

        Args:
            mood: Mood to load for; None reuses the last known mood

        Returns:
            The batch as it stands when this refresh settles
        """
        if mood is None:
            mood = self._current_mood if self._current_mood is not None else DEFAULT_MOOD
        self._current_mood = mood

        bundle = classify(mood)
        self._generation += 1
        generation = self._generation

        self.logger.info(
            "Refresh started",
            mood=mood,
            generation=generation,
            music_query=bundle.music_query,
            podcast_query=bundle.podcast_query,
            book_query=bundle.book_query
        )
        self._publish(replace(self._batch, loading=True, mood=mood, generation=generation))

        results = await asyncio.gather(
            self.track_adapter.fetch(bundle.music_query),
            self.video_adapter.fetch(bundle.podcast_query),
            self.book_adapter.fetch(bundle.book_query),
            return_exceptions=True
        )
        tracks, videos, books = [self._settled(result) for result in results]

        if generation != self._generation:
            self.logger.info(
                "Discarding stale refresh results",
                generation=generation,
                latest_generation=self._generation
            )
            return self._batch

        self._publish(RecommendationBatch(
            tracks=tuple(tracks),
            videos=tuple(videos),
            books=tuple(books),
            loading=False,
            mood=mood,
            generation=generation
        ))
        self.logger.info(
            "Refresh completed",
            generation=generation,
            tracks=len(tracks),
            videos=len(videos),
            books=len(books)
        )
        return self._batch

    def _settled(self, result) -> list:
        # Adapters absorb their own failures; this only guards the join
        if isinstance(result, BaseException):
            self.logger.error(
                "Source raised past its adapter",
                error=str(result),
                error_type=type(result).__name__
            )
            return []
        return list(result)

    def _publish(self, batch: RecommendationBatch) -> None:
        self._batch = batch
        for listener in list(self._listeners):
            try:
                listener(batch)
            except Exception as e:
                self.logger.error(
                    "Batch listener failed",
                    error=str(e),
                    error_type=type(e).__name__
                )
