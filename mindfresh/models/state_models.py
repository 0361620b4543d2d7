"""
State Models for the Mindfresh Recommendation Core

Mood input, derived queries, and the owned state structures of the
orchestrator, the playback machine and the detail selection. Each state
structure has exactly one writer; everyone else reads immutable snapshots.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .content_models import Book, ContentSection, Track, Video


MIN_MOOD = 1
MAX_MOOD = 10
DEFAULT_MOOD = 5


class MoodReading(BaseModel):
    """Most recent self-reported mood of a user, as read from the mood store."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=MIN_MOOD, le=MAX_MOOD, description="Mood score from 1 to 10")


@dataclass(frozen=True)
class QueryBundle:
    """The three free-text searches derived from one mood score."""
    music_query: str
    podcast_query: str
    book_query: str


class SectionStatus(Enum):
    """What the view should show for one section of a batch."""
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class RecommendationBatch:
    """
    Snapshot of the orchestrator's results.

    loading stays True from the start of a refresh until all three sources
    have settled. An empty section with loading False means "no results",
    which the view renders differently from "still loading".
    """
    tracks: Tuple[Track, ...] = field(default_factory=tuple)
    videos: Tuple[Video, ...] = field(default_factory=tuple)
    books: Tuple[Book, ...] = field(default_factory=tuple)
    loading: bool = False
    mood: Optional[int] = None
    generation: int = 0

    def items(self, section: ContentSection) -> tuple:
        return getattr(self, section.value)

    def section_status(self, section: ContentSection) -> SectionStatus:
        if self.loading:
            return SectionStatus.LOADING
        if not self.items(section):
            return SectionStatus.EMPTY
        return SectionStatus.READY


class PlaybackStatus(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class PlaybackState:
    """At most one track is active; only the active track can be playing."""
    active_track_id: Optional[str] = None
    is_playing: bool = False

    def __post_init__(self):
        if self.active_track_id is None and self.is_playing:
            raise ValueError("is_playing requires an active track")

    @property
    def status(self) -> PlaybackStatus:
        if self.active_track_id is None:
            return PlaybackStatus.IDLE
        return PlaybackStatus.PLAYING if self.is_playing else PlaybackStatus.PAUSED


@dataclass(frozen=True)
class SelectionState:
    """The single book whose detail view is open, if any."""
    selected_book_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.selected_book_id is not None
