"""
Models Module

Data models for the Mindfresh recommendation core: normalized content
entities, raw provider payload schemas and the owned state structures.
"""

from .content_models import Book, ContentSection, Track, Video
from .state_models import (
    DEFAULT_MOOD,
    MAX_MOOD,
    MIN_MOOD,
    MoodReading,
    PlaybackState,
    PlaybackStatus,
    QueryBundle,
    RecommendationBatch,
    SectionStatus,
    SelectionState,
)

__all__ = [
    # Content entities
    "Track",
    "Video",
    "Book",
    "ContentSection",

    # Mood and queries
    "MoodReading",
    "QueryBundle",
    "MIN_MOOD",
    "MAX_MOOD",
    "DEFAULT_MOOD",

    # Owned state
    "RecommendationBatch",
    "SectionStatus",
    "PlaybackState",
    "PlaybackStatus",
    "SelectionState",
]
