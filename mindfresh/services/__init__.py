"""
Services Module

The mood-driven recommendation core: mood classification, source adapters,
the orchestrator and the interaction state machines.
"""

from .mood_classifier import MoodBand, MoodDescription, classify, describe, mood_band
from .notifications import Notification, NotificationCenter, Notifier
from .adapters import (
    BookSourceAdapter,
    SourceAdapter,
    TrackSourceAdapter,
    VideoSourceAdapter,
    filter_full_tracks,
)
from .recommendation_orchestrator import RecommendationOrchestrator
from .playback_state_machine import PlaybackStateMachine
from .detail_selection import DetailSelection, DismissOrigin
from .recommendation_service import RecommendationService

__all__ = [
    # Mood classification
    "MoodBand",
    "MoodDescription",
    "classify",
    "describe",
    "mood_band",

    # Notifications
    "Notification",
    "NotificationCenter",
    "Notifier",

    # Source adapters
    "SourceAdapter",
    "TrackSourceAdapter",
    "VideoSourceAdapter",
    "BookSourceAdapter",
    "filter_full_tracks",

    # Orchestration and interaction state
    "RecommendationOrchestrator",
    "PlaybackStateMachine",
    "DetailSelection",
    "DismissOrigin",

    # Facade
    "RecommendationService",
]
