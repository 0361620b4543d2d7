"""
Source Adapters

One adapter per content provider, each normalizing its provider's payload
into Mindfresh entities and absorbing that provider's failures.
"""

from .base_adapter import SourceAdapter
from .track_adapter import (
    MIN_FULL_TRACK_SECONDS,
    UPSTREAM_PAGE_SIZE,
    TrackSourceAdapter,
    filter_full_tracks,
)
from .video_adapter import VideoSourceAdapter
from .book_adapter import BookSourceAdapter

__all__ = [
    "SourceAdapter",
    "TrackSourceAdapter",
    "VideoSourceAdapter",
    "BookSourceAdapter",
    "filter_full_tracks",
    "MIN_FULL_TRACK_SECONDS",
    "UPSTREAM_PAGE_SIZE",
]
