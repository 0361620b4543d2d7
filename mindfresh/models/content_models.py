"""
Content Models

Normalized content entities shown to the user (tracks, videos, books).
Every source adapter produces these shapes regardless of the provider
payload it started from. Entities are immutable and are replaced wholesale
on each refresh.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ContentSection(Enum):
    """The three recommendation sections of a batch."""
    TRACKS = "tracks"
    VIDEOS = "videos"
    BOOKS = "books"


@dataclass(frozen=True)
class Track:
    """A full-length music track from the track provider."""
    id: str
    title: str
    artist_name: str
    duration_seconds: int
    genre: Optional[str] = None
    stream_url: Optional[str] = None

    @property
    def formatted_duration(self) -> str:
        """Duration as m:ss."""
        minutes, seconds = divmod(self.duration_seconds, 60)
        return f"{minutes}:{seconds:02d}"


@dataclass(frozen=True)
class Video:
    """A video or podcast clip found through the video relay."""
    id: str
    title: str
    channel_name: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None

    @property
    def embed_url(self) -> str:
        return f"https://www.youtube.com/embed/{self.id}"


@dataclass(frozen=True)
class Book:
    """Volume metadata from the book provider."""
    id: str
    title: str
    authors: Tuple[str, ...] = field(default_factory=tuple)
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    published_date: Optional[str] = None

    @property
    def authors_display(self) -> str:
        return ", ".join(self.authors)
