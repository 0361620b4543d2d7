"""
Provider Payload Models

Pydantic schemas describing the raw JSON each content provider returns.
Only the fields Mindfresh reads are declared; everything else is ignored.
Optional fields stay optional here and are enforced during normalization
in the source adapters.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# Audius track search

class AudiusUser(BaseModel):
    """Track owner as embedded in an Audius track."""
    name: Optional[str] = None
    handle: Optional[str] = None


class AudiusTrackPayload(BaseModel):
    """Single item of an Audius /v1/tracks/search response."""
    id: str = Field(..., min_length=1, description="Audius track id")
    title: str = Field(..., description="Track title")
    user: AudiusUser = Field(default_factory=AudiusUser, description="Track owner")
    duration: int = Field(..., ge=0, description="Duration in seconds")
    genre: Optional[str] = Field(default=None, description="Genre label")

    @property
    def owner_display_name(self) -> str:
        return self.user.name or self.user.handle or "Unknown artist"


# YouTube search (relayed)

class YouTubeVideoId(BaseModel):
    kind: Optional[str] = None
    videoId: str = Field(..., min_length=1)


class YouTubeThumbnail(BaseModel):
    url: str


class YouTubeThumbnails(BaseModel):
    default: Optional[YouTubeThumbnail] = None
    medium: Optional[YouTubeThumbnail] = None
    high: Optional[YouTubeThumbnail] = None


class YouTubeSnippet(BaseModel):
    title: str
    channelTitle: str
    description: Optional[str] = None
    thumbnails: Optional[YouTubeThumbnails] = None


class YouTubeSearchItem(BaseModel):
    """Single item of a YouTube Data API search response."""
    id: YouTubeVideoId
    snippet: YouTubeSnippet


# Google Books volume search

class GoogleBooksImageLinks(BaseModel):
    smallThumbnail: Optional[str] = None
    thumbnail: Optional[str] = None


class GoogleBooksVolumeInfo(BaseModel):
    title: str
    authors: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    imageLinks: Optional[GoogleBooksImageLinks] = None
    publishedDate: Optional[str] = None


class GoogleBooksVolume(BaseModel):
    """Single item of a Google Books /volumes response."""
    id: str = Field(..., min_length=1)
    volumeInfo: GoogleBooksVolumeInfo
