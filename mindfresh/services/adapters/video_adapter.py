"""
Video Source Adapter

Wellness podcasts and videos, searched through the trusted relay.
"""

from typing import Any, List

from .base_adapter import SourceAdapter
from ...api.youtube_client import YouTubeRelayClient
from ...models.content_models import ContentSection, Video
from ...models.provider_models import YouTubeSearchItem
from ..notifications import Notifier


class VideoSourceAdapter(SourceAdapter[Video]):
    """Podcast and video recommendations from YouTube, via the relay."""

    section = ContentSection.VIDEOS
    failure_message = "Failed to load podcast recommendations"

    def __init__(self, client: YouTubeRelayClient, notifier: Notifier):
        super().__init__(notifier)
        self.client = client

    async def _request(self, query: str) -> Any:
        return await self.client.search_videos(query)

    def _normalize(self, payload: Any) -> List[Video]:
        items = self._validate_items(self._item_list(payload, "items"), YouTubeSearchItem)
        videos = []
        for item in items[:self.PAGE_SIZE]:
            thumbnails = item.snippet.thumbnails
            thumbnail = (thumbnails.medium or thumbnails.default) if thumbnails else None
            videos.append(Video(
                id=item.id.videoId,
                title=item.snippet.title,
                channel_name=item.snippet.channelTitle,
                description=item.snippet.description or None,
                thumbnail_url=thumbnail.url if thumbnail else None
            ))
        return videos
