"""
Track Source Adapter

Audius search results. Teasers and snippets are removed before the page is
cut down: 20 tracks are requested so that 6 full tracks usually survive.
"""

from typing import Any, Iterable, List

from .base_adapter import SourceAdapter
from ...api.audius_client import AudiusClient
from ...models.content_models import ContentSection, Track
from ...models.provider_models import AudiusTrackPayload
from ..notifications import Notifier

UPSTREAM_PAGE_SIZE = 20
MIN_FULL_TRACK_SECONDS = 30


def filter_full_tracks(tracks: Iterable[Track], limit: int) -> List[Track]:
    """
    Keep tracks longer than MIN_FULL_TRACK_SECONDS, in order, at most limit.

    A track id seen earlier in the page is skipped so ids stay unique.
    """
    kept: List[Track] = []
    seen = set()
    for track in tracks:
        if len(kept) >= limit:
            break
        if track.duration_seconds <= MIN_FULL_TRACK_SECONDS or track.id in seen:
            continue
        seen.add(track.id)
        kept.append(track)
    return kept


class TrackSourceAdapter(SourceAdapter[Track]):
    """Music recommendations from Audius."""

    section = ContentSection.TRACKS
    failure_message = "Failed to load music recommendations"

    def __init__(self, client: AudiusClient, notifier: Notifier):
        super().__init__(notifier)
        self.client = client

    async def _request(self, query: str) -> Any:
        return await self.client.search_tracks(query, limit=UPSTREAM_PAGE_SIZE)

    def _normalize(self, payload: Any) -> List[Track]:
        raw_items = self._item_list(payload, "data")
        tracks = [
            Track(
                id=item.id,
                title=item.title,
                artist_name=item.owner_display_name,
                duration_seconds=item.duration,
                genre=item.genre or None,
                stream_url=self.client.stream_url(item.id)
            )
            for item in self._validate_items(raw_items, AudiusTrackPayload)
        ]
        full_tracks = filter_full_tracks(tracks, self.PAGE_SIZE)

        self.logger.debug(
            "Short tracks filtered",
            upstream_count=len(raw_items),
            kept_count=len(full_tracks)
        )
        return full_tracks
