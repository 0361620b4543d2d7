#!/usr/bin/env python3
"""
Provider Validation Script

Runs one refresh per mood band against the live providers and reports how
many items each section gets, how much of the Audius page the 30 second
filter throws away, and which sources raised failure notifications.

Needs the relay running (mindfresh-relay) for the video section.
"""

import asyncio
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import structlog
from dotenv import load_dotenv

from mindfresh.api.exceptions import ProviderError
from mindfresh.config import MindfreshConfig
from mindfresh.services import NotificationCenter, RecommendationService, classify, describe
from mindfresh.services.adapters.track_adapter import MIN_FULL_TRACK_SECONDS, UPSTREAM_PAGE_SIZE

logger = structlog.get_logger(__name__)

# One representative score per band
SAMPLE_MOODS = [2, 5, 8]


def raw_durations(payload: Any) -> List[int]:
    """Durations of an Audius search page; items without an integer duration are skipped."""
    items = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        return []
    return [
        item["duration"] for item in items
        if isinstance(item, dict) and isinstance(item.get("duration"), int)
    ]


class ProviderValidator:
    """Checks that every mood band yields usable recommendations."""

    def __init__(self, config: MindfreshConfig):
        self.config = config
        self.notifier = NotificationCenter()

    async def run_validation(self) -> Dict[str, Any]:
        logger.info("Starting provider validation", moods=SAMPLE_MOODS)

        service = RecommendationService.from_config(self.config, notifier=self.notifier)
        async with service:
            bands = {}
            for mood in SAMPLE_MOODS:
                bands[str(mood)] = await self._validate_mood(service, mood)

            filter_stats = await self._measure_duration_filter(service)

        logger.info("Provider validation completed")
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "relay_url": self.config.youtube_relay_url,
            "mood_store": "supabase" if self.config.has_mood_store else "in-memory",
            "bands": bands,
            "duration_filter": filter_stats,
        }

    async def _validate_mood(self, service: RecommendationService, mood: int) -> Dict[str, Any]:
        self.notifier.clear()
        await service.on_mood_changed(mood)
        batch = service.batch

        result = {
            "label": describe(mood).label,
            "queries": vars(classify(mood)),
            "tracks": len(batch.tracks),
            "videos": len(batch.videos),
            "books": len(batch.books),
            "sample_tracks": [
                f"{t.artist_name} - {t.title} ({t.formatted_duration})" for t in batch.tracks[:3]
            ],
            "failed_sources": [n.source for n in self.notifier.history],
        }
        logger.info("Mood validated", mood=mood, **{k: result[k] for k in ("tracks", "videos", "books")})
        return result

    async def _measure_duration_filter(self, service: RecommendationService) -> Dict[str, Any]:
        """Share of raw Audius results that are previews or teasers."""
        client = service.orchestrator.track_adapter.client
        durations: List[int] = []

        for mood in SAMPLE_MOODS:
            query = classify(mood).music_query
            try:
                payload = await client.search_tracks(query, limit=UPSTREAM_PAGE_SIZE)
            except ProviderError as e:
                logger.error("Audius search failed", query=query, error=str(e))
                continue
            durations.extend(raw_durations(payload))

        short = sum(1 for d in durations if d <= MIN_FULL_TRACK_SECONDS)
        return {
            "tracks_seen": len(durations),
            "short_tracks": short,
            "short_ratio": short / len(durations) if durations else 0,
        }


async def main():
    load_dotenv()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer()
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    config = MindfreshConfig.from_env()

    output_dir = Path("data/validation")
    output_dir.mkdir(parents=True, exist_ok=True)

    validator = ProviderValidator(config)

    try:
        results = await validator.run_validation()
    except Exception as e:
        logger.error("Validation failed", error=str(e))
        print(f"ERROR: Validation failed - {e}")
        return

    output_file = output_dir / f"providers_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    with open(output_file, 'w') as f:
        json.dump(results, f, indent=2)

    print("\n" + "=" * 60)
    print("MINDFRESH PROVIDER VALIDATION SUMMARY")
    print("=" * 60)
    for mood, band in results["bands"].items():
        print(f"Mood {mood} ({band['label']}): "
              f"{band['tracks']} tracks, {band['videos']} videos, {band['books']} books")
        if band["failed_sources"]:
            print(f"  failed: {', '.join(band['failed_sources'])}")

    stats = results["duration_filter"]
    print(f"\nShort Audius results dropped: {stats['short_tracks']}/{stats['tracks_seen']} "
          f"({stats['short_ratio']:.1%})")
    print(f"\nDetailed results saved to: {output_file}")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
