"""
Mood Store

Read side of mood persistence: the most recent mood reading of a user,
most recent wins. The recommendation core only ever calls
fetch_latest_mood().
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .base_client import BaseAPIClient
from ..models.state_models import MoodReading


class MoodStore(ABC):
    """Source of the latest mood reading per user."""

    @abstractmethod
    async def fetch_latest_mood(self, user_id: str) -> Optional[MoodReading]:
        """Return the user's most recent reading, or None if there is none."""


class InMemoryMoodStore(MoodStore):
    """Mood store kept in process memory, for local runs and tests."""

    def __init__(self, readings: Optional[Dict[str, List[int]]] = None):
        self._readings: Dict[str, List[int]] = {
            user_id: list(values) for user_id, values in (readings or {}).items()
        }

    def record(self, user_id: str, value: int) -> MoodReading:
        reading = MoodReading(value=value)
        self._readings.setdefault(user_id, []).append(reading.value)
        return reading

    async def fetch_latest_mood(self, user_id: str) -> Optional[MoodReading]:
        values = self._readings.get(user_id)
        if not values:
            return None
        return MoodReading(value=values[-1])


class SupabaseMoodStore(BaseAPIClient, MoodStore):
    """
    Mood store backed by the Supabase table moodTable.

    Uses the PostgREST endpoint of the project with the anon key; row level
    security on the table decides what the key may read.
    """

    TABLE = "moodTable"

    def __init__(self, url: str, anon_key: str, timeout: Optional[float] = None):
        super().__init__(
            base_url=f"{url.rstrip('/')}/rest/v1",
            timeout=timeout,
            service_name="SupabaseMoodStore"
        )
        self.anon_key = anon_key

    def _extract_api_error(self, data: Any) -> Optional[str]:
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return None

    async def fetch_latest_mood(self, user_id: str) -> Optional[MoodReading]:
        rows = await self._make_request(
            self.TABLE,
            params={
                "select": "mood_value",
                "user_id": f"eq.{user_id}",
                "order": "created_at.desc",
                "limit": 1
            },
            headers={
                "apikey": self.anon_key,
                "Authorization": f"Bearer {self.anon_key}"
            }
        )

        if not isinstance(rows, list) or not rows:
            self.logger.info("No mood reading stored", user_id=user_id)
            return None

        try:
            reading = MoodReading(value=rows[0].get("mood_value"))
        except (AttributeError, ValidationError) as e:
            self.logger.warning(
                "Stored mood reading is invalid",
                user_id=user_id,
                row=rows[0],
                error=str(e)
            )
            return None

        self.logger.debug("Latest mood fetched", user_id=user_id, mood=reading.value)
        return reading
