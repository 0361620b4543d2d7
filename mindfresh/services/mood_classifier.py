"""
Mood Classifier

Maps a mood score to the three content searches, and to the label and emoji
shown next to the recommendations. Three fixed bands: 1-3, 4-6, 7-10.
Both functions are total: scores outside 1-10 fall into the nearest band.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from ..models.state_models import QueryBundle


class MoodBand(Enum):
    LOW = "low"          # mood <= 3
    BALANCED = "balanced"  # 4 <= mood <= 6
    HIGH = "high"        # mood >= 7


@dataclass(frozen=True)
class MoodDescription:
    label: str
    emoji: str


_QUERY_BUNDLES: Dict[MoodBand, QueryBundle] = {
    MoodBand.LOW: QueryBundle(
        music_query="relaxing meditation ambient",
        podcast_query="mental health therapy mindfulness",
        book_query="self help depression anxiety",
    ),
    MoodBand.BALANCED: QueryBundle(
        music_query="chill peaceful calm",
        podcast_query="motivation wellness lifestyle",
        book_query="psychology happiness mindfulness",
    ),
    MoodBand.HIGH: QueryBundle(
        music_query="uplifting energetic positive",
        podcast_query="success motivation inspiration",
        book_query="personal development success happiness",
    ),
}

_DESCRIPTIONS: Dict[MoodBand, MoodDescription] = {
    MoodBand.LOW: MoodDescription(label="uplifting and calming", emoji="😔"),
    MoodBand.BALANCED: MoodDescription(label="peaceful and balanced", emoji="🙂"),
    MoodBand.HIGH: MoodDescription(label="energizing and positive", emoji="😊"),
}


def mood_band(mood: int) -> MoodBand:
    if mood <= 3:
        return MoodBand.LOW
    if mood <= 6:
        return MoodBand.BALANCED
    return MoodBand.HIGH


def classify(mood: int) -> QueryBundle:
    """Query bundle for a mood score."""
    return _QUERY_BUNDLES[mood_band(mood)]


def describe(mood: int) -> MoodDescription:
    """Display label and emoji for a mood score."""
    return _DESCRIPTIONS[mood_band(mood)]
