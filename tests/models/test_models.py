"""
Tests for content, payload and state models.
"""

import pytest
from pydantic import ValidationError

from conftest import audius_item, books_item, youtube_item
from mindfresh.models import (
    Book,
    ContentSection,
    MoodReading,
    RecommendationBatch,
    SectionStatus,
    SelectionState,
    Track,
    Video,
)
from mindfresh.models.provider_models import (
    AudiusTrackPayload,
    GoogleBooksVolume,
    YouTubeSearchItem,
)


class TestContentModels:

    @pytest.mark.parametrize("seconds,expected", [(45, "0:45"), (60, "1:00"), (200, "3:20"), (3605, "60:05")])
    def test_formatted_duration(self, seconds, expected):
        track = Track(id="t", title="t", artist_name="a", duration_seconds=seconds)
        assert track.formatted_duration == expected

    def test_entities_are_immutable(self):
        video = Video(id="v", title="t", channel_name="c")
        with pytest.raises(AttributeError):
            video.title = "changed"

    def test_authors_display(self):
        assert Book(id="b", title="t", authors=("A", "B")).authors_display == "A, B"
        assert Book(id="b", title="t").authors_display == ""


class TestMoodReading:

    @pytest.mark.parametrize("value", [1, 5, 10])
    def test_valid_range(self, value):
        assert MoodReading(value=value).value == value

    @pytest.mark.parametrize("value", [0, 11, -3])
    def test_out_of_range(self, value):
        with pytest.raises(ValidationError):
            MoodReading(value=value)


class TestRecommendationBatch:

    def test_empty_batch_is_not_loading(self):
        batch = RecommendationBatch()

        assert batch.loading is False
        assert batch.section_status(ContentSection.BOOKS) is SectionStatus.EMPTY

    def test_loading_wins_over_existing_items(self):
        batch = RecommendationBatch(books=(Book(id="b", title="t"),), loading=True)

        assert batch.section_status(ContentSection.BOOKS) is SectionStatus.LOADING

    def test_items_by_section(self):
        track = Track(id="t", title="t", artist_name="a", duration_seconds=60)
        batch = RecommendationBatch(tracks=(track,))

        assert batch.items(ContentSection.TRACKS) == (track,)
        assert batch.items(ContentSection.VIDEOS) == ()
        assert batch.section_status(ContentSection.TRACKS) is SectionStatus.READY


class TestSelectionState:

    def test_is_open(self):
        assert not SelectionState().is_open
        assert SelectionState("b1").is_open


class TestProviderModels:

    def test_audius_payload_ignores_unknown_fields(self):
        item = audius_item("t1", 120)
        item["play_count"] = 99

        payload = AudiusTrackPayload.model_validate(item)

        assert payload.id == "t1"
        assert payload.owner_display_name == "Calm Collective"

    def test_audius_owner_without_name_or_handle(self):
        item = audius_item("t1", 120)
        item["user"] = {}

        assert AudiusTrackPayload.model_validate(item).owner_display_name == "Unknown artist"

    def test_audius_negative_duration_is_invalid(self):
        with pytest.raises(ValidationError):
            AudiusTrackPayload.model_validate(audius_item("t1", -1))

    def test_youtube_item_requires_video_id(self):
        item = youtube_item("v1")
        del item["id"]["videoId"]

        with pytest.raises(ValidationError):
            YouTubeSearchItem.model_validate(item)

    def test_books_volume_defaults(self):
        volume = GoogleBooksVolume.model_validate({"id": "b1", "volumeInfo": {"title": "Bare"}})

        assert volume.volumeInfo.authors == []
        assert volume.volumeInfo.imageLinks is None

    def test_books_volume_full(self):
        volume = GoogleBooksVolume.model_validate(books_item("b1", authors=("A",)))

        assert volume.volumeInfo.imageLinks.thumbnail == "http://books.google.com/b1.jpg"
        assert volume.volumeInfo.publishedDate == "2019-04-02"
