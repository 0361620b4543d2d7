"""
Shared fixtures: raw provider payloads as the real services return them.
"""

import pytest


def audius_item(track_id, duration, title=None, artist="Calm Collective"):
    return {
        "id": track_id,
        "title": title or f"Track {track_id}",
        "user": {"name": artist, "handle": artist.lower().replace(" ", "")},
        "duration": duration,
        "genre": "Ambient",
    }


def youtube_item(video_id, title=None, channel="Wellness Channel"):
    return {
        "kind": "youtube#searchResult",
        "id": {"kind": "youtube#video", "videoId": video_id},
        "snippet": {
            "title": title or f"Video {video_id}",
            "channelTitle": channel,
            "description": "A calm conversation",
            "thumbnails": {"medium": {"url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"}},
        },
    }


def books_item(volume_id, title=None, authors=("Jane Doe",)):
    return {
        "id": volume_id,
        "volumeInfo": {
            "title": title or f"Book {volume_id}",
            "authors": list(authors),
            "description": "A gentle guide",
            "imageLinks": {"thumbnail": f"http://books.google.com/{volume_id}.jpg"},
            "publishedDate": "2019-04-02",
        },
    }


@pytest.fixture
def audius_payload():
    """Audius search page with a teaser in front."""
    return {"data": [audius_item("t1", 15), audius_item("t2", 45), audius_item("t3", 200)]}


@pytest.fixture
def youtube_payload():
    return {"kind": "youtube#searchListResponse", "items": [youtube_item(f"v{i}") for i in range(6)]}


@pytest.fixture
def books_payload():
    return {"kind": "books#volumes", "totalItems": 3, "items": [books_item(f"b{i}") for i in range(3)]}
