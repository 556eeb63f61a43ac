"""Pytest configuration and fixtures for wp-mini tests."""

from typing import Any, Callable

import pytest


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return "http://test.wattpad.com"


@pytest.fixture
def story_payload() -> dict[str, Any]:
    """A story as returned with a mixed field selection."""
    return {
        "id": "336166598",
        "title": "The Lighthouse Keeper",
        "voteCount": 1520,
        "readCount": 48211,
        "createDate": "2023-04-02T10:00:00Z",
        "language": {"id": 1, "name": "English"},
        "user": {"name": "quietwriter", "avatar": "https://img.wattpad.com/a.png"},
        "cover_timestamp": "2023-04-05T08:00:00Z",
        "completed": False,
        "tags": ["mystery", "sea"],
        "categories": [7, 12],
        "firstPublishedPart": {"id": 1315441198, "createDate": "2023-04-02T10:00:00Z"},
        "parts": [
            {
                "id": 1315441198,
                "title": "Chapter 1",
                "text_url": {"text": "https://www.wattpad.com/apiv2/?m=storytext&id=1315441198"},
                "videoId": "",
            },
            {"id": 1315441199, "title": "Chapter 2"},
        ],
    }


@pytest.fixture
def part_payload() -> dict[str, Any]:
    """A full part embedding its parent story."""
    return {
        "id": 1315441198,
        "title": "Chapter 1",
        "url": "https://www.wattpad.com/1315441198-chapter-1",
        "groupId": "336166598",
        "group": {"id": "336166598", "title": "The Lighthouse Keeper"},
    }


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """A user profile."""
    return {
        "username": "quietwriter",
        "name": "Quiet Writer",
        "numFollowers": 2048,
        "verified_email": True,
    }


@pytest.fixture
def api_error() -> Callable[..., dict[str, Any]]:
    """Factory for API error envelopes."""

    def _build(code: int, error: str = "Error", message: str = "Something went wrong") -> dict[str, Any]:
        return {"code": code, "error": error, "message": message}

    return _build
