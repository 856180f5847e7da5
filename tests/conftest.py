"""Shared fixtures for podfeed tests."""

import logging
from typing import Any

import pytest

from podfeed.feeds.models import Episode, FeedOptions, Podcast


@pytest.fixture
def sample_podcast_dict() -> dict[str, Any]:
    """Podcast metadata as a plain mapping."""
    return {
        "title": "Test & Tune Podcast",
        "description": "A show about code & other things.",
        "image_url": "https://example.com/cover.png",
        "podcast_slug": "test-and-tune",
        "owner": "Dev Team",
        "itunes_owner_name": "Dev Team",
        "itunes_owner_email": "dev@example.com",
        "itunes_category": [{"text": "Technology"}],
        "id": "1a2b3c4d-5e6f-7a8b-9c0d-1e2f3a4b5c6d",
        "created_at": "2025-06-17T14:30:00.000Z",
        "explicit": False,
    }


@pytest.fixture
def sample_episode_dicts() -> list[dict[str, Any]]:
    """Two episodes, the second needing XML escaping."""
    return [
        {
            "guid": "episode-guid-1",
            "title": "Episode 1: The First Test",
            "description": "This is the show notes for episode one.",
            "publication_date": "2025-06-17T14:30:00.000Z",
            "audio_url": "https://example.com/ep1.mp3",
            "audio_length": 12345678,
            "episode_slug": "the-first-test",
        },
        {
            "guid": "episode-guid-2",
            "title": "Episode 2: XML Escaping & Special Characters",
            "description": "A description with characters that need escaping: < > & \" ' ",
            "publication_date": "2025-06-10T14:30:00.000Z",
            "audio_url": "https://example.com/ep2.mp3?query=param&another=value",
            "audio_length": 87654321,
            "episode_slug": "xml-escaping",
        },
    ]


@pytest.fixture
def sample_podcast(sample_podcast_dict: dict[str, Any]) -> Podcast:
    """Validated Podcast model."""
    return Podcast.model_validate(sample_podcast_dict)


@pytest.fixture
def sample_episodes(sample_episode_dicts: list[dict[str, Any]]) -> list[Episode]:
    """Validated Episode models."""
    return [Episode.model_validate(ep) for ep in sample_episode_dicts]


@pytest.fixture
def feed_options() -> FeedOptions:
    """Feed options pointing at the test site."""
    return FeedOptions(site_url="https://www.my-test-site.com")


@pytest.fixture
def reset_podfeed_logger():
    """Restore the package logger after tests that reconfigure it."""
    logger = logging.getLogger("podfeed")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = True
