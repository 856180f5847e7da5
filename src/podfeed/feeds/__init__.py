"""Feed models and RSS rendering for podfeed."""

from podfeed.feeds.models import Category, Episode, FeedOptions, Podcast
from podfeed.feeds.renderer import (
    FeedRenderer,
    enclosure_type,
    episode_url,
    podcast_base_url,
    podcast_feed_url,
    render_feed,
)

__all__ = [
    "Category",
    "Episode",
    "FeedOptions",
    "FeedRenderer",
    "Podcast",
    "enclosure_type",
    "episode_url",
    "podcast_base_url",
    "podcast_feed_url",
    "render_feed",
]
