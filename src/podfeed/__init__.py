"""podfeed - Render podcast metadata into RSS 2.0 / iTunes feeds."""

__version__ = "0.1.0"

from podfeed.feeds.models import Category, Episode, FeedOptions, Podcast
from podfeed.feeds.renderer import FeedRenderer, render_feed
from podfeed.utils.xml import escape_xml

__all__ = [
    "Category",
    "Episode",
    "FeedOptions",
    "FeedRenderer",
    "Podcast",
    "escape_xml",
    "render_feed",
    "__version__",
]
