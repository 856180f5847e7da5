"""RSS 2.0 feed rendering with iTunes, Podcast Index and Atom extensions.

Builds the feed document as a string. Element order inside <channel> and
<item> is fixed.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from podfeed.feeds.models import Category, Episode, FeedOptions, Podcast
from podfeed.utils.datetime import format_http_date
from podfeed.utils.xml import escape_xml

logger = logging.getLogger(__name__)

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"
PODCAST_NAMESPACE = "https://podcastindex.org/namespace/1.0"
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

DEFAULT_LANGUAGE = "en-us"
DEFAULT_LOCKED = "no"

MP4_AUDIO_TYPE = "audio/mp4"
MPEG_AUDIO_TYPE = "audio/mpeg"
MP4_MARKERS = (".mp4", ".m4a")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model: type[ModelT], value: ModelT | Mapping[str, Any]) -> ModelT:
    """Validate a mapping into a model, passing model instances through."""
    if isinstance(value, model):
        return value
    return model.model_validate(value)


def enclosure_type(audio_url: str) -> str:
    """Pick the enclosure MIME type for an audio URL.

    Args:
        audio_url: Episode audio URL

    Returns:
        ``audio/mp4`` if the URL mentions .mp4 or .m4a, else ``audio/mpeg``
    """
    if any(marker in audio_url for marker in MP4_MARKERS):
        return MP4_AUDIO_TYPE
    return MPEG_AUDIO_TYPE


def podcast_base_url(podcast: Podcast, options: FeedOptions) -> str:
    """Canonical page URL for a podcast."""
    return f"{options.site_url}/podcasts/{podcast.podcast_slug}"


def podcast_feed_url(podcast: Podcast, options: FeedOptions) -> str:
    """Self-referencing URL of the RSS document."""
    return f"{podcast_base_url(podcast, options)}/rss.xml"


def episode_url(podcast: Podcast, episode: Episode, options: FeedOptions) -> str:
    """Canonical page URL for an episode."""
    return f"{podcast_base_url(podcast, options)}/episodes/{episode.episode_slug}"


def _explicit_flag(podcast: Podcast) -> str:
    return "true" if podcast.explicit else "false"


class FeedRenderer:
    """Render podcasts and their episodes as RSS feed documents.

    Example:
        >>> renderer = FeedRenderer(FeedOptions(site_url="https://example.com"))
        >>> xml = renderer.render(podcast, episodes)
        >>> xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        True
    """

    def __init__(self, options: FeedOptions | Mapping[str, Any]):
        """Initialize feed renderer.

        Args:
            options: FeedOptions instance or a mapping with ``siteUrl``/``site_url``
        """
        self.options = _coerce(FeedOptions, options)

    def render(
        self,
        podcast: Podcast | Mapping[str, Any],
        episodes: Iterable[Episode | Mapping[str, Any]] | None = None,
    ) -> str:
        """Render a complete RSS document.

        Args:
            podcast: Podcast metadata (model or mapping)
            episodes: Episodes in feed order; None is treated as no episodes

        Returns:
            The RSS XML document as a string

        Raises:
            pydantic.ValidationError: If a mapping is missing required fields
        """
        podcast = _coerce(Podcast, podcast)
        items = [self._format_item(podcast, _coerce(Episode, ep)) for ep in episodes or ()]

        logger.debug(
            "Rendering feed for podcast '%s' with %d episode(s)",
            podcast.podcast_slug,
            len(items),
        )

        return self._format_channel(podcast) + "".join(items) + "\n  </channel>\n</rss>"

    def _format_channel(self, podcast: Podcast) -> str:
        """Format the prolog, <rss> root and channel-level elements.

        Args:
            podcast: Podcast metadata

        Returns:
            Document head up to (not including) the first <item>
        """
        last_build_date = format_http_date(podcast.last_modified)
        categories = "\n    ".join(self._format_category(cat) for cat in podcast.itunes_category)

        lines = [
            XML_PROLOG,
            f'<rss xmlns:itunes="{ITUNES_NAMESPACE}" xmlns:podcast="{PODCAST_NAMESPACE}" '
            f'xmlns:atom="{ATOM_NAMESPACE}" version="2.0">',
            "  <channel>",
            f"    <title>{escape_xml(podcast.title)}</title>",
            f"    <link>{podcast_base_url(podcast, self.options)}</link>",
            f"    <description>{escape_xml(podcast.description)}</description>",
            f"    <language>{podcast.language or DEFAULT_LANGUAGE}</language>",
            f"    <lastBuildDate>{last_build_date}</lastBuildDate>",
            f"    <pubDate>{last_build_date}</pubDate>",
            f'    <itunes:image href="{escape_xml(podcast.image_url)}"/>',
            f"    <itunes:author>{escape_xml(podcast.owner)}</itunes:author>",
            f"    <itunes:explicit>{_explicit_flag(podcast)}</itunes:explicit>",
            "    <itunes:owner>",
            f"      <itunes:name>{escape_xml(podcast.itunes_owner_name)}</itunes:name>",
            f"      <itunes:email>{escape_xml(podcast.itunes_owner_email)}</itunes:email>",
            "    </itunes:owner>",
            f"    {categories}",
            f'    <atom:link href="{podcast_feed_url(podcast, self.options)}" '
            'rel="self" type="application/rss+xml"/>',
            f"    <podcast:locked>{podcast.locked or DEFAULT_LOCKED}</podcast:locked>",
            f"    <podcast:guid>{podcast.id}</podcast:guid>",
        ]
        return "\n".join(lines) + "\n"

    def _format_category(self, category: Category) -> str:
        text = escape_xml(category.text)
        if category.subtext:
            return (
                f'<itunes:category text="{text}">'
                f'<itunes:category text="{escape_xml(category.subtext)}"/>'
                "</itunes:category>"
            )
        return f'<itunes:category text="{text}"/>'

    def _format_item(self, podcast: Podcast, episode: Episode) -> str:
        """Format one episode as an <item> block.

        Author and explicit flag come from the podcast; the image falls back
        to the podcast image when the episode has none.
        """
        image_url = episode.image_url or podcast.image_url

        lines = [
            "    <item>",
            f"      <title>{escape_xml(episode.title)}</title>",
            f'      <guid isPermaLink="false">{episode.guid}</guid>',
            f"      <link>{episode_url(podcast, episode, self.options)}</link>",
            f"      <description>{escape_xml(episode.description)}</description>",
            f"      <pubDate>{format_http_date(episode.publication_date)}</pubDate>",
            f'      <enclosure url="{escape_xml(episode.audio_url)}" '
            f'length="{episode.audio_length}" type="{enclosure_type(episode.audio_url)}"/>',
            f"      <itunes:author>{escape_xml(podcast.owner)}</itunes:author>",
            f"      <itunes:explicit>{_explicit_flag(podcast)}</itunes:explicit>",
            f'      <itunes:image href="{escape_xml(image_url)}"/>',
            "    </item>",
        ]
        return "\n" + "\n".join(lines) + "\n"


def render_feed(
    podcast: Podcast | Mapping[str, Any],
    episodes: Iterable[Episode | Mapping[str, Any]] | None,
    options: FeedOptions | Mapping[str, Any],
) -> str:
    """Render a podcast and its episodes as an RSS 2.0 document.

    Args:
        podcast: Podcast metadata
        episodes: Episodes in feed order (None or empty for a channel without items)
        options: Feed options carrying the site URL

    Returns:
        The RSS XML document as a string
    """
    return FeedRenderer(options).render(podcast, episodes)
