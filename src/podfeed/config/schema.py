"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel

from podfeed.feeds.models import FeedOptions

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FeedSettings(BaseModel):
    """Persisted podfeed settings."""

    version: str = "1"
    site_url: str
    log_level: LogLevel = "INFO"

    def feed_options(self) -> FeedOptions:
        """Build the FeedOptions used by the renderer."""
        return FeedOptions(site_url=self.site_url)
