"""Settings and logging configuration for podfeed."""

from podfeed.config.logging import setup_logging
from podfeed.config.manager import ConfigManager
from podfeed.config.schema import FeedSettings

__all__ = ["ConfigManager", "FeedSettings", "setup_logging"]
