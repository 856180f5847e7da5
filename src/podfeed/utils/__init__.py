"""Utility functions and helpers for podfeed."""

from podfeed.utils.datetime import ensure_utc, format_http_date, now_utc
from podfeed.utils.errors import (
    ConfigError,
    ConfigNotFoundError,
    InvalidConfigError,
    PodfeedError,
)
from podfeed.utils.xml import escape_xml

__all__ = [
    # Errors
    "PodfeedError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    # Dates
    "now_utc",
    "ensure_utc",
    "format_http_date",
    # XML
    "escape_xml",
]
