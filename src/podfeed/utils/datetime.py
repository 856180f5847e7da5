"""Timezone-aware datetime helpers."""

from datetime import datetime, timezone
from email.utils import format_datetime


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Convert a datetime to UTC.

    Naive datetimes are assumed to already be in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_http_date(value: datetime) -> str:
    """Format a datetime as an RFC 1123 HTTP-date.

    Args:
        value: Datetime to format (naive values are treated as UTC)

    Returns:
        Date string such as ``Tue, 17 Jun 2025 14:30:00 GMT``
    """
    return format_datetime(ensure_utc(value), usegmt=True)
