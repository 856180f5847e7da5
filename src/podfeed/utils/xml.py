"""XML escaping for text embedded in feed documents."""

from typing import Any
from xml.sax.saxutils import escape

# & < > are always handled by saxutils.escape (ampersand first)
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: Any) -> str:
    """Escape the five reserved XML characters in a string.

    Non-string values (None, numbers, ...) yield an empty string rather
    than raising. Everything other than ``& < > " '`` passes through
    unchanged, including non-ASCII text and control characters.

    Args:
        value: Text to escape

    Returns:
        Escaped text safe for element content and attribute values

    Example:
        >>> escape_xml("Test & Tune")
        'Test &amp; Tune'
        >>> escape_xml(None)
        ''
    """
    if not isinstance(value, str):
        return ""
    return escape(value, _QUOTE_ENTITIES)
