"""Display formatting for durations, timestamps and optional identifiers."""

from datetime import datetime
from typing import Optional

NOT_AVAILABLE = "Not available"


def format_duration(seconds: int) -> str:
    """Format seconds as m:ss (minutes unbounded, seconds zero-padded).

    >>> format_duration(65)
    '1:05'
    >>> format_duration(3600)
    '60:00'
    """
    mins, secs = divmod(int(seconds), 60)
    return f"{mins}:{secs:02d}"


def format_timestamp(value: Optional[datetime]) -> str:
    """Format a timestamp as a date in the viewer's locale."""
    if value is None:
        return NOT_AVAILABLE
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%x")


def or_not_available(value: Optional[str]) -> str:
    """Show an optional identifier, or the 'Not available' sentinel."""
    return value if value else NOT_AVAILABLE
