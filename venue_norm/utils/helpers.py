"""
Time utilities for venue-norm.

Venue timestamps arrive as ISO-like strings without an offset; unified
records carry integer milliseconds since the Unix epoch (UTC).
"""
import re
from datetime import datetime, timezone


_OFFSET_RE = re.compile(r"(Z|[+-]\d{2}:?\d{2})$")


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convert millisecond timestamp to datetime (UTC)."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def datetime_to_ms(dt: datetime) -> int:
    """Convert datetime to millisecond timestamp."""
    return int(round(dt.timestamp() * 1000))


def has_utc_offset(value: str) -> bool:
    """True if an ISO string already ends with 'Z' or a numeric offset."""
    return bool(_OFFSET_RE.search(value.strip()))


def parse8601(value) -> int | None:
    """
    Parse an ISO-8601 string into epoch milliseconds.

    Strings without an offset are read as UTC. Anything that is not a
    parseable string returns None.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip().replace("Z", "+00:00")
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return datetime_to_ms(dt)


def venue_time_to_ms(value, utc_offset: str = "+00:00") -> int | None:
    """
    Parse a venue-local timestamp string.

    The venue's offset is appended before parsing unless the string
    already carries one.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if not has_utc_offset(text):
        text = text + utc_offset
    return parse8601(text)


def iso8601(timestamp_ms: int | None) -> str | None:
    """Format epoch milliseconds as ISO-8601 with millisecond precision."""
    if timestamp_ms is None:
        return None
    dt = ms_to_datetime(timestamp_ms)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
