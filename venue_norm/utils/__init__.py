"""
Utility functions and helpers.
"""
from .logging import (
    setup_logging,
    get_logger,
    UtcMillisecondFormatter,
    JsonFormatter,
)
from .helpers import (
    ms_to_datetime,
    datetime_to_ms,
    has_utc_offset,
    parse8601,
    venue_time_to_ms,
    iso8601,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "UtcMillisecondFormatter",
    "JsonFormatter",
    # Time
    "ms_to_datetime",
    "datetime_to_ms",
    "has_utc_offset",
    "parse8601",
    "venue_time_to_ms",
    "iso8601",
]
