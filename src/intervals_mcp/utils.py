"""
Shared utility functions for the Intervals.icu MCP server.

Date defaults, duration and timestamp formatting used across formatters and tools.
"""

import math
from datetime import datetime, timedelta, timezone
from numbers import Real
from typing import Any, Optional, Tuple


DEFAULT_LOOKBACK_DAYS = 30
DISPLAY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def is_number(value: Any) -> bool:
    """True for ints and floats, False for bools (which are ints in Python)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def format_seconds(seconds: Any) -> str:
    """Format a duration in seconds as "m:ss".

    Minutes are not padded and do not roll over into hours.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string like "1:05" or "62:05", or "N/A" for 0, None, NaN, infinity
        and anything that is not a positive number
    """
    if not is_number(seconds) or not math.isfinite(seconds) or seconds <= 0:
        return "N/A"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_timestamp(value: Any) -> Any:
    """Normalize an ISO-8601 timestamp to "YYYY-MM-DD HH:MM:SS".

    Only strings longer than a bare date are parsed. A trailing "Z" is read
    as UTC. Anything that does not parse is returned unchanged.
    """
    if not isinstance(value, str) or len(value) <= 10:
        return value
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime(DISPLAY_TIMESTAMP_FORMAT)


def default_date_range(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    days: int = DEFAULT_LOOKBACK_DAYS,
) -> Tuple[str, str]:
    """Fill in missing bounds of a YYYY-MM-DD date range.

    Args:
        start_date: Start date (default: `days` days ago)
        end_date: End date (default: today, UTC)
        days: Look-back window for the default start

    Returns:
        (start_date, end_date) as YYYY-MM-DD strings
    """
    today = datetime.now(timezone.utc).date()
    start = start_date or (today - timedelta(days=days)).isoformat()
    end = end_date or today.isoformat()
    return start, end


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]
