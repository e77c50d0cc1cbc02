"""Duration helpers shared by the timer and the statistics store."""

from __future__ import annotations

import math
from datetime import date, datetime

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND


def is_finite_number(value) -> bool:
    """True for real ints/floats that are finite. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def minutes_to_milliseconds(minutes) -> int:
    """Convert minutes to whole milliseconds. Non-finite input converts to 0."""
    if not is_finite_number(minutes):
        return 0
    return round(minutes * MS_PER_MINUTE)


def format_duration(ms) -> str:
    """Format milliseconds as ``"M min S sec"``, dropping zero parts.

    >>> format_duration(125000)
    '2 min 5 sec'
    """
    if not is_finite_number(ms) or ms < 0:
        ms = 0

    total_seconds = int(ms // MS_PER_SECOND)
    minutes = total_seconds // 60
    seconds = total_seconds % 60

    if minutes == 0 and seconds == 0:
        return "0 sec"
    if minutes == 0:
        return f"{seconds} sec"
    if seconds == 0:
        return f"{minutes} min"
    return f"{minutes} min {seconds} sec"


def date_key(day: date) -> str:
    """Statistics bucket key for *day* (``YYYY-MM-DD``)."""
    return day.isoformat()


def today_key() -> str:
    """Bucket key for the current local calendar day."""
    return date_key(datetime.now().date())
