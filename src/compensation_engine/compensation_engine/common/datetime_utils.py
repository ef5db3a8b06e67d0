from __future__ import annotations

import calendar
import math
from datetime import datetime, time
from typing import Optional


def parse_clock(value: Optional[str]) -> Optional[time]:
    """Parse an "HH:MM" (or "HH:MM:SS") clock string.

    Returns None for blank or malformed values instead of raising, so a bad
    time entry behaves like a missing one.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    parts = text.split(":")
    if len(parts) < 2:
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=hours, minute=minutes, second=seconds)
    except ValueError:
        return None


def minutes_between(later: datetime, earlier: datetime) -> int:
    """Whole minutes from ``earlier`` to ``later`` (negative if reversed)."""
    return int(round((later - earlier).total_seconds() / 60))


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def format_clock_12h(value: time) -> str:
    """Format a clock time as e.g. "8:00AM" / "5:30PM"."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d}{suffix}"
