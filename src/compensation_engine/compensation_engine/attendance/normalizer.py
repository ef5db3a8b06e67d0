from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import parse_clock
from ..settings.model import DailySchedule
from .model import NormalizedTimes, TimeInterval


def build_interval(on: date, time_in: Optional[str], time_out: Optional[str]) -> Optional[TimeInterval]:
    """Anchor a pair of clock strings on ``on``.

    A time-out at or before the time-in crosses midnight and lands on the
    next day.
    """
    clock_in = parse_clock(time_in)
    clock_out = parse_clock(time_out)
    if clock_in is None or clock_out is None:
        return None

    start = datetime.combine(on, clock_in)
    end = datetime.combine(on, clock_out)
    if clock_out <= clock_in:
        end += timedelta(days=1)
    return TimeInterval(time_in=start, time_out=end)


def normalize_times(
    on: date,
    time_in: Optional[str],
    time_out: Optional[str],
    schedule: Optional[DailySchedule],
) -> NormalizedTimes:
    """Build the actual and scheduled intervals for one day."""
    actual = build_interval(on, time_in, time_out)

    scheduled = None
    if schedule is not None and not schedule.is_off:
        scheduled = build_interval(on, schedule.time_in, schedule.time_out)

    return NormalizedTimes(actual=actual, scheduled=scheduled)
