from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import minutes_between


@dataclass(frozen=True)
class RawAttendance:
    """Raw attendance for one employee-day as entered on the timesheet.

    ``time_in``/``time_out`` are "HH:MM" strings; for employment types that
    do not track time they may hold a presence marker instead.
    """

    date: date
    time_in: Optional[str] = None
    time_out: Optional[str] = None

    @property
    def has_time_entries(self) -> bool:
        return bool((self.time_in or "").strip()) and bool((self.time_out or "").strip())

    @property
    def is_marked_present(self) -> bool:
        """Any non-blank entry ("present", a clock value...) counts as presence."""
        return bool((self.time_in or "").strip()) or bool((self.time_out or "").strip())


@dataclass(frozen=True)
class TimeInterval:
    time_in: datetime
    time_out: datetime

    @property
    def minutes(self) -> int:
        return minutes_between(self.time_out, self.time_in)


@dataclass(frozen=True)
class NormalizedTimes:
    """Actual and scheduled intervals for a day.

    ``scheduled`` is None when the day is off or the schedule is unresolved;
    ``actual`` is None when either actual time is missing or malformed.
    """

    actual: Optional[TimeInterval]
    scheduled: Optional[TimeInterval]
