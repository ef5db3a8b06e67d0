from __future__ import annotations

from dataclasses import dataclass

from .absence_strategy import AbsenceStrategy, PaidHolidayAbsenceStrategy
from .base import DayContext, DayStrategy
from .degraded_strategy import DegradedStrategy
from .rest_day_strategy import RestDayStrategy
from .untracked_strategy import UntrackedStrategy
from .workday_strategy import WorkdayStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: pick the pay branch for a day; first match wins."""

    def for_day(self, ctx: DayContext) -> DayStrategy:
        if ctx.employment_type is not None and not ctx.employment_type.requires_time_tracking:
            return UntrackedStrategy()

        if not ctx.attendance.has_time_entries:
            if ctx.is_paid_holiday:
                return PaidHolidayAbsenceStrategy()
            return AbsenceStrategy()

        if ctx.employment_type is None:
            return DegradedStrategy()

        if ctx.schedule_info.is_rest_day:
            return RestDayStrategy()
        return WorkdayStrategy()
