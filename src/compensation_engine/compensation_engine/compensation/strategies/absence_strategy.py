from __future__ import annotations

from ...core.enums import DayType
from .base import DayContext, DayOutcome, DayStrategy


class PaidHolidayAbsenceStrategy(DayStrategy):
    """No attendance on a paid holiday: the daily rate, no bonus."""

    def compute(self, ctx: DayContext) -> DayOutcome:
        record = ctx.new_record(
            day_type=ctx.day_type_or(DayType.HOLIDAY),
            gross_pay=ctx.daily_rate,
            holiday_bonus=0.0,
            absence=False,
        )
        return DayOutcome(record=record)


class AbsenceStrategy(DayStrategy):
    """No attendance on an ordinary day.

    A scheduled workday is an absence with no pay; any other day keeps the
    daily rate.
    """

    def compute(self, ctx: DayContext) -> DayOutcome:
        if ctx.schedule_info.has_schedule:
            record = ctx.new_record(
                day_type=ctx.day_type_or(DayType.REGULAR),
                gross_pay=0.0,
                absence=True,
            )
        else:
            record = ctx.new_record(
                day_type=ctx.day_type_or(DayType.REST_DAY),
                gross_pay=ctx.daily_rate,
                absence=False,
            )
        return DayOutcome(record=record)
