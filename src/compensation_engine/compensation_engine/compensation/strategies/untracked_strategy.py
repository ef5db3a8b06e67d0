from __future__ import annotations

from ...core.enums import DayType
from .absence_strategy import AbsenceStrategy, PaidHolidayAbsenceStrategy
from .base import DayContext, DayOutcome, DayStrategy


class UntrackedStrategy(DayStrategy):
    """Employment types without time tracking: presence alone decides pay."""

    def compute(self, ctx: DayContext) -> DayOutcome:
        if not ctx.attendance.is_marked_present:
            if ctx.is_paid_holiday:
                return PaidHolidayAbsenceStrategy().compute(ctx)
            return AbsenceStrategy().compute(ctx)

        fallback = DayType.REGULAR if ctx.schedule_info.has_schedule else DayType.REST_DAY
        gross_pay = ctx.daily_rate * ctx.holiday_multiplier if ctx.is_paid_holiday else ctx.daily_rate
        record = ctx.new_record(day_type=ctx.day_type_or(fallback), gross_pay=gross_pay)
        return DayOutcome(record=record)
