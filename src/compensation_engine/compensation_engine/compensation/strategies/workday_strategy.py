from __future__ import annotations

from ...attendance.normalizer import normalize_times
from ...common.datetime_utils import round_half_up
from ...core.enums import DayType
from ..calculator.pay_metrics import calculate_pay_metrics
from ..calculator.time_metrics import calculate_time_metrics
from .base import DayContext, DayOutcome, DayStrategy
from .degraded_strategy import DegradedStrategy


class WorkdayStrategy(DayStrategy):
    """Scheduled workday with both time entries: the full metrics pipeline."""

    def compute(self, ctx: DayContext) -> DayOutcome:
        times = normalize_times(
            ctx.on,
            ctx.attendance.time_in,
            ctx.attendance.time_out,
            ctx.schedule_info.schedule,
        )
        if times.actual is None or times.scheduled is None:
            return DegradedStrategy().compute(ctx)

        time_metrics = calculate_time_metrics(times, ctx.policy, ctx.hours_of_work)
        pay_metrics = calculate_pay_metrics(
            time_metrics,
            ctx.policy,
            ctx.daily_rate,
            holiday=ctx.holiday,
            hours_of_work=ctx.hours_of_work,
        )

        record = ctx.new_record(
            day_type=ctx.day_type_or(DayType.REGULAR),
            hours_worked=round_half_up(time_metrics.hours_worked),
            late_minutes=time_metrics.late_minutes,
            undertime_minutes=time_metrics.undertime_minutes,
            overtime_minutes=time_metrics.overtime_minutes,
            night_differential_hours=time_metrics.night_differential_hours,
            late_deduction=pay_metrics.late_deduction,
            undertime_deduction=pay_metrics.undertime_deduction,
            overtime_pay=pay_metrics.overtime_pay,
            night_differential_pay=pay_metrics.night_differential_pay,
            holiday_bonus=pay_metrics.holiday_bonus,
            gross_pay=pay_metrics.gross_pay,
            deductions=pay_metrics.deductions,
        )
        return DayOutcome(record=record, time_metrics=time_metrics, pay_metrics=pay_metrics)
