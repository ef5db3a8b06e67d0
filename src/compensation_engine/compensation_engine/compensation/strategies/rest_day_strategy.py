from __future__ import annotations

from ...attendance.normalizer import build_interval
from ...common.datetime_utils import round_half_up
from ...core import constants
from ...core.enums import DayType
from ..calculator.pay_metrics import hourly_rate_for, overtime_pay_for
from ..calculator.time_metrics import excess_overtime_minutes
from ..model import PayMetrics, TimeMetrics
from .base import DayContext, DayOutcome, DayStrategy


class RestDayStrategy(DayStrategy):
    """Worked on a rest day (or a day without a schedule entry).

    Pays the daily rate (times the holiday multiplier on a paid holiday)
    plus overtime for whole hours beyond standard hours. No late or
    undertime deductions.
    """

    def compute(self, ctx: DayContext) -> DayOutcome:
        interval = build_interval(ctx.on, ctx.attendance.time_in, ctx.attendance.time_out)
        worked_minutes = interval.minutes if interval is not None else 0
        hours_worked = worked_minutes / constants.MINUTES_PER_HOUR

        hourly_rate = hourly_rate_for(ctx.daily_rate, ctx.hours_of_work)
        overtime_minutes = excess_overtime_minutes(worked_minutes, ctx.hours_of_work or constants.DEFAULT_HOURS_OF_WORK)
        overtime_pay = overtime_pay_for(overtime_minutes, hourly_rate, ctx.policy)

        if ctx.is_paid_holiday:
            present_pay = ctx.daily_rate * ctx.holiday_multiplier
            holiday_bonus = present_pay
        else:
            present_pay = ctx.daily_rate
            holiday_bonus = 0.0
        gross_pay = present_pay + overtime_pay

        time_metrics = TimeMetrics(overtime_minutes=overtime_minutes, hours_worked=hours_worked)
        pay_metrics = PayMetrics(
            hourly_rate=hourly_rate,
            overtime_pay=overtime_pay,
            holiday_bonus=holiday_bonus,
            gross_pay=gross_pay,
            net_pay=gross_pay,
        )
        record = ctx.new_record(
            day_type=ctx.day_type_or(DayType.REST_DAY),
            hours_worked=round_half_up(hours_worked),
            overtime_minutes=overtime_minutes,
            overtime_pay=overtime_pay,
            holiday_bonus=holiday_bonus,
            gross_pay=gross_pay,
        )
        return DayOutcome(record=record, time_metrics=time_metrics, pay_metrics=pay_metrics)
