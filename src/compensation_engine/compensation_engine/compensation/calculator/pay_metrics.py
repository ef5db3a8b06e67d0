from __future__ import annotations

from typing import Optional

from ...common.validators import to_number
from ...core import constants
from ...holidays.model import HolidayRange, holiday_multiplier
from ...settings.model import AttendancePolicy
from ..model import PayMetrics, TimeMetrics


def hourly_rate_for(daily_rate: float, hours_of_work: Optional[float]) -> float:
    hours = to_number(hours_of_work) or constants.DEFAULT_HOURS_OF_WORK
    return to_number(daily_rate) / hours


def deduction_for(minutes: float, grace_period: float, per_minute: float) -> float:
    """Grace period is inclusive: only minutes beyond it are charged."""
    chargeable = max(0.0, to_number(minutes) - to_number(grace_period))
    return chargeable * to_number(per_minute)


def overtime_pay_for(overtime_minutes: float, hourly_rate: float, policy: AttendancePolicy) -> float:
    return (to_number(overtime_minutes) / constants.MINUTES_PER_HOUR) * hourly_rate * to_number(policy.overtime_hourly_multiplier)


def night_differential_pay_for(hours: float, hourly_rate: float, policy: AttendancePolicy) -> float:
    return to_number(hours) * hourly_rate * to_number(policy.night_differential_multiplier)


def calculate_pay_metrics(
    metrics: TimeMetrics,
    policy: AttendancePolicy,
    daily_rate: float,
    holiday: Optional[HolidayRange] = None,
    hours_of_work: Optional[float] = None,
) -> PayMetrics:
    """Money amounts for a worked day with a resolvable schedule."""
    daily_rate = to_number(daily_rate)
    hourly_rate = hourly_rate_for(daily_rate, hours_of_work)

    late_deduction = deduction_for(metrics.late_minutes, policy.late_grace_period, policy.late_deduction_per_minute)
    undertime_deduction = deduction_for(
        metrics.undertime_minutes, policy.undertime_grace_period, policy.undertime_deduction_per_minute
    )
    overtime_pay = overtime_pay_for(metrics.overtime_minutes, hourly_rate, policy)
    night_pay = night_differential_pay_for(metrics.night_differential_hours, hourly_rate, policy)
    holiday_bonus = daily_rate * holiday_multiplier(holiday, policy) if holiday is not None else 0.0

    deductions = late_deduction + undertime_deduction
    gross_pay = daily_rate + overtime_pay + night_pay + holiday_bonus
    return PayMetrics(
        hourly_rate=hourly_rate,
        late_deduction=late_deduction,
        undertime_deduction=undertime_deduction,
        overtime_pay=overtime_pay,
        night_differential_pay=night_pay,
        holiday_bonus=holiday_bonus,
        gross_pay=gross_pay,
        deductions=deductions,
        net_pay=gross_pay - deductions,
    )
