from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..settings.model import AttendancePolicy
from .calculator.pay_metrics import hourly_rate_for
from .model import PayMetrics, TimeMetrics


@dataclass(frozen=True)
class DeductionLines:
    late: float
    undertime: float
    total: float


@dataclass(frozen=True)
class BreakdownDetails:
    hourly_rate: float
    overtime_hourly_rate: float
    night_differential_hourly_rate: float
    overtime_minutes: int
    night_differential_hours: float
    late_minutes: int
    undertime_minutes: int
    late_grace_period: float
    undertime_grace_period: float
    late_deduction_per_minute: float
    undertime_deduction_per_minute: float
    overtime_threshold: float


@dataclass(frozen=True)
class PaymentBreakdown:
    """Audit view of one day's pay: component lines plus the rates used."""

    base_pay: float
    overtime_pay: float
    night_differential_pay: float
    holiday_bonus: float
    gross_pay: float
    deductions: DeductionLines
    net_pay: float
    details: BreakdownDetails

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_payment_breakdown(
    time_metrics: TimeMetrics,
    pay_metrics: PayMetrics,
    policy: AttendancePolicy,
    daily_rate: float,
    hours_of_work: Optional[float] = None,
) -> PaymentBreakdown:
    hourly_rate = hourly_rate_for(daily_rate, hours_of_work)
    return PaymentBreakdown(
        base_pay=daily_rate,
        overtime_pay=pay_metrics.overtime_pay,
        night_differential_pay=pay_metrics.night_differential_pay,
        holiday_bonus=pay_metrics.holiday_bonus,
        gross_pay=pay_metrics.gross_pay,
        deductions=DeductionLines(
            late=pay_metrics.late_deduction,
            undertime=pay_metrics.undertime_deduction,
            total=pay_metrics.deductions,
        ),
        net_pay=pay_metrics.net_pay,
        details=BreakdownDetails(
            hourly_rate=hourly_rate,
            overtime_hourly_rate=hourly_rate * policy.overtime_hourly_multiplier,
            night_differential_hourly_rate=hourly_rate * policy.night_differential_multiplier,
            overtime_minutes=time_metrics.overtime_minutes,
            night_differential_hours=time_metrics.night_differential_hours,
            late_minutes=time_metrics.late_minutes,
            undertime_minutes=time_metrics.undertime_minutes,
            late_grace_period=policy.late_grace_period,
            undertime_grace_period=policy.undertime_grace_period,
            late_deduction_per_minute=policy.late_deduction_per_minute,
            undertime_deduction_per_minute=policy.undertime_deduction_per_minute,
            overtime_threshold=policy.overtime_threshold,
        ),
    )
