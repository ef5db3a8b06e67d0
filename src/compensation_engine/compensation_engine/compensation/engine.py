from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import RawAttendance
from ..employees.model import Employee
from ..holidays.model import HolidayRange, find_holiday
from ..settings.model import AttendancePolicy, EmploymentType, get_schedule_info
from .breakdown import PaymentBreakdown, build_payment_breakdown
from .model import CompensationRecord
from .strategies.base import DayContext, DayOutcome
from .strategies.factory import DayStrategyFactory

logger = logging.getLogger(__name__)


def compute_day(
    employee: Employee,
    attendance: RawAttendance,
    policy: AttendancePolicy,
    employment_type: Optional[EmploymentType],
    holidays: Iterable[HolidayRange] = (),
    *,
    prior: Optional[CompensationRecord] = None,
    factory: Optional[DayStrategyFactory] = None,
) -> DayOutcome:
    """Compute one employee-day.

    A prior record in manual-override mode is returned untouched; otherwise
    every derived field is recomputed from the given snapshot.
    """
    if prior is not None and prior.manual_override:
        logger.debug("Keeping manual record for %s on %s", employee.employee_id, attendance.date.isoformat())
        return DayOutcome(record=prior)

    ctx = DayContext(
        employee=employee,
        attendance=attendance,
        policy=policy,
        employment_type=employment_type,
        schedule_info=get_schedule_info(employment_type, attendance.date),
        holiday=find_holiday(holidays, attendance.date),
        prior=prior,
    )
    strategy = (factory or DayStrategyFactory()).for_day(ctx)
    outcome = strategy.compute(ctx)

    logger.debug(
        "Computed %s on %s: strategy=%s day_type=%s absence=%s gross=%.2f net=%.2f",
        employee.employee_id,
        attendance.date.isoformat(),
        type(strategy).__name__,
        outcome.record.day_type.value,
        outcome.record.absence,
        outcome.record.gross_pay,
        outcome.record.net_pay,
    )
    return outcome


def breakdown_for(
    outcome: DayOutcome,
    policy: AttendancePolicy,
    employment_type: Optional[EmploymentType],
) -> Optional[PaymentBreakdown]:
    """Payment breakdown for an outcome that went through the metrics pipeline."""
    if outcome.time_metrics is None or outcome.pay_metrics is None:
        return None
    return build_payment_breakdown(
        outcome.time_metrics,
        outcome.pay_metrics,
        policy,
        outcome.record.daily_rate,
        employment_type.standard_hours if employment_type else None,
    )
