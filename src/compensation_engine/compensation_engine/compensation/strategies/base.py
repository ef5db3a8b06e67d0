from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional

from ...attendance.model import RawAttendance
from ...common.validators import to_number
from ...core.enums import DayType
from ...employees.model import Employee
from ...holidays.model import HolidayRange, holiday_multiplier, is_paid_holiday
from ...settings.model import AttendancePolicy, EmploymentType, ScheduleInfo
from ..model import CompensationRecord, PayMetrics, TimeMetrics


@dataclass(frozen=True)
class DayContext:
    """Everything one day's calculation may read; one consistent snapshot."""

    employee: Employee
    attendance: RawAttendance
    policy: AttendancePolicy
    employment_type: Optional[EmploymentType]
    schedule_info: ScheduleInfo
    holiday: Optional[HolidayRange] = None
    prior: Optional[CompensationRecord] = None

    @property
    def on(self) -> date:
        return self.attendance.date

    @property
    def daily_rate(self) -> float:
        return to_number(self.employee.daily_rate)

    @property
    def hours_of_work(self) -> Optional[float]:
        return self.employment_type.standard_hours if self.employment_type else None

    @property
    def holiday_multiplier(self) -> float:
        return holiday_multiplier(self.holiday, self.policy)

    @property
    def is_paid_holiday(self) -> bool:
        return is_paid_holiday(self.holiday, self.policy)

    def day_type_or(self, fallback: DayType) -> DayType:
        return self.holiday.day_type if self.holiday is not None else fallback

    def new_record(self, **values: Any) -> CompensationRecord:
        """Fresh auto-mode record; leave fields and notes carry over from the prior one."""
        base = CompensationRecord(
            employee_id=str(self.employee.employee_id),
            year=self.on.year,
            month=self.on.month,
            day=self.on.day,
            daily_rate=self.daily_rate,
        )
        if self.prior is not None:
            base = replace(
                base,
                leave_type=self.prior.leave_type,
                leave_pay=to_number(self.prior.leave_pay),
                notes=self.prior.notes,
            )

        record = replace(base, **values)
        return replace(record, net_pay=record.gross_pay - record.deductions + record.leave_pay)


@dataclass(frozen=True)
class DayOutcome:
    record: CompensationRecord
    time_metrics: Optional[TimeMetrics] = None
    pay_metrics: Optional[PayMetrics] = None


class DayStrategy(ABC):
    """Strategy Pattern: one pay-formula branch of the day-type state machine."""

    @abstractmethod
    def compute(self, ctx: DayContext) -> DayOutcome:
        raise NotImplementedError
