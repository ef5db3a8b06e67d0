from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from ..common.validators import to_bool, to_number
from ..core.enums import DayType, LeaveType


@dataclass(frozen=True)
class TimeMetrics:
    """Derived, never persisted. ``hours_worked`` is unrounded here."""

    late_minutes: int = 0
    undertime_minutes: int = 0
    overtime_minutes: int = 0
    hours_worked: float = 0.0
    night_differential_hours: float = 0.0


@dataclass(frozen=True)
class PayMetrics:
    hourly_rate: float = 0.0
    late_deduction: float = 0.0
    undertime_deduction: float = 0.0
    overtime_pay: float = 0.0
    night_differential_pay: float = 0.0
    holiday_bonus: float = 0.0
    gross_pay: float = 0.0
    deductions: float = 0.0
    net_pay: float = 0.0


@dataclass(frozen=True)
class CompensationRecord:
    """Persisted payroll line for one employee-day."""

    employee_id: str
    year: int
    month: int
    day: int
    day_type: DayType = DayType.REGULAR
    daily_rate: float = 0.0
    hours_worked: float = 0.0
    late_minutes: float = 0.0
    undertime_minutes: float = 0.0
    overtime_minutes: float = 0.0
    night_differential_hours: float = 0.0
    late_deduction: float = 0.0
    undertime_deduction: float = 0.0
    overtime_pay: float = 0.0
    night_differential_pay: float = 0.0
    holiday_bonus: float = 0.0
    leave_type: LeaveType = LeaveType.NONE
    leave_pay: float = 0.0
    gross_pay: float = 0.0
    deductions: float = 0.0
    net_pay: float = 0.0
    manual_override: bool = False
    absence: bool = False
    notes: str = ""

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["day_type"] = self.day_type.value
        data["leave_type"] = self.leave_type.value
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CompensationRecord":
        """Rebuild a stored record; missing or invalid numbers become 0."""
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            if f.name == "employee_id":
                values[f.name] = str(raw)
            elif f.name in {"year", "month", "day"}:
                values[f.name] = int(to_number(raw))
            elif f.name == "day_type":
                values[f.name] = _enum_or_default(DayType, raw, DayType.REGULAR)
            elif f.name == "leave_type":
                values[f.name] = _enum_or_default(LeaveType, raw, LeaveType.NONE)
            elif f.name in {"manual_override", "absence"}:
                values[f.name] = to_bool(raw)
            elif f.name == "notes":
                values[f.name] = "" if raw is None else str(raw)
            else:
                values[f.name] = to_number(raw)
        return cls(**values)


def _enum_or_default(enum_cls, raw, default):
    try:
        return enum_cls(raw)
    except ValueError:
        return default
