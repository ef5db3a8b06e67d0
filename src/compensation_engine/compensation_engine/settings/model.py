from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_clock_12h, parse_clock
from ..common.validators import to_bool, to_number
from ..core import constants
from ..core.enums import HolidayMultiplierSource, HolidayType


@dataclass(frozen=True)
class DailySchedule:
    """Scheduled shift for one day: clock strings plus the off-day flag."""

    time_in: str = ""
    time_out: str = ""
    is_off: bool = False

    @property
    def is_workday(self) -> bool:
        return not self.is_off and parse_clock(self.time_in) is not None and parse_clock(self.time_out) is not None


@dataclass(frozen=True)
class EmploymentType:
    """Employment type with its weekly pattern and month-specific overrides.

    ``schedules`` is keyed by ISO day of week (1=Monday .. 7=Sunday).
    ``month_schedules`` is keyed by "YYYY-MM" then "YYYY-MM-DD".
    """

    type: str
    hours_of_work: float = constants.DEFAULT_HOURS_OF_WORK
    requires_time_tracking: bool = True
    schedules: Mapping[int, DailySchedule] = field(default_factory=dict)
    month_schedules: Mapping[str, Mapping[str, DailySchedule]] = field(default_factory=dict)

    @property
    def standard_hours(self) -> float:
        hours = to_number(self.hours_of_work)
        return hours if hours > 0 else float(constants.DEFAULT_HOURS_OF_WORK)


def get_schedule_for_date(employment_type: Optional[EmploymentType], on: date) -> Optional[DailySchedule]:
    """Month-specific schedule first, then the weekly pattern, else None."""
    if employment_type is None:
        return None

    year_month = on.strftime("%Y-%m")
    month = employment_type.month_schedules.get(year_month) or {}
    specific = month.get(on.isoformat())
    if specific is not None:
        return specific

    return employment_type.schedules.get(on.isoweekday())


@dataclass(frozen=True)
class ScheduleInfo:
    schedule: Optional[DailySchedule]
    has_schedule: bool
    is_rest_day: bool
    formatted: Optional[str] = None


def get_schedule_info(employment_type: Optional[EmploymentType], on: date) -> ScheduleInfo:
    if employment_type is None:
        return ScheduleInfo(schedule=None, has_schedule=False, is_rest_day=False)

    schedule = get_schedule_for_date(employment_type, on)
    has_schedule = schedule is not None and schedule.is_workday
    formatted = None
    if has_schedule:
        formatted = f"{format_clock_12h(parse_clock(schedule.time_in))} - {format_clock_12h(parse_clock(schedule.time_out))}"

    return ScheduleInfo(
        schedule=schedule,
        has_schedule=has_schedule,
        is_rest_day=not has_schedule,
        formatted=formatted,
    )


@dataclass(frozen=True)
class AttendancePolicy:
    """Company-wide attendance and compensation policy for a pay period."""

    late_grace_period: float = constants.DEFAULT_LATE_GRACE_MINUTES
    late_deduction_per_minute: float = constants.DEFAULT_DEDUCTION_PER_MINUTE
    undertime_grace_period: float = constants.DEFAULT_UNDERTIME_GRACE_MINUTES
    undertime_deduction_per_minute: float = constants.DEFAULT_DEDUCTION_PER_MINUTE
    overtime_threshold: float = constants.DEFAULT_OVERTIME_THRESHOLD_MINUTES
    overtime_hourly_multiplier: float = constants.DEFAULT_OVERTIME_MULTIPLIER
    night_differential_multiplier: float = constants.DEFAULT_NIGHT_DIFF_MULTIPLIER
    night_differential_start_hour: int = constants.DEFAULT_NIGHT_DIFF_START_HOUR
    night_differential_end_hour: int = constants.DEFAULT_NIGHT_DIFF_END_HOUR
    regular_holiday_multiplier: float = constants.DEFAULT_REGULAR_HOLIDAY_MULTIPLIER
    special_holiday_multiplier: float = constants.DEFAULT_SPECIAL_HOLIDAY_MULTIPLIER
    count_early_time_in_as_overtime: bool = False
    holiday_multiplier_source: HolidayMultiplierSource = HolidayMultiplierSource.RANGE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttendancePolicy":
        """Build a policy from loosely typed settings; bad numbers become 0."""
        defaults = cls()
        numeric = {
            "late_grace_period",
            "late_deduction_per_minute",
            "undertime_grace_period",
            "undertime_deduction_per_minute",
            "overtime_threshold",
            "overtime_hourly_multiplier",
            "night_differential_multiplier",
            "regular_holiday_multiplier",
            "special_holiday_multiplier",
        }
        values: dict[str, Any] = {}
        for name in numeric:
            values[name] = to_number(data[name]) if name in data else getattr(defaults, name)
        for name in ("night_differential_start_hour", "night_differential_end_hour"):
            values[name] = int(to_number(data[name])) % 24 if name in data else getattr(defaults, name)

        values["count_early_time_in_as_overtime"] = to_bool(
            data.get("count_early_time_in_as_overtime"), default=defaults.count_early_time_in_as_overtime
        )

        source = data.get("holiday_multiplier_source", defaults.holiday_multiplier_source)
        try:
            values["holiday_multiplier_source"] = HolidayMultiplierSource(source)
        except ValueError:
            values["holiday_multiplier_source"] = defaults.holiday_multiplier_source
        return cls(**values)

    def multiplier_for(self, holiday_type: HolidayType) -> float:
        if holiday_type == HolidayType.SPECIAL:
            return self.special_holiday_multiplier
        return self.regular_holiday_multiplier
