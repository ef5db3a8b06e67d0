from __future__ import annotations

import logging
from types import ModuleType
from typing import Any, Iterable, Mapping, Optional

from ..common.validators import to_bool, to_number
from ..core import constants
from .model import AttendancePolicy, DailySchedule, EmploymentType
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def schedule_from_dict(data: Mapping[str, Any]) -> DailySchedule:
    return DailySchedule(
        time_in=str(data.get("time_in") or ""),
        time_out=str(data.get("time_out") or ""),
        is_off=bool(data.get("is_off", False)),
    )


def employment_type_from_dict(data: Mapping[str, Any]) -> EmploymentType:
    """Build an EmploymentType from the settings format.

    ``schedules`` is a list of ``{"day_of_week", "time_in", "time_out", "is_off"}``
    items; ``month_schedules`` maps "YYYY-MM" to {"YYYY-MM-DD": {...}}.
    """
    weekly: dict[int, DailySchedule] = {}
    for item in data.get("schedules") or []:
        day_of_week = int(to_number(item.get("day_of_week")))
        if not 1 <= day_of_week <= 7:
            logger.warning("Skipping schedule with day_of_week=%r for %r", item.get("day_of_week"), data.get("type"))
            continue
        weekly[day_of_week] = schedule_from_dict(item)

    monthly: dict[str, dict[str, DailySchedule]] = {}
    for year_month, days in (data.get("month_schedules") or {}).items():
        monthly[str(year_month)] = {str(day): schedule_from_dict(value) for day, value in (days or {}).items()}

    hours = to_number(data.get("hours_of_work", constants.DEFAULT_HOURS_OF_WORK))
    return EmploymentType(
        type=str(data.get("type") or "").strip().lower(),
        hours_of_work=hours or constants.DEFAULT_HOURS_OF_WORK,
        requires_time_tracking=to_bool(data.get("requires_time_tracking"), default=True),
        schedules=weekly,
        month_schedules=monthly,
    )


class ConfigSettingsRepository(SettingsRepository):
    """Settings collaborator backed by a settings module (see ``config``)."""

    def __init__(self, policy: Mapping[str, Any], employment_types: Iterable[Mapping[str, Any]] = ()):
        self._policy = AttendancePolicy.from_mapping(policy)
        types = [employment_type_from_dict(item) for item in employment_types]
        self._types = {t.type: t for t in types if t.type}

    @classmethod
    def from_settings(cls, settings: ModuleType) -> "ConfigSettingsRepository":
        policy = dict(getattr(settings, "ATTENDANCE_POLICY", {}))
        source = getattr(settings, "HOLIDAY_MULTIPLIER_SOURCE", None)
        if source:
            policy.setdefault("holiday_multiplier_source", source)
        return cls(policy, getattr(settings, "EMPLOYMENT_TYPES", ()))

    def load_policy(self) -> AttendancePolicy:
        return self._policy

    def get_employment_type(self, type_name: str) -> Optional[EmploymentType]:
        return self._types.get(str(type_name or "").strip().lower())

    def list_employment_types(self) -> list[EmploymentType]:
        return list(self._types.values())
