from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.validators import to_number
from ..core.enums import DayType, HolidayMultiplierSource, HolidayType
from ..settings.model import AttendancePolicy


@dataclass(frozen=True)
class HolidayRange:
    """Holiday spanning ``start_date`` .. ``end_date`` (both inclusive)."""

    start_date: date
    end_date: date
    type: HolidayType = HolidayType.REGULAR
    multiplier: Optional[float] = None
    name: str = ""

    def contains(self, on: date) -> bool:
        return self.start_date <= on <= self.end_date

    @property
    def day_type(self) -> DayType:
        return DayType.HOLIDAY if self.type == HolidayType.REGULAR else DayType.SPECIAL


def find_holiday(holidays: Iterable[HolidayRange], on: date) -> Optional[HolidayRange]:
    """First holiday whose range contains ``on``."""
    for holiday in holidays:
        if holiday.contains(on):
            return holiday
    return None


def holiday_multiplier(holiday: Optional[HolidayRange], policy: AttendancePolicy) -> float:
    """Effective multiplier for ``holiday`` under the policy's multiplier source."""
    if holiday is None:
        return 0.0
    if policy.holiday_multiplier_source == HolidayMultiplierSource.POLICY or holiday.multiplier is None:
        return to_number(policy.multiplier_for(holiday.type))
    return to_number(holiday.multiplier)


def is_paid_holiday(holiday: Optional[HolidayRange], policy: AttendancePolicy) -> bool:
    return holiday is not None and holiday_multiplier(holiday, policy) > 0
