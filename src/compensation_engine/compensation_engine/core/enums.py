from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Classification selecting which pay-formula branch applies to a day."""

    REGULAR = "Regular"
    HOLIDAY = "Holiday"
    SPECIAL = "Special"
    REST_DAY = "Rest Day"


class HolidayType(str, Enum):
    REGULAR = "Regular"
    SPECIAL = "Special"


class LeaveType(str, Enum):
    VACATION = "Vacation"
    SICK = "Sick"
    UNPAID = "Unpaid"
    NONE = "None"


class HolidayMultiplierSource(str, Enum):
    """Where the holiday multiplier is read from.

    RANGE: the holiday entry's own multiplier (policy value as fallback).
    POLICY: always the policy's regular/special holiday multiplier.
    """

    RANGE = "range"
    POLICY = "policy"
