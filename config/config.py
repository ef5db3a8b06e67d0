import os


def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(name, default))


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, default))


def attendance_policy_from_env() -> dict:
    """Attendance policy values, each overridable through the environment."""
    return {
        "late_grace_period": _env_float("LATE_GRACE_PERIOD", 5),
        "late_deduction_per_minute": _env_float("LATE_DEDUCTION_PER_MINUTE", 1),
        "undertime_grace_period": _env_float("UNDERTIME_GRACE_PERIOD", 5),
        "undertime_deduction_per_minute": _env_float("UNDERTIME_DEDUCTION_PER_MINUTE", 1),
        "overtime_threshold": _env_float("OVERTIME_THRESHOLD", 0),
        "overtime_hourly_multiplier": _env_float("OVERTIME_HOURLY_MULTIPLIER", 1.25),
        "night_differential_multiplier": _env_float("NIGHT_DIFF_MULTIPLIER", 0.1),
        "night_differential_start_hour": _env_int("NIGHT_DIFF_START_HOUR", 22),
        "night_differential_end_hour": _env_int("NIGHT_DIFF_END_HOUR", 6),
        "regular_holiday_multiplier": _env_float("REGULAR_HOLIDAY_MULTIPLIER", 1.5),
        "special_holiday_multiplier": _env_float("SPECIAL_HOLIDAY_MULTIPLIER", 2.0),
        "count_early_time_in_as_overtime": bool(int(os.environ.get("COUNT_EARLY_TIME_IN_AS_OVERTIME", "0"))),
    }


def _weekly(time_in: str, time_out: str, *, saturday=None) -> list:
    days = [{"day_of_week": d, "time_in": time_in, "time_out": time_out} for d in range(1, 6)]
    sat_in, sat_out = saturday or (time_in, time_out)
    days.append({"day_of_week": 6, "time_in": sat_in, "time_out": sat_out})
    days.append({"day_of_week": 7, "is_off": True})
    return days


# Employment types shipped with a fresh install
DEFAULT_EMPLOYMENT_TYPES = [
    {"type": "regular", "hours_of_work": 8, "requires_time_tracking": True, "schedules": _weekly("08:00", "17:00")},
    {"type": "merchandiser", "hours_of_work": 5, "requires_time_tracking": False, "schedules": _weekly("09:00", "14:00")},
    {
        "type": "sales",
        "hours_of_work": 8,
        "requires_time_tracking": True,
        "schedules": _weekly("10:00", "18:00", saturday=("09:00", "15:00")),
    },
    {"type": "pharmacist", "hours_of_work": 8, "requires_time_tracking": False},
]
