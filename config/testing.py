from config.config import DEFAULT_EMPLOYMENT_TYPES

# Fixed values so tests do not depend on the environment
ATTENDANCE_POLICY = {
    "late_grace_period": 5,
    "late_deduction_per_minute": 2,
    "undertime_grace_period": 5,
    "undertime_deduction_per_minute": 2,
    "overtime_threshold": 30,
    "overtime_hourly_multiplier": 1.25,
    "night_differential_multiplier": 0.1,
    "night_differential_start_hour": 22,
    "night_differential_end_hour": 6,
    "regular_holiday_multiplier": 1.5,
    "special_holiday_multiplier": 2.0,
    "count_early_time_in_as_overtime": False,
}
EMPLOYMENT_TYPES = DEFAULT_EMPLOYMENT_TYPES

HOLIDAY_MULTIPLIER_SOURCE = "range"

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
