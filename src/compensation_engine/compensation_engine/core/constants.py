"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HOURS_OF_WORK = 8

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_UNDERTIME_GRACE_MINUTES = 5
DEFAULT_DEDUCTION_PER_MINUTE = 1.0

DEFAULT_OVERTIME_THRESHOLD_MINUTES = 0
DEFAULT_OVERTIME_MULTIPLIER = 1.25

DEFAULT_NIGHT_DIFF_MULTIPLIER = 0.1
DEFAULT_NIGHT_DIFF_START_HOUR = 22
DEFAULT_NIGHT_DIFF_END_HOUR = 6

DEFAULT_REGULAR_HOLIDAY_MULTIPLIER = 1.5
DEFAULT_SPECIAL_HOLIDAY_MULTIPLIER = 2.0

MINUTES_PER_HOUR = 60
