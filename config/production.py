import os

from config.config import DEFAULT_EMPLOYMENT_TYPES, attendance_policy_from_env

ATTENDANCE_POLICY = attendance_policy_from_env()
EMPLOYMENT_TYPES = DEFAULT_EMPLOYMENT_TYPES

HOLIDAY_MULTIPLIER_SOURCE = os.getenv("HOLIDAY_MULTIPLIER_SOURCE", "range")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False
