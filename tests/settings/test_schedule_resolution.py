from datetime import date

import pytest

from compensation_engine.core.enums import HolidayMultiplierSource, HolidayType
from compensation_engine.settings.config_repository import ConfigSettingsRepository, employment_type_from_dict
from compensation_engine.settings.model import (
    AttendancePolicy,
    DailySchedule,
    EmploymentType,
    get_schedule_for_date,
    get_schedule_info,
)

SALES = employment_type_from_dict(
    {
        "type": "Sales",
        "hours_of_work": 8,
        "schedules": [
            {"day_of_week": 1, "time_in": "08:00", "time_out": "17:00"},
            {"day_of_week": 6, "time_in": "09:00", "time_out": "13:30"},
            {"day_of_week": 7, "is_off": True},
            {"day_of_week": 9, "time_in": "08:00", "time_out": "17:00"},
        ],
        "month_schedules": {
            "2025-01": {"2025-01-06": {"time_in": "13:00", "time_out": "22:00"}},
        },
    }
)


def test_month_schedule_takes_precedence():
    schedule = get_schedule_for_date(SALES, date(2025, 1, 6))

    assert schedule == DailySchedule("13:00", "22:00")


def test_weekly_pattern_is_the_fallback():
    assert get_schedule_for_date(SALES, date(2025, 1, 13)) == DailySchedule("08:00", "17:00")
    assert get_schedule_for_date(SALES, date(2025, 1, 7)) is None


def test_schedule_info_formats_shift():
    info = get_schedule_info(SALES, date(2025, 1, 11))

    assert info.has_schedule is True
    assert info.is_rest_day is False
    assert info.formatted == "9:00AM - 1:30PM"


def test_off_or_missing_day_is_rest_day():
    sunday = get_schedule_info(SALES, date(2025, 1, 12))
    tuesday = get_schedule_info(SALES, date(2025, 1, 7))

    assert (sunday.has_schedule, sunday.is_rest_day, sunday.formatted) == (False, True, None)
    assert tuesday.is_rest_day is True


def test_unknown_employment_type_has_no_schedule():
    info = get_schedule_info(None, date(2025, 1, 6))

    assert info.has_schedule is False
    assert info.is_rest_day is False


def test_invalid_weekday_entries_are_skipped():
    assert set(SALES.schedules) == {1, 6, 7}
    assert SALES.type == "sales"


def test_standard_hours_falls_back_to_eight():
    assert EmploymentType(type="x", hours_of_work=0).standard_hours == 8


def test_policy_from_loose_mapping():
    policy = AttendancePolicy.from_mapping(
        {
            "late_grace_period": "10",
            "late_deduction_per_minute": "abc",
            "night_differential_start_hour": 24,
            "count_early_time_in_as_overtime": "yes",
            "holiday_multiplier_source": "policy",
        }
    )

    assert policy.late_grace_period == 10
    assert policy.late_deduction_per_minute == 0
    assert policy.night_differential_start_hour == 0
    assert policy.count_early_time_in_as_overtime is True
    assert policy.holiday_multiplier_source == HolidayMultiplierSource.POLICY
    assert policy.overtime_hourly_multiplier == 1.25
    assert policy.multiplier_for(HolidayType.SPECIAL) == 2.0


def test_unknown_multiplier_source_uses_default():
    policy = AttendancePolicy.from_mapping({"holiday_multiplier_source": "weekly"})

    assert policy.holiday_multiplier_source == HolidayMultiplierSource.RANGE


def test_config_repository_lookup_is_case_insensitive():
    repo = ConfigSettingsRepository(
        {"overtime_threshold": 30},
        [{"type": "Regular", "schedules": []}, {"type": "", "schedules": []}],
    )

    assert repo.load_policy().overtime_threshold == 30
    assert repo.get_employment_type(" REGULAR ").type == "regular"
    assert repo.get_employment_type("contractor") is None
    assert len(repo.list_employment_types()) == 1


def test_config_repository_from_settings_module():
    import config.testing as settings

    repo = ConfigSettingsRepository.from_settings(settings)

    assert repo.load_policy().late_deduction_per_minute == 2
    assert repo.get_employment_type("merchandiser").requires_time_tracking is False
    assert repo.get_employment_type("regular").schedules[7].is_off is True


@pytest.mark.parametrize("env, expected", [("production", "config.production"), ("test", "config.testing"), ("", "config.development")])
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    from config import get_settings_module

    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


@pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("no", False), (False, False), ("True", True), (None, True)])
def test_requires_time_tracking_parses_string_booleans(raw, expected):
    employment_type = employment_type_from_dict({"type": "merchandiser", "requires_time_tracking": raw})

    assert employment_type.requires_time_tracking is expected
