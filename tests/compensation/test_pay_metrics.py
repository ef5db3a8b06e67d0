from datetime import date

import pytest

from compensation_engine.compensation.calculator.pay_metrics import calculate_pay_metrics, deduction_for, hourly_rate_for
from compensation_engine.compensation.model import TimeMetrics
from compensation_engine.core.enums import HolidayMultiplierSource, HolidayType
from compensation_engine.holidays.model import HolidayRange
from compensation_engine.settings.model import AttendancePolicy

POLICY = AttendancePolicy(
    late_grace_period=5,
    late_deduction_per_minute=2,
    undertime_grace_period=5,
    undertime_deduction_per_minute=2,
    overtime_threshold=30,
    overtime_hourly_multiplier=1.25,
    night_differential_multiplier=0.1,
)
NEW_YEAR = HolidayRange(date(2025, 1, 1), date(2025, 1, 1), HolidayType.REGULAR, multiplier=1.0)


def test_overtime_pay_and_totals():
    pay = calculate_pay_metrics(TimeMetrics(overtime_minutes=120), POLICY, 800, hours_of_work=8)

    assert pay.hourly_rate == 100
    assert pay.overtime_pay == pytest.approx(250)
    assert pay.gross_pay == pytest.approx(1050)
    assert pay.deductions == 0
    assert pay.net_pay == pytest.approx(1050)


def test_late_deduction_after_grace_period():
    pay = calculate_pay_metrics(TimeMetrics(late_minutes=20), POLICY, 800, hours_of_work=8)

    assert pay.late_deduction == pytest.approx(30)
    assert pay.deductions == pytest.approx(30)
    assert pay.net_pay == pytest.approx(770)


def test_grace_period_is_inclusive():
    assert deduction_for(5, 5, 2) == 0
    assert deduction_for(6, 5, 2) == 2


def test_late_deduction_grows_linearly_past_grace():
    values = [deduction_for(minutes, 5, 2) for minutes in range(6, 16)]

    assert all(b - a == pytest.approx(2) for a, b in zip(values, values[1:]))


def test_undertime_deduction():
    pay = calculate_pay_metrics(TimeMetrics(undertime_minutes=30), POLICY, 800, hours_of_work=8)

    assert pay.undertime_deduction == pytest.approx(50)


def test_night_differential_pay():
    pay = calculate_pay_metrics(TimeMetrics(night_differential_hours=6), POLICY, 800, hours_of_work=8)

    assert pay.night_differential_pay == pytest.approx(60)
    assert pay.gross_pay == pytest.approx(860)


def test_holiday_bonus_uses_holiday_multiplier():
    pay = calculate_pay_metrics(TimeMetrics(), POLICY, 800, holiday=NEW_YEAR, hours_of_work=8)

    assert pay.holiday_bonus == pytest.approx(800)
    assert pay.gross_pay == pytest.approx(1600)


def test_holiday_bonus_from_policy_when_configured():
    policy = AttendancePolicy(holiday_multiplier_source=HolidayMultiplierSource.POLICY, regular_holiday_multiplier=1.5)

    pay = calculate_pay_metrics(TimeMetrics(), policy, 800, holiday=NEW_YEAR, hours_of_work=8)

    assert pay.holiday_bonus == pytest.approx(1200)


def test_hours_of_work_defaults_to_eight():
    assert hourly_rate_for(800, None) == 100
    assert hourly_rate_for(800, 0) == 100
    assert hourly_rate_for(500, 5) == 100


def test_invalid_numbers_are_treated_as_zero():
    pay = calculate_pay_metrics(TimeMetrics(late_minutes=20), POLICY, "not-a-rate", hours_of_work=8)

    assert pay.gross_pay == 0
    assert pay.late_deduction == pytest.approx(30)
