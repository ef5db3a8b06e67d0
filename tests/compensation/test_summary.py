import pytest

from compensation_engine.compensation.model import CompensationRecord
from compensation_engine.compensation.summary import records_frame, summarize_month
from compensation_engine.core.enums import DayType


def record(day, **kw):
    return CompensationRecord(employee_id="E-1", year=2025, month=1, day=day, daily_rate=800, **kw)


RECORDS = [
    record(7, hours_worked=8, gross_pay=800, net_pay=770, deductions=30, late_deduction=30),
    record(6, hours_worked=10, overtime_minutes=120, overtime_pay=250, gross_pay=1050, net_pay=1050),
    record(8, absence=True),
    record(1, day_type=DayType.HOLIDAY, gross_pay=800, net_pay=800),
    record(5, day_type=DayType.REST_DAY, hours_worked=4, gross_pay=800, net_pay=800, manual_override=True),
]


def test_frame_is_ordered_by_day():
    df = records_frame(RECORDS)

    assert list(df["day"]) == [1, 5, 6, 7, 8]
    assert df.loc[0, "day_type"] == "Holiday"


def test_month_totals_and_counts():
    summary = summarize_month(RECORDS, employee_id="E-1", year=2025, month=1)

    assert summary.days_recorded == 5
    assert summary.days_worked == 3
    assert summary.absences == 1
    assert summary.manual_overrides == 1
    assert summary.totals["gross_pay"] == pytest.approx(3450)
    assert summary.totals["net_pay"] == pytest.approx(3420)
    assert summary.totals["overtime_pay"] == pytest.approx(250)
    assert summary.totals["late_deduction"] == pytest.approx(30)


def test_breakdown_by_day_type():
    summary = summarize_month(RECORDS, employee_id="E-1", year=2025, month=1)
    by_type = {row["day_type"]: row for row in summary.by_day_type}

    assert by_type["Regular"]["days"] == 3
    assert by_type["Regular"]["gross_pay"] == pytest.approx(1850)
    assert by_type["Rest Day"]["net_pay"] == pytest.approx(800)


def test_other_months_are_ignored():
    february = CompensationRecord(employee_id="E-1", year=2025, month=2, day=3, gross_pay=800, net_pay=800)

    summary = summarize_month([february], employee_id="E-1", year=2025, month=1)

    assert summary.days_recorded == 0
    assert summary.totals["net_pay"] == 0
    assert summary.by_day_type == []
