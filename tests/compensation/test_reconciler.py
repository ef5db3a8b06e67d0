from dataclasses import replace

import pytest

from compensation_engine.compensation.model import CompensationRecord
from compensation_engine.compensation.override.edits import (
    EDIT_TYPES,
    LateMinutesEdit,
    LeaveTypeEdit,
    OvertimeMinutesEdit,
    OvertimePayEdit,
    edit_for,
)
from compensation_engine.compensation.override.reconciler import (
    OverrideContext,
    apply_edit,
    clear_and_override,
    reconcile,
    set_manual_override,
)
from compensation_engine.core.enums import LeaveType
from compensation_engine.settings.model import AttendancePolicy

POLICY = AttendancePolicy(
    late_grace_period=5,
    late_deduction_per_minute=2,
    undertime_grace_period=5,
    undertime_deduction_per_minute=2,
    overtime_hourly_multiplier=1.25,
    night_differential_multiplier=0.1,
)
CTX = OverrideContext(policy=POLICY, hours_of_work=8)

# 08:00-19:00 on an 08:00-17:00 schedule at 800/day
COMPUTED = CompensationRecord(
    employee_id="E-1",
    year=2025,
    month=1,
    day=6,
    daily_rate=800,
    hours_worked=11,
    overtime_minutes=120,
    overtime_pay=250,
    gross_pay=1050,
    net_pay=1050,
)
MANUAL = replace(COMPUTED, manual_override=True)


def test_clear_overtime_pay_switches_to_manual_and_recomputes_totals():
    record = clear_and_override(COMPUTED, OvertimePayEdit, CTX)

    assert record.overtime_pay == 0
    assert record.gross_pay == pytest.approx(800)
    assert record.net_pay == pytest.approx(800)
    assert record.manual_override is True
    assert record.overtime_minutes == 120


def test_clear_overtime_minutes_then_restore_round_trips():
    cleared = clear_and_override(COMPUTED, OvertimeMinutesEdit, CTX)
    restored = apply_edit(cleared, OvertimeMinutesEdit(120), CTX)

    assert cleared.overtime_pay == 0
    assert restored.overtime_pay == pytest.approx(COMPUTED.overtime_pay)
    assert restored.gross_pay == pytest.approx(COMPUTED.gross_pay)
    assert restored.net_pay == pytest.approx(COMPUTED.net_pay)


def test_computed_field_edits_are_ignored_outside_manual_mode():
    assert apply_edit(COMPUTED, OvertimeMinutesEdit(180), CTX) is COMPUTED


def test_overtime_minutes_edit_pays_whole_hours_only():
    record = apply_edit(MANUAL, OvertimeMinutesEdit(89), CTX)

    assert record.overtime_minutes == 89
    assert record.overtime_pay == pytest.approx(125)
    assert record.gross_pay == pytest.approx(925)
    assert record.net_pay == pytest.approx(925)


def test_late_minutes_edit_flows_into_deductions_and_net():
    record = apply_edit(MANUAL, LateMinutesEdit(20), CTX)

    assert record.late_deduction == pytest.approx(30)
    assert record.deductions == pytest.approx(30)
    assert record.net_pay == pytest.approx(1020)
    assert record.gross_pay == pytest.approx(1050)


def test_undertime_minutes_edit_keeps_late_line():
    record = reconcile(MANUAL, "late_minutes", 20, CTX)
    record = reconcile(record, "undertime_minutes", 15, CTX)

    assert record.undertime_deduction == pytest.approx(20)
    assert record.deductions == pytest.approx(50)
    assert record.net_pay == pytest.approx(1000)


def test_night_differential_hours_edit():
    record = reconcile(MANUAL, "night_differential_hours", 2, CTX)

    assert record.night_differential_pay == pytest.approx(20)
    assert record.gross_pay == pytest.approx(1070)
    assert record.net_pay == pytest.approx(1070)


def test_holiday_bonus_edit_adjusts_gross():
    record = reconcile(MANUAL, "holiday_bonus", 400, CTX)

    assert record.gross_pay == pytest.approx(1450)
    assert record.net_pay == pytest.approx(1450)


def test_net_pay_edit_back_computes_gross_with_fixed_deductions():
    record = reconcile(MANUAL, "late_minutes", 20, CTX)
    record = reconcile(record, "net_pay", 500, CTX)

    assert record.net_pay == 500
    assert record.deductions == pytest.approx(30)
    assert record.gross_pay == pytest.approx(530)


def test_gross_pay_edit_recomputes_net():
    record = reconcile(MANUAL, "gross_pay", 900, CTX)

    assert record.net_pay == pytest.approx(900)


def test_net_pay_is_clamped_at_zero():
    record = reconcile(MANUAL, "late_minutes", 155, CTX)
    record = reconcile(record, "gross_pay", 100, CTX)

    assert record.deductions == pytest.approx(300)
    assert record.net_pay == 0


def test_leave_pay_edit_allowed_in_auto_mode():
    record = reconcile(COMPUTED, "leave_pay", 150.7, CTX)

    assert record.leave_pay == 150
    assert record.net_pay == pytest.approx(1200)
    assert record.manual_override is False


def test_invalid_numeric_input_is_coerced_to_zero():
    record = reconcile(MANUAL, "overtime_pay", "abc", CTX)

    assert record.overtime_pay == 0
    assert record.gross_pay == pytest.approx(800)


def test_negative_input_is_clamped():
    record = reconcile(MANUAL, "overtime_pay", -50, CTX)

    assert record.overtime_pay == 0


def test_unknown_field_leaves_record_unchanged():
    assert reconcile(MANUAL, "employee_id", "X", CTX) is MANUAL
    assert clear_and_override(MANUAL, "day_type", CTX) is MANUAL


def test_clear_by_field_name():
    record = clear_and_override(COMPUTED, "gross_pay", CTX)

    assert record.gross_pay == 0
    assert record.net_pay == 0
    assert record.manual_override is True


def test_clear_net_pay_derives_gross():
    record = clear_and_override(replace(COMPUTED, deductions=30, late_deduction=30, net_pay=1020), "net_pay", CTX)

    assert record.net_pay == 0
    assert record.gross_pay == pytest.approx(30)


def test_deductions_edit_leaves_individual_lines():
    record = reconcile(MANUAL, "late_minutes", 20, CTX)
    record = reconcile(record, "deductions", 0, CTX)

    assert record.late_deduction == pytest.approx(30)
    assert record.deductions == 0
    assert record.net_pay == pytest.approx(1050)


def test_text_edits():
    record = reconcile(COMPUTED, "notes", "half day", CTX)
    record = apply_edit(record, LeaveTypeEdit.parse("Vacation"), CTX)

    assert record.notes == "half day"
    assert record.leave_type == LeaveType.VACATION
    assert LeaveTypeEdit.parse("Holiday").value == LeaveType.NONE


def test_edit_lookup_table_covers_record_fields():
    record_fields = set(CompensationRecord.__dataclass_fields__)

    assert set(EDIT_TYPES) <= record_fields
    assert edit_for("overtime_minutes", "60") == OvertimeMinutesEdit(60.0)
    assert edit_for("manual_override", True) is None


def test_toggle_manual_override():
    assert set_manual_override(COMPUTED, True).manual_override is True
    assert set_manual_override(MANUAL, False).manual_override is False
