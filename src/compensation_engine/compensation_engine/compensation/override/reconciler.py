from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from ...common.validators import non_negative, to_number
from ...settings.model import AttendancePolicy
from ..calculator.pay_metrics import deduction_for, hourly_rate_for, night_differential_pay_for, overtime_pay_for
from ..calculator.time_metrics import floor_to_whole_hours
from ..model import CompensationRecord
from . import edits as e

logger = logging.getLogger(__name__)

MONETARY_FIELDS = (
    "late_deduction",
    "undertime_deduction",
    "overtime_pay",
    "night_differential_pay",
    "holiday_bonus",
    "leave_pay",
    "gross_pay",
    "deductions",
    "net_pay",
)


@dataclass(frozen=True)
class OverrideContext:
    """Rates an edit may need to turn minutes or hours into money."""

    policy: AttendancePolicy
    hours_of_work: Optional[float] = None

    def hourly_rate(self, record: CompensationRecord) -> float:
        return hourly_rate_for(record.daily_rate, self.hours_of_work)


Reducer = Callable[[CompensationRecord, Any, OverrideContext], CompensationRecord]


def _settle_net(record: CompensationRecord) -> CompensationRecord:
    return replace(record, net_pay=record.gross_pay - record.deductions + record.leave_pay)


def _with_gross_component(record: CompensationRecord, name: str, value: float) -> CompensationRecord:
    previous = to_number(getattr(record, name))
    gross = to_number(record.gross_pay) - previous + value
    return _settle_net(replace(record, **{name: value, "gross_pay": gross}))


def _with_deduction_line(record: CompensationRecord, name: str, value: float) -> CompensationRecord:
    record = replace(record, **{name: value})
    deductions = to_number(record.late_deduction) + to_number(record.undertime_deduction)
    return _settle_net(replace(record, deductions=deductions))


def _overtime_minutes(record, value, ctx):
    # Overtime pay counts whole hours only.
    pay = overtime_pay_for(floor_to_whole_hours(value), ctx.hourly_rate(record), ctx.policy)
    return _with_gross_component(replace(record, overtime_minutes=value), "overtime_pay", pay)


def _overtime_pay(record, value, ctx):
    return _with_gross_component(record, "overtime_pay", value)


def _night_hours(record, value, ctx):
    pay = night_differential_pay_for(value, ctx.hourly_rate(record), ctx.policy)
    return _with_gross_component(replace(record, night_differential_hours=value), "night_differential_pay", pay)


def _night_pay(record, value, ctx):
    return _with_gross_component(record, "night_differential_pay", value)


def _holiday_bonus(record, value, ctx):
    return _with_gross_component(record, "holiday_bonus", value)


def _undertime_minutes(record, value, ctx):
    policy = ctx.policy
    deduction = deduction_for(value, policy.undertime_grace_period, policy.undertime_deduction_per_minute)
    return _with_deduction_line(replace(record, undertime_minutes=value), "undertime_deduction", deduction)


def _undertime_deduction(record, value, ctx):
    return _with_deduction_line(record, "undertime_deduction", value)


def _late_minutes(record, value, ctx):
    policy = ctx.policy
    deduction = deduction_for(value, policy.late_grace_period, policy.late_deduction_per_minute)
    return _with_deduction_line(replace(record, late_minutes=value), "late_deduction", deduction)


def _late_deduction(record, value, ctx):
    return _with_deduction_line(record, "late_deduction", value)


def _deductions(record, value, ctx):
    # Individual late/undertime lines stay as they are.
    return _settle_net(replace(record, deductions=value))


def _leave_pay(record, value, ctx):
    return _settle_net(replace(record, leave_pay=value))


def _gross_pay(record, value, ctx):
    return _settle_net(replace(record, gross_pay=value))


def _net_pay(record, value, ctx):
    gross = value + to_number(record.deductions) - to_number(record.leave_pay)
    return replace(record, net_pay=value, gross_pay=gross)


def _plain(name: str) -> Reducer:
    def reduce(record, value, ctx):
        return replace(record, **{name: value})

    return reduce


REDUCERS: dict[type[e.Edit], Reducer] = {
    e.OvertimeMinutesEdit: _overtime_minutes,
    e.OvertimePayEdit: _overtime_pay,
    e.NightDifferentialHoursEdit: _night_hours,
    e.NightDifferentialPayEdit: _night_pay,
    e.HolidayBonusEdit: _holiday_bonus,
    e.UndertimeMinutesEdit: _undertime_minutes,
    e.UndertimeDeductionEdit: _undertime_deduction,
    e.LateMinutesEdit: _late_minutes,
    e.LateDeductionEdit: _late_deduction,
    e.DeductionsEdit: _deductions,
    e.LeavePayEdit: _leave_pay,
    e.GrossPayEdit: _gross_pay,
    e.NetPayEdit: _net_pay,
    e.HoursWorkedEdit: _plain("hours_worked"),
    e.LeaveTypeEdit: _plain("leave_type"),
    e.NotesEdit: _plain("notes"),
}


def _clamp(record: CompensationRecord) -> CompensationRecord:
    return replace(record, **{name: non_negative(to_number(getattr(record, name))) for name in MONETARY_FIELDS})


def _reduce(record: CompensationRecord, edit: e.Edit, ctx: OverrideContext) -> CompensationRecord:
    reducer = REDUCERS[type(edit)]
    value = edit.value
    if isinstance(value, float):
        value = non_negative(value)
    return _clamp(reducer(record, value, ctx))


def apply_edit(record: CompensationRecord, edit: e.Edit, ctx: OverrideContext) -> CompensationRecord:
    """Apply one edit and recompute only the totals downstream of it.

    Computed fields can only be edited in manual-override mode; such edits
    on an auto-mode record are ignored.
    """
    if edit.computed and not record.manual_override:
        logger.warning("Ignoring edit of %s: record is not in manual-override mode", edit.target)
        return record
    return _reduce(record, edit, ctx)


def clear_and_override(
    record: CompensationRecord,
    edit_type: Union[type[e.Edit], str],
    ctx: OverrideContext,
) -> CompensationRecord:
    """Zero one field, switch the record to manual override, and propagate."""
    if isinstance(edit_type, str):
        resolved = e.EDIT_TYPES.get(edit_type)
        if resolved is None:
            logger.warning("Cannot clear unknown field %r", edit_type)
            return record
        edit_type = resolved
    return _reduce(replace(record, manual_override=True), edit_type.cleared(), ctx)


def reconcile(record: CompensationRecord, field_name: str, new_value: Any, ctx: OverrideContext) -> CompensationRecord:
    """``(record, field_name, new_value) -> record'`` entry point for string field names."""
    edit = e.edit_for(field_name, new_value)
    if edit is None:
        logger.warning("Ignoring edit of unknown field %r", field_name)
        return record
    return apply_edit(record, edit, ctx)


def set_manual_override(record: CompensationRecord, enabled: bool) -> CompensationRecord:
    """Toggle manual override; turning it off lets the next compute pass replace edits."""
    return replace(record, manual_override=bool(enabled))
