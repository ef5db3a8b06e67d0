from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from ...common.validators import to_number
from ...core.enums import LeaveType


@dataclass(frozen=True)
class Edit:
    """One user edit of a single compensation field.

    ``target`` names the record attribute; ``computed`` edits are only
    accepted while the record is in manual-override mode.
    """

    value: float = 0.0

    target: ClassVar[str] = ""
    computed: ClassVar[bool] = True

    @classmethod
    def parse(cls, raw: Any) -> "Edit":
        return cls(value=to_number(raw))

    @classmethod
    def cleared(cls) -> "Edit":
        return cls.parse(0)


@dataclass(frozen=True)
class OvertimeMinutesEdit(Edit):
    target: ClassVar[str] = "overtime_minutes"


@dataclass(frozen=True)
class OvertimePayEdit(Edit):
    target: ClassVar[str] = "overtime_pay"


@dataclass(frozen=True)
class UndertimeMinutesEdit(Edit):
    target: ClassVar[str] = "undertime_minutes"


@dataclass(frozen=True)
class UndertimeDeductionEdit(Edit):
    target: ClassVar[str] = "undertime_deduction"


@dataclass(frozen=True)
class LateMinutesEdit(Edit):
    target: ClassVar[str] = "late_minutes"


@dataclass(frozen=True)
class LateDeductionEdit(Edit):
    target: ClassVar[str] = "late_deduction"


@dataclass(frozen=True)
class NightDifferentialHoursEdit(Edit):
    target: ClassVar[str] = "night_differential_hours"


@dataclass(frozen=True)
class NightDifferentialPayEdit(Edit):
    target: ClassVar[str] = "night_differential_pay"


@dataclass(frozen=True)
class HolidayBonusEdit(Edit):
    target: ClassVar[str] = "holiday_bonus"


@dataclass(frozen=True)
class HoursWorkedEdit(Edit):
    target: ClassVar[str] = "hours_worked"


@dataclass(frozen=True)
class DeductionsEdit(Edit):
    target: ClassVar[str] = "deductions"


@dataclass(frozen=True)
class GrossPayEdit(Edit):
    target: ClassVar[str] = "gross_pay"


@dataclass(frozen=True)
class NetPayEdit(Edit):
    target: ClassVar[str] = "net_pay"


@dataclass(frozen=True)
class LeavePayEdit(Edit):
    target: ClassVar[str] = "leave_pay"
    computed: ClassVar[bool] = False

    @classmethod
    def parse(cls, raw: Any) -> "LeavePayEdit":
        # Leave pay is entered in whole currency units.
        return cls(value=float(int(to_number(raw))))


@dataclass(frozen=True)
class LeaveTypeEdit(Edit):
    value: LeaveType = LeaveType.NONE

    target: ClassVar[str] = "leave_type"
    computed: ClassVar[bool] = False

    @classmethod
    def parse(cls, raw: Any) -> "LeaveTypeEdit":
        try:
            return cls(value=LeaveType(raw))
        except ValueError:
            return cls()

    @classmethod
    def cleared(cls) -> "LeaveTypeEdit":
        return cls()


@dataclass(frozen=True)
class NotesEdit(Edit):
    value: str = ""

    target: ClassVar[str] = "notes"
    computed: ClassVar[bool] = False

    @classmethod
    def parse(cls, raw: Any) -> "NotesEdit":
        return cls(value="" if raw is None else str(raw))

    @classmethod
    def cleared(cls) -> "NotesEdit":
        return cls()


EDIT_TYPES: dict[str, type[Edit]] = {
    cls.target: cls
    for cls in (
        OvertimeMinutesEdit,
        OvertimePayEdit,
        UndertimeMinutesEdit,
        UndertimeDeductionEdit,
        LateMinutesEdit,
        LateDeductionEdit,
        NightDifferentialHoursEdit,
        NightDifferentialPayEdit,
        HolidayBonusEdit,
        HoursWorkedEdit,
        DeductionsEdit,
        GrossPayEdit,
        NetPayEdit,
        LeavePayEdit,
        LeaveTypeEdit,
        NotesEdit,
    )
}


def edit_for(field_name: str, raw_value: Any) -> Optional[Edit]:
    """Typed edit for a field name coming from the UI; None if not editable."""
    edit_type = EDIT_TYPES.get(field_name)
    if edit_type is None:
        return None
    return edit_type.parse(raw_value)
