from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional, Sequence, Union

from ..attendance.model import RawAttendance
from ..common.validators import require_day, require_month, require_year
from ..core.exceptions import CollaboratorError
from ..employees.model import Employee
from ..holidays.model import HolidayRange
from ..holidays.repository import HolidayRepository
from ..settings.model import AttendancePolicy, EmploymentType
from ..settings.repository import SettingsRepository
from .breakdown import PaymentBreakdown
from .engine import breakdown_for, compute_day
from .model import CompensationRecord
from .override import edits
from .override.reconciler import OverrideContext, clear_and_override, reconcile, set_manual_override
from .repository import CompensationRepository
from .strategies.base import DayOutcome
from .strategies.factory import DayStrategyFactory
from .summary import MonthSummary, summarize_month

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Settings and holidays loaded once and shared by a whole calculation pass."""

    policy: AttendancePolicy
    employment_type: Optional[EmploymentType]
    holidays: tuple[HolidayRange, ...]


class CompensationService:
    def __init__(
        self,
        settings: SettingsRepository,
        holidays: HolidayRepository,
        compensations: CompensationRepository,
        *,
        strategy_factory: Optional[DayStrategyFactory] = None,
    ):
        self._settings = settings
        self._holidays = holidays
        self._compensations = compensations
        self._factory = strategy_factory or DayStrategyFactory()

    def load_snapshot(self, employee: Employee, *, year: int, month: int) -> Snapshot:
        try:
            policy = self._settings.load_policy()
            employment_type = self._settings.get_employment_type(employee.employment_type)
        except Exception as exc:
            raise CollaboratorError("Could not load attendance settings", cause=exc) from exc
        try:
            holidays = tuple(self._holidays.list_for_month(year=year, month=month))
        except Exception as exc:
            raise CollaboratorError(f"Could not load holidays for {year}-{month:02d}", cause=exc) from exc

        if employment_type is None:
            logger.warning("Unknown employment type %r for employee %s", employee.employment_type, employee.employee_id)
        return Snapshot(policy=policy, employment_type=employment_type, holidays=holidays)

    def _month_records(self, employee: Employee, *, year: int, month: int) -> list[CompensationRecord]:
        try:
            return list(self._compensations.list_for_month(employee_id=employee.employee_id, year=year, month=month))
        except Exception as exc:
            raise CollaboratorError(f"Could not load compensation records for {year}-{month:02d}", cause=exc) from exc

    def _stored_record(self, employee: Employee, *, year: int, month: int, day: int) -> Optional[CompensationRecord]:
        try:
            return self._compensations.get_for_day(employee_id=employee.employee_id, year=year, month=month, day=day)
        except Exception as exc:
            raise CollaboratorError(f"Could not load compensation record for {year}-{month:02d}-{day:02d}", cause=exc) from exc

    def _save(self, employee: Employee, *, year: int, month: int, records: Sequence[CompensationRecord]) -> None:
        self._compensations.save_many(employee_id=employee.employee_id, year=year, month=month, records=records)

    def _outcome(self, employee: Employee, attendance: RawAttendance, snapshot: Snapshot, prior) -> DayOutcome:
        return compute_day(
            employee,
            attendance,
            snapshot.policy,
            snapshot.employment_type,
            snapshot.holidays,
            prior=prior,
            factory=self._factory,
        )

    def compute_day(self, employee: Employee, attendance: RawAttendance) -> DayOutcome:
        """Recompute one day (manual-override records are left alone) and store it."""
        on = attendance.date
        snapshot = self.load_snapshot(employee, year=on.year, month=on.month)
        prior = self._stored_record(employee, year=on.year, month=on.month, day=on.day)

        outcome = self._outcome(employee, attendance, snapshot, prior)
        self._save(employee, year=on.year, month=on.month, records=[outcome.record])
        return outcome

    def compute_month(
        self,
        employee: Employee,
        *,
        year: int,
        month: int,
        attendance: Iterable[RawAttendance],
        recompute: bool = False,
    ) -> list[CompensationRecord]:
        """Compute every attendance day of a month with one settings snapshot.

        Days with a stored record are kept unless ``recompute`` is set;
        manual-override records are never recomputed.
        """
        year = require_year(year)
        month = require_month(month)
        snapshot = self.load_snapshot(employee, year=year, month=month)
        stored = {r.day: r for r in self._month_records(employee, year=year, month=month)}

        results: dict[int, CompensationRecord] = dict(stored)
        computed = 0
        for entry in attendance:
            if (entry.date.year, entry.date.month) != (year, month):
                logger.info("Skipping %s: outside %s-%02d", entry.date.isoformat(), year, month)
                continue

            prior = stored.get(entry.date.day)
            if prior is not None and not recompute:
                continue

            results[entry.date.day] = self._outcome(employee, entry, snapshot, prior).record
            computed += 1

        records = [results[day] for day in sorted(results)]
        self._save(employee, year=year, month=month, records=records)
        logger.info(
            "Compensation for %s %s-%02d: %d computed, %d stored in total",
            employee.employee_id,
            year,
            month,
            computed,
            len(records),
        )
        return records

    def breakdown(self, employee: Employee, attendance: RawAttendance) -> Optional[PaymentBreakdown]:
        """Payment breakdown for a day as it would be computed now (nothing is stored)."""
        on = attendance.date
        snapshot = self.load_snapshot(employee, year=on.year, month=on.month)
        outcome = self._outcome(employee, attendance, snapshot, None)
        return breakdown_for(outcome, snapshot.policy, snapshot.employment_type)

    def _editable_record(self, employee: Employee, *, year: int, month: int, day: int) -> CompensationRecord:
        require_day(year, month, day)
        record = self._stored_record(employee, year=year, month=month, day=day)
        if record is None:
            record = CompensationRecord(
                employee_id=str(employee.employee_id),
                year=year,
                month=month,
                day=day,
                daily_rate=float(employee.daily_rate or 0),
            )
        return record

    def _override_context(self, employee: Employee, *, year: int, month: int) -> OverrideContext:
        snapshot = self.load_snapshot(employee, year=year, month=month)
        hours = snapshot.employment_type.standard_hours if snapshot.employment_type else None
        return OverrideContext(policy=snapshot.policy, hours_of_work=hours)

    def edit(self, employee: Employee, *, year: int, month: int, day: int, field_name: str, value: Any) -> CompensationRecord:
        record = self._editable_record(employee, year=year, month=month, day=day)
        updated = reconcile(record, field_name, value, self._override_context(employee, year=year, month=month))
        self._save(employee, year=year, month=month, records=[updated])
        return updated

    def clear(
        self,
        employee: Employee,
        *,
        year: int,
        month: int,
        day: int,
        field: Union[str, type[edits.Edit]],
    ) -> CompensationRecord:
        record = self._editable_record(employee, year=year, month=month, day=day)
        updated = clear_and_override(record, field, self._override_context(employee, year=year, month=month))
        self._save(employee, year=year, month=month, records=[updated])
        return updated

    def set_manual_override(self, employee: Employee, *, on: date, enabled: bool) -> CompensationRecord:
        record = self._editable_record(employee, year=on.year, month=on.month, day=on.day)
        updated = set_manual_override(record, enabled)
        self._save(employee, year=on.year, month=on.month, records=[updated])
        return updated

    def summarize(self, employee: Employee, *, year: int, month: int) -> MonthSummary:
        year = require_year(year)
        month = require_month(month)
        records = self._month_records(employee, year=year, month=month)
        return summarize_month(records, employee_id=employee.employee_id, year=year, month=month)
