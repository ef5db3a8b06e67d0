from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CompensationRecord


class CompensationRepository(Protocol):
    def list_for_month(self, *, employee_id: str, year: int, month: int) -> Sequence[CompensationRecord]:
        raise NotImplementedError

    def get_for_day(self, *, employee_id: str, year: int, month: int, day: int) -> Optional[CompensationRecord]:
        raise NotImplementedError

    def save_many(self, *, employee_id: str, year: int, month: int, records: Sequence[CompensationRecord]) -> None:
        """Insert or replace records keyed by (year, month, day)."""
        raise NotImplementedError
