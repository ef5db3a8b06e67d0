from __future__ import annotations

from typing import Protocol, Sequence

from .model import HolidayRange


class HolidayRepository(Protocol):
    def list_for_month(self, *, year: int, month: int) -> Sequence[HolidayRange]:
        raise NotImplementedError
