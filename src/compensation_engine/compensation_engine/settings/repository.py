from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendancePolicy, EmploymentType


class SettingsRepository(Protocol):
    def load_policy(self) -> AttendancePolicy:
        raise NotImplementedError

    def get_employment_type(self, type_name: str) -> Optional[EmploymentType]:
        raise NotImplementedError
