from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Employee data needed for pay calculation."""

    employee_id: str
    daily_rate: float
    employment_type: str
    full_name: str = ""
