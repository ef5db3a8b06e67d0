from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterable

import pandas as pd

from .model import CompensationRecord

COLUMNS = [f.name for f in fields(CompensationRecord)]

SUMMED_COLUMNS = [
    "hours_worked",
    "overtime_minutes",
    "overtime_pay",
    "night_differential_hours",
    "night_differential_pay",
    "holiday_bonus",
    "late_deduction",
    "undertime_deduction",
    "deductions",
    "leave_pay",
    "gross_pay",
    "net_pay",
]


@dataclass(frozen=True)
class MonthSummary:
    employee_id: str
    year: int
    month: int
    days_recorded: int = 0
    days_worked: int = 0
    absences: int = 0
    manual_overrides: int = 0
    totals: dict[str, float] = field(default_factory=dict)
    by_day_type: list[dict] = field(default_factory=list)


def records_frame(records: Iterable[CompensationRecord]) -> pd.DataFrame:
    """One row per record, ordered by day."""
    df = pd.DataFrame([r.as_dict() for r in records], columns=COLUMNS)
    if df.empty:
        return df
    return df.sort_values("day").reset_index(drop=True)


def summarize_month(records: Iterable[CompensationRecord], *, employee_id: str, year: int, month: int) -> MonthSummary:
    df = records_frame(r for r in records if r.year == year and r.month == month)
    if df.empty:
        return MonthSummary(
            employee_id=employee_id,
            year=year,
            month=month,
            totals={name: 0.0 for name in SUMMED_COLUMNS},
        )

    totals = {name: round(float(df[name].sum()), 2) for name in SUMMED_COLUMNS}
    worked = df[(~df["absence"]) & (df["hours_worked"] > 0)]

    grouped = (
        df.groupby("day_type")
        .agg(days=("day", "count"), gross_pay=("gross_pay", "sum"), net_pay=("net_pay", "sum"))
        .reset_index()
    )
    by_day_type = [
        {
            "day_type": str(row["day_type"]),
            "days": int(row["days"]),
            "gross_pay": round(float(row["gross_pay"]), 2),
            "net_pay": round(float(row["net_pay"]), 2),
        }
        for row in grouped.to_dict("records")
    ]

    return MonthSummary(
        employee_id=employee_id,
        year=year,
        month=month,
        days_recorded=int(len(df)),
        days_worked=int(len(worked)),
        absences=int(df["absence"].sum()),
        manual_overrides=int(df["manual_override"].sum()),
        totals=totals,
        by_day_type=by_day_type,
    )
