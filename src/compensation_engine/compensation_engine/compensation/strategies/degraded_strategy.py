from __future__ import annotations

import logging

from ...attendance.normalizer import build_interval
from ...common.datetime_utils import round_half_up
from ...core import constants
from ...core.enums import DayType
from .base import DayContext, DayOutcome, DayStrategy

logger = logging.getLogger(__name__)


class DegradedStrategy(DayStrategy):
    """Attendance present but the schedule cannot be resolved.

    Recovery mode: pay the daily rate and take worked hours from the raw
    clock difference.
    """

    def compute(self, ctx: DayContext) -> DayOutcome:
        logger.warning(
            "Schedule unresolved for employee %s on %s; paying daily rate only",
            ctx.employee.employee_id,
            ctx.on.isoformat(),
        )
        interval = build_interval(ctx.on, ctx.attendance.time_in, ctx.attendance.time_out)
        hours = interval.minutes / constants.MINUTES_PER_HOUR if interval is not None else 0.0

        record = ctx.new_record(
            day_type=ctx.day_type_or(DayType.REGULAR),
            gross_pay=ctx.daily_rate,
            hours_worked=round_half_up(hours),
        )
        return DayOutcome(record=record)
