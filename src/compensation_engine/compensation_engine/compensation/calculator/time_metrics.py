from __future__ import annotations

from datetime import datetime, timedelta

from ...attendance.model import NormalizedTimes, TimeInterval
from ...common.datetime_utils import minutes_between
from ...common.validators import to_number
from ...core import constants
from ...settings.model import AttendancePolicy
from ..model import TimeMetrics


def floor_to_whole_hours(minutes: float) -> int:
    """Drop partial hours: 89 minutes -> 60."""
    if minutes <= 0:
        return 0
    return int(minutes // constants.MINUTES_PER_HOUR) * constants.MINUTES_PER_HOUR


def excess_overtime_minutes(worked_minutes: float, hours_of_work: float) -> int:
    """Overtime against standard hours alone (no schedule to compare with)."""
    standard_minutes = to_number(hours_of_work) * constants.MINUTES_PER_HOUR
    return floor_to_whole_hours(max(0.0, worked_minutes - standard_minutes))


def scheduled_overtime_minutes(actual: TimeInterval, scheduled: TimeInterval, policy: AttendancePolicy) -> int:
    candidate = max(0, minutes_between(actual.time_out, scheduled.time_out))
    if policy.count_early_time_in_as_overtime:
        candidate += max(0, minutes_between(scheduled.time_in, actual.time_in))

    # Must strictly exceed the threshold.
    if candidate <= to_number(policy.overtime_threshold):
        return 0
    return floor_to_whole_hours(candidate)


def night_window_minutes(actual: TimeInterval, start_hour: int, end_hour: int) -> int:
    """Minutes of ``actual`` inside the nightly [start_hour, end_hour) window.

    The window wraps past midnight when ``end_hour <= start_hour``.
    """
    start_hour = int(start_hour) % 24
    end_hour = int(end_hour) % 24
    if start_hour == end_hour:
        return 0

    total = 0
    anchor = actual.time_in.date()
    for offset in (-1, 0, 1):
        day = anchor + timedelta(days=offset)
        window_start = datetime.combine(day, datetime.min.time()) + timedelta(hours=start_hour)
        window_end = datetime.combine(day, datetime.min.time()) + timedelta(hours=end_hour)
        if end_hour <= start_hour:
            window_end += timedelta(days=1)

        overlap_start = max(actual.time_in, window_start)
        overlap_end = min(actual.time_out, window_end)
        if overlap_end > overlap_start:
            total += minutes_between(overlap_end, overlap_start)
    return total


def night_differential_hours(actual: TimeInterval, policy: AttendancePolicy) -> float:
    """Exact overlap with the night window, in hours (30 minutes -> 0.5)."""
    minutes = night_window_minutes(actual, policy.night_differential_start_hour, policy.night_differential_end_hour)
    return minutes / constants.MINUTES_PER_HOUR


def calculate_time_metrics(times: NormalizedTimes, policy: AttendancePolicy, hours_of_work: float) -> TimeMetrics:
    """Late, undertime, overtime, worked and night hours for one day.

    Missing actual times yield all-zero metrics. Without a scheduled interval
    only worked hours, night hours and overtime beyond standard hours apply.
    """
    actual = times.actual
    if actual is None:
        return TimeMetrics()

    worked_minutes = actual.minutes
    night_hours = night_differential_hours(actual, policy)
    scheduled = times.scheduled

    if scheduled is None:
        return TimeMetrics(
            overtime_minutes=excess_overtime_minutes(worked_minutes, hours_of_work),
            hours_worked=worked_minutes / constants.MINUTES_PER_HOUR,
            night_differential_hours=night_hours,
        )

    late = minutes_between(actual.time_in, scheduled.time_in) if actual.time_in > scheduled.time_in else 0
    undertime = minutes_between(scheduled.time_out, actual.time_out) if actual.time_out < scheduled.time_out else 0

    return TimeMetrics(
        late_minutes=max(0, late),
        undertime_minutes=max(0, undertime),
        overtime_minutes=scheduled_overtime_minutes(actual, scheduled, policy),
        hours_worked=worked_minutes / constants.MINUTES_PER_HOUR,
        night_differential_hours=night_hours,
    )
