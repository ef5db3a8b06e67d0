from __future__ import annotations

import logging
import math
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import days_in_month

logger = logging.getLogger(__name__)


def to_number(value: Any) -> float:
    """Coerce user or collaborator input to a finite float, 0 when invalid."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid numeric input %r coerced to 0", value)
        return 0.0
    if math.isnan(number) or math.isinf(number):
        logger.warning("Non-finite numeric input %r coerced to 0", value)
        return 0.0
    return number


def to_bool(value: Any, default: bool = False) -> bool:
    """Loose boolean from settings: "false"/"0"/"no"/"off" are False."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def non_negative(value: float) -> float:
    return max(0.0, value)


def require_year(year: int) -> int:
    if int(year) < 1:
        raise ValidationError(f"Invalid year: {year}")
    return int(year)


def require_month(month: int) -> int:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month}")
    return int(month)


def require_day(year: int, month: int, day: int) -> int:
    last = days_in_month(require_year(year), require_month(month))
    if not 1 <= int(day) <= last:
        raise ValidationError(f"Invalid day {day} for {year}-{month:02d}")
    return int(day)
