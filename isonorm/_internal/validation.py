"""Component range validation for Isonorm.

Each field of a date or time is checked on its own against fixed
bounds. The year's upper bound depends on the current year, which
callers pass in explicitly (see NormalizeOptions.current_year).

Day values are only checked against 1-31; whether the day exists in
its month is left to the calendar engine.

This module is not part of the public API.
"""

from __future__ import annotations

from isonorm._internal.constants import (
    HOURS_PER_DAY,
    MAX_DAY,
    MIN_YEAR,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    YEAR_LOOKAHEAD,
)
from isonorm.errors import InvalidComponent


def is_valid_year(year: int, current_year: int, min_year: int = MIN_YEAR) -> bool:
    """Return True if min_year < year <= current_year + 1."""
    return min_year < year <= current_year + YEAR_LOOKAHEAD


def is_valid_month(month: int) -> bool:
    return 0 < month <= MONTHS_PER_YEAR


def is_valid_day(day: int) -> bool:
    return 0 < day <= MAX_DAY


def is_valid_hour(hour: int) -> bool:
    return 0 <= hour < HOURS_PER_DAY


def is_valid_minute(minute: int) -> bool:
    """Return True for 0-59; also used for seconds."""
    return 0 <= minute < MINUTES_PER_HOUR


def _fail(field: str, raw: str, bounds: str, source: str | None) -> InvalidComponent:
    message = f"invalid {field} value {raw!r}, expected {bounds}"
    if source is not None and source != raw:
        message += f", you provided: {source}"
    return InvalidComponent(message, source if source is not None else raw)


def validate_year(
    raw: str,
    current_year: int,
    min_year: int = MIN_YEAR,
    source: str | None = None,
) -> int:
    """Validate a 4-digit year field.

    Args:
        raw: The year digits.
        current_year: The year the clock reports now.
        min_year: Exclusive lower bound.
        source: The full input the field was cut from, for the message.

    Returns:
        The year as an integer.

    Raises:
        InvalidComponent: If the year is not after min_year or is later
            than next year.
    """
    year = int(raw)
    if not is_valid_year(year, current_year, min_year):
        raise _fail(
            "year",
            raw,
            f"{min_year} < year <= {current_year + YEAR_LOOKAHEAD}",
            source,
        )
    return year


def validate_month(raw: str, source: str | None = None) -> int:
    """Validate a 2-digit month field (01-12)."""
    month = int(raw)
    if not is_valid_month(month):
        raise _fail("month", raw, f"01-{MONTHS_PER_YEAR}", source)
    return month


def validate_day(raw: str, source: str | None = None) -> int:
    """Validate a 2-digit day field (01-31)."""
    day = int(raw)
    if not is_valid_day(day):
        raise _fail("day", raw, f"01-{MAX_DAY}", source)
    return day


def validate_hour(raw: str, source: str | None = None) -> int:
    """Validate a 2-digit hour field (00-23)."""
    hour = int(raw)
    if not is_valid_hour(hour):
        raise _fail("hour", raw, f"00-{HOURS_PER_DAY - 1}", source)
    return hour


def validate_minute(raw: str, source: str | None = None, field: str = "minute") -> int:
    """Validate a 2-digit minute or second field (00-59)."""
    minute = int(raw)
    if not is_valid_minute(minute):
        raise _fail(field, raw, f"00-{MINUTES_PER_HOUR - 1}", source)
    return minute


__all__ = [
    "is_valid_year",
    "is_valid_month",
    "is_valid_day",
    "is_valid_hour",
    "is_valid_minute",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_hour",
    "validate_minute",
]
