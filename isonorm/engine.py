"""Calendar engine adapter.

Thin wrapper over the standard library ``datetime`` and
``dateutil.relativedelta`` that does the calendar-correct work Isonorm
itself never does: parsing canonical basic strings into instants,
reading the clock, and adding calendar units.

Instants are timezone-aware ``datetime`` objects.

Examples:
    >>> from isonorm import engine
    >>> dt = engine.parse_basic_datetime("20141101T053000+050000")
    >>> dt.isoformat()
    '2014-11-01T05:30:00+05:00'
    >>> engine.add_months(dt, 1).month
    12
"""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil.relativedelta import relativedelta

from isonorm._internal.constants import BASIC_DATE_FORMAT, BASIC_DATETIME_FORMAT
from isonorm.errors import UnparsableInstant

UTC = timezone.utc


def now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(UTC)


def year(instant: datetime) -> int:
    return instant.year


def parse_basic_datetime(text: str) -> datetime:
    """Parse a canonical ``YYYYMMDDTHHMMSS(Z|±HHMMSS)`` timestamp.

    The returned instant carries the fixed offset from the string.

    Raises:
        UnparsableInstant: If text is not a real calendar instant.
    """
    try:
        return datetime.strptime(text, BASIC_DATETIME_FORMAT)
    except ValueError as exc:
        raise UnparsableInstant(
            f"cannot parse basic date-time {text!r}: {exc}", text
        ) from exc


def parse_basic_date(text: str) -> datetime:
    """Parse a canonical ``YYYYMMDD`` date as midnight UTC.

    Raises:
        UnparsableInstant: If text is not a real calendar date.
    """
    try:
        parsed = datetime.strptime(text, BASIC_DATE_FORMAT)
    except ValueError as exc:
        raise UnparsableInstant(
            f"cannot parse basic date {text!r}: {exc}", text
        ) from exc
    return parsed.replace(tzinfo=UTC)


def format_basic_datetime(instant: datetime) -> str:
    """Render an instant as ``YYYYMMDDTHHMMSS`` plus ``Z`` or ``±HHMMSS``.

    Naive datetimes are treated as UTC.
    """
    offset = instant.utcoffset()
    if offset is None or not offset:
        suffix = "Z"
    else:
        total = int(offset.total_seconds())
        sign = "-" if total < 0 else "+"
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)
        suffix = f"{sign}{hours:02d}{minutes:02d}{seconds:02d}"
    return instant.strftime("%Y%m%dT%H%M%S") + suffix


def format_basic_date(instant: datetime) -> str:
    return instant.strftime(BASIC_DATE_FORMAT)


def add_years(instant: datetime, n: int) -> datetime:
    """Add n years, clamping Feb 29 to Feb 28 in non-leap years."""
    return instant + relativedelta(years=n)


def add_months(instant: datetime, n: int) -> datetime:
    """Add n months, clamping the day to the end of the target month."""
    return instant + relativedelta(months=n)


def add_days(instant: datetime, n: int) -> datetime:
    return instant + relativedelta(days=n)


def add_hours(instant: datetime, n: int) -> datetime:
    return instant + relativedelta(hours=n)


__all__ = [
    "UTC",
    "now",
    "year",
    "parse_basic_datetime",
    "parse_basic_date",
    "format_basic_datetime",
    "format_basic_date",
    "add_years",
    "add_months",
    "add_days",
    "add_hours",
]
