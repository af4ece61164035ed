"""Conversion between raw strings and instants.

parse_instant() normalizes a raw date or date-time string and hands the
canonical result to the calendar engine. to_basic() goes the other way,
rendering an instant in canonical basic form.

Input is upper-cased first, so "t" and "z" are accepted.

Examples:
    >>> dt = parse_instant("2014-11-01t05:35:00z")
    >>> dt.isoformat()
    '2014-11-01T05:35:00+00:00'
    >>> to_basic(dt)
    '20141101T053500Z'
"""

from __future__ import annotations

import logging
from datetime import datetime

from isonorm import engine
from isonorm._internal.constants import DATETIME_SEPARATOR
from isonorm.format.date import normalize_date
from isonorm.format.timestamp import assemble_timestamp
from isonorm.options import NormalizeOptions

logger = logging.getLogger(__name__)


def parse_instant(raw: str, options: NormalizeOptions | None = None) -> datetime:
    """Parse a date or date-time string into an aware datetime.

    Strings containing "T" are treated as timestamps and keep their
    offset. Date-only strings become midnight UTC.

    Args:
        raw: The date or date-time string, any letter case.
        options: Normalization options; defaults apply if None.

    Returns:
        The instant named by raw.

    Raises:
        InvalidFormat: If raw has disallowed characters or structure.
        InvalidLength: If a part has the wrong number of digits.
        InvalidComponent: If any field is out of range.
        UnparsableInstant: If the canonical form is not a real date,
            e.g. February 31.
    """
    s = raw.upper()
    if DATETIME_SEPARATOR in s:
        canonical = assemble_timestamp(s, options)
        instant = engine.parse_basic_datetime(canonical)
    else:
        canonical = normalize_date(s, options)
        instant = engine.parse_basic_date(canonical)
    logger.debug("parsed %r via %r -> %s", raw, canonical, instant)
    return instant


def to_basic(instant: datetime, date_only: bool = False) -> str:
    """Render an instant as a canonical basic timestamp or date.

    Examples:
        >>> from datetime import datetime, timezone
        >>> to_basic(datetime(2014, 12, 30, 12, 59, 25, tzinfo=timezone.utc))
        '20141230T125925Z'
        >>> to_basic(datetime(2014, 12, 30, tzinfo=timezone.utc), date_only=True)
        '20141230'
    """
    if date_only:
        return engine.format_basic_date(instant)
    return engine.format_basic_datetime(instant)


__all__ = ["parse_instant", "to_basic"]
