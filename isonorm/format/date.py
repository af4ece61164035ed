"""Date normalization to canonical basic form.

Converts calendar dates of year, month or day precision, written with
or without hyphens, into the canonical 8-digit ``YYYYMMDD`` form.
Missing month and day fields default to ``01``.

Accepted inputs:
    - YYYY, YYYYMM, YYYYMMDD
    - YYYY-MM, YYYY-MM-DD

Examples:
    >>> normalize_date("2014")
    '20140101'
    >>> normalize_date("2014-11")
    '20141101'
    >>> normalize_date("2014-11-01")
    '20141101'
"""

from __future__ import annotations

from isonorm._internal.constants import (
    DATE_EXAMPLE_BASIC,
    DATE_EXAMPLE_EXTENDED,
    DATE_LENGTHS,
    DATE_SEPARATOR,
)
from isonorm._internal.validation import validate_day, validate_month, validate_year
from isonorm.errors import InvalidLength
from isonorm.options import NormalizeOptions, resolve
from isonorm.rules import RuleName, check_pattern


def date_example(has_hyphens: bool) -> str:
    """Return an example date in the same style as the user's input."""
    return DATE_EXAMPLE_EXTENDED if has_hyphens else DATE_EXAMPLE_BASIC


def collapse_date(raw: str, options: NormalizeOptions | None = None) -> str:
    """Strip hyphens from a date and pad it to ``YYYYMMDD``.

    Unlike normalize_date(), this does not check the raw string against
    the numbers-and-hyphens rule first.

    Raises:
        InvalidFormat: If anything other than digits remains.
        InvalidLength: If the digit count is not 4, 6 or 8.
        InvalidComponent: If a field is out of range.
    """
    opts = resolve(options)
    example = date_example(DATE_SEPARATOR in raw)
    s = raw.replace(DATE_SEPARATOR, "")

    check_pattern(
        RuleName.NUMBERS,
        s,
        lambda v: f"You need to use only numeric values, example {example}. You provided: {raw}",
    )

    if len(s) not in DATE_LENGTHS:
        raise InvalidLength(
            f"invalid date format, example {example}. You provided: {raw}", raw
        )

    validate_year(s[0:4], opts.current_year(), opts.min_year, source=raw)
    if len(s) == 4:
        return f"{s}0101"

    validate_month(s[4:6], source=raw)
    if len(s) == 6:
        return f"{s}01"

    validate_day(s[6:8], source=raw)
    return s


def normalize_date(raw: str, options: NormalizeOptions | None = None) -> str:
    """Normalize a date string to canonical ``YYYYMMDD``.

    Args:
        raw: Date of 4, 6 or 8 digits, optionally hyphen-separated.
        options: Normalization options; defaults apply if None.

    Returns:
        The 8-digit canonical date.

    Raises:
        InvalidFormat: If raw contains anything but digits and hyphens.
        InvalidLength: If the digit count is not 4, 6 or 8.
        InvalidComponent: If the year, month or day is out of range.

    Examples:
        >>> normalize_date("20141230")
        '20141230'
        >>> normalize_date("2014-12")
        '20141201'
    """
    check_pattern(RuleName.NUMBERS_AND_HYPHENS, raw)
    return collapse_date(raw, options)


__all__ = ["date_example", "collapse_date", "normalize_date"]
