"""Time-of-day normalization to canonical basic form.

Converts times of hour, minute or second precision, written with or
without colons, into the canonical 6-digit ``HHMMSS`` form. Missing
minute and second fields are padded with ``00``.

Examples:
    >>> normalize_time("05")
    '050000'
    >>> normalize_time("05:35")
    '053500'
    >>> normalize_time("053512")
    '053512'
"""

from __future__ import annotations

from isonorm._internal.constants import (
    TIME_EXAMPLE_BASIC,
    TIME_EXAMPLE_EXTENDED,
    TIME_LENGTHS,
    TIME_SEPARATOR,
)
from isonorm._internal.validation import validate_hour, validate_minute
from isonorm.errors import InvalidLength
from isonorm.rules import RuleName, check_pattern


def time_example(has_colons: bool) -> str:
    """Return an example time in the same style as the user's input."""
    return TIME_EXAMPLE_EXTENDED if has_colons else TIME_EXAMPLE_BASIC


def collapse_time(raw: str) -> str:
    """Strip colons from a time and pad it to ``HHMMSS``.

    Shared by normalize_time() and the offset normalizer, which feeds
    it the digits after the sign.

    Raises:
        InvalidFormat: If anything other than digits remains.
        InvalidLength: If the digit count is not 2, 4 or 6.
        InvalidComponent: If a field is out of range.
    """
    example = time_example(TIME_SEPARATOR in raw)
    s = raw.replace(TIME_SEPARATOR, "")

    check_pattern(
        RuleName.NUMBERS,
        s,
        lambda v: f"You need to use only numeric values, example {example}. You provided: {raw}",
    )

    if len(s) not in TIME_LENGTHS:
        raise InvalidLength(
            f"invalid time format, example {example}. You provided: {raw}", raw
        )

    validate_hour(s[0:2], source=raw)
    if len(s) == 2:
        return f"{s}0000"

    validate_minute(s[2:4], source=raw)
    if len(s) == 4:
        return f"{s}00"

    validate_minute(s[4:6], source=raw, field="second")
    return s


def normalize_time(raw: str) -> str:
    """Normalize a bare time of day to canonical ``HHMMSS``.

    The input carries no date and no timezone offset.

    Args:
        raw: Time of 2, 4 or 6 digits, optionally colon-separated.

    Returns:
        The 6-digit canonical time.

    Raises:
        InvalidFormat: If raw contains anything but digits and colons.
        InvalidLength: If the digit count is not 2, 4 or 6.
        InvalidComponent: If the hour, minute or second is out of range.
    """
    check_pattern(RuleName.NUMBERS_AND_COLONS, raw)
    return collapse_time(raw)


__all__ = ["time_example", "collapse_time", "normalize_time"]
