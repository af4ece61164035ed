"""Internal constants for Isonorm.

These constants define the bounds, field widths and fixed formats used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Year bounds: MIN_YEAR is exclusive, the upper bound is the clock's
# current year plus YEAR_LOOKAHEAD (inclusive).
MIN_YEAR: int = 2000
YEAR_LOOKAHEAD: int = 1

MONTHS_PER_YEAR: int = 12
MAX_DAY: int = 31
HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60

# Accepted digit counts once separators are stripped
DATE_LENGTHS: frozenset[int] = frozenset({4, 6, 8})
TIME_LENGTHS: frozenset[int] = frozenset({2, 4, 6})

DATE_SEPARATOR: str = "-"
TIME_SEPARATOR: str = ":"
DATETIME_SEPARATOR: str = "T"
ZULU: str = "Z"

# Example strings quoted in error messages
DATE_EXAMPLE_EXTENDED: str = "YYYY-MM-DD 2014-12-30"
DATE_EXAMPLE_BASIC: str = "YYYYMMDD 20141230"
TIME_EXAMPLE_EXTENDED: str = "HH:MM:SS 12:59:25"
TIME_EXAMPLE_BASIC: str = "HHMMSS 125925"

# Calendar engine formats ("basic date" and "basic date-time, no millis")
BASIC_DATE_FORMAT: str = "%Y%m%d"
BASIC_DATETIME_FORMAT: str = "%Y%m%dT%H%M%S%z"


__all__ = [
    "MIN_YEAR",
    "YEAR_LOOKAHEAD",
    "MONTHS_PER_YEAR",
    "MAX_DAY",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "DATE_LENGTHS",
    "TIME_LENGTHS",
    "DATE_SEPARATOR",
    "TIME_SEPARATOR",
    "DATETIME_SEPARATOR",
    "ZULU",
    "DATE_EXAMPLE_EXTENDED",
    "DATE_EXAMPLE_BASIC",
    "TIME_EXAMPLE_EXTENDED",
    "TIME_EXAMPLE_BASIC",
    "BASIC_DATE_FORMAT",
    "BASIC_DATETIME_FORMAT",
]
