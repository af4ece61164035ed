"""Normalization of date, time and offset strings.

This module converts ISO 8601-like strings in basic or extended
notation into the canonical basic form:
    - Dates: YYYYMMDD
    - Times: HHMMSS
    - Offsets: Z or ±HHMMSS
    - Timestamps: YYYYMMDDTHHMMSS plus offset

Functions:
    normalize_date: Normalize YYYY, YYYY-MM, YYYY-MM-DD (or unseparated).
    normalize_time: Normalize HH, HH:MM, HH:MM:SS (or unseparated).
    extract_offset: Split a time-with-offset into time and offset token.
    normalize_offset: Normalize an offset token.
    assemble_timestamp: Normalize a full "<date>T<time><offset>" string.

Examples:
    >>> from isonorm.format import assemble_timestamp, normalize_date
    >>> normalize_date("2014-12-30")
    '20141230'
    >>> assemble_timestamp("2014-12-30T12:59Z")
    '20141230T125900Z'
"""

from __future__ import annotations

from isonorm.format.date import normalize_date
from isonorm.format.offset import extract_offset, normalize_offset
from isonorm.format.time import normalize_time
from isonorm.format.timestamp import assemble_timestamp

__all__: list[str] = [
    "normalize_date",
    "normalize_time",
    "extract_offset",
    "normalize_offset",
    "assemble_timestamp",
]
