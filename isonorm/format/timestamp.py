"""Assembly of canonical basic timestamps.

A timestamp is a date and a time-with-offset joined by "T". Each part is
normalized on its own and the results are concatenated into
``YYYYMMDDTHHMMSS`` followed by "Z" or ``±HHMMSS``.
"""

from __future__ import annotations

import logging

from isonorm._internal.constants import DATETIME_SEPARATOR
from isonorm.errors import InvalidFormat
from isonorm.format.date import normalize_date
from isonorm.format.offset import extract_offset, normalize_offset
from isonorm.format.time import normalize_time
from isonorm.options import NormalizeOptions

logger = logging.getLogger(__name__)


def split_timestamp(raw: str) -> tuple[str, str]:
    """Split raw on the single "T" separator into date and time parts.

    Raises:
        InvalidFormat: If there is not exactly one "T".
    """
    parts = raw.split(DATETIME_SEPARATOR)
    if len(parts) != 2:
        raise InvalidFormat(
            "date-time must contain exactly one 'T' separator, "
            f"example 2014-11-01T05:35:00+05:00. You provided: {raw}",
            raw,
        )
    return parts[0], parts[1]


def assemble_timestamp(raw: str, options: NormalizeOptions | None = None) -> str:
    """Normalize a combined date-time string to canonical basic form.

    Args:
        raw: "<date>T<time>[<offset>]" in basic or extended notation.
            A missing offset means Zulu time.
        options: Normalization options; defaults apply if None.

    Returns:
        The canonical timestamp.

    Raises:
        InvalidFormat: If the separator is missing or a part has
            disallowed characters.
        InvalidLength: If a part has the wrong number of digits.
        InvalidComponent: If any field is out of range.

    Examples:
        >>> assemble_timestamp("2014-11-01T05:35:00+05")
        '20141101T053500+050000'
        >>> assemble_timestamp("20141101T053000+10")
        '20141101T053000+100000'
        >>> assemble_timestamp("2014-11T05")
        '20141101T050000Z'
    """
    date_part, time_with_offset = split_timestamp(raw)
    date_f = normalize_date(date_part, options)
    time_part, offset_token = extract_offset(time_with_offset)
    time_f = normalize_time(time_part)
    offset_f = normalize_offset(offset_token, options)

    result = f"{date_f}{DATETIME_SEPARATOR}{time_f}{offset_f}"
    logger.debug("assembled timestamp %r -> %r", raw, result)
    return result


__all__ = ["split_timestamp", "assemble_timestamp"]
