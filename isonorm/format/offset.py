"""Timezone offset extraction and normalization.

Only numeric UTC offsets and the Zulu designator are supported. The
following all name the same moment: "18:30Z", "22:30+04",
"1130-0700", "15:00-03:30".

An offset of zero may be written "Z", "+00:00", "+0000" or "+00", but
never with a negative sign ("-00:00", "-0000", "-00"). Negative zero
is rejected unless NormalizeOptions.allow_negative_zero_offset is set.

Examples:
    >>> extract_offset("05:35:00+05")
    ('05:35:00', '+05')
    >>> normalize_offset("+05")
    '+050000'
    >>> normalize_offset("-04:30")
    '-043000'
"""

from __future__ import annotations

from isonorm._internal.constants import ZULU
from isonorm.errors import InvalidComponent, InvalidFormat
from isonorm.format.time import collapse_time
from isonorm.options import NormalizeOptions, resolve
from isonorm.rules import RuleName, check_pattern

_SIGNS = ("+", "-")
_ZERO_OFFSET = "000000"


def extract_offset(text: str) -> tuple[str, str]:
    """Split a time-with-offset string into time part and offset token.

    Detection order is "Z", then "+", then "-". A time with no offset
    at all is taken to be Zulu time.

    Args:
        text: A time of day, optionally followed by an offset.

    Returns:
        A (time_part, offset_token) tuple. The token is "Z" or starts
        with the sign character.

    Examples:
        >>> extract_offset("053000Z")
        ('053000', 'Z')
        >>> extract_offset("0530-04:30")
        ('0530', '-04:30')
        >>> extract_offset("0530")
        ('0530', 'Z')
    """
    for marker in (ZULU, *_SIGNS):
        if marker in text:
            head, _, tail = text.partition(marker)
            return head, marker + tail
    return text, ZULU


def normalize_offset(token: str, options: NormalizeOptions | None = None) -> str:
    """Normalize an offset token to "Z" or ``±HHMMSS``.

    Args:
        token: "Z", or a sign followed by HH, HHMM, HHMMSS or their
            colon-separated forms.
        options: Normalization options; defaults apply if None.

    Returns:
        "Z" or the sign followed by a 6-digit canonical time.

    Raises:
        InvalidFormat: If the token has disallowed characters or does
            not start with "Z", "+" or "-".
        InvalidLength: If the digit count is not 2, 4 or 6.
        InvalidComponent: If the hours/minutes/seconds are out of range,
            or the offset is a negative zero.
    """
    check_pattern(RuleName.NUMBERS_COLONS_Z_SIGN, token)
    if token == ZULU:
        return ZULU

    sign, rest = token[0], token[1:]
    if sign not in _SIGNS:
        raise InvalidFormat(
            f"time-zone offset must be 'Z' or start with '+' or '-', "
            f"example +05:30. You provided: {token}",
            token,
        )

    digits = collapse_time(rest)
    if sign == "-" and digits == _ZERO_OFFSET and not resolve(options).allow_negative_zero_offset:
        raise InvalidComponent(
            f"a zero offset must not carry a negative sign, use 'Z' or "
            f"'+00:00'. You provided: {token}",
            token,
        )
    return sign + digits


__all__ = ["extract_offset", "normalize_offset"]
