"""Isonorm exception hierarchy.

All Isonorm-specific exceptions inherit from IsonormError. Each error
carries a machine-readable ``kind`` alongside the human-readable message
and the raw value that was rejected, so callers can branch on the kind
instead of matching message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories of failure raised while normalizing input."""

    INVALID_FORMAT = "invalid-format"
    INVALID_LENGTH = "invalid-length"
    INVALID_COMPONENT = "invalid-component"
    DUPLICATE_UNIT = "duplicate-unit"
    UNORDERED_UNIT = "unordered-unit"
    UNKNOWN_RULE = "unknown-rule"
    UNPARSABLE_INSTANT = "unparsable-instant"


class IsonormError(Exception):
    """Base exception for all Isonorm errors.

    Attributes:
        kind: The ErrorKind of this failure.
        message: Human-readable description.
        value: The offending raw input, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, value={self.value!r})"


class InvalidFormat(IsonormError):
    """Input does not match the expected character pattern.

    Examples:
        - Letters in a date string ("abc")
        - A colon in a date, a hyphen in a time
        - A timestamp without the 'T' separator
    """

    kind = ErrorKind.INVALID_FORMAT


class InvalidLength(InvalidFormat):
    """Wrong number of digits once separators are stripped.

    Examples:
        - A 5-digit date ("20141")
        - A 3-digit time ("123")
        - An odd-length duration ("10Y")
    """

    kind = ErrorKind.INVALID_LENGTH


class InvalidComponent(IsonormError):
    """A numeric field is outside its semantic range.

    Examples:
        - Year not after 2000, or beyond next year
        - Month 13, day 32, hour 24, minute 60
        - Negative zero timezone offset ("-00:00")
    """

    kind = ErrorKind.INVALID_COMPONENT


class DuplicateUnit(InvalidFormat):
    """A duration unit letter appears more than once ("1Y1Y")."""

    kind = ErrorKind.DUPLICATE_UNIT


class UnorderedUnit(InvalidFormat):
    """Duration units are not in Y, M, D, H order ("3H1Y")."""

    kind = ErrorKind.UNORDERED_UNIT


class UnknownRule(IsonormError):
    """A pattern rule was requested by a name that is not registered.

    This is a programming error rather than bad user input.
    """

    kind = ErrorKind.UNKNOWN_RULE


class UnparsableInstant(IsonormError):
    """The calendar engine rejected a canonical string.

    Raised when a structurally valid string does not name a real
    instant, e.g. "20140231" (February 31).
    """

    kind = ErrorKind.UNPARSABLE_INSTANT


__all__ = [
    "ErrorKind",
    "IsonormError",
    "InvalidFormat",
    "InvalidLength",
    "InvalidComponent",
    "DuplicateUnit",
    "UnorderedUnit",
    "UnknownRule",
    "UnparsableInstant",
]
