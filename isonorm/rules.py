"""Named character-class rules for whole-string input validation.

Every public normalizer checks its raw input against one of a small,
fixed set of rules before looking at individual fields. A rule matches
only when the *entire* string consists of its allowed characters.

Rules:
    NUMBERS: digits only
    NUMBERS_AND_HYPHENS: dates such as 2014-12-30
    NUMBERS_AND_COLONS: times such as 12:59:25
    NUMBERS_COLONS_Z_SIGN: offsets such as Z, +05, -04:30
    NUMBERS_AND_YMDH_LETTERS: durations such as 1Y5M4D3H

Examples:
    >>> from isonorm.rules import RuleName, check_pattern
    >>> check_pattern(RuleName.NUMBERS, "2014")
    '2014'
    >>> check_pattern("numbers-and-hyphens", "2014-12-30")
    '2014-12-30'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from isonorm.errors import InvalidFormat, UnknownRule

MessageFn = Callable[[str], str]


class RuleName(Enum):
    """Names of the registered pattern rules."""

    NUMBERS = "numbers"
    NUMBERS_AND_HYPHENS = "numbers-and-hyphens"
    NUMBERS_AND_COLONS = "numbers-and-colons"
    NUMBERS_COLONS_Z_SIGN = "numbers-colons-Z-sign"
    NUMBERS_AND_YMDH_LETTERS = "numbers-and-YMDH-letters"


@dataclass(frozen=True)
class PatternRule:
    """A character-class rule with its error message template.

    Attributes:
        name: The rule's registry key.
        pattern: Compiled character-class regex.
        message: Builds the error message from the rejected value.
    """

    name: RuleName
    pattern: re.Pattern[str]
    message: MessageFn

    def matches(self, value: str) -> bool:
        """Return True if the whole of value satisfies the rule."""
        return self.pattern.fullmatch(value) is not None


RULES: Mapping[RuleName, PatternRule] = MappingProxyType(
    {
        RuleName.NUMBERS: PatternRule(
            RuleName.NUMBERS,
            re.compile(r"[0-9]+"),
            lambda v: f"You need to use only numbers. You provided: {v}",
        ),
        RuleName.NUMBERS_AND_HYPHENS: PatternRule(
            RuleName.NUMBERS_AND_HYPHENS,
            re.compile(r"[0-9-]+"),
            lambda v: (
                "In date format only numbers and hyphens are permitted, "
                f"example YYYY-MM-DD 2014-12-30. You provided: {v}"
            ),
        ),
        RuleName.NUMBERS_AND_COLONS: PatternRule(
            RuleName.NUMBERS_AND_COLONS,
            re.compile(r"[0-9:]+"),
            lambda v: (
                "In time format only numbers and colons are permitted, "
                f"example HH:MM:SS 12:59:25. You provided: {v}"
            ),
        ),
        RuleName.NUMBERS_COLONS_Z_SIGN: PatternRule(
            RuleName.NUMBERS_COLONS_Z_SIGN,
            re.compile(r"[Z0-9:+-]+"),
            lambda v: (
                "In time-zone format only the letter 'Z', signs, numbers and "
                f"colons are permitted, example +05:30. You provided: {v}"
            ),
        ),
        RuleName.NUMBERS_AND_YMDH_LETTERS: PatternRule(
            RuleName.NUMBERS_AND_YMDH_LETTERS,
            re.compile(r"[0-9YMDH]+"),
            lambda v: (
                "Duration pattern can only contain unsigned numbers and the "
                f"letters 'YMDH' as in nYnMnDnH (1Y5M4D3H). You provided: {v}"
            ),
        ),
    }
)


def get_rule(name: RuleName | str) -> PatternRule:
    """Look up a rule by enum member or by its string name.

    Raises:
        UnknownRule: If no rule is registered under name.
    """
    try:
        key = name if isinstance(name, RuleName) else RuleName(name)
    except ValueError:
        raise UnknownRule(f"unknown pattern rule: {name!r}", name) from None
    return RULES[key]


def check_pattern(
    name: RuleName | str,
    value: str,
    message: MessageFn | None = None,
) -> str:
    """Validate that value matches the named rule in full.

    Args:
        name: The rule to apply.
        value: The string to check.
        message: Optional override for the rule's message template.

    Returns:
        The value, unchanged.

    Raises:
        InvalidFormat: If value does not match the rule.
        UnknownRule: If name is not a registered rule.
    """
    rule = get_rule(name)
    if not rule.matches(value):
        build = message if message is not None else rule.message
        raise InvalidFormat(build(value), value)
    return value


__all__ = [
    "RuleName",
    "PatternRule",
    "RULES",
    "get_rule",
    "check_pattern",
]
