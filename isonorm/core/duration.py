"""Duration parsing for the compact ``nYnMnDnH`` notation.

A duration is a run of (digit, unit) pairs, for example "1Y5M4D3H".
Units come from Y (years), M (months), D (days) and H (hours), in that
order; any of them may be left out but none may repeat. Letters are
case-insensitive.

Each unit takes a single-digit magnitude, so "10Y" is rejected: the
grammar reads the string two characters at a time.

Examples:
    >>> d = parse_duration("1Y5M4D3H")
    >>> d[DurationUnit.YEAR], d[DurationUnit.HOUR]
    (1, 3)
    >>> parse_duration("2d")
    DurationMap(D=2)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum

from dateutil.relativedelta import relativedelta

from isonorm.errors import DuplicateUnit, InvalidFormat, InvalidLength, UnorderedUnit
from isonorm.rules import RuleName, get_rule

_TOKEN_WIDTH = 2
_EXAMPLE = "nYnMnDnH (1Y5M4D3H)"


class DurationUnit(Enum):
    """Units accepted in a duration, declared in their required order."""

    YEAR = "Y"
    MONTH = "M"
    DAY = "D"
    HOUR = "H"

    @property
    def position(self) -> int:
        """Index of this unit in the Y, M, D, H ordering."""
        return _UNIT_ORDER.index(self)

    @property
    def relativedelta_field(self) -> str:
        return f"{self.name.lower()}s"


_UNIT_ORDER: tuple[DurationUnit, ...] = tuple(DurationUnit)
_UNIT_LETTERS = "".join(unit.value for unit in _UNIT_ORDER)


class DurationMap(Mapping[DurationUnit, int]):
    """Immutable mapping from DurationUnit to a non-negative magnitude.

    Iteration always follows the Y, M, D, H order regardless of the
    order the entries were supplied in.

    Examples:
        >>> d = DurationMap({DurationUnit.DAY: 4, DurationUnit.YEAR: 1})
        >>> list(d)
        [<DurationUnit.YEAR: 'Y'>, <DurationUnit.DAY: 'D'>]
        >>> d.to_relativedelta()
        relativedelta(years=+1, days=+4)
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[DurationUnit, int] | None = None) -> None:
        items = dict(items or {})
        for unit, magnitude in items.items():
            if not isinstance(unit, DurationUnit):
                raise TypeError(f"expected DurationUnit key, got {type(unit).__name__}")
            if isinstance(magnitude, bool) or not isinstance(magnitude, int):
                raise TypeError(
                    f"{unit.name.lower()} magnitude must be an integer, "
                    f"got {type(magnitude).__name__}"
                )
            if magnitude < 0:
                raise ValueError(f"{unit.name.lower()} magnitude must be >= 0, got {magnitude}")
        self._items: dict[DurationUnit, int] = {
            unit: items[unit] for unit in _UNIT_ORDER if unit in items
        }

    def __getitem__(self, unit: DurationUnit) -> int:
        return self._items[unit]

    def __iter__(self) -> Iterator[DurationUnit]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        fields = ", ".join(f"{unit.value}={n}" for unit, n in self._items.items())
        return f"DurationMap({fields})"

    def to_relativedelta(self) -> relativedelta:
        """Return the equivalent dateutil relativedelta."""
        return relativedelta(
            **{unit.relativedelta_field: n for unit, n in self._items.items()}
        )


def parse_duration(raw: str) -> DurationMap:
    """Parse a compact duration string into a DurationMap.

    Args:
        raw: A string such as "1Y5M4D3H", "2M" or "0h".

    Returns:
        The units and their magnitudes.

    Raises:
        InvalidFormat: If raw has characters other than digits and
            YMDH, or a pair is not a digit followed by a unit letter.
        InvalidLength: If raw has an odd number of characters.
        DuplicateUnit: If a unit appears more than once.
        UnorderedUnit: If the units are not in Y, M, D, H order.
    """
    s = raw.upper()
    rule = get_rule(RuleName.NUMBERS_AND_YMDH_LETTERS)
    if not rule.matches(s):
        raise InvalidFormat(rule.message(raw), raw)

    if len(s) % _TOKEN_WIDTH:
        raise InvalidLength(
            f"Duration pattern must have an even length following {_EXAMPLE}, "
            f"each unit takes one digit. You provided: {raw}",
            raw,
        )

    tokens = [s[i : i + _TOKEN_WIDTH] for i in range(0, len(s), _TOKEN_WIDTH)]
    for digit, letter in tokens:
        if not digit.isdigit() or letter not in _UNIT_LETTERS:
            raise InvalidFormat(
                f"Duration pattern is a sequence of digit/unit pairs {_EXAMPLE}. "
                f"You provided: {raw}",
                raw,
            )

    units = [DurationUnit(letter) for _, letter in tokens]
    if len(set(units)) < len(units):
        raise DuplicateUnit(
            f"Duration value can't contain duplicated units following {_EXAMPLE}. "
            f"You provided: {raw}",
            raw,
        )

    positions = [unit.position for unit in units]
    if positions != sorted(positions):
        raise UnorderedUnit(
            f"Duration pattern is an ordered pattern {_EXAMPLE}. You provided: {raw}",
            raw,
        )

    return DurationMap({unit: int(digit) for unit, (digit, _) in zip(units, tokens)})


__all__ = ["DurationUnit", "DurationMap", "parse_duration"]
