"""Tests for the pattern rule registry and check_pattern()."""

from __future__ import annotations

import pytest

from isonorm.errors import ErrorKind, InvalidFormat, UnknownRule
from isonorm.rules import RULES, PatternRule, RuleName, check_pattern, get_rule


class TestRegistry:
    """Tests for the RULES table."""

    def test_every_rule_name_registered(self) -> None:
        """Each RuleName has a rule."""
        assert set(RULES) == set(RuleName)

    def test_rule_names_match_keys(self) -> None:
        """A rule's name is the key it is registered under."""
        for name, rule in RULES.items():
            assert rule.name is name

    def test_registry_is_read_only(self) -> None:
        """The registry cannot be mutated."""
        with pytest.raises(TypeError):
            RULES[RuleName.NUMBERS] = RULES[RuleName.NUMBERS]  # type: ignore[index]

    def test_rules_are_frozen(self) -> None:
        """PatternRule instances are immutable."""
        rule = RULES[RuleName.NUMBERS]
        with pytest.raises(AttributeError):
            rule.name = RuleName.NUMBERS_AND_COLONS  # type: ignore[misc]


class TestGetRule:
    """Tests for get_rule()."""

    def test_lookup_by_enum(self) -> None:
        """Enum members resolve directly."""
        assert isinstance(get_rule(RuleName.NUMBERS), PatternRule)

    def test_lookup_by_string(self) -> None:
        """String names resolve to the same rule."""
        assert get_rule("numbers-and-hyphens") is RULES[RuleName.NUMBERS_AND_HYPHENS]

    def test_unknown_rule(self) -> None:
        """An unregistered name raises UnknownRule."""
        with pytest.raises(UnknownRule) as exc_info:
            get_rule("letters")
        assert exc_info.value.kind is ErrorKind.UNKNOWN_RULE
        assert exc_info.value.value == "letters"

    def test_unknown_rule_is_not_invalid_format(self) -> None:
        """UnknownRule is distinct from input format errors."""
        with pytest.raises(UnknownRule):
            check_pattern("no-such-rule", "123")
        assert not issubclass(UnknownRule, InvalidFormat)


class TestCheckPattern:
    """Tests for check_pattern()."""

    @pytest.mark.parametrize(
        "name,value",
        [
            (RuleName.NUMBERS, "20141230"),
            (RuleName.NUMBERS_AND_HYPHENS, "2014-12-30"),
            (RuleName.NUMBERS_AND_COLONS, "12:59:25"),
            (RuleName.NUMBERS_COLONS_Z_SIGN, "Z"),
            (RuleName.NUMBERS_COLONS_Z_SIGN, "+05:30"),
            (RuleName.NUMBERS_COLONS_Z_SIGN, "-0430"),
            (RuleName.NUMBERS_AND_YMDH_LETTERS, "1Y5M4D3H"),
        ],
    )
    def test_accepts_matching_value(self, name: RuleName, value: str) -> None:
        """A matching value is returned unchanged."""
        assert check_pattern(name, value) == value

    @pytest.mark.parametrize(
        "name,value",
        [
            (RuleName.NUMBERS, "2014-12"),
            (RuleName.NUMBERS, ""),
            (RuleName.NUMBERS_AND_HYPHENS, "2014/12/30"),
            (RuleName.NUMBERS_AND_COLONS, "12-59"),
            (RuleName.NUMBERS_COLONS_Z_SIGN, "UTC"),
            (RuleName.NUMBERS_AND_YMDH_LETTERS, "1W"),
        ],
    )
    def test_rejects_non_matching_value(self, name: RuleName, value: str) -> None:
        """A non-matching value raises InvalidFormat."""
        with pytest.raises(InvalidFormat):
            check_pattern(name, value)

    def test_whole_string_must_match(self) -> None:
        """A matching substring is not enough."""
        with pytest.raises(InvalidFormat):
            check_pattern(RuleName.NUMBERS, "2014x")
        with pytest.raises(InvalidFormat):
            check_pattern(RuleName.NUMBERS, "x2014")

    def test_non_ascii_digits_rejected(self) -> None:
        """Only ASCII digits count as numbers."""
        with pytest.raises(InvalidFormat):
            check_pattern(RuleName.NUMBERS, "٢٠١٤")

    def test_message_echoes_value(self) -> None:
        """The error message includes the rejected value."""
        with pytest.raises(InvalidFormat, match="2014/12/30") as exc_info:
            check_pattern(RuleName.NUMBERS_AND_HYPHENS, "2014/12/30")
        assert exc_info.value.value == "2014/12/30"
        assert "2014-12-30" in exc_info.value.message

    def test_custom_message(self) -> None:
        """A message override replaces the rule's template."""
        with pytest.raises(InvalidFormat, match="^custom abc$"):
            check_pattern(RuleName.NUMBERS, "abc", lambda v: f"custom {v}")
