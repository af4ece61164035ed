"""Tests for Isonorm package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_isonorm() -> None:
    """Import isonorm package succeeds."""
    import isonorm

    assert hasattr(isonorm, "__version__")
    assert isonorm.__version__ == "0.1.0"


def test_import_format_module() -> None:
    """Import isonorm.format submodule succeeds."""
    from isonorm import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import isonorm.convert submodule succeeds."""
    from isonorm import convert

    assert hasattr(convert, "__all__")


def test_import_core_module() -> None:
    """Import isonorm.core submodule succeeds."""
    from isonorm import core

    assert hasattr(core, "__all__")


def test_import_arithmetic_module() -> None:
    """Import isonorm.arithmetic submodule succeeds."""
    from isonorm import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_public_names_exported() -> None:
    """Every name in __all__ is an attribute of the package."""
    import isonorm

    for name in isonorm.__all__:
        assert hasattr(isonorm, name), name


def test_top_level_end_to_end() -> None:
    """The top-level API works without submodule imports."""
    import isonorm

    assert isonorm.assemble_timestamp("20141101T053000+10") == "20141101T053000+100000"
    assert isonorm.parse_duration("1Y5M4D3H") == {
        isonorm.DurationUnit.YEAR: 1,
        isonorm.DurationUnit.MONTH: 5,
        isonorm.DurationUnit.DAY: 4,
        isonorm.DurationUnit.HOUR: 3,
    }
