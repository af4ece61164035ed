"""Core value types for Isonorm.

Types:
    DurationUnit: The Y, M, D, H units of a compact duration.
    DurationMap: Parsed duration, unit to magnitude.
"""

from __future__ import annotations

from isonorm.core.duration import DurationMap, DurationUnit, parse_duration

__all__: list[str] = ["DurationMap", "DurationUnit", "parse_duration"]
