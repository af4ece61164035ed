"""Internal utilities for Isonorm.

This module contains private implementation details:
    - Constants (bounds, field widths, engine formats)
    - Component range validators

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isonorm._internal.validation import (
    validate_day,
    validate_hour,
    validate_minute,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_hour",
    "validate_minute",
    "validate_month",
    "validate_year",
]
