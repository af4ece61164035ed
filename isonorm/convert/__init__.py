"""Conversion between strings and instants.

Functions:
    parse_instant: Normalize a raw date or date-time and parse it.
    to_basic: Render an instant in canonical basic form.
"""

from __future__ import annotations

from isonorm.convert.instant import parse_instant, to_basic

__all__: list[str] = ["parse_instant", "to_basic"]
