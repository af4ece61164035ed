"""Arithmetic on instants.

Functions:
    apply_duration: Add a compact duration ("1Y5M4D3H") to an instant.
"""

from __future__ import annotations

from isonorm.arithmetic.duration_ops import apply_duration

__all__: list[str] = ["apply_duration"]
