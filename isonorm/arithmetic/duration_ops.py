"""Applying durations to instants.

Each unit of a parsed duration is handed to the calendar engine's
matching "add N units" primitive, in Y, M, D, H order. Month and year
additions clamp to the end of the target month:

    2024-01-31 + 1M -> 2024-02-29
    2024-02-29 + 1Y -> 2025-02-28
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from isonorm import engine
from isonorm.core.duration import DurationMap, DurationUnit, parse_duration

logger = logging.getLogger(__name__)

_ADDERS: dict[DurationUnit, Callable[[datetime, int], datetime]] = {
    DurationUnit.YEAR: engine.add_years,
    DurationUnit.MONTH: engine.add_months,
    DurationUnit.DAY: engine.add_days,
    DurationUnit.HOUR: engine.add_hours,
}


def apply_duration(duration: str | DurationMap, instant: datetime) -> datetime:
    """Add a duration to an instant.

    Args:
        duration: A compact duration string ("1Y5M4D3H") or an already
            parsed DurationMap.
        instant: The instant to add to.

    Returns:
        A new instant offset by the duration. A zero duration returns an
        instant equal to the input.

    Raises:
        IsonormError: If duration is a string that fails to parse.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2014, 11, 1, 5, 30, tzinfo=timezone.utc)
        >>> apply_duration("1M2H", start).isoformat()
        '2014-12-01T07:30:00+00:00'
    """
    parsed = parse_duration(duration) if isinstance(duration, str) else duration
    result = instant
    for unit, magnitude in parsed.items():
        result = _ADDERS[unit](result, magnitude)
    logger.debug("applied %r to %s -> %s", parsed, instant, result)
    return result


__all__ = ["apply_duration"]
