"""Configuration for normalization.

NormalizeOptions bundles the few knobs the normalizers need. The clock
is injected so that the year upper bound (next year) can be pinned in
tests and in batch jobs that must not depend on the wall clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from isonorm import engine
from isonorm._internal.constants import MIN_YEAR


@dataclass(frozen=True)
class NormalizeOptions:
    """Configuration for date, time and offset normalization.

    Attributes:
        clock: Returns the current instant; only its year is used.
        min_year: Exclusive lower bound for year fields.
        allow_negative_zero_offset: If True, offsets such as "-00:00" are
            passed through as "-000000" instead of being rejected.

    Examples:
        >>> from datetime import datetime, timezone
        >>> opts = NormalizeOptions(clock=lambda: datetime(2020, 1, 1, tzinfo=timezone.utc))
        >>> opts.current_year()
        2020
    """

    clock: Callable[[], datetime] = engine.now
    min_year: int = MIN_YEAR
    allow_negative_zero_offset: bool = False

    def current_year(self) -> int:
        return engine.year(self.clock())


DEFAULT_OPTIONS = NormalizeOptions()


def resolve(options: NormalizeOptions | None) -> NormalizeOptions:
    return DEFAULT_OPTIONS if options is None else options


__all__ = ["NormalizeOptions", "DEFAULT_OPTIONS", "resolve"]
