"""Isonorm: validate and normalize ISO 8601-like date and time strings.

Isonorm turns dates, times, UTC offsets and timestamps written in basic
or extended ISO 8601 notation into a single canonical basic form, then
hands that form to the calendar engine to obtain an instant. Compact
durations ("1Y5M4D3H") can be parsed and added to instants.

Format Functions:
    normalize_date: "2014-11" -> "20141101"
    normalize_time: "05:35" -> "053500"
    extract_offset: "0535+05" -> ("0535", "+05")
    normalize_offset: "+05" -> "+050000"
    assemble_timestamp: "2014-11-01T05:35+05" -> "20141101T053500+050000"

Conversion:
    parse_instant: Normalize and parse a date or date-time string.
    to_basic: Render an instant in canonical basic form.

Durations:
    parse_duration: "1Y5M4D3H" -> DurationMap
    apply_duration: Add a duration to an instant.

Configuration:
    NormalizeOptions: Injected clock, year bound, offset policy.

Exceptions:
    IsonormError: Base exception
    InvalidFormat: Disallowed characters or structure
    InvalidLength: Wrong digit count
    InvalidComponent: Field out of range
    DuplicateUnit: Repeated duration unit
    UnorderedUnit: Duration units out of order
    UnknownRule: Unregistered pattern rule
    UnparsableInstant: Calendar engine rejected the value

Example:
    >>> from isonorm import assemble_timestamp, apply_duration, parse_instant
    >>> assemble_timestamp("20141101T053000+10")
    '20141101T053000+100000'
    >>> later = apply_duration("1D", parse_instant("2014-11-01"))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Format functions
from isonorm.format import (
    assemble_timestamp,
    extract_offset,
    normalize_date,
    normalize_offset,
    normalize_time,
)

# Conversion
from isonorm.convert import parse_instant, to_basic

# Durations
from isonorm.core import DurationMap, DurationUnit, parse_duration
from isonorm.arithmetic import apply_duration

# Configuration
from isonorm.options import NormalizeOptions

# Exceptions
from isonorm.errors import (
    DuplicateUnit,
    ErrorKind,
    InvalidComponent,
    InvalidFormat,
    InvalidLength,
    IsonormError,
    UnknownRule,
    UnorderedUnit,
    UnparsableInstant,
)

__all__: list[str] = [
    "__version__",
    # Format functions
    "normalize_date",
    "normalize_time",
    "extract_offset",
    "normalize_offset",
    "assemble_timestamp",
    # Conversion
    "parse_instant",
    "to_basic",
    # Durations
    "DurationMap",
    "DurationUnit",
    "parse_duration",
    "apply_duration",
    # Configuration
    "NormalizeOptions",
    # Exceptions
    "ErrorKind",
    "IsonormError",
    "InvalidFormat",
    "InvalidLength",
    "InvalidComponent",
    "DuplicateUnit",
    "UnorderedUnit",
    "UnknownRule",
    "UnparsableInstant",
]
