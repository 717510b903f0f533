"""nlcep: natural language calendar event parser.

Turns short descriptions such as ``"John's birthday 18.11."`` or
``"Meeting about Q3 quotas tomorrow 11:00, A769"`` into a structured
event with a summary, date, optional time and optional location.
"""

from __future__ import annotations

from nlcep.event import NewEvent, parse_event
from nlcep.exceptions import (
    AmbiguousDurationError,
    AmbiguousTimeError,
    EventParseError,
    InvalidTimeError,
    MissingSummaryError,
    MissingTimeError,
)
from nlcep.temporal import DateTimeMatch, find_datetime

__version__ = "0.8.0"

__all__ = [
    "AmbiguousDurationError",
    "AmbiguousTimeError",
    "DateTimeMatch",
    "EventParseError",
    "InvalidTimeError",
    "MissingSummaryError",
    "MissingTimeError",
    "NewEvent",
    "find_datetime",
    "parse_event",
]
