"""Date and time recognition for free-form event text.

The entry point is :func:`find_datetime`.  It looks for a date first and
only then for a clock time in the text that follows it, so a time on its
own is never reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from nlcep.temporal.dates import (
    DateMd,
    DateRelative,
    DateStructured,
    DateUnit,
    DateYmd,
    find_date,
)
from nlcep.temporal.keywords import RelativeDay, RelativeLanguage, Weekday
from nlcep.temporal.resolve import resolve_date, resolve_time
from nlcep.temporal.times import TimeStructured, TimeUnit, find_time


@dataclass(frozen=True)
class DateTimeMatch:
    """A resolved date expression and where it was found.

    Attributes:
        date: The resolved calendar date.
        time: The resolved time of day, or ``None`` for all-day events.
        start: Index of the first character of the expression.
        end: Index one past the last consumed character.
    """

    date: date
    time: time | None
    start: int
    end: int

    def datetime(self) -> datetime:
        """Combine date and time, using midnight when there is no time."""
        return datetime.combine(self.date, self.time or time())


def find_datetime(text: str, now: datetime) -> DateTimeMatch | None:
    """Find and resolve the first date and optional time in *text*.

    Args:
        text: Free-form event text, e.g. ``"Lunch tomorrow 12:30"``.
        now: Reference instant for relative dates and year inference.

    Returns:
        The match, or ``None`` if *text* contains no date expression.

    Raises:
        InvalidTimeError: If the date or time is out of range.
        AmbiguousTimeError: If a relative date cannot be computed.
    """
    found = find_date(text)
    if found is None:
        return None
    date_unit, start, end = found

    resolved_date = resolve_date(date_unit, now)
    resolved_time = None

    found_time = find_time(text[end:])
    if found_time is not None:
        time_unit, _time_start, time_end = found_time
        resolved_time = resolve_time(time_unit)
        # time_end may overshoot by the extra leading spaces find_time counts;
        # the cap only keeps end <= len(text), the offsets are otherwise unchanged.
        end = min(end + time_end, len(text))

    return DateTimeMatch(resolved_date, resolved_time, start, end)


__all__ = [
    "DateMd",
    "DateRelative",
    "DateStructured",
    "DateTimeMatch",
    "DateUnit",
    "DateYmd",
    "RelativeDay",
    "RelativeLanguage",
    "TimeStructured",
    "TimeUnit",
    "Weekday",
    "find_date",
    "find_datetime",
    "find_time",
    "resolve_date",
    "resolve_time",
]
