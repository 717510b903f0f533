"""Turn recognised date and time tokens into calendar values.

Resolution is relative to an explicit reference instant; nothing here
reads the clock.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from nlcep.exceptions import AmbiguousTimeError, InvalidTimeError
from nlcep.temporal.dates import DateMd, DateRelative, DateUnit, DateYmd
from nlcep.temporal.keywords import RelativeDay
from nlcep.temporal.times import TimeUnit

_DAY_OFFSETS: dict[RelativeDay, int] = {
    RelativeDay.YESTERDAY: -1,
    RelativeDay.TODAY: 0,
    RelativeDay.TOMORROW: 1,
    RelativeDay.OVERMORROW: 2,
}


def _calendar_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidTimeError(f"Invalid date: {day}.{month}.{year}") from exc


def _shift(today: date, days: int) -> date:
    try:
        return today + timedelta(days=days)
    except OverflowError as exc:
        raise AmbiguousTimeError(f"Date out of range: {today} {days:+d} days") from exc


def _resolve_relative(unit: DateRelative, today: date) -> date:
    if unit.kind in _DAY_OFFSETS:
        return _shift(today, _DAY_OFFSETS[unit.kind])

    if unit.weekday is None:
        raise AmbiguousTimeError(f"Missing weekday for {unit.kind.value}")

    if unit.kind is RelativeDay.NEXT_WEEKDAY:
        return _shift(today, (unit.weekday - today.weekday()) % 7 or 7)
    return _shift(today, -((today.weekday() - unit.weekday) % 7 or 7))


def resolve_date(unit: DateUnit, now: datetime) -> date:
    """Resolve a date token against the reference instant *now*.

    Year-less dates resolve to their next occurrence: the current year,
    unless the month and day are already behind *now*, in which case the
    following year.  A date equal to today stays in the current year.

    ``next <weekday>`` and ``last <weekday>`` never resolve to today,
    even when today is that weekday.

    Args:
        unit: A token returned by :func:`~nlcep.temporal.dates.find_date`.
        now: The reference instant; its own wall-clock date is used.

    Returns:
        The resolved calendar date.

    Raises:
        InvalidTimeError: If a numeric date is not a real calendar date.
        AmbiguousTimeError: If relative arithmetic leaves the supported
            calendar range, including a year-less date that would
            roll over past the last supported year.
    """
    today = now.date()

    if isinstance(unit, DateYmd):
        return _calendar_date(unit.year, unit.month, unit.day)

    if isinstance(unit, DateMd):
        if (unit.month, unit.day) < (today.month, today.day):
            if today.year == date.max.year:
                raise AmbiguousTimeError(
                    f"No year after {today.year} for {unit.day}.{unit.month}."
                )
            return _calendar_date(today.year + 1, unit.month, unit.day)
        return _calendar_date(today.year, unit.month, unit.day)

    return _resolve_relative(unit, today)


def resolve_time(unit: TimeUnit) -> time:
    """Resolve a clock-time token into a time of day.

    Missing minutes and seconds are zero.

    Raises:
        InvalidTimeError: If the hour is outside 0-23 or the minute or
            second outside 0-59.
    """
    minute = unit.minute or 0
    second = unit.second or 0
    try:
        return time(unit.hour, minute, second)
    except ValueError as exc:
        raise InvalidTimeError(
            f"Invalid time: {unit.hour}:{minute:02d}:{second:02d}"
        ) from exc
