"""Keyword tables for relative dates in the supported languages.

The tables are plain tuples of ``(tag, keyword)`` pairs and are never
mutated.  All keywords are lowercase; callers lowercase the input word
before comparing.
"""

from __future__ import annotations

import enum


class RelativeLanguage(enum.Enum):
    """Language a relative date keyword was written in."""

    ENGLISH = "en"
    FINNISH = "fi"


class Weekday(enum.IntEnum):
    """ISO weekday; values match :meth:`datetime.date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class RelativeDay(enum.Enum):
    """Tag of a relative date expression."""

    LAST_WEEKDAY = "last_weekday"
    YESTERDAY = "yesterday"
    TODAY = "today"
    TOMORROW = "tomorrow"
    OVERMORROW = "overmorrow"
    NEXT_WEEKDAY = "next_weekday"


# Single-word keywords.
DAY_KEYWORDS: tuple[tuple[RelativeLanguage, RelativeDay, str], ...] = (
    (RelativeLanguage.ENGLISH, RelativeDay.YESTERDAY, "yesterday"),
    (RelativeLanguage.ENGLISH, RelativeDay.TODAY, "today"),
    (RelativeLanguage.ENGLISH, RelativeDay.TOMORROW, "tomorrow"),
    (RelativeLanguage.ENGLISH, RelativeDay.OVERMORROW, "overmorrow"),
    (RelativeLanguage.FINNISH, RelativeDay.YESTERDAY, "eilen"),
    (RelativeLanguage.FINNISH, RelativeDay.TODAY, "tänään"),
    (RelativeLanguage.FINNISH, RelativeDay.TOMORROW, "huomenna"),
    (RelativeLanguage.FINNISH, RelativeDay.OVERMORROW, "ylihuomenna"),
)

# First word of "<noun> <weekday>" phrases.
WEEKDAY_NOUNS: tuple[tuple[RelativeLanguage, RelativeDay, str], ...] = (
    (RelativeLanguage.ENGLISH, RelativeDay.NEXT_WEEKDAY, "next"),
    (RelativeLanguage.ENGLISH, RelativeDay.LAST_WEEKDAY, "last"),
    (RelativeLanguage.FINNISH, RelativeDay.NEXT_WEEKDAY, "ensi"),
    (RelativeLanguage.FINNISH, RelativeDay.LAST_WEEKDAY, "viime"),
)

# Finnish names appear both in nominative and essive ("maanantaina") form.
WEEKDAY_NAMES: tuple[tuple[RelativeLanguage, Weekday, str], ...] = (
    (RelativeLanguage.ENGLISH, Weekday.MONDAY, "monday"),
    (RelativeLanguage.ENGLISH, Weekday.TUESDAY, "tuesday"),
    (RelativeLanguage.ENGLISH, Weekday.WEDNESDAY, "wednesday"),
    (RelativeLanguage.ENGLISH, Weekday.THURSDAY, "thursday"),
    (RelativeLanguage.ENGLISH, Weekday.FRIDAY, "friday"),
    (RelativeLanguage.ENGLISH, Weekday.SATURDAY, "saturday"),
    (RelativeLanguage.ENGLISH, Weekday.SUNDAY, "sunday"),
    (RelativeLanguage.FINNISH, Weekday.MONDAY, "maanantai"),
    (RelativeLanguage.FINNISH, Weekday.MONDAY, "maanantaina"),
    (RelativeLanguage.FINNISH, Weekday.TUESDAY, "tiistai"),
    (RelativeLanguage.FINNISH, Weekday.TUESDAY, "tiistaina"),
    (RelativeLanguage.FINNISH, Weekday.WEDNESDAY, "keskiviikko"),
    (RelativeLanguage.FINNISH, Weekday.WEDNESDAY, "keskiviikkona"),
    (RelativeLanguage.FINNISH, Weekday.THURSDAY, "torstai"),
    (RelativeLanguage.FINNISH, Weekday.THURSDAY, "torstaina"),
    (RelativeLanguage.FINNISH, Weekday.FRIDAY, "perjantai"),
    (RelativeLanguage.FINNISH, Weekday.FRIDAY, "perjantaina"),
    (RelativeLanguage.FINNISH, Weekday.SATURDAY, "lauantai"),
    (RelativeLanguage.FINNISH, Weekday.SATURDAY, "lauantaina"),
    (RelativeLanguage.FINNISH, Weekday.SUNDAY, "sunnuntai"),
    (RelativeLanguage.FINNISH, Weekday.SUNDAY, "sunnuntaina"),
)

# Fixed multi-word idioms.
DAY_IDIOMS: tuple[tuple[RelativeLanguage, RelativeDay, tuple[str, ...]], ...] = (
    (RelativeLanguage.ENGLISH, RelativeDay.OVERMORROW, ("day", "after", "tomorrow")),
)

# Longest phrase any template consumes.
MAX_PHRASE_WORDS = max(
    2,
    *(len(words) for _language, _kind, words in DAY_IDIOMS),
)
