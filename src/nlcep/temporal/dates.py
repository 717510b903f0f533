"""Date tokens and the date scanner.

Three grammars compete for every word, tried in this order:

1. Multi-word relative phrases that end at the current word
   ("next friday", "viime maanantaina", "day after tomorrow").
2. Single-word relative keywords ("tomorrow", "huomenna").
3. Numeric dates written day first: ``D.M.`` or ``D.M.Y``.

The first grammar to recognise anything wins and scanning stops there.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from nlcep.temporal.keywords import (
    DAY_IDIOMS,
    DAY_KEYWORDS,
    MAX_PHRASE_WORDS,
    WEEKDAY_NAMES,
    WEEKDAY_NOUNS,
    RelativeDay,
    RelativeLanguage,
    Weekday,
)
from nlcep.temporal.scanning import DATE_DELIMITERS, iter_words, parse_small_int

# ---------------------------------------------------------------------------
# Date units
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DateRelative:
    """A date relative to the reference instant.

    Attributes:
        kind: Which relative expression was used.
        language: Language of the matched keyword, kept for traceability.
        weekday: Target weekday for ``NEXT_WEEKDAY`` / ``LAST_WEEKDAY``,
            ``None`` for every other kind.
    """

    kind: RelativeDay
    language: RelativeLanguage
    weekday: Weekday | None = None


@dataclass(frozen=True)
class DateYmd:
    """A numeric date with an explicit year, e.g. ``18.11.2004``.

    Fields are not validated as a calendar date yet.
    """

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class DateMd:
    """A numeric date without a year, e.g. ``18.11.``."""

    month: int
    day: int


DateStructured = Union[DateYmd, DateMd]
DateUnit = Union[DateYmd, DateMd, DateRelative]


# ---------------------------------------------------------------------------
# Grammars
# ---------------------------------------------------------------------------


def parse_structured(word: str) -> DateStructured | None:
    """Parse ``D.M.`` / ``D.M`` / ``D.M.Y`` into a structured date.

    The first segment is the day and the second the month.  A non-empty
    third segment is the year; anything after it is ignored.
    """
    segments = word.split(".")
    if len(segments) < 2:
        return None
    day = parse_small_int(segments[0], 8)
    month = parse_small_int(segments[1], 8)
    if day is None or month is None:
        return None

    if len(segments) > 2 and segments[2]:
        year = parse_small_int(segments[2], 16)
        if year is None:
            return None
        return DateYmd(year, month, day)
    return DateMd(month, day)


def parse_relative_word(word: str) -> DateRelative | None:
    """Match a single word against the relative day keywords."""
    lowered = word.lower()
    for language, kind, keyword in DAY_KEYWORDS:
        if lowered == keyword:
            return DateRelative(kind, language)
    return None


def parse_relative_phrase(words: Sequence[str]) -> tuple[DateRelative, int] | None:
    """Match the trailing words of *words* against the phrase templates.

    Args:
        words: Words seen so far, oldest first.  Only the last few are
            inspected.

    Returns:
        The recognised date and the number of trailing words it consumed,
        or ``None``.
    """
    lowered = [word.lower() for word in words]

    if len(lowered) >= 2:
        noun, name = lowered[-2], lowered[-1]
        for language, kind, keyword in WEEKDAY_NOUNS:
            if noun != keyword:
                continue
            for name_language, weekday, weekday_name in WEEKDAY_NAMES:
                if name_language is language and name == weekday_name:
                    return DateRelative(kind, language, weekday), 2

    for language, kind, idiom in DAY_IDIOMS:
        if len(lowered) >= len(idiom) and tuple(lowered[-len(idiom):]) == idiom:
            return DateRelative(kind, language), len(idiom)

    return None


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


def find_date(text: str) -> tuple[DateUnit, int, int] | None:
    """Find the first date expression in *text*.

    Words are separated by spaces and commas.  For multi-word phrases
    the start offset is that of the phrase's first word.

    Args:
        text: The full input string.

    Returns:
        ``(unit, start, end)`` as indices into *text*, or ``None`` if no
        word or phrase is recognised.
    """
    window: deque[tuple[str, int]] = deque(maxlen=MAX_PHRASE_WORDS)

    for word, start, end in iter_words(text, DATE_DELIMITERS):
        if not word:
            continue
        window.append((word, start))

        phrase = parse_relative_phrase([seen for seen, _ in window])
        if phrase is not None:
            unit, consumed = phrase
            return unit, window[-consumed][1], end

        relative = parse_relative_word(word)
        if relative is not None:
            return relative, start, end

        structured = parse_structured(word)
        if structured is not None:
            return structured, start, end

    return None
