"""Clock-time tokens: ``H``, ``H:M`` and ``H:M:S``.

Parsing only checks that each component is a small signed integer;
whether it is a real time of day is decided later by
:func:`nlcep.temporal.resolve.resolve_time`.
"""

from __future__ import annotations

from dataclasses import dataclass

from nlcep.temporal.scanning import (
    TIME_DELIMITERS,
    count_leading_spaces,
    iter_words,
    parse_small_int,
)


@dataclass(frozen=True)
class TimeStructured:
    """A numeric clock time as written.

    ``minute`` is ``None`` for the bare ``H`` form and ``second`` is
    ``None`` unless the ``H:M:S`` form was used.
    """

    hour: int
    minute: int | None = None
    second: int | None = None

    @classmethod
    def parse(cls, word: str) -> TimeStructured | None:
        """Parse a single word, returning ``None`` if it is not a time.

        Empty minute or second segments end the token: ``"11:"`` is the
        hour 11, not 11:00 with an explicit zero.  Segments past the
        seconds are ignored.
        """
        segments = word.split(":")
        hour = parse_small_int(segments[0], 8)
        if hour is None:
            return None

        if len(segments) < 2 or not segments[1]:
            return cls(hour)
        minute = parse_small_int(segments[1], 8)
        if minute is None:
            return None

        if len(segments) < 3 or not segments[2]:
            return cls(hour, minute)
        second = parse_small_int(segments[2], 8)
        if second is None:
            return None

        return cls(hour, minute, second)


# Only one time grammar exists so far.
TimeUnit = TimeStructured


def find_time(text: str) -> tuple[TimeUnit, int, int] | None:
    """Find the first clock time in the text following a date.

    Words are separated by spaces, commas, ``@`` and ``-``.  The reported
    offsets start one column early when *text* has leading spaces, since
    the date scanner already consumed the separator that precedes them.

    Args:
        text: The remainder of the input after the date expression.

    Returns:
        ``(unit, start, end)`` relative to *text*, or ``None`` when no
        word is a clock time.
    """
    offset = max(count_leading_spaces(text) - 1, 0)
    for word, start, end in iter_words(text, TIME_DELIMITERS, offset):
        unit = TimeStructured.parse(word)
        if unit is not None:
            return unit, start, end
    return None
