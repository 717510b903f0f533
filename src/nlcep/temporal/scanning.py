"""Word splitting and small-integer helpers shared by the scanners.

Both scanners walk the input one delimiter-separated word at a time and
track the character offset of each word.  Offsets advance by the word
length plus one for the delimiter, so consecutive delimiters produce
empty words that still move the offset forward.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

DATE_DELIMITERS = re.compile(r"[ ,]")
TIME_DELIMITERS = re.compile(r"[ ,@\-]")

_SIGNED_DIGITS_RE = re.compile(r"[+-]?[0-9]+")


def iter_words(
    text: str,
    delimiters: re.Pattern[str],
    offset: int = 0,
) -> Iterator[tuple[str, int, int]]:
    """Yield ``(word, start, end)`` for every word of *text*.

    Args:
        text: The string to split.
        delimiters: Compiled pattern matching a single delimiter character.
        offset: Offset reported for the first word.

    Yields:
        Each word, possibly empty, with its ``[start, end)`` range.
    """
    start = offset
    for word in delimiters.split(text):
        end = start + len(word)
        yield word, start, end
        start = end + 1


def count_leading_spaces(text: str) -> int:
    """Return the number of space characters at the start of *text*."""
    return len(text) - len(text.lstrip(" "))


def parse_small_int(text: str, bits: int) -> int | None:
    """Parse *text* as a signed integer that fits in *bits* bits.

    Only ASCII digits with an optional leading sign are accepted; no
    surrounding whitespace, underscores or other numerals.

    Args:
        text: The candidate token segment.
        bits: Width of the signed integer, e.g. ``8`` or ``16``.

    Returns:
        The parsed value, or ``None`` if *text* is not a number in range.
    """
    if not _SIGNED_DIGITS_RE.fullmatch(text):
        return None
    value = int(text)
    limit = 1 << (bits - 1)
    if -limit <= value < limit:
        return value
    return None
