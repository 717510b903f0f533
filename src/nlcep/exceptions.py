"""Custom exceptions for the nlcep parser.

Every failure that can occur while turning free-form text into a
:class:`~nlcep.event.NewEvent` is a direct subclass of
:class:`EventParseError`.  The hierarchy is intentionally flat::

    EventParseError
    +-- MissingTimeError        (no date expression anywhere in the text)
    +-- InvalidTimeError        (date/time token failed range validation)
    +-- AmbiguousTimeError      (relative date arithmetic overflowed)
    +-- MissingSummaryError     (nothing precedes the date expression)
    +-- AmbiguousDurationError  (reserved, never raised)

A word that simply does not match any grammar is *not* an error; the
scanners report it by returning ``None``.
"""

from __future__ import annotations


class EventParseError(Exception):
    """Base exception for all event parsing failures.

    Subclasses provide a short :attr:`default_message`, used when no
    more specific message is given.
    """

    default_message = "Event could not be parsed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingTimeError(EventParseError):
    """Raised when no temporal expression could be found in the text.

    Recoverable: the caller may retry with different input.
    """

    default_message = "Missing time"


class InvalidTimeError(EventParseError):
    """Raised when a structured date or time is out of range.

    Examples are hour 25, day 32, month 13 or February 30th.
    """

    default_message = "Invalid time"


class AmbiguousTimeError(EventParseError):
    """Raised when relative date arithmetic cannot produce a definite date."""

    default_message = "Ambiguous time"


class MissingSummaryError(EventParseError):
    """Raised when the text contains a valid date but no summary before it."""

    default_message = "Missing summary"


class AmbiguousDurationError(EventParseError):
    """Reserved for duration parsing, which is not implemented."""

    default_message = "Ambiguous duration"
