"""Assemble a calendar event from free-form text.

The text before the date expression becomes the summary and the text
after it, when introduced by ``@`` or ``,``, becomes the location::

    "Meeting about Q3 quotas tomorrow 11:00, A769"
     |______________________| |_________|  |__|
             summary            datetime   location
"""

from __future__ import annotations

import datetime as dt
import logging
import re

from pydantic import BaseModel, ConfigDict

from nlcep.config import load_settings, resolve_timezone
from nlcep.exceptions import MissingSummaryError, MissingTimeError
from nlcep.temporal import find_datetime

logger = logging.getLogger(__name__)

_LOCATION_START_RE = re.compile(r"\s*[@|, ]\s+.+")


class NewEvent(BaseModel):
    """A parsed calendar event.

    Attributes:
        summary: What the event is about.
        date: Day of the event.
        time: Start time, or ``None`` for an all-day event.
        location: Where the event takes place, if given.
        duration: Reserved for duration parsing; always ``None``.
    """

    model_config = ConfigDict(frozen=True)

    summary: str
    date: dt.date
    time: dt.time | None = None
    location: str | None = None
    duration: dt.timedelta | None = None

    def datetime(self) -> dt.datetime:
        """Return the start as a naive datetime, midnight for all-day events."""
        return dt.datetime.combine(self.date, self.time or dt.time())


def _current_time() -> dt.datetime:
    settings = load_settings()
    return dt.datetime.now(resolve_timezone(settings.timezone))


def parse_event(text: str, now: dt.datetime | None = None) -> NewEvent:
    """Parse free-form text such as ``"John's birthday 18.11."``.

    Args:
        text: The event description.
        now: Reference instant for relative dates.  Defaults to the
            current time in the configured timezone.

    Returns:
        The parsed :class:`NewEvent`.

    Raises:
        MissingTimeError: If *text* has no date expression.
        MissingSummaryError: If nothing precedes the date expression.
        InvalidTimeError: If the date or time is out of range.
        AmbiguousTimeError: If a relative date cannot be computed.
        nlcep.config.ConfigError: If *now* is omitted and the configured
            timezone is unknown.
    """
    if now is None:
        now = _current_time()

    match = find_datetime(text, now)
    if match is None:
        raise MissingTimeError("Could not parse a temporal expression")

    summary = text[: match.start].strip()
    if not summary:
        raise MissingSummaryError()

    location = None
    after = text[match.end :]
    if _LOCATION_START_RE.search(after):
        location = after.strip().lstrip("@,").lstrip()

    event = NewEvent(
        summary=summary,
        date=match.date,
        time=match.time,
        location=location,
    )
    logger.debug(
        "Parsed %r as %s (span %d-%d)",
        text,
        event.datetime().isoformat(),
        match.start,
        match.end,
    )
    return event
