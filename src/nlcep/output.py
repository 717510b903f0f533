"""Console output for parsed events."""

from __future__ import annotations

import sys

from nlcep.event import NewEvent

_BANNER_WIDTH = 40
_SEPARATOR = "=" * _BANNER_WIDTH


def format_event(event: NewEvent) -> str:
    """Render a :class:`NewEvent` as an aligned block of fields.

    Args:
        event: The event to format.

    Returns:
        A multi-line string ready for console display.
    """
    lines = [
        _SEPARATOR,
        f"  Summary:  {event.summary}",
        f"  Date:     {event.date.strftime('%A %Y-%m-%d')}",
        f"  Time:     {event.time.isoformat() if event.time else 'all day'}",
    ]
    if event.location:
        lines.append(f"  Location: {event.location}")
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def print_event(event: NewEvent, as_json: bool = False) -> None:
    """Write *event* to stdout, either formatted or as JSON."""
    if as_json:
        sys.stdout.write(event.model_dump_json(indent=2) + "\n")
    else:
        sys.stdout.write(format_event(event) + "\n")
