"""Entry point for ``python -m nlcep``.

Parses an event description given on the command line and prints the
result.  All positional arguments are joined with single spaces, so the
description does not need quoting::

    python -m nlcep Dentist next tuesday 9:15 @ Main Street 4

Exit codes:
    0 -- The event was parsed.
    1 -- The text could not be parsed, or the configuration is invalid.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime

from nlcep.config import ConfigError, load_settings, resolve_timezone
from nlcep.event import parse_event
from nlcep.exceptions import EventParseError
from nlcep.log import get_logger, setup_logging
from nlcep.output import print_event

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="nlcep",
        description="Parse a natural language calendar event.",
    )
    parser.add_argument(
        "words",
        nargs="+",
        help="Event description, e.g. \"John's birthday 18.11.\".",
    )
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Reference instant in ISO 8601 format (default: current time).",
    )
    parser.add_argument(
        "--timezone",
        type=str,
        default=None,
        help="IANA timezone for the reference instant (default: NLCEP_TIMEZONE or UTC).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the event as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def _reference_instant(now: str | None, timezone: str) -> datetime:
    """Build the reference instant from ``--now`` and the timezone.

    A ``--now`` value without an offset is taken to be in *timezone*;
    one with an offset is converted to it.

    Raises:
        ConfigError: If *timezone* is unknown.
        ValueError: If *now* is not ISO 8601.
    """
    tz = resolve_timezone(timezone)
    if now is None:
        return datetime.now(tz)

    parsed = datetime.fromisoformat(now)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def main(argv: list[str] | None = None) -> int:
    """Run the nlcep CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None``.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        now = _reference_instant(args.now, args.timezone or settings.timezone)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValueError:
        print(f"Error: Invalid --now value: {args.now!r}", file=sys.stderr)
        return 1

    text = " ".join(args.words)
    logger.debug("Parsing %r relative to %s", text, now.isoformat())

    try:
        event = parse_event(text, now)
    except EventParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_event(event, as_json=args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
