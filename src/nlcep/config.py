"""Configuration loading for nlcep.

Reads settings from environment variables (with .env support via
python-dotenv).  Nothing is required: the parser works with defaults, and
the settings only affect the command-line entry point and the "now" used
when a caller does not supply a reference instant.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Settings loaded from environment variables.

    Attributes:
        log_level: Logging level name (default ``"INFO"``).
        timezone: IANA timezone used to sample the current time when no
            reference instant is given (default ``"UTC"``).
    """

    log_level: str = "INFO"
    timezone: str = "UTC"


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.  ``NLCEP_LOG_LEVEL`` and
    ``NLCEP_TIMEZONE`` override the defaults when set and non-blank.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``NLCEP_LOG_LEVEL`` is not a logging level name.
    """
    load_dotenv()

    values: dict[str, str] = {}

    log_level = os.environ.get("NLCEP_LOG_LEVEL", "").strip()
    timezone = os.environ.get("NLCEP_TIMEZONE", "").strip()

    if log_level:
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            raise ConfigError(f"Invalid NLCEP_LOG_LEVEL: {log_level!r}")
        values["log_level"] = log_level.upper()
    if timezone:
        values["timezone"] = timezone

    return Settings(**values)


def resolve_timezone(name: str) -> ZoneInfo:
    """Look up an IANA timezone by name.

    Args:
        name: Timezone name such as ``"Europe/Helsinki"``.

    Returns:
        The matching :class:`zoneinfo.ZoneInfo`.

    Raises:
        ConfigError: If the timezone is unknown.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone: {name!r}") from exc
