"""Shared fixtures for nlcep tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime, timezone

import pytest


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all nlcep-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("nlcep.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("NLCEP_LOG_LEVEL", "NLCEP_TIMEZONE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def utc_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Resolve every timezone name in the CLI to UTC.

    Keeps CLI tests independent of the system timezone database.
    """
    monkeypatch.setattr("nlcep.__main__.resolve_timezone", lambda _name: timezone.utc)


@pytest.fixture()
def june_first() -> datetime:
    """Saturday 2024-06-01 at noon UTC."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
