"""Unit tests for :func:`nlcep.temporal.find_datetime`."""

from __future__ import annotations

from datetime import date, datetime, time, timezone

import pytest

from nlcep.exceptions import AmbiguousTimeError, InvalidTimeError
from nlcep.temporal import DateTimeMatch, find_datetime


def _at(year: int, month: int, day: int) -> datetime:
    """Noon UTC on the given day."""
    return datetime(year, month, day, 12, tzinfo=timezone.utc)


class TestFindDatetimeDateOnly:
    """Inputs with a date but no time."""

    def test_full_date(self) -> None:
        """A full numeric date spans the whole input."""
        match = find_datetime("21.11.2004", _at(2024, 6, 1))

        assert match == DateTimeMatch(date(2004, 11, 21), None, 0, 10)

    def test_birthday(self) -> None:
        """Year-less date after the reference month stays in this year."""
        match = find_datetime("John's birthday 18.11.", _at(2024, 6, 1))

        assert match == DateTimeMatch(date(2024, 11, 18), None, 16, 22)

    def test_datetime_defaults_to_midnight(self) -> None:
        """``datetime()`` uses midnight when there is no time."""
        match = find_datetime("21.11.2004", _at(2024, 6, 1))

        assert match is not None
        assert match.datetime() == datetime(2004, 11, 21, 0, 0)


class TestFindDatetimeWithTime:
    """Inputs with a date followed by a time."""

    @pytest.mark.parametrize(
        ("text", "expected_time", "end"),
        [
            ("22.9.1999 11:00", time(11, 0), 15),
            ("22.9.1999 11", time(11, 0), 12),
        ],
    )
    def test_full_date_and_time(self, text: str, expected_time: time, end: int) -> None:
        """The range extends over the time token."""
        match = find_datetime(text, _at(2024, 6, 1))

        assert match == DateTimeMatch(date(1999, 9, 22), expected_time, 0, end)

    def test_year_less_with_hour(self) -> None:
        """``22.9. 11`` is 22 September this year at 11:00."""
        match = find_datetime("22.9. 11", _at(2024, 6, 1))

        assert match == DateTimeMatch(date(2024, 9, 22), time(11, 0), 0, 8)

    def test_year_rolls_over(self) -> None:
        """January resolves to next year when the reference is June."""
        match = find_datetime("22.1. 11", _at(2000, 6, 1))

        assert match == DateTimeMatch(date(2001, 1, 22), time(11, 0), 0, 8)

    def test_tomorrow_with_seconds(self) -> None:
        """Relative keyword followed by ``H:M:S``."""
        match = find_datetime("tomorrow 0:30:12", _at(2000, 1, 2))

        assert match == DateTimeMatch(date(2000, 1, 3), time(0, 30, 12), 0, 16)

    def test_next_weekday_with_seconds(self) -> None:
        """Two-word phrase followed by a time."""
        match = find_datetime("next monday 0:30:12", _at(2024, 12, 8))

        assert match == DateTimeMatch(date(2024, 12, 9), time(0, 30, 12), 0, 19)

    def test_time_and_location(self) -> None:
        """The range stops right after the time token."""
        text = "Meeting about Q3 quotas tomorrow 11:00, A769"
        match = find_datetime(text, _at(2024, 6, 1))

        assert match == DateTimeMatch(date(2024, 6, 2), time(11, 0), 24, 38)
        assert text[match.start : match.end] == "tomorrow 11:00"
        assert text[match.end :] == ", A769"

    def test_range_never_exceeds_input(self) -> None:
        """Extra spaces before the time cannot push the end past the input."""
        text = "Lunch today  12:00"
        match = find_datetime(text, _at(2024, 6, 1))

        assert match is not None
        assert match.time == time(12, 0)
        assert match.start == 6
        assert match.end == len(text)

    def test_datetime_combines_date_and_time(self) -> None:
        """``datetime()`` joins the date and the time."""
        match = find_datetime("tomorrow 0:30:12", _at(2000, 1, 2))

        assert match is not None
        assert match.datetime() == datetime(2000, 1, 3, 0, 30, 12)


class TestFindDatetimeNone:
    """Inputs without a date."""

    @pytest.mark.parametrize(
        "text",
        ["", "Meet Saara @ Local Library", "John's birthday", "Standup 10:00"],
    )
    def test_no_date(self, text: str) -> None:
        """No date means no match, even when a time is present."""
        assert find_datetime(text, _at(2024, 6, 1)) is None


class TestFindDatetimeErrors:
    """Recognised but invalid expressions raise instead of returning None."""

    def test_invalid_date(self) -> None:
        """30 February is invalid."""
        with pytest.raises(InvalidTimeError):
            find_datetime("Dentist 30.2. 10:00", _at(2024, 6, 1))

    def test_invalid_time(self) -> None:
        """Hour 25 is invalid."""
        with pytest.raises(InvalidTimeError):
            find_datetime("Standup tomorrow 25:00", _at(2024, 6, 1))

    def test_year_less_date_past_last_year(self) -> None:
        """Rolling a year-less date past year 9999 is ambiguous, not invalid."""
        with pytest.raises(AmbiguousTimeError):
            find_datetime("Party 1.1.", datetime(9999, 6, 1, 12, tzinfo=timezone.utc))

    def test_relative_overflow(self) -> None:
        """Yesterday of the minimum date is ambiguous."""
        with pytest.raises(AmbiguousTimeError):
            find_datetime("Party yesterday", datetime(1, 1, 1, tzinfo=timezone.utc))


class TestFindDatetimeProperties:
    """Offsets for any prefix followed by a date token."""

    @pytest.mark.parametrize("prefix", ["a", "Team sync", "Kahvit  Liisan kanssa", "x,y"])
    @pytest.mark.parametrize("token", ["18.11.", "3.4.2025", "tomorrow", "next friday"])
    def test_start_is_token_offset(self, prefix: str, token: str) -> None:
        """The range starts where the date token starts."""
        text = f"{prefix} {token}"
        match = find_datetime(text, _at(2024, 6, 1))

        assert match is not None
        assert match.start == text.index(token)
        assert match.end == len(text)
