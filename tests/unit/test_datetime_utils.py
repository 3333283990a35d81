"""Tests for the UTC date helpers used by cash boxes and reports."""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.shared.utils.datetime import (
    day_id,
    end_of_day,
    ensure_utc,
    start_of_day,
    start_of_week,
    week_of_month,
)


@pytest.mark.parametrize(
    ("day", "week"),
    [
        (date(2025, 3, 1), 1),  # Saturday
        (date(2025, 3, 2), 2),  # Sunday starts week 2
        (date(2025, 3, 8), 2),
        (date(2025, 3, 9), 3),
        (date(2025, 3, 31), 6),
        (date(2025, 6, 1), 1),  # month starting on Sunday
        (date(2025, 6, 7), 1),
        (date(2025, 6, 8), 2),
    ],
)
def test_week_of_month_starts_weeks_on_sunday(day: date, week: int) -> None:
    assert week_of_month(day) == week


def test_start_of_week_is_monday() -> None:
    assert start_of_week(date(2025, 3, 16)) == date(2025, 3, 10)
    assert start_of_week(date(2025, 3, 10)) == date(2025, 3, 10)


def test_day_bounds_are_utc() -> None:
    start = start_of_day(date(2025, 3, 10))
    end = end_of_day(date(2025, 3, 10))
    assert start.tzinfo is not None
    assert end - start < timedelta(days=1)
    assert end.date() == date(2025, 3, 10)


def test_day_id_uses_utc_calendar_day() -> None:
    bogota = timezone(timedelta(hours=-5))
    assert day_id(datetime(2025, 3, 10, 21, 0, tzinfo=bogota)) == "2025-03-11"


def test_ensure_utc_attaches_timezone_to_naive() -> None:
    assert ensure_utc(datetime(2025, 1, 1)).tzinfo is not None
    assert ensure_utc(None) is None
