"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime, time, timedelta


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def start_of_day(day: date) -> datetime:
    """Return 00:00:00.000000 UTC of the given day."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def end_of_day(day: date) -> datetime:
    """Return 23:59:59.999999 UTC of the given day."""
    return datetime.combine(day, time.max, tzinfo=UTC)


def start_of_week(day: date) -> date:
    """Return the Monday of the week containing day."""
    return day - timedelta(days=day.weekday())


def week_of_month(day: date) -> int:
    """
    Return the 1-based week of the month, with weeks starting on Sunday.

    The first (possibly partial) week of the month is week 1; e.g. if the
    1st is a Saturday, the 2nd (Sunday) is already week 2.
    """
    first = day.replace(day=1)
    # date.weekday(): Monday=0 ... Sunday=6; shift so Sunday=0
    offset = (first.weekday() + 1) % 7
    return (day.day + offset - 1) // 7 + 1


def day_id(dt: datetime) -> str:
    """Return the UTC calendar day of dt as YYYY-MM-DD (used as a document ID)."""
    return ensure_utc(dt).date().isoformat()
