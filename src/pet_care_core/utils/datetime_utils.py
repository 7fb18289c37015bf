"""
DateTime utilities for pet care records.

This module provides timezone-aware "now" helpers and the normalization used
for every date-typed request field: native ``date``/``datetime`` values and
ISO-8601 strings all end up as timezone-aware UTC datetimes.
"""

from datetime import date, datetime, time
from typing import Optional, Union
from zoneinfo import ZoneInfo

UTC = ZoneInfo("UTC")

DateInput = Union[datetime, date, str]


def get_current_utc() -> datetime:
    """Get the current UTC datetime."""
    return datetime.now(UTC)


def convert_timezone(dt: datetime, from_tz: str, to_tz: str) -> datetime:
    """Convert datetime from one timezone to another."""
    if dt.tzinfo is None:
        # Assume the datetime is in the from_tz
        dt = dt.replace(tzinfo=ZoneInfo(from_tz))
    elif dt.tzinfo != ZoneInfo(from_tz):
        dt = dt.astimezone(ZoneInfo(from_tz))

    return dt.astimezone(ZoneInfo(to_tz))


def to_utc(dt: datetime, source_tz: str = "UTC") -> datetime:
    """Convert a datetime to UTC, treating naive values as ``source_tz``."""
    return convert_timezone(dt, source_tz, "UTC")


def parse_date_input(value: Optional[DateInput]) -> Optional[datetime]:
    """
    Normalize a date-typed input to a timezone-aware UTC datetime.

    Args:
        value: A ``datetime``, a ``date`` (interpreted as midnight UTC), an
            ISO-8601 date or date-time string (a trailing ``Z`` is accepted),
            or None.

    Returns:
        The normalized datetime, or None when no value was given.

    Raises:
        ValueError: If a string is not valid ISO-8601, or the type is not
            supported.

    Example:
        >>> parse_date_input("2024-03-01T09:30:00Z")
        datetime.datetime(2024, 3, 1, 9, 30, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return to_utc(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)

    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            raise ValueError("Date must not be empty")
        try:
            parsed = datetime.fromisoformat(candidate.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(
                "Date must be in ISO format (e.g., '2024-01-15T10:00:00Z')"
            )
        return to_utc(parsed)

    raise ValueError(f"Unsupported date value of type {type(value).__name__}")


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to a naive datetime read back from storage.

    SQLite drops timezone information, so values loaded from it come back
    naive even though they were written as UTC.
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)
