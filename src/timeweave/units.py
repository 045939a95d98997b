"""Conversions between the numeric seconds used internally and datetime types."""

from datetime import datetime, timedelta, timezone


def as_seconds(value: float | timedelta) -> float:
    """Return a duration in seconds."""
    if isinstance(value, timedelta):
        return value.total_seconds()
    return value


def as_timestamp(value: float | datetime) -> float:
    """Return a point in time as a POSIX timestamp.

    Naive datetimes are taken to be in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    return value


def as_datetime(timestamp: float) -> datetime:
    """Return an aware UTC datetime for a POSIX timestamp."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)
