"""Local calendar-day helpers.

Every "same day" comparison in carve-log uses the local calendar day:
midnight to midnight in the process's local time zone. Naive datetimes are
taken to already be local time; aware datetimes are converted first.
"""

from datetime import date, datetime, time


def local_datetime(value: datetime) -> datetime:
    """Return ``value`` as a naive datetime in local time."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def local_day(value: date | datetime) -> date:
    """Get the local calendar day a date or datetime falls on."""
    if isinstance(value, datetime):
        return local_datetime(value).date()
    return value


def is_same_day(first: date | datetime, second: date | datetime) -> bool:
    """Check whether two values fall on the same local calendar day."""
    return local_day(first) == local_day(second)


def as_datetime(value: date | datetime) -> datetime:
    """Widen a plain date to local midnight; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)
