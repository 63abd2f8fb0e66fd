"""
Date and timestamp utilities.

Streak ageing works on calendar days, not elapsed hours: a hit at 23:59 and
a reconcile at 00:01 are one day apart.
"""

from datetime import datetime


def local_now() -> datetime:
    """Return the current wall-clock time with the local UTC offset attached."""
    return datetime.now().astimezone()


def day_number(timestamp: datetime) -> int:
    """
    Return the ordinal of the calendar day a timestamp falls on.

    The day is read in the offset recorded on the timestamp, which is the
    local offset in force when it was taken.

    Returns:
        Proleptic Gregorian ordinal (day 1 is 0001-01-01)
    """
    return timestamp.date().toordinal()


def days_between(earlier: datetime, now: datetime) -> int:
    """
    Number of calendar days from ``earlier`` to ``now``.

    Each timestamp keeps its own offset, so a daylight-saving change between
    them does not move either one onto a neighbouring day.
    """
    return day_number(now) - day_number(earlier)


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp as ISO-8601 with its UTC offset."""
    return timestamp.isoformat()


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp that carries a UTC offset.

    Raises:
        ValueError: If the value is not ISO-8601 or has no offset
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no UTC offset: {value!r}")
    return parsed
