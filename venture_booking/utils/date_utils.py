"""
Date and time utility functions used across the booking domain.

Notes:
- Stays are modelled as half-open night intervals [start, end): a guest
  checking in on start and out on end occupies every night from start up
  to, but not including, end.
- All arithmetic uses `date`/`datetime` objects, never raw timestamps.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator

import pytz

UTC = timezone.utc

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_ONE_DAY = timedelta(days=1)


class DateUtilsError(Exception):
    """Custom exception for date utilities errors."""
    pass


def now_utc() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


def today_in(timezone_name: str) -> date:
    """Return today's date in the given IANA timezone."""
    try:
        tz_obj = pytz.timezone(timezone_name)
    except pytz.UnknownTimeZoneError as e:
        raise DateUtilsError(f"Unknown timezone '{timezone_name}'") from e
    return datetime.now(tz_obj).date()


def parse_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS into a time."""
    try:
        return time.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise DateUtilsError(f"Invalid time '{value}'") from e


def weekday_name(d: date) -> str:
    """English weekday name of a date (Monday..Sunday)."""
    return WEEKDAY_NAMES[d.weekday()]


def iter_nights(start: date, end: date) -> Iterator[date]:
    """
    Yield each night in [start, end).
    If end <= start, yields nothing.
    """
    if not isinstance(start, date) or not isinstance(end, date):
        raise DateUtilsError("Both start and end must be date objects")

    current = start
    while current < end:
        yield current
        current += _ONE_DAY


def count_nights(
    check_in_date: date,
    check_out_date: date,
    check_in_time: time = time.min,
    check_out_time: time = time.min,
) -> int:
    """
    Number of nights between check-in and check-out.

    The check-in/out times are taken into account and any partial day
    rounds up, so a short stay always counts as at least one night.
    """
    start = datetime.combine(check_in_date, check_in_time)
    end = datetime.combine(check_out_date, check_out_time)
    seconds = (end - start).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / _ONE_DAY.total_seconds())
