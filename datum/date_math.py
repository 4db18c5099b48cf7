"""Pure calendar arithmetic on :class:`~datetime.date` values.

Every helper treats its input as a calendar date: time-of-day never affects
the result, and inputs are never mutated. ``datetime`` values keep their type
(and ``tzinfo``) through :func:`shift_date` and :func:`reset_time`.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TypeVar

from datum.models import Duration
from datum.utils.functional import curry
from datum.utils.logger import get_logger

LOGGER = get_logger(__name__)

DateT = TypeVar("DateT", date, datetime)


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def date_from(year: int, month: int, day: int) -> date:
    """Build a date from a zero-based ``month``, rolling over out-of-range parts.

    ``month=12`` is January of the following year and ``day=0`` is the last
    day of the previous month. No validation happens here: callers that need
    strict inputs must check ranges themselves.
    """

    carry, month_index = divmod(month, 12)
    result = date(year + carry, month_index + 1, 1) + timedelta(days=day - 1)
    if carry or result.day != day:
        LOGGER.debug(
            "Normalised calendar input %s-%s-%s to %s", year, month, day, result.isoformat()
        )
    return result


def day_of_week(value: str | date) -> int:
    """Return the weekday of ``value`` with Sunday as 0 and Saturday as 6."""

    return parse_date(value).isoweekday() % 7


def reset_time(value: str | DateT) -> DateT:
    """Return a copy of ``value`` at midnight.

    ``datetime`` inputs come back as ``datetime`` with the time zeroed and
    ``tzinfo`` kept; plain dates come back as a new equal ``date``.
    """

    value = parse_date(value)
    if isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=value.tzinfo)
    return date(value.year, value.month, value.day)


@curry
def diff(date1: str | date, date2: str | date) -> Duration:
    """Absolute calendar-day distance between two dates, ignoring time-of-day."""

    first = parse_date(date1)
    second = parse_date(date2)
    # ``date.toordinal`` drops the time and any DST offset, matching UTC midnights.
    return Duration.from_days(
        date(second.year, second.month, second.day).toordinal()
        - date(first.year, first.month, first.day).toordinal()
    )


@curry
def shift_date(days: int, value: str | DateT) -> DateT:
    """Return ``value`` moved by ``days`` calendar days (negative moves back)."""

    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError(f"days must be an integer, got {days!r}")
    return parse_date(value) + timedelta(days=days)


__all__ = ["date_from", "day_of_week", "diff", "parse_date", "reset_time", "shift_date"]
