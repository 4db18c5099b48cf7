"""Locate the first day of the week containing a date."""

from __future__ import annotations

from datetime import date
from typing import Callable

from datum.date_math import DateT, day_of_week, parse_date, shift_date
from datum.utils.functional import curry

OffsetFn = Callable[[date], int]


@curry
def week_day_offset(first_day_index: int, value: str | DateT) -> int:
    """Days between the configured first weekday and the weekday of ``value``.

    ``first_day_index`` uses Sunday as 0. The result is always in ``0..6``;
    binding only the first argument gives a reusable offset function.
    """

    return (day_of_week(value) - first_day_index) % 7


@curry
def week_start(offset_fn: OffsetFn, value: str | DateT) -> DateT:
    """Return the most recent date on or before ``value`` that starts its week."""

    value = parse_date(value)
    return shift_date(-offset_fn(value), value)


__all__ = ["OffsetFn", "week_day_offset", "week_start"]
