"""Helpers for generating runs of consecutive calendar dates."""

from __future__ import annotations

from datetime import date
from typing import Iterator

from datum.date_math import DateT, reset_time, shift_date
from datum.utils.functional import curry


def iter_dates(count: int, start: str | DateT) -> Iterator[DateT]:
    """Return an iterator over ``abs(count)`` consecutive dates from ``start``.

    Arguments are checked immediately. The first value is ``start`` at
    midnight; each following value is one day later for a positive ``count``
    and one day earlier for a negative one.
    """

    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an integer, got {count!r}")
    return _walk(count, reset_time(start))


def _walk(count: int, current: DateT) -> Iterator[DateT]:
    if count == 0:
        return
    step = -1 if count < 0 else 1
    yield current
    for _ in range(abs(count) - 1):
        current = shift_date(step, current)
        yield current


@curry
def date_range(count: int, start: str | date) -> list[date]:
    """Return :func:`iter_dates` as a list; ``date_range(0, day)`` is empty."""

    return list(iter_dates(count, start))


__all__ = ["date_range", "iter_dates"]
