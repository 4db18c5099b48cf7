"""Public interface for the datum package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from datum.config import DEFAULTS, WeekConfig, merge_options
from datum.date_math import date_from, day_of_week, diff, parse_date, reset_time, shift_date
from datum.date_range import date_range, iter_dates
from datum.models import Duration
from datum.utils.functional import curry
from datum.week import Week
from datum.week_day import week_day_offset, week_start

__all__ = [
    "__version__",
    "DEFAULTS",
    "Duration",
    "Week",
    "WeekConfig",
    "curry",
    "date_from",
    "date_range",
    "day_of_week",
    "diff",
    "iter_dates",
    "merge_options",
    "parse_date",
    "reset_time",
    "shift_date",
    "week_day_offset",
    "week_start",
]

try:
    __version__ = importlib_metadata.version("datum")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
