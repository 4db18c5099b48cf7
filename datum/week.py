"""Week value objects built from a reference calendar date."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterator, Mapping

from datum.config import WeekConfig, merge_options
from datum.date_math import date_from
from datum.date_range import date_range
from datum.week_day import week_start
from datum.utils.functional import last
from datum.utils.logger import get_logger

LOGGER = get_logger(__name__)

WeekOptions = WeekConfig | Mapping[str, Any] | None


class Week:
    """A run of consecutive dates anchored to a configurable first weekday.

    ``Week(2017, 1, 12)`` is the Sunday-to-Saturday week holding 12 February
    2017; ``month`` is zero-based and out-of-range parts roll over into the
    neighbouring month or year instead of raising.

    ``options`` may be a :class:`~datum.config.WeekConfig` or a mapping of its
    field names. Whatever is left out falls back to
    :data:`datum.config.DEFAULTS`. The ``decorate`` hook runs last and may
    attach any extra attributes to the instance.
    """

    start: date
    days: tuple[date, ...]
    end: date | None
    config: WeekConfig

    def __init__(self, year: int, month: int, day: int, options: WeekOptions = None) -> None:
        config = merge_options(options)
        self.config = config
        self.start = week_start(config.week_day_offset, date_from(year, month, day))
        self.days = tuple(date_range(config.days_per_week, self.start))
        self.end = last(self.days)
        if config.days_per_week < 0:
            LOGGER.debug(
                "Week from %s runs backwards for %s days", self.start, abs(config.days_per_week)
            )
        LOGGER.debug("Built week %s → %s (%s days)", self.start, self.end, len(self.days))
        config.decorate(self, year, month, day)

    @classmethod
    def factory(cls, options: WeekOptions = None) -> Callable[[int, int, int], "Week"]:
        """Return a ``(year, month, day)`` constructor bound to ``options``."""

        config = merge_options(options)

        def build(year: int, month: int, day: int) -> "Week":
            return cls(year, month, day, config)

        return build

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[date]:
        return iter(self.days)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, date):
            return False
        return any(
            (day.year, day.month, day.day) == (value.year, value.month, value.day)
            for day in self.days
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self.start!r}, end={self.end!r}, days={len(self.days)})"


__all__ = ["Week", "WeekOptions"]
