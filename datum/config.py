"""Week construction settings and their shared defaults."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Callable, Mapping

from datum.week_day import OffsetFn, week_day_offset

if TYPE_CHECKING:  # pragma: no cover - import only for static analyzers
    from datum.week import Week

Decorator = Callable[["Week", int, int, int], None]


def noop(*_args: Any) -> None:
    """Default ``decorate`` hook; leaves the week untouched."""


@dataclass(frozen=True, slots=True)
class WeekConfig:
    """Options controlling how a :class:`~datum.week.Week` is built.

    ``days_per_week`` may be negative, in which case the week runs backwards
    from its start date. ``decorate`` is called as
    ``decorate(week, year, month, day)`` once the dates are in place.
    """

    days_per_week: int = 7
    week_day_offset: OffsetFn = week_day_offset(0)
    decorate: Decorator = noop

    def __post_init__(self) -> None:
        if isinstance(self.days_per_week, bool) or not isinstance(self.days_per_week, int):
            raise TypeError(f"days_per_week must be an integer, got {self.days_per_week!r}")
        if not callable(self.week_day_offset):
            raise TypeError("week_day_offset must be callable")
        if not callable(self.decorate):
            raise TypeError("decorate must be callable")


DEFAULTS = WeekConfig()

_FIELD_NAMES = frozenset(field.name for field in fields(WeekConfig))


def merge_options(
    options: WeekConfig | Mapping[str, Any] | None = None,
    base: WeekConfig = DEFAULTS,
) -> WeekConfig:
    """Shallow-merge ``options`` over ``base`` and return a new config.

    Keys the caller leaves out keep the value from ``base``. ``base`` itself is
    never modified.
    """

    if options is None:
        return base
    if isinstance(options, WeekConfig):
        return options
    if not isinstance(options, Mapping):
        raise TypeError(f"options must be a mapping or WeekConfig, got {type(options).__name__}")
    unknown = sorted(set(options) - _FIELD_NAMES)
    if unknown:
        raise TypeError(f"Unknown week option(s): {', '.join(unknown)}")
    return replace(base, **options)


__all__ = ["DEFAULTS", "Decorator", "WeekConfig", "merge_options", "noop"]
