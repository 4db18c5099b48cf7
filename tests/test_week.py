from __future__ import annotations

from datetime import date, timedelta

import pytest

from datum import DEFAULTS, Week, WeekConfig, day_of_week, week_day_offset


def test_week_has_seven_days_from_sunday() -> None:
    week = Week(2017, 1, 12)
    assert len(week.days) == 7
    assert day_of_week(week.days[0]) == 0
    assert day_of_week(week.days[6]) == 6
    assert week.days[0].day == 12
    assert week.days[6].day == 18


def test_week_has_start_and_end() -> None:
    week = Week(2016, 9, 20)
    assert day_of_week(week.start) == 0
    assert day_of_week(week.end) == 6
    assert week.start == date(2016, 10, 16)
    assert week.end == date(2016, 10, 22)
    assert week.days[0] == week.start
    assert week.days[-1] == week.end
    assert all(b - a == timedelta(days=1) for a, b in zip(week.days, week.days[1:]))


def test_days_per_week_can_be_customised() -> None:
    week = Week(2016, 9, 20, {"days_per_week": 5})
    assert len(week.days) == 5
    assert week.start.day == 16
    assert week.end.day == 20


def test_week_day_offset_can_be_changed() -> None:
    week = Week(2016, 9, 20, {"week_day_offset": week_day_offset(1)})
    assert week.start.day == 17
    assert week.end.day == 23


def test_week_accepts_week_config() -> None:
    week = Week(2016, 9, 20, WeekConfig(days_per_week=3, week_day_offset=week_day_offset(1)))
    assert week.days == (date(2016, 10, 17), date(2016, 10, 18), date(2016, 10, 19))


def test_week_can_be_decorated() -> None:
    week = Week(2017, 1, 15, {"decorate": lambda w, *_: setattr(w, "foo", "bar")})
    assert week.foo == "bar"


def test_decorate_receives_constructor_arguments() -> None:
    seen: list[tuple] = []

    def decorate(week: Week, year: int, month: int, day: int) -> None:
        seen.append((week.start, week.end, year, month, day))
        week.label = f"{week.start:%d %b}"

    week = Week(2017, 1, 15, {"decorate": decorate})
    assert seen == [(date(2017, 2, 12), date(2017, 2, 18), 2017, 1, 15)]
    assert week.label == "12 Feb"


def test_decorate_errors_propagate() -> None:
    def decorate(*_args) -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        Week(2017, 1, 15, {"decorate": decorate})


def test_factory_builds_weeks_with_fixed_options() -> None:
    make_week = Week.factory({"decorate": lambda w, *_: setattr(w, "foo", "bar")})
    week = make_week(2017, 1, 15)
    assert isinstance(week, Week)
    assert week.foo == "bar"
    assert len(week) == 7


def test_factory_reuses_options_across_weeks() -> None:
    work_week = Week.factory({"days_per_week": 5, "week_day_offset": week_day_offset(1)})
    first = work_week(2016, 9, 20)
    second = work_week(2016, 9, 27)
    assert (first.start, first.end) == (date(2016, 10, 17), date(2016, 10, 21))
    assert (second.start, second.end) == (date(2016, 10, 24), date(2016, 10, 28))
    assert first.config is second.config


def test_options_do_not_leak_into_defaults() -> None:
    Week(2016, 9, 20, {"days_per_week": 3})
    assert DEFAULTS.days_per_week == 7
    assert len(Week(2016, 9, 20)) == 7


def test_zero_days_per_week_is_empty() -> None:
    week = Week(2016, 9, 20, {"days_per_week": 0})
    assert week.days == ()
    assert week.end is None
    assert week.start == date(2016, 10, 16)


def test_negative_days_per_week_runs_backwards() -> None:
    week = Week(2016, 9, 20, {"days_per_week": -3})
    assert week.days == (date(2016, 10, 16), date(2016, 10, 15), date(2016, 10, 14))
    assert week.end == date(2016, 10, 14)


def test_out_of_range_month_rolls_over() -> None:
    week = Week(2016, 12, 4)
    assert week.start == date(2017, 1, 1)
    assert date(2017, 1, 4) in week


def test_week_container_protocol() -> None:
    week = Week(2017, 1, 12)
    assert list(week) == list(week.days)
    assert date(2017, 2, 15) in week
    assert date(2017, 2, 19) not in week
    assert "2017-02-15" not in week
    assert repr(week) == "Week(start=datetime.date(2017, 2, 12), end=datetime.date(2017, 2, 18), days=7)"


def test_week_logs_construction(caplog) -> None:
    caplog.set_level("DEBUG", logger="datum")
    Week(2016, 9, 20, {"days_per_week": -2})
    assert "runs backwards" in caplog.text
    assert "Built week" in caplog.text


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(TypeError, match="daysPerWeek"):
        Week(2016, 9, 20, {"daysPerWeek": 5})
