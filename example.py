from datetime import date, datetime

from datum import Week, date_range, diff, shift_date, week_day_offset

# Day differences ignore the time of day
print(diff(datetime(2017, 4, 12, 12, 33), datetime(2017, 4, 14, 5, 18)))
# => Duration(days=2, milliseconds=172800000)

# Curried helpers
tomorrow = shift_date(1)
print(tomorrow(date(2016, 12, 31)))  # 2017-01-01

# Five days counting backwards
print(date_range(-5, date(2017, 3, 2)))

# Sunday-first week holding 12 February 2017 (months are zero-based)
week = Week(2017, 1, 12)
print(week.start, week.end)  # 2017-02-12 2017-02-18

# Monday-first working week with a label attached
work_week = Week.factory(
    {
        "days_per_week": 5,
        "week_day_offset": week_day_offset(1),
        "decorate": lambda w, year, month, day: setattr(
            w, "label", f"{w.start:%d %b} - {w.end:%d %b %Y}"
        ),
    }
)
print(work_week(2016, 9, 20).label)  # 17 Oct - 21 Oct 2016
