"""Layer 3: date sequence generation.

Every function returns its dates in ascending order. Stepped sequences
compute each point from the base date (``base - i months``), not from the
previous point, so month overflow never accumulates.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from datekit.arithmetic import add
from datekit.compare import is_weekday, is_weekend
from datekit.gregorian import build, days_in_month, ensure_datetime
from datekit.units import Unit

_ONE_DAY = timedelta(days=1)


def _last_n(value: date, n: int, unit: Unit) -> list[datetime]:
    dt = ensure_datetime(value)
    return [add(dt, -i, unit) for i in reversed(range(n))]


def _next_n(value: date, n: int, unit: Unit) -> list[datetime]:
    dt = ensure_datetime(value)
    return [add(dt, i, unit) for i in range(1, n + 1)]


def last_n_days(value: date, n: int) -> list[datetime]:
    """``n`` days ending with ``value`` itself."""
    return _last_n(value, n, Unit.DAY)


def last_n_weeks(value: date, n: int) -> list[datetime]:
    return _last_n(value, n, Unit.WEEK)


def last_n_months(value: date, n: int) -> list[datetime]:
    return _last_n(value, n, Unit.MONTH)


def last_n_years(value: date, n: int) -> list[datetime]:
    return _last_n(value, n, Unit.YEAR)


def next_n_days(value: date, n: int) -> list[datetime]:
    """``n`` days starting the day after ``value``."""
    return _next_n(value, n, Unit.DAY)


def next_n_weeks(value: date, n: int) -> list[datetime]:
    return _next_n(value, n, Unit.WEEK)


def next_n_months(value: date, n: int) -> list[datetime]:
    return _next_n(value, n, Unit.MONTH)


def next_n_years(value: date, n: int) -> list[datetime]:
    return _next_n(value, n, Unit.YEAR)


def all_days_in_month(value: date) -> list[datetime]:
    """Midnight of every day in the month containing ``value``."""
    dt = ensure_datetime(value)
    return [
        build(dt.year, dt.month, day)
        for day in range(1, days_in_month(dt.year, dt.month) + 1)
    ]


def all_days_in_year(value: date) -> list[datetime]:
    year = ensure_datetime(value).year
    days: list[datetime] = []
    for month in range(1, 13):
        days.extend(all_days_in_month(build(year, month, 1)))
    return days


def weekdays_in_month(value: date) -> list[datetime]:
    return [d for d in all_days_in_month(value) if is_weekday(d)]


def weekends_in_month(value: date) -> list[datetime]:
    return [d for d in all_days_in_month(value) if is_weekend(d)]


def iter_days(start: date, end: date) -> Iterator[datetime]:
    """Yield each day from the earlier bound through the later one, inclusive.

    Steps keep the earlier bound's time of day; a step past the later
    bound ends the walk.
    """
    first = ensure_datetime(start, "start")
    second = ensure_datetime(end, "end")
    current, last = (first, second) if first <= second else (second, first)

    while True:
        yield current
        if last - current < _ONE_DAY:
            return
        current += _ONE_DAY


def date_range(start: date, end: date) -> list[datetime]:
    return list(iter_days(start, end))


def business_days_in_range(start: date, end: date) -> list[datetime]:
    return [d for d in iter_days(start, end) if is_weekday(d)]
