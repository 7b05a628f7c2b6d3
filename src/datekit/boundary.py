"""Layer 1: period boundaries: start_of / end_of a unit.

End values are inclusive: the last representable instant of the period
(23:59:59.999999 for a day). ``end_of(d, u) - start_of(d, u)`` is therefore
one microsecond short of the period length.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

from datekit.gregorian import (
    SUNDAY,
    build,
    day_of_week,
    days_in_month,
    ensure_datetime,
    quarter,
)
from datekit.units import BOUNDARY_UNITS, Unit


def _check_week_start(week_start: int) -> None:
    if not isinstance(week_start, int) or not 0 <= week_start <= 6:
        raise ValueError(
            f"week_start must be an int 0-6 (Sunday=0), got {week_start!r}"
        )


def _midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _last_instant(dt: datetime) -> datetime:
    return dt.replace(hour=23, minute=59, second=59, microsecond=999999)


def _month_end(year: int, month: int) -> datetime:
    return build(year, month, days_in_month(year, month))


def _week_start_date(dt: datetime, week_start: int) -> datetime:
    back = (day_of_week(dt) - week_start) % 7
    return build(dt.year, dt.month, dt.day - back)


def _millisecond_floor(dt: datetime) -> int:
    return dt.microsecond // 1000 * 1000


def _decade(dt: datetime) -> int:
    return dt.year // 10 * 10


def _century(dt: datetime) -> int:
    return dt.year // 100 * 100


_STARTS: dict[Unit, Callable[[datetime], datetime]] = {
    Unit.MILLISECOND: lambda dt: dt.replace(microsecond=_millisecond_floor(dt)),
    Unit.SECOND: lambda dt: dt.replace(microsecond=0),
    Unit.MINUTE: lambda dt: dt.replace(second=0, microsecond=0),
    Unit.HOUR: lambda dt: dt.replace(minute=0, second=0, microsecond=0),
    Unit.DAY: _midnight,
    Unit.MONTH: lambda dt: build(dt.year, dt.month, 1),
    Unit.QUARTER: lambda dt: build(dt.year, (quarter(dt) - 1) * 3 + 1, 1),
    Unit.YEAR: lambda dt: build(dt.year, 1, 1),
    Unit.DECADE: lambda dt: build(_decade(dt), 1, 1),
    Unit.CENTURY: lambda dt: build(_century(dt), 1, 1),
}

# Month and quarter ends are built from the month length, never from the
# following month, so December 9999 stays representable.
_ENDS: dict[Unit, Callable[[datetime], datetime]] = {
    Unit.MILLISECOND: lambda dt: dt.replace(microsecond=_millisecond_floor(dt) + 999),
    Unit.SECOND: lambda dt: dt.replace(microsecond=999999),
    Unit.MINUTE: lambda dt: dt.replace(second=59, microsecond=999999),
    Unit.HOUR: lambda dt: dt.replace(minute=59, second=59, microsecond=999999),
    Unit.DAY: _last_instant,
    Unit.MONTH: lambda dt: _last_instant(_month_end(dt.year, dt.month)),
    Unit.QUARTER: lambda dt: _last_instant(_month_end(dt.year, quarter(dt) * 3)),
    Unit.YEAR: lambda dt: _last_instant(build(dt.year, 12, 31)),
    Unit.DECADE: lambda dt: _last_instant(build(_decade(dt) + 9, 12, 31)),
    Unit.CENTURY: lambda dt: _last_instant(build(_century(dt) + 99, 12, 31)),
}


def start_of(value: date, unit: Unit | str, week_start: int = SUNDAY) -> datetime:
    """First instant of the ``unit`` period containing ``value``.

    ``week_start`` (Sunday=0 .. Saturday=6) only affects ``unit="week"``.
    Raises InvalidUnitError for an unknown unit.
    """
    dt = ensure_datetime(value)
    resolved = Unit.parse(unit, BOUNDARY_UNITS)
    _check_week_start(week_start)
    if resolved is Unit.WEEK:
        return _midnight(_week_start_date(dt, week_start))
    return _STARTS[resolved](dt)


def end_of(value: date, unit: Unit | str, week_start: int = SUNDAY) -> datetime:
    """Last instant of the ``unit`` period containing ``value``.

    For weeks, the same ``week_start`` as start_of() must be passed to get
    the matching 7-day span.
    """
    dt = ensure_datetime(value)
    resolved = Unit.parse(unit, BOUNDARY_UNITS)
    _check_week_start(week_start)
    if resolved is Unit.WEEK:
        first = _week_start_date(dt, week_start)
        return _last_instant(build(first.year, first.month, first.day + 6))
    return _ENDS[resolved](dt)


def quarter_bounds(value: date) -> tuple[datetime, datetime]:
    """(start, end) of the quarter containing ``value``."""
    return start_of(value, Unit.QUARTER), end_of(value, Unit.QUARTER)
