"""Layer 1: unit stepping: add/subtract a signed amount of a unit.

Month and year steps set the field and let the calendar roll the overflow
forward, so Jan 31 + 1 month is Mar 3 (Mar 2 in a leap year) rather than
the last day of February. Subtracting the same amount does not undo an
overflowed step.
"""

from __future__ import annotations

import operator
from datetime import date, datetime, timedelta

from datekit.gregorian import build, ensure_datetime
from datekit.types import InvalidDateError
from datekit.units import STEP_UNITS, Unit

_FIXED_STEPS: dict[Unit, timedelta] = {
    Unit.MILLISECOND: timedelta(milliseconds=1),
    Unit.SECOND: timedelta(seconds=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.DAY: timedelta(days=1),
    Unit.WEEK: timedelta(weeks=1),
}


def _shift_fields(dt: datetime, years: int = 0, months: int = 0) -> datetime:
    return build(
        dt.year + years,
        dt.month + months,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
        microsecond=dt.microsecond,
    )


def add(value: date, amount: int, unit: Unit | str) -> datetime:
    """Return ``value`` moved by ``amount`` units (negative moves back).

    Raises InvalidUnitError for units outside millisecond..year (quarter,
    decade and century are boundary-only units).
    """
    dt = ensure_datetime(value)
    resolved = Unit.parse(unit, STEP_UNITS)
    amount = operator.index(amount)

    if resolved is Unit.MONTH:
        return _shift_fields(dt, months=amount)
    if resolved is Unit.YEAR:
        return _shift_fields(dt, years=amount)

    try:
        return dt + amount * _FIXED_STEPS[resolved]
    except OverflowError as e:
        raise InvalidDateError(
            dt, f"adding {amount} {resolved.value}(s) leaves the supported range"
        ) from e


def subtract(value: date, amount: int, unit: Unit | str) -> datetime:
    return add(value, -operator.index(amount), unit)


# ---------------------------------------------------------------------------
# Shorthands
# ---------------------------------------------------------------------------

def n_days_ago(value: date, n: int) -> datetime:
    return subtract(value, n, Unit.DAY)


def n_weeks_ago(value: date, n: int) -> datetime:
    return subtract(value, n, Unit.WEEK)


def n_months_ago(value: date, n: int) -> datetime:
    return subtract(value, n, Unit.MONTH)


def n_years_ago(value: date, n: int) -> datetime:
    return subtract(value, n, Unit.YEAR)


def n_days_ahead(value: date, n: int) -> datetime:
    return add(value, n, Unit.DAY)


def n_weeks_ahead(value: date, n: int) -> datetime:
    return add(value, n, Unit.WEEK)


def n_months_ahead(value: date, n: int) -> datetime:
    return add(value, n, Unit.MONTH)


def n_years_ahead(value: date, n: int) -> datetime:
    return add(value, n, Unit.YEAR)
