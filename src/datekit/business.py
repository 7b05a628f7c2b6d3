"""Layer 2: business-day stepping and counting.

Business days are Monday through Friday; no holiday calendar is applied.
All walks move one calendar day at a time and keep the time of day.
"""

from __future__ import annotations

import operator
from datetime import date, datetime, timedelta

from datekit.compare import is_weekday
from datekit.gregorian import ensure_datetime

_ONE_DAY = timedelta(days=1)


def is_business_day(value: date) -> bool:
    return is_weekday(value)


def add_business_days(value: date, n: int) -> datetime:
    """Step ``n`` business days forward (negative ``n`` steps backward).

    Only landing days count, so Friday + 1 is Monday and Friday - 1 is
    Thursday. ``n == 0`` returns the input unchanged, even on a weekend.
    """
    current = ensure_datetime(value)
    n = operator.index(n)
    step = _ONE_DAY if n > 0 else -_ONE_DAY
    remaining = abs(n)

    while remaining > 0:
        current += step
        if is_weekday(current):
            remaining -= 1

    return current


def subtract_business_days(value: date, n: int) -> datetime:
    return add_business_days(value, -operator.index(n))


def business_days_diff(a: date, b: date) -> int:
    """Count business days in the half-open span [min(a, b), max(a, b)).

    The walk visits the earlier date and every following day strictly
    before the later date, so Monday 00:00 to the next Monday 00:00 is 5.
    """
    first = ensure_datetime(a, "a")
    second = ensure_datetime(b, "b")
    current, end = (first, second) if first <= second else (second, first)

    count = 0
    while current < end:
        if is_weekday(current):
            count += 1
        current += _ONE_DAY

    return count


def next_business_day(value: date) -> datetime:
    """First business day strictly after ``value``."""
    current = ensure_datetime(value) + _ONE_DAY
    while not is_weekday(current):
        current += _ONE_DAY
    return current


def previous_business_day(value: date) -> datetime:
    """Last business day strictly before ``value``."""
    current = ensure_datetime(value) - _ONE_DAY
    while not is_weekday(current):
        current -= _ONE_DAY
    return current
