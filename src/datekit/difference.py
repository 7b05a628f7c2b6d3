"""Layer 2: differences between two dates.

calendar_diff() decomposes a gap into calendar fields with sequential
borrowing; the flat helpers floor the raw gap at a single scale.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from datekit.gregorian import build, ensure_datetime, reference_or_now
from datekit.types import DifferenceResult
from datekit.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND

_ONE_MS = timedelta(milliseconds=1)


def _ordered(a: date, b: date) -> tuple[datetime, datetime]:
    first = ensure_datetime(a, "a")
    second = ensure_datetime(b, "b")
    return (first, second) if first <= second else (second, first)


def milliseconds_between(a: date, b: date) -> int:
    earlier, later = _ordered(a, b)
    return (later - earlier) // _ONE_MS


def seconds_between(a: date, b: date) -> int:
    return milliseconds_between(a, b) // MS_PER_SECOND


def minutes_between(a: date, b: date) -> int:
    return milliseconds_between(a, b) // MS_PER_MINUTE


def hours_between(a: date, b: date) -> int:
    return milliseconds_between(a, b) // MS_PER_HOUR


def days_between(a: date, b: date) -> int:
    return milliseconds_between(a, b) // MS_PER_DAY


def calendar_diff(a: date, b: date) -> DifferenceResult:
    """Decompose the gap between ``a`` and ``b`` into calendar fields.

    Argument order does not matter: the decomposition always runs from the
    earlier to the later date, so every field is non-negative and
    ``calendar_diff(a, b) == calendar_diff(b, a)``.

    Fields are resolved finest first. A negative field borrows one unit from
    the next coarser field; a day deficit borrows whole months walking back
    from the month before the later date's month, adding each borrowed
    month's real length (Jan 31 -> Mar 1 is 0 months 29 days in 2023).

    The total_* fields floor the raw millisecond gap independently.
    """
    earlier, later = _ordered(a, b)

    years = later.year - earlier.year
    months = later.month - earlier.month
    days = later.day - earlier.day
    hours = later.hour - earlier.hour
    minutes = later.minute - earlier.minute
    seconds = later.second - earlier.second
    millis = later.microsecond // 1000 - earlier.microsecond // 1000

    if millis < 0:
        seconds -= 1
    if seconds < 0:
        minutes -= 1
        seconds += 60
    if minutes < 0:
        hours -= 1
        minutes += 60
    if hours < 0:
        days -= 1
        hours += 24

    borrowed = 0
    while days < 0:
        months -= 1
        days += build(later.year, later.month - borrowed, 0).day
        borrowed += 1

    while months < 0:
        years -= 1
        months += 12

    total_ms = (later - earlier) // _ONE_MS
    return DifferenceResult(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        total_days=total_ms // MS_PER_DAY,
        total_hours=total_ms // MS_PER_HOUR,
        total_minutes=total_ms // MS_PER_MINUTE,
        total_seconds=total_ms // MS_PER_SECOND,
        total_milliseconds=total_ms,
    )


def get_age(birth: date, reference: date | None = None) -> int:
    """Whole years from ``birth`` to ``reference`` (default: now).

    One less than the year difference while the reference's month/day is
    still before the birthday.
    """
    born = ensure_datetime(birth, "birth")
    ref = reference_or_now(reference)
    age = ref.year - born.year
    if (ref.month, ref.day) < (born.month, born.day):
        age -= 1
    return age


def exact_age(birth: date, reference: date | None = None) -> DifferenceResult:
    return calendar_diff(ensure_datetime(birth, "birth"), reference_or_now(reference))
