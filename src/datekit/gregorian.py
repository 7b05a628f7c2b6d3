"""Layer 0: proleptic Gregorian calendar math on naive local datetimes.

Every other module builds on the helpers here. Day-of-week numbers follow
the Sunday=0 .. Saturday=6 convention throughout datekit.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Any

from datekit.types import InvalidDateError

logger = logging.getLogger(__name__)

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)
WEEKEND_DAYS = frozenset({SUNDAY, SATURDAY})

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBRS = tuple(name[:3] for name in MONTH_NAMES)
DAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
DAY_ABBRS = tuple(name[:3] for name in DAY_NAMES)
DAY_MINS = tuple(name[:2] for name in DAY_NAMES)


def ensure_datetime(value: Any, name: str = "value") -> datetime:
    """Validate a date argument and return it as a naive datetime.

    A plain ``date`` is promoted to midnight. Timezone-aware datetimes are
    rejected: all datetimes are interpreted in host local time.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            logger.debug("rejecting aware datetime for %s", name)
            raise InvalidDateError(
                value,
                f"{name} must be a naive datetime (no tzinfo), "
                f"got tzinfo={value.tzinfo!r}",
            )
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    logger.debug("rejecting %s of type %s", name, type(value).__name__)
    raise InvalidDateError(
        value, f"{name} must be a date or datetime, got {type(value).__name__}"
    )


def reference_or_now(reference: Any = None) -> datetime:
    """Validated ``reference``, or the wall clock read now when it is None."""
    if reference is None:
        return datetime.now()
    return ensure_datetime(reference, "reference")


def build(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Build a datetime from fields, rolling out-of-range values over.

    Day 0 of a month is the last day of the previous month, month 13 is
    January of the following year, hour -1 is 23:00 of the previous day.

    Raises InvalidDateError if the result falls outside datetime's range.
    """
    carry, month_index = divmod(month - 1, 12)
    try:
        base = datetime(year + carry, month_index + 1, 1)
        return base + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond,
            microseconds=microsecond,
        )
    except (OverflowError, ValueError) as e:
        raise InvalidDateError(
            (year, month, day, hour, minute, second, millisecond),
            f"outside the representable range ({e})",
        ) from e


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month``. Months outside 1-12 roll into the next year."""
    carry, month_index = divmod(month - 1, 12)
    return calendar.monthrange(year + carry, month_index + 1)[1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_week(value: date) -> int:
    """Sunday=0 .. Saturday=6."""
    return (ensure_datetime(value).weekday() + 1) % 7


def day_of_year(value: date) -> int:
    """1-based ordinal of the day within its year (1..366)."""
    d = ensure_datetime(value).date()
    return (d - date(d.year, 1, 1)).days + 1


def quarter(value: date) -> int:
    return (ensure_datetime(value).month - 1) // 3 + 1


def quarter_name(value: date) -> str:
    return f"Q{quarter(value)}"


def iso_week_of_year(value: date) -> int:
    """ISO-8601 week number (1..53).

    The week belongs to the year of its Thursday, so week 1 is the week
    containing the year's first Thursday. 2021-01-01 is in week 53 of 2020.
    """
    d = ensure_datetime(value).date()
    thursday = d + timedelta(days=4 - d.isoweekday())
    days_since_jan1 = (thursday - date(thursday.year, 1, 1)).days
    # ceil((days_since_jan1 + 1) / 7)
    return days_since_jan1 // 7 + 1


def week_of_month(value: date) -> int:
    """Row of ``value`` in a Sunday-first month grid (1..6)."""
    dt = ensure_datetime(value)
    first_weekday = day_of_week(dt.replace(day=1))
    return -(-(dt.day + first_weekday) // 7)


# ---------------------------------------------------------------------------
# Field predicates
# ---------------------------------------------------------------------------

def is_am(value: date) -> bool:
    return ensure_datetime(value).hour < 12


def is_pm(value: date) -> bool:
    return ensure_datetime(value).hour >= 12


def is_midnight(value: date) -> bool:
    dt = ensure_datetime(value)
    return (dt.hour, dt.minute, dt.second, dt.microsecond // 1000) == (0, 0, 0, 0)


def is_noon(value: date) -> bool:
    dt = ensure_datetime(value)
    return (dt.hour, dt.minute, dt.second) == (12, 0, 0)


def is_odd_date(value: date) -> bool:
    return ensure_datetime(value).day % 2 == 1


def is_even_date(value: date) -> bool:
    return ensure_datetime(value).day % 2 == 0


def ordinal_suffix(value: date) -> str:
    """English ordinal suffix for the day of month: st, nd, rd or th."""
    day = ensure_datetime(value).day
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def day_with_ordinal(value: date) -> str:
    return f"{ensure_datetime(value).day}{ordinal_suffix(value)}"
