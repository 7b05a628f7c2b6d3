"""Layer 2: ordering and equality predicates, optionally at a granularity."""

from __future__ import annotations

from datetime import date, datetime

from datekit.arithmetic import add
from datekit.boundary import end_of, start_of
from datekit.gregorian import (
    SUNDAY,
    WEEKEND_DAYS,
    day_of_week,
    ensure_datetime,
    reference_or_now,
)
from datekit.types import InvalidDateError
from datekit.units import BOUNDARY_UNITS, Unit

# Fields that must match for is_same() at each granularity, coarse to fine.
_SAME_FIELDS: dict[Unit, tuple[str, ...]] = {
    Unit.YEAR: ("year",),
    Unit.MONTH: ("year", "month"),
    Unit.DAY: ("year", "month", "day"),
    Unit.HOUR: ("year", "month", "day", "hour"),
    Unit.MINUTE: ("year", "month", "day", "hour", "minute"),
}


def _normalized(value: date, granularity: Unit | str, name: str) -> datetime:
    return start_of(ensure_datetime(value, name), granularity)


def is_before(a: date, b: date, granularity: Unit | str = Unit.MILLISECOND) -> bool:
    """True if ``a`` is strictly before ``b`` once both snap to ``granularity``."""
    return _normalized(a, granularity, "a") < _normalized(b, granularity, "b")


def is_after(a: date, b: date, granularity: Unit | str = Unit.MILLISECOND) -> bool:
    return _normalized(a, granularity, "a") > _normalized(b, granularity, "b")


def is_same(a: date, b: date, granularity: Unit | str = Unit.MILLISECOND) -> bool:
    """Field-prefix equality down to ``granularity``.

    ``"year"`` compares only years, ``"day"`` year+month+day and so on.
    Second and millisecond compare full timestamps at millisecond precision.
    Week, quarter, decade and century compare their period starts.
    """
    first = ensure_datetime(a, "a")
    second = ensure_datetime(b, "b")
    resolved = Unit.parse(granularity, BOUNDARY_UNITS)
    fields = _SAME_FIELDS.get(resolved)
    if fields is not None:
        return all(getattr(first, f) == getattr(second, f) for f in fields)
    if resolved in (Unit.SECOND, Unit.MILLISECOND):
        return start_of(first, Unit.MILLISECOND) == start_of(second, Unit.MILLISECOND)
    return start_of(first, resolved) == start_of(second, resolved)


def is_between(value: date, start: date, end: date, inclusivity: str = "[]") -> bool:
    """Range membership with a two-character bound string.

    Position 0 is the start bound (``[`` inclusive, anything else
    exclusive), position 1 the end bound (``]`` inclusive).
    """
    if not isinstance(inclusivity, str) or len(inclusivity) != 2:
        raise ValueError(
            f"inclusivity must be a 2-character string such as '[]' or '(]', "
            f"got {inclusivity!r}"
        )
    dt = ensure_datetime(value)
    lower = ensure_datetime(start, "start")
    upper = ensure_datetime(end, "end")
    after_start = dt >= lower if inclusivity[0] == "[" else dt > lower
    before_end = dt <= upper if inclusivity[1] == "]" else dt < upper
    return after_start and before_end


def is_today(value: date, reference: date | None = None) -> bool:
    return is_same(value, reference_or_now(reference), Unit.DAY)


def is_yesterday(value: date, reference: date | None = None) -> bool:
    return is_same(value, add(reference_or_now(reference), -1, Unit.DAY), Unit.DAY)


def is_tomorrow(value: date, reference: date | None = None) -> bool:
    return is_same(value, add(reference_or_now(reference), 1, Unit.DAY), Unit.DAY)


def is_weekend(value: date) -> bool:
    return day_of_week(value) in WEEKEND_DAYS


def is_weekday(value: date) -> bool:
    return not is_weekend(value)


def is_past(value: date, reference: date | None = None) -> bool:
    return ensure_datetime(value) < reference_or_now(reference)


def is_future(value: date, reference: date | None = None) -> bool:
    return ensure_datetime(value) > reference_or_now(reference)


def is_this_week(
    value: date, reference: date | None = None, week_start: int = SUNDAY
) -> bool:
    ref = reference_or_now(reference)
    return is_between(
        value,
        start_of(ref, Unit.WEEK, week_start),
        end_of(ref, Unit.WEEK, week_start),
    )


def is_this_month(value: date, reference: date | None = None) -> bool:
    return is_same(value, reference_or_now(reference), Unit.MONTH)


def is_this_year(value: date, reference: date | None = None) -> bool:
    return is_same(value, reference_or_now(reference), Unit.YEAR)


def earliest(*values: date) -> datetime:
    """The earliest of one or more dates."""
    if not values:
        raise InvalidDateError(values, "earliest() needs at least one date")
    return min(ensure_datetime(v) for v in values)


def latest(*values: date) -> datetime:
    """The latest of one or more dates."""
    if not values:
        raise InvalidDateError(values, "latest() needs at least one date")
    return max(ensure_datetime(v) for v in values)
