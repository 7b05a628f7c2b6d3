"""Today: immutable convenience wrapper around the datekit functions.

Every method delegates to a module-level function. Methods returning a
date return a new Today (lists of dates become lists of Today); the
receiver is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Union

from datekit import (
    arithmetic,
    boundary,
    business,
    compare,
    converters,
    difference,
    formatting,
    gregorian,
    ranges,
)
from datekit.gregorian import SUNDAY
from datekit.types import DateKitError, DifferenceResult, InvalidDateError
from datekit.units import Unit

# Anything Today() accepts: Today, date, datetime or an ISO-8601 string.
DateLike = Union["Today", date, str]
UnitLike = Union[Unit, str]


def _coerce(value: Any) -> datetime:
    if value is None:
        return datetime.now()
    if isinstance(value, Today):
        return value.value
    if isinstance(value, str):
        return converters.from_iso_string(value)
    if isinstance(value, datetime) and value.tzinfo is not None:
        return converters.from_utc(
            value.astimezone(timezone.utc).replace(tzinfo=None)
        )
    if isinstance(value, date):
        return gregorian.ensure_datetime(value)
    raise InvalidDateError(
        value, f"cannot build a date from {type(value).__name__}"
    )


def _unwrap(value: DateLike) -> datetime:
    return value.value if isinstance(value, Today) else _coerce(value)


def _optional(reference: DateLike | None) -> datetime | None:
    return None if reference is None else _unwrap(reference)


def _wrap_all(values: list[datetime]) -> list[Today]:
    return [Today(v) for v in values]


@dataclass(frozen=True, order=True)
class Today:
    """A single local date-time with the whole datekit API as methods.

    ``Today()`` is now; ``Today(x)`` accepts a date, a datetime (aware
    values are converted to host local time), an ISO-8601 string or another
    Today. Invalid input raises InvalidDateError.
    """

    value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _coerce(self.value))

    def __str__(self) -> str:
        return self.value.isoformat(timespec="milliseconds")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def now(cls) -> Today:
        return cls()

    @classmethod
    def parse(cls, text: str) -> Today:
        return cls(converters.from_iso_string(text))

    @classmethod
    def from_unix_timestamp(cls, seconds: int | float) -> Today:
        return cls(converters.from_unix_timestamp(seconds))

    @classmethod
    def from_milliseconds(cls, ms: int | float) -> Today:
        return cls(converters.from_milliseconds_timestamp(ms))

    @classmethod
    def from_object(cls, fields: dict[str, Any]) -> Today:
        return cls(converters.from_object(fields))

    @classmethod
    def from_array(cls, values: list[Any]) -> Today:
        return cls(converters.from_array(values))

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """True if ``value`` can build a Today."""
        try:
            _coerce(value)
        except DateKitError:
            return False
        return True

    @classmethod
    def min(cls, *values: DateLike) -> Today:
        return cls(compare.earliest(*(_unwrap(v) for v in values)))

    @classmethod
    def max(cls, *values: DateLike) -> Today:
        return cls(compare.latest(*(_unwrap(v) for v in values)))

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def hour(self) -> int:
        return self.value.hour

    @property
    def minute(self) -> int:
        return self.value.minute

    @property
    def second(self) -> int:
        return self.value.second

    @property
    def millisecond(self) -> int:
        return self.value.microsecond // 1000

    @property
    def day_of_week(self) -> int:
        """Sunday=0 .. Saturday=6."""
        return gregorian.day_of_week(self.value)

    @property
    def day_name(self) -> str:
        return gregorian.DAY_NAMES[self.day_of_week]

    @property
    def month_name(self) -> str:
        return gregorian.MONTH_NAMES[self.month - 1]

    def with_time(
        self, hour: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0
    ) -> Today:
        """Same day at another time of day; out-of-range fields roll over."""
        v = self.value
        return Today(
            gregorian.build(v.year, v.month, v.day, hour, minute, second, millisecond)
        )

    # ------------------------------------------------------------------
    # Calendar math
    # ------------------------------------------------------------------

    def is_leap_year(self) -> bool:
        return gregorian.is_leap_year(self.year)

    def days_in_month(self) -> int:
        return gregorian.days_in_month(self.year, self.month)

    def days_in_year(self) -> int:
        return gregorian.days_in_year(self.year)

    def day_of_year(self) -> int:
        return gregorian.day_of_year(self.value)

    def quarter(self) -> int:
        return gregorian.quarter(self.value)

    def quarter_name(self) -> str:
        return gregorian.quarter_name(self.value)

    def week_of_year(self) -> int:
        """ISO-8601 week number."""
        return gregorian.iso_week_of_year(self.value)

    def week_of_month(self) -> int:
        return gregorian.week_of_month(self.value)

    def is_am(self) -> bool:
        return gregorian.is_am(self.value)

    def is_pm(self) -> bool:
        return gregorian.is_pm(self.value)

    def is_midnight(self) -> bool:
        return gregorian.is_midnight(self.value)

    def is_noon(self) -> bool:
        return gregorian.is_noon(self.value)

    def is_odd_date(self) -> bool:
        return gregorian.is_odd_date(self.value)

    def is_even_date(self) -> bool:
        return gregorian.is_even_date(self.value)

    def day_with_ordinal(self) -> str:
        return gregorian.day_with_ordinal(self.value)

    # ------------------------------------------------------------------
    # Arithmetic and boundaries
    # ------------------------------------------------------------------

    def add(self, amount: int, unit: UnitLike) -> Today:
        return Today(arithmetic.add(self.value, amount, unit))

    def subtract(self, amount: int, unit: UnitLike) -> Today:
        return Today(arithmetic.subtract(self.value, amount, unit))

    def n_days_ago(self, n: int) -> Today:
        return Today(arithmetic.n_days_ago(self.value, n))

    def n_weeks_ago(self, n: int) -> Today:
        return Today(arithmetic.n_weeks_ago(self.value, n))

    def n_months_ago(self, n: int) -> Today:
        return Today(arithmetic.n_months_ago(self.value, n))

    def n_years_ago(self, n: int) -> Today:
        return Today(arithmetic.n_years_ago(self.value, n))

    def n_days_ahead(self, n: int) -> Today:
        return Today(arithmetic.n_days_ahead(self.value, n))

    def n_weeks_ahead(self, n: int) -> Today:
        return Today(arithmetic.n_weeks_ahead(self.value, n))

    def n_months_ahead(self, n: int) -> Today:
        return Today(arithmetic.n_months_ahead(self.value, n))

    def n_years_ahead(self, n: int) -> Today:
        return Today(arithmetic.n_years_ahead(self.value, n))

    def start_of(self, unit: UnitLike, week_start: int = SUNDAY) -> Today:
        return Today(boundary.start_of(self.value, unit, week_start))

    def end_of(self, unit: UnitLike, week_start: int = SUNDAY) -> Today:
        return Today(boundary.end_of(self.value, unit, week_start))

    # ------------------------------------------------------------------
    # Differences
    # ------------------------------------------------------------------

    def time_diff(self, other: DateLike) -> DifferenceResult:
        return difference.calendar_diff(self.value, _unwrap(other))

    def milliseconds_between(self, other: DateLike) -> int:
        return difference.milliseconds_between(self.value, _unwrap(other))

    def seconds_between(self, other: DateLike) -> int:
        return difference.seconds_between(self.value, _unwrap(other))

    def minutes_between(self, other: DateLike) -> int:
        return difference.minutes_between(self.value, _unwrap(other))

    def hours_between(self, other: DateLike) -> int:
        return difference.hours_between(self.value, _unwrap(other))

    def days_between(self, other: DateLike) -> int:
        return difference.days_between(self.value, _unwrap(other))

    def age(self, reference: DateLike | None = None) -> int:
        """Whole years from this date, read as a birth date, to ``reference``."""
        return difference.get_age(self.value, _optional(reference))

    def exact_age(self, reference: DateLike | None = None) -> DifferenceResult:
        return difference.exact_age(self.value, _optional(reference))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_before(
        self, other: DateLike, granularity: UnitLike = Unit.MILLISECOND
    ) -> bool:
        return compare.is_before(self.value, _unwrap(other), granularity)

    def is_after(
        self, other: DateLike, granularity: UnitLike = Unit.MILLISECOND
    ) -> bool:
        return compare.is_after(self.value, _unwrap(other), granularity)

    def is_same(
        self, other: DateLike, granularity: UnitLike = Unit.MILLISECOND
    ) -> bool:
        return compare.is_same(self.value, _unwrap(other), granularity)

    def is_between(
        self, start: DateLike, end: DateLike, inclusivity: str = "[]"
    ) -> bool:
        return compare.is_between(
            self.value, _unwrap(start), _unwrap(end), inclusivity
        )

    def is_today(self, reference: DateLike | None = None) -> bool:
        return compare.is_today(self.value, _optional(reference))

    def is_yesterday(self, reference: DateLike | None = None) -> bool:
        return compare.is_yesterday(self.value, _optional(reference))

    def is_tomorrow(self, reference: DateLike | None = None) -> bool:
        return compare.is_tomorrow(self.value, _optional(reference))

    def is_past(self, reference: DateLike | None = None) -> bool:
        return compare.is_past(self.value, _optional(reference))

    def is_future(self, reference: DateLike | None = None) -> bool:
        return compare.is_future(self.value, _optional(reference))

    def is_this_week(
        self, reference: DateLike | None = None, week_start: int = SUNDAY
    ) -> bool:
        return compare.is_this_week(self.value, _optional(reference), week_start)

    def is_this_month(self, reference: DateLike | None = None) -> bool:
        return compare.is_this_month(self.value, _optional(reference))

    def is_this_year(self, reference: DateLike | None = None) -> bool:
        return compare.is_this_year(self.value, _optional(reference))

    def is_weekend(self) -> bool:
        return compare.is_weekend(self.value)

    def is_weekday(self) -> bool:
        return compare.is_weekday(self.value)

    # ------------------------------------------------------------------
    # Business days
    # ------------------------------------------------------------------

    def is_business_day(self) -> bool:
        return business.is_business_day(self.value)

    def add_business_days(self, n: int) -> Today:
        return Today(business.add_business_days(self.value, n))

    def subtract_business_days(self, n: int) -> Today:
        return Today(business.subtract_business_days(self.value, n))

    def business_days_diff(self, other: DateLike) -> int:
        return business.business_days_diff(self.value, _unwrap(other))

    def next_business_day(self) -> Today:
        return Today(business.next_business_day(self.value))

    def previous_business_day(self) -> Today:
        return Today(business.previous_business_day(self.value))

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------

    def last_n_days(self, n: int) -> list[Today]:
        return _wrap_all(ranges.last_n_days(self.value, n))

    def last_n_weeks(self, n: int) -> list[Today]:
        return _wrap_all(ranges.last_n_weeks(self.value, n))

    def last_n_months(self, n: int) -> list[Today]:
        return _wrap_all(ranges.last_n_months(self.value, n))

    def last_n_years(self, n: int) -> list[Today]:
        return _wrap_all(ranges.last_n_years(self.value, n))

    def next_n_days(self, n: int) -> list[Today]:
        return _wrap_all(ranges.next_n_days(self.value, n))

    def next_n_weeks(self, n: int) -> list[Today]:
        return _wrap_all(ranges.next_n_weeks(self.value, n))

    def next_n_months(self, n: int) -> list[Today]:
        return _wrap_all(ranges.next_n_months(self.value, n))

    def next_n_years(self, n: int) -> list[Today]:
        return _wrap_all(ranges.next_n_years(self.value, n))

    def all_days_in_month(self) -> list[Today]:
        return _wrap_all(ranges.all_days_in_month(self.value))

    def all_days_in_year(self) -> list[Today]:
        return _wrap_all(ranges.all_days_in_year(self.value))

    def weekdays_in_month(self) -> list[Today]:
        return _wrap_all(ranges.weekdays_in_month(self.value))

    def weekends_in_month(self) -> list[Today]:
        return _wrap_all(ranges.weekends_in_month(self.value))

    def date_range(self, end: DateLike) -> list[Today]:
        return _wrap_all(ranges.date_range(self.value, _unwrap(end)))

    def business_days_in_range(self, end: DateLike) -> list[Today]:
        return _wrap_all(ranges.business_days_in_range(self.value, _unwrap(end)))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, pattern: str = formatting.DEFAULT_PATTERN) -> str:
        return formatting.format(self.value, pattern)

    def format_long(self) -> str:
        return formatting.format_long(self.value)

    def format_short(self) -> str:
        return formatting.format_short(self.value)

    def format_time(self, pattern: str = "HH:mm:ss") -> str:
        return formatting.format_time(self.value, pattern)

    def format_relative(self, reference: DateLike | None = None) -> str:
        return formatting.format_relative(self.value, _optional(reference))

    def from_now(self, reference: DateLike | None = None) -> str:
        return formatting.from_now(self.value, _optional(reference))

    def calendar(self, reference: DateLike | None = None) -> str:
        return formatting.calendar(self.value, _optional(reference))

    def timezone_offset(self) -> str:
        return formatting.timezone_offset(self.value)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_datetime(self) -> datetime:
        return self.value

    def to_unix_timestamp(self) -> int:
        return converters.to_unix_timestamp(self.value)

    def to_milliseconds_timestamp(self) -> int:
        return converters.to_milliseconds_timestamp(self.value)

    def to_utc(self) -> Today:
        return Today(converters.to_utc(self.value))

    def to_iso_string(self) -> str:
        return converters.to_iso_string(self.value)

    def to_json(self) -> str:
        return converters.to_json(self.value)

    def to_utc_string(self) -> str:
        return converters.to_utc_string(self.value)

    def to_rfc2822(self) -> str:
        return converters.to_rfc2822(self.value)

    def to_sql_date(self) -> str:
        return converters.to_sql_date(self.value)

    def to_sql_datetime(self) -> str:
        return converters.to_sql_datetime(self.value)

    def to_excel_date(self) -> float:
        return converters.to_excel_date(self.value)

    def to_object(self) -> dict[str, int]:
        return converters.to_object(self.value)

    def to_array(self) -> list[int]:
        return converters.to_array(self.value)

    def to_locale_date_string(self) -> str:
        return converters.to_locale_date_string(self.value)

    def to_locale_time_string(self) -> str:
        return converters.to_locale_time_string(self.value)

    def to_locale_string(self) -> str:
        return converters.to_locale_string(self.value)
