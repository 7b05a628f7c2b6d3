"""Hypothesis property-based tests.

Properties that must hold for all valid inputs, verified by random generation.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from datekit.arithmetic import add, subtract
from datekit.boundary import end_of, start_of
from datekit.business import add_business_days, business_days_diff
from datekit.compare import is_between, is_same, is_weekday
from datekit.difference import calendar_diff, milliseconds_between
from datekit.formatting import format
from datekit.gregorian import day_of_week, days_in_month, iso_week_of_year
from datekit.ranges import date_range
from datekit.units import BOUNDARY_UNITS

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

# Away from datetime.min/max so every boundary and step stays representable.
_datetimes = st.datetimes(
    min_value=datetime(1900, 1, 1), max_value=datetime(2199, 12, 31)
)
_dates = st.dates(min_value=date(1900, 1, 1), max_value=date(2199, 12, 31))
_fixed_units = st.sampled_from(
    ["millisecond", "second", "minute", "hour", "day", "week"]
)
_boundary_units = st.sampled_from(sorted(u.value for u in BOUNDARY_UNITS))
_week_starts = st.integers(min_value=0, max_value=6)
_far_future = st.datetimes(
    min_value=datetime(9990, 1, 1), max_value=datetime(9999, 12, 31, 23, 59, 59)
)


# ---------------------------------------------------------------------------
# Property: fixed-length steps invert
# ---------------------------------------------------------------------------
class TestStepRoundTrip:
    """subtract(add(d, n, u), n, u) == d for units of fixed length."""

    @given(value=_datetimes, n=st.integers(min_value=-5000, max_value=5000),
           unit=_fixed_units)
    @settings(max_examples=200)
    def test_add_subtract_inverse(self, value, n, unit):
        assert subtract(add(value, n, unit), n, unit) == value

    @given(value=_datetimes, months=st.integers(min_value=-600, max_value=600))
    @settings(max_examples=200)
    def test_month_step_keeps_day_when_it_exists(self, value, months):
        """Without overflow, a month step only changes year and month."""
        assume(value.day <= 28)
        result = add(value, months, "month")
        assert result.day == value.day
        assert result.time() == value.time()
        assert result.year * 12 + result.month == value.year * 12 + value.month + months


# ---------------------------------------------------------------------------
# Property: boundaries bracket the value
# ---------------------------------------------------------------------------
class TestBoundaries:
    @given(value=_datetimes, unit=_boundary_units, week_start=_week_starts)
    @settings(max_examples=300)
    def test_start_le_value_le_end(self, value, unit, week_start):
        first = start_of(value, unit, week_start)
        assert first <= value <= end_of(value, unit, week_start)

    @given(value=_datetimes, unit=_boundary_units, week_start=_week_starts)
    @settings(max_examples=200)
    def test_idempotent(self, value, unit, week_start):
        first = start_of(value, unit, week_start)
        assert start_of(first, unit, week_start) == first
        assert end_of(end_of(value, unit, week_start), unit, week_start) == end_of(
            value, unit, week_start
        )

    @given(value=_datetimes)
    def test_day_span(self, value):
        span = milliseconds_between(start_of(value, "day"), end_of(value, "day"))
        assert span == 86_399_999

    @given(
        value=_far_future,
        unit=st.sampled_from(["day", "month", "quarter", "year", "decade", "century"]),
    )
    def test_ends_representable_up_to_9999(self, value, unit):
        assert start_of(value, unit) <= value <= end_of(value, unit)

    @given(value=_datetimes)
    def test_month_end_day_is_month_length(self, value):
        assert end_of(value, "month").day == days_in_month(value.year, value.month)


# ---------------------------------------------------------------------------
# Property: calendar numbering agrees with the standard library
# ---------------------------------------------------------------------------
class TestNumbering:
    @given(value=_dates)
    def test_iso_week_matches_isocalendar(self, value):
        assert iso_week_of_year(value) == value.isocalendar()[1]

    @given(value=_dates)
    def test_sunday_zero_weekday(self, value):
        assert day_of_week(value) == value.isoweekday() % 7

    @given(value=_dates)
    def test_default_format_matches_isoformat(self, value):
        assert format(value, "YYYY-MM-DD") == value.isoformat()


# ---------------------------------------------------------------------------
# Property: differences
# ---------------------------------------------------------------------------
class TestDifferences:
    @given(a=_datetimes, b=_datetimes)
    @settings(max_examples=300)
    def test_symmetric(self, a, b):
        assert calendar_diff(a, b) == calendar_diff(b, a)

    @given(a=_datetimes, b=_datetimes)
    @settings(max_examples=300)
    def test_fields_in_range(self, a, b):
        result = calendar_diff(a, b)
        assert result.years >= 0
        assert 0 <= result.months < 12
        assert 0 <= result.days < 31
        assert 0 <= result.hours < 24
        assert 0 <= result.minutes < 60
        assert 0 <= result.seconds < 60
        assert result.total_milliseconds == milliseconds_between(a, b)
        assert result.total_days == result.total_milliseconds // 86_400_000


# ---------------------------------------------------------------------------
# Property: business days
# ---------------------------------------------------------------------------
class TestBusinessDays:
    @given(value=_datetimes)
    def test_any_seven_day_span_has_five(self, value):
        assert business_days_diff(value, value + timedelta(days=7)) == 5

    @given(value=_datetimes, n=st.integers(min_value=1, max_value=300))
    @settings(max_examples=100)
    def test_step_then_count(self, value, n):
        assume(is_weekday(value))
        landed = add_business_days(value, n)
        assert is_weekday(landed)
        assert business_days_diff(value, landed) == n

    @given(value=_datetimes, n=st.integers(min_value=-300, max_value=300))
    @settings(max_examples=100)
    def test_time_of_day_kept(self, value, n):
        assert add_business_days(value, n).time() == value.time()


# ---------------------------------------------------------------------------
# Property: ranges and comparison
# ---------------------------------------------------------------------------
class TestRangesAndComparison:
    @given(value=_datetimes)
    def test_single_day_range(self, value):
        assert date_range(value, value) == [value]

    @given(a=_dates, days=st.integers(min_value=0, max_value=400))
    @settings(max_examples=100)
    def test_range_length(self, a, days):
        b = a + timedelta(days=days)
        result = date_range(b, a)
        assert len(result) == days + 1
        assert result == sorted(result)

    @given(value=_datetimes, unit=_boundary_units)
    def test_is_same_reflexive(self, value, unit):
        assert is_same(value, value, unit)

    @given(a=_datetimes, b=_datetimes)
    def test_bounds_membership(self, a, b):
        start, end = min(a, b), max(a, b)
        assert is_between(start, start, end, "[]")
        assert is_between(end, start, end, "[]")
        assert is_between(start, start, end, "[)") is (start < end)
        assert not is_between(end, start, end, "[)")
        assert not is_between(start, start, end, "()")

    @given(a=_datetimes, b=_datetimes)
    def test_interior_agrees_for_every_bound(self, a, b):
        start, end = min(a, b), max(a, b)
        middle = start + (end - start) / 2
        assume(start < middle < end)
        for bounds in ("[]", "[)", "(]", "()"):
            assert is_between(middle, start, end, bounds)
