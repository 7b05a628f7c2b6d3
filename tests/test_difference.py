"""Tests for differences: calendar_diff, the *_between helpers and ages.

Test data loaded from: data/fixtures/scenarios/difference.json
"""

from __future__ import annotations

from datetime import date

import pytest

from conftest import load_scenarios, parse

_data = load_scenarios("difference")


class TestCalendarDiff:
    """Sequential borrowing, finest field first."""

    @pytest.mark.parametrize("spec", _data["calendar_diff"], ids=lambda s: s["id"])
    def test_decomposition(self, spec):
        from datekit.difference import calendar_diff

        result = calendar_diff(parse(spec["a"]), parse(spec["b"]))
        assert result.as_dict() == spec["expected"], spec["notes"]

    @pytest.mark.parametrize("spec", _data["calendar_diff"], ids=lambda s: s["id"])
    def test_argument_order_irrelevant(self, spec):
        from datekit.difference import calendar_diff

        a, b = parse(spec["a"]), parse(spec["b"])
        assert calendar_diff(a, b) == calendar_diff(b, a)

    def test_accepts_plain_dates(self):
        from datekit.difference import calendar_diff

        result = calendar_diff(date(2024, 3, 5), date(2023, 3, 5))
        assert (result.years, result.months, result.days) == (1, 0, 0)
        assert result.total_days == 366


class TestBetween:
    @pytest.mark.parametrize("spec", _data["between"], ids=lambda s: s["id"])
    def test_flat_differences(self, spec):
        from datekit.difference import (
            days_between,
            hours_between,
            minutes_between,
            seconds_between,
        )

        a, b = parse(spec["a"]), parse(spec["b"])
        assert days_between(a, b) == spec["days"]
        assert hours_between(a, b) == spec["hours"]
        assert minutes_between(a, b) == spec["minutes"]
        assert seconds_between(a, b) == spec["seconds"]
        assert days_between(b, a) == spec["days"]

    def test_milliseconds_between_truncates_microseconds(self):
        from datekit.difference import milliseconds_between

        a = parse("2024-03-05T10:00:00")
        b = parse("2024-03-05T10:00:00.001999")
        assert milliseconds_between(a, b) == 1


class TestAge:
    @pytest.mark.parametrize("spec", _data["age"], ids=lambda s: s["id"])
    def test_get_age(self, spec):
        from datekit.difference import get_age

        birth = date.fromisoformat(spec["birth"])
        assert get_age(birth, parse(spec["reference"])) == spec["expected"]

    def test_exact_age(self):
        from datekit.difference import exact_age

        result = exact_age(date(1990, 6, 15), parse("2024-03-05T00:00:00"))
        assert (result.years, result.months, result.days) == (33, 8, 19)

    def test_default_reference_is_now(self):
        from datetime import datetime

        from datekit.difference import get_age

        assert get_age(datetime.now()) == 0
