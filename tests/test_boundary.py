"""Tests for period boundaries: start_of, end_of and quarter_bounds.

Test data loaded from: data/fixtures/scenarios/boundary.json
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from conftest import dt, load_scenarios, parse

_data = load_scenarios("boundary")


class TestStartOf:
    @pytest.mark.parametrize("spec", _data["cases"], ids=lambda s: s["id"])
    def test_start_of(self, spec):
        from datekit.boundary import start_of

        result = start_of(parse(spec["value"]), spec["unit"], spec["week_start"])
        assert result == parse(spec["start"])

    @pytest.mark.parametrize("unit", _data["invalid_units"])
    def test_invalid_unit(self, unit):
        from datekit.boundary import start_of
        from datekit.types import InvalidUnitError

        with pytest.raises(InvalidUnitError):
            start_of(dt("tue"), unit)

    @pytest.mark.parametrize("week_start", [-1, 7, "monday", 1.0])
    def test_invalid_week_start(self, week_start):
        from datekit.boundary import start_of

        with pytest.raises(ValueError, match="week_start"):
            start_of(dt("tue"), "week", week_start)


class TestEndOf:
    @pytest.mark.parametrize("spec", _data["cases"], ids=lambda s: s["id"])
    def test_end_of(self, spec):
        from datekit.boundary import end_of

        result = end_of(parse(spec["value"]), spec["unit"], spec["week_start"])
        assert result == parse(spec["end"])

    @pytest.mark.parametrize("spec", _data["cases"], ids=lambda s: s["id"])
    def test_value_inside_period(self, spec):
        from datekit.boundary import end_of, start_of

        value = parse(spec["value"])
        first = start_of(value, spec["unit"], spec["week_start"])
        last = end_of(value, spec["unit"], spec["week_start"])
        assert first <= value <= last

    def test_week_spans_seven_days(self):
        from datekit.boundary import end_of, start_of

        for week_start in range(7):
            first = start_of(dt("thu", "13:00"), "week", week_start)
            last = end_of(dt("thu", "13:00"), "week", week_start)
            assert last - first == timedelta(days=7, microseconds=-1)

    def test_year_9999_end_is_representable(self):
        from datekit.boundary import end_of

        assert end_of(datetime(9999, 6, 1), "year") == datetime(
            9999, 12, 31, 23, 59, 59, 999999
        )

    @pytest.mark.parametrize("unit", ["month", "quarter", "year"])
    def test_december_9999_end_is_representable(self, unit):
        from datekit.boundary import end_of, start_of

        value = datetime(9999, 12, 15, 8)
        last = end_of(value, unit)
        assert last == datetime(9999, 12, 31, 23, 59, 59, 999999)
        assert start_of(value, unit) <= value <= last


class TestQuarterBounds:
    @pytest.mark.parametrize(
        "month, start, end",
        [
            (2, datetime(2024, 1, 1), datetime(2024, 3, 31, 23, 59, 59, 999999)),
            (5, datetime(2024, 4, 1), datetime(2024, 6, 30, 23, 59, 59, 999999)),
            (9, datetime(2024, 7, 1), datetime(2024, 9, 30, 23, 59, 59, 999999)),
            (12, datetime(2024, 10, 1), datetime(2024, 12, 31, 23, 59, 59, 999999)),
        ],
    )
    def test_quarter_bounds(self, month, start, end):
        from datekit.boundary import quarter_bounds

        assert quarter_bounds(datetime(2024, month, 15, 8)) == (start, end)
