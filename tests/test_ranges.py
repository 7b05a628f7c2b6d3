"""Tests for date sequence generation.

Test data loaded from: data/fixtures/scenarios/ranges.json
"""

from __future__ import annotations

from datetime import datetime

import pytest

from conftest import day_dt, load_scenarios, parse

_data = load_scenarios("ranges")


def _parse_all(values: list[str]) -> list[datetime]:
    return [parse(v) for v in values]


class TestSteppedSequences:
    """last_n_* end at the value; next_n_* start one step after it."""

    @pytest.mark.parametrize("spec", _data["stepped"], ids=lambda s: s["id"])
    def test_sequence(self, spec):
        from datekit import ranges

        fn = getattr(ranges, spec["function"])
        assert fn(parse(spec["value"]), spec["n"]) == _parse_all(spec["expected"])


class TestDateRange:
    @pytest.mark.parametrize("spec", _data["date_range"], ids=lambda s: s["id"])
    def test_date_range(self, spec):
        from datekit.ranges import date_range

        result = date_range(parse(spec["start"]), parse(spec["end"]))
        assert result == _parse_all(spec["expected"])

    @pytest.mark.parametrize(
        "spec", _data["business_days_in_range"], ids=lambda s: s["id"]
    )
    def test_business_days_in_range(self, spec):
        from datekit.ranges import business_days_in_range

        result = business_days_in_range(parse(spec["start"]), parse(spec["end"]))
        assert result == _parse_all(spec["expected"])

    def test_iter_days_is_lazy(self):
        from datekit.ranges import iter_days

        days = iter_days(day_dt("mon"), datetime(9999, 12, 31))
        assert next(days) == day_dt("mon")
        assert next(days) == day_dt("tue")


class TestMonthListing:
    def test_december_9999(self):
        from datekit.ranges import all_days_in_month

        days = all_days_in_month(datetime(9999, 12, 15, 8))
        assert len(days) == 31
        assert days[-1] == datetime(9999, 12, 31)

    @pytest.mark.parametrize("spec", _data["month_listing"], ids=lambda s: s["id"])
    def test_all_days_in_month(self, spec):
        from datekit.ranges import all_days_in_month

        days = all_days_in_month(parse(spec["value"]))
        assert len(days) == spec["all_days"]
        assert days[0] == parse(spec["first"])
        assert days[-1] == parse(spec["last"])
        assert all(d.hour == 0 and d.minute == 0 for d in days)

    @pytest.mark.parametrize("spec", _data["month_listing"], ids=lambda s: s["id"])
    def test_weekdays_and_weekends(self, spec):
        from datekit.compare import is_weekend
        from datekit.ranges import weekdays_in_month, weekends_in_month

        weekdays = weekdays_in_month(parse(spec["value"]))
        weekends = weekends_in_month(parse(spec["value"]))
        assert len(weekdays) == spec["weekdays"]
        assert len(weekends) == spec["weekends"]
        assert not any(is_weekend(d) for d in weekdays)
        assert all(is_weekend(d) for d in weekends)

    @pytest.mark.parametrize("year, expected", [(2024, 366), (2023, 365)])
    def test_all_days_in_year(self, year, expected):
        from datekit.ranges import all_days_in_year

        days = all_days_in_year(datetime(year, 7, 4, 15))
        assert len(days) == expected
        assert days[0] == datetime(year, 1, 1)
        assert days[-1] == datetime(year, 12, 31)
        assert days == sorted(days)
