"""Shared test fixtures and data loading for datekit.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference week: Mon 2024-03-04 through Sun 2024-03-10.
Reference instant ("now"): Tue 2024-03-05 12:00.
"""

from __future__ import annotations

import json
import time
from datetime import date, datetime
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")

REFERENCE = datetime.fromisoformat(_reference["reference"])

# Day lookup:  DAYS["fri"] → {"date": date(2024, 3, 8), "day_of_week": 5, ...}
DAYS: dict[str, dict] = {}
for _d in _reference["days"]:
    DAYS[_d["name"]] = {
        "date": date.fromisoformat(_d["date"]),
        "datetime": datetime.fromisoformat(_d["date"] + "T00:00:00"),
        "day_of_week": _d["day_of_week"],
    }


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def parse(text: str | None) -> datetime | None:
    """ISO string from a scenario file -> naive datetime (None passes through)."""
    return None if text is None else datetime.fromisoformat(text)


def dt(day: str, time_label: str = "00:00") -> datetime:
    """Datetime from a reference-week day name and an HH:MM[:SS] label.

    >>> dt("fri", "15:30")
    datetime(2024, 3, 8, 15, 30)
    """
    return datetime.fromisoformat(f"{DAYS[day]['date'].isoformat()}T{time_label}")


def day_dt(day: str) -> datetime:
    """Midnight datetime for a named day."""
    return DAYS[day]["datetime"]


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Host timezone control
# ---------------------------------------------------------------------------
def _set_host_tz(monkeypatch, tz: str):
    if not hasattr(time, "tzset"):
        pytest.skip("host timezone cannot be switched on this platform")
    monkeypatch.setenv("TZ", tz)
    time.tzset()


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def reference() -> datetime:
    return REFERENCE


@pytest.fixture
def utc_host(monkeypatch):
    """Run the test with the host's local time zone set to UTC."""
    _set_host_tz(monkeypatch, "UTC")
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def india_host(monkeypatch):
    """Fixed +05:30 host zone (POSIX TZ string, no tz database needed)."""
    _set_host_tz(monkeypatch, "IST-5:30")
    yield
    monkeypatch.undo()
    time.tzset()
