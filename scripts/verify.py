#!/usr/bin/env python
"""Visual verification report for datekit.

Run:  python scripts/verify.py

Produces a formatted report showing:
  1. Reference week (day names, Sunday=0 numbering, ISO weeks) and a month grid
  2. Layer 1 scenarios (add, start_of / end_of)  -- input/output tables
  3. Layer 2 scenarios (calendar_diff, business days)  -- input/output tables
  4. Layer 3 scenarios (ranges, formatting, relative phrases)  -- input/output tables

Every row is checked against the fixture's expected value and marked
ok / FAIL; the exit status is the number of failures.
"""

from __future__ import annotations

import json
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from datekit.arithmetic import add
from datekit.boundary import end_of, start_of
from datekit.business import add_business_days, business_days_diff
from datekit.difference import calendar_diff
from datekit.formatting import calendar, format, format_relative, from_now
from datekit.gregorian import (
    DAY_ABBRS,
    DAY_NAMES,
    day_of_week,
    days_in_month,
    iso_week_of_year,
    week_of_month,
)
from datekit import ranges


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_ref = _load(FIXTURES / "reference.json")

REFERENCE = datetime.fromisoformat(_ref["reference"])
FAILURES: list[str] = []

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _fmt_dt(value: datetime) -> str:
    """'Tue 05 Mar 2024 09:30', with milliseconds when present."""
    text = format(value, "ddd DD MMM YYYY HH:mm")
    if value.second or value.microsecond:
        text += format(value, ":ss.SSS")
    return text


def _check(label: str, actual, expected) -> str:
    if actual == expected:
        return "ok"
    FAILURES.append(label)
    return "FAIL"


def _iso(text: str) -> datetime:
    return datetime.fromisoformat(text)


def show_month(year: int, month: int):
    """ASCII month grid, Sunday-first, with ISO week numbers on the left."""
    print("    " + "Wk  " + " ".join(f"{abbr:>3}" for abbr in DAY_ABBRS))
    first = date(year, month, 1)
    rows: dict[int, list[str]] = {}
    weeks: dict[int, int] = {}
    for day in range(1, days_in_month(year, month) + 1):
        d = first.replace(day=day)
        row = week_of_month(d)
        rows.setdefault(row, ["   "] * 7)[day_of_week(d)] = f"{day:>3}"
        weeks.setdefault(row, iso_week_of_year(d))
    for row in sorted(rows):
        print(f"    {weeks[row]:>2}  " + " ".join(rows[row]))


# ---------------------------------------------------------------------------
# Section 1: Reference Data
# ---------------------------------------------------------------------------
def section_reference():
    banner("REFERENCE DATA")
    print(f"\n    Reference instant: {REFERENCE.strftime('%A %Y-%m-%d %H:%M')}")

    heading("Reference Week")
    rows = []
    for d in _ref["days"]:
        value = date.fromisoformat(d["date"])
        rows.append([
            d["name"],
            d["date"],
            DAY_NAMES[day_of_week(value)],
            str(day_of_week(value)),
            str(iso_week_of_year(value)),
            _check(f"reference:{d['name']}", day_of_week(value), d["day_of_week"]),
        ])
    table(["Name", "Date", "Day", "Sunday=0", "ISO week", "Check"], rows)

    heading("March 2024")
    show_month(2024, 3)


# ---------------------------------------------------------------------------
# Section 2: Layer 1  -- Stepping and Boundaries
# ---------------------------------------------------------------------------
def section_stepping():
    banner("LAYER 1: STEPPING AND BOUNDARIES")

    data = _load(SCENARIOS / "arithmetic.json")
    heading("Function: add(value, amount, unit) -> datetime")
    print("    Month and year steps overflow instead of clamping.\n")
    rows = []
    for s in data["add"]:
        result = add(_iso(s["start"]), s["amount"], s["unit"])
        rows.append([
            s["id"], _fmt_dt(_iso(s["start"])), f"{s['amount']:+d} {s['unit']}",
            _fmt_dt(result), _check(f"add:{s['id']}", result, _iso(s["expected"])),
        ])
    table(["Scenario", "Start", "Step", "Result", "Check"], rows)

    data = _load(SCENARIOS / "boundary.json")
    heading("Function: start_of / end_of(value, unit, week_start)")
    rows = []
    for s in data["cases"]:
        value = _iso(s["value"])
        first = start_of(value, s["unit"], s["week_start"])
        last = end_of(value, s["unit"], s["week_start"])
        ok = _check(
            f"boundary:{s['id']}", (first, last), (_iso(s["start"]), _iso(s["end"]))
        )
        rows.append([s["id"], s["unit"], _fmt_dt(first), _fmt_dt(last), ok])
    table(["Scenario", "Unit", "Start", "End", "Check"], rows)


# ---------------------------------------------------------------------------
# Section 3: Layer 2  -- Differences and Business Days
# ---------------------------------------------------------------------------
def section_differences():
    banner("LAYER 2: DIFFERENCES AND BUSINESS DAYS")

    data = _load(SCENARIOS / "difference.json")
    heading("Function: calendar_diff(a, b) -> DifferenceResult")
    rows = []
    for s in data["calendar_diff"]:
        result = calendar_diff(_iso(s["a"]), _iso(s["b"]))
        fields = f"{result.years}y {result.months}mo {result.days}d " \
                 f"{result.hours}h {result.minutes}m {result.seconds}s"
        rows.append([
            s["id"], fields, str(result.total_days),
            _check(f"diff:{s['id']}", result.as_dict(), s["expected"]),
        ])
    table(["Scenario", "Fields", "Total days", "Check"], rows)

    data = _load(SCENARIOS / "business.json")
    heading("Function: add_business_days(value, n) -> datetime")
    rows = []
    for s in data["add_business_days"]:
        result = add_business_days(_iso(s["start"]), s["n"])
        rows.append([
            s["id"], _fmt_dt(_iso(s["start"])), f"{s['n']:+d}", _fmt_dt(result),
            _check(f"business:{s['id']}", result, _iso(s["expected"])),
        ])
    table(["Scenario", "Start", "n", "Result", "Check"], rows)

    heading("Function: business_days_diff(a, b) -> int  (half-open)")
    rows = []
    for s in data["business_days_diff"]:
        result = business_days_diff(_iso(s["a"]), _iso(s["b"]))
        rows.append([
            s["id"], _fmt_dt(_iso(s["a"])), _fmt_dt(_iso(s["b"])), str(result),
            _check(f"business_diff:{s['id']}", result, s["expected"]),
        ])
    table(["Scenario", "From", "To", "Days", "Check"], rows)


# ---------------------------------------------------------------------------
# Section 4: Layer 3  -- Ranges and Formatting
# ---------------------------------------------------------------------------
def section_presentation():
    banner("LAYER 3: RANGES AND FORMATTING")

    data = _load(SCENARIOS / "ranges.json")
    heading("Stepped sequences")
    rows = []
    for s in data["stepped"]:
        result = getattr(ranges, s["function"])(_iso(s["value"]), s["n"])
        rows.append([
            s["id"], s["function"], ", ".join(format(d, "MM-DD") for d in result),
            _check(f"ranges:{s['id']}", result, [_iso(e) for e in s["expected"]]),
        ])
    table(["Scenario", "Function", "Result", "Check"], rows)

    data = _load(SCENARIOS / "formatting.json")
    heading("Function: format(value, pattern) -> str")
    rows = []
    for s in data["format"]:
        result = format(_iso(s["value"]), s["pattern"])
        rows.append([
            s["id"], repr(s["pattern"]), repr(result),
            _check(f"format:{s['id']}", result, s["expected"]),
        ])
    table(["Scenario", "Pattern", "Result", "Check"], rows)

    heading(f"Relative phrases (reference {_fmt_dt(REFERENCE)})")
    rows = []
    for s in data["format_relative"]:
        value = REFERENCE + timedelta(seconds=s["offset_seconds"])
        result = format_relative(value, REFERENCE)
        rows.append([
            "format_relative", s["id"], result,
            _check(f"relative:{s['id']}", result, s["expected"]),
        ])
    for s in data["from_now"]:
        value = REFERENCE + timedelta(seconds=s["offset_seconds"])
        result = from_now(value, REFERENCE)
        rows.append([
            "from_now", s["id"], result,
            _check(f"from_now:{s['id']}", result, s["expected"]),
        ])
    for s in data["calendar"]:
        result = calendar(_iso(s["value"]), REFERENCE)
        rows.append([
            "calendar", s["id"], result,
            _check(f"calendar:{s['id']}", result, s["expected"]),
        ])
    table(["Function", "Scenario", "Result", "Check"], rows)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main() -> int:
    banner("DATEKIT   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_reference()
    section_stepping()
    section_differences()
    section_presentation()

    banner(f"END OF REPORT  --  {len(FAILURES)} failure(s)")
    for label in FAILURES:
        print(f"    FAIL  {label}")
    print()
    return len(FAILURES)


if __name__ == "__main__":
    sys.exit(main())
