"""Layer 3: token formatting and human-readable phrases.

format() never raises for a bad pattern: a pattern without any recognised
token (or an empty / non-string pattern) renders the ISO-8601 fallback.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable

from datekit.boundary import start_of
from datekit.gregorian import (
    DAY_ABBRS,
    DAY_MINS,
    DAY_NAMES,
    MONTH_ABBRS,
    MONTH_NAMES,
    day_of_week,
    ensure_datetime,
    reference_or_now,
)
from datekit.units import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    Unit,
)

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "YYYY-MM-DD"
ISO_PATTERN = "YYYY-MM-DD[T]HH:mm:ss.SSS[Z]"

_ONE_MS = timedelta(milliseconds=1)


def timezone_offset(value: date, separator: str = ":") -> str:
    """Host UTC offset in effect at ``value``, as ``+HH:MM``.

    Naive datetimes are interpreted in host local time. Dates the host
    cannot localise use the current offset.
    """
    dt = ensure_datetime(value)
    try:
        offset = dt.astimezone().utcoffset()
    except (OverflowError, OSError, ValueError):
        logger.debug("host cannot localise %s; using current offset", dt)
        offset = datetime.now().astimezone().utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset else 0
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _utc_wall_clock(dt: datetime) -> datetime:
    """UTC wall-clock of a host-local naive datetime."""
    try:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    except (OverflowError, OSError, ValueError):
        logger.debug("host cannot localise %s; rendering local wall-clock", dt)
        return dt


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


_TOKENS: list[tuple[str, Callable[[datetime], str]]] = [
    ("YYYY", lambda dt: f"{dt.year:04d}"),
    ("YY", lambda dt: f"{dt.year % 100:02d}"),
    ("MMMM", lambda dt: MONTH_NAMES[dt.month - 1]),
    ("MMM", lambda dt: MONTH_ABBRS[dt.month - 1]),
    ("MM", lambda dt: f"{dt.month:02d}"),
    ("M", lambda dt: str(dt.month)),
    ("DD", lambda dt: f"{dt.day:02d}"),
    ("D", lambda dt: str(dt.day)),
    ("dddd", lambda dt: DAY_NAMES[day_of_week(dt)]),
    ("ddd", lambda dt: DAY_ABBRS[day_of_week(dt)]),
    ("dd", lambda dt: DAY_MINS[day_of_week(dt)]),
    ("HH", lambda dt: f"{dt.hour:02d}"),
    ("H", lambda dt: str(dt.hour)),
    ("hh", lambda dt: f"{_hour12(dt):02d}"),
    ("h", lambda dt: str(_hour12(dt))),
    ("mm", lambda dt: f"{dt.minute:02d}"),
    ("m", lambda dt: str(dt.minute)),
    ("ss", lambda dt: f"{dt.second:02d}"),
    ("s", lambda dt: str(dt.second)),
    ("SSS", lambda dt: f"{dt.microsecond // 1000:03d}"),
    ("A", lambda dt: "PM" if dt.hour >= 12 else "AM"),
    ("a", lambda dt: "pm" if dt.hour >= 12 else "am"),
    ("ZZ", lambda dt: timezone_offset(dt, separator="")),
    ("Z", lambda dt: timezone_offset(dt)),
]
# Longest first, so MMMM is tried before MM and M at the same position.
_TOKENS.sort(key=lambda pair: len(pair[0]), reverse=True)


def _render(dt: datetime, pattern: str) -> tuple[str, int]:
    """Single left-to-right scan. Returns (text, number of tokens rendered).

    ``[...]`` emits its contents literally. Rendered values are never
    rescanned.
    """
    out: list[str] = []
    matched = 0
    i = 0
    n = len(pattern)

    while i < n:
        if pattern[i] == "[":
            close = pattern.find("]", i + 1)
            if close != -1:
                out.append(pattern[i + 1:close])
                i = close + 1
                continue

        for token, renderer in _TOKENS:
            if pattern.startswith(token, i):
                out.append(renderer(dt))
                matched += 1
                i += len(token)
                break
        else:
            out.append(pattern[i])
            i += 1

    return "".join(out), matched


def format(value: date, pattern: Any = None) -> str:  # noqa: A001
    """Render ``value`` using a token pattern such as ``"YYYY-MM-DD HH:mm"``.

    Tokens: YYYY YY MMMM MMM MM M DD D dddd ddd dd HH H hh h mm m ss s SSS
    A a ZZ Z. Anything else is copied through; wrap literal text that
    would otherwise match a token in brackets: ``"[Day] D"``.

    A pattern with no tokens falls back to the UTC ISO-8601 rendering
    used by ``to_iso_string``.
    """
    dt = ensure_datetime(value)
    if isinstance(pattern, str) and pattern:
        text, matched = _render(dt, pattern)
        if matched:
            return text
    logger.debug("pattern %r has no tokens; using ISO-8601 fallback", pattern)
    return _render(_utc_wall_clock(dt), ISO_PATTERN)[0]


def format_long(value: date) -> str:
    """``"March 5, 2024"``."""
    return format(value, "MMMM D, YYYY")


def format_short(value: date) -> str:
    """``"03/05/2024"``."""
    return format(value, "MM/DD/YYYY")


def format_time(value: date, pattern: str = "HH:mm:ss") -> str:
    return format(value, pattern)


# ---------------------------------------------------------------------------
# Relative phrases
# ---------------------------------------------------------------------------

def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


# (days below, days per unit, unit); past the last row the unit is 365-day years.
_RELATIVE_DAY_BUCKETS = ((7, 1, "day"), (30, 7, "week"), (365, 30, "month"))
_FROM_NOW_DAY_BUCKETS = ((30, 1, "day"), (365, 30, "month"))


def _bucket(
    abs_ms: int, day_buckets: tuple[tuple[int, int, str], ...]
) -> tuple[int, str]:
    if abs_ms < MS_PER_MINUTE:
        return abs_ms // MS_PER_SECOND, "second"
    if abs_ms < MS_PER_HOUR:
        return abs_ms // MS_PER_MINUTE, "minute"
    if abs_ms < MS_PER_DAY:
        return abs_ms // MS_PER_HOUR, "hour"
    days = abs_ms // MS_PER_DAY
    for limit, size, unit in day_buckets:
        if days < limit:
            return days // size, unit
    return days // 365, "year"


def format_relative(value: date, reference: date | None = None) -> str:
    """Bucketed phrase relative to ``reference`` (default: now).

    ``"just now"`` under a minute, then ``"in 3 hours"`` / ``"3 hours ago"``
    for minutes, hours, days (< 7), weeks (< 30 days), months of 30 days
    (< 365 days) and years of 365 days.
    """
    gap_ms = (ensure_datetime(value) - reference_or_now(reference)) // _ONE_MS
    amount, unit = _bucket(abs(gap_ms), _RELATIVE_DAY_BUCKETS)
    if unit == "second":
        return "just now"
    phrase = _plural(amount, unit)
    return f"in {phrase}" if gap_ms > 0 else f"{phrase} ago"


def from_now(value: date, reference: date | None = None) -> str:
    """``"5 minutes ago"`` / ``"5 minutes from now"`` relative to ``reference``.

    Buckets: seconds, minutes, hours, days (< 30), months of 30 days
    (< 365 days), years of 365 days.
    """
    gap_ms = (reference_or_now(reference) - ensure_datetime(value)) // _ONE_MS
    amount, unit = _bucket(abs(gap_ms), _FROM_NOW_DAY_BUCKETS)
    suffix = "ago" if gap_ms > 0 else "from now"
    return f"{_plural(amount, unit)} {suffix}"


def format_duration(milliseconds: int) -> str:
    """Compact breakdown of a millisecond magnitude.

    ``"2d 3h 4m"``, ``"3h 4m 5s"``, ``"4m 5s"`` or ``"5s"`` depending on the
    largest non-zero unit. The sign is ignored.
    """
    total_seconds = abs(int(milliseconds)) // MS_PER_SECOND
    minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    if days:
        return f"{days}d {hours}h {minutes}m"
    if hours:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


def calendar(value: date, reference: date | None = None) -> str:
    """Calendar phrase: ``"Today at 9:30 AM"``, ``"Friday at 9:30 AM"`` ...

    Yesterday/Today/Tomorrow for offsets -1..1 days, the weekday name for
    2..6 days ahead, otherwise the full date.
    """
    dt = ensure_datetime(value)
    day_offset = (
        start_of(dt, Unit.DAY) - start_of(reference_or_now(reference), Unit.DAY)
    ).days

    if day_offset == 0:
        return f"Today at {format(dt, 'h:mm A')}"
    if day_offset == -1:
        return f"Yesterday at {format(dt, 'h:mm A')}"
    if day_offset == 1:
        return f"Tomorrow at {format(dt, 'h:mm A')}"
    if 1 < day_offset < 7:
        return format(dt, "dddd [at] h:mm A")
    return format(dt, "MMM D, YYYY [at] h:mm A")
