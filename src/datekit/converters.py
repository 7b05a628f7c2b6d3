"""Boundary: conversions between datetimes and external representations.

Timestamps, ISO/UTC/SQL/RFC 2822 strings, Excel serial days and plain
field mappings or sequences. Naive datetimes are host local time; the
UTC-facing conversions go through the host's offset for that instant.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Mapping, Sequence

from datekit.formatting import ISO_PATTERN, format as format_date
from datekit.gregorian import build, day_of_week, ensure_datetime
from datekit.schema import (
    FIELD_DEFAULTS,
    FIELD_NAMES,
    validate_fields,
    validate_sequence,
)
from datekit.types import InvalidDateError
from datekit.units import MS_PER_MINUTE, MS_PER_SECOND

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
EXCEL_EPOCH = datetime(1899, 12, 30)

_ONE_MS = timedelta(milliseconds=1)
_ONE_DAY = timedelta(days=1)


def _localize(dt: datetime) -> datetime:
    try:
        return dt.astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(dt, f"host cannot localise this date ({e})") from e


def _to_local_naive(aware: datetime) -> datetime:
    try:
        return aware.astimezone().replace(tzinfo=None)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(aware, f"host cannot localise this instant ({e})") from e


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

def to_milliseconds_timestamp(value: date) -> int:
    """Milliseconds since the Unix epoch (floored)."""
    return (_localize(ensure_datetime(value)) - UNIX_EPOCH) // _ONE_MS


def to_unix_timestamp(value: date) -> int:
    """Whole seconds since the Unix epoch (floored)."""
    return to_milliseconds_timestamp(value) // MS_PER_SECOND


def from_milliseconds_timestamp(ms: int | float) -> datetime:
    try:
        return _to_local_naive(UNIX_EPOCH + timedelta(milliseconds=ms))
    except (OverflowError, TypeError, ValueError) as e:
        raise InvalidDateError(ms, f"not a usable millisecond timestamp ({e})") from e


def from_unix_timestamp(seconds: int | float) -> datetime:
    try:
        return _to_local_naive(UNIX_EPOCH + timedelta(seconds=seconds))
    except (OverflowError, TypeError, ValueError) as e:
        raise InvalidDateError(seconds, f"not a usable unix timestamp ({e})") from e


# ---------------------------------------------------------------------------
# UTC and ISO strings
# ---------------------------------------------------------------------------

def to_utc(value: date) -> datetime:
    """Local wall-clock -> UTC wall-clock of the same instant (both naive)."""
    aware = _localize(ensure_datetime(value))
    return aware.astimezone(timezone.utc).replace(tzinfo=None)


def from_utc(value: date) -> datetime:
    """UTC wall-clock -> local wall-clock of the same instant (both naive)."""
    return _to_local_naive(ensure_datetime(value).replace(tzinfo=timezone.utc))


def to_iso_string(value: date) -> str:
    """``2024-03-05T09:30:00.000Z`` (UTC, millisecond precision)."""
    return format_date(to_utc(value), ISO_PATTERN)


def to_json(value: date) -> str:
    return to_iso_string(value)


def from_iso_string(text: str) -> datetime:
    """Parse an ISO-8601 string into a naive local datetime.

    Strings carrying an offset (or ``Z``) are converted to host local time.
    """
    if not isinstance(text, str):
        raise InvalidDateError(
            text, f"expected an ISO-8601 string, got {type(text).__name__}"
        )
    normalized = text.strip()
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as e:
        raise InvalidDateError(text, f"not an ISO-8601 date ({e})") from e
    if parsed.tzinfo is not None:
        return _to_local_naive(parsed)
    return parsed


def to_utc_string(value: date) -> str:
    """``Tue, 05 Mar 2024 09:30:00 GMT``."""
    return format_date(to_utc(value), "ddd, DD MMM YYYY HH:mm:ss [GMT]")


def to_rfc2822(value: date) -> str:
    """``Tue, 05 Mar 2024 10:30:00 +0100`` in host local time."""
    return format_date(value, "ddd, DD MMM YYYY HH:mm:ss ZZ")


# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

def to_sql_date(value: date) -> str:
    return format_date(value, "YYYY-MM-DD")


def to_sql_datetime(value: date) -> str:
    return format_date(value, "YYYY-MM-DD HH:mm:ss")


def to_sql_timestamp(value: date) -> str:
    return to_sql_datetime(value)


def _strptime(text: Any, fmt: str, kind: str) -> datetime:
    try:
        return datetime.strptime(text, fmt)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(text, f"not an SQL {kind} ({e})") from e


def from_sql_date(text: str) -> datetime:
    """``"2024-03-05"`` -> midnight of that day."""
    return _strptime(text, "%Y-%m-%d", "DATE")


def from_sql_datetime(text: str) -> datetime:
    """``"2024-03-05 14:30:00"`` -> datetime."""
    return _strptime(text, "%Y-%m-%d %H:%M:%S", "DATETIME")


# ---------------------------------------------------------------------------
# Excel serial days
# ---------------------------------------------------------------------------

def to_excel_date(value: date) -> float:
    """Fractional days since 1899-12-30 (Excel's 1900 date system)."""
    return (ensure_datetime(value) - EXCEL_EPOCH) / _ONE_DAY


def from_excel_date(serial: int | float) -> datetime:
    try:
        return EXCEL_EPOCH + timedelta(days=serial)
    except (OverflowError, TypeError, ValueError) as e:
        raise InvalidDateError(serial, f"not a usable Excel serial date ({e})") from e


# ---------------------------------------------------------------------------
# Field mappings and sequences
# ---------------------------------------------------------------------------

def to_object(value: date) -> dict[str, int]:
    """Plain field mapping; months are 1-12, day_of_week is Sunday=0.

    timezone_offset is minutes east of UTC.
    """
    dt = ensure_datetime(value)
    timestamp = to_milliseconds_timestamp(dt)
    offset = _localize(dt).utcoffset() or timedelta(0)
    return {
        "year": dt.year,
        "month": dt.month,
        "day": dt.day,
        "hours": dt.hour,
        "minutes": dt.minute,
        "seconds": dt.second,
        "milliseconds": dt.microsecond // 1000,
        "day_of_week": day_of_week(dt),
        "timestamp": timestamp,
        "unix_timestamp": timestamp // MS_PER_SECOND,
        "timezone_offset": (offset // _ONE_MS) // MS_PER_MINUTE,
    }


def _from_values(values: Sequence[Any]) -> datetime:
    resolved = [
        default if v is None else v
        for v, default in zip(values, FIELD_DEFAULTS)
    ]
    return build(*resolved)


def from_object(fields: Mapping[str, Any]) -> datetime:
    """Build a datetime from a field mapping as produced by to_object().

    Missing fields default to 1970-01-01 00:00:00.000; out-of-range values
    roll over. Raises InvalidDateError listing every invalid field.
    """
    errors = validate_fields(fields)
    if errors:
        raise InvalidDateError(
            fields, "invalid date fields:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    return _from_values([fields.get(name) for name in FIELD_NAMES])


def to_array(value: date) -> list[int]:
    """``[year, month, day, hours, minutes, seconds, milliseconds]``."""
    dt = ensure_datetime(value)
    return [
        dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second,
        dt.microsecond // 1000,
    ]


def from_array(values: Sequence[Any]) -> datetime:
    errors = validate_sequence(values)
    if errors:
        raise InvalidDateError(
            values, "invalid date fields:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    padded = list(values) + [None] * (len(FIELD_NAMES) - len(values))
    return _from_values(padded)


# ---------------------------------------------------------------------------
# Host locale delegation
# ---------------------------------------------------------------------------

def to_locale_date_string(value: date) -> str:
    """Date in the host locale's representation (``strftime("%x")``)."""
    return ensure_datetime(value).strftime("%x")


def to_locale_time_string(value: date) -> str:
    return ensure_datetime(value).strftime("%X")


def to_locale_string(value: date) -> str:
    return ensure_datetime(value).strftime("%c")
