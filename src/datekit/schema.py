"""Input validation for structured date fields (mappings and sequences)."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

# Order of the 7-item array form; defaults fill missing or None entries.
FIELD_NAMES = ("year", "month", "day", "hours", "minutes", "seconds", "milliseconds")
FIELD_DEFAULTS = (1970, 1, 1, 0, 0, 0, 0)


def _check_int(label: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        return f"{label}: expected int, got {type(value).__name__} {value!r}"
    return None


def validate_fields(fields: Mapping[str, Any]) -> list[str]:
    """Validate a field mapping. Returns list of error messages (empty = valid).

    Checks:
    - The argument is a mapping
    - Every known field present is an int or None

    Unknown keys (day_of_week, timestamp, ... as produced by to_object)
    are ignored.
    """
    if not isinstance(fields, Mapping):
        return [f"expected a mapping of date fields, got {type(fields).__name__}"]

    errors: list[str] = []
    for name in FIELD_NAMES:
        error = _check_int(f"Field {name!r}", fields.get(name))
        if error:
            errors.append(error)
    return errors


def validate_sequence(values: Sequence[Any]) -> list[str]:
    """Validate a [year, month, day, hours, minutes, seconds, ms] sequence.

    Checks:
    - The argument is a non-string sequence of at most 7 items
    - Every item is an int or None
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        return [f"expected a sequence of date fields, got {type(values).__name__}"]

    errors: list[str] = []
    if len(values) > len(FIELD_NAMES):
        errors.append(
            f"expected at most {len(FIELD_NAMES)} items, got {len(values)}"
        )
    for i, value in enumerate(values[: len(FIELD_NAMES)]):
        error = _check_int(f"Item {i} ({FIELD_NAMES[i]})", value)
        if error:
            errors.append(error)
    return errors
