"""Shared types: DifferenceResult and the datekit exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class DifferenceResult:
    """Immutable calendar-aware decomposition of the gap between two dates.

    Invariants:
        - All fields are non-negative
        - months < 12, days < 31, hours < 24, minutes < 60, seconds < 60
        - total_* fields are floored from the raw millisecond gap, not
          derived from the decomposed fields
    """

    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    total_days: int
    total_hours: int
    total_minutes: int
    total_seconds: int
    total_milliseconds: int

    def as_dict(self) -> dict[str, int]:
        """Field name -> value, in declaration order."""
        return {
            "years": self.years,
            "months": self.months,
            "days": self.days,
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "total_days": self.total_days,
            "total_hours": self.total_hours,
            "total_minutes": self.total_minutes,
            "total_seconds": self.total_seconds,
            "total_milliseconds": self.total_milliseconds,
        }


class DateKitError(Exception):
    """Base class for every error raised by datekit."""


class InvalidUnitError(DateKitError, ValueError):
    """Raised when a unit name is outside the accepted enumeration."""

    def __init__(self, unit: Any, allowed: Iterable[str]) -> None:
        self.unit = unit
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid unit: {unit!r} "
            f"(expected one of: {', '.join(self.allowed)})"
        )


class InvalidDateError(DateKitError, ValueError):
    """Raised when a value cannot be used as a date."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date {value!r}: {reason}")
