"""Boundary: Unit, the closed set of calendar units and their spellings."""

from __future__ import annotations

import logging
from enum import Enum

from datekit.types import InvalidUnitError

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY


class Unit(str, Enum):
    """Calendar units, finest first.

    Members compare equal to their singular lowercase name, so
    ``Unit.DAY == "day"`` holds.
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"

    @classmethod
    def parse(cls, unit: Unit | str, allowed: frozenset[Unit] | None = None) -> Unit:
        """Resolve a unit name (any case, singular or plural) to a Unit.

        Raises InvalidUnitError if the name is unknown, or if ``allowed`` is
        given and the unit is not in it.
        """
        accepted = allowed if allowed is not None else frozenset(cls)
        resolved = _ALIASES.get(unit.lower()) if isinstance(unit, str) else None
        if resolved is None or resolved not in accepted:
            logger.debug("rejecting unit %r", unit)
            raise InvalidUnitError(
                unit, [u.value for u in cls if u in accepted]
            )
        return resolved


_PLURALS = {Unit.CENTURY: "centuries"}

_ALIASES: dict[str, Unit] = {}
for _unit in Unit:
    _ALIASES[_unit.value] = _unit
    _ALIASES[_PLURALS.get(_unit, _unit.value + "s")] = _unit

# Units add()/subtract() step by.
STEP_UNITS = frozenset({
    Unit.MILLISECOND,
    Unit.SECOND,
    Unit.MINUTE,
    Unit.HOUR,
    Unit.DAY,
    Unit.WEEK,
    Unit.MONTH,
    Unit.YEAR,
})

# Units start_of()/end_of() snap to.
BOUNDARY_UNITS = frozenset(Unit)
