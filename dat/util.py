"""Unit vocabulary and fixed unit lengths for dat.

Fixed-length units are expressed in seconds. Months and years have no fixed
length and are handled by calendar fields instead.
"""

from typing import Literal, TypeAlias

import structlog

from dat.errors import UnknownUnitError

logger = structlog.get_logger(__name__)

DurationUnit: TypeAlias = Literal[
    "second", "minute", "hour", "day", "week", "month", "year"
]

UNITS: tuple[DurationUnit, ...] = (
    "second",
    "minute",
    "hour",
    "day",
    "week",
    "month",
    "year",
)

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800


def check_unit(unit: str) -> DurationUnit:
    """Return `unit` unchanged if it is one of `UNITS`, else raise UnknownUnitError."""
    if unit not in UNITS:
        logger.debug("Rejected duration unit", unit=unit, accepted=UNITS)
        raise UnknownUnitError(unit, UNITS)
    return unit  # type: ignore[return-value]
