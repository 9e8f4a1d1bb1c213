"""Duration between two instants, measured in a single unit.

Every `*_between` function returns a magnitude: swapping the arguments never
changes the result. `calculate_duration` dispatches on the unit and rounds the
result to two decimal places.
"""

import math
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from dat.util import DAY, HOUR, MINUTE, SECOND, WEEK, DurationUnit, check_unit


def _as_utc(dt: datetime) -> datetime:
    # Aware values are compared as instants; naive values stay wall-clock.
    if dt.utcoffset() is None:
        return dt
    return dt.astimezone(timezone.utc)


def _elapsed(first: datetime, second: datetime) -> float:
    """Signed seconds from `first` to `second`."""
    return (_as_utc(second) - _as_utc(first)).total_seconds()


def seconds_between(first: datetime, second: datetime) -> float:
    return abs(_elapsed(first, second) / SECOND)


def minutes_between(first: datetime, second: datetime) -> float:
    return abs(_elapsed(first, second) / MINUTE)


def hours_between(first: datetime, second: datetime) -> float:
    return abs(_elapsed(first, second) / HOUR)


def days_between(first: datetime, second: datetime) -> float:
    return abs(_elapsed(first, second) / DAY)


def weeks_between(first: datetime, second: datetime) -> int:
    """Whole weeks between two instants, halves rounded up."""
    weeks = abs(_elapsed(first, second) / WEEK)
    return math.floor(weeks + 0.5)


def months_between(first: datetime, second: datetime) -> int:
    """Calendar months between two instants.

    Only the year and month fields are used, so Jan 31 to Feb 1 counts as one
    month even though a single day elapsed.
    """
    years = second.year - first.year
    months = second.month - first.month
    return abs(years * 12 + months)


def years_between(first: datetime, second: datetime) -> int:
    """Calendar years between two instants, from the year fields only."""
    return abs(second.year - first.year)


UNIT_CALCULATORS: Mapping[DurationUnit, Callable[[datetime, datetime], float]] = (
    MappingProxyType(
        {
            "second": seconds_between,
            "minute": minutes_between,
            "hour": hours_between,
            "day": days_between,
            "week": weeks_between,
            "month": months_between,
            "year": years_between,
        }
    )
)


def calculate_duration(first: datetime, second: datetime, unit: DurationUnit) -> float:
    """
    Return the duration between two instants in the given unit.

    Args:
        first: One end of the span
        second: The other end of the span (order does not matter)
        unit: One of "second", "minute", "hour", "day", "week", "month", "year"

    Returns:
        Non-negative duration rounded half up to two decimal places

    Raises:
        UnknownUnitError: If `unit` is not a supported unit

    Example:
        >>> from datetime import datetime, timezone
        >>> a = datetime(2023, 1, 1, tzinfo=timezone.utc)
        >>> b = datetime(2023, 1, 1, 1, tzinfo=timezone.utc)
        >>> calculate_duration(a, b, "second")
        3600.0
    """
    calculator = UNIT_CALCULATORS[check_unit(unit)]
    # Round the exact binary value, so 1.125 becomes 1.13 rather than 1.12
    value = Decimal(calculator(first, second))
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def duration_from_now(target: datetime, unit: DurationUnit) -> float:
    """Duration from the current time to `target`.

    The current time is read once, in `target`'s timezone when it is aware.
    """
    now = datetime.now(target.tzinfo)
    return calculate_duration(now, target, unit)


def duration_to_now(origin: datetime, unit: DurationUnit) -> float:
    """Duration from `origin` to the current time."""
    now = datetime.now(origin.tzinfo)
    return calculate_duration(origin, now, unit)
