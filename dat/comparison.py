"""Comparison of instants, either whole or by a single calendar field."""

import operator as op
from collections.abc import Callable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from dateutil.relativedelta import MO, relativedelta

from dat.util import DurationUnit, check_unit


def is_after(first: datetime, second: datetime) -> bool:
    return first > second


def is_before(first: datetime, second: datetime) -> bool:
    return first < second


def is_same(first: datetime, second: datetime) -> bool:
    return first == second


def start_of_week(instant: datetime) -> datetime:
    """Return the Monday that starts `instant`'s ISO week.

    The result is midnight of that Monday, so any two instants of the same
    Monday-to-Sunday week share a start. `instant` itself is left alone.
    """
    return instant + relativedelta(
        weekday=MO(-1), hour=0, minute=0, second=0, microsecond=0
    )


# One field per unit. Fields are not hierarchical: "month" is the month of
# year only, so December 2022 and December 2023 are the same month.
_FIELDS: Mapping[DurationUnit, Callable[[datetime], Any]] = MappingProxyType(
    {
        "second": op.attrgetter("second"),
        "minute": op.attrgetter("minute"),
        "hour": op.attrgetter("hour"),
        "day": op.attrgetter("day"),
        "week": start_of_week,
        "month": op.attrgetter("month"),
        "year": op.attrgetter("year"),
    }
)


def _compare(
    first: datetime,
    second: datetime,
    unit: DurationUnit,
    operator: Callable[[Any, Any], bool],
) -> bool:
    field = _FIELDS[check_unit(unit)]
    return operator(field(first), field(second))


def has_after(first: datetime, second: datetime, unit: DurationUnit) -> bool:
    """
    Return True if `first`'s `unit` field is greater than `second`'s.

    Args:
        first: Instant to test
        second: Instant to test against
        unit: Field to compare; "week" compares the Mondays starting each week

    Raises:
        UnknownUnitError: If `unit` is not a supported unit

    Example:
        >>> from datetime import datetime
        >>> has_after(datetime(2023, 11, 1), datetime(2024, 10, 1), "month")
        True
    """
    return _compare(first, second, unit, op.gt)


def has_before(first: datetime, second: datetime, unit: DurationUnit) -> bool:
    """Return True if `first`'s `unit` field is less than `second`'s."""
    return _compare(first, second, unit, op.lt)


def has_same(first: datetime, second: datetime, unit: DurationUnit) -> bool:
    """Return True if both instants share the same `unit` field."""
    return _compare(first, second, unit, op.eq)
