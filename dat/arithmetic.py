"""Add or subtract an amount of a unit to an instant.

Every function returns a new `datetime`; the argument is never touched.
Seconds through days are wall-clock arithmetic. Weeks are exact elapsed time
(7 x 24h, with no daylight-saving compensation). Months and years move the
calendar field and keep the day of month, rolling forward into the next month
when that day does not exist (Jan 31 + 1 month -> Mar 3 in 2023).
"""

from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from dat.util import WEEK


def _shift_calendar(instant: datetime, delta: relativedelta) -> datetime:
    # Day 1 exists in every month; the original day is re-applied as an
    # offset, which rolls past the end of a short month.
    first_of_month = instant.replace(day=1) + delta
    return first_of_month + timedelta(days=instant.day - 1)


def add_seconds(instant: datetime, amount: float) -> datetime:
    return instant + timedelta(seconds=amount)


def add_minutes(instant: datetime, amount: float) -> datetime:
    return instant + timedelta(minutes=amount)


def add_hours(instant: datetime, amount: float) -> datetime:
    return instant + timedelta(hours=amount)


def add_days(instant: datetime, amount: float) -> datetime:
    return instant + timedelta(days=amount)


def add_weeks(instant: datetime, amount: float) -> datetime:
    """Add `amount` weeks of elapsed time.

    Aware instants are shifted in UTC and converted back to their own zone, so
    a week across a DST change keeps its 168 hours rather than its wall-clock
    time.
    """
    delta = timedelta(seconds=amount * WEEK)
    if instant.utcoffset() is None:
        return instant + delta
    return (instant.astimezone(timezone.utc) + delta).astimezone(instant.tzinfo)


def add_months(instant: datetime, amount: int) -> datetime:
    """Add calendar months, rolling an overflowing day into the next month.

    Raises:
        ValueError: If `amount` is not a whole number
    """
    return _shift_calendar(instant, relativedelta(months=amount))


def add_years(instant: datetime, amount: int) -> datetime:
    """Add calendar years. Feb 29 plus one year lands on Mar 1.

    Raises:
        ValueError: If `amount` is not a whole number
    """
    return _shift_calendar(instant, relativedelta(years=amount))


def subtract_seconds(instant: datetime, amount: float) -> datetime:
    return add_seconds(instant, -amount)


def subtract_minutes(instant: datetime, amount: float) -> datetime:
    return add_minutes(instant, -amount)


def subtract_hours(instant: datetime, amount: float) -> datetime:
    return add_hours(instant, -amount)


def subtract_days(instant: datetime, amount: float) -> datetime:
    return add_days(instant, -amount)


def subtract_weeks(instant: datetime, amount: float) -> datetime:
    return add_weeks(instant, -amount)


def subtract_months(instant: datetime, amount: int) -> datetime:
    return add_months(instant, -amount)


def subtract_years(instant: datetime, amount: int) -> datetime:
    return add_years(instant, -amount)
