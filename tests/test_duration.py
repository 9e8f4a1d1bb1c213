"""Tests for duration calculation between instants."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from dat import (
    UNIT_CALCULATORS,
    UNITS,
    UnknownUnitError,
    calculate_duration,
    duration_from_now,
    duration_to_now,
    months_between,
    weeks_between,
    years_between,
)


def test_calculate_duration_one_hour_in_seconds():
    """Test that one hour is 3600 seconds."""
    first = datetime(2023, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    second = datetime(2023, 1, 1, 1, 0, 0, tzinfo=timezone.utc)

    assert calculate_duration(first, second, "second") == 3600


def test_calculate_duration_fixed_units():
    """Test minute, hour and day durations keep their fractional part."""
    first = datetime(2023, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    second = datetime(2023, 1, 1, 2, 30, 0, tzinfo=timezone.utc)

    assert calculate_duration(first, second, "minute") == 150
    assert calculate_duration(first, second, "hour") == 2.5


def test_calculate_duration_rounds_to_two_decimals():
    """Test that the result is rounded to two decimal places."""
    first = datetime(2023, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    second = datetime(2023, 1, 1, 8, 0, 0, tzinfo=timezone.utc)

    # 8 hours is a third of a day
    assert calculate_duration(first, second, "day") == 0.33


def test_calculate_duration_is_symmetric():
    """Test that swapping the instants never changes the duration."""
    a = datetime(2021, 3, 14, 15, 9, 26, tzinfo=timezone.utc)
    b = datetime(2023, 10, 5, 8, 45, 0, tzinfo=timezone.utc)

    for unit in UNITS:
        assert calculate_duration(a, b, unit) == calculate_duration(b, a, unit)
        assert calculate_duration(a, b, unit) >= 0


def test_calculate_duration_unknown_unit():
    """Test that a unit outside the supported set is rejected."""
    first = datetime(2023, 1, 1, tzinfo=timezone.utc)
    second = datetime(2023, 1, 2, tzinfo=timezone.utc)

    with pytest.raises(UnknownUnitError, match="Unknown unit: 'century'"):
        calculate_duration(first, second, "century")  # type: ignore[arg-type]


def test_unknown_unit_error_is_value_error():
    """Test that UnknownUnitError can be caught as ValueError."""
    first = datetime(2023, 1, 1, tzinfo=timezone.utc)

    with pytest.raises(ValueError, match="Valid units: second, minute"):
        calculate_duration(first, first, "days")  # type: ignore[arg-type]


def test_weeks_between_rounds_to_nearest_week():
    """Test that weeks are rounded to whole weeks."""
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)

    assert weeks_between(start, start + timedelta(days=10)) == 1
    assert weeks_between(start, start + timedelta(days=11)) == 2
    assert calculate_duration(start, start + timedelta(days=3), "week") == 0


def test_weeks_between_half_week_rounds_up_both_ways():
    """Test that an exact half week rounds up regardless of order."""
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    end = start + timedelta(days=10, hours=12)

    assert weeks_between(start, end) == 2
    assert weeks_between(end, start) == 2


def test_months_between_uses_calendar_fields():
    """Test that months only look at year and month."""
    jan_1 = datetime(2023, 1, 1, tzinfo=timezone.utc)
    mar_1 = datetime(2023, 3, 1, tzinfo=timezone.utc)
    jan_31 = datetime(2023, 1, 31, tzinfo=timezone.utc)
    feb_1 = datetime(2023, 2, 1, tzinfo=timezone.utc)

    assert months_between(jan_1, mar_1) == 2
    # A single day apart, but in different months
    assert months_between(jan_31, feb_1) == 1


def test_months_between_across_years():
    """Test that year differences count as twelve months each."""
    dec_2022 = datetime(2022, 12, 15, tzinfo=timezone.utc)
    jan_2023 = datetime(2023, 1, 15, tzinfo=timezone.utc)
    mar_2025 = datetime(2025, 3, 1, tzinfo=timezone.utc)

    assert months_between(dec_2022, jan_2023) == 1
    assert months_between(mar_2025, dec_2022) == 27


def test_years_between_uses_year_field_only():
    """Test that one day across New Year counts as a year."""
    new_years_eve = datetime(2022, 12, 31, 23, 59, tzinfo=timezone.utc)
    new_years_day = datetime(2023, 1, 1, 0, 0, tzinfo=timezone.utc)

    assert years_between(new_years_eve, new_years_day) == 1
    assert calculate_duration(new_years_day, new_years_eve, "year") == 1


def test_duration_compares_instants_across_zones():
    """Test that aware instants in different zones are compared as instants."""
    utc_noon = datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc)
    new_york_seven = datetime(2023, 1, 1, 7, 0, tzinfo=ZoneInfo("America/New_York"))

    assert calculate_duration(utc_noon, new_york_seven, "second") == 0


def test_duration_measures_elapsed_time_across_dst():
    """Test that a day containing a DST switch is 23 elapsed hours."""
    zone = ZoneInfo("America/New_York")
    before = datetime(2023, 3, 11, 12, 0, tzinfo=zone)
    after = datetime(2023, 3, 12, 12, 0, tzinfo=zone)

    assert calculate_duration(before, after, "hour") == 23


def test_duration_from_now():
    """Test duration from the current time to a future instant."""
    target = datetime.now(timezone.utc) + timedelta(days=40)

    result = duration_from_now(target, "day")

    assert 39.99 <= result <= 40


def test_duration_to_now():
    """Test duration from a past instant to the current time."""
    origin = datetime.now(timezone.utc) - timedelta(hours=5)

    result = duration_to_now(origin, "hour")

    assert 5 <= result <= 5.01


def test_duration_to_now_naive():
    """Test that naive instants are measured against naive local time."""
    origin = datetime.now() - timedelta(minutes=30)

    assert 30 <= duration_to_now(origin, "minute") <= 30.1


def test_unit_calculators_is_read_only():
    """Test that the dispatch table cannot be modified."""
    assert set(UNIT_CALCULATORS) == set(UNITS)

    with pytest.raises(TypeError):
        UNIT_CALCULATORS["century"] = years_between  # type: ignore[index]


def test_calculate_duration_rounds_ties_half_up():
    """Test that exact ties at the third decimal round up."""
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)

    # 27 hours is exactly 1.125 days; 7.5 seconds is exactly 0.125 minutes
    assert calculate_duration(start, start + timedelta(hours=27), "day") == 1.13
    assert calculate_duration(start, start + timedelta(seconds=7.5), "minute") == 0.13
    assert calculate_duration(start + timedelta(hours=27), start, "day") == 1.13


def test_calculate_duration_symmetry_across_weekdays_and_months():
    """Test symmetry for spans that start and end on different weekdays and months."""
    pairs = [
        # Tuesday in February to Saturday in August
        (
            datetime(2022, 2, 1, 6, 45, tzinfo=timezone.utc),
            datetime(2022, 8, 13, 22, 10, 5, tzinfo=timezone.utc),
        ),
        # Sunday at month end to Wednesday at the start of the next year
        (
            datetime(2023, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
            datetime(2024, 1, 3, 0, 0, 1, tzinfo=timezone.utc),
        ),
        # Leap day to a Friday in a different zone
        (
            datetime(2024, 2, 29, 12, 0, tzinfo=ZoneInfo("Europe/Paris")),
            datetime(2024, 11, 8, 3, 30, tzinfo=ZoneInfo("America/Los_Angeles")),
        ),
        # Same calendar day, a few seconds apart
        (
            datetime(2023, 6, 15, 10, 0, 0, tzinfo=timezone.utc),
            datetime(2023, 6, 15, 10, 0, 7, tzinfo=timezone.utc),
        ),
    ]

    for a, b in pairs:
        for unit in UNITS:
            assert calculate_duration(a, b, unit) == calculate_duration(b, a, unit)


def test_calculate_duration_symmetry_naive():
    """Test symmetry on naive instants."""
    a = datetime(2019, 7, 4, 18, 20, 0)
    b = datetime(2021, 1, 29, 5, 5, 55)

    for unit in UNITS:
        assert calculate_duration(a, b, unit) == calculate_duration(b, a, unit)
    assert calculate_duration(a, b, "month") == 18
    assert calculate_duration(b, a, "year") == 2
