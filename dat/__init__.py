from importlib.resources import files

from .arithmetic import (
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
    subtract_days,
    subtract_hours,
    subtract_minutes,
    subtract_months,
    subtract_seconds,
    subtract_weeks,
    subtract_years,
)
from .comparison import (
    has_after,
    has_before,
    has_same,
    is_after,
    is_before,
    is_same,
    start_of_week,
)
from .duration import (
    UNIT_CALCULATORS,
    calculate_duration,
    days_between,
    duration_from_now,
    duration_to_now,
    hours_between,
    minutes_between,
    months_between,
    seconds_between,
    weeks_between,
    years_between,
)
from .errors import DatError, UnknownUnitError
from .formatting import DEFAULT_LOCALE, format_date, format_duration
from .locales import LOCALES
from .util import UNITS, DurationUnit

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
}

__all__ = [
    "DurationUnit",
    "UNITS",
    "LOCALES",
    "DEFAULT_LOCALE",
    "DatError",
    "UnknownUnitError",
    "format_date",
    "format_duration",
    "calculate_duration",
    "duration_from_now",
    "duration_to_now",
    "UNIT_CALCULATORS",
    "seconds_between",
    "minutes_between",
    "hours_between",
    "days_between",
    "weeks_between",
    "months_between",
    "years_between",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
    "subtract_seconds",
    "subtract_minutes",
    "subtract_hours",
    "subtract_days",
    "subtract_weeks",
    "subtract_months",
    "subtract_years",
    "is_after",
    "is_before",
    "is_same",
    "has_after",
    "has_before",
    "has_same",
    "start_of_week",
    "docs",
]
