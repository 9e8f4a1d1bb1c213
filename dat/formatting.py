"""Locale-aware formatting of dates and relative durations.

Formatting is delegated to Babel's CLDR data. Locale tags use BCP-47 hyphens
("en-US", "az-Cyrl-AZ"); unknown tags and bad options raise Babel's own errors.
"""

import math
from datetime import datetime, timezone, tzinfo as TzInfo
from typing import Literal, TypeAlias

from babel import Locale, dates, numbers

from dat.util import DurationUnit, check_unit

DEFAULT_LOCALE = "en-US"

Style: TypeAlias = Literal["full", "long", "medium", "short"]
DurationStyle: TypeAlias = Literal["long", "short", "narrow"]


def resolve_locale(locale: str | Locale) -> Locale:
    """Parse a BCP-47 tag (or pass through a Babel Locale)."""
    if isinstance(locale, str):
        locale = locale.replace("_", "-")
    return Locale.parse(locale, sep="-")


def format_date(
    instant: datetime,
    locale: str | Locale = DEFAULT_LOCALE,
    *,
    date_style: Style | None = None,
    time_style: Style | None = None,
    skeleton: str | None = None,
    tzinfo: TzInfo | None = None,
) -> str:
    """
    Format an instant for display in the given locale.

    Args:
        instant: Value to format; naive values are shown as they are
        locale: BCP-47 locale tag (e.g., "en-US", "fr-FR")
        date_style: "full", "long", "medium" or "short" date part
        time_style: "full", "long", "medium" or "short" time part
        skeleton: CLDR skeleton (e.g., "yMMMd"); cannot be combined with styles
        tzinfo: Zone in which to display an aware instant

    Returns:
        The formatted string. Without any option this is the locale's
        numeric date, e.g. "1/1/2023" for en-US.

    Example:
        >>> from datetime import datetime
        >>> format_date(datetime(2023, 1, 1, 12), date_style="medium")
        'Jan 1, 2023'
        >>> format_date(datetime(2023, 1, 1, 12), "de-DE")
        '1.1.2023'
    """
    babel_locale = resolve_locale(locale)

    if tzinfo is not None:
        if instant.utcoffset() is None:
            instant = instant.replace(tzinfo=timezone.utc)
        instant = instant.astimezone(tzinfo)

    if skeleton is not None:
        if date_style is not None or time_style is not None:
            raise TypeError("skeleton cannot be combined with date_style or time_style")
        return dates.format_skeleton(skeleton, instant, locale=babel_locale)

    if date_style is None and time_style is None:
        return dates.format_skeleton("yMd", instant, locale=babel_locale)

    if time_style is None:
        return dates.format_date(instant, date_style, locale=babel_locale)

    time_part = dates.format_time(instant, time_style, locale=babel_locale)
    if date_style is None:
        return time_part

    # Join both parts with the locale's date-time pattern, like format_datetime
    date_part = dates.format_date(instant, date_style, locale=babel_locale)
    return (
        dates.get_datetime_format(date_style, locale=babel_locale)
        .replace("'", "")
        .replace("{0}", time_part)
        .replace("{1}", date_part)
    )


def format_duration(
    value: float,
    unit: DurationUnit,
    locale: str | Locale = DEFAULT_LOCALE,
    *,
    style: DurationStyle = "long",
) -> str:
    """Describe `value` units relative to now, e.g. "in 3 months" or "2 days ago".

    Positive values (and zero) are in the future, negative values in the past.
    The phrase always uses `unit` and keeps fractions: `format_duration(1.5,
    "day")` is "in 1.5 days".
    """
    check_unit(unit)
    if style not in ("long", "short", "narrow"):
        raise ValueError(f"style must be long, short or narrow, got {style!r}")
    babel_locale = resolve_locale(locale)

    # Same CLDR lookup as Babel's format_timedelta: "day-short" before "day"
    date_fields = babel_locale._data["date_fields"]
    patterns = date_fields.get(f"{unit}-{style}") or date_fields[unit]
    direction = "past" if math.copysign(1, value) < 0 else "future"

    magnitude = abs(value)
    plural_form = babel_locale.plural_form(magnitude)
    pattern = patterns[direction].get(plural_form) or patterns[direction]["other"]
    number = numbers.format_decimal(magnitude, locale=babel_locale)
    return pattern.replace("{0}", number)
