"""Shared formatting helpers for view models and renderers.

Pure functions with no external dependencies. Nothing here raises on bad
input: values that can't be shown become the ``PLACEHOLDER`` string.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from numbers import Real

PLACEHOLDER = "--"


def _as_number(value: object) -> float | None:
    """Return value as a finite float, or None if it isn't one."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (21.5 -> 22, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def format_temperature(value: object) -> str:
    """Format a temperature as a rounded integer with a degree mark, e.g. ``22°``."""
    number = _as_number(value)
    if number is None:
        return PLACEHOLDER
    return f"{round_half_up(number)}°"


def format_percent(value: object, default: str = PLACEHOLDER) -> str:
    """Format a 0-100 value as ``40%``; ``default`` when there is no value."""
    number = _as_number(value)
    if number is None:
        return default
    return f"{round_half_up(number)}%"


def format_wind(value: object) -> str:
    """Format a wind speed in km/h."""
    number = _as_number(value)
    if number is None:
        return PLACEHOLDER
    return f"{round_half_up(number)} km/h"


@dataclass(frozen=True)
class DateFormatters:
    """
    Date and time formatting for Open-Meteo timestamps.

    Open-Meteo returns local wall-clock times without an offset
    (``2026-10-17T15:00``) when ``timezone=auto``, so values are formatted
    as-is, never converted.  Build once and pass it to whatever formats
    dates; ``DEFAULT_FORMATTERS`` is the shared instance.
    """

    weekday_format: str = "%a"
    long_weekday_format: str = "%A"
    month_format: str = "%B"
    twelve_hour: bool = True

    def short_weekday(self, value: str | date) -> str:
        """``Mon``"""
        return _to_date(value).strftime(self.weekday_format)

    def long_date(self, value: str | date) -> str:
        """``Monday, October 17``"""
        day = _to_date(value)
        weekday = day.strftime(self.long_weekday_format)
        return f"{weekday}, {day.strftime(self.month_format)} {day.day}"

    def clock_time(self, value: str | datetime | None) -> str:
        """``3:00 PM`` (or ``15:00``); the placeholder when there is no time."""
        if value is None or value == "":
            return PLACEHOLDER
        moment = datetime.fromisoformat(value) if isinstance(value, str) else value
        if moment.tzinfo is not None:
            moment = moment.astimezone()
        if not self.twelve_hour:
            return f"{moment.hour:02d}:{moment.minute:02d}"
        hour = moment.hour % 12 or 12
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{hour}:{moment.minute:02d} {suffix}"


def _to_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Accept both "2026-10-17" and "2026-10-17T00:00"
    return date.fromisoformat(value[:10])


#: Process-wide formatter, built once at import.
DEFAULT_FORMATTERS = DateFormatters()
