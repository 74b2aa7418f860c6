"""Reshape a raw Open-Meteo forecast payload into view models.

The API returns each block (``current``, ``daily``, ``hourly``) as parallel
arrays indexed by a shared ``time`` array.  This module turns them into:

  - CurrentSnapshot: the ``current`` scalars plus today's extremes and sun
    times, taken from index 0 of the ``daily`` block (the ``current`` block
    doesn't carry them).
  - DailyEntry list: one per ``daily.time`` entry, in API order.
  - HourlyEntry list: a window of up to ``HOURS_TO_SHOW`` entries starting at
    the hour that matches ``current.time`` (or the first hour if none does).

Pure functions, no I/O.  Either all three outputs are produced or
``IncompleteData`` is raised.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from weather_dashboard.datasources.weather.client import HOURS_TO_SHOW, REQUIRED_BLOCKS
from weather_dashboard.errors import IncompleteData
from weather_dashboard.renderers.formatting import DEFAULT_FORMATTERS, DateFormatters
from weather_dashboard.schemas import CurrentSnapshot, DailyEntry, HourlyEntry


def _value_at(block: dict[str, Any], key: str, index: int) -> Any:
    """Value of ``block[key][index]``, or None if the array or index is missing."""
    values = block.get(key)
    if not isinstance(values, list) or index >= len(values):
        return None
    return values[index]


def _require_blocks(payload: Any) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
    if not isinstance(payload, dict):
        raise IncompleteData
    blocks = [payload.get(name) for name in REQUIRED_BLOCKS]
    if not all(isinstance(block, dict) for block in blocks):
        raise IncompleteData
    current, daily, hourly = blocks
    return current, daily, hourly


def find_hour_index(hour_times: list[str], current_time: str) -> int:
    """Index of the hour whose timestamp equals ``current_time`` exactly, else 0."""
    try:
        return hour_times.index(current_time)
    except ValueError:
        return 0


def build_current(current: dict[str, Any], daily: dict[str, Any]) -> CurrentSnapshot:
    """Current conditions joined with today's (index 0) daily values."""
    today = 0
    return CurrentSnapshot(
        time=current["time"],
        temperature=current.get("temperature_2m"),
        apparent_temperature=current.get("apparent_temperature"),
        humidity=current.get("relative_humidity_2m"),
        wind_speed=current.get("wind_speed_10m"),
        code=current.get("weather_code"),
        high=_value_at(daily, "temperature_2m_max", today),
        low=_value_at(daily, "temperature_2m_min", today),
        precipitation_chance=_value_at(daily, "precipitation_probability_max", today),
        sunrise=_value_at(daily, "sunrise", today),
        sunset=_value_at(daily, "sunset", today),
    )


def build_daily(
    daily: dict[str, Any], formatters: DateFormatters = DEFAULT_FORMATTERS
) -> list[DailyEntry]:
    """One entry per day, in the order the API returned them."""
    entries = []
    for i, day in enumerate(daily.get("time") or []):
        entries.append(
            DailyEntry(
                date=day,
                label=formatters.short_weekday(day),
                full_label=formatters.long_date(day),
                max=_value_at(daily, "temperature_2m_max", i),
                min=_value_at(daily, "temperature_2m_min", i),
                code=_value_at(daily, "weather_code", i),
                precipitation=_value_at(daily, "precipitation_probability_max", i),
            )
        )
    return entries


def build_hourly(
    hourly: dict[str, Any],
    current_time: str,
    formatters: DateFormatters = DEFAULT_FORMATTERS,
    hours: int = HOURS_TO_SHOW,
) -> list[HourlyEntry]:
    """Up to ``hours`` consecutive entries starting at the current hour."""
    times = hourly.get("time")
    if not isinstance(times, list):
        times = []
    start = find_hour_index(times, current_time)

    entries = []
    for i in range(start, min(start + hours, len(times))):
        entries.append(
            HourlyEntry(
                time=times[i],
                hour_label=formatters.clock_time(times[i]),
                temperature=_value_at(hourly, "temperature_2m", i),
                feels_like=_value_at(hourly, "apparent_temperature", i),
                precipitation=_value_at(hourly, "precipitation_probability", i),
                code=_value_at(hourly, "weather_code", i),
            )
        )
    return entries


def normalize_forecast(
    payload: Any,
    *,
    formatters: DateFormatters = DEFAULT_FORMATTERS,
    hours: int = HOURS_TO_SHOW,
) -> tuple[CurrentSnapshot, list[DailyEntry], list[HourlyEntry]]:
    """
    Turn a decoded forecast payload into the three view models.

    Args:
        payload: Decoded JSON from the forecast endpoint.
        formatters: Date/time formatters for the labels.
        hours: Maximum length of the hourly window.

    Returns:
        ``(current, daily, hourly)``.

    Raises:
        IncompleteData: A block is missing, there is no current time or no
            "today" in the daily block, or a value has the wrong type.
    """
    current_block, daily_block, hourly_block = _require_blocks(payload)
    if not current_block.get("time") or not daily_block.get("time"):
        raise IncompleteData

    try:
        current = build_current(current_block, daily_block)
        daily = build_daily(daily_block, formatters)
        for sun_time in (current.sunrise, current.sunset):
            if sun_time is not None:
                datetime.fromisoformat(sun_time)
        hourly = build_hourly(hourly_block, current.time, formatters, hours)
    except (TypeError, ValueError) as exc:
        # pydantic.ValidationError and bad ISO dates are both ValueErrors
        raise IncompleteData from exc

    return current, daily, hourly
