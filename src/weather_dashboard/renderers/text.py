"""Plain-text dashboard for the terminal."""

from __future__ import annotations

from weather_dashboard.dashboard import DashboardState
from weather_dashboard.datasources.weather.client import DAYS_TO_SHOW
from weather_dashboard.reference.conditions import describe
from weather_dashboard.renderers.formatting import (
    DEFAULT_FORMATTERS,
    DateFormatters,
    format_percent,
    format_temperature,
    format_wind,
)


def build_dashboard_text(
    state: DashboardState, formatters: DateFormatters = DEFAULT_FORMATTERS
) -> str:
    """Render a state snapshot as a few aligned lines of text."""
    lines = [state.location.label]
    if state.error:
        lines.append(f"! {state.error}")

    current = state.current
    if current is None:
        if not state.error:
            lines.append("Enter a city to explore the forecast.")
        return "\n".join(lines)

    info = describe(current.code)
    lines += [
        "",
        f"{info.icon} {format_temperature(current.temperature)}  {info.label}",
        f"High {format_temperature(current.high)} · Low {format_temperature(current.low)}",
        (
            f"Feels like {format_temperature(current.apparent_temperature)}"
            f" | Humidity {format_percent(current.humidity)}"
            f" | Wind {format_wind(current.wind_speed)}"
            f" | Rain {format_percent(current.precipitation_chance, default='0%')}"
        ),
        (
            f"Sunrise {formatters.clock_time(current.sunrise)}"
            f" | Sunset {formatters.clock_time(current.sunset)}"
        ),
    ]

    if state.hourly:
        lines += ["", "Next hours"]
        for hour in state.hourly:
            precip = "" if hour.precipitation is None else f"  {format_percent(hour.precipitation)}"
            lines.append(
                f"  {hour.hour_label:>8}  {describe(hour.code).icon} "
                f"{format_temperature(hour.temperature):>4}{precip}"
            )

    if state.daily:
        lines += ["", "Daily outlook"]
        for day in state.daily[:DAYS_TO_SHOW]:
            lines.append(
                f"  {day.label:<4} {describe(day.code).icon} "
                f"{format_temperature(day.max):>4} / {format_temperature(day.min):>4}"
                f"  {format_percent(day.precipitation, default='0%'):>4} rain"
                f"  {describe(day.code).label}"
            )

    if state.last_updated is not None:
        lines += ["", f"Updated {formatters.clock_time(state.last_updated)}"]
    return "\n".join(lines)
