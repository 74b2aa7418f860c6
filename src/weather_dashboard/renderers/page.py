"""Dashboard HTML renderers.

Current-conditions card, today's highlights, the next-hours strip, the
daily outlook and the full page that combines them.  The condition lookup
supplies the icon and label for every item, and the current condition's
variant picks the page theme.
"""

from __future__ import annotations

from collections.abc import Sequence

from weather_dashboard.dashboard import DashboardState
from weather_dashboard.datasources.weather.client import DAYS_TO_SHOW
from weather_dashboard.reference.conditions import Variant, describe, theme_variant
from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.formatting import (
    DEFAULT_FORMATTERS,
    DateFormatters,
    format_percent,
    format_temperature,
    format_wind,
)
from weather_dashboard.schemas import CurrentSnapshot, DailyEntry, HourlyEntry

LOADING_MESSAGE = "Loading weather..."
EMPTY_MESSAGE = "Enter a city to explore the forecast."


def build_current_html(current: CurrentSnapshot, location_label: str) -> str:
    """Build the current-conditions card."""
    info = describe(current.code)
    return render_template(
        "current.html.j2",
        location_label=location_label,
        icon=info.icon,
        status=info.label,
        high=format_temperature(current.high),
        low=format_temperature(current.low),
        temperature=format_temperature(current.temperature),
        metrics=[
            ("Feels like", format_temperature(current.apparent_temperature)),
            ("Humidity", format_percent(current.humidity)),
            ("Wind", format_wind(current.wind_speed)),
            ("Chance of rain", format_percent(current.precipitation_chance, default="0%")),
        ],
    )


def build_highlights_html(
    current: CurrentSnapshot, formatters: DateFormatters = DEFAULT_FORMATTERS
) -> str:
    """Build the "Today's Highlights" grid."""
    highlights = [
        ("Sunrise", formatters.clock_time(current.sunrise), "Start your day"),
        ("Sunset", formatters.clock_time(current.sunset), "Golden hour"),
        ("Feels like", format_temperature(current.apparent_temperature), "Apparent temperature"),
        ("Humidity", format_percent(current.humidity), "Relative"),
        ("Wind", format_wind(current.wind_speed), "At 10 m"),
        ("Rain chance", format_percent(current.precipitation_chance, default="0%"), "Today"),
    ]
    return render_template("highlights.html.j2", highlights=highlights)


def build_hourly_html(hours: Sequence[HourlyEntry]) -> str:
    """Build the next-hours strip; empty string when there are no hours."""
    if not hours:
        return ""

    items = []
    for hour in hours:
        info = describe(hour.code)
        items.append(
            {
                "time": hour.time,
                "label": hour.hour_label,
                "icon": info.icon,
                "title": info.label,
                "temperature": format_temperature(hour.temperature),
                # None means no data: show nothing rather than 0%
                "precipitation": (
                    None if hour.precipitation is None else format_percent(hour.precipitation)
                ),
            }
        )
    return render_template("hourly.html.j2", items=items)


def build_daily_html(days: Sequence[DailyEntry], limit: int = DAYS_TO_SHOW) -> str:
    """Build the daily outlook for the first ``limit`` days."""
    if not days:
        return ""

    items = []
    for day in days[:limit]:
        info = describe(day.code)
        items.append(
            {
                "date": day.date,
                "label": day.label,
                "full_label": day.full_label,
                "icon": info.icon,
                "status": info.label,
                "high": format_temperature(day.max),
                "low": format_temperature(day.min),
                "precipitation": format_percent(day.precipitation, default="0%"),
            }
        )
    return render_template("daily.html.j2", items=items)


def build_status_html(kind: str, message: str) -> str:
    """Build a status banner (``error`` or ``loading``)."""
    return render_template("status.html.j2", kind=kind, message=message)


def build_dashboard_html(
    state: DashboardState, formatters: DateFormatters = DEFAULT_FORMATTERS
) -> str:
    """Build the full dashboard page for a state snapshot."""
    variant = Variant.DEFAULT if state.current is None else theme_variant(state.current.code)

    current_html = highlights_html = ""
    if state.current is not None:
        current_html = build_current_html(state.current, state.location.label)
        highlights_html = build_highlights_html(state.current, formatters)

    return render_template(
        "base.html.j2",
        theme=str(variant),
        location_label=state.location.label,
        updated=formatters.clock_time(state.last_updated) if state.last_updated else "",
        error_html=build_status_html("error", state.error) if state.error else "",
        loading_html=build_status_html("loading", LOADING_MESSAGE) if state.loading else "",
        has_current=state.current is not None,
        show_placeholder=state.current is None and not state.loading,
        placeholder=EMPTY_MESSAGE,
        current_html=current_html,
        highlights_html=highlights_html,
        hourly_html=build_hourly_html(state.hourly),
        daily_html=build_daily_html(state.daily),
    )
