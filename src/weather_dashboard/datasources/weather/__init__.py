"""Open-Meteo forecast data source.

Fetches the current/daily/hourly forecast and reshapes it into view models.

Public API:
  - forecast: fetch_forecast (raw payload), fetch_and_normalize (ForecastBundle)
  - normalize: normalize_forecast, find_hour_index
  - client: requested variables, HOURS_TO_SHOW, DAYS_TO_SHOW
"""

from weather_dashboard.datasources.weather.client import (
    CURRENT_VARS,
    DAILY_VARS,
    DAYS_TO_SHOW,
    HOURLY_VARS,
    HOURS_TO_SHOW,
)
from weather_dashboard.datasources.weather.forecast import fetch_and_normalize, fetch_forecast
from weather_dashboard.datasources.weather.normalize import find_hour_index, normalize_forecast

__all__ = [
    "CURRENT_VARS",
    "DAILY_VARS",
    "DAYS_TO_SHOW",
    "HOURLY_VARS",
    "HOURS_TO_SHOW",
    "fetch_and_normalize",
    "fetch_forecast",
    "find_hour_index",
    "normalize_forecast",
]
