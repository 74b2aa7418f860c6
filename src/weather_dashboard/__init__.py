"""Weather Dashboard - current, hourly and daily forecasts for any place.

Architecture::

    datasources/   External APIs (Open-Meteo geocoding and forecast)
    reference/     Static tables (WMO condition codes, fallback locations)
    dashboard.py   UI state and orchestration (search, locate, refresh)
    renderers/     Pure view models -> HTML / text
    flows/         Prefect orchestration (build renders the static page)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: place name or coordinates -> geocoding -> PlaceLocation ->
forecast fetch -> normalizer -> view models -> renderers
"""

__version__ = "0.1.0"

from weather_dashboard.config import Settings
from weather_dashboard.schemas import ForecastBundle, PlaceLocation

__all__ = ["ForecastBundle", "PlaceLocation", "Settings", "__version__"]
