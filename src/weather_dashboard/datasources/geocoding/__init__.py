"""Open-Meteo geocoding data source.

Public API:
  - search: search_by_name (forward lookup, raises on failure)
  - reverse: resolve_coordinates (reverse lookup, never raises)
  - client: location_from_result, RESULT_COUNT
"""

from weather_dashboard.datasources.geocoding.client import RESULT_COUNT, location_from_result
from weather_dashboard.datasources.geocoding.reverse import resolve_coordinates, unnamed_location
from weather_dashboard.datasources.geocoding.search import search_by_name
from weather_dashboard.schemas import build_label

__all__ = [
    "RESULT_COUNT",
    "build_label",
    "location_from_result",
    "resolve_coordinates",
    "search_by_name",
    "unnamed_location",
]
