"""Fixed locations used when nothing better is known."""

from weather_dashboard.schemas import PlaceLocation

# Shown on startup until the user searches or shares their location.
DEFAULT_LOCATION = PlaceLocation(
    name="New York",
    admin1="New York",
    country="United States",
    label="New York, United States",
    latitude=40.7128,
    longitude=-74.006,
)

# Name and label used when reverse geocoding can't describe the coordinates.
CURRENT_LOCATION_NAME = "Current location"
