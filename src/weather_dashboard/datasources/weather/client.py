"""Open-Meteo forecast API constants.

API docs: https://open-meteo.com/en/docs
"""

# Variables requested per forecast block. Normalization reads exactly these.
CURRENT_VARS = [
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "weather_code",
]

DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "precipitation_probability_max",
    "sunrise",
    "sunset",
]

HOURLY_VARS = [
    "temperature_2m",
    "apparent_temperature",
    "precipitation_probability",
    "weather_code",
]

REQUIRED_BLOCKS = ("current", "daily", "hourly")

# Length of the "next hours" strip, starting at the current hour.
HOURS_TO_SHOW = 10

# Days shown in the daily outlook (the normalizer keeps all of them).
DAYS_TO_SHOW = 6
