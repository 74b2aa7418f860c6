"""WMO weather interpretation codes mapped to display descriptors.

Codes follow https://open-meteo.com/en/docs. The variant drives the page
theme in the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class Variant(StrEnum):
    """Theme family for a weather condition."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    MIST = "mist"
    RAIN = "rain"
    SNOW = "snow"
    THUNDER = "thunder"
    DEFAULT = "default"


@dataclass(frozen=True)
class ConditionDescriptor:
    """How a weather code is shown: label, glyph and theme variant."""

    label: str
    icon: str
    variant: Variant


_SUN = "☀️"
_SUN_CLOUD = "\U0001f324️"
_PARTLY = "⛅"
_CLOUD = "☁️"
_FOG = "\U0001f32b️"
_SHOWERS = "\U0001f326️"
_RAIN = "\U0001f327️"
_SNOW = "\U0001f328️"
_FLAKE = "❄️"
_STORM = "⛈️"

WEATHER_CONDITIONS: MappingProxyType[int, ConditionDescriptor] = MappingProxyType(
    {
        0: ConditionDescriptor("Clear sky", _SUN, Variant.CLEAR),
        1: ConditionDescriptor("Mainly clear", _SUN_CLOUD, Variant.CLEAR),
        2: ConditionDescriptor("Partly cloudy", _PARTLY, Variant.CLOUDS),
        3: ConditionDescriptor("Overcast", _CLOUD, Variant.CLOUDS),
        45: ConditionDescriptor("Foggy", _FOG, Variant.MIST),
        48: ConditionDescriptor("Rime fog", _FOG, Variant.MIST),
        51: ConditionDescriptor("Light drizzle", _SHOWERS, Variant.RAIN),
        53: ConditionDescriptor("Drizzle", _SHOWERS, Variant.RAIN),
        55: ConditionDescriptor("Heavy drizzle", _RAIN, Variant.RAIN),
        56: ConditionDescriptor("Freezing drizzle", _RAIN, Variant.SNOW),
        57: ConditionDescriptor("Freezing drizzle", _RAIN, Variant.SNOW),
        61: ConditionDescriptor("Light rain", _RAIN, Variant.RAIN),
        63: ConditionDescriptor("Rain", _RAIN, Variant.RAIN),
        65: ConditionDescriptor("Heavy rain", _RAIN, Variant.RAIN),
        66: ConditionDescriptor("Freezing rain", _SNOW, Variant.SNOW),
        67: ConditionDescriptor("Freezing rain", _SNOW, Variant.SNOW),
        71: ConditionDescriptor("Light snow", _SNOW, Variant.SNOW),
        73: ConditionDescriptor("Snow", _SNOW, Variant.SNOW),
        75: ConditionDescriptor("Heavy snow", _FLAKE, Variant.SNOW),
        77: ConditionDescriptor("Snow grains", _FLAKE, Variant.SNOW),
        80: ConditionDescriptor("Light showers", _SHOWERS, Variant.RAIN),
        81: ConditionDescriptor("Showers", _RAIN, Variant.RAIN),
        82: ConditionDescriptor("Heavy showers", _RAIN, Variant.RAIN),
        85: ConditionDescriptor("Snow showers", _SNOW, Variant.SNOW),
        86: ConditionDescriptor("Heavy snow showers", _FLAKE, Variant.SNOW),
        95: ConditionDescriptor("Thunderstorm", _STORM, Variant.THUNDER),
        96: ConditionDescriptor("Thunder w/ hail", _STORM, Variant.THUNDER),
        99: ConditionDescriptor("Severe thunder", _STORM, Variant.THUNDER),
    }
)

UNKNOWN_CONDITION = ConditionDescriptor("Unknown", "❔", Variant.DEFAULT)


def describe(code: object) -> ConditionDescriptor:
    """Look up the descriptor for a weather code.

    Total: unmapped codes, None and non-integer input all give
    ``UNKNOWN_CONDITION``.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        # Open-Meteo sometimes encodes codes as floats (e.g. 3.0)
        if isinstance(code, float) and code.is_integer():
            code = int(code)
        else:
            return UNKNOWN_CONDITION
    return WEATHER_CONDITIONS.get(code, UNKNOWN_CONDITION)


def theme_variant(code: object) -> Variant:
    """Theme variant for a weather code."""
    return describe(code).variant
