"""Static weather reference data.

Data that doesn't change with API calls: the WMO condition table and the
fallback locations.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from weather_dashboard.reference.conditions import UNKNOWN_CONDITION as UNKNOWN_CONDITION
from weather_dashboard.reference.conditions import WEATHER_CONDITIONS as WEATHER_CONDITIONS
from weather_dashboard.reference.conditions import ConditionDescriptor as ConditionDescriptor
from weather_dashboard.reference.conditions import Variant as Variant
from weather_dashboard.reference.conditions import describe as describe
from weather_dashboard.reference.conditions import theme_variant as theme_variant
from weather_dashboard.reference.locations import CURRENT_LOCATION_NAME as CURRENT_LOCATION_NAME
from weather_dashboard.reference.locations import DEFAULT_LOCATION as DEFAULT_LOCATION
