"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API constants and shared helpers
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - geocoding/  place name <-> coordinates (forward and reverse)
  - weather/    forecast fetch and normalization into view models

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.

2. Write fetch functions that translate transport problems into the error
   kinds in ``weather_dashboard.errors``::

       from weather_dashboard.services.http import session

       def fetch_something(lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           if not resp.ok:
               raise RequestFailed
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
