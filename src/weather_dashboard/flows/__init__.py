"""
Prefect flows.

Flows:
- build: Load the forecast for a place and render the dashboard page

Usage (local):
    python -m weather_dashboard.flows.build
    python -m weather_dashboard.flows.build "Lisbon"

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-dashboard/default'
"""
