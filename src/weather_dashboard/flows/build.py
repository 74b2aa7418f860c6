"""
Prefect flow for building the static dashboard page.

Loads the forecast for the default location (or a searched place) through
the same actions the interactive dashboard uses, renders it and writes
``index.html``.  A failed lookup still produces a page, showing the error
banner instead of the forecast.

Run locally:
    python -m weather_dashboard.flows.build [QUERY]
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_dashboard.config import get_settings
from weather_dashboard.dashboard import DashboardState, WeatherDashboard
from weather_dashboard.renderers.page import build_dashboard_html


@task(name="load-dashboard")
def load_dashboard(query: str | None = None) -> DashboardState:
    """Run the initial load, or a search when ``query`` is given."""
    dashboard = WeatherDashboard(get_settings().default_location())
    if query is None:
        dashboard.load_initial()
    else:
        dashboard.search(query)
    return dashboard.state


@task(name="render-dashboard")
def render_dashboard(state: DashboardState) -> str:
    """Render the dashboard page for a state snapshot."""
    return build_dashboard_html(state)


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-dashboard", log_prints=True)
def build_dashboard(query: str | None = None, site_dir: Path | None = None) -> dict[str, Any]:
    """
    Build the static dashboard page.

    Args:
        query: Place to search for; the configured default location if None.
        site_dir: Output directory (default: ``site_dir`` from settings).

    Returns:
        Summary with the output path, the location label and any error.
    """
    print(f"Loading forecast for {query or 'the default location'}...")
    state = load_dashboard(query)
    if state.error:
        print(f"Warning: {state.error}")

    print("Building HTML...")
    html = render_dashboard(state)

    print("Writing site...")
    output_path = write_site(html, site_dir or get_settings().site_dir)

    print(f"Site built: {output_path}")
    return {
        "output": str(output_path),
        "location": state.location.label,
        "error": state.error or None,
    }


if __name__ == "__main__":
    result = build_dashboard(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Flow complete: {result}")
