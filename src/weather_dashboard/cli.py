"""
Command-line interface for the weather dashboard.

Prints forecasts in the terminal and builds or serves the static page.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import logging
import sys
from pathlib import Path

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.dashboard import WeatherDashboard
from weather_dashboard.flows.build import build_dashboard
from weather_dashboard.geolocation import FixedGeolocator
from weather_dashboard.renderers.text import build_dashboard_text


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="Current, hourly and daily weather for any place",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'show' command - forecast in the terminal
    show_parser = subparsers.add_parser("show", help="Print the forecast for a place")
    show_parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="City, region or country (default: configured default location)",
    )

    # 'locate' command - forecast for given device coordinates
    locate_parser = subparsers.add_parser("locate", help="Print the forecast for coordinates")
    locate_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    locate_parser.add_argument("--lon", type=float, required=True, help="Longitude")

    # 'build' command - render the static dashboard page
    build_parser = subparsers.add_parser("build", help="Build the dashboard page")
    build_parser.add_argument("query", nargs="?", default=None, help="Place to show")
    build_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    # 'serve' command - preview the built page
    serve_parser = subparsers.add_parser("serve", help="Serve the built page locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def _print_state(dashboard: WeatherDashboard) -> int:
    state = dashboard.state
    if state.error:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1
    print(build_dashboard_text(state))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    dashboard = WeatherDashboard(get_settings().default_location())
    if args.query is None:
        dashboard.load_initial()
    else:
        dashboard.search(args.query)
    return _print_state(dashboard)


def cmd_locate(args: argparse.Namespace) -> int:
    """Handle the 'locate' command: the "use my location" path."""
    dashboard = WeatherDashboard(get_settings().default_location())
    dashboard.use_my_location(FixedGeolocator(args.lat, args.lon))
    return _print_state(dashboard)


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    result = build_dashboard(args.query, args.output)
    if result.get("error"):
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Built {result['output']} for {result['location']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: preview the built page."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'weather-dashboard build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving {site_dir} at http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nStopped.")

    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default location: {settings.default_location().label}")
    print(f"Request timeout: {settings.request_timeout}s")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    debug = args.debug or get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "show": cmd_show,
        "locate": cmd_locate,
        "build": cmd_build,
        "serve": cmd_serve,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
