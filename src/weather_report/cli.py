"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from weather_report import __version__
from weather_report.config import get_settings
from weather_report.datasources.tomorrow import fetch_observation
from weather_report.errors import WeatherReportError
from weather_report.logger import configure_logging
from weather_report.renderers import color_enabled, render_report
from weather_report.report import compose_report, parse_units
from weather_report.schemas import Units

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-report",
        description="Current weather conditions for a location, from tomorrow.io",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-l",
        "--location",
        type=str,
        default=None,
        help="City to lookup weather (ex. New York City)",
    )
    parser.add_argument(
        "-u",
        "--units",
        type=str,
        default=None,
        help="Which units to use (metric vs imperial, default: imperial)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def cmd_report(args: argparse.Namespace) -> int:
    """Fetch current conditions and print the report."""
    settings = get_settings()
    location = args.location or settings.location
    requested_units = args.units if args.units is not None else settings.units
    units = parse_units(requested_units)
    if requested_units not in tuple(Units):
        logger.debug("Unrecognized units %r, using %s", requested_units, units)

    logger.debug("Settings: %s", settings)
    try:
        observation = fetch_observation(
            location,
            settings.tomorrow_api_key,
            api_url=settings.api_url,
            timeout=settings.timeout,
        )
        lines = compose_report(observation, units)
    except WeatherReportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    color = color_enabled(sys.stdout, no_color=args.no_color)
    sys.stdout.write(render_report(lines, color=color))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    configure_logging(debug=args.debug or get_settings().debug)
    return cmd_report(args)


if __name__ == "__main__":
    sys.exit(main())
