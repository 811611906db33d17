"""Command-line entrypoint for sunrise_almanac."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from datetime import date, datetime, time

from sunrise_almanac.calculator import SunriseCalculator
from sunrise_almanac.config import SiteConfig, SiteConfigError, config_from_env, resolve_zenith
from sunrise_almanac.orchestrate.schedule import build_year_schedule, summarize_daylight

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    """Parse an ISO calendar date."""
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value}") from exc


def _add_site_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None)
    parser.add_argument("--lon", type=float, default=None)
    parser.add_argument("--zenith", default=None, help="official, civil, nautical, astronomical or degrees")
    parser.add_argument("--utc-offset-minutes", type=int, default=None)


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunrise_almanac",
        description="Sunrise and sunset times from the 1990 Almanac for Computers.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )

    subparsers = parser.add_subparsers(dest="command")
    times = subparsers.add_parser("times", help="Print sunrise and sunset for one date.")
    times.add_argument("--date", type=_parse_date, required=True)
    times.add_argument("--format", choices=["hhmm", "iso"], default="hhmm")
    _add_site_arguments(times)

    schedule = subparsers.add_parser("schedule", help="Print sunrise and sunset for every day of a year.")
    schedule.add_argument("--year", type=int, required=True)
    _add_site_arguments(schedule)

    return parser


def _resolve_site(args: argparse.Namespace) -> SiteConfig:
    """Merge command-line site arguments over environment configuration."""
    if args.lat is not None and args.lon is not None:
        base = SiteConfig(latitude=args.lat, longitude=args.lon)
    else:
        base = config_from_env()
        if args.lat is not None or args.lon is not None:
            base = SiteConfig(
                latitude=base.latitude if args.lat is None else args.lat,
                longitude=base.longitude if args.lon is None else args.lon,
                zenith=base.zenith,
                utc_offset_minutes=base.utc_offset_minutes,
            )
    return SiteConfig(
        latitude=base.latitude,
        longitude=base.longitude,
        zenith=base.zenith if args.zenith is None else resolve_zenith(args.zenith),
        utc_offset_minutes=(
            base.utc_offset_minutes if args.utc_offset_minutes is None else args.utc_offset_minutes
        ),
    )


def _format_hhmm(code: int) -> str:
    return f"{code:04d}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    if args.command is None:
        return 0

    try:
        site = _resolve_site(args)
    except SiteConfigError as exc:
        parser.error(str(exc))

    calculator = SunriseCalculator.from_config(site)
    logger.info(f"site lat={site.latitude} lon={site.longitude} zenith={site.zenith}")

    if args.command == "times":
        ts = datetime.combine(args.date, time())
        if args.format == "iso":
            sunrise, sunset = calculator.calculate_times(ts, site.utc_offset_minutes)
            print(f"sunrise={sunrise.isoformat()} sunset={sunset.isoformat()}")
        else:
            sunrise_code, sunset_code = calculator.calculate(ts, site.utc_offset_minutes)
            print(f"sunrise={_format_hhmm(sunrise_code)} sunset={_format_hhmm(sunset_code)}")
        return 0

    if args.command == "schedule":
        try:
            rows = build_year_schedule(calculator, args.year, site.utc_offset_minutes)
        except ValueError as exc:
            parser.error(str(exc))
        for row in rows:
            print(
                f"{row.day.isoformat()} "
                f"sunrise={_format_hhmm(row.sunrise_hhmm)} "
                f"sunset={_format_hhmm(row.sunset_hhmm)} "
                f"daylight_minutes={row.daylight_minutes}"
            )
        summary = summarize_daylight(rows)
        print(
            "schedule complete "
            f"days={summary['days']} "
            f"min_daylight_minutes={summary['min_daylight_minutes']} "
            f"max_daylight_minutes={summary['max_daylight_minutes']} "
            f"polar_day_count={summary['polar_day_count']} "
            f"polar_night_count={summary['polar_night_count']}"
        )
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
