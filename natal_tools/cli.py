"""Command line entry point: compute and print a natal chart."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from . import astro_engine, output, wheel
from .birth_parser import build_birth_data
from .errors import ChartError

DEFAULT_OUTPUT_DIR = Path("outputs")

# Default birth place: Paris.
DEFAULT_LATITUDE = 48.8566
DEFAULT_LONGITUDE = 2.3522

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="natal-chart",
        description="Compute Sun, Ascendant, Midheaven and Equal houses for a birth date, time and place.",
    )
    parser.add_argument("--date", required=True, help="Birth date, YYYY-MM-DD")
    parser.add_argument("--time", default="00:00", help="Local birth time, HH:MM (default 00:00)")
    parser.add_argument(
        "--tz",
        type=float,
        default=0.0,
        help="Local offset from UTC in hours, e.g. 1 for Paris in winter, -5 for Quebec in winter",
    )
    parser.add_argument("--lat", type=float, default=DEFAULT_LATITUDE, help="Latitude in degrees, north positive")
    parser.add_argument("--lon", type=float, default=DEFAULT_LONGITUDE, help="Longitude in degrees, east positive")
    parser.add_argument("--name", default="", help="Name shown in the report header")
    parser.add_argument("--html", help="Write an HTML report (with chart wheel) to this path")
    parser.add_argument("--md", "--markdown", dest="md", help="Write a Markdown report to this path")
    parser.add_argument("--svg", help="Write the chart wheel as SVG to this path")
    parser.add_argument("--ephe", help="Swiss Ephemeris data directory used by --compare (overrides SWISSEPH_EPHE)")
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Cross-check Sun, Ascendant and MC against Swiss Ephemeris",
    )
    parser.add_argument("--plain", action="store_true", help="Print a plain text summary instead of rich tables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_output_path(path_str: str | None) -> Path | None:
    """Bare file names go to DEFAULT_OUTPUT_DIR; parent directories are created."""
    if not path_str:
        return None
    p = Path(path_str)
    if not p.is_absolute() and p.parent == Path("."):
        p = DEFAULT_OUTPUT_DIR / p
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Usage:
        natal-chart --date 1990-06-15 --time 14:30 --tz 2 --lat 48.8566 --lon 2.3522
    """

    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    if args.ephe:
        astro_engine.set_ephe_path(str(Path(args.ephe).expanduser()))

    try:
        birth = build_birth_data(args.date, args.time, args.tz, args.lat, args.lon, name=args.name)
        chart = astro_engine.compute_chart_for_birth(birth)
    except ChartError as exc:
        print(f"Error: {exc}")
        return 1

    reference = None
    if args.compare:
        reference = astro_engine.reference_positions(chart.jd, birth.latitude, birth.longitude)

    if args.plain:
        output.print_text(chart)
    else:
        output.print_report(birth, chart, reference)

    md_path = resolve_output_path(args.md)
    if md_path:
        md_path.write_text(output.build_markdown_report(birth, chart, reference), encoding="utf-8")
        logger.info("Markdown report written to %s", md_path)

    html_path = resolve_output_path(args.html)
    if html_path:
        output.export_html(html_path, birth, chart, reference)
        logger.info("HTML report written to %s", html_path)

    svg_path = resolve_output_path(args.svg)
    if svg_path:
        wheel.write_wheel_svg(svg_path, chart)
        logger.info("Chart wheel written to %s", svg_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
