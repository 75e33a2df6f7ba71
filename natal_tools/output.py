"""Output helpers for presenting a computed chart."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .angles import normalize_degrees
from .geometry import house_for_longitude
from .julian import birth_datetime_utc
from .models import BirthData, ChartResult, ReferencePositions
from .wheel import render_wheel_svg
from .zodiac import format_longitude, sign_label, zodiac_sign

REPORT_WIDTH = 100


def _format_coord(value: float, positive_label: str, negative_label: str, precision: int = 4) -> str:
    """Return a signed coordinate with cardinal direction."""

    hemi = positive_label if value >= 0 else negative_label
    return f"{abs(value):.{precision}f}° {hemi}"


def _tz_offset_str(offset_hours: float) -> str:
    """Format timezone offset hours as UTC±HH:MM."""

    sign = "+" if offset_hours >= 0 else "-"
    total_minutes = int(round(abs(offset_hours) * 60))
    hours, minutes = divmod(total_minutes, 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def _chart_header_lines(birth: BirthData, chart: ChartResult) -> list[str]:
    """Human-readable chart basics for the top of the report."""

    lat_str = _format_coord(birth.latitude, "N", "S")
    lon_str = _format_coord(birth.longitude, "E", "W")
    return [
        f"Chart: {birth.name or 'Unnamed'}",
        f"Local: {birth.local_datetime.strftime('%Y-%m-%d %H:%M')} ({_tz_offset_str(birth.tz_offset_hours)})",
        f"UTC:   {birth_datetime_utc(birth).strftime('%Y-%m-%d %H:%M')} (UTC)",
        f"Location: {lat_str}, {lon_str}",
        f"Julian Day: {chart.jd:.5f} | House system: Equal | Zodiac: Tropical",
    ]


def _house_style(house_num: int) -> str:
    """Return a style for houses: angular, succedent, cadent."""
    if house_num in {1, 4, 7, 10}:
        return "bold white"
    if house_num in {2, 5, 8, 11}:
        return "cyan"
    return "dim"


def _angular_delta(a_deg: float, b_deg: float) -> float:
    """Signed smallest difference a - b, in (-180, 180]."""
    delta = normalize_degrees(a_deg - b_deg)
    return delta - 360.0 if delta > 180.0 else delta


def _render_report(
    console: Console,
    birth: BirthData,
    chart: ChartResult,
    reference: ReferencePositions | None = None,
    use_sign_symbols: bool = True,
) -> None:
    """Shared rich rendering so the same report can be exported to Markdown and HTML."""

    header_lines = _chart_header_lines(birth, chart)
    console.print(f"[bold cyan]{escape(header_lines[0])}[/]")
    for line in header_lines[1:]:
        console.print(line, markup=False)
    console.print()

    point_table = Table(title="Chart points", box=box.ROUNDED, expand=False, padding=(0, 1))
    point_table.add_column("Point", style="cyan", no_wrap=True)
    point_table.add_column("Longitude", justify="right", no_wrap=True)
    point_table.add_column("Position", style="magenta", no_wrap=True, justify="right")
    point_table.add_column("House", justify="center", no_wrap=True)

    points = [
        ("Sun", chart.sun_longitude, chart.sun_house),
        ("Ascendant", chart.ascendant, 1),
        ("MC", chart.midheaven, house_for_longitude(chart.midheaven, chart.ascendant)),
    ]
    for name, longitude, house in points:
        point_table.add_row(
            name,
            f"{longitude:.4f}°",
            format_longitude(longitude, use_sign_symbols),
            str(house),
        )
    console.print(point_table)
    console.print()

    house_table = Table(title="Houses (Equal)", box=box.MINIMAL_DOUBLE_HEAD, expand=False, padding=(0, 1))
    house_table.add_column("House", justify="center", no_wrap=True)
    house_table.add_column("Cusp", justify="right", no_wrap=True)
    house_table.add_column("Sign", style="magenta", no_wrap=True)
    for i, cusp in enumerate(chart.houses, start=1):
        house_table.add_row(
            f"{i:02d}",
            f"{cusp:.2f}°",
            sign_label(zodiac_sign(cusp), use_sign_symbols),
            style=_house_style(i),
        )
    console.print(house_table)

    if reference is not None:
        console.print()
        ref_table = Table(
            title=f"Swiss Ephemeris check ({reference.source})", box=box.SIMPLE, expand=False, padding=(0, 1)
        )
        ref_table.add_column("Point", style="cyan", no_wrap=True)
        ref_table.add_column("Computed", justify="right", no_wrap=True)
        ref_table.add_column("Swiss Ephemeris", justify="right", no_wrap=True)
        ref_table.add_column("Δ (deg)", justify="right", no_wrap=True)
        pairs = [
            ("Sun", chart.sun_longitude, reference.sun_longitude),
            ("Ascendant", chart.ascendant, reference.ascendant),
            ("MC", chart.midheaven, reference.midheaven),
        ]
        for name, ours, theirs in pairs:
            delta = _angular_delta(ours, theirs)
            delta_text = Text(f"{delta:+.4f}")
            if abs(delta) >= 0.05:
                delta_text.stylize("bold white on red")
            ref_table.add_row(name, f"{ours:.4f}°", f"{theirs:.4f}°", delta_text)
        console.print(ref_table)


def print_text(chart: ChartResult) -> None:
    """
    Print a plain summary:
    - one line per point: "Sun        09°22' Capricorn (House 10)"
    - then the twelve Equal house cusps.
    """

    print(f"{'Sun':<10} {format_longitude(chart.sun_longitude)} (House {chart.sun_house})")
    print(f"{'Ascendant':<10} {format_longitude(chart.ascendant)}")
    print(f"{'MC':<10} {format_longitude(chart.midheaven)}")

    print("\nHouses (Equal cusps):")
    for idx, cusp in enumerate(chart.houses, start=1):
        print(f"House {idx:02d} {format_longitude(cusp)}")


def print_report(birth: BirthData, chart: ChartResult, reference: ReferencePositions | None = None) -> None:
    """Render the rich-styled report to the terminal."""

    console = Console()
    _render_report(console, birth, chart, reference, use_sign_symbols=True)


def _recording_console() -> Console:
    return Console(record=True, theme=Theme({}), file=StringIO(), width=REPORT_WIDTH)


def build_markdown_report(
    birth: BirthData, chart: ChartResult, reference: ReferencePositions | None = None
) -> str:
    """Return a markdown string mirroring the console output."""

    console = _recording_console()
    _render_report(console, birth, chart, reference, use_sign_symbols=False)
    text = console.export_text()
    return "```\n" + text.rstrip() + "\n```\n"


def export_html(
    path: str | Path,
    birth: BirthData,
    chart: ChartResult,
    reference: ReferencePositions | None = None,
) -> None:
    """Export the report to an HTML file with a dark theme and the chart wheel embedded."""

    console = _recording_console()
    # Avoid sign symbols in HTML export so all glyphs share a fixed width.
    _render_report(console, birth, chart, reference, use_sign_symbols=False)
    html = console.export_html(inline_styles=True)
    dark_css = """
<style>
html, body { background:#0b0b0b !important; color:#eaeaea !important; }
pre, code {
  background:#0b0b0b !important;
  color:#eaeaea !important;
  white-space: pre;
  font-family:'Noto Sans Mono','DejaVu Sans Mono','JetBrains Mono','Menlo','Consolas',monospace;
}
.wheel { margin: 1.5em 0; }
</style>
""".strip()
    if "</head>" in html:
        html = html.replace("</head>", f"{dark_css}\n</head>", 1)
    else:
        html = f"{dark_css}\n{html}"

    wheel = f'<div class="wheel">\n{render_wheel_svg(chart)}\n</div>'
    if "</body>" in html:
        html = html.replace("</body>", f"{wheel}\n</body>", 1)
    else:
        html = f"{html}\n{wheel}"
    Path(path).write_text(html, encoding="utf-8")
