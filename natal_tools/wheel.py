"""SVG chart wheel: zodiac ring, Equal house lines and Sun/ASC/MC markers."""

from __future__ import annotations

import math
from pathlib import Path

from .angles import deg_to_rad, normalize_degrees
from .models import ChartResult
from .zodiac import SIGN_SYMBOLS, SIGNS

ASC_COLOR = "#10b981"
MC_COLOR = "#3b82f6"
SUN_FILL = "#ef4444"
SUN_STROKE = "#991b1b"
INK = "#111827"
HOUSE_COLOR = "#9ca3af"


def angle_from_longitude(longitude_deg: float) -> float:
    """
    Screen angle in radians for an ecliptic longitude.

    0° Aries points right (+x) and the zodiac runs clockwise on screen.
    """
    return -deg_to_rad(normalize_degrees(longitude_deg))


def polar_to_xy(cx: float, cy: float, radius: float, angle_rad: float) -> tuple[float, float]:
    return cx + radius * math.cos(angle_rad), cy + radius * math.sin(angle_rad)


def _line(p1: tuple[float, float], p2: tuple[float, float], stroke: str, width: float) -> str:
    return (
        f'<line x1="{p1[0]:.2f}" y1="{p1[1]:.2f}" x2="{p2[0]:.2f}" y2="{p2[1]:.2f}" '
        f'stroke="{stroke}" stroke-width="{width}"/>'
    )


def render_wheel_svg(chart: ChartResult, size: int = 420) -> str:
    """Return the chart wheel as a standalone SVG document string."""

    r = size / 2
    cx, cy = r, r
    inner_r = r * 0.55
    house_r = r * 0.9

    parts: list[str] = []
    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}" role="img" aria-label="Natal chart wheel">'
    )
    parts.append(
        '<defs><filter id="shadow" x="-50%" y="-50%" width="200%" height="200%">'
        '<feDropShadow dx="0" dy="1" stdDeviation="2" flood-color="#000" flood-opacity="0.2"/>'
        "</filter></defs>"
    )
    parts.append(
        f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r - 2:.2f}" fill="#fff" '
        f'stroke="{INK}" stroke-width="2" filter="url(#shadow)"/>'
    )

    # Sign boundaries
    for i in range(12):
        a = angle_from_longitude(i * 30.0)
        parts.append(_line(polar_to_xy(cx, cy, r * 0.98, a), polar_to_xy(cx, cy, inner_r, a), INK, 2))

    # Sign glyphs at mid-sign
    label_r = (r + inner_r) / 2
    for i, sign in enumerate(SIGNS):
        x, y = polar_to_xy(cx, cy, label_r, angle_from_longitude(i * 30.0 + 15.0))
        parts.append(
            f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="middle" dominant-baseline="middle" '
            f'font-size="18" font-weight="700"><title>{sign}</title>{SIGN_SYMBOLS[sign]}</text>'
        )

    for cusp in chart.houses:
        a = angle_from_longitude(cusp)
        parts.append(
            _line(polar_to_xy(cx, cy, house_r, a), polar_to_xy(cx, cy, inner_r * 0.6, a), HOUSE_COLOR, 1.5)
        )

    a = angle_from_longitude(chart.ascendant)
    parts.append(_line(polar_to_xy(cx, cy, r * 0.98, a), polar_to_xy(cx, cy, inner_r * 0.4, a), ASC_COLOR, 3))
    parts.append(
        f'<text x="{cx:.2f}" y="{cy - inner_r * 0.5:.2f}" text-anchor="middle" '
        f'font-size="12" fill="{ASC_COLOR}">ASC</text>'
    )

    a = angle_from_longitude(chart.midheaven)
    parts.append(_line(polar_to_xy(cx, cy, r * 0.98, a), polar_to_xy(cx, cy, inner_r * 0.4, a), MC_COLOR, 3))
    parts.append(
        f'<text x="{cx:.2f}" y="{cy + inner_r * 0.5:.2f}" text-anchor="middle" '
        f'font-size="12" fill="{MC_COLOR}">MC</text>'
    )

    sx, sy = polar_to_xy(cx, cy, (inner_r + house_r) / 2, angle_from_longitude(chart.sun_longitude))
    parts.append(
        f'<circle cx="{sx:.2f}" cy="{sy:.2f}" r="6" fill="{SUN_FILL}" stroke="{SUN_STROKE}" stroke-width="1"/>'
    )

    parts.append("</svg>")
    return "\n".join(parts)


def write_wheel_svg(path: str | Path, chart: ChartResult, size: int = 420) -> None:
    Path(path).write_text(render_wheel_svg(chart, size=size), encoding="utf-8")
