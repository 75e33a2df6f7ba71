import math
import xml.etree.ElementTree as ET

import pytest

from natal_tools.astro_engine import compute_chart
from natal_tools.wheel import angle_from_longitude, polar_to_xy, render_wheel_svg, write_wheel_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def chart():
    return compute_chart(2451545.0, 48.8566, 2.3522)


def test_angle_from_longitude_runs_clockwise():
    assert angle_from_longitude(0.0) == 0.0
    assert angle_from_longitude(90.0) == pytest.approx(-math.pi / 2)
    assert angle_from_longitude(450.0) == pytest.approx(-math.pi / 2)
    # 90° of longitude lands above the center (smaller y on screen)
    x, y = polar_to_xy(100.0, 100.0, 50.0, angle_from_longitude(90.0))
    assert x == pytest.approx(100.0)
    assert y == pytest.approx(50.0)


def test_svg_is_well_formed_and_complete(chart):
    svg = render_wheel_svg(chart, size=300)
    root = ET.fromstring(svg)
    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "300"

    lines = root.findall(f"{SVG_NS}line")
    # 12 sign boundaries + 12 house cusps + ASC + MC
    assert len(lines) == 26
    texts = ["".join(t.itertext()) for t in root.findall(f"{SVG_NS}text")]
    assert any("ASC" in t for t in texts)
    assert any("MC" in t for t in texts)
    assert any("Capricorn" in t for t in texts)
    # outer circle + sun marker
    assert len(root.findall(f"{SVG_NS}circle")) == 2


def test_write_wheel_svg(tmp_path, chart):
    target = tmp_path / "wheel.svg"
    write_wheel_svg(target, chart)
    assert target.read_text(encoding="utf-8").startswith("<svg")
