import pytest

from natal_tools import astro_engine, cli, output
from natal_tools.astro_engine import compute_chart, compute_chart_for_birth
from natal_tools.birth_parser import build_birth_data


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(astro_engine, "EPHE_PATH", None)


@pytest.fixture
def birth():
    return build_birth_data("1990-06-15", "14:30", 2, 48.8566, 2.3522, name="Marie Dupont")


def test_markdown_report(birth):
    chart = compute_chart_for_birth(birth)
    md = output.build_markdown_report(birth, chart)
    assert md.startswith("```\n")
    assert md.rstrip().endswith("```")
    assert "Chart: Marie Dupont" in md
    assert "Local: 1990-06-15 14:30 (UTC+02:00)" in md
    assert "UTC:   1990-06-15 12:30 (UTC)" in md
    assert "48.8566° N, 2.3522° E" in md
    assert "Houses (Equal)" in md
    assert "Swiss Ephemeris" not in md


def test_markdown_report_with_reference(birth):
    chart = compute_chart_for_birth(birth)
    reference = astro_engine.reference_positions(chart.jd, birth.latitude, birth.longitude)
    md = output.build_markdown_report(birth, chart, reference)
    assert "Swiss Ephemeris check (moshier)" in md


def test_tz_offset_formatting():
    assert output._tz_offset_str(5.75) == "UTC+05:45"
    assert output._tz_offset_str(-3.5) == "UTC-03:30"
    assert output._tz_offset_str(0) == "UTC+00:00"


def test_cli_writes_reports(capsys, tmp_path):
    code = cli.main(
        [
            "--date", "1990-06-15",
            "--time", "14:30",
            "--tz", "2",
            "--name", "Marie Dupont",
            "--md", "chart.md",
            "--html", "chart.html",
            "--svg", str(tmp_path / "wheel" / "chart.svg"),
        ]
    )
    assert code == 0
    assert "Marie Dupont" in capsys.readouterr().out
    assert (tmp_path / "outputs" / "chart.md").read_text(encoding="utf-8").startswith("```")
    html = (tmp_path / "outputs" / "chart.html").read_text(encoding="utf-8")
    assert "<svg" in html and "background:#0b0b0b" in html
    assert (tmp_path / "wheel" / "chart.svg").exists()


def test_cli_plain_output(capsys):
    assert cli.main(["--date", "2000-01-01", "--time", "12:00", "--plain"]) == 0
    out = capsys.readouterr().out
    chart = compute_chart(2451545.0, 48.8566, 2.3522)
    assert f"Sun        10°22' Capricorn (House {chart.sun_house})\n" in out


def test_cli_compare(capsys):
    assert cli.main(["--date", "2000-01-01", "--time", "12:00", "--compare"]) == 0
    assert "Swiss Ephemeris check" in capsys.readouterr().out


def test_cli_ephe_applies_without_compare(capsys, tmp_path):
    assert cli.main(["--date", "2000-01-01", "--ephe", str(tmp_path), "--plain"]) == 0
    assert astro_engine.EPHE_PATH == str(tmp_path)


@pytest.mark.parametrize(
    "argv",
    [
        ["--date", "2001-02-29"],
        ["--date", "2000-01-01", "--time", "25:00"],
        ["--date", "2000-01-01", "--tz", "15"],
        ["--date", "2000-01-01", "--lat", "90"],
        ["--date", "2000-01-01", "--lat", "-91"],
        ["--date", "0001-01-01", "--time", "00:30", "--tz", "1"],
        ["--date", "9999-12-31", "--time", "23:30", "--tz", "-5"],
    ],
)
def test_cli_rejects_bad_input(capsys, argv):
    assert cli.main(argv) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_resolve_output_path_keeps_explicit_dirs(tmp_path):
    explicit = tmp_path / "reports" / "x.md"
    assert cli.resolve_output_path(str(explicit)) == explicit
    assert explicit.parent.is_dir()
    assert cli.resolve_output_path(None) is None
