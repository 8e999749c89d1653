"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from chart_core.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
LINE_JSON = EXAMPLES_DIR / "line_basic.json"
MULTI_AXIS_JSON = EXAMPLES_DIR / "multi_axis.json"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(LINE_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text()
    assert "Rendered 2 series" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    chart = tmp_path / "test.json"
    chart.write_text(LINE_JSON.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(chart)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_with_theme_and_size(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["render", str(LINE_JSON), "-o", str(out), "--theme", "light",
         "--width", "800", "--height", "300"],
    )
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert 'width="800"' in content
    assert 'height="300"' in content


def test_render_every_example(tmp_path):
    runner = CliRunner()
    for path in sorted(EXAMPLES_DIR.glob("*.json")):
        out = tmp_path / f"{path.stem}.svg"
        result = runner.invoke(cli, ["render", str(path), "-o", str(out)])
        assert result.exit_code == 0, f"{path.name}: {result.output}"


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(MULTI_AXIS_JSON)])
    assert result.exit_code == 0
    assert "Valid: 3 series" in result.output


def test_validate_bad_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_validate_undeclared_axis(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"series": [{"id": "a", "data": [1], "y_axis_id": "x"}]}))
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "undeclared" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(MULTI_AXIS_JSON)])
    assert result.exit_code == 0, result.output
    assert "Title: Temperature and rainfall" in result.output
    assert "y-axis temp (left, linear)" in result.output
    assert "y-axis rain (right, linear)" in result.output
    assert "Series: 3" in result.output
    assert "Scrubber: index 2" in result.output


def test_ticks_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["ticks", str(LINE_JSON), "--axis", "y"])
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["scale"]["type"] == "linear"
    assert doc["scale"]["domain"][0] == 0
    assert [t["label"] for t in doc["ticks"]][:2] == ["0", "50"]


def test_ticks_band_axis():
    runner = CliRunner()
    result = runner.invoke(
        cli, ["ticks", str(EXAMPLES_DIR / "bar_categories.json"), "--axis", "x"]
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["scale"]["type"] == "band"
    assert [t["label"] for t in doc["ticks"]] == ["Q1", "Q2", "Q3", "Q4"]


def test_ticks_unknown_axis_id():
    runner = CliRunner()
    result = runner.invoke(cli, ["ticks", str(LINE_JSON), "--id", "nope"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_verbose_flag():
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "validate", str(LINE_JSON)])
    assert result.exit_code == 0


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()
