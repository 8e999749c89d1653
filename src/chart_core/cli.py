"""CLI for chart-core."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from chart_core import __version__
from chart_core.errors import ChartConfigError, ChartDataError
from chart_core.layout import compute_chart_layout
from chart_core.parser import ChartDefinition, parse_chart_json
from chart_core.render import render_svg
from chart_core.render.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from chart_core.themes import THEMES


def _load_chart(input_file: Path) -> ChartDefinition:
    try:
        return parse_chart_json(input_file.read_text())
    except ChartDataError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """chart-core: Compute chart geometry and render it to SVG."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default=None,
              help="Visual theme (default: the chart's style)")
@click.option("--width", type=int, default=DEFAULT_WIDTH,
              help=f"SVG width in pixels (default: {DEFAULT_WIDTH})")
@click.option("--height", type=int, default=DEFAULT_HEIGHT,
              help=f"SVG height in pixels (default: {DEFAULT_HEIGHT})")
@click.option("--no-legend", is_flag=True, help="Omit the series legend")
def render(
    input_file: Path,
    output: Path | None,
    theme: str | None,
    width: int,
    height: int,
    no_legend: bool,
) -> None:
    """Render a JSON chart definition to SVG."""
    chart = _load_chart(input_file)
    try:
        layout = compute_chart_layout(chart, width, height)
    except ChartConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    theme_obj = THEMES[theme or chart.style]
    svg = render_svg(layout, theme_obj, legend=not no_legend)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(layout.series)} series, "
               f"{len(layout.x_axes)} x-axes, "
               f"{len(layout.y_axes)} y-axes -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a JSON chart definition."""
    chart = _load_chart(input_file)
    try:
        layout = compute_chart_layout(chart, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    except ChartConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(chart.series)} series, "
               f"{len(layout.x_axes)} x-axes, "
               f"{len(layout.y_axes)} y-axes")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--width", type=int, default=DEFAULT_WIDTH)
@click.option("--height", type=int, default=DEFAULT_HEIGHT)
def info(input_file: Path, width: int, height: int) -> None:
    """Show information about a JSON chart definition."""
    chart = _load_chart(input_file)
    try:
        layout = compute_chart_layout(chart, width, height)
    except ChartConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    rect = layout.rect
    click.echo(f"Title: {chart.title or '(none)'}")
    click.echo(f"Style: {chart.style}")
    click.echo(f"Drawing area: {rect.x:g},{rect.y:g} {rect.width:g}x{rect.height:g}")
    for axes in (layout.x_axes, layout.y_axes):
        for axis in axes.values():
            lo, hi = axis.config.domain.min, axis.config.domain.max
            click.echo(f"  {axis.axis_type}-axis {axis.id} ({axis.position}, "
                       f"{axis.config.scale_type}): [{lo:g}, {hi:g}], "
                       f"{len(axis.ticks)} ticks")
    click.echo(f"Series: {len(layout.series)}")
    for item in layout.series:
        click.echo(f"  {item.label} ({item.type}): "
                   f"{sum(p is not None for p in item.points)} points")
    if layout.scrubber is not None:
        click.echo(f"Scrubber: index {layout.scrubber.index} "
                   f"at x={layout.scrubber.x:g}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--axis", "axis_type", type=click.Choice(["x", "y"]), default="y",
              help="Axis type to report (default: y)")
@click.option("--id", "axis_id", default=None, help="Axis id (default: first axis)")
@click.option("--width", type=int, default=DEFAULT_WIDTH)
@click.option("--height", type=int, default=DEFAULT_HEIGHT)
def ticks(
    input_file: Path,
    axis_type: str,
    axis_id: str | None,
    width: int,
    height: int,
) -> None:
    """Print the scale and tick marks of one axis as JSON."""
    chart = _load_chart(input_file)
    try:
        layout = compute_chart_layout(chart, width, height)
    except ChartConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    axes = layout.x_axes if axis_type == "x" else layout.y_axes
    if axis_id is not None and axis_id not in axes:
        click.echo(f"Error: no {axis_type}-axis with id {axis_id!r}", err=True)
        raise SystemExit(1)
    axis = layout.x_axis(axis_id) if axis_type == "x" else layout.y_axis(axis_id)

    doc = {
        "id": axis.id,
        "position": axis.position,
        "scale": axis.scale.describe(),
        "ticks": [
            {"value": mark.tick, "position": mark.position, "label": label}
            for mark, label in zip(axis.ticks, axis.labels)
        ],
    }
    click.echo(json.dumps(doc, indent=2))


if __name__ == "__main__":
    cli()
