"""SVG generation for charts using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from chart_core.layout.engine import AxisLayout, ChartLayout, ScrubberLayout
from chart_core.layout.paths import line_to_path
from chart_core.render.constants import (
    AXIS_STROKE_WIDTH,
    GRID_DASH,
    GRID_STROKE_WIDTH,
    LABEL_BORDER_RADIUS,
    LABEL_PADDING_X,
    LEGEND_MARGIN,
    SCRUBBER_DASH,
    TICK_LABEL_GAP,
    TICK_LENGTH,
    TITLE_BASELINE,
)
from chart_core.render.legend import compute_legend_dimensions, render_legend
from chart_core.render.style import Theme


def render_svg(layout: ChartLayout, theme: Theme, legend: bool = True) -> str:
    """Render a computed chart layout to an SVG string."""
    d = draw.Drawing(layout.width, layout.height)
    d.append(
        draw.Rectangle(0, 0, layout.width, layout.height, fill=theme.background_color)
    )

    if layout.title:
        d.append(draw.Text(
            layout.title,
            theme.title_font_size,
            layout.inset["left"], TITLE_BASELINE,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    if layout.rect.width <= 0 or layout.rect.height <= 0:
        return d.as_svg()

    colors = {
        item.id: theme.series_color(i, item.color)
        for i, item in enumerate(layout.series)
    }

    if layout.y_axes:
        _render_grid(d, layout, layout.y_axis(), theme)
    _render_series(d, layout, colors, theme)
    for axis in layout.x_axes.values():
        _render_x_axis(d, layout, axis, theme)
    for axis in layout.y_axes.values():
        _render_y_axis(d, layout, axis, theme)

    if legend and len(layout.series) > 1:
        legend_w, _ = compute_legend_dimensions(layout.series, theme)
        render_legend(
            d,
            layout.series,
            colors,
            theme,
            layout.rect.x + layout.rect.width - legend_w - LEGEND_MARGIN,
            layout.rect.y + LEGEND_MARGIN,
        )

    if layout.scrubber is not None:
        _render_scrubber(d, layout, layout.scrubber, colors, theme)

    return d.as_svg()


def _render_grid(
    d: draw.Drawing, layout: ChartLayout, axis: AxisLayout, theme: Theme
) -> None:
    """Horizontal dashed grid lines at each y tick."""
    rect = layout.rect
    for mark in axis.ticks:
        d.append(draw.Path(
            d=line_to_path(rect.x, mark.position, rect.x + rect.width, mark.position),
            stroke=theme.grid_color,
            stroke_width=GRID_STROKE_WIDTH,
            stroke_dasharray=GRID_DASH,
            fill="none",
        ))


def _render_series(
    d: draw.Drawing,
    layout: ChartLayout,
    colors: dict[str, str],
    theme: Theme,
) -> None:
    for item in layout.series:
        color = colors[item.id]
        if item.type == "bar":
            for bar in item.bars:
                d.append(draw.Path(d=bar, fill=color))
            continue
        if not item.path:
            continue
        if item.type == "area":
            d.append(draw.Path(
                d=item.path,
                fill=color,
                fill_opacity=theme.area_opacity,
                stroke=color,
                stroke_width=theme.line_width / 2,
                class_=f"series series-{item.id}",
            ))
        else:
            d.append(draw.Path(
                d=item.path,
                fill="none",
                stroke=color,
                stroke_width=theme.line_width,
                stroke_linejoin="round",
                stroke_linecap="round",
                class_=f"series series-{item.id}",
            ))


def _render_x_axis(
    d: draw.Drawing, layout: ChartLayout, axis: AxisLayout, theme: Theme
) -> None:
    rect = layout.rect
    at_top = axis.position == "top"
    y = rect.y if at_top else rect.y + rect.height
    direction = -1 if at_top else 1

    d.append(draw.Path(
        d=line_to_path(rect.x, y, rect.x + rect.width, y),
        stroke=theme.axis_color,
        stroke_width=AXIS_STROKE_WIDTH,
        fill="none",
    ))
    for mark, label in zip(axis.ticks, axis.labels):
        d.append(draw.Line(
            mark.position, y,
            mark.position, y + direction * TICK_LENGTH,
            stroke=theme.axis_color,
            stroke_width=AXIS_STROKE_WIDTH,
        ))
        d.append(draw.Text(
            label,
            theme.tick_font_size,
            mark.position, y + direction * (TICK_LENGTH + TICK_LABEL_GAP),
            fill=theme.tick_label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="auto" if at_top else "hanging",
        ))


def _render_y_axis(
    d: draw.Drawing, layout: ChartLayout, axis: AxisLayout, theme: Theme
) -> None:
    rect = layout.rect
    at_right = axis.position == "right"
    x = rect.x + rect.width if at_right else rect.x
    direction = 1 if at_right else -1

    d.append(draw.Path(
        d=line_to_path(x, rect.y, x, rect.y + rect.height),
        stroke=theme.axis_color,
        stroke_width=AXIS_STROKE_WIDTH,
        fill="none",
    ))
    for mark, label in zip(axis.ticks, axis.labels):
        d.append(draw.Line(
            x, mark.position,
            x + direction * TICK_LENGTH, mark.position,
            stroke=theme.axis_color,
            stroke_width=AXIS_STROKE_WIDTH,
        ))
        d.append(draw.Text(
            label,
            theme.tick_font_size,
            x + direction * (TICK_LENGTH + TICK_LABEL_GAP), mark.position,
            fill=theme.tick_label_color,
            font_family=theme.label_font_family,
            text_anchor="start" if at_right else "end",
            dominant_baseline="central",
        ))


def _render_scrubber(
    d: draw.Drawing,
    layout: ChartLayout,
    scrubber: ScrubberLayout,
    colors: dict[str, str],
    theme: Theme,
) -> None:
    rect = layout.rect
    d.append(draw.Path(
        d=line_to_path(scrubber.x, rect.y, scrubber.x, rect.y + rect.height),
        stroke=theme.scrubber_line_color,
        stroke_width=AXIS_STROKE_WIDTH,
        stroke_dasharray=SCRUBBER_DASH,
        fill="none",
    ))

    for series_id, point in scrubber.beacons.items():
        d.append(draw.Circle(
            point.x, point.y, theme.beacon_radius,
            fill=colors[series_id],
            stroke=theme.beacon_stroke,
            stroke_width=theme.beacon_stroke_width,
        ))

    char_width = theme.label_font_size * 0.6
    box_height = theme.label_font_size + 6
    for placement in scrubber.labels:
        text = scrubber.texts[placement.series_id]
        box_width = len(text) * char_width + LABEL_PADDING_X * 2
        if placement.side == "right":
            box_x = placement.x
            text_x = box_x + LABEL_PADDING_X
        else:
            box_x = placement.x - box_width
            text_x = placement.x - LABEL_PADDING_X
        d.append(draw.Rectangle(
            box_x, placement.y - box_height / 2,
            box_width, box_height,
            rx=LABEL_BORDER_RADIUS, ry=LABEL_BORDER_RADIUS,
            fill=colors[placement.series_id],
        ))
        d.append(draw.Text(
            text,
            theme.label_font_size,
            text_x, placement.y,
            fill=theme.label_text_color,
            font_family=theme.label_font_family,
            text_anchor=placement.text_anchor,
            dominant_baseline="central",
        ))
