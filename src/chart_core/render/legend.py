"""Legend generation for chart SVGs."""

from __future__ import annotations

import drawsvg as draw

from chart_core.layout.engine import SeriesGeometry
from chart_core.render.constants import (
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_SWATCH_WIDTH,
    LEGEND_TEXT_GAP,
)
from chart_core.render.style import Theme


def compute_legend_dimensions(
    series: list[SeriesGeometry], theme: Theme
) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it.

    Returns (0, 0) if there are no series.
    """
    if not series:
        return (0.0, 0.0)

    max_label_len = max(len(s.label) for s in series)
    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO
    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP
    width = LEGEND_PADDING * 2 + text_offset + max_label_len * char_width
    height = LEGEND_PADDING * 2 + len(series) * LEGEND_LINE_HEIGHT
    return (width, height)


def render_legend(
    drawing: draw.Drawing,
    series: list[SeriesGeometry],
    colors: dict[str, str],
    theme: Theme,
    x: float,
    y: float,
) -> None:
    """Render a legend box with one swatch per series, top-left at (x, y)."""
    if not series:
        return

    legend_width, legend_height = compute_legend_dimensions(series, theme)
    drawing.append(
        draw.Rectangle(
            x,
            y,
            legend_width,
            legend_height,
            rx=LEGEND_BORDER_RADIUS,
            ry=LEGEND_BORDER_RADIUS,
            fill=theme.legend_background,
        )
    )

    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP
    for i, item in enumerate(series):
        entry_y = y + LEGEND_PADDING + i * LEGEND_LINE_HEIGHT + LEGEND_LINE_HEIGHT / 2
        drawing.append(
            draw.Line(
                x + LEGEND_PADDING,
                entry_y,
                x + LEGEND_PADDING + LEGEND_SWATCH_WIDTH,
                entry_y,
                stroke=colors[item.id],
                stroke_width=theme.line_width * 2,
                stroke_linecap="round",
            )
        )
        drawing.append(
            draw.Text(
                item.label,
                theme.legend_font_size,
                x + LEGEND_PADDING + text_offset,
                entry_y,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            )
        )
