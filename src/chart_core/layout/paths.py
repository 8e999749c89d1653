"""SVG path strings for lines, areas, bars and straight segments."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from chart_core.layout.curves import PathContext, format_number, make_curve
from chart_core.layout.points import point_on_scale, project_points, x_value_at
from chart_core.layout.scale import Scale
from chart_core.parser.model import DatumKind, Point, classify_datum

LOGGER = logging.getLogger(__name__)


def _defined(point: Point | None) -> bool:
    return point is not None and math.isfinite(point.x) and math.isfinite(point.y)


def build_line_path(
    data: Sequence[Any],
    x_scale: Scale,
    y_scale: Scale,
    curve: str | None = "linear",
    x_data: Sequence[Any] | None = None,
    connect_nulls: bool = False,
) -> str:
    """SVG path through a series.

    Gaps split the line into separate subpaths unless ``connect_nulls`` is
    set, in which case they are dropped and the line runs straight on.
    """
    if not data:
        return ""
    points = project_points(data, x_scale, y_scale, x_data)
    if connect_nulls:
        points = [p for p in points if _defined(p)]

    context = PathContext()
    output = make_curve(curve, context)
    defined = False
    for i in range(len(points) + 1):
        current = points[i] if i < len(points) else None
        if _defined(current) != defined:
            defined = not defined
            if defined:
                output.line_start()
            else:
                output.line_end()
        if defined:
            output.point(current.x, current.y)
    return str(context)


@dataclass(frozen=True)
class _AreaPoint:
    x: float
    low: float
    high: float

    @property
    def defined(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.low, self.high))


def _area_points(
    data: Sequence[Any],
    x_scale: Scale,
    y_scale: Scale,
    x_data: Sequence[Any] | None,
) -> list[_AreaPoint | None]:
    baseline = min(y_scale.domain())
    points: list[_AreaPoint | None] = []
    for index, raw in enumerate(data):
        datum = classify_datum(raw)
        if datum.kind is DatumKind.VALUE:
            x_value = x_value_at(index, x_scale, x_data)
            low, high = baseline, datum.value
        elif datum.kind is DatumKind.RANGE:
            x_value = x_value_at(index, x_scale, x_data)
            low, high = datum.low, datum.high
        elif datum.kind is DatumKind.POINT:
            x_value, low, high = datum.x, baseline, datum.y
        else:
            if raw is not None:
                LOGGER.debug("Treating malformed area datum %r as a gap", raw)
            points.append(None)
            continue
        points.append(
            _AreaPoint(
                x=point_on_scale(x_value, x_scale),
                low=point_on_scale(low, y_scale),
                high=point_on_scale(high, y_scale),
            )
        )
    return points


def build_area_path(
    data: Sequence[Any],
    x_scale: Scale,
    y_scale: Scale,
    curve: str | None = "linear",
    x_data: Sequence[Any] | None = None,
    connect_nulls: bool = False,
) -> str:
    """SVG path filling between a baseline and each value.

    Bare numbers fill down to the lowest value of the y domain; ``(low,
    high)`` tuples carry their own baseline. Every unbroken run becomes its
    own closed polygon: the top edge forward, then the baseline backward.
    """
    if not data:
        return ""
    points = _area_points(data, x_scale, y_scale, x_data)
    if connect_nulls:
        points = [p for p in points if p is not None and p.defined]

    context = PathContext()
    output = make_curve(curve, context)
    defined = False
    start = 0
    for i in range(len(points) + 1):
        current = points[i] if i < len(points) else None
        is_defined = current is not None and current.defined
        if is_defined != defined:
            defined = is_defined
            if defined:
                start = i
                output.area_start()
                output.line_start()
            else:
                output.line_end()
                output.line_start()
                for k in range(i - 1, start - 1, -1):
                    output.point(points[k].x, points[k].low)
                output.line_end()
                output.area_end()
        if defined:
            output.point(current.x, current.high)
    return str(context)


def build_bar_path(
    x: float,
    y: float,
    width: float,
    height: float,
    radius: float,
    round_top: bool,
    round_bottom: bool,
) -> str:
    """Rectangle path with optionally rounded top and bottom corners.

    The radius is clamped to half the width, and to half the height when
    both ends are rounded (the full height otherwise).
    """
    round_both = round_top and round_bottom
    r = min(radius, width / 2, height / 2 if round_both else height)
    top_r = r if round_top else 0
    bottom_r = r if round_bottom else 0

    def f(value: float) -> str:
        return format_number(value, digits=None)

    parts = [
        f"M {f(x + top_r)} {f(y)}",
        f"L {f(x + width - top_r)} {f(y)}",
        f"A {f(top_r)} {f(top_r)} 0 0 1 {f(x + width)} {f(y + top_r)}",
        f"L {f(x + width)} {f(y + height - bottom_r)}",
        f"A {f(bottom_r)} {f(bottom_r)} 0 0 1 {f(x + width - bottom_r)} {f(y + height)}",
        f"L {f(x + bottom_r)} {f(y + height)}",
        f"A {f(bottom_r)} {f(bottom_r)} 0 0 1 {f(x)} {f(y + height - bottom_r)}",
        f"L {f(x)} {f(y + top_r)}",
        f"A {f(top_r)} {f(top_r)} 0 0 1 {f(x + top_r)} {f(y)}",
        "Z",
    ]
    return " ".join(parts)


def line_to_path(x1: float, y1: float, x2: float, y2: float) -> str:
    """Straight segment, used for axis lines and grid lines."""
    f = format_number
    return f"M{f(x1, None)},{f(y1, None)} L{f(x2, None)},{f(y2, None)}"
