"""Layout coordinator: turns a chart definition into pixel geometry.

Resolves axes and the drawing area, builds one scale per axis, then derives
series paths, tick marks and the optional scrubber overlay. Scales and axes
are passed around in explicit id-keyed maps.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from chart_core.errors import ChartConfigError
from chart_core.layout.axis import (
    AxisPadding,
    RegisteredAxis,
    axis_bounds,
    build_axis_config,
    drawing_rect,
    make_axis_scale,
    register_axes,
    resolve_axis_configs,
    resolve_inset,
    resolved_config,
)
from chart_core.layout.constants import (
    BAR_WIDTH_FRACTION,
    DEFAULT_AXIS_ID,
    DEFAULT_BAR_RADIUS,
    DEFAULT_CHART_INSET,
    DEFAULT_X_TICK_INTERVAL,
    DEFAULT_Y_TICK_COUNT,
    LABEL_CHAR_WIDTH,
    LABEL_HEIGHT,
)
from chart_core.layout.labels import LabelPlacement, place_scrubber_labels
from chart_core.layout.paths import build_area_path, build_bar_path, build_line_path
from chart_core.layout.points import point_on_scale, project_points, x_value_at
from chart_core.layout.scale import BandScale, Scale
from chart_core.layout.scrubber import index_bounds
from chart_core.layout.stacking import StackedData, line_values, stack_key, stack_series
from chart_core.layout.ticks import TickMark, format_tick, format_ticks, generate_ticks
from chart_core.parser.model import (
    AxisConfig,
    AxisConfigProps,
    ChartDefinition,
    LabelDimension,
    Point,
    Rect,
    Series,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class AxisLayout:
    """A resolved axis with its scale, placement and ticks."""

    id: str
    axis_type: str
    config: AxisConfig
    scale: Scale
    position: str
    bounds: Rect
    ticks: list[TickMark] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)


@dataclass
class SeriesGeometry:
    """Pixel geometry for one series."""

    id: str
    label: str
    color: str | None
    type: str
    x_axis_id: str
    y_axis_id: str
    path: str = ""
    points: list[Point | None] = field(default_factory=list)
    bars: list[str] = field(default_factory=list)


@dataclass
class ScrubberLayout:
    """Highlighted index with beacon positions and label placements."""

    index: int
    x: float
    beacons: dict[str, Point] = field(default_factory=dict)
    labels: list[LabelPlacement] = field(default_factory=list)
    texts: dict[str, str] = field(default_factory=dict)


@dataclass
class ChartLayout:
    """Everything a renderer needs to draw a chart."""

    width: float
    height: float
    title: str
    style: str
    rect: Rect
    inset: dict[str, float]
    padding: AxisPadding
    x_axes: dict[str, AxisLayout]
    y_axes: dict[str, AxisLayout]
    series: list[SeriesGeometry] = field(default_factory=list)
    scrubber: ScrubberLayout | None = None

    def x_axis(self, axis_id: str | None = None) -> AxisLayout:
        return self.x_axes[axis_id or next(iter(self.x_axes))]

    def y_axis(self, axis_id: str | None = None) -> AxisLayout:
        return self.y_axes[axis_id or next(iter(self.y_axes))]


def _assign_axis(
    series: Series, axis_id: str | None, props: list[AxisConfigProps], axis_type: str
) -> str:
    ids = [p.id for p in props]
    if axis_id is None:
        if len(ids) == 1:
            return ids[0]
        axis_id = DEFAULT_AXIS_ID
    if axis_id not in ids:
        raise ChartConfigError(
            f"Series {series.id!r} references undeclared {axis_type}-axis {axis_id!r}"
        )
    return axis_id


def _categories(props: AxisConfigProps, scale: Scale) -> list[str] | None:
    if props.data and isinstance(props.data[0], str):
        return [str(v) for v in props.data]
    if isinstance(scale, BandScale):
        return [str(i) for i in scale.domain()]
    return None


def _axis_ticks(
    props: AxisConfigProps, scale: Scale, axis_type: str
) -> tuple[list[TickMark], list[str]]:
    categories = _categories(props, scale)
    possible = None
    if props.data and isinstance(props.data[0], str):
        possible = list(range(len(props.data)))

    requested, interval = props.tick_count, props.tick_interval
    if props.ticks is None and requested is None and interval is None:
        if axis_type == "x":
            interval = DEFAULT_X_TICK_INTERVAL
        else:
            requested = DEFAULT_Y_TICK_COUNT

    marks = generate_ticks(
        scale,
        ticks=props.ticks,
        requested_tick_count=requested,
        categories=categories,
        possible_tick_values=possible,
        tick_interval=interval,
    )
    if categories is not None:
        labels = [
            categories[int(m.tick)]
            if float(m.tick).is_integer() and 0 <= m.tick < len(categories)
            else format_tick(m.tick)
            for m in marks
        ]
    else:
        labels = format_ticks([m.tick for m in marks])
    return marks, labels


def _build_axes(
    axis_type: str,
    props: list[AxisConfigProps],
    series_axes: dict[str, str],
    series: Sequence[Series],
    rect: Rect,
    registered: list[RegisteredAxis],
    inset: dict[str, float],
) -> dict[str, AxisLayout]:
    axes: dict[str, AxisLayout] = {}
    by_id = {r.id: r for r in registered}
    for p in props:
        relevant = [s for s in series if series_axes[s.id] == p.id]
        config = build_axis_config(p, relevant, rect, axis_type)
        scale = make_axis_scale(config, axis_type)
        config = resolved_config(config, scale)
        slot = by_id[f"{axis_type}:{p.id}"]
        ticks, labels = _axis_ticks(p, scale, axis_type)
        LOGGER.debug(
            "%s-axis %r: %s, %d ticks", axis_type, p.id, scale, len(ticks)
        )
        axes[p.id] = AxisLayout(
            id=p.id,
            axis_type=axis_type,
            config=config,
            scale=scale,
            position=slot.position,
            bounds=axis_bounds(slot, registered, rect, inset),
            ticks=ticks,
            labels=labels,
        )
    return axes


def _drawn_values(series: Series, stacked: dict[str, StackedData]) -> list[Any]:
    """Values to draw as a line: stacked tops for stacked series, raw data otherwise."""
    if stack_key(series) is not None and series.id in stacked:
        return [p[1] if p is not None else None for p in stacked[series.id]]
    return list(series.data)


def _bar_paths(
    series: Series,
    stacked: StackedData,
    x_axis: AxisLayout,
    y_axis: AxisLayout,
    slot_width: float,
    group_index: int,
    group_count: int,
) -> list[str]:
    bar_width = slot_width / max(1, group_count)
    x_data = x_axis.config.data
    raw_values = line_values(series.data)
    bars = []
    for index, point in enumerate(stacked):
        if point is None:
            continue
        x_value = x_value_at(index, x_axis.scale, x_data)
        center = point_on_scale(x_value, x_axis.scale)
        left = center - slot_width / 2 + group_index * bar_width
        low = point_on_scale(point[0], y_axis.scale)
        high = point_on_scale(point[1], y_axis.scale)
        raw = raw_values[index] if index < len(raw_values) else None
        negative = raw is not None and raw < 0
        bars.append(
            build_bar_path(
                left,
                min(low, high),
                bar_width,
                abs(high - low),
                DEFAULT_BAR_RADIUS,
                round_top=not negative,
                round_bottom=negative,
            )
        )
    return bars


def _bar_groups(series: Sequence[Series]) -> dict[str, tuple[int, int]]:
    """Slot position of each bar series; series in one stack share a slot."""
    keys: list[str] = []
    membership: dict[str, str] = {}
    for s in series:
        if s.type != "bar":
            continue
        key = stack_key(s) or f"series:{s.id}"
        if key not in keys:
            keys.append(key)
        membership[s.id] = key
    return {sid: (keys.index(key), len(keys)) for sid, key in membership.items()}


def _slot_width(axis: AxisLayout, rect: Rect, length: int) -> float:
    if isinstance(axis.scale, BandScale):
        return axis.scale.bandwidth()
    return rect.width / max(1, length) * BAR_WIDTH_FRACTION


def _series_geometry(
    chart: ChartDefinition,
    series_x: dict[str, str],
    series_y: dict[str, str],
    x_axes: dict[str, AxisLayout],
    y_axes: dict[str, AxisLayout],
    rect: Rect,
) -> list[SeriesGeometry]:
    stacked = stack_series(chart.series)
    groups = _bar_groups(chart.series)
    longest = max((len(s.data) for s in chart.series), default=0)
    geometry = []
    for s in chart.series:
        x_axis, y_axis = x_axes[series_x[s.id]], y_axes[series_y[s.id]]
        x_data = x_axis.config.data
        values = _drawn_values(s, stacked)
        item = SeriesGeometry(
            id=s.id,
            label=s.label or s.id,
            color=s.color,
            type=s.type,
            x_axis_id=x_axis.id,
            y_axis_id=y_axis.id,
            points=project_points(values, x_axis.scale, y_axis.scale, x_data),
        )
        if s.type == "area":
            area_data = stacked[s.id] if stack_key(s) is not None else s.data
            item.path = build_area_path(
                area_data, x_axis.scale, y_axis.scale, s.curve, x_data, s.connect_nulls
            )
        elif s.type == "bar":
            group_index, group_count = groups[s.id]
            item.bars = _bar_paths(
                s,
                stacked.get(s.id, []),
                x_axis,
                y_axis,
                _slot_width(x_axis, rect, longest),
                group_index,
                group_count,
            )
        else:
            item.path = build_line_path(
                values, x_axis.scale, y_axis.scale, s.curve, x_data, s.connect_nulls
            )
        geometry.append(item)
    return geometry


def _scrubber_layout(
    index: int,
    geometry: list[SeriesGeometry],
    chart: ChartDefinition,
    x_axis: AxisLayout,
    rect: Rect,
) -> ScrubberLayout:
    lo, hi = index_bounds(x_axis.scale, x_axis.config)
    if not lo <= index <= hi:
        LOGGER.debug("Scrub index %d outside [%d, %d]; clamping", index, lo, hi)
        index = max(lo, min(index, hi))

    x_value = x_value_at(index, x_axis.scale, x_axis.config.data)
    layout = ScrubberLayout(index=index, x=point_on_scale(x_value, x_axis.scale))

    by_id = chart.series_by_id()
    dimensions = []
    for item in geometry:
        if item.x_axis_id != x_axis.id:
            continue
        point = item.points[index] if 0 <= index < len(item.points) else None
        if point is None:
            continue
        values = line_values(by_id[item.id].data)
        value = values[index] if index < len(values) else None
        text = item.label if value is None else f"{item.label} {format_tick(value)}"
        layout.beacons[item.id] = point
        layout.texts[item.id] = text
        dimensions.append(
            LabelDimension(
                series_id=item.id,
                width=len(text) * LABEL_CHAR_WIDTH,
                height=LABEL_HEIGHT,
                preferred_x=point.x,
                preferred_y=point.y,
            )
        )
    layout.labels = place_scrubber_labels(dimensions, layout.x, rect)
    return layout


def compute_chart_layout(
    chart: ChartDefinition, width: float, height: float
) -> ChartLayout:
    """Compute all geometry for ``chart`` on a ``width`` x ``height`` canvas.

    Raises ChartConfigError for ambiguous axis declarations or series that
    reference an axis that does not exist.
    """
    inset = resolve_inset(chart.inset, DEFAULT_CHART_INSET)
    x_props = resolve_axis_configs("x", chart.x_axes)
    y_props = resolve_axis_configs("y", chart.y_axes)

    series_x = {s.id: _assign_axis(s, s.x_axis_id, x_props, "x") for s in chart.series}
    series_y = {s.id: _assign_axis(s, s.y_axis_id, y_props, "y") for s in chart.series}

    registered = register_axes("x", x_props) + register_axes("y", y_props)
    padding = AxisPadding.from_axes(registered)
    rect = drawing_rect(width, height, inset, padding)

    x_axes = _build_axes("x", x_props, series_x, chart.series, rect, registered, inset)
    y_axes = _build_axes("y", y_props, series_y, chart.series, rect, registered, inset)
    geometry = _series_geometry(chart, series_x, series_y, x_axes, y_axes, rect)

    layout = ChartLayout(
        width=width,
        height=height,
        title=chart.title,
        style=chart.style,
        rect=rect,
        inset=inset,
        padding=padding,
        x_axes=x_axes,
        y_axes=y_axes,
        series=geometry,
    )
    if chart.scrub_index is not None and chart.series:
        layout.scrubber = _scrubber_layout(
            chart.scrub_index, geometry, chart, layout.x_axis(), rect
        )
    return layout
