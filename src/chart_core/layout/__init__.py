"""Coordinate and layout core.

Public API:
- make_linear_or_log / make_band: scale construction
- resolve_domain / resolve_range / resolve_axis_configs: axis resolution
- generate_ticks: tick values with pixel positions
- build_line_path / build_area_path / build_bar_path: SVG path strings
- project_point / project_points: data to pixel projection
- resolve_index_from_pixel / resolve_index_from_key: scrubbing
- resolve_positions / choose_label_side: label collision avoidance
- compute_chart_layout: full chart geometry
"""

from chart_core.layout.axis import (
    build_axis_config,
    make_axis_scale,
    resolve_axis_configs,
    resolve_domain,
    resolve_range,
)
from chart_core.layout.engine import ChartLayout, compute_chart_layout
from chart_core.layout.labels import choose_label_side, resolve_positions
from chart_core.layout.paths import build_area_path, build_bar_path, build_line_path
from chart_core.layout.points import project_point, project_points
from chart_core.layout.scale import (
    BandScale,
    LinearScale,
    LogScale,
    evaluate,
    invert,
    make_band,
    make_linear_or_log,
)
from chart_core.layout.scrubber import (
    Scrubber,
    resolve_index_from_key,
    resolve_index_from_pixel,
)
from chart_core.layout.ticks import TickMark, generate_ticks

__all__ = [
    "BandScale",
    "ChartLayout",
    "LinearScale",
    "LogScale",
    "Scrubber",
    "TickMark",
    "build_area_path",
    "build_axis_config",
    "build_bar_path",
    "build_line_path",
    "choose_label_side",
    "compute_chart_layout",
    "evaluate",
    "generate_ticks",
    "invert",
    "make_axis_scale",
    "make_band",
    "make_linear_or_log",
    "project_point",
    "project_points",
    "resolve_axis_configs",
    "resolve_domain",
    "resolve_index_from_key",
    "resolve_index_from_pixel",
    "resolve_positions",
    "resolve_range",
]
