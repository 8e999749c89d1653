"""Chart data model and the JSON chart-definition reader."""

from chart_core.parser.chart_json import parse_chart, parse_chart_json
from chart_core.parser.model import (
    AxisBounds,
    AxisConfig,
    AxisConfigProps,
    ChartDefinition,
    LabelDimension,
    PartialBounds,
    Point,
    Rect,
    Series,
)

__all__ = [
    "AxisBounds",
    "AxisConfig",
    "AxisConfigProps",
    "ChartDefinition",
    "LabelDimension",
    "PartialBounds",
    "Point",
    "Rect",
    "Series",
    "parse_chart",
    "parse_chart_json",
]
