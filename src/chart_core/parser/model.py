"""Data model for chart definitions and the geometry the layout core produces."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

ScaleType = Literal["linear", "log", "band"]
DomainLimit = Literal["nice", "strict"]
AxisType = Literal["x", "y"]
SeriesType = Literal["line", "area", "bar"]


@dataclass(frozen=True)
class AxisBounds:
    """Inclusive interval in data space (domain) or pixel space (range).

    ``min <= max`` is not enforced: y ranges are inverted for SVG.
    """

    min: float
    max: float


@dataclass(frozen=True)
class PartialBounds:
    """User override for a domain or range; a missing field keeps the computed value."""

    min: float | None = None
    max: float | None = None


BoundsOverride = PartialBounds | Callable[[AxisBounds], Any] | None


@dataclass(frozen=True)
class Rect:
    """Pixel rectangle."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Point:
    """A projected pixel coordinate."""

    x: float
    y: float


@dataclass(frozen=True)
class AxisConfig:
    """Fully resolved axis, ready for scale construction.

    Rebuilt from :class:`AxisConfigProps` and the series on every layout pass.
    """

    scale_type: ScaleType
    domain: AxisBounds
    range: AxisBounds
    domain_limit: DomainLimit
    data: tuple[Any, ...] | None = None
    category_padding: float | None = None


@dataclass
class AxisConfigProps:
    """User-facing axis configuration.

    ``domain`` and ``range`` are either partial bounds or a transform
    ``(AxisBounds) -> AxisBounds`` applied after the bounds are computed.
    The tick fields are consumed by the layout engine, not by the scale.
    """

    id: str | None = None
    scale_type: ScaleType | None = None
    domain_limit: DomainLimit | None = None
    data: Sequence[Any] | None = None
    category_padding: float | None = None
    domain: BoundsOverride = None
    range: BoundsOverride = None
    ticks: Any = None
    tick_count: int | None = None
    tick_interval: float | None = None
    size: float | None = None


@dataclass
class Series:
    """A data series plotted against one x and one y axis."""

    id: str
    data: list[Any] = field(default_factory=list)
    label: str | None = None
    color: str | None = None
    x_axis_id: str | None = None
    y_axis_id: str | None = None
    stack_id: str | None = None
    type: SeriesType = "line"
    curve: str = "linear"
    connect_nulls: bool = False


@dataclass(frozen=True)
class LabelDimension:
    """Measured label and where it would like to sit."""

    series_id: str
    width: float
    height: float
    preferred_x: float
    preferred_y: float


class DatumKind(Enum):
    """Shape of a single series entry."""

    GAP = "gap"
    VALUE = "value"
    RANGE = "range"
    POINT = "point"


@dataclass(frozen=True)
class Datum:
    """A series entry classified once at the data boundary.

    ``VALUE`` carries ``value``, ``RANGE`` carries ``low``/``high`` and
    ``POINT`` carries ``x``/``y``. ``GAP`` carries nothing.
    """

    kind: DatumKind
    value: float = 0.0
    low: float = 0.0
    high: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @property
    def is_gap(self) -> bool:
        return self.kind is DatumKind.GAP


GAP = Datum(DatumKind.GAP)


def is_finite_number(value: Any) -> bool:
    """True for real, finite ints and floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def classify_datum(raw: Any) -> Datum:
    """Classify a raw series entry.

    Numbers become ``VALUE``, two-element sequences ``RANGE`` and anything
    with numeric ``x``/``y`` (mapping keys or attributes) ``POINT``.
    Everything else, including NaN and malformed tuples, is a ``GAP``.
    """
    if raw is None:
        return GAP
    if is_finite_number(raw):
        return Datum(DatumKind.VALUE, value=float(raw))
    if isinstance(raw, Mapping):
        x, y = raw.get("x"), raw.get("y")
    elif isinstance(raw, (list, tuple)):
        if len(raw) == 2 and is_finite_number(raw[0]) and is_finite_number(raw[1]):
            return Datum(DatumKind.RANGE, low=float(raw[0]), high=float(raw[1]))
        return GAP
    else:
        x, y = getattr(raw, "x", None), getattr(raw, "y", None)
    if is_finite_number(x) and is_finite_number(y):
        return Datum(DatumKind.POINT, x=float(x), y=float(y))
    return GAP


@dataclass
class ChartDefinition:
    """Complete chart definition as read from a document or built in code."""

    title: str = ""
    style: str = "dark"
    series: list[Series] = field(default_factory=list)
    x_axes: list[AxisConfigProps] | AxisConfigProps | None = None
    y_axes: list[AxisConfigProps] | AxisConfigProps | None = None
    inset: float | Mapping[str, float] | None = None
    scrub_index: int | None = None

    def series_by_id(self) -> dict[str, Series]:
        return {s.id: s for s in self.series}
