"""Axis resolution: ids, domains, ranges, drawing area and axis scales.

Domains come from explicit axis data when given, otherwise from the series.
User overrides are applied last, either as partial bounds or as a transform
function over the computed bounds.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from chart_core.errors import ChartConfigError
from chart_core.layout.constants import (
    DEFAULT_AXIS_CATEGORY_PADDING,
    DEFAULT_AXIS_ID,
    DEFAULT_SCALE_TYPE,
    DEFAULT_X_AXIS_SIZE,
    DEFAULT_Y_AXIS_SIZE,
)
from chart_core.layout.scale import Scale, make_band, make_linear_or_log
from chart_core.layout.stacking import series_x_domain, series_y_domain
from chart_core.parser.model import (
    AxisBounds,
    AxisConfig,
    AxisConfigProps,
    BoundsOverride,
    PartialBounds,
    Rect,
    Series,
    is_finite_number,
)

LOGGER = logging.getLogger(__name__)

SIDES = ("top", "right", "bottom", "left")

_SCALE_TYPES = ("linear", "log", "band")


def default_domain_limit(axis_type: str) -> str:
    """x-axes show exact bounds, y-axes are rounded outward."""
    return "strict" if axis_type == "x" else "nice"


def resolve_axis_configs(
    axis_type: str,
    axes: AxisConfigProps | Sequence[AxisConfigProps] | None,
    default_id: str = DEFAULT_AXIS_ID,
    default_scale_type: str = DEFAULT_SCALE_TYPE,
) -> list[AxisConfigProps]:
    """Normalize one or many axis configs and fill in defaults.

    Raises ChartConfigError when several axes of one type are declared
    without explicit, unique ids.
    """
    limit = default_domain_limit(axis_type)
    if axes is None:
        return [
            AxisConfigProps(
                id=default_id, scale_type=default_scale_type, domain_limit=limit
            )
        ]
    if isinstance(axes, AxisConfigProps):
        axes = [axes]
    axes = list(axes)
    if not axes:
        return resolve_axis_configs(axis_type, None, default_id, default_scale_type)

    if len(axes) > 1:
        missing = [i for i, axis in enumerate(axes) if axis.id is None]
        if missing:
            raise ChartConfigError(
                f"When defining multiple {axis_type}-axes, each must have a "
                f"unique id (missing at position {missing[0]})"
            )
        seen: set[str] = set()
        for axis in axes:
            if axis.id in seen:
                raise ChartConfigError(f"Duplicate {axis_type}-axis id: {axis.id!r}")
            seen.add(axis.id)

    resolved = []
    for axis in axes:
        scale_type = axis.scale_type or default_scale_type
        if scale_type not in _SCALE_TYPES:
            raise ChartConfigError(
                f"Unknown scale type {scale_type!r} on {axis_type}-axis "
                f"{axis.id or default_id!r}"
            )
        resolved.append(
            replace(
                axis,
                id=axis.id if axis.id is not None else default_id,
                scale_type=scale_type,
                domain_limit=axis.domain_limit or limit,
            )
        )
    return resolved


def _apply_override(
    computed: PartialBounds, override: BoundsOverride
) -> PartialBounds:
    if override is None:
        return computed
    if callable(override):
        result = override(
            AxisBounds(
                computed.min if computed.min is not None else 0.0,
                computed.max if computed.max is not None else 0.0,
            )
        )
        return _as_partial(result)
    return PartialBounds(
        override.min if override.min is not None else computed.min,
        override.max if override.max is not None else computed.max,
    )


def _as_partial(bounds: Any) -> PartialBounds:
    if isinstance(bounds, (AxisBounds, PartialBounds)):
        return PartialBounds(bounds.min, bounds.max)
    if isinstance(bounds, Mapping):
        return PartialBounds(bounds.get("min"), bounds.get("max"))
    if bounds is None:
        return PartialBounds()
    raise ChartConfigError(f"Bounds transform returned {bounds!r}, expected bounds")


def _data_domain(data: Sequence[Any] | None) -> PartialBounds | None:
    if not data:
        return None
    first = data[0]
    if is_finite_number(first):
        numbers = [float(v) for v in data if is_finite_number(v)]
        return PartialBounds(min(numbers), max(numbers))
    if isinstance(first, str):
        return PartialBounds(0.0, float(len(data) - 1))
    return None


def resolve_domain(
    axis: AxisConfigProps, series: Sequence[Series], axis_type: str
) -> AxisBounds:
    """Compute the data-space bounds of an axis.

    Explicit numeric data spans ``[min, max]``, string categories span their
    indices, otherwise the series decide. Overrides run last; anything still
    undefined falls back to zero.
    """
    computed = _data_domain(axis.data)
    if computed is None:
        if axis_type == "x":
            computed = series_x_domain(series)
        else:
            computed = series_y_domain(series)
    final = _apply_override(computed, axis.domain)
    return AxisBounds(
        final.min if final.min is not None else 0.0,
        final.max if final.max is not None else 0.0,
    )


def resolve_range(axis: AxisConfigProps, rect: Rect, axis_type: str) -> AxisBounds:
    """Compute the pixel-space bounds of an axis inside ``rect``."""
    if axis_type == "x":
        base = PartialBounds(rect.x, rect.x + rect.width)
    else:
        base = PartialBounds(rect.y, rect.y + rect.height)
    final = _apply_override(base, axis.range)
    return AxisBounds(
        final.min if final.min is not None else 0.0,
        final.max if final.max is not None else 0.0,
    )


def build_axis_config(
    props: AxisConfigProps,
    series: Sequence[Series],
    rect: Rect,
    axis_type: str,
) -> AxisConfig:
    return AxisConfig(
        scale_type=props.scale_type or DEFAULT_SCALE_TYPE,
        domain=resolve_domain(props, series, axis_type),
        range=resolve_range(props, rect, axis_type),
        domain_limit=props.domain_limit or default_domain_limit(axis_type),
        data=tuple(props.data) if props.data is not None else None,
        category_padding=props.category_padding,
    )


def make_axis_scale(config: AxisConfig, axis_type: str) -> Scale:
    """Build the scale for a resolved axis.

    y ranges are flipped so larger values sit higher on screen. Numeric
    axes with a ``nice`` domain limit are rounded outward.
    """
    range_ = config.range
    if axis_type == "y":
        range_ = AxisBounds(range_.max, range_.min)

    if config.scale_type == "band":
        padding = config.category_padding
        if padding is None:
            padding = DEFAULT_AXIS_CATEGORY_PADDING
        return make_band(config.domain, range_, padding)

    scale = make_linear_or_log(config.domain, range_, config.scale_type)
    if config.domain_limit == "nice":
        scale = scale.nice()
    return scale


def resolved_config(config: AxisConfig, scale: Scale) -> AxisConfig:
    """Axis config whose domain reflects the scale (after any rounding)."""
    domain = scale.domain()
    if config.scale_type == "band" or len(domain) != 2:
        return config
    return replace(config, domain=AxisBounds(domain[0], domain[1]))


def resolve_inset(
    inset: float | Mapping[str, float] | None,
    defaults: Mapping[str, float] | None = None,
) -> dict[str, float]:
    """Expand a number or partial mapping to all four sides."""
    if is_finite_number(inset):
        return {side: float(inset) for side in SIDES}
    base = defaults or {}
    given = inset if isinstance(inset, Mapping) else {}
    resolved = {}
    for side in SIDES:
        value = given.get(side)
        if value is None:
            value = base.get(side, 0.0)
        resolved[side] = float(value)
    return resolved


@dataclass(frozen=True)
class RegisteredAxis:
    """An axis that reserves space on one side of the drawing area."""

    id: str
    position: str
    size: float


def axis_position(axis_type: str, index: int) -> str:
    """First x-axis sits at the bottom, first y-axis on the left."""
    if axis_type == "x":
        return "bottom" if index % 2 == 0 else "top"
    return "left" if index % 2 == 0 else "right"


def register_axes(
    axis_type: str, axes: Iterable[AxisConfigProps]
) -> list[RegisteredAxis]:
    default_size = DEFAULT_X_AXIS_SIZE if axis_type == "x" else DEFAULT_Y_AXIS_SIZE
    registered = []
    for index, axis in enumerate(axes):
        size = axis.size if axis.size is not None else default_size
        registered.append(
            RegisteredAxis(
                id=f"{axis_type}:{axis.id}",
                position=axis_position(axis_type, index),
                size=float(size),
            )
        )
    return registered


@dataclass(frozen=True)
class AxisPadding:
    """Space reserved around the drawing area by registered axes."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def from_axes(cls, registered: Iterable[RegisteredAxis]) -> AxisPadding:
        totals = dict.fromkeys(SIDES, 0.0)
        for axis in registered:
            totals[axis.position] += axis.size
        return cls(**totals)


def drawing_rect(
    width: float,
    height: float,
    inset: Mapping[str, float],
    padding: AxisPadding | None = None,
) -> Rect:
    """Area left for plotting once inset and axis padding are removed.

    A canvas with no area yields an empty rect at the origin.
    """
    if width <= 0 or height <= 0:
        return Rect(0.0, 0.0, 0.0, 0.0)
    padding = padding or AxisPadding()
    top = inset["top"] + padding.top
    right = inset["right"] + padding.right
    bottom = inset["bottom"] + padding.bottom
    left = inset["left"] + padding.left
    available_width = width - left - right
    available_height = height - top - bottom
    if available_width <= 0 or available_height <= 0:
        LOGGER.debug(
            "Drawing area collapsed: %sx%s canvas, inset %s", width, height, inset
        )
    return Rect(
        x=left,
        y=top,
        width=max(available_width, 0.0),
        height=max(available_height, 0.0),
    )


def axis_bounds(
    axis: RegisteredAxis,
    registered: Sequence[RegisteredAxis],
    rect: Rect,
    inset: Mapping[str, float],
) -> Rect:
    """Rectangle an axis occupies beside the drawing area.

    Axes sharing a side are stacked outward in id order.
    """
    same_side = sorted(
        (a for a in registered if a.position == axis.position), key=lambda a: a.id
    )
    offset = 0.0
    for other in same_side:
        if other.id == axis.id:
            break
        offset += other.size

    if axis.position == "top":
        return Rect(rect.x, inset["top"] + offset, rect.width, axis.size)
    if axis.position == "bottom":
        return Rect(rect.x, rect.y + rect.height + offset, rect.width, axis.size)
    if axis.position == "left":
        return Rect(inset["left"] + offset, rect.y, axis.size, rect.height)
    return Rect(rect.x + rect.width + offset, rect.y, axis.size, rect.height)
