"""Projection of data coordinates into pixel space."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from chart_core.layout.constants import LOG_EPSILON
from chart_core.layout.scale import BandScale, LogScale, Scale
from chart_core.parser.model import DatumKind, Point, classify_datum, is_finite_number

LOGGER = logging.getLogger(__name__)


def point_on_scale(value: float, scale: Scale) -> float:
    """Pixel for one coordinate.

    Band values land in the middle of their band (an unknown category is
    treated as starting at 0). Log scales see non-positive values as
    ``LOG_EPSILON``.
    """
    if isinstance(scale, BandScale):
        start = scale(value)
        return (start if start is not None else 0.0) + scale.bandwidth() / 2
    if isinstance(scale, LogScale) and value <= 0:
        value = LOG_EPSILON
    return scale(value)


def project_point(x: float, y: float, x_scale: Scale, y_scale: Scale) -> Point:
    return Point(point_on_scale(x, x_scale), point_on_scale(y, y_scale))


def x_value_at(index: int, x_scale: Scale, x_data: Sequence[Any] | None) -> float:
    """Data-space x for the datum at ``index``.

    Numeric ``x_data`` entries replace the index on continuous scales. Band
    scales, missing entries and non-numeric entries fall back to the index.
    """
    if isinstance(x_scale, BandScale) or not x_data or index >= len(x_data):
        return float(index)
    value = x_data[index]
    return float(value) if is_finite_number(value) else float(index)


def project_points(
    data: Sequence[Any],
    x_scale: Scale,
    y_scale: Scale,
    x_data: Sequence[Any] | None = None,
    y_data: Sequence[Any] | None = None,
) -> list[Point | None]:
    """Project a series, keeping one output per input.

    Numbers are plotted at their index (or the matching numeric ``x_data``
    value); ``{x, y}`` entries carry their own x. Range tuples are plotted at
    their upper value. Gaps and malformed entries yield ``None``.
    ``y_data`` is accepted for call compatibility and not used: y always
    comes from ``data``.
    """
    points: list[Point | None] = []
    for index, raw in enumerate(data):
        datum = classify_datum(raw)
        if datum.kind is DatumKind.POINT:
            points.append(project_point(datum.x, datum.y, x_scale, y_scale))
            continue
        if datum.kind is DatumKind.VALUE:
            y = datum.value
        elif datum.kind is DatumKind.RANGE:
            y = datum.high
        else:
            if raw is not None:
                LOGGER.debug("Skipping malformed datum %r at index %d", raw, index)
            points.append(None)
            continue
        points.append(
            project_point(x_value_at(index, x_scale, x_data), y, x_scale, y_scale)
        )
    return points
