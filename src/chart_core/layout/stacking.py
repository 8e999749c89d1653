"""Series stacking and series-derived domain helpers.

Series that share a stack id and a y-axis are stacked with a diverging
offset: positive values grow upward from zero, negative values downward.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from chart_core.layout.constants import DEFAULT_STACK_AXIS_KEY
from chart_core.parser.model import (
    DatumKind,
    PartialBounds,
    Series,
    classify_datum,
    is_finite_number,
)

LOGGER = logging.getLogger(__name__)

StackedData = list[tuple[float, float] | None]


def stack_key(series: Series) -> str | None:
    """Composite key keeping stacks on different y-axes apart."""
    if series.stack_id is None:
        return None
    return f"{series.stack_id}:{series.y_axis_id or DEFAULT_STACK_AXIS_KEY}"


def _has_tuple_data(series: Series) -> bool:
    return any(isinstance(value, (list, tuple)) for value in series.data)


def _normalize(data: Sequence[Any]) -> StackedData:
    normalized: StackedData = []
    for raw in data:
        datum = classify_datum(raw)
        if datum.kind is DatumKind.VALUE:
            normalized.append((0.0, datum.value))
        elif datum.kind is DatumKind.RANGE:
            normalized.append((datum.low, datum.high))
        else:
            if raw is not None:
                LOGGER.debug("Treating malformed datum %r as a gap", raw)
            normalized.append(None)
    return normalized


def _stack_group(group: list[Series]) -> dict[str, StackedData]:
    length = max(len(s.data) for s in group)
    layers: dict[str, StackedData] = {s.id: [] for s in group}
    for index in range(length):
        positive = negative = 0.0
        for s in group:
            raw = s.data[index] if index < len(s.data) else None
            value = float(raw) if is_finite_number(raw) else 0.0
            if value > 0:
                layers[s.id].append((positive, positive + value))
                positive += value
            elif value < 0:
                layers[s.id].append((negative + value, negative))
                negative += value
            else:
                layers[s.id].append((0.0, value))
    return layers


def stack_series(series: Sequence[Series]) -> dict[str, StackedData]:
    """Resolve every series to ``(low, high)`` tuples keyed by series id.

    Unstacked numbers become ``(0, value)``; tuple series are kept as given
    and never stacked. Inside a stack, anything that is not a number counts
    as zero.
    """
    result: dict[str, StackedData] = {}
    groups: dict[str, list[Series]] = {}
    for s in series:
        key = stack_key(s)
        if key is None or _has_tuple_data(s):
            result[s.id] = _normalize(s.data)
        else:
            groups.setdefault(key, []).append(s)

    for group in groups.values():
        if max(len(s.data) for s in group) == 0:
            continue
        result.update(_stack_group(group))
    return result


def line_values(data: Sequence[Any]) -> list[float | None]:
    """Collapse tuple entries to their last component for line drawing."""
    values: list[float | None] = []
    for raw in data:
        datum = classify_datum(raw)
        if datum.kind is DatumKind.VALUE:
            values.append(datum.value)
        elif datum.kind is DatumKind.RANGE:
            values.append(datum.high)
        else:
            values.append(None)
    return values


def series_x_domain(series: Sequence[Series]) -> PartialBounds:
    """Index span of the longest series, or empty bounds when there is no data."""
    length = max((len(s.data) for s in series), default=0)
    if length == 0:
        return PartialBounds()
    return PartialBounds(0.0, float(length - 1))


def series_y_domain(series: Sequence[Series]) -> PartialBounds:
    """Value span across all series.

    When any series is stacked the span is taken over the stacked tuples
    and always includes zero.
    """
    if not series:
        return PartialBounds()

    if any(stack_key(s) is not None for s in series):
        low = high = 0.0
        for stacked in stack_series(series).values():
            for point in stacked:
                if point is None:
                    continue
                bottom, top = point
                high = max(high, top)
                low = min(low, bottom)
        return PartialBounds(low, high)

    values: list[float] = []
    for s in series:
        for raw in s.data:
            datum = classify_datum(raw)
            if datum.kind is DatumKind.VALUE:
                values.append(datum.value)
            elif datum.kind is DatumKind.RANGE:
                values.extend((datum.low, datum.high))
    if not values:
        return PartialBounds()
    return PartialBounds(min(values), max(values))
