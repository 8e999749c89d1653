"""Label placement for scrubber beacon labels.

Labels are stacked vertically next to the scrubber line without overlapping
and kept inside the drawing area. Labels that touch after the initial push
form collision groups, which are then moved as a unit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import networkx as nx

from chart_core.layout.constants import (
    COLLISION_TOLERANCE,
    DEFAULT_LABEL_MIN_GAP,
    DEFAULT_LABEL_X_OFFSET,
    MIN_COMPRESSED_GAP,
)
from chart_core.parser.model import LabelDimension, Rect

LOGGER = logging.getLogger(__name__)


@dataclass
class LabelPlacement:
    """Final placement of one series label."""

    series_id: str
    x: float
    y: float
    side: str
    text_anchor: str = "start"


@dataclass
class _WorkingLabel:
    series_id: str
    preferred_y: float
    final_y: float


def choose_label_side(
    beacon_x: float,
    max_label_width: float,
    bounds: Rect,
    x_offset: float = DEFAULT_LABEL_X_OFFSET,
) -> str:
    """Return ``"right"`` unless the labels would overflow the right edge."""
    if bounds.width <= 0 or bounds.height <= 0:
        return "right"
    available = bounds.x + bounds.width - beacon_x
    required = max_label_width + x_offset
    return "right" if required <= available else "left"


def _collision_groups(
    labels: list[_WorkingLabel], label_height: float, min_gap: float
) -> list[list[_WorkingLabel]]:
    graph = nx.Graph()
    graph.add_nodes_from(range(len(labels)))
    for i in range(1, len(labels)):
        gap = labels[i].final_y - labels[i - 1].final_y - label_height
        if gap < min_gap + COLLISION_TOLERANCE:
            graph.add_edge(i - 1, i)
    components = sorted(sorted(c) for c in nx.connected_components(graph))
    return [[labels[i] for i in component] for component in components]


def _fit_group(
    group: list[_WorkingLabel],
    bounds: Rect,
    label_height: float,
    min_gap: float,
    top_y: float,
    max_y: float,
) -> None:
    """Re-centre a collision group, or lift it out of a bottom overflow.

    ``top_y`` is the highest centre the first label may take without
    crowding whatever sits above the group.
    """
    first, last = group[0], group[-1]
    bottom = bounds.y + bounds.height
    overflow = last.final_y + label_height / 2 - bottom
    preferred_center = sum(label.preferred_y for label in group) / len(group)
    total_needed = len(group) * label_height + (len(group) - 1) * min_gap

    if overflow <= 0:
        center = (first.final_y + last.final_y) / 2
        max_up = max(0.0, first.final_y - top_y)
        max_down = max_y - last.final_y
        shift = max(-max_up, min(max_down, preferred_center - center))
        if abs(shift) > COLLISION_TOLERANCE:
            for label in group:
                label.final_y += shift
        return

    group_top = first.final_y - label_height / 2
    available = bottom - group_top
    max_up = max(0.0, first.final_y - top_y)
    if max_up >= overflow:
        for label in group:
            label.final_y -= overflow
        return

    slots = max(1, len(group) - 1)
    if total_needed <= available:
        current = first.final_y - max_up
        gap = (available - len(group) * label_height) / slots
    else:
        gap = max(MIN_COMPRESSED_GAP, (available - len(group) * label_height) / slots)
        LOGGER.debug("Compressing %d labels to a %.2fpx gap", len(group), gap)
        current = max(top_y, max_y - (len(group) - 1) * (label_height + gap))
    for label in group:
        label.final_y = current
        current += label_height + gap


def _settle(labels: list[_WorkingLabel], required: float, max_y: float) -> None:
    """Restore the minimum spacing after groups moved, keeping the bottom edge."""
    for prev, current in zip(labels, labels[1:]):
        if current.final_y < prev.final_y + required:
            current.final_y = prev.final_y + required
    labels[-1].final_y = min(labels[-1].final_y, max_y)
    for i in range(len(labels) - 2, -1, -1):
        labels[i].final_y = min(labels[i].final_y, labels[i + 1].final_y - required)


def resolve_positions(
    dimensions: Sequence[LabelDimension],
    bounds: Rect,
    label_height: float,
    min_gap: float = DEFAULT_LABEL_MIN_GAP,
) -> dict[str, float]:
    """Final y centre for each label, keyed by series id.

    Labels keep their vertical order, sit at least ``label_height + min_gap``
    apart and stay inside ``bounds`` whenever they fit.
    """
    if not dimensions:
        return {}

    labels = [
        _WorkingLabel(d.series_id, d.preferred_y, d.preferred_y)
        for d in sorted(dimensions, key=lambda d: d.preferred_y)
    ]
    min_y = bounds.y + label_height / 2
    max_y = bounds.y + bounds.height - label_height / 2
    required = label_height + min_gap

    for label in labels:
        label.final_y = max(min_y, min(max_y, label.preferred_y))

    for prev, current in zip(labels, labels[1:]):
        if current.final_y < prev.final_y + required:
            current.final_y = prev.final_y + required

    top_y = min_y
    for group in _collision_groups(labels, label_height, min_gap):
        if len(group) > 1:
            _fit_group(group, bounds, label_height, min_gap, top_y, max_y)
        top_y = group[-1].final_y + required

    if (len(labels) - 1) * required <= max_y - min_y:
        _settle(labels, required, max_y)

    return {label.series_id: label.final_y for label in labels}


def place_scrubber_labels(
    dimensions: Sequence[LabelDimension],
    beacon_x: float,
    bounds: Rect,
    min_gap: float = DEFAULT_LABEL_MIN_GAP,
    x_offset: float = DEFAULT_LABEL_X_OFFSET,
) -> list[LabelPlacement]:
    """Place every label on one side of the beacon, stacked without overlap."""
    if not dimensions:
        return []
    max_width = max(d.width for d in dimensions)
    label_height = max(d.height for d in dimensions)
    side = choose_label_side(beacon_x, max_width, bounds, x_offset)
    positions = resolve_positions(dimensions, bounds, label_height, min_gap)

    if side == "right":
        x, anchor = beacon_x + x_offset, "start"
    else:
        x, anchor = beacon_x - x_offset, "end"
    return [
        LabelPlacement(d.series_id, x, positions[d.series_id], side, anchor)
        for d in dimensions
    ]
