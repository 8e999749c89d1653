"""Mapping pointer and keyboard input to a highlighted data index."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from chart_core.layout.constants import KEYBOARD_JUMP_FRACTION
from chart_core.layout.scale import BandScale, Scale, js_round
from chart_core.parser.model import AxisConfig, is_finite_number

LOGGER = logging.getLogger(__name__)

NAVIGATION_KEYS = ("ArrowLeft", "ArrowRight", "Home", "End", "Escape")


def _numeric_data(axis: AxisConfig | None) -> Sequence[float] | None:
    if axis is None or not axis.data or not is_finite_number(axis.data[0]):
        return None
    return axis.data


def resolve_index_from_pixel(
    pixel_x: float, x_scale: Scale, x_axis: AxisConfig | None = None
) -> int:
    """Index of the data point nearest to ``pixel_x``.

    Band axes compare band centres, numeric axes with numeric data compare
    projected data values, and plain numeric axes invert the pixel and clamp
    to the domain. Ties go to the lower index.
    """
    if isinstance(x_scale, BandScale):
        half = x_scale.bandwidth() / 2
        closest, best = 0, math.inf
        for index in x_scale.domain():
            start = x_scale(index)
            if start is None:
                continue
            distance = abs(pixel_x - (start + half))
            if distance < best:
                closest, best = index, distance
        return closest

    data = _numeric_data(x_axis)
    if data is not None:
        closest, best = 0, math.inf
        for index, value in enumerate(data):
            if not is_finite_number(value):
                continue
            distance = abs(pixel_x - x_scale(value))
            if distance < best:
                closest, best = index, distance
        return closest

    index = int(js_round(x_scale.invert(pixel_x)))
    if x_axis is not None:
        lo, hi = x_axis.domain.min, x_axis.domain.max
    else:
        lo, hi = x_scale.domain()
    return max(math.ceil(lo), min(index, math.floor(hi)))


def index_bounds(x_scale: Scale, x_axis: AxisConfig | None = None) -> tuple[int, int]:
    """First and last index reachable by keyboard navigation."""
    if isinstance(x_scale, BandScale):
        return 0, max(0, len(x_scale.domain()) - 1)
    if x_axis is not None and x_axis.data is not None:
        return 0, max(0, len(x_axis.data) - 1)
    if x_axis is not None:
        lo, hi = x_axis.domain.min, x_axis.domain.max
    else:
        lo, hi = x_scale.domain()
    return math.ceil(lo), math.floor(hi)


def keyboard_step(min_index: int, max_index: int, modifier: bool) -> int:
    if not modifier:
        return 1
    return int(js_round(max(1, KEYBOARD_JUMP_FRACTION * (max_index - min_index))))


def resolve_index_from_key(
    key: str,
    current: int | None,
    x_scale: Scale,
    x_axis: AxisConfig | None = None,
    modifier: bool = False,
) -> int | None:
    """New index after a key press.

    Arrows move by one (further with ``modifier``), Home/End jump to the
    ends and Escape clears the selection. Other keys leave ``current`` as is.
    """
    if key not in NAVIGATION_KEYS:
        return current
    min_index, max_index = index_bounds(x_scale, x_axis)
    position = current if current is not None else min_index
    step = keyboard_step(min_index, max_index, modifier)

    if key == "ArrowLeft":
        return max(min_index, position - step)
    if key == "ArrowRight":
        return min(max_index, position + step)
    if key == "Home":
        return min_index
    if key == "End":
        return max_index
    return None


class Scrubber:
    """Highlighted-index state driven by pointer and keyboard events.

    Every handler returns True when the index changed.
    """

    def __init__(
        self,
        x_scale: Scale,
        x_axis: AxisConfig | None = None,
        index: int | None = None,
    ) -> None:
        self.x_scale = x_scale
        self.x_axis = x_axis
        self.index = index

    def _update(self, index: int | None) -> bool:
        if index == self.index:
            return False
        LOGGER.debug("Scrubber index %s -> %s", self.index, index)
        self.index = index
        return True

    def pointer_move(self, pixel_x: float) -> bool:
        return self._update(resolve_index_from_pixel(pixel_x, self.x_scale, self.x_axis))

    def key_down(self, key: str, modifier: bool = False) -> bool:
        new_index = resolve_index_from_key(
            key, self.index, self.x_scale, self.x_axis, modifier
        )
        return self._update(new_index)

    def pointer_leave(self) -> bool:
        return self._update(None)

    blur = pointer_leave

    def value(self, data: Sequence[Any]) -> Any:
        """Entry of ``data`` at the current index, or None."""
        if self.index is None or not 0 <= self.index < len(data):
            return None
        return data[self.index]
