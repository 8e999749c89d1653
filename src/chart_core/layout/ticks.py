"""Tick generation and tick label formatting.

Band axes show one tick per category, centred in its band. Numeric axes
take ticks, in order of precedence, from an explicit list, a predicate, a
requested count or a pixel interval.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from chart_core.layout.constants import (
    DEFAULT_MIN_TICK_COUNT,
    DEFAULT_NICE_COUNT,
    TICK_ROUND_DIGITS,
    TICK_STEP_TOLERANCE,
)
from chart_core.layout.scale import BandScale, LinearScale, LogScale, Scale
from chart_core.parser.model import is_finite_number

LOGGER = logging.getLogger(__name__)

TickSelector = Sequence[float] | Callable[[float], bool] | bool | None


@dataclass(frozen=True)
class TickMark:
    """A tick value and its pixel position along the axis."""

    tick: float
    position: float


@dataclass(frozen=True)
class TickOptions:
    """Limits for interval-based tick synthesis."""

    min_step: float | None = None
    max_step: float | None = None
    min_tick_count: int = DEFAULT_MIN_TICK_COUNT


def nice_step(
    rough_step: float,
    min_step: float | None = None,
    max_step: float | None = None,
) -> float:
    """Round ``rough_step`` up to 1, 2 or 5 times a power of ten, then clamp."""
    if rough_step <= 0:
        return min_step if min_step is not None else 1.0

    magnitude = 10 ** math.floor(math.log10(rough_step))
    residual = rough_step / magnitude
    if residual <= 1:
        rounded = 1
    elif residual <= 2:
        rounded = 2
    elif residual <= 5:
        rounded = 5
    else:
        rounded = 10
    step = rounded * magnitude

    if min_step is not None and step < min_step:
        step = min_step
    if max_step is not None and step > max_step:
        step = max_step
    return step


def _evenly_distributed(
    scale: LinearScale | LogScale,
    tick_interval: float,
    possible_tick_values: Sequence[float] | None,
    options: TickOptions,
) -> list[float]:
    range_min, range_max = scale.range()
    span = abs(range_max - range_min)
    tick_count = options.min_tick_count
    if tick_interval > 0:
        tick_count = max(math.floor(span / tick_interval), options.min_tick_count)
    if tick_count < 1:
        return []

    if possible_tick_values:
        values = list(possible_tick_values)
        count = min(tick_count, len(values))
        if count == 1:
            return [values[-1]]
        step = (len(values) - 1) / (count - 1)
        picked = []
        for i in range(count):
            index = len(values) - 1 if i == count - 1 else math.floor(step * i + 0.5)
            picked.append(values[index])
        return picked

    domain_min, domain_max = scale.domain()
    if tick_count == 1:
        return [domain_min]
    if tick_count == 2:
        return [domain_min, domain_max]

    step = nice_step(
        (domain_max - domain_min) / (tick_count - 1),
        options.min_step,
        options.max_step,
    )
    values = [domain_min]
    current = domain_min + step
    while current < domain_max:
        values.append(round(current, TICK_ROUND_DIGITS))
        current += step

    last = values[-1]
    distance = domain_max - last
    tolerance = step * TICK_STEP_TOLERANCE
    on_step = abs(distance - step) < tolerance
    if (on_step or distance > step * 0.5) and domain_max != last:
        values.append(domain_max)
    return values


def _band_ticks(
    scale: BandScale,
    ticks: TickSelector,
    categories: Sequence[Any] | None,
) -> list[TickMark]:
    count = len(categories) if categories is not None else len(scale.domain())
    half = scale.bandwidth() / 2

    if ticks is False:
        return []
    if callable(ticks):
        indices = [i for i in range(count) if ticks(i)]
    elif isinstance(ticks, Sequence):
        indices = [i for i in ticks if is_finite_number(i) and 0 <= i < count]
    else:
        indices = list(range(count))

    marks = []
    for index in indices:
        start = scale(index)
        if start is None:
            continue
        marks.append(TickMark(index, start + half))
    return marks


def generate_ticks(
    scale: Scale,
    ticks: TickSelector = None,
    requested_tick_count: int | None = None,
    categories: Sequence[Any] | None = None,
    possible_tick_values: Sequence[float] | None = None,
    tick_interval: float | None = None,
    options: TickOptions | None = None,
) -> list[TickMark]:
    """Tick values with pixel positions for an axis scale.

    Band scales ignore ``requested_tick_count`` and ``tick_interval``; every
    category is shown unless ``ticks`` says otherwise. ``categories`` defaults
    to the band domain.
    """
    if isinstance(scale, BandScale):
        return _band_ticks(scale, ticks, categories)

    if not isinstance(scale, (LinearScale, LogScale)):
        LOGGER.warning("Scale %r does not support automatic tick generation", scale)
        return []

    options = options or TickOptions()
    values: list[float] = []
    if ticks is False:
        return []
    if callable(ticks):
        if possible_tick_values is not None:
            candidates = list(possible_tick_values)
        else:
            candidates = scale.ticks(requested_tick_count or DEFAULT_NICE_COUNT)
        values = [v for v in candidates if ticks(v)]
    elif isinstance(ticks, Sequence):
        values = list(ticks)
    elif requested_tick_count is not None:
        values = scale.ticks(requested_tick_count)
    elif tick_interval is not None:
        values = _evenly_distributed(scale, tick_interval, possible_tick_values, options)

    return [TickMark(v, scale(v)) for v in values if is_finite_number(v)]


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not math.isfinite(step):
        return 6
    exponent = Decimal(str(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exponent)))


def format_tick(value: float, step: float | None = None) -> str:
    """Format a tick value with as many decimals as the tick step needs."""
    if not math.isfinite(value):
        return str(value)
    has_step = step is not None and math.isfinite(step) and step > 0
    if has_step and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    tiny_step = has_step and step < 1e-4
    if abs_v != 0 and (abs_v >= 1e6 or abs_v < 1e-6 or tiny_step):
        return f"{value:.4e}"

    d = Decimal(str(value))
    try:
        q = d.quantize(Decimal("1").scaleb(-decimals))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks(values: Sequence[float]) -> list[str]:
    """Format a run of ticks using the spacing of the first two as the step."""
    if not values:
        return []
    if len(values) == 1:
        return [format_tick(values[0])]
    step = abs(values[1] - values[0])
    return [format_tick(v, step=step) for v in values]
