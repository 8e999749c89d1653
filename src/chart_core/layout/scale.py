"""Linear, logarithmic and band scales.

Continuous scales map a numeric domain onto a pixel range and can be
inverted; band scales divide a range into equal padded bands, one per
category index. Scales are immutable: ``nice()`` returns a new scale.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from chart_core.errors import ChartConfigError
from chart_core.layout.constants import (
    DEFAULT_CATEGORY_PADDING,
    DEFAULT_LOG_BASE,
    DEFAULT_NICE_COUNT,
    LOG_EPSILON,
    NICE_MAX_ITERATIONS,
)
from chart_core.parser.model import AxisBounds, is_finite_number

LOGGER = logging.getLogger(__name__)

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def js_round(value: float) -> float:
    """Round half up, the way browsers round (``round(-2.5) == -2``)."""
    return math.floor(value + 0.5)


def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = 10 ** -power / factor
        i1 = int(js_round(start * inc))
        i2 = int(js_round(stop * inc))
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10**power * factor
        i1 = int(js_round(start / inc))
        i2 = int(js_round(stop / inc))
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    """Signed tick step for a span.

    Positive values are the step itself; negative values are the negated
    reciprocal of a fractional step (``-10`` means a step of ``0.1``). Returns
    0 when no step can be derived.
    """
    if not (count > 0) or start == stop:
        return 0.0
    if not (math.isfinite(start) and math.isfinite(stop)):
        return 0.0
    return _tick_spec(start, stop, count)[2]


def tick_values(start: float, stop: float, count: float) -> list[float]:
    """Evenly spaced round values in ``[start, stop]``, at most about ``count``.

    Steps are 1, 2 or 5 times a power of ten. Values come back in the
    direction of the input interval.
    """
    if not (count > 0):
        return []
    if start == stop:
        return [start]
    if not (math.isfinite(start) and math.isfinite(stop)):
        return []
    reverse = stop < start
    if reverse:
        i1, i2, inc = _tick_spec(stop, start, count)
    else:
        i1, i2, inc = _tick_spec(start, stop, count)
    if not (i2 >= i1):
        return []
    n = i2 - i1 + 1
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(n)]
    else:
        values = [(i1 + i) * inc for i in range(n)]
    if reverse:
        values.reverse()
    return values


def _check_bounds(bounds: AxisBounds, what: str) -> None:
    if not (is_finite_number(bounds.min) and is_finite_number(bounds.max)):
        raise ChartConfigError(
            f"Scale {what} bounds must be finite numbers, got "
            f"[{bounds.min!r}, {bounds.max!r}]"
        )


def _interpolate(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def _normalize(a: float, b: float, x: float) -> float:
    span = b - a
    if span == 0:
        return 0.5
    return (x - a) / span


class LinearScale:
    """Continuous linear mapping from ``domain`` to ``range``.

    A collapsed domain maps every value to the middle of the range.
    Values outside the domain extrapolate.
    """

    scale_type = "linear"

    def __init__(self, domain: AxisBounds, range_: AxisBounds) -> None:
        _check_bounds(domain, "domain")
        _check_bounds(range_, "range")
        self._domain = AxisBounds(float(domain.min), float(domain.max))
        self._range = AxisBounds(float(range_.min), float(range_.max))
        if self._domain.min == self._domain.max:
            LOGGER.debug("Degenerate %s domain %s", self.scale_type, self._domain)

    def __call__(self, value: float) -> float:
        d0, d1 = self._domain.min, self._domain.max
        t = _normalize(d0, d1, value)
        return _interpolate(self._range.min, self._range.max, t)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self.domain()!r}, range={self.range()!r})"
        )

    def domain(self) -> tuple[float, float]:
        return (self._domain.min, self._domain.max)

    def range(self) -> tuple[float, float]:
        return (self._range.min, self._range.max)

    def invert(self, pixel: float) -> float:
        t = _normalize(self._range.min, self._range.max, pixel)
        return _interpolate(self._domain.min, self._domain.max, t)

    def ticks(self, count: int = DEFAULT_NICE_COUNT) -> list[float]:
        return tick_values(self._domain.min, self._domain.max, count)

    def nice(self, count: int = DEFAULT_NICE_COUNT) -> LinearScale:
        """Return a copy whose domain is widened to round step boundaries."""
        d0, d1 = self._domain.min, self._domain.max
        reverse = d1 < d0
        start, stop = (d1, d0) if reverse else (d0, d1)
        prestep = None
        for _ in range(NICE_MAX_ITERATIONS):
            step = tick_increment(start, stop, count)
            if step == prestep:
                lo, hi = (stop, start) if reverse else (start, stop)
                return LinearScale(AxisBounds(lo, hi), self._range)
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step
        return self

    def describe(self) -> dict[str, Any]:
        return {
            "type": self.scale_type,
            "domain": list(self.domain()),
            "range": list(self.range()),
        }


class LogScale:
    """Logarithmic mapping from ``domain`` to ``range``.

    Non-positive inputs and domain bounds are clamped to ``LOG_EPSILON`` so
    evaluation never produces ``-inf`` or NaN.
    """

    scale_type = "log"

    def __init__(
        self,
        domain: AxisBounds,
        range_: AxisBounds,
        base: float = DEFAULT_LOG_BASE,
    ) -> None:
        _check_bounds(domain, "domain")
        _check_bounds(range_, "range")
        if not (is_finite_number(base) and base > 0 and base != 1):
            raise ChartConfigError(f"Invalid log base: {base!r}")
        lo, hi = float(domain.min), float(domain.max)
        if lo <= 0 or hi <= 0:
            LOGGER.debug(
                "Clamping non-positive log domain [%s, %s] to %s", lo, hi, LOG_EPSILON
            )
            lo, hi = max(lo, LOG_EPSILON), max(hi, LOG_EPSILON)
        self._domain = AxisBounds(lo, hi)
        self._range = AxisBounds(float(range_.min), float(range_.max))
        self.base = float(base)

    def _log(self, value: float) -> float:
        if self.base == 10:
            return math.log10(value)
        if self.base == 2:
            return math.log2(value)
        return math.log(value, self.base)

    def _pow(self, exponent: float) -> float:
        return self.base**exponent

    def __call__(self, value: float) -> float:
        if value <= 0:
            value = LOG_EPSILON
        t = _normalize(
            self._log(self._domain.min), self._log(self._domain.max), self._log(value)
        )
        return _interpolate(self._range.min, self._range.max, t)

    def __repr__(self) -> str:
        return (
            f"LogScale(domain={self.domain()!r}, range={self.range()!r}, "
            f"base={self.base!r})"
        )

    def domain(self) -> tuple[float, float]:
        return (self._domain.min, self._domain.max)

    def range(self) -> tuple[float, float]:
        return (self._range.min, self._range.max)

    def invert(self, pixel: float) -> float:
        t = _normalize(self._range.min, self._range.max, pixel)
        exponent = _interpolate(
            self._log(self._domain.min), self._log(self._domain.max), t
        )
        return self._pow(exponent)

    def ticks(self, count: int = DEFAULT_NICE_COUNT) -> list[float]:
        u, v = self._domain.min, self._domain.max
        reverse = v < u
        if reverse:
            u, v = v, u
        i, j = self._log(u), self._log(v)
        values: list[float] = []
        if self.base.is_integer() and j - i < count:
            base = int(self.base)
            for exponent in range(math.floor(i), math.ceil(j) + 1):
                for k in range(1, base):
                    if exponent < 0:
                        t = k / self._pow(-exponent)
                    else:
                        t = k * self._pow(exponent)
                    if t < u:
                        continue
                    if t > v:
                        break
                    values.append(t)
            if len(values) * 2 < count:
                values = tick_values(u, v, count)
        else:
            values = [
                self._pow(e) for e in tick_values(i, j, min(j - i, count))
            ]
        if reverse:
            values.reverse()
        return values

    def nice(self, count: int = DEFAULT_NICE_COUNT) -> LogScale:
        """Return a copy whose domain is widened to whole powers of the base."""
        d0, d1 = self._domain.min, self._domain.max
        reverse = d1 < d0
        lo, hi = (d1, d0) if reverse else (d0, d1)
        lo = self._pow(math.floor(self._log(lo)))
        hi = self._pow(math.ceil(self._log(hi)))
        if reverse:
            lo, hi = hi, lo
        return LogScale(AxisBounds(lo, hi), self._range, self.base)

    def describe(self) -> dict[str, Any]:
        return {
            "type": self.scale_type,
            "domain": list(self.domain()),
            "range": list(self.range()),
            "base": self.base,
        }


class BandScale:
    """Categorical scale over contiguous integer indices.

    The range is split into one band per index; ``padding`` is the fraction
    of a step left empty between bands and at both ends. Evaluating an index
    returns the band start, or ``None`` for indices outside the domain.
    """

    scale_type = "band"

    def __init__(
        self,
        domain: AxisBounds,
        range_: AxisBounds,
        padding: float = DEFAULT_CATEGORY_PADDING,
    ) -> None:
        _check_bounds(domain, "domain")
        _check_bounds(range_, "range")
        count = max(0, int(domain.max) - int(domain.min) + 1)
        self._indices = tuple(range(count))
        self._range = AxisBounds(float(range_.min), float(range_.max))
        self.padding = min(1.0, max(0.0, float(padding)))

        r0, r1 = self._range.min, self._range.max
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        self._step = (stop - start) / max(1, count - self.padding + self.padding * 2)
        start += (stop - start - self._step * (count - self.padding)) * 0.5
        self._bandwidth = self._step * (1 - self.padding)
        values = [start + self._step * i for i in range(count)]
        if reverse:
            values.reverse()
        self._starts = values

    def __call__(self, value: Any) -> float | None:
        if not is_finite_number(value) or value != int(value):
            return None
        index = int(value)
        if 0 <= index < len(self._starts):
            return self._starts[index]
        return None

    def __repr__(self) -> str:
        return (
            f"BandScale(domain={list(self._indices)!r}, range={self.range()!r}, "
            f"padding={self.padding!r})"
        )

    def domain(self) -> tuple[int, ...]:
        return self._indices

    def range(self) -> tuple[float, float]:
        return (self._range.min, self._range.max)

    def bandwidth(self) -> float:
        return self._bandwidth

    def step(self) -> float:
        return self._step

    def invert(self, pixel: float) -> float:
        raise TypeError("Band scales have no inverse; search the nearest index")

    def describe(self) -> dict[str, Any]:
        return {
            "type": self.scale_type,
            "domain": list(self._indices),
            "range": list(self.range()),
            "bandwidth": self._bandwidth,
            "padding": self.padding,
        }


Scale = LinearScale | LogScale | BandScale
NumericScale = LinearScale | LogScale


def make_linear_or_log(
    domain: AxisBounds, range_: AxisBounds, kind: str = "linear"
) -> NumericScale:
    """Build a continuous scale of the given kind (``"linear"`` or ``"log"``)."""
    if kind == "log":
        return LogScale(domain, range_)
    if kind == "linear":
        return LinearScale(domain, range_)
    raise ChartConfigError(f"Unknown numeric scale type: {kind!r}")


def make_band(
    domain: AxisBounds,
    range_: AxisBounds,
    padding: float = DEFAULT_CATEGORY_PADDING,
) -> BandScale:
    return BandScale(domain, range_, padding)


def evaluate(scale: Scale, value: Any) -> float | None:
    """Map a data value to a pixel. Band scales return the band start."""
    if isinstance(scale, BandScale):
        return scale(value)
    if not is_finite_number(value):
        return None
    return scale(value)


def invert(scale: Scale, pixel: float) -> float:
    return scale.invert(pixel)
