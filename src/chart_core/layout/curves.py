"""Curve interpolation for line and area paths.

A curve receives projected points one at a time, bracketed by
``line_start``/``line_end`` (and ``area_start``/``area_end`` when drawing an
area), and writes path commands to a :class:`PathContext`. Curves are looked
up by name in :data:`CURVES`; adding a curve never touches the gap logic in
the path builders.

Area drawing calls ``line_start``/``line_end`` twice per segment: once for
the top edge and once for the reversed baseline. ``_line`` tracks which of
the two is being drawn (``None`` outside an area).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from chart_core.layout.constants import PATH_DIGITS

_NAN = float("nan")
_EPSILON = 1e-12


class PathOp(Enum):
    MOVE = "M"
    LINE = "L"
    CUBIC = "C"
    QUADRATIC = "Q"
    CLOSE = "Z"


@dataclass(frozen=True)
class PathCommand:
    """One SVG path command with its coordinates."""

    op: PathOp
    coords: tuple[float, ...] = ()


def format_number(value: float, digits: int | None = PATH_DIGITS) -> str:
    """Format a coordinate the way browsers print numbers.

    With ``digits`` set, values are rounded half up first. Whole numbers
    drop their fraction and negative zero prints as ``0``.
    """
    if digits is not None and math.isfinite(value):
        k = 10**digits
        value = math.floor(value * k + 0.5) / k
    if value == 0:
        return "0"
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


class PathContext:
    """Collects path commands and serializes them to an SVG ``d`` string."""

    def __init__(self, digits: int | None = PATH_DIGITS) -> None:
        self.digits = digits
        self.commands: list[PathCommand] = []
        self._x0 = self._y0 = None
        self._x1 = self._y1 = None

    def move_to(self, x: float, y: float) -> None:
        self._x0 = self._x1 = x
        self._y0 = self._y1 = y
        self.commands.append(PathCommand(PathOp.MOVE, (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self._x1, self._y1 = x, y
        self.commands.append(PathCommand(PathOp.LINE, (x, y)))

    def quadratic_curve_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._x1, self._y1 = x, y
        self.commands.append(PathCommand(PathOp.QUADRATIC, (x1, y1, x, y)))

    def bezier_curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._x1, self._y1 = x, y
        self.commands.append(PathCommand(PathOp.CUBIC, (x1, y1, x2, y2, x, y)))

    def close_path(self) -> None:
        """Close the current subpath; a no-op before any point was drawn."""
        if self._x1 is not None:
            self._x1, self._y1 = self._x0, self._y0
            self.commands.append(PathCommand(PathOp.CLOSE))

    def __str__(self) -> str:
        return "".join(
            cmd.op.value + ",".join(format_number(c, self.digits) for c in cmd.coords)
            for cmd in self.commands
        )


def _closes(line: int | None, point: int) -> bool:
    return bool(line) or (line != 0 and point == 1)


def _flip(line: int | None) -> int | None:
    return None if line is None else 1 - line


class Curve:
    """Base curve: starts subpaths, closes single points and area edges."""

    def __init__(self, context: PathContext) -> None:
        self._context = context
        self._line: int | None = None
        self._point = 0

    def area_start(self) -> None:
        self._line = 0

    def area_end(self) -> None:
        self._line = None

    def line_start(self) -> None:
        self._point = 0

    def line_end(self) -> None:
        if _closes(self._line, self._point):
            self._context.close_path()
        self._line = _flip(self._line)

    def _start(self, x: float, y: float) -> None:
        if self._line:
            self._context.line_to(x, y)
        else:
            self._context.move_to(x, y)

    def point(self, x: float, y: float) -> None:
        raise NotImplementedError


class CurveLinear(Curve):
    """Straight segments between points."""

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._start(x, y)
        else:
            self._point = 2
            self._context.line_to(x, y)


class CurveLinearClosed(Curve):
    """Straight segments, each subpath closed back to its first point."""

    def area_start(self) -> None:
        pass

    def area_end(self) -> None:
        pass

    def line_end(self) -> None:
        if self._point:
            self._context.close_path()

    def point(self, x: float, y: float) -> None:
        if self._point:
            self._context.line_to(x, y)
        else:
            self._point = 1
            self._context.move_to(x, y)


class CurveStep(Curve):
    """Horizontal-then-vertical steps.

    ``t`` places the vertical riser: 0 at the previous point (step before),
    1 at the next point (step after), 0.5 halfway.
    """

    def __init__(self, context: PathContext, t: float = 0.5) -> None:
        super().__init__(context)
        self._t = t
        self._x = self._y = _NAN

    def line_start(self) -> None:
        self._x = self._y = _NAN
        self._point = 0

    def line_end(self) -> None:
        if 0 < self._t < 1 and self._point == 2:
            self._context.line_to(self._x, self._y)
        if _closes(self._line, self._point):
            self._context.close_path()
        if self._line is not None:
            self._t = 1 - self._t
            self._line = 1 - self._line

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._start(x, y)
        else:
            self._point = 2
            if self._t <= 0:
                self._context.line_to(self._x, y)
                self._context.line_to(x, y)
            else:
                x1 = self._x * (1 - self._t) + x * self._t
                self._context.line_to(x1, self._y)
                self._context.line_to(x1, y)
        self._x, self._y = x, y


class CurveBumpX(Curve):
    """Cubic segments with horizontal tangents at every point."""

    def __init__(self, context: PathContext) -> None:
        super().__init__(context)
        self._x0 = self._y0 = _NAN

    def point(self, x: float, y: float) -> None:
        if self._point == 0:
            self._point = 1
            self._start(x, y)
        else:
            self._point = 2
            mid = (self._x0 + x) / 2
            self._context.bezier_curve_to(mid, self._y0, mid, y, x, y)
        self._x0, self._y0 = x, y


def _js_div(a: float, b: float, negative_zero: bool = False) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return _NAN
    sign = -1 if (a < 0) != negative_zero else 1
    return sign * math.inf


def _sign(x: float) -> int:
    return -1 if x < 0 else 1


class CurveMonotoneX(Curve):
    """Cubic interpolation preserving monotonicity in y (Steffen's method)."""

    def line_start(self) -> None:
        self._x0 = self._x1 = self._y0 = self._y1 = self._t0 = _NAN
        self._point = 0

    def _slope3(self, x2: float, y2: float) -> float:
        h0 = self._x1 - self._x0
        h1 = x2 - self._x1
        s0 = _js_div(self._y1 - self._y0, h0 or 0.0, negative_zero=not h0 and h1 < 0)
        s1 = _js_div(y2 - self._y1, h1 or 0.0, negative_zero=not h1 and h0 < 0)
        p = _js_div(s0 * h1 + s1 * h0, h0 + h1)
        candidates = (abs(s0), abs(s1), 0.5 * abs(p))
        if any(math.isnan(c) for c in candidates):
            return 0.0
        slope = (_sign(s0) + _sign(s1)) * min(candidates)
        return 0.0 if math.isnan(slope) else slope

    def _slope2(self, t: float) -> float:
        h = self._x1 - self._x0
        if h and not math.isnan(h):
            return (3 * (self._y1 - self._y0) / h - t) / 2
        return t

    def _bezier(self, t0: float, t1: float) -> None:
        x0, y0, x1, y1 = self._x0, self._y0, self._x1, self._y1
        dx = (x1 - x0) / 3
        self._context.bezier_curve_to(
            x0 + dx, y0 + dx * t0, x1 - dx, y1 - dx * t1, x1, y1
        )

    def line_end(self) -> None:
        if self._point == 2:
            self._context.line_to(self._x1, self._y1)
        elif self._point == 3:
            self._bezier(self._t0, self._slope2(self._t0))
        super().line_end()

    def point(self, x: float, y: float) -> None:
        t1 = _NAN
        # coincident points are ignored
        if x == self._x1 and y == self._y1:
            return
        if self._point == 0:
            self._point = 1
            self._start(x, y)
        elif self._point == 1:
            self._point = 2
        elif self._point == 2:
            self._point = 3
            t1 = self._slope3(x, y)
            self._bezier(self._slope2(t1), t1)
        else:
            t1 = self._slope3(x, y)
            self._bezier(self._t0, t1)
        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y
        self._t0 = t1


def _control_points(values: list[float]) -> tuple[list[float], list[float]]:
    n = len(values) - 1
    a = [0.0] * n
    b = [0.0] * n
    r = [0.0] * n
    a[0], b[0], r[0] = 0.0, 2.0, values[0] + 2 * values[1]
    for i in range(1, n - 1):
        a[i], b[i], r[i] = 1.0, 4.0, 4 * values[i] + 2 * values[i + 1]
    a[n - 1], b[n - 1], r[n - 1] = 2.0, 7.0, 8 * values[n - 1] + values[n]
    for i in range(1, n):
        m = a[i] / b[i - 1]
        b[i] -= m
        r[i] -= m * r[i - 1]
    a[n - 1] = r[n - 1] / b[n - 1]
    for i in range(n - 2, -1, -1):
        a[i] = (r[i] - a[i + 1]) / b[i]
    b[n - 1] = (values[n] + a[n - 1]) / 2
    for i in range(n - 1):
        b[i] = 2 * values[i + 1] - a[i + 1]
    return a, b


class CurveNatural(Curve):
    """Natural cubic spline through all points of a subpath."""

    def line_start(self) -> None:
        self._xs: list[float] = []
        self._ys: list[float] = []

    def line_end(self) -> None:
        xs, ys = self._xs, self._ys
        n = len(xs)
        if n:
            self._start(xs[0], ys[0])
            if n == 2:
                self._context.line_to(xs[1], ys[1])
            elif n > 2:
                px, py = _control_points(xs), _control_points(ys)
                for i in range(n - 1):
                    self._context.bezier_curve_to(
                        px[0][i], py[0][i], px[1][i], py[1][i], xs[i + 1], ys[i + 1]
                    )
        if _closes(self._line, n):
            self._context.close_path()
        self._line = _flip(self._line)

    def point(self, x: float, y: float) -> None:
        self._xs.append(x)
        self._ys.append(y)


class CurveCatmullRom(Curve):
    """Centripetal Catmull-Rom spline (alpha 0.5)."""

    def __init__(self, context: PathContext, alpha: float = 0.5) -> None:
        super().__init__(context)
        self._alpha = alpha
        self.line_start()

    def line_start(self) -> None:
        self._x0 = self._x1 = self._x2 = _NAN
        self._y0 = self._y1 = self._y2 = _NAN
        self._l01_a = self._l12_a = self._l23_a = 0.0
        self._l01_2a = self._l12_2a = self._l23_2a = 0.0
        self._point = 0

    def _bezier(self, x: float, y: float) -> None:
        x1, y1, x2, y2 = self._x1, self._y1, self._x2, self._y2
        if self._l01_a > _EPSILON:
            a = 2 * self._l01_2a + 3 * self._l01_a * self._l12_a + self._l12_2a
            n = 3 * self._l01_a * (self._l01_a + self._l12_a)
            x1 = (x1 * a - self._x0 * self._l12_2a + self._x2 * self._l01_2a) / n
            y1 = (y1 * a - self._y0 * self._l12_2a + self._y2 * self._l01_2a) / n
        if self._l23_a > _EPSILON:
            b = 2 * self._l23_2a + 3 * self._l23_a * self._l12_a + self._l12_2a
            m = 3 * self._l23_a * (self._l23_a + self._l12_a)
            x2 = (x2 * b + self._x1 * self._l23_2a - x * self._l12_2a) / m
            y2 = (y2 * b + self._y1 * self._l23_2a - y * self._l12_2a) / m
        self._context.bezier_curve_to(x1, y1, x2, y2, self._x2, self._y2)

    def line_end(self) -> None:
        if self._point == 2:
            self._context.line_to(self._x2, self._y2)
        elif self._point == 3:
            self.point(self._x2, self._y2)
        super().line_end()

    def point(self, x: float, y: float) -> None:
        if self._point:
            x23, y23 = self._x2 - x, self._y2 - y
            self._l23_2a = (x23 * x23 + y23 * y23) ** self._alpha
            self._l23_a = math.sqrt(self._l23_2a)

        if self._point == 0:
            self._point = 1
            self._start(x, y)
        elif self._point == 1:
            self._point = 2
        else:
            self._point = 3
            self._bezier(x, y)

        self._l01_a, self._l12_a = self._l12_a, self._l23_a
        self._l01_2a, self._l12_2a = self._l12_2a, self._l23_2a
        self._x0, self._x1, self._x2 = self._x1, self._x2, x
        self._y0, self._y1, self._y2 = self._y1, self._y2, y


CURVES = {
    "linear": CurveLinear,
    "linearclosed": CurveLinearClosed,
    "step": lambda context: CurveStep(context, 0.5),
    "stepbefore": lambda context: CurveStep(context, 0.0),
    "stepafter": lambda context: CurveStep(context, 1.0),
    "bump": CurveBumpX,
    "monotone": CurveMonotoneX,
    "natural": CurveNatural,
    "catmullrom": CurveCatmullRom,
}
"""Curve factories keyed by normalized name."""

DEFAULT_CURVE = "linear"


def curve_key(name: str | None) -> str:
    """Normalize ``"stepBefore"``, ``"step_before"`` and friends to one key."""
    if not name:
        return DEFAULT_CURVE
    key = name.replace("_", "").replace("-", "").lower()
    return key if key in CURVES else DEFAULT_CURVE


def make_curve(name: str | None, context: PathContext) -> Curve:
    """Curve writing to ``context``; unknown names fall back to linear."""
    return CURVES[curve_key(name)](context)
