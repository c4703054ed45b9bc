"""
Interpolating curves over knots (x_i, y_i).

This module provides:
    • wrap(x, start, end)
    • hermite(m0, y0, y1, m1, t) and the h1..h4 basis
    • Curve            (base: knot validation, looping, index lookup)
    • HermiteCurve     (explicit tangent per knot)
    • CatmullRomCurve  (tangents from neighbouring knots, uniform spacing)
    • LinearCurve
    • StepCurve        (nearest-neighbour, jumps half way between knots)

Values may be scalars or 2D points (Vec2 / (x, y)); points are stored as an
(n, 2) float array and evaluated back into Vec2.

If `loop` is set, x is wrapped into [x_0, x_{n-1}) before evaluation and the
last value should equal the first. Otherwise x outside the knot range is
extrapolated with the nearest boundary segment.
"""

import math
from typing import Sequence

import numpy as np

from knotwork.models.vector import Vec2


# -------------------------------------------------------------------------
#  SCALAR HELPERS
# -------------------------------------------------------------------------

def wrap(x: float, start: float, end: float) -> float:
    """
    Loop a float into [start, end).
    """
    span = end - start
    d = abs((x - start) / span)
    d -= math.floor(d)
    d *= span

    if x >= start:
        d += start
    else:
        d = end - d

    # float rounding can land exactly on the open end
    if d >= end:
        d = start
    return d


def h1(t):
    return 2 * t ** 3 - 3 * t ** 2 + 1


def h2(t):
    return -2 * t ** 3 + 3 * t ** 2


def h3(t):
    return t ** 3 - 2 * t ** 2 + t


def h4(t):
    return t ** 3 - t ** 2


def hermite(m0, y0, y1, m1, t):
    """Cubic Hermite between y0 and y1 with end tangents m0 and m1."""
    return m0 * h3(t) + y0 * h1(t) + y1 * h2(t) + m1 * h4(t)


def _as_array(values) -> np.ndarray:
    """Scalars → (n,), points → (n, 2)."""
    rows = [tuple(v) if isinstance(v, Vec2) else v for v in values]
    return np.asarray(rows, dtype=float)


# -------------------------------------------------------------------------
#  BASE CURVE
# -------------------------------------------------------------------------

class Curve:
    """
    Piecewise curve through n ≥ 2 knots with strictly increasing xs.
    Subclasses implement `_segment(i, t)` for the span [x_i, x_{i+1}].
    """

    def __init__(self, xs: Sequence[float], ys, loop: bool):
        self.xs = np.asarray(xs, dtype=float)
        self.ys = _as_array(ys)
        self.loop = bool(loop)

        n = len(self.xs)
        if n < 2:
            raise ValueError(f"A curve needs at least 2 knots, got {n}")
        if len(self.ys) != n:
            raise ValueError(f"Got {n} knot positions but {len(self.ys)} values")
        if np.any(np.diff(self.xs) <= 0):
            raise ValueError("Knot positions must be strictly increasing")

        self.is_point = self.ys.ndim == 2

    # ------------------------------------------------------------------
    # Knot access
    # ------------------------------------------------------------------

    @property
    def knot_count(self) -> int:
        return len(self.xs)

    @property
    def start(self) -> float:
        return float(self.xs[0])

    @property
    def end(self) -> float:
        return float(self.xs[-1])

    def loop_in_range(self, x: float) -> float:
        return wrap(x, self.start, self.end)

    def index_of(self, x: float) -> int:
        """
        Index i of the span used for x. Clamped to the first/last span so
        that non-looping curves extrapolate from their boundary segment.
        """
        if self.loop:
            x = self.loop_in_range(x)
        i = int(np.searchsorted(self.xs, x, side="right")) - 1
        return min(max(i, 0), self.knot_count - 2)

    def sub_range(self, i: int, x: float) -> float:
        """Position of x inside span i, 0 at x_i and 1 at x_{i+1}."""
        if self.loop:
            x = self.loop_in_range(x)
        x0 = self.xs[i]
        x1 = self.xs[i + 1]
        return float((x - x0) / (x1 - x0))

    def y_at(self, i: int):
        return self.ys[i % self.knot_count]

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _segment(self, i: int, t: float):
        raise NotImplementedError

    def __call__(self, x: float):
        i = self.index_of(x)
        t = self.sub_range(i, x)
        value = self._segment(i, t)
        if self.is_point:
            return Vec2(value[0], value[1])
        return float(value)

    def sample(self, count: int) -> np.ndarray:
        """
        Evaluate `count + 1` evenly spaced points over [x_0, x_{n-1}].
        Points come back as a (count + 1, 2) array, scalars as (count + 1,).
        """
        ts = np.linspace(self.start, self.end, count + 1)
        values = []
        for x in ts:
            v = self(x)
            values.append(v.as_tuple() if isinstance(v, Vec2) else v)
        return np.asarray(values, dtype=float)


# -------------------------------------------------------------------------
#  CONCRETE CURVES
# -------------------------------------------------------------------------

class HermiteCurve(Curve):
    """
    Cubic Hermite curve with a user-supplied tangent at every knot. Tangents
    are per unit of span parameter t, not per unit of x.
    """

    def __init__(self, xs, ys, tangents, loop: bool):
        super().__init__(xs, ys, loop)
        self.ms = _as_array(tangents)
        if self.ms.shape != self.ys.shape:
            raise ValueError("Need exactly one tangent per knot value")

    def _segment(self, i, t):
        return hermite(self.ms[i], self.ys[i], self.ys[i + 1], self.ms[i + 1], t)


class CatmullRomCurve(Curve):
    """
    Catmull-Rom spline for uniformly spaced knots. Without looping the end
    knots reuse their inner neighbour, giving zero slope at the ends.
    """

    def _segment(self, i, t):
        n = self.knot_count
        if i == 0:
            y0 = self.y_at(i - 2) if self.loop else self.y_at(i + 1)
        else:
            y0 = self.y_at(i - 1)
        if i == n - 2:
            y3 = self.y_at(i + 3) if self.loop else self.y_at(i)
        else:
            y3 = self.y_at(i + 2)
        y1 = self.ys[i]
        y2 = self.ys[i + 1]

        return 0.5 * (
            2 * y1
            + (-y0 + y2) * t
            + (2 * y0 - 5 * y1 + 4 * y2 - y3) * t ** 2
            + (-y0 + 3 * y1 - 3 * y2 + y3) * t ** 3
        )


class LinearCurve(Curve):
    def _segment(self, i, t):
        y0 = self.ys[i]
        return y0 + (self.ys[i + 1] - y0) * t


class StepCurve(Curve):
    """
    Nearest-neighbour steps: the left knot's value up to half way through a
    span, the right knot's value after. Used for the 0/1 over-under flag.
    """

    def _segment(self, i, t):
        return self.ys[i] if t < 0.5 else self.ys[i + 1]
