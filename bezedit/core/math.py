from dataclasses import dataclass
from typing import Sequence

from .color import Color

Vec2 = tuple[float, float]

# coefficients below this are treated as zero by the root solver
EPSILON = 1e-9


class CurveMathError(ArithmeticError):
    """Base class for the curve solver's absence signals."""


class NoRealRoot(CurveMathError):
    """The derivative has no real root on this axis: no interior extremum."""


class DegenerateAxis(NoRealRoot):
    """The derivative is constant on this axis, there is no isolated root to divide out."""


def dist2(a: Vec2, b: Vec2) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def lerp2(a: Vec2, b: Vec2, t: float) -> Vec2:
    return a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t


@dataclass(frozen=True)
class Point:
    """
    A position plus a color. Immutable: interpolation returns a new Point.
    """
    pos: Vec2
    color: Color

    @property
    def x(self) -> float:
        return self.pos[0]

    @property
    def y(self) -> float:
        return self.pos[1]

    def lerp(self, other: "Point", t: float) -> "Point":
        return Point(lerp2(self.pos, other.pos, t), self.color.lerp(other.color, t))

    def moved_to(self, pos: Vec2) -> "Point":
        return Point((float(pos[0]), float(pos[1])), self.color)


Segment = Sequence[Point]


def cubic_bezier(segment: Segment, t: float) -> Vec2:
    """
    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
    """
    p0, c1, c2, p3 = (p.pos for p in segment[:4])
    u = 1.0 - t
    uu = u * u
    tt = t * t
    uuu = uu * u
    ttt = tt * t
    x = uuu * p0[0] + 3.0 * uu * t * c1[0] + 3.0 * u * tt * c2[0] + ttt * p3[0]
    y = uuu * p0[1] + 3.0 * uu * t * c1[1] + 3.0 * u * tt * c2[1] + ttt * p3[1]
    return x, y


def velocity(segment: Segment, t: float) -> Vec2:
    """B'(t), the tangent direction. Feeds the extremum solver."""
    tt = t * t
    w = (-3.0 * tt + 6.0 * t - 3.0,
         9.0 * tt - 12.0 * t + 3.0,
         -9.0 * tt + 6.0 * t,
         3.0 * tt)
    return _weighted(segment, w)


def acceleration(segment: Segment, t: float) -> Vec2:
    """B''(t), for curvature and normals."""
    w = (-6.0 * t + 6.0,
         18.0 * t - 12.0,
         -18.0 * t + 6.0,
         6.0 * t)
    return _weighted(segment, w)


def _weighted(segment: Segment, weights: Sequence[float]) -> Vec2:
    x = 0.0
    y = 0.0
    for p, w in zip(segment[:4], weights):
        x += p.pos[0] * w
        y += p.pos[1] * w
    return x, y


def derivative_coefficients(values: Sequence[float]) -> tuple[float, float, float]:
    """
    (a, b, c) of a*t^2 + b*t + c, the first derivative of the cubic along one axis.
    """
    x0, x1, x2, x3 = values
    a = -3.0 * x0 + 9.0 * x1 - 9.0 * x2 + 3.0 * x3
    b = 6.0 * x0 - 12.0 * x1 + 6.0 * x2
    c = -3.0 * x0 + 3.0 * x1
    return a, b, c


def solve_quadratic(values: Sequence[float]) -> tuple[float, float]:
    """
    Both roots of the axis derivative, `(-b + sqrt(d)) / 2a` first.

    When `a` vanishes the derivative is linear and its single root is returned
    twice. Raises DegenerateAxis when `a` and `b` both vanish (constant
    derivative) and NoRealRoot when the discriminant is negative. The roots are
    candidates only, they may fall outside [0, 1].
    """
    a, b, c = derivative_coefficients(values)
    if abs(a) <= EPSILON:
        if abs(b) <= EPSILON:
            raise DegenerateAxis(f"derivative is constant for axis values {tuple(values)}")
        root = -c / b
        return root, root
    delta = b * b - 4.0 * a * c
    if delta < 0.0:
        raise NoRealRoot(f"negative discriminant {delta} for axis values {tuple(values)}")
    sq = delta ** 0.5
    return (-b + sq) / (2.0 * a), (-b - sq) / (2.0 * a)


def axis_extrema(values: Sequence[float]) -> list[float]:
    """
    Parameters in the open interval (0, 1) where the cubic has an extremum on this axis.
    An empty list means there is nothing to add to a bounding box.
    """
    try:
        roots = solve_quadratic(values)
    except NoRealRoot:
        return []
    out: list[float] = []
    for t in roots:
        if 0.0 < t < 1.0 and t not in out:
            out.append(t)
    return out
