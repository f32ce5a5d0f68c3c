from dataclasses import dataclass
from typing import Iterable

from .color import BLUE, Color
from .draw import DrawSink
from .math import Point, Segment, Vec2, axis_extrema, cubic_bezier

BoxExtents = tuple[Vec2, Vec2]


@dataclass(frozen=True)
class Extremum:
    """
    An interior extremum accepted into a tight box, e.g. label "x0" for the
    first root found on the x axis.
    """
    label: str
    t: float
    pos: Vec2


@dataclass(frozen=True)
class BoundingBox:
    point_min: Vec2
    point_max: Vec2
    point_color: Color = BLUE
    outline_color: Color = BLUE

    def contains(self, other: "BoundingBox", eps: float = 0.0) -> bool:
        return (other.point_min[0] >= self.point_min[0] - eps
                and other.point_min[1] >= self.point_min[1] - eps
                and other.point_max[0] <= self.point_max[0] + eps
                and other.point_max[1] <= self.point_max[1] + eps)

    def draw(self, sink: DrawSink, corner_radius: float = 5.0) -> None:
        (min_x, min_y), (max_x, max_y) = self.point_min, self.point_max

        sink.circle((min_x, min_y), corner_radius, self.point_color)
        sink.circle((max_x, max_y), corner_radius, self.point_color)

        sink.line((min_x, min_y), (min_x, max_y), 1.0, self.outline_color)
        sink.line((max_x, min_y), (max_x, max_y), 1.0, self.outline_color)

        sink.line((min_x, min_y), (max_x, min_y), 1.0, self.outline_color)
        sink.line((min_x, max_y), (max_x, max_y), 1.0, self.outline_color)


def coarse_box(points: Iterable[Point]) -> BoxExtents:
    """
    Axis-aligned min/max over an arbitrary point set.
    """
    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")
    for p in points:
        x, y = p.pos
        min_x = min(min_x, x)
        max_x = max(max_x, x)
        min_y = min(min_y, y)
        max_y = max(max_y, y)
    return (min_x, min_y), (max_x, max_y)


def tight_box_with_extrema(segment: Segment) -> tuple[BoxExtents, list[Extremum]]:
    """
    Seed with the two anchors, then widen each axis by the curve's interior
    extrema on that axis only. The off-axis coordinate of a candidate is dropped.
    """
    (min_x, min_y), (max_x, max_y) = coarse_box((segment[0], segment[3]))
    extrema: list[Extremum] = []

    xs = [p.pos[0] for p in segment[:4]]
    for i, t in enumerate(axis_extrema(xs)):
        candidate = cubic_bezier(segment, t)
        extrema.append(Extremum(f"x{i}", t, candidate))
        min_x = min(min_x, candidate[0])
        max_x = max(max_x, candidate[0])

    ys = [p.pos[1] for p in segment[:4]]
    for i, t in enumerate(axis_extrema(ys)):
        candidate = cubic_bezier(segment, t)
        extrema.append(Extremum(f"y{i}", t, candidate))
        min_y = min(min_y, candidate[1])
        max_y = max(max_y, candidate[1])

    return ((min_x, min_y), (max_x, max_y)), extrema


def tight_box(segment: Segment) -> BoxExtents:
    return tight_box_with_extrema(segment)[0]
