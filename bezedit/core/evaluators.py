from abc import ABC, abstractmethod

from .math import Point, Segment, cubic_bezier
from .registries import evaluator_registry, register_evaluator

CASTELJAU = "casteljau"
BERNSTEIN = "bernstein"


class SegmentEvaluator(ABC):
    """
    Strategy turning a 4-point segment and a parameter into a point on the curve.
    """

    @abstractmethod
    def evaluate(self, segment: Segment, t: float) -> Point:
        """
        Return B(t) with its color. t outside [0, 1] extrapolates.
        """


@register_evaluator(CASTELJAU)
class DeCasteljauEvaluator(SegmentEvaluator):
    """
    Recursive linear interpolation: 3 lerps, then 2, then 1.
    Color rides along as a fourth dimension, so all four colors are blended.
    """

    def evaluate(self, segment: Segment, t: float) -> Point:
        a, b, c, d = segment[:4]

        ab = a.lerp(b, t)
        bc = b.lerp(c, t)
        cd = c.lerp(d, t)

        abc = ab.lerp(bc, t)
        bcd = bc.lerp(cd, t)

        return abc.lerp(bcd, t)


@register_evaluator(BERNSTEIN)
class BernsteinEvaluator(SegmentEvaluator):
    """
    Direct Bernstein weighting for the position. The color is a single lerp
    between the two anchors; the handles' colors are ignored.
    """

    def evaluate(self, segment: Segment, t: float) -> Point:
        start, end = segment[0], segment[3]
        return Point(cubic_bezier(segment, t), start.color.lerp(end.color, t))


def evaluator_for(mode: str) -> SegmentEvaluator:
    try:
        return evaluator_registry[mode]()
    except KeyError:
        raise KeyError(f"Unknown evaluation mode '{mode}', expected one of {sorted(evaluator_registry)}") from None


def evaluate(segment: Segment, t: float, mode: str = BERNSTEIN) -> Point:
    return evaluator_for(mode).evaluate(segment, t)


def next_mode(mode: str) -> str:
    """Cycle to the following registered mode (a toggle with two modes)."""
    modes = list(evaluator_registry)
    return modes[(modes.index(mode) + 1) % len(modes)]
