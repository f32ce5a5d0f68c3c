import logging
from enum import Enum
from typing import Iterator, Optional

from .bounding_box import BoundingBox, Extremum, coarse_box, tight_box_with_extrema
from .config import EditorConfig
from .draw import DrawSink
from .evaluators import evaluator_for, next_mode
from .math import Point, Segment, Vec2

logger = logging.getLogger(__name__)

WINDOW = 4
STRIDE = 3


class InsufficientControlPoints(LookupError):
    """The requested segment needs more control points than the curve holds."""


class Role(Enum):
    ANCHOR = "anchor"
    FIRST_HANDLE = "first-handle"
    SECOND_HANDLE = "second-handle"


def role_of(index: int) -> Role:
    """
    Role of the index-th control point. Anchors sit on multiples of the stride
    and are shared by the segments on either side.
    """
    return (Role.ANCHOR, Role.FIRST_HANDLE, Role.SECOND_HANDLE)[index % STRIDE]


def segment_count(n: int) -> int:
    if n < WINDOW:
        return 0
    return (n - WINDOW) // STRIDE + 1


class Curve:
    """
    Chained cubic Bezier curve over a flat list of control points.

    Segment k is control[3k:3k+4]; the end anchor of one segment is the start
    anchor of the next. The sampled points and boxes are caches rebuilt in
    full the next time they are read after any mutation.
    """

    def __init__(self, control: Optional[list[Point]] = None, mode: Optional[str] = None,
                 config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.control: list[Point] = list(control or [])
        self.mode: str = mode or self.config.initial_mode
        evaluator_for(self.mode)

        self.rendered: list[Point] = []
        self.boxes: list[BoundingBox] = []
        self.extrema: list[Extremum] = []
        self.modified = True

    def __len__(self) -> int:
        return len(self.control)

    @property
    def dirty(self) -> bool:
        return self.modified

    # ---------- windowing ----------
    @property
    def segment_count(self) -> int:
        return segment_count(len(self.control))

    def windows(self) -> Iterator[Segment]:
        for k in range(self.segment_count):
            yield self.control[k * STRIDE:k * STRIDE + WINDOW]

    def segment(self, k: int) -> Segment:
        if not (0 <= k < self.segment_count):
            raise InsufficientControlPoints(
                f"segment {k} needs {k * STRIDE + WINDOW} control points, curve has {len(self.control)}"
            )
        return self.control[k * STRIDE:k * STRIDE + WINDOW]

    # ---------- mutation ----------
    def add_point(self, p: Point) -> "Curve":
        self.control.append(p)
        self.modified = True
        return self

    def remove_point(self, index: int) -> "Curve":
        if not (0 <= index < len(self.control)):
            raise IndexError(index)
        self.control.pop(index)
        self.modified = True
        return self

    def move_point(self, index: int, pos: Vec2) -> "Curve":
        if not (0 <= index < len(self.control)):
            raise IndexError(index)
        self.control[index] = self.control[index].moved_to(pos)
        self.modified = True
        return self

    def clear(self) -> "Curve":
        self.control = []
        self.modified = True
        return self

    def set_mode(self, mode: str) -> "Curve":
        evaluator_for(mode)
        if mode != self.mode:
            self.mode = mode
            self.modified = True
        return self

    def toggle_mode(self) -> str:
        self.set_mode(next_mode(self.mode))
        logger.info("Mode toggled! Evaluation mode: %s", self.mode)
        return self.mode

    # ---------- derived caches ----------
    def rebuild(self) -> None:
        self.rendered.clear()
        self.boxes.clear()
        self.extrema.clear()

        if self.segment_count == 0:
            logger.debug("Skipping render, %d control point(s) is not enough for a segment", len(self.control))
            self.modified = False
            return

        logger.info("Rendering new curve! %d segment(s), mode=%s", self.segment_count, self.mode)
        cfg = self.config
        evaluator = evaluator_for(self.mode)
        ts = cfg.sample_parameters

        for window in self.windows():
            for t in ts:
                self.rendered.append(evaluator.evaluate(window, t))

            point_min, point_max = coarse_box(window)
            self.boxes.append(BoundingBox(point_min, point_max,
                                          cfg.coarse_point_color, cfg.coarse_outline_color))

            (point_min, point_max), extrema = tight_box_with_extrema(window)
            self.boxes.append(BoundingBox(point_min, point_max,
                                          cfg.tight_point_color, cfg.tight_outline_color))
            self.extrema.extend(extrema)

        self.modified = False

    def ensure_current(self) -> None:
        if self.modified:
            self.rebuild()

    def samples(self) -> list[Point]:
        self.ensure_current()
        return self.rendered

    def bounding_boxes(self) -> list[BoundingBox]:
        """Coarse and tight box per segment, interleaved in segment order."""
        self.ensure_current()
        return self.boxes

    # ---------- drawing ----------
    def draw(self, sink: DrawSink, draw_bounding: bool = False) -> None:
        self.ensure_current()
        cfg = self.config

        for point in self.rendered:
            sink.rect(point.pos, point.color)

        if draw_bounding:
            for bbox in self.boxes:
                bbox.draw(sink, cfg.box_corner_radius)
            for ext in self.extrema:
                sink.circle(ext.pos, cfg.box_corner_radius, cfg.marker_color)
                sink.text(ext.label, ext.pos, cfg.marker_size, cfg.label_color)

    def draw_controls(self, sink: DrawSink) -> None:
        cfg = self.config
        for control in self.control:
            sink.circle(control.pos, cfg.pick_radius, control.color)

        for a, b, c, d in self.windows():
            sink.line(a.pos, b.pos, 1.0, a.color.lerp(b.color, 0.5))
            sink.line(d.pos, c.pos, 1.0, d.color.lerp(c.color, 0.5))

            for label, p in zip("abcd", (a, b, c, d)):
                sink.text(label, p.pos, cfg.label_size, cfg.label_color)
