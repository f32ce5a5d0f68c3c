import logging
from dataclasses import dataclass
from itertools import cycle
from typing import Optional

from .config import EditorConfig
from .curve import Curve
from .draw import DrawSink
from .math import Point, Vec2, dist2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputFrame:
    """
    Input state for one tick. *_pressed fields are edges (true on the tick the
    button/key went down), primary_down is the held state.
    """
    pointer: Vec2
    primary_down: bool = False
    primary_pressed: bool = False
    secondary_pressed: bool = False
    toggle_bounding: bool = False
    toggle_grid: bool = False
    toggle_mode: bool = False


class CurveEditor:
    """
    Per-tick controller over a single Curve:
      - hover selects the first control point within the pick radius
      - a held primary button drags the selected point
      - secondary press deletes the selected point
      - primary press on empty space appends a point with the next palette color
    """

    def __init__(self, curve: Optional[Curve] = None, config: Optional[EditorConfig] = None):
        self.config = config or (curve.config if curve is not None else EditorConfig())
        self.curve = curve if curve is not None else Curve(config=self.config)
        self.selected: Optional[int] = None
        self.draw_bounding = False
        self.draw_grid = False
        self._colors = cycle(self.config.palette)

    # ---------- helpers ----------
    def index_at(self, pos: Vec2) -> Optional[int]:
        r2 = self.config.pick_radius ** 2
        for i, p in enumerate(self.curve.control):
            if dist2(p.pos, pos) <= r2:
                return i
        return None

    def next_color(self):
        return next(self._colors)

    # ---------- tick ----------
    def tick(self, frame: InputFrame) -> None:
        pos = (float(frame.pointer[0]), float(frame.pointer[1]))

        # drag the held point, otherwise look for one under the pointer
        if self.selected is not None:
            self.curve.move_point(self.selected, pos)
        else:
            self.selected = self.index_at(pos)

        if self.selected is not None and frame.secondary_pressed:
            logger.debug("Removing control point %d", self.selected)
            self.curve.remove_point(self.selected)
            self.selected = None
        elif self.selected is None and frame.primary_pressed:
            self.curve.add_point(Point(pos, self.next_color()))
            logger.debug("Added control point %d at %s", len(self.curve) - 1, pos)

        if not frame.primary_down:
            self.selected = None

        if frame.toggle_bounding:
            self.draw_bounding = not self.draw_bounding
        if frame.toggle_grid:
            self.draw_grid = not self.draw_grid
        if frame.toggle_mode:
            self.curve.toggle_mode()

    def reset(self) -> None:
        self.curve.clear()
        self.selected = None

    # ---------- drawing ----------
    def draw(self, sink: DrawSink) -> None:
        """Everything but the grid, in painting order."""
        self.curve.draw_controls(sink)
        self.curve.draw(sink, self.draw_bounding)
