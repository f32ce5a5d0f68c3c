from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .color import Color
from .math import Vec2


@dataclass(frozen=True)
class Circle:
    center: Vec2
    radius: float
    color: Color


@dataclass(frozen=True)
class Rect:
    pos: Vec2
    size: Vec2
    color: Color


@dataclass(frozen=True)
class Line:
    a: Vec2
    b: Vec2
    width: float
    color: Color


@dataclass(frozen=True)
class Text:
    label: str
    pos: Vec2
    size: float
    color: Color


Primitive = Circle | Rect | Line | Text


class DrawSink(ABC):
    """
    GUI-agnostic drawing target. The core emits primitives, a backend paints them.
    """

    @abstractmethod
    def circle(self, center: Vec2, radius: float, color: Color) -> None:
        """Filled circle."""

    @abstractmethod
    def rect(self, pos: Vec2, color: Color, size: Vec2 = (1.0, 1.0)) -> None:
        """Filled rectangle with its top-left corner at pos."""

    @abstractmethod
    def line(self, a: Vec2, b: Vec2, width: float, color: Color) -> None:
        """Line segment from a to b."""

    @abstractmethod
    def text(self, label: str, pos: Vec2, size: float, color: Color) -> None:
        """Text label anchored at pos."""


@dataclass
class PrimitiveRecorder(DrawSink):
    """
    Collects primitives in emission order instead of painting them.
    """
    primitives: list[Primitive] = field(default_factory=list)

    def circle(self, center: Vec2, radius: float, color: Color) -> None:
        self.primitives.append(Circle(center, radius, color))

    def rect(self, pos: Vec2, color: Color, size: Vec2 = (1.0, 1.0)) -> None:
        self.primitives.append(Rect(pos, size, color))

    def line(self, a: Vec2, b: Vec2, width: float, color: Color) -> None:
        self.primitives.append(Line(a, b, width, color))

    def text(self, label: str, pos: Vec2, size: float, color: Color) -> None:
        self.primitives.append(Text(label, pos, size, color))

    def of_type(self, kind: type) -> list[Primitive]:
        return [p for p in self.primitives if isinstance(p, kind)]

    def clear(self) -> None:
        self.primitives.clear()
