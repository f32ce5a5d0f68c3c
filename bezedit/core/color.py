from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtGui import QColor


@dataclass(frozen=True)
class Color:
    """
    Pure-theory RGBA color container, every channel a float in 0..1.
    Blending treats the color as a 4-vector.
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    @staticmethod
    def from_rgb(r: int, g: int, b: int, a: int = 255) -> "Color":
        return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_vec(self, /) -> tuple[float, float, float, float]:
        return self.r, self.g, self.b, self.a

    def to_rgba(self) -> tuple[int, int, int, int]:
        return tuple(max(0, min(255, int(round(c * 255)))) for c in self.to_vec())

    def lerp(self, other: "Color", t: float) -> "Color":
        return Color(*(c0 + (c1 - c0) * t for c0, c1 in zip(self.to_vec(), other.to_vec())))

    def to_QColor(self) -> "QColor":
        from PySide6.QtGui import QColor
        r, g, b, a = self.to_rgba()
        return QColor(r, g, b, a)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
BLUE = Color(0.0, 0.47, 0.95, 1.0)
GOLD = Color(1.0, 0.8, 0.0, 1.0)
GREEN = Color(0.0, 0.89, 0.19, 1.0)
ORANGE = Color(1.0, 0.63, 0.0, 1.0)
PURPLE = Color(0.78, 0.48, 1.0, 1.0)
RED = Color(0.9, 0.16, 0.22, 1.0)
YELLOW = Color(0.99, 0.98, 0.0, 1.0)
