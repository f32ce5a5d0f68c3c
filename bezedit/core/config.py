from dataclasses import dataclass, fields
from typing import Any, Mapping

from .color import BLUE, GOLD, ORANGE, PURPLE, RED, YELLOW, Color
from .evaluators import BERNSTEIN
from .registries import evaluator_registry


@dataclass(frozen=True)
class EditorConfig:
    """
    Tunables of the editor:
      - pick_radius: selection distance, also the drawn control point radius
      - samples_per_segment: steps per segment, t = i / samples_per_segment inclusive
      - palette: colors cycled for inserted points
      - initial_mode: evaluation mode name from the evaluator registry
    """
    pick_radius: float = 10.0
    samples_per_segment: int = 200
    palette: tuple[Color, ...] = (ORANGE, BLUE, RED, PURPLE)
    coarse_point_color: Color = BLUE
    coarse_outline_color: Color = BLUE
    tight_point_color: Color = RED
    tight_outline_color: Color = GOLD
    marker_color: Color = RED
    label_color: Color = YELLOW
    box_corner_radius: float = 5.0
    label_size: float = 42.0
    marker_size: float = 20.0
    initial_mode: str = BERNSTEIN
    tick_interval_ms: int = 16

    def __post_init__(self):
        if self.pick_radius <= 0:
            raise ValueError(f"pick_radius must be positive, got {self.pick_radius}")
        if self.samples_per_segment < 1:
            raise ValueError(f"samples_per_segment must be >= 1, got {self.samples_per_segment}")
        if not self.palette:
            raise ValueError("palette must hold at least one color")
        if self.initial_mode not in evaluator_registry:
            raise ValueError(f"Unknown evaluation mode '{self.initial_mode}'")
        if self.tick_interval_ms < 1:
            raise ValueError(f"tick_interval_ms must be >= 1, got {self.tick_interval_ms}")

    @property
    def sample_parameters(self) -> list[float]:
        n = self.samples_per_segment
        return [i / n for i in range(n + 1)]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EditorConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        kwargs = dict(data)
        if "palette" in kwargs:
            kwargs["palette"] = tuple(kwargs["palette"])
        return cls(**kwargs)
