import pytest

from bezedit.core import Color, Curve, CurveEditor, EditorConfig, Point
from bezedit.core.color import BLUE, ORANGE, PURPLE, RED

C0 = Color(1.0, 0.0, 0.0, 1.0)
C1 = Color(0.0, 1.0, 0.0, 1.0)
C2 = Color(0.0, 0.0, 1.0, 1.0)
C3 = Color(1.0, 1.0, 1.0, 0.5)


def make_points(*coords, colors=(ORANGE, BLUE, RED, PURPLE)):
    return [Point((float(x), float(y)), colors[i % len(colors)]) for i, (x, y) in enumerate(coords)]


@pytest.fixture
def arch():
    """The (0,0) (0,100) (100,100) (100,0) arch with four distinct colors."""
    return [
        Point((0.0, 0.0), C0),
        Point((0.0, 100.0), C1),
        Point((100.0, 100.0), C2),
        Point((100.0, 0.0), C3),
    ]


@pytest.fixture
def small_config():
    return EditorConfig(samples_per_segment=10)


@pytest.fixture
def curve(arch, small_config):
    return Curve(list(arch), config=small_config)


@pytest.fixture
def editor(small_config):
    return CurveEditor(config=small_config)
