import pytest

from bezedit.core.color import Color
from bezedit.core.draw import Circle, Line, PrimitiveRecorder, Rect, Text


def test_color_lerp_as_four_vector():
    a = Color(0.0, 0.2, 1.0, 1.0)
    b = Color(1.0, 0.4, 0.0, 0.0)
    assert a.lerp(b, 0.25).to_vec() == pytest.approx((0.25, 0.25, 0.75, 0.75))
    assert a.lerp(b, 0.0) == a


def test_color_from_and_to_rgb():
    c = Color.from_rgb(255, 0, 51)
    assert c.to_vec() == pytest.approx((1.0, 0.0, 0.2, 1.0))
    assert c.to_rgba() == (255, 0, 51, 255)


def test_to_rgba_clamps_extrapolated_colors():
    c = Color(0.0, 0.0, 0.0, 1.0).lerp(Color(1.0, 1.0, 1.0, 1.0), 1.5)
    assert c.to_rgba() == (255, 255, 255, 255)


def test_recorder_keeps_emission_order():
    sink = PrimitiveRecorder()
    red = Color(1.0, 0.0, 0.0)
    sink.circle((1.0, 1.0), 3.0, red)
    sink.rect((2.0, 2.0), red)
    sink.line((0.0, 0.0), (1.0, 1.0), 2.0, red)
    sink.text("a", (5.0, 5.0), 42.0, red)
    assert sink.primitives == [
        Circle((1.0, 1.0), 3.0, red),
        Rect((2.0, 2.0), (1.0, 1.0), red),
        Line((0.0, 0.0), (1.0, 1.0), 2.0, red),
        Text("a", (5.0, 5.0), 42.0, red),
    ]
    assert sink.of_type(Text) == [Text("a", (5.0, 5.0), 42.0, red)]
    sink.clear()
    assert sink.primitives == []
