import logging

import pytest

from bezedit.core import BERNSTEIN, CASTELJAU, Curve, EditorConfig, InsufficientControlPoints, coarse_box
from bezedit.core.curve import Role, role_of, segment_count
from bezedit.core.draw import Circle, Line, PrimitiveRecorder, Rect, Text
from tests.conftest import C0, C3, make_points


@pytest.mark.parametrize("n, expected", [
    (0, 0), (1, 0), (3, 0), (4, 1), (5, 1), (6, 1), (7, 2), (9, 2), (10, 3), (13, 4),
])
def test_segment_count(n, expected):
    assert segment_count(n) == expected
    assert Curve(make_points(*[(i, i) for i in range(n)])).segment_count == expected


def test_windows_share_anchors():
    curve = Curve(make_points(*[(i, 0) for i in range(10)]))
    windows = list(curve.windows())
    assert [[p.x for p in w] for w in windows] == [
        [0, 1, 2, 3],
        [3, 4, 5, 6],
        [6, 7, 8, 9],
    ]
    assert windows[0][3] is windows[1][0]


def test_roles_follow_index():
    assert [role_of(i) for i in range(7)] == [
        Role.ANCHOR, Role.FIRST_HANDLE, Role.SECOND_HANDLE,
        Role.ANCHOR, Role.FIRST_HANDLE, Role.SECOND_HANDLE,
        Role.ANCHOR,
    ]


def test_segment_accessor(curve):
    assert list(curve.segment(0)) == curve.control
    with pytest.raises(InsufficientControlPoints):
        curve.segment(1)
    with pytest.raises(InsufficientControlPoints):
        Curve().segment(0)


def test_new_curve_is_dirty_and_rebuild_cleans(curve):
    assert curve.dirty
    curve.rebuild()
    assert not curve.dirty
    assert len(curve.rendered) == 11
    assert len(curve.boxes) == 2


def test_sample_parameters_are_deterministic(curve):
    first = [p.pos for p in curve.samples()]
    curve.move_point(1, curve.control[1].pos)
    second = [p.pos for p in curve.samples()]
    assert first == second


def test_end_to_end_polynomial(arch):
    curve = Curve(list(arch), mode=BERNSTEIN)
    samples = curve.samples()

    assert len(samples) == EditorConfig().samples_per_segment + 1
    assert samples[0].pos == (0.0, 0.0)
    assert samples[0].color == C0
    assert samples[-1].pos == pytest.approx((100.0, 0.0))
    assert samples[-1].color.to_vec() == pytest.approx(C3.to_vec())

    (min_x, min_y), (max_x, max_y) = coarse_box(arch)
    for p in samples:
        assert min_x <= p.x <= max_x
        assert min_y <= p.y <= max_y


def test_boxes_per_segment(arch):
    curve = Curve(list(arch) + make_points((200, 0), (200, 100), (300, 100)))
    boxes = curve.bounding_boxes()
    assert len(boxes) == 4
    coarse, tight = boxes[0], boxes[1]
    assert coarse.point_min == (0.0, 0.0) and coarse.point_max == (100.0, 100.0)
    assert coarse.contains(tight, eps=1e-9)
    assert tight.point_max[1] == pytest.approx(75.0)
    assert boxes[2].point_min == (100.0, 0.0)


def test_clean_read_does_not_recompute(curve, monkeypatch):
    curve.samples()
    calls = []
    monkeypatch.setattr(curve, "rebuild", lambda: calls.append(1))
    curve.samples()
    curve.bounding_boxes()
    curve.draw(PrimitiveRecorder())
    assert calls == []


def test_mutations_mark_dirty(curve):
    curve.rebuild()
    curve.add_point(make_points((1, 1))[0])
    assert curve.dirty
    curve.rebuild()
    curve.move_point(0, (5.0, 5.0))
    assert curve.dirty
    assert curve.control[0].pos == (5.0, 5.0)
    curve.rebuild()
    curve.remove_point(4)
    assert curve.dirty


def test_mode_change_marks_dirty(curve):
    curve.rebuild()
    curve.set_mode(curve.mode)
    assert not curve.dirty
    assert curve.toggle_mode() == CASTELJAU
    assert curve.dirty
    curve.rebuild()
    assert curve.toggle_mode() == BERNSTEIN


def test_toggle_mode_logs(curve, caplog):
    with caplog.at_level(logging.INFO, logger="bezedit.core.curve"):
        curve.toggle_mode()
    assert "casteljau" in caplog.text


def test_mode_changes_colors_not_positions(arch, small_config):
    poly = Curve(list(arch), mode=BERNSTEIN, config=small_config).samples()
    rec = Curve(list(arch), mode=CASTELJAU, config=small_config).samples()
    for a, b in zip(poly, rec):
        assert a.pos == pytest.approx(b.pos, abs=1e-9)
    assert poly[5].color != rec[5].color


def test_out_of_range_mutation(curve):
    with pytest.raises(IndexError):
        curve.remove_point(4)
    with pytest.raises(IndexError):
        curve.move_point(-1, (0.0, 0.0))


def test_unknown_mode_rejected(arch):
    with pytest.raises(KeyError):
        Curve(list(arch), mode="hermite")


def test_too_few_points_gives_empty_caches(curve):
    curve.rebuild()
    assert curve.rendered
    curve.remove_point(0)
    assert curve.samples() == []
    assert curve.bounding_boxes() == []
    assert not curve.dirty


def test_clear(curve):
    curve.clear()
    assert len(curve) == 0
    assert curve.samples() == []


def test_draw_curve_and_boxes(curve):
    sink = PrimitiveRecorder()
    curve.draw(sink)
    assert len(sink.of_type(Rect)) == 11
    assert sink.of_type(Line) == []

    sink.clear()
    curve.draw(sink, draw_bounding=True)
    # two boxes of 4 edges each, plus one extremum marker
    assert len(sink.of_type(Line)) == 8
    assert [t.label for t in sink.of_type(Text)] == ["y0"]
    assert len(sink.of_type(Circle)) == 2 * 2 + 1


def test_draw_controls(curve):
    sink = PrimitiveRecorder()
    curve.draw_controls(sink)
    circles = sink.of_type(Circle)
    assert [c.center for c in circles] == [p.pos for p in curve.control]
    assert all(c.radius == curve.config.pick_radius for c in circles)
    lines = sink.of_type(Line)
    assert [(l.a, l.b) for l in lines] == [
        (curve.control[0].pos, curve.control[1].pos),
        (curve.control[3].pos, curve.control[2].pos),
    ]
    assert lines[0].color == curve.control[0].color.lerp(curve.control[1].color, 0.5)
    assert [t.label for t in sink.of_type(Text)] == ["a", "b", "c", "d"]


def test_draw_controls_without_segment():
    curve = Curve(make_points((0, 0), (1, 1)))
    sink = PrimitiveRecorder()
    curve.draw_controls(sink)
    assert len(sink.of_type(Circle)) == 2
    assert sink.of_type(Line) == []
