import math

import pytest

from pobruntime.geometry import Point, Quad, Rect, Size, Vector


def test_point_to_vector_keeps_coordinates():
    v = Point(1.5, -2.0).to_vector()
    assert v == Vector(1.5, -2.0)


def test_point_translate_round_trip():
    p = Point(3.0, 4.0)
    by = Vector(7.25, -1.5)
    assert p.translate(by).translate(-by) == p


def test_point_translate_by_zero_is_identity():
    p = Point(2.0, 9.0)
    assert p.translate(Vector()) == p
    assert p + Vector() == p


def test_point_difference_gives_vector_back():
    a = Point(1.0, 2.0)
    by = Vector(5.0, 6.0)
    assert a.translate(by) - a == by


def test_rect_zero_is_empty():
    r = Rect.zero()
    assert r.min == Point(0.0, 0.0)
    assert r.max == Point(0.0, 0.0)
    assert r.is_empty()


def test_rect_corners():
    r = Rect(Point(1.0, 2.0), Point(5.0, 7.0))
    assert r.top_left() == Point(1.0, 2.0)
    assert r.top_right() == Point(5.0, 2.0)
    assert r.bottom_left() == Point(1.0, 7.0)
    assert r.bottom_right() == Point(5.0, 7.0)


def test_rect_from_origin_and_size_width_and_height():
    r = Rect.from_origin_and_size(Point(10.0, 20.0), Size(30.0, 40.0))
    assert r.top_left() == Point(10.0, 20.0)
    assert r.width == 30.0
    assert r.height == 40.0
    assert not r.is_empty()


@pytest.mark.parametrize(
    "rect",
    [
        Rect(Point(0.0, 0.0), Point(0.0, 5.0)),
        Rect(Point(0.0, 0.0), Point(5.0, 0.0)),
        Rect(Point(5.0, 5.0), Point(1.0, 1.0)),
        Rect(Point(0.0, 0.0), Point(math.nan, 1.0)),
    ],
)
def test_rect_is_empty_cases(rect):
    assert rect.is_empty()


def test_rect_translate_round_trip_keeps_size():
    r = Rect(Point(1.0, 2.0), Point(5.0, 7.0))
    by = Vector(3.0, -4.0)
    moved = r.translate(by)
    assert moved.width == r.width
    assert moved.height == r.height
    assert moved.min == r.min.translate(by)
    assert moved.translate(-by) == r


def test_quad_zero_matches_default():
    assert Quad.zero() == Quad()
    assert all(p == Point(0.0, 0.0) for p in Quad.zero())


def test_quad_from_size_points():
    q = Quad.from_size(Size(3.0, 4.0))
    assert q.p0 == Point(0.0, 0.0)
    assert q.p1 == Point(3.0, 0.0)
    assert q.p2 == Point(3.0, 4.0)
    assert q.p3 == Point(0.0, 4.0)


def test_quad_translate_moves_every_point():
    q = Quad.from_size(Size(2.0, 6.0))
    by = Vector(1.0, 1.0)
    moved = q.translate(by)
    assert list(moved) == [p.translate(by) for p in q]
    assert moved.translate(-by) == q


def test_shapes_are_hashable_and_equal_by_value():
    a = Quad.from_size(Size(1.0, 2.0))
    b = Quad.from_size(Size(1.0, 2.0))
    assert a == b
    assert hash(a) == hash(b)
    assert len({Rect.zero(), Rect.zero()}) == 1