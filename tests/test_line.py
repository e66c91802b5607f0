import math

import pytest

from algokit.line import (
    Line,
    bisector,
    in_disk,
    intersection,
    on_segment,
    proper_intersection,
    segment_intersections,
    segment_point_distance,
    segment_segment_distance,
)
from algokit.vec import is_perp


def test_through_contains_both_points():
    p, q = complex(1, 2), complex(4, -3)
    line = Line.through(p, q)
    assert line.side(p) == pytest.approx(0)
    assert line.side(q) == pytest.approx(0)


def test_from_coefficients_matches_equation():
    line = Line.from_coefficients(2, 3, 6)
    for x in (0.0, 1.5, 3.0):
        y = (6 - 2 * x) / 3
        assert line.side(complex(x, y)) == pytest.approx(0)


def test_side_sign_left_and_right():
    line = Line.through(0j, complex(1, 0))
    assert line.side(complex(0, 1)) > 0
    assert line.side(complex(0, -1)) < 0


def test_projection_and_reflection():
    line = Line.through(complex(-1, 2), complex(3, 5))
    p = complex(4, -2)
    foot = line.proj(p)
    mirror = line.refl(p)
    assert line.dist(foot) == pytest.approx(0, abs=1e-9)
    assert (p + mirror) / 2 == pytest.approx(foot)
    assert line.refl(mirror) == pytest.approx(p)
    assert line.dist(p) == pytest.approx(abs(p - foot))
    assert line.sq_dist(p) == pytest.approx(line.dist(p) ** 2)


def test_perpendicular_through():
    line = Line.through(0j, complex(2, 1))
    p = complex(5, 5)
    other = line.perpendicular_through(p)
    assert other.side(p) == pytest.approx(0)
    assert is_perp(line.v, other.v)


def test_shift_left_and_translate():
    line = Line.through(complex(1, 1), complex(3, 2))
    p = complex(1, 1)
    assert line.shift_left(2.5).dist(p) == pytest.approx(2.5)
    t = complex(3, -4)
    moved = line.translate(t)
    assert moved.side(p + t) == pytest.approx(0)


def test_cmp_proj_orders_along_direction():
    line = Line.through(0j, complex(1, 1))
    assert line.cmp_proj(complex(0, 0), complex(1, 0))
    assert not line.cmp_proj(complex(1, 0), complex(0, 0))


def test_same_line():
    a = Line.through(complex(0, 1), complex(2, 3))
    b = Line.through(complex(5, 6), complex(-1, 0))
    c = Line.through(complex(0, 0), complex(2, 2))
    assert a.same_line(b)
    assert not a.same_line(c)


def test_intersection_lies_on_both():
    l1 = Line.through(complex(0, 0), complex(4, 2))
    l2 = Line.through(complex(0, 3), complex(3, -1))
    point = intersection(l1, l2)
    assert l1.side(point) == pytest.approx(0, abs=1e-9)
    assert l2.side(point) == pytest.approx(0, abs=1e-9)


def test_intersection_parallel_is_none():
    l1 = Line.through(0j, complex(1, 1))
    assert intersection(l1, l1.translate(complex(0, 1))) is None


def test_bisector_equidistant():
    l1 = Line.through(0j, complex(1, 0))
    l2 = Line.through(0j, complex(1, 2))
    bis = bisector(l1, l2, True)
    q = bis.proj(complex(3, 4))
    assert l1.dist(q) == pytest.approx(l2.dist(q))


def test_bisector_of_parallel_lines_raises():
    line = Line.through(0j, complex(1, 0))
    with pytest.raises(ValueError):
        bisector(line, line.translate(complex(0, 2)), True)


def test_in_disk_and_on_segment():
    a, b = 0j, complex(4, 0)
    assert in_disk(a, b, complex(2, 1.5))
    assert not in_disk(a, b, complex(2, 3))
    assert on_segment(a, b, complex(1, 0))
    assert not on_segment(a, b, complex(5, 0))


def test_proper_intersection():
    point = proper_intersection(0j, complex(2, 2), complex(0, 2), complex(2, 0))
    assert point == pytest.approx(complex(1, 1))
    assert proper_intersection(0j, complex(1, 0), complex(0, 1), complex(1, 1)) is None
    # Touching at an endpoint is not proper.
    assert proper_intersection(0j, complex(2, 0), complex(1, 0), complex(1, 2)) is None


def test_segment_point_distance():
    a, b = 0j, complex(4, 0)
    assert segment_point_distance(a, b, complex(2, 3)) == pytest.approx(3)
    assert segment_point_distance(a, b, complex(7, 4)) == pytest.approx(abs(complex(7, 4) - b))
    assert segment_point_distance(a, a, complex(0, 2)) == pytest.approx(2)


def test_segment_segment_distance():
    assert segment_segment_distance(0j, complex(2, 2), complex(0, 2), complex(2, 0)) == 0
    d = segment_segment_distance(0j, complex(4, 0), complex(1, 2), complex(3, 2))
    assert d == pytest.approx(2)


def test_segment_intersections_cases():
    shared = segment_intersections(0j, complex(1, 1), complex(1, 1), complex(2, 0))
    assert shared == [(1.0, 1.0)]
    overlap = segment_intersections(0j, complex(3, 0), complex(1, 0), complex(5, 0))
    assert overlap == [(1.0, 0.0), (3.0, 0.0)]
    assert segment_intersections(0j, complex(1, 0), complex(0, 1), complex(1, 1)) == []
    crossing = segment_intersections(0j, complex(2, 2), complex(0, 2), complex(2, 0))
    assert len(crossing) == 1
    assert math.isclose(crossing[0][0], crossing[0][1])