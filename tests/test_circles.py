import math
import random

import pytest

from algokit.circles import (
    circle_intersection_area,
    circumcenter,
    circumradius,
    closest_pair,
    equal_circles_point,
    is_collinear,
    minimum_enclosing_circle,
)
from algokit.point import Point


def test_is_collinear():
    assert is_collinear(Point(0, 0), Point(1, 1), Point(3, 3))
    assert not is_collinear(Point(0, 0), Point(1, 1), Point(3, 4))


def test_circumcenter_equidistant():
    a, b, c = Point(0, 0), Point(4, 0), Point(1, 3)
    o = circumcenter(a, b, c)
    assert o.dist(a) == pytest.approx(o.dist(b))
    assert o.dist(a) == pytest.approx(o.dist(c))
    assert circumradius(a, b, c) == pytest.approx(o.dist(a))


def test_mec_contains_all_points():
    rng = random.Random(7)
    pts = [Point(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(50)]
    centre, radius = minimum_enclosing_circle(pts, random.Random(1))
    distances = [centre.dist(p) for p in pts]
    assert max(distances) <= radius * (1 + 1e-7)
    assert max(distances) == pytest.approx(radius)


def test_mec_two_points():
    a, b = Point(0, 0), Point(6, 8)
    centre, radius = minimum_enclosing_circle([a, b], random.Random(0))
    assert radius == pytest.approx(a.dist(b) / 2)
    assert centre.dist(a) == pytest.approx(centre.dist(b))


def test_mec_empty():
    with pytest.raises(ValueError):
        minimum_enclosing_circle([])


def test_circle_intersection_area_cases():
    assert circle_intersection_area(Point(0, 0), Point(10, 0), 1, 2) == 0
    assert circle_intersection_area(Point(0, 0), Point(0, 0), 3, 3) == pytest.approx(math.pi * 9)
    assert circle_intersection_area(Point(0, 0), Point(1, 0), 1, 5) == pytest.approx(math.pi)


def test_circle_intersection_area_partial():
    a, b = Point(0, 0), Point(1, 0)
    area = circle_intersection_area(a, b, 1, 1.5)
    assert 0 < area < math.pi
    assert circle_intersection_area(b, a, 1.5, 1) == pytest.approx(area)


def test_equal_circles_point():
    a, b, r = Point(0, 0), Point(2, 0), 2
    p = equal_circles_point(a, b, Point(0, 0), r)
    assert p.dist(a) == pytest.approx(r)
    assert p.dist(b) == pytest.approx(r)


def test_equal_circles_point_too_far():
    assert equal_circles_point(Point(0, 0), Point(10, 0), Point(0, 0), 1) is None


def test_closest_pair_matches_minimum():
    rng = random.Random(2)
    pts = [Point(rng.randint(0, 1000), rng.randint(0, 1000)) for _ in range(200)]
    i, j = closest_pair(pts)
    best = min((pts[a] - pts[b]).dist2()
               for a in range(len(pts)) for b in range(a + 1, len(pts)))
    assert i != j
    assert (pts[i] - pts[j]).dist2() == best


def test_closest_pair_small():
    pts = [Point(0, 0), Point(100, 100), Point(1, 1)]
    assert set(closest_pair(pts)) == {0, 2}


def test_closest_pair_needs_two():
    with pytest.raises(ValueError):
        closest_pair([Point(0, 0)])