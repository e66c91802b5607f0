"""Circles, polygons and triangles on complex-number points."""

import math
from functools import cmp_to_key

from .line import on_segment
from .vec import EPS, cross, dot, orient, perp, sgn, sq


def project(a, b, p):
    """Projection of ``p`` onto the line through ``a`` and ``b``."""
    v = b - a
    return a + v * dot(v, p - a) / sq(v)


def circle_line_intersection(c, r, a, b):
    """Points where the circle (``c``, ``r``) meets the line through ``a`` and ``b``."""
    p = project(a, b, c)
    d = abs(p - c)
    if sgn(d - r) > 0:
        return []
    if sgn(d - r) == 0:
        return [p]
    offset = math.sqrt(max(0.0, r * r - d * d))
    v = (b - a) / abs(b - a)
    return [p + v * offset, p - v * offset]


def circle_circle_intersection(c1, r1, c2, r2):
    """Points common to two circles; None when the circles coincide."""
    d = abs(c2 - c1)
    if sgn(d - (r1 + r2)) > 0 or sgn(d - abs(r1 - r2)) < 0:
        return []
    if sgn(d) == 0 and sgn(r1 - r2) == 0:
        return None
    a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    h = math.sqrt(max(0.0, r1 * r1 - a * a))
    p = c1 + (c2 - c1) * (a / d)
    offset = perp(c2 - c1) * (h / d)
    if sgn(h) == 0:
        return [p + offset]
    return [p + offset, p - offset]


def _edges(points):
    points = list(points)
    return zip(points, points[1:] + points[:1])


def polygon_area(points):
    """Unsigned area of a simple polygon."""
    return abs(sum(cross(p, q) for p, q in _edges(points))) / 2.0


def _crosses_ray(a, p, q):
    above_q = q.imag >= a.imag
    above_p = p.imag >= a.imag
    return (above_q - above_p) * sgn(orient(a, p, q)) > 0


def in_polygon(points, a, strict=True):
    """Whether ``a`` lies inside the polygon; boundary counts only if not strict."""
    crossings = 0
    for p, q in _edges(points):
        if on_segment(p, q, a):
            return not strict
        crossings += _crosses_ray(a, p, q)
    return crossings % 2 == 1


def _compare(a, b):
    if abs(a.real - b.real) > EPS:
        return -1 if a.real < b.real else 1
    if a.imag < b.imag - EPS:
        return -1
    if b.imag < a.imag - EPS:
        return 1
    return 0


def convex_hull(points):
    """Counter-clockwise hull without collinear points, starting at the lowest-left point."""
    pts = list(points)
    if len(pts) <= 2:
        return pts
    pts.sort(key=cmp_to_key(_compare))
    hull = []
    for p in pts:
        while len(hull) >= 2 and sgn(orient(hull[-2], hull[-1], p)) <= 0:
            hull.pop()
        hull.append(p)
    lower = len(hull) + 1
    for p in reversed(pts[:-1]):
        while len(hull) >= lower and sgn(orient(hull[-2], hull[-1], p)) <= 0:
            hull.pop()
        hull.append(p)
    hull.pop()
    return hull


def segment_lattice_points(x1, y1, x2, y2):
    """Number of integer points on the segment between two integer points."""
    return math.gcd(x1 - x2, y1 - y2) + 1


def triangle_area(a, b, c):
    return abs(cross(b - a, c - a)) / 2.0


def triangle_area_base_height(b, h):
    return b * h / 2


def triangle_area_sides_angle(a, b, t):
    """Area from two sides and the angle between them."""
    return abs(a * b * math.sin(t) / 2)


def triangle_area_angles_side(t1, t2, s):
    """Area from one side and the two angles adjacent to it."""
    return abs(s * s * math.sin(t1) * math.sin(t2) / (2 * math.sin(t1 + t2)))


def triangle_area_sides(a, b, c):
    """Heron's formula; raises ValueError if the sides form no triangle."""
    s = (a + b + c) / 2
    product = s * (s - a) * (s - b) * (s - c)
    if product < -EPS:
        raise ValueError("sides do not form a triangle")
    return math.sqrt(max(0.0, product))


def triangle_area_points(a, b, c):
    return abs(cross(a, b) + cross(b, c) + cross(c, a)) / 2