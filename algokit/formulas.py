"""Closed-form measurements and a few small constructions on circles and hulls."""

import math
from dataclasses import dataclass

from .shapes import triangle_area_sides


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    r: float


def soddy_radius(r1, r2, r3):
    """Radius of the inner Soddy circle touching three mutually tangent circles."""
    delta = math.sqrt(r1 * r2 * r3 * (r1 + r2 + r3))
    return r1 * r2 * r3 / (r2 * r3 + r3 * r1 + r1 * r2 + 2 * delta)


def triangle_area_medians(a, b, c):
    """Triangle area from the lengths of its three medians."""
    return 4 / 3 * triangle_area_sides(a, b, c)


def triangle_area_altitudes(a, b, c):
    """Triangle area from the lengths of its three altitudes."""
    s = (1 / a + 1 / b + 1 / c) / 2
    product = s * (s - 1 / a) * (s - 1 / b) * (s - 1 / c)
    if product <= 0:
        raise ValueError("altitudes do not form a triangle")
    return 1 / (4 * math.sqrt(product))


def triangle_area_angles(a, b, c, side):
    """Triangle area from its three angles and the side opposite angle ``a``."""
    sa, sb, sc = math.sin(a), math.sin(b), math.sin(c)
    s = (sa + sb + sc) / 2
    diameter = side / sa
    return diameter * diameter * math.sqrt(max(0.0, s * (s - sa) * (s - sb) * (s - sc)))


def regular_polygon_area(side, n):
    return n * side * side / math.tan(math.pi / n) / 4


def regular_polygon_angle(n):
    """Interior angle of a regular polygon with ``n`` sides."""
    return (n - 2) * math.pi / n


def sector_area(r, theta):
    return r * r * theta / 2


def frustum_volume(h, r1, r2):
    """Volume of a truncated cone of height ``h`` with end radii ``r1`` and ``r2``."""
    return math.pi * h / 3 * (r1 * r1 + r1 * r2 + r2 * r2)


def intersection_inside(a, b, c):
    """Whether a crossing point of circles ``a`` and ``b`` lies strictly inside ``c``."""
    dx, dy = b.x - a.x, b.y - a.y
    d = math.hypot(dx, dy)
    if d == 0:
        return False
    along = (a.r ** 2 - b.r ** 2 + d ** 2) / (2 * d)
    h_squared = a.r ** 2 - along ** 2
    if h_squared < 0:
        return False
    h = math.sqrt(h_squared)
    mx, my = a.x + along * dx / d, a.y + along * dy / d
    for sign in (1, -1):
        px = mx + sign * h * dy / d
        py = my - sign * h * dx / d
        if math.hypot(px - c.x, py - c.y) < c.r:
            return True
    return False


def _ccw(a, b, c):
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]) > 0


def lattice_hull(points):
    """Counter-clockwise convex hull of integer points, collinear points dropped."""
    pts = sorted(tuple(p) for p in points)
    hull = []
    for p in pts:
        while len(hull) > 1 and not _ccw(hull[-2], hull[-1], p):
            hull.pop()
        hull.append(p)
    lower = len(hull)
    for i in range(len(pts) - 2, -1, -1):
        while len(hull) > lower and not _ccw(hull[-2], hull[-1], pts[i]):
            hull.pop()
        if i == 0:
            break
        hull.append(pts[i])
    return hull