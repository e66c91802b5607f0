"""Circles through points, enclosing circles, circle overlaps and closest pairs."""

import math
import random

from sortedcontainers import SortedList

from .point import EPS, Point, dcmp


def is_collinear(a, b, c):
    return dcmp((b - a).cross(c - a), 0) == 0


def circumcenter(a, b, c):
    """Centre of the circle through three non-collinear points."""
    vb, vc = c - a, b - a
    return a + (vb * vc.dist2() - vc * vb.dist2()).perp() / vb.cross(vc) / 2


def circumradius(a, b, c):
    return ((b - a).dist() * (c - b).dist() * (a - c).dist()
            / abs((b - a).cross(c - a)) / 2)


def minimum_enclosing_circle(points, rng=None):
    """Smallest circle containing all points, as ``(centre, radius)``."""
    ps = list(points)
    if not ps:
        raise ValueError("no points given")
    (rng or random.Random()).shuffle(ps)
    tolerance = 1 + 1e-8
    centre, radius = ps[0], 0.0
    for i, pi in enumerate(ps):
        if (centre - pi).dist() <= radius * tolerance:
            continue
        centre, radius = pi, 0.0
        for j in range(i):
            pj = ps[j]
            if (centre - pj).dist() <= radius * tolerance:
                continue
            centre = (pi + pj) / 2
            radius = (centre - pi).dist()
            for k in range(j):
                if (centre - ps[k]).dist() > radius * tolerance:
                    centre = circumcenter(pi, pj, ps[k])
                    radius = (centre - pi).dist()
    return centre, radius


def circle_intersection_area(a, b, r1, r2):
    """Area common to circles centred at ``a`` and ``b`` with radii ``r1`` and ``r2``."""
    if r1 > r2:
        r1, r2 = r2, r1
        a, b = b, a
    d = math.hypot(a.x - b.x, a.y - b.y)
    if d >= r1 + r2:
        return 0.0
    if d + r1 <= r2:
        return math.pi * r1 * r1

    def clamped_acos(v):
        return math.acos(max(-1.0, min(1.0, v)))

    theta = clamped_acos((d * d + r2 * r2 - r1 * r1) / (2 * d * r2))
    alpha = clamped_acos((d * d + r1 * r1 - r2 * r2) / (2 * d * r1))
    s1 = theta * r2 * r2 - 0.5 * r2 * r2 * math.sin(2 * theta)
    s2 = alpha * r1 * r1 - 0.5 * r1 * r1 * math.sin(2 * alpha)
    return s1 + s2


def equal_circles_point(a, b, c, r):
    """A crossing point of the radius-``r`` circles at ``a`` and ``b`` within ``r`` of ``c``.

    Returns None when the circles do not meet or no crossing point is close enough.
    """
    vec = b - a
    d2 = vec.dist2()
    if d2 == 0:
        raise ValueError("circle centres coincide")
    total = 2 * r
    if total * total < d2:
        return None
    h2 = r * r - 0.25 * d2
    mid = a + vec * 0.5
    offset = vec.perp() * math.sqrt(max(0.0, h2) / d2)
    for candidate in (mid + offset, mid - offset):
        if (candidate - c).dist2() - r * r <= EPS:
            return candidate
    return None


def closest_pair(points):
    """Indices ``(i, j)`` of a pair of points at minimum distance."""
    pts = list(points)
    if len(pts) < 2:
        raise ValueError("need at least two points")
    order = sorted(((p, i) for i, p in enumerate(pts)), key=lambda item: item[0].y)
    window = SortedList()
    best = None
    j = 0
    for p, idx in order:
        reach = math.inf if best is None else int(math.sqrt(best[0])) + 1
        while order[j][0].y <= p.y - reach:
            q, qi = order[j]
            window.remove((q.x, q.y, qi))
            j += 1
        for x, y, k in window.irange((p.x - reach, p.y, -1), (p.x + reach, p.y, math.inf)):
            candidate = ((Point(x, y) - p).dist2(), (k, idx))
            if best is None or candidate < best:
                best = candidate
        window.add((p.x, p.y, idx))
    return best[1]