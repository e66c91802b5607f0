"""Distances and intersections of lines, segments and rays on ``Point`` values."""

from bisect import bisect_left
from functools import cmp_to_key

from .point import EPS, Point, dcmp

# Intersection kinds: NONE, SINGLE point, or INFINITE (overlap).
NONE = 0
SINGLE = 1
INFINITE = -1


def line_distance(p, s, e):
    """Distance from ``p`` to the line through ``s`` and ``e``."""
    if s == e:
        return s.dist(p)
    return abs((p - s).cross(e - s) / (e - s).dist())


def line_intersection(s1, e1, s2, e2):
    """Return ``(kind, point)`` for lines ``s1e1`` and ``s2e2``.

    ``kind`` is 1 with the crossing point, 0 for parallel lines and -1 for the
    same line; ``point`` is None unless ``kind`` is 1.
    """
    d = (e1 - s1).cross(e2 - s2)
    if dcmp(d, 0) == 0:
        return (INFINITE if dcmp(s1.cross(e1, s2), 0) == 0 else NONE), None
    p = s2.cross(e1, e2)
    q = s2.cross(e2, s1)
    return SINGLE, (s1 * p + e1 * q) / d


def on_segment(p, s, e):
    """Whether ``p`` lies on the segment ``se``."""
    return dcmp(p.cross(s, e), 0) == 0 and dcmp((s - p).dot(e - p), 0) <= 0


def segment_distance(p, s, e):
    """Distance from ``p`` to the segment ``se``."""
    if dcmp((p - s).dot(e - s), 0) <= 0:
        return s.dist(p)
    if dcmp((p - e).dot(e - s), 0) >= 0:
        return e.dist(p)
    return line_distance(p, s, e)


def segment_intersection(s1, e1, s2, e2):
    """Return ``(kind, point)`` for two segments; see ``line_intersection``.

    For an overlap the point is a shared endpoint.
    """
    kind, point = line_intersection(s1, e1, s2, e2)
    if kind == NONE:
        return NONE, None
    if kind == SINGLE:
        if on_segment(point, s1, e1) and on_segment(point, s2, e2):
            return SINGLE, point
        return NONE, None
    if on_segment(s1, s2, e2):
        return INFINITE, s1
    if on_segment(e1, s2, e2):
        return INFINITE, e1
    if on_segment(s2, s1, e1):
        return INFINITE, s2
    if on_segment(e2, s1, e1):
        return INFINITE, e2
    return NONE, None


def closest_on_segment(p, s, e):
    """Point of segment ``se`` closest to ``p``."""
    if (p - s).dot(e - s) <= 0:
        return s
    if (p - e).dot(e - s) >= 0:
        return e
    return p.project_on_line(s, e)


def segment_segment_distance(s1, e1, s2, e2):
    if segment_intersection(s1, e1, s2, e2)[0] != NONE:
        return 0.0
    return min(segment_distance(s1, s2, e2), segment_distance(e1, s2, e2),
               segment_distance(s2, s1, e1), segment_distance(e2, s1, e1))


def on_ray(p, s, e):
    """Whether ``p`` lies on the ray from ``s`` through ``e``."""
    return dcmp(p.cross(s, e), 0) == 0 and dcmp((p - s).dot(e - s), 0) >= 0


def ray_distance(p, s, e):
    if (p - s).dot(e - s) <= 0:
        return s.dist(p)
    return line_distance(p, s, e)


def ray_intersection(s1, e1, s2, e2):
    """Return ``(kind, point)`` for two rays; see ``line_intersection``."""
    kind, point = line_intersection(s1, e1, s2, e2)
    if kind == NONE:
        return NONE, None
    if kind == SINGLE:
        if on_ray(point, s1, e1) and on_ray(point, s2, e2):
            return SINGLE, point
        return NONE, None
    if on_ray(s1, s2, e2):
        return INFINITE, s1
    if on_ray(s2, s1, e1):
        return INFINITE, s2
    return NONE, None


def ray_ray_distance(s1, e1, s2, e2):
    if ray_intersection(s1, e1, s2, e2)[0] != NONE:
        return 0.0
    return min(ray_distance(s1, s2, e2), ray_distance(s2, s1, e1))


class _Sweep:
    """A segment in the sweep-line status, ordered by height."""

    __slots__ = ("p", "q", "ident")

    def __init__(self, p, q, ident):
        self.p, self.q, self.ident = p, q, ident

    def y_at(self, x):
        if abs(self.p.x - self.q.x) < EPS:
            return self.p.y
        return self.p.y + (self.q.y - self.p.y) * (x - self.p.x) / (self.q.x - self.p.x)

    def __lt__(self, other):
        x = max(min(self.p.x, self.q.x), min(other.p.x, other.q.x))
        return self.y_at(x) < other.y_at(x) - EPS


def _overlap_1d(l1, r1, l2, r2):
    l1, r1 = min(l1, r1), max(l1, r1)
    l2, r2 = min(l2, r2), max(l2, r2)
    return max(l1, l2) <= min(r1, r2) + EPS


def _turn(a, b, c):
    s = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    if abs(s) < EPS:
        return 0
    return 1 if s > 0 else -1


def _touch(a, b):
    return (_overlap_1d(a.p.x, a.q.x, b.p.x, b.q.x)
            and _overlap_1d(a.p.y, a.q.y, b.p.y, b.q.y)
            and _turn(a.p, a.q, b.p) * _turn(a.p, a.q, b.q) <= 0
            and _turn(b.p, b.q, a.p) * _turn(b.p, b.q, a.q) <= 0)


def _event_order(e, f):
    if abs(e[0] - f[0]) > EPS:
        return -1 if e[0] < f[0] else 1
    return f[1] - e[1]


def find_intersecting_pair(segments):
    """Indices of two segments that share a point, or None if none do.

    ``segments`` is a sequence of ``(p, q)`` point pairs.
    """
    sweeps = [_Sweep(p, q, i) for i, (p, q) in enumerate(segments)]
    events = []
    for seg in sweeps:
        events.append((min(seg.p.x, seg.q.x), 1, seg.ident))
        events.append((max(seg.p.x, seg.q.x), -1, seg.ident))
    events.sort(key=cmp_to_key(_event_order))

    active = []
    for _, kind, ident in events:
        seg = sweeps[ident]
        if kind == 1:
            pos = bisect_left(active, seg)
            if pos < len(active) and _touch(active[pos], seg):
                return active[pos].ident, ident
            if pos > 0 and _touch(active[pos - 1], seg):
                return active[pos - 1].ident, ident
            active.insert(pos, seg)
        else:
            pos = next(i for i, s in enumerate(active) if s is seg)
            if 0 < pos < len(active) - 1 and _touch(active[pos + 1], active[pos - 1]):
                return active[pos - 1].ident, active[pos + 1].ident
            del active[pos]
    return None


__all__ = [
    "Point", "line_distance", "line_intersection", "on_segment", "segment_distance",
    "segment_intersection", "closest_on_segment", "segment_segment_distance",
    "on_ray", "ray_distance", "ray_intersection", "ray_ray_distance",
    "find_intersecting_pair",
]