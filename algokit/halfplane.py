"""Intersection of half-planes, each keeping the region left of a directed line."""

import math
from collections import deque

from .point import EPS, Point, dcmp

_BOUND = 1e9


class HalfPlane:
    """Points to the left of the directed line from ``a`` to ``b``."""

    def __init__(self, a, b):
        self.p = a
        self.pq = b - a
        self.angle = math.atan2(self.pq.y, self.pq.x)

    def out(self, r):
        """Whether ``r`` lies strictly outside this half-plane."""
        return dcmp(self.pq.cross(r - self.p), 0) < 0

    def intersection(self, other):
        """Crossing point of the two boundary lines; they must not be parallel."""
        alpha = (other.p - self.p).cross(other.pq) / self.pq.cross(other.pq)
        return self.p + self.pq * alpha


def halfplane_intersection(planes):
    """Vertices of the convex polygon common to all half-planes, counter-clockwise.

    The region is clipped to a large bounding box; an empty or degenerate
    intersection gives an empty list.
    """
    box = [Point(_BOUND, _BOUND), Point(-_BOUND, _BOUND),
           Point(-_BOUND, -_BOUND), Point(_BOUND, -_BOUND)]
    planes = list(planes) + [HalfPlane(box[i], box[(i + 1) % 4]) for i in range(4)]
    planes.sort(key=lambda h: h.angle)

    dq = deque()
    for h in planes:
        while len(dq) > 1 and h.out(dq[-1].intersection(dq[-2])):
            dq.pop()
        while len(dq) > 1 and h.out(dq[0].intersection(dq[1])):
            dq.popleft()
        if dq and abs(h.pq.cross(dq[-1].pq)) < EPS:
            if dcmp(h.pq.dot(dq[-1].pq), 0) < 0:
                return []
            if h.out(dq[-1].p):
                dq.pop()
            else:
                continue
        dq.append(h)

    while len(dq) > 2 and dq[0].out(dq[-1].intersection(dq[-2])):
        dq.pop()
    while len(dq) > 2 and dq[-1].out(dq[0].intersection(dq[1])):
        dq.popleft()

    if len(dq) < 3:
        return []
    planes = list(dq)
    return [planes[i].intersection(planes[(i + 1) % len(planes)])
            for i in range(len(planes))]