"""Lines in ``cross(v, p) = c`` form, and segment predicates and distances."""

from dataclasses import dataclass

from .vec import EPS, cross, dot, orient, perp, sgn, sq


@dataclass(frozen=True)
class Line:
    """The points ``p`` with ``cross(v, p) == c``; ``v`` is the direction."""

    v: complex
    c: float

    @classmethod
    def from_coefficients(cls, a, b, c):
        """Line ``a*x + b*y = c``."""
        return cls(complex(b, -a), c)

    @classmethod
    def through(cls, p, q):
        """Line through points ``p`` and ``q``, directed from ``p`` to ``q``."""
        v = q - p
        return cls(v, cross(v, p))

    def side(self, p):
        """Positive left of the line, negative right, zero on it."""
        return cross(self.v, p) - self.c

    def dist(self, p):
        return abs(self.side(p)) / abs(self.v)

    def sq_dist(self, p):
        return self.side(p) ** 2 / sq(self.v)

    def cmp_proj(self, p, q):
        """Whether ``p`` comes before ``q`` along the line's direction."""
        return dot(self.v, p) < dot(self.v, q)

    def translate(self, t):
        return Line(self.v, self.c + cross(self.v, t))

    def perpendicular_through(self, p):
        """Line through ``p`` perpendicular to this one."""
        return Line.through(p, p + perp(self.v))

    def shift_left(self, dist):
        return Line(self.v, self.c + dist * abs(self.v))

    def proj(self, p):
        """Orthogonal projection of ``p`` onto the line."""
        return p - perp(self.v) * self.side(p) / sq(self.v)

    def refl(self, p):
        """Reflection of ``p`` across the line."""
        return p - perp(self.v) * 2.0 * self.side(p) / sq(self.v)

    def same_line(self, other):
        """Whether both describe the same set of points."""
        a1, b1, c1 = self.v.imag, -self.v.real, self.c
        a2, b2, c2 = other.v.imag, -other.v.real, other.c
        return (abs(a1 * b2 - a2 * b1) <= EPS
                and abs(a1 * c2 - a2 * c1) <= EPS
                and abs(b1 * c2 - b2 * c1) <= EPS)


def intersection(l1, l2):
    """Intersection point of two lines, or None if they are parallel."""
    d = cross(l1.v, l2.v)
    if sgn(d) == 0:
        return None
    return (l2.v * l1.c - l1.v * l2.c) / d


def bisector(l1, l2, interior):
    """Angle bisector of two crossing lines, interior or exterior."""
    if cross(l1.v, l2.v) == 0:
        raise ValueError("parallel lines have no bisector")
    sign = 1 if interior else -1
    return Line(l2.v / abs(l2.v) + l1.v / abs(l1.v) * sign,
                l2.c / abs(l2.v) + l1.c / abs(l1.v) * sign)


def in_disk(a, b, p):
    """Whether ``p`` lies in the disk with diameter ``ab``."""
    return sgn(dot(a - p, b - p)) <= 0


def on_segment(a, b, p):
    return sgn(orient(a, b, p)) == 0 and in_disk(a, b, p)


def proper_intersection(a, b, c, d):
    """Single interior crossing point of segments ``ab`` and ``cd``, or None."""
    oa, ob = orient(c, d, a), orient(c, d, b)
    oc, od = orient(a, b, c), orient(a, b, d)
    if sgn(oa) * sgn(ob) < 0 and sgn(oc) * sgn(od) < 0:
        return (a * ob - b * oa) / (ob - oa)
    return None


def segment_point_distance(a, b, p):
    if a != b:
        line = Line.through(a, b)
        if line.cmp_proj(a, p) and line.cmp_proj(p, b):
            return line.dist(p)
    return min(abs(p - a), abs(p - b))


def segment_segment_distance(a, b, c, d):
    if proper_intersection(a, b, c, d) is not None:
        return 0.0
    return min(segment_point_distance(a, b, c), segment_point_distance(a, b, d),
               segment_point_distance(c, d, a), segment_point_distance(c, d, b))


def segment_intersections(a, b, c, d):
    """Sorted ``(x, y)`` pairs describing where segments ``ab`` and ``cd`` meet.

    An overlap is described by the endpoints that bound it.
    """
    found = set()
    if a in (c, d):
        found.add((a.real, a.imag))
    if b in (c, d):
        found.add((b.real, b.imag))
    if found:
        return sorted(found)
    crossing = proper_intersection(a, b, c, d)
    if crossing is not None:
        return [(crossing.real, crossing.imag)]
    for seg_start, seg_end, p in ((c, d, a), (c, d, b), (a, b, c), (a, b, d)):
        if on_segment(seg_start, seg_end, p):
            found.add((p.real, p.imag))
    return sorted(found)