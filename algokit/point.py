"""Generic plane point with vector operations, and angle helpers."""

import math
from dataclasses import dataclass

EPS = 1e-9


def dcmp(a, b):
    """Compare two numbers with tolerance: 0 if close, else 1 or -1."""
    if abs(a - b) < EPS:
        return 0
    return 1 if a > b else -1


@dataclass(frozen=True, order=True)
class Point:
    """A point or vector; ordered by ``x`` then ``y``."""

    x: float = 0
    y: float = 0

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor):
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        return Point(self.x / divisor, self.y / divisor)

    def __neg__(self):
        return Point(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"({self.x},{self.y})"

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, a, b=None):
        """``self x a``, or with two arguments ``(a - self) x (b - self)``."""
        if b is None:
            return self.x * a.y - self.y * a.x
        return (a - self).cross(b - self)

    def dist2(self):
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def dist(self, other=None):
        """Length of the vector, or distance to ``other``."""
        if other is not None:
            return (self - other).dist()
        return math.sqrt(self.dist2())

    def angle(self):
        """Angle to the x-axis in ``[-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def unit(self):
        return self / self.dist()

    def perp(self):
        """Rotate by 90 degrees counter-clockwise."""
        return Point(-self.y, self.x)

    def normal(self):
        return self.perp().unit()

    def rotate(self, a):
        """Rotate counter-clockwise by ``a`` radians around the origin."""
        c, s = math.cos(a), math.sin(a)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def project_on_line(self, a, b):
        """Projection onto the line through ``a`` and ``b`` (``a != b``)."""
        ab = b - a
        ac = self - a
        return a + ab * ac.dot(ab) / ab.dist2()

    def project_on_segment(self, a, b):
        """Closest point of segment ``ab`` to this point (``a != b``)."""
        ab = b - a
        ac = self - a
        r = ac.dot(ab)
        d = ab.dist2()
        if r < 0:
            return a
        if r > d:
            return b
        return a + ab * r / d

    def reflect_around_line(self, a, b):
        return self.project_on_line(a, b) * 2 - self


def angle_between(a, b):
    """Counter-clockwise angle from vector ``a`` to vector ``b``, in ``[0, 2*pi)``."""
    result = math.atan2(a.cross(b), a.dot(b))
    if dcmp(result, 0) == -1:
        result += 2 * math.pi
    return result


def angle_at(a, o, b):
    """Counter-clockwise angle ``aOb`` at vertex ``o``."""
    if a.dist(o) <= EPS or b.dist(o) <= EPS:
        raise ValueError("angle is undefined when a point coincides with the vertex")
    return angle_between(a - o, b - o)