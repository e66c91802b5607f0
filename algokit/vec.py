"""Plane vectors held as complex numbers: products, orientation, transforms, angles."""

import cmath
import math

EPS = 1e-9


def sgn(value):
    """Return 1, -1 or 0 depending on the sign of ``value`` within ``EPS``."""
    return (value > EPS) - (value < -EPS)


def dcmp(a, b):
    """Compare two numbers with tolerance: 0 if close, else 1 or -1."""
    if abs(a - b) < EPS:
        return 0
    return 1 if a > b else -1


def dot(v, w):
    return v.real * w.real + v.imag * w.imag


def cross(v, w):
    return v.real * w.imag - v.imag * w.real


def sq(p):
    """Squared length of ``p``."""
    return dot(p, p)


def orient(a, b, c):
    """Positive for a left turn a->b->c, negative for a right turn, zero if collinear."""
    return cross(b - a, c - a)


def is_perp(v, w):
    return abs(dot(v, w)) < EPS


def perp(p):
    """Rotate ``p`` by 90 degrees counter-clockwise."""
    return complex(-p.imag, p.real)


def translate(v, p):
    """Move ``p`` by the vector ``v``."""
    return p + v


def scale(c, factor, p):
    """Scale ``p`` by ``factor`` around the centre ``c``."""
    return c + (p - c) * factor


def rotate(p, c, angle):
    """Rotate ``p`` counter-clockwise by ``angle`` radians around ``c``."""
    return c + (p - c) * cmath.rect(1.0, angle)


def linear_transform(p, q, r, fp, fq):
    """Image of ``r`` under the similarity mapping ``p`` to ``fp`` and ``q`` to ``fq``."""
    return fp + (r - p) * (fq - fp) / (q - p)


def angle(v, w):
    """Unsigned angle between vectors ``v`` and ``w``, in ``[0, pi]``."""
    cosine = dot(v, w) / abs(v) / abs(w)
    return math.acos(min(1.0, max(-1.0, cosine)))


def oriented_angle(a, b, c):
    """Angle at ``a`` turning counter-clockwise from ``b`` to ``c``, in ``[0, 2*pi)``."""
    amplitude = angle(b - a, c - a)
    return amplitude if orient(a, b, c) > 0 else 2 * math.pi - amplitude


def angle_travelled(a, b, c):
    """Signed angle at ``a`` from ``b`` to ``c``, positive counter-clockwise."""
    amplitude = angle(b - a, c - a)
    return amplitude if orient(a, b, c) > 0 else -amplitude


def in_angle(a, b, c, p):
    """Whether ``p`` lies in the angle at ``a`` swept counter-clockwise from ``b`` to ``c``."""
    abp, acp, abc = orient(a, b, p), orient(a, c, p), orient(a, b, c)
    if abc < 0:
        abp, acp = acp, abp
    return (abp >= 0 and acp <= 0) != (abc < 0)


def is_convex(points):
    """Whether the polygon never turns both left and right."""
    points = list(points)
    has_pos = has_neg = False
    following = points[1:] + points[:1]
    after = points[2:] + points[:2]
    for a, b, c in zip(points, following, after):
        o = sgn(orient(a, b, c))
        has_pos = has_pos or o > 0
        has_neg = has_neg or o < 0
    return not (has_pos and has_neg)