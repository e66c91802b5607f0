"""Polygons on ``Point`` values: area, containment and convex hulls."""

from functools import cmp_to_key

from .segments import line_distance, on_segment


def _sign(x):
    return (x > 0) - (x < 0)


def _edges(points):
    points = list(points)
    return zip(points, points[1:] + points[:1])


def polygon_area(points):
    """Unsigned area of a simple polygon."""
    return 0.5 * abs(sum(p.cross(q) for p, q in _edges(points)))


def in_polygon(points, a, strict=True):
    """Whether ``a`` lies inside the polygon; boundary counts only if not strict."""
    inside = False
    for p, q in _edges(points):
        if on_segment(a, p, q):
            return not strict
        inside ^= ((a.y < p.y) - (a.y < q.y)) * a.cross(p, q) > 0
    return inside


def side_of(s, e, p, eps=None):
    """1 if ``p`` is left of ``s -> e``, -1 if right, 0 on the line.

    With ``eps`` the tolerance is scaled by the length of ``s -> e``.
    """
    if eps is None:
        return _sign(s.cross(e, p))
    a = (e - s).cross(p - s)
    limit = (e - s).dist() * eps
    return (a > limit) - (a < -limit)


def in_hull(hull, p, strict=True):
    """Whether ``p`` lies in a counter-clockwise convex hull without collinear points."""
    if not hull:
        raise ValueError("hull is empty")
    r = 0 if strict else 1
    if len(hull) < 3:
        return bool(r) and on_segment(p, hull[0], hull[-1])
    a, b = 1, len(hull) - 1
    if side_of(hull[0], hull[a], hull[b]) > 0:
        a, b = b, a
    if side_of(hull[0], hull[a], p) >= r or side_of(hull[0], hull[b], p) <= -r:
        return False
    while abs(a - b) > 1:
        c = (a + b) // 2
        if side_of(hull[0], hull[c], p) > 0:
            b = c
        else:
            a = c
    return _sign(hull[a].cross(hull[b], p)) < r


def convex_hull(points, include_collinear=False):
    """Counter-clockwise hull starting at the lowest point (ties: leftmost)."""
    pts = list(points)
    if not pts:
        return []
    p0 = min(pts, key=lambda q: (q.y, q.x))

    def by_angle(a, b):
        o = p0.cross(a, b)
        if o != 0:
            return -1 if o > 0 else 1
        da, db = (a - p0).dist2(), (b - p0).dist2()
        return (da > db) - (da < db)

    pts.sort(key=cmp_to_key(by_angle))

    if include_collinear:
        ind = len(pts) - 1
        while ind >= 0 and p0.cross(pts[ind], pts[-1]) == 0:
            ind -= 1
        pts[ind + 1:] = pts[ind + 1:][::-1]

    hull = []
    for p in pts:
        while len(hull) > 1:
            turn = hull[-2].cross(hull[-1], p)
            if turn < 0 or (not include_collinear and turn == 0):
                hull.pop()
            else:
                break
        hull.append(p)
    return hull


def hull_diameter(hull):
    """Squared diameter of a counter-clockwise convex hull."""
    n = len(hull)
    j = 0 if n < 2 else 1
    best = 0
    i = 0
    while i < j:
        while True:
            best = max(best, (hull[i] - hull[j]).dist2())
            if (hull[(j + 1) % n] - hull[j]).cross(hull[i + 1] - hull[i]) >= 0:
                break
            j = (j + 1) % n
        i += 1
    return best


def hull_width(hull):
    """Smallest distance between two parallel lines enclosing the hull."""
    n = len(hull)
    if n <= 2:
        return 0.0
    best = float("inf")
    j = 1
    for i in range(n):
        edge = hull[(i + 1) % n] - hull[i]
        steps = 0
        while edge.cross(hull[(j + 1) % n] - hull[j]) >= 0:
            j = (j + 1) % n
            steps += 1
            if steps > n:
                raise ValueError("hull is degenerate")
        best = min(best, line_distance(hull[j], hull[i], hull[(i + 1) % n]))
    return best