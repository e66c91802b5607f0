"""Offline dynamic connectivity over a timeline of edge lifetimes."""

from .dsu import RollbackDSU


class OfflineConnectivity:
    """Edges live over time intervals; query each moment's connectivity offline."""

    def __init__(self, n, q):
        self._n = n
        self._q = q
        size = 1
        while size < q:
            size *= 2
        self._size = size
        self._edges = [[] for _ in range(2 * size)]

    def add_edge(self, u, v, start, end):
        """Make edge ``u``-``v`` present at times ``start..end`` inclusive."""
        for vertex in (u, v):
            if not 0 <= vertex < self._n:
                raise IndexError(f"vertex {vertex} out of range")
        self._add(1, 0, self._size - 1, start, end, (u, v))

    def _add(self, node, lo, hi, start, end, edge):
        if hi < start or lo > end:
            return
        if start <= lo and hi <= end:
            self._edges[node].append(edge)
            return
        mid = (lo + hi) // 2
        self._add(node * 2, lo, mid, start, end, edge)
        self._add(node * 2 + 1, mid + 1, hi, start, end, edge)

    def solve(self, callback):
        """Call ``callback(time, dsu)`` for each time with that moment's edges joined."""
        dsu = RollbackDSU(self._n)
        self._walk(1, 0, self._size - 1, dsu, callback)

    def _walk(self, node, lo, hi, dsu, callback):
        if lo >= self._q:
            return
        mark = dsu.time()
        for u, v in self._edges[node]:
            dsu.union(u, v)
        if lo == hi:
            callback(lo, dsu)
        else:
            mid = (lo + hi) // 2
            self._walk(node * 2, lo, mid, dsu, callback)
            self._walk(node * 2 + 1, mid + 1, hi, dsu, callback)
        dsu.rollback(mark)

    def component_counts(self):
        """Return the number of connected components at each time."""
        counts = [0] * self._q

        def record(time, dsu):
            counts[time] = dsu.components

        self.solve(record)
        return counts