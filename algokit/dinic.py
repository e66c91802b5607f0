"""Dinic's maximum flow with capacity scaling."""

import math
from dataclasses import dataclass


@dataclass(slots=True)
class _Edge:
    to: int
    rev: int
    cap: int
    original: int


class Dinic:
    """Maximum flow on a directed graph with ``n`` vertices."""

    def __init__(self, n):
        self._n = n
        self._adj = [[] for _ in range(n)]
        self._level = [0] * n
        self._ptr = [0] * n

    def add_edge(self, a, b, cap, rev_cap=0):
        """Add an edge ``a -> b`` of capacity ``cap`` and ``b -> a`` of ``rev_cap``."""
        forward = _Edge(b, len(self._adj[b]), cap, cap)
        self._adj[a].append(forward)
        self._adj[b].append(_Edge(a, len(self._adj[a]) - 1, rev_cap, rev_cap))

    def _dfs(self, v, t, f):
        if v == t or not f:
            return f
        edges = self._adj[v]
        level = self._level
        while self._ptr[v] < len(edges):
            e = edges[self._ptr[v]]
            if level[e.to] == level[v] + 1:
                pushed = self._dfs(e.to, t, min(f, e.cap))
                if pushed:
                    e.cap -= pushed
                    self._adj[e.to][e.rev].cap += pushed
                    return pushed
            self._ptr[v] += 1
        return 0

    def _bfs(self, s, t, shift):
        level = [0] * self._n
        level[s] = 1
        queue = [s]
        head = 0
        while head < len(queue) and not level[t]:
            v = queue[head]
            head += 1
            for e in self._adj[v]:
                if not level[e.to] and e.cap >> shift:
                    level[e.to] = level[v] + 1
                    queue.append(e.to)
        self._level = level
        self._ptr = [0] * self._n

    def max_flow(self, s, t):
        """Push as much flow as possible from ``s`` to ``t`` and return its value."""
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        for phase in range(31):
            while True:
                self._bfs(s, t, 30 - phase)
                while True:
                    pushed = self._dfs(s, t, math.inf)
                    if not pushed:
                        break
                    flow += pushed
                if not self._level[t]:
                    break
        return flow

    def left_of_min_cut(self, a):
        """Whether ``a`` is on the source side of the minimum cut after ``max_flow``."""
        return self._level[a] != 0