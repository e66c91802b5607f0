"""Minimum-cost maximum flow by cost scaling; negative cycles are allowed."""

from collections import deque
from dataclasses import dataclass

from .mincost_flow import FlowResult

_SCALE = 2
_NEG_INF = -(1 << 62)


@dataclass(slots=True)
class _Edge:
    c: int
    f: int
    to: int
    rev: int


class CostScalingFlow:
    """Push-relabel max flow followed by cost-scaling refinement.

    Costs are minimised over the whole circulation, so negative cycles are
    saturated. The graph is consumed by solving; solve once.
    """

    def __init__(self, n, source, sink):
        if source == sink:
            raise ValueError("source and sink must differ")
        self._n = n
        self._source = source
        self._sink = sink
        self._eps = 0
        self._graph = [[] for _ in range(n)]
        self._excess = [0] * n
        self._height = [0] * n
        self._cur = [0] * n
        self._buckets = []

    def add_edge(self, a, b, cost, cap):
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        if not (0 <= a < self._n and 0 <= b < self._n):
            raise IndexError(f"edge ({a}, {b}) out of range")
        if a == b:
            if cost < 0:
                raise ValueError("self-loop with negative cost")
            return
        cost *= self._n
        self._eps = max(self._eps, abs(cost))
        self._graph[a].append(_Edge(cost, cap, b, len(self._graph[b])))
        self._graph[b].append(_Edge(-cost, 0, a, len(self._graph[a]) - 1))

    def _add_flow(self, e, f):
        back = self._graph[e.to][e.rev]
        if not self._excess[e.to] and f:
            self._buckets[self._height[e.to]].append(e.to)
        e.f -= f
        self._excess[e.to] += f
        back.f += f
        self._excess[back.to] -= f

    def max_flow(self):
        """Return the maximum flow from source to sink."""
        n, graph = self._n, self._graph
        s = self._source
        self._excess = ex = [0] * n
        self._height = h = [0] * n
        self._buckets = buckets = [[] for _ in range(2 * n)]
        count = [0] * (2 * n)
        self._cur = cur = [0] * n
        h[s] = n
        ex[self._sink] = 1
        count[0] = n - 1
        for e in graph[s]:
            self._add_flow(e, e.f)
        if buckets[0]:
            hi = 0
            while hi >= 0:
                u = buckets[hi].pop()
                while ex[u] > 0:
                    if cur[u] == len(graph[u]):
                        h[u] = 10 ** 9
                        for i, e in enumerate(graph[u]):
                            if e.f and h[u] > h[e.to] + 1:
                                h[u] = h[e.to] + 1
                                cur[u] = i
                        count[h[u]] += 1
                        count[hi] -= 1
                        if not count[hi] and hi < n:
                            for i in range(n):
                                if hi < h[i] < n:
                                    count[h[i]] -= 1
                                    h[i] = n + 1
                        hi = h[u]
                    else:
                        e = graph[u][cur[u]]
                        if e.f and h[u] == h[e.to] + 1:
                            self._add_flow(e, min(ex[u], e.f))
                        else:
                            cur[u] += 1
                while hi >= 0 and not buckets[hi]:
                    hi -= 1
        return -ex[s]

    def _push(self, e, amount):
        amount = min(amount, e.f)
        e.f -= amount
        self._excess[e.to] += amount
        back = self._graph[e.to][e.rev]
        back.f += amount
        self._excess[back.to] -= amount

    def _relabel(self, vertex):
        best = _NEG_INF
        h = self._height
        for i, e in enumerate(self._graph[vertex]):
            if e.f and best < h[e.to] - e.c:
                best = h[e.to] - e.c
                self._cur[vertex] = i
        h[vertex] = best - self._eps

    def _total(self):
        return sum(e.c * e.f for edges in self._graph for e in edges)

    def min_cost_max_flow(self):
        """Return the maximum flow and the minimum cost among maximum flows."""
        n, graph = self._n, self._graph
        cost = self._total()
        flow = self.max_flow()
        self._height = h = [0] * n
        self._excess = ex = [0] * n
        queued = [False] * n
        queue = deque()
        while self._eps:
            self._cur = cur = [0] * n
            for i, edges in enumerate(graph):
                for e in edges:
                    if h[i] + e.c - h[e.to] < 0 and e.f:
                        self._push(e, e.f)
            for i in range(n):
                if ex[i] > 0:
                    queue.append(i)
                    queued[i] = True
            while queue:
                u = queue.popleft()
                queued[u] = False
                edges = graph[u]
                while ex[u] > 0:
                    if cur[u] == len(edges):
                        self._relabel(u)
                    i = cur[u]
                    while i < len(edges):
                        e = edges[i]
                        if h[u] + e.c - h[e.to] < 0:
                            self._push(e, ex[u])
                            if ex[e.to] > 0 and not queued[e.to]:
                                queue.append(e.to)
                                queued[e.to] = True
                            if ex[u] == 0:
                                break
                        i += 1
                    cur[u] = i
            if self._eps > 1 and self._eps >> _SCALE == 0:
                self._eps = 1 << _SCALE
            self._eps >>= _SCALE
        cost -= self._total()
        return FlowResult(flow, cost // 2 // n)