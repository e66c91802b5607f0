"""Minimum-cost maximum flow with shortest augmenting paths."""

import heapq
import math
from collections import deque
from dataclasses import dataclass
from typing import NamedTuple


class FlowResult(NamedTuple):
    flow: int
    cost: int


@dataclass(slots=True)
class _Edge:
    to: int
    cost: int
    cap: int
    flow: int
    back: int


class MinCostFlow:
    """Successive shortest paths found with a deque-based SPFA; vertices ``0..n``."""

    def __init__(self, n):
        self._n = n + 1
        self._graph = [[] for _ in range(self._n)]

    def add_edge(self, u, v, cap, cost):
        forward = _Edge(v, cost, cap, 0, len(self._graph[v]))
        backward = _Edge(u, -cost, 0, 0, len(self._graph[u]))
        self._graph[u].append(forward)
        self._graph[v].append(backward)

    def min_cost_max_flow(self, s, t):
        """Return the maximum flow from ``s`` to ``t`` and its minimum cost."""
        if s == t:
            raise ValueError("source and sink must differ")
        graph, n = self._graph, self._n
        flow = cost = 0
        while True:
            state = [2] * n
            dist = [math.inf] * n
            prev = [-1] * n
            prev_edge = [0] * n
            state[s] = 1
            dist[s] = 0
            queue = deque([s])
            while queue:
                v = queue.popleft()
                state[v] = 0
                for i, e in enumerate(graph[v]):
                    if e.flow >= e.cap or dist[e.to] <= dist[v] + e.cost:
                        continue
                    to = e.to
                    dist[to] = dist[v] + e.cost
                    prev[to] = v
                    prev_edge[to] = i
                    if state[to] == 1:
                        continue
                    if not state[to] or (queue and dist[queue[0]] > dist[to]):
                        queue.appendleft(to)
                    else:
                        queue.append(to)
                    state[to] = 1
            if dist[t] == math.inf:
                break
            path = []
            node = t
            while node != s:
                path.append(graph[prev[node]][prev_edge[node]])
                node = prev[node]
            pushed = min(e.cap - e.flow for e in path)
            for e in path:
                e.flow += pushed
                graph[e.to][e.back].flow -= pushed
                cost += e.cost * pushed
            flow += pushed
        return FlowResult(flow, cost)


class _ResidualGraph:
    """Edges kept in paired slots: edge ``e`` and its reverse ``e ^ 1``."""

    def __init__(self, n):
        self.n = n
        self.out = [[] for _ in range(n)]
        self.to = []
        self.cap = []
        self.cost = []

    def add_edge(self, u, v, cap, cost):
        for tail, head, c, w in ((u, v, cap, cost), (v, u, 0, -cost)):
            self.out[tail].append(len(self.to))
            self.to.append(head)
            self.cap.append(c)
            self.cost.append(w)

    def augment(self, parent, t, amount):
        e = parent[t]
        while e != -1:
            self.cap[e] -= amount
            self.cap[e ^ 1] += amount
            e = parent[self.to[e ^ 1]]


class BellmanFordFlow:
    """Min-cost max-flow using queue-based Bellman-Ford; tolerates negative costs."""

    def __init__(self, n):
        self._graph = _ResidualGraph(n)

    def add_edge(self, u, v, cap, cost):
        self._graph.add_edge(u, v, cap, cost)

    def _shortest(self, s):
        g = self._graph
        n = g.n
        dist = [math.inf] * n
        parent = [-1] * n
        bottleneck = [0] * n
        dist[s] = 0
        bottleneck[s] = math.inf
        in_queue = [False] * n
        in_queue[s] = True
        queue = deque([s])
        rounds = n
        while queue:
            rounds -= 1
            if not rounds:
                break
            for _ in range(len(queue)):
                u = queue.popleft()
                in_queue[u] = False
                for e in g.out[u]:
                    if not g.cap[e]:
                        continue
                    v = g.to[e]
                    candidate = dist[u] + g.cost[e]
                    if candidate < dist[v]:
                        dist[v] = candidate
                        bottleneck[v] = min(bottleneck[u], g.cap[e])
                        parent[v] = e
                        if not in_queue[v]:
                            queue.append(v)
                            in_queue[v] = True
        return dist, parent, bottleneck

    def solve(self, s, t):
        """Return the maximum flow from ``s`` to ``t`` and its minimum cost."""
        if s == t:
            raise ValueError("source and sink must differ")
        flow = cost = 0
        while True:
            dist, parent, bottleneck = self._shortest(s)
            pushed = bottleneck[t]
            if not pushed:
                break
            flow += pushed
            cost += pushed * dist[t]
            self._graph.augment(parent, t, pushed)
        return FlowResult(flow, cost)


class DijkstraFlow:
    """Min-cost max-flow using Dijkstra with potentials; costs must start non-negative."""

    def __init__(self, n):
        self._graph = _ResidualGraph(n)

    def add_edge(self, u, v, cap, cost):
        self._graph.add_edge(u, v, cap, cost)

    def solve(self, s, t):
        """Return the maximum flow from ``s`` to ``t`` and its minimum cost."""
        if s == t:
            raise ValueError("source and sink must differ")
        g = self._graph
        n = g.n
        potential = [0] * n
        flow = cost = 0
        while True:
            dist = [math.inf] * n
            parent = [-1] * n
            bottleneck = [0] * n
            dist[s] = 0
            bottleneck[s] = math.inf
            heap = [(0, s)]
            while heap:
                d, u = heapq.heappop(heap)
                if d != dist[u]:
                    continue
                for e in g.out[u]:
                    if not g.cap[e]:
                        continue
                    v = g.to[e]
                    candidate = d + g.cost[e] + potential[u] - potential[v]
                    if candidate < dist[v]:
                        dist[v] = candidate
                        parent[v] = e
                        bottleneck[v] = min(bottleneck[u], g.cap[e])
                        heapq.heappush(heap, (candidate, v))
            if dist[t] == math.inf:
                break
            for i, d in enumerate(dist):
                if d < math.inf:
                    potential[i] += d
            pushed = bottleneck[t]
            if not pushed:
                break
            flow += pushed
            cost += pushed * potential[t]
            g.augment(parent, t, pushed)
        return FlowResult(flow, cost)