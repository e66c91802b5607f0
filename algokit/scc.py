"""Strongly connected components and the condensation of a directed graph."""

from collections import deque
from typing import NamedTuple


class Condensation(NamedTuple):
    """Component id of every vertex, and the sorted, duplicate-free edges between components."""

    component: list
    dag: list


def _dag(adj, component, count):
    edges = [set() for _ in range(count)]
    for u, targets in enumerate(adj):
        for v in targets:
            if component[u] != component[v]:
                edges[component[u]].add(component[v])
    return [sorted(e) for e in edges]


def kosaraju(adj):
    """Components numbered in topological order: every edge goes to an equal or larger id."""
    n = len(adj)
    reverse = [[] for _ in range(n)]
    for u, targets in enumerate(adj):
        for v in targets:
            reverse[v].append(u)

    visited = [False] * n
    finished = []
    for s in range(n):
        if visited[s]:
            continue
        visited[s] = True
        stack = [(s, iter(adj[s]))]
        while stack:
            u, it = stack[-1]
            for v in it:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                finished.append(u)

    component = [-1] * n
    count = 0
    for s in reversed(finished):
        if component[s] != -1:
            continue
        component[s] = count
        stack = [s]
        while stack:
            x = stack.pop()
            for y in reverse[x]:
                if component[y] == -1:
                    component[y] = count
                    stack.append(y)
        count += 1
    return Condensation(component, _dag(adj, component, count))


def tarjan_scc(adj):
    """Components numbered in reverse topological order: every edge goes to an equal or smaller id."""
    n = len(adj)
    index = [-1] * n
    low = [0] * n
    component = [-1] * n
    pending = []
    counter = 0
    count = 0
    for s in range(n):
        if index[s] != -1:
            continue
        index[s] = low[s] = counter
        counter += 1
        pending.append(s)
        work = [(s, iter(adj[s]))]
        while work:
            u, it = work[-1]
            for v in it:
                if index[v] == -1:
                    index[v] = low[v] = counter
                    counter += 1
                    pending.append(v)
                    work.append((v, iter(adj[v])))
                    break
                if component[v] == -1:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])
                if low[u] == index[u]:
                    while True:
                        w = pending.pop()
                        component[w] = count
                        if w == u:
                            break
                    count += 1
    return Condensation(component, _dag(adj, component, count))


def condensation_order(adj, start):
    """Topological order of the components reachable from ``start``.

    Component ids are those of ``tarjan_scc``.
    """
    condensation = tarjan_scc(adj)
    dag = condensation.dag
    count = len(dag)
    reachable = [False] * count
    first = condensation.component[start]
    reachable[first] = True
    stack = [first]
    while stack:
        c = stack.pop()
        for d in dag[c]:
            if not reachable[d]:
                reachable[d] = True
                stack.append(d)

    indegree = [0] * count
    for targets in dag:
        for d in targets:
            indegree[d] += 1
    queue = deque(c for c in range(count) if indegree[c] == 0)
    order = []
    while queue:
        c = queue.popleft()
        if reachable[c]:
            order.append(c)
        for d in dag[c]:
            indegree[d] -= 1
            if indegree[d] == 0:
                queue.append(d)
    return order