"""Bridges, articulation points and the bridge tree of an undirected graph."""

from typing import NamedTuple


class BridgeTree(NamedTuple):
    """Two-edge-connected component of every vertex, and the tree joining them by bridges."""

    component: list
    adj: list


def _adjacency(n, edges):
    adj = [[] for _ in range(n)]
    for i, (u, v) in enumerate(edges):
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge {i} ({u}, {v}) out of range")
        adj[u].append((v, i))
        adj[v].append((u, i))
    return adj


def _analyse(n, edges):
    adj = _adjacency(n, edges)
    tin = [-1] * n
    low = [0] * n
    bridges = set()
    cut = [False] * n
    timer = 0
    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            u, parent_edge, it = stack[-1]
            for v, eid in it:
                if eid == parent_edge:
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                else:
                    tin[v] = low[v] = timer
                    timer += 1
                    stack.append((v, eid, iter(adj[v])))
                    break
            else:
                stack.pop()
                if not stack:
                    continue
                p = stack[-1][0]
                low[p] = min(low[p], low[u])
                if low[u] > tin[p]:
                    bridges.add(parent_edge)
                if len(stack) == 1:
                    children += 1
                elif low[u] >= tin[p]:
                    cut[p] = True
        if children > 1:
            cut[root] = True
    return adj, bridges, cut


def find_bridges(n, edges):
    """Sorted indices of the edges whose removal disconnects their endpoints.

    Parallel edges between the same vertices are never bridges.
    """
    return sorted(_analyse(n, edges)[1])


def cut_points(n, edges):
    """Sorted vertices whose removal increases the number of components."""
    return [v for v, is_cut in enumerate(_analyse(n, edges)[2]) if is_cut]


def bridge_tree(n, edges):
    """Contract two-edge-connected components; the bridges then form a forest."""
    adj, bridges, _ = _analyse(n, edges)
    component = [-1] * n
    count = 0
    for s in range(n):
        if component[s] != -1:
            continue
        component[s] = count
        stack = [s]
        while stack:
            u = stack.pop()
            for v, eid in adj[u]:
                if component[v] == -1 and eid not in bridges:
                    component[v] = count
                    stack.append(v)
        count += 1
    tree = [[] for _ in range(count)]
    for eid in sorted(bridges):
        u, v = edges[eid]
        tree[component[u]].append(component[v])
        tree[component[v]].append(component[u])
    return BridgeTree(component, tree)