import random

import pytest

from algokit.hld import HLD


def random_tree(seed, n=30):
    rng = random.Random(seed)
    adj = [[] for _ in range(n)]
    for i in range(1, n):
        p = rng.randrange(i)
        adj[i].append(p)
        adj[p].append(i)
    return adj


def climb(h, u, v):
    vertices = set()
    while u != v:
        if h.depth[u] >= h.depth[v]:
            vertices.add(u)
            u = h.parent[u]
        else:
            vertices.add(v)
            v = h.parent[v]
    return vertices, u


def covered(h, ranges):
    positions = [i for s, e in ranges for i in range(s, e + 1)]
    return positions, {h.order[i] for i in positions}


@pytest.mark.parametrize("seed", range(5))
def test_path_covers_exactly_the_path(seed):
    adj = random_tree(seed)
    h = HLD(adj, 0)
    rng = random.Random(seed + 100)
    for _ in range(60):
        u, v = rng.randrange(len(adj)), rng.randrange(len(adj))
        below, top = climb(h, u, v)
        positions, vertices = covered(h, h.path(u, v))
        assert len(positions) == len(vertices)
        assert vertices == below | {top}
        assert h.lca(u, v) == top
        assert h.dist(u, v) == len(below)


@pytest.mark.parametrize("seed", range(5))
def test_edge_path_excludes_lca(seed):
    adj = random_tree(seed)
    h = HLD(adj, 0)
    for u in range(len(adj)):
        for v in range(0, len(adj), 3):
            below, _ = climb(h, u, v)
            positions, vertices = covered(h, h.edge_path(u, v))
            assert len(positions) == len(vertices)
            assert vertices == below


@pytest.mark.parametrize("seed", range(5))
def test_subtree_ranges(seed):
    adj = random_tree(seed)
    h = HLD(adj, 0)
    for u in range(len(adj)):
        start, end = h.subtree(u)
        members = {h.order[i] for i in range(start, end + 1)}
        assert members == {v for v in range(len(adj)) if h.is_ancestor(u, v)}
        assert len(members) == h.size[u]


def test_order_is_a_permutation_matching_tin():
    adj = random_tree(9)
    h = HLD(adj, 4)
    assert sorted(h.order) == list(range(len(adj)))
    assert all(h.order[h.tin[u]] == u for u in range(len(adj)))
    assert h.order[0] == 4


def test_disconnected_raises():
    with pytest.raises(ValueError):
        HLD([[], []], 0)