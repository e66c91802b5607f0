import random

import pytest

from algokit.hld import HLD
from algokit.lca import BinaryLifting


def random_tree(seed, n=25):
    rng = random.Random(seed)
    adj = [[] for _ in range(n)]
    for i in range(1, n):
        p = rng.randrange(i)
        adj[i].append(p)
        adj[p].append(i)
    return adj


@pytest.mark.parametrize("seed", range(5))
def test_lca_matches_hld(seed):
    adj = random_tree(seed)
    root = seed % len(adj)
    lifting = BinaryLifting(adj, root)
    hld = HLD(adj, root)
    for u in range(len(adj)):
        for v in range(len(adj)):
            assert lifting.lca(u, v) == hld.lca(u, v)


@pytest.mark.parametrize("seed", range(5))
def test_kth_ancestor_bounds(seed):
    adj = random_tree(seed)
    lifting = BinaryLifting(adj, 0)
    for u in range(len(adj)):
        d = lifting.depth[u]
        assert lifting.kth_ancestor(u, 0) == u
        assert lifting.kth_ancestor(u, d) == 0
        assert lifting.kth_ancestor(u, d + 1) is None


@pytest.mark.parametrize("seed", range(5))
def test_is_ancestor_agrees_with_kth_ancestor(seed):
    adj = random_tree(seed)
    lifting = BinaryLifting(adj, 0)
    for u in range(len(adj)):
        for v in range(len(adj)):
            gap = lifting.depth[v] - lifting.depth[u]
            expected = gap >= 0 and lifting.kth_ancestor(v, gap) == u
            assert lifting.is_ancestor(u, v) == expected


def test_disconnected_raises():
    with pytest.raises(ValueError):
        BinaryLifting([[1], [0], []], 0)


def test_negative_k_raises():
    lifting = BinaryLifting([[1], [0]], 0)
    with pytest.raises(ValueError):
        lifting.kth_ancestor(1, -1)