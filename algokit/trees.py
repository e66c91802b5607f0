"""Canonical shapes and hashes of rooted trees, and centroid decomposition."""

_MASK = (1 << 64) - 1


def _postorder(adj, root):
    parent = {root: -1}
    order = []
    stack = [root]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if v != parent[u]:
                parent[v] = u
                stack.append(v)
    order.reverse()
    return order, parent


def tree_shape_id(adj, root, table=None):
    """Integer naming the shape of the tree rooted at ``root``.

    Two rooted trees get the same id exactly when they are isomorphic, as long
    as the same ``table`` is passed for both. Ids are handed out from 0.
    """
    if table is None:
        table = {}
    order, parent = _postorder(adj, root)
    ids = {}
    for u in order:
        key = tuple(sorted(ids[v] for v in adj[u] if v != parent[u]))
        if key not in table:
            table[key] = len(table)
        ids[u] = table[key]
    return ids[root]


def tree_hash(adj, root):
    """64-bit polynomial hash of the rooted tree's shape; a leaf hashes to 0."""
    order, parent = _postorder(adj, root)
    hashes = {}
    for u in order:
        children = sorted(hashes[v] for v in adj[u] if v != parent[u])
        value = 0
        for i, c in enumerate(children, start=1):
            value += c * c + c * pow(31, i, 1 << 64) + 42
        hashes[u] = value & _MASK
    return hashes[root]


def centroid_decomposition(adj):
    """Parent of every vertex in the centroid tree; a root centroid is its own parent."""
    n = len(adj)
    removed = [False] * n
    parent = [-1] * n
    size = [0] * n
    local_parent = [-1] * n
    for s in range(n):
        if removed[s]:
            continue
        tasks = [(s, -1)]
        while tasks:
            start, above = tasks.pop()
            local_parent[start] = -1
            order = []
            stack = [start]
            while stack:
                u = stack.pop()
                order.append(u)
                size[u] = 1
                for v in adj[u]:
                    if not removed[v] and v != local_parent[u]:
                        local_parent[v] = u
                        stack.append(v)
            for u in reversed(order):
                if local_parent[u] != -1:
                    size[local_parent[u]] += size[u]
            total = len(order)
            centroid = start
            moved = True
            while moved:
                moved = False
                for v in adj[centroid]:
                    if not removed[v] and v != local_parent[centroid] and size[v] * 2 > total:
                        centroid = v
                        moved = True
                        break
            parent[centroid] = centroid if above == -1 else above
            removed[centroid] = True
            for v in adj[centroid]:
                if not removed[v]:
                    tasks.append((v, centroid))
    return parent