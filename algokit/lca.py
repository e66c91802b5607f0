"""Lowest common ancestors and k-th ancestors by binary lifting."""


class BinaryLifting:
    """Ancestor queries on a tree given as an undirected adjacency list."""

    def __init__(self, adj, root=0):
        n = len(adj)
        self.root = root
        self.depth = [0] * n
        self.tin = [-1] * n
        self.tout = [-1] * n
        parent = [root] * n
        timer = 0
        self.tin[root] = timer
        timer += 1
        stack = [(root, iter(adj[root]))]
        while stack:
            u, it = stack[-1]
            for v in it:
                if v != parent[u] or u == root and v != root:
                    if self.tin[v] != -1:
                        continue
                    parent[v] = u
                    self.depth[v] = self.depth[u] + 1
                    self.tin[v] = timer
                    timer += 1
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                self.tout[u] = timer - 1
        if timer != n:
            raise ValueError("graph is not connected")
        self._log = max(1, n.bit_length())
        self._up = [parent]
        for _ in range(1, self._log):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def is_ancestor(self, u, v):
        """Whether ``u`` is an ancestor of ``v`` (a vertex is its own ancestor)."""
        return self.tin[u] <= self.tin[v] and self.tout[u] >= self.tout[v]

    def kth_ancestor(self, u, k):
        """The ancestor ``k`` levels above ``u``, or None if the tree is not that deep."""
        if k < 0:
            raise ValueError("k must be non-negative")
        if k > self.depth[u]:
            return None
        j = 0
        while k:
            if k & 1:
                u = self._up[j][u]
            k >>= 1
            j += 1
        return u

    def lca(self, u, v):
        if self.depth[u] < self.depth[v]:
            u, v = v, u
        u = self.kth_ancestor(u, self.depth[u] - self.depth[v])
        if u == v:
            return u
        for level in reversed(self._up):
            if level[u] != level[v]:
                u, v = level[u], level[v]
        return self._up[0][u]