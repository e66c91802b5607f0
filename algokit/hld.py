"""Heavy-light decomposition of a rooted tree."""


class HLD:
    """Maps tree paths and subtrees to ranges of positions ``tin``.

    ``order[i]`` is the vertex at position ``i``; every heavy chain and every
    subtree occupies a contiguous range.
    """

    def __init__(self, adj, root=0):
        n = len(adj)
        self.root = root
        self.parent = [-1] * n
        self.depth = [0] * n
        visited = [False] * n
        visited[root] = True
        preorder = []
        stack = [root]
        while stack:
            u = stack.pop()
            preorder.append(u)
            for v in adj[u]:
                if not visited[v]:
                    visited[v] = True
                    self.parent[v] = u
                    self.depth[v] = self.depth[u] + 1
                    stack.append(v)
        if len(preorder) != n:
            raise ValueError("graph is not connected")

        self.size = [1] * n
        for u in reversed(preorder):
            if self.parent[u] != -1:
                self.size[self.parent[u]] += self.size[u]

        heavy = [-1] * n
        for u in preorder:
            for v in adj[u]:
                if v != self.parent[u] and (heavy[u] == -1 or self.size[v] > self.size[heavy[u]]):
                    heavy[u] = v

        self.head = [root] * n
        self.tin = [0] * n
        self.order = [0] * n
        timer = 0
        stack = [root]
        while stack:
            u = stack.pop()
            self.tin[u] = timer
            self.order[timer] = u
            timer += 1
            light = [v for v in adj[u] if v != self.parent[u] and v != heavy[u]]
            for v in reversed(light):
                self.head[v] = v
                stack.append(v)
            if heavy[u] != -1:
                self.head[heavy[u]] = self.head[u]
                stack.append(heavy[u])
        self.tout = [self.tin[u] + self.size[u] - 1 for u in range(n)]

    def _ranges(self, u, v, include_top):
        ranges = []
        head, depth, tin = self.head, self.depth, self.tin
        while True:
            if depth[head[u]] > depth[head[v]]:
                u, v = v, u
            if head[u] != head[v]:
                ranges.append((tin[head[v]], tin[v]))
                v = self.parent[head[v]]
                continue
            if depth[u] > depth[v]:
                u, v = v, u
            start = tin[u] if include_top else tin[u] + 1
            if start <= tin[v]:
                ranges.append((start, tin[v]))
            return ranges

    def path(self, u, v):
        """Inclusive position ranges covering the vertices of the path ``u``-``v``."""
        return self._ranges(u, v, True)

    def edge_path(self, u, v):
        """Ranges covering the path without its top vertex, for values stored on edges."""
        return self._ranges(u, v, False)

    def subtree(self, u):
        """Inclusive position range of the subtree of ``u``."""
        return self.tin[u], self.tout[u]

    def dist(self, u, v):
        return self.depth[u] + self.depth[v] - 2 * self.depth[self.lca(u, v)]

    def lca(self, u, v):
        head, depth = self.head, self.depth
        while True:
            if depth[head[u]] > depth[head[v]]:
                u, v = v, u
            if head[u] == head[v]:
                return u if depth[u] <= depth[v] else v
            v = self.parent[head[v]]

    def is_ancestor(self, u, v):
        return self.tin[u] <= self.tin[v] and self.tout[u] >= self.tout[v]