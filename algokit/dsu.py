"""Disjoint-set unions, with and without rollback."""


class DisjointSet:
    """Union-find with union by size and path compression."""

    def __init__(self, n):
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x):
        """Return the representative of ``x``'s set."""
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def same(self, x, y):
        return self.find(x) == self.find(y)

    def union(self, x, y):
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._size[x] += self._size[y]
        self._parent[y] = x
        return True

    def size(self, x):
        return self._size[self.find(x)]


class RollbackDSU:
    """Union-find whose unions can be undone back to a recorded time."""

    def __init__(self, n):
        # A root holds minus its set size; other nodes hold their parent.
        self._parent = [-1] * n
        self._history = []
        self.components = n

    def find(self, x):
        while self._parent[x] >= 0:
            x = self._parent[x]
        return x

    def same(self, x, y):
        return self.find(x) == self.find(y)

    def size(self, x):
        return -self._parent[self.find(x)]

    def time(self):
        """Return a marker that ``rollback`` can return to."""
        return len(self._history)

    def rollback(self, t):
        """Undo every union made after time ``t``."""
        now = self.time()
        if not 0 <= t <= now:
            raise ValueError(f"cannot roll back to time {t}")
        while len(self._history) > t:
            node, value = self._history.pop()
            self._parent[node] = value
        self.components += (now - t) // 2

    def union(self, a, b):
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if -self._parent[a] < -self._parent[b]:
            a, b = b, a
        self._history.append((a, self._parent[a]))
        self._history.append((b, self._parent[b]))
        self._parent[a] += self._parent[b]
        self._parent[b] = a
        self.components -= 1
        return True