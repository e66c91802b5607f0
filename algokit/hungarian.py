"""Hungarian algorithm for the minimum-cost assignment problem."""

import math


class Hungarian:
    """Assign each of ``n`` rows a distinct one of ``m`` columns at minimum total cost."""

    def __init__(self, n, m):
        if n > m:
            raise ValueError("rows must not outnumber columns")
        self._n = n
        self._m = m
        self._cost = [[0] * (m + 1) for _ in range(n + 1)]

    def set(self, i, j, value):
        """Set the cost of giving row ``i`` column ``j`` (both 0-based)."""
        if not (0 <= i < self._n and 0 <= j < self._m):
            raise IndexError(f"cell ({i}, {j}) out of range")
        self._cost[i + 1][j + 1] = value

    def solve(self):
        """Return the minimum total cost of a full assignment of the rows."""
        n, m, a = self._n, self._m, self._cost
        u = [0] * (n + 1)
        v = [0] * (m + 1)
        p = [0] * (m + 1)
        way = [0] * (m + 1)
        for i in range(1, n + 1):
            p[0] = i
            j0 = 0
            minv = [math.inf] * (m + 1)
            used = [False] * (m + 1)
            while True:
                used[j0] = True
                i0 = p[j0]
                delta = math.inf
                j1 = 0
                for j in range(1, m + 1):
                    if used[j]:
                        continue
                    cur = a[i0][j] - u[i0] - v[j]
                    if cur < minv[j]:
                        minv[j] = cur
                        way[j] = j0
                    if minv[j] < delta:
                        delta = minv[j]
                        j1 = j
                for j in range(m + 1):
                    if used[j]:
                        u[p[j]] += delta
                        v[j] -= delta
                    else:
                        minv[j] -= delta
                j0 = j1
                if p[j0] == 0:
                    break
            while j0:
                j1 = way[j0]
                p[j0] = p[j1]
                j0 = j1
        return -v[0]