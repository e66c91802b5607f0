"""2-SAT solved through strongly connected components of the implication graph."""

from .scc import kosaraju


class TwoSat:
    """Boolean variables ``0..n-1`` constrained by implications between literals.

    A literal is a pair ``(t, u)``: ``t == 0`` stands for "``x_u`` is true" and
    ``t == 1`` for "``x_u`` is false".
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._adj = [[] for _ in range(2 * n)]

    def _node(self, t, u):
        if t not in (0, 1):
            raise ValueError(f"literal flag must be 0 or 1, got {t}")
        if not 0 <= u < self._n:
            raise IndexError(f"variable {u} out of range")
        return 2 * u + t

    def add(self, tu, u, tv, v):
        """Add the implication: literal ``(tu, u)`` implies literal ``(tv, v)``."""
        self._adj[self._node(tu, u)].append(self._node(tv, v))

    def solve(self):
        """A satisfying assignment as a list of bools, or None if there is none."""
        component = kosaraju(self._adj).component
        values = []
        for i in range(self._n):
            positive, negative = component[2 * i], component[2 * i + 1]
            if positive == negative:
                return None
            values.append(positive > negative)
        return values