"""Fenwick (binary indexed) tree for prefix sums with point updates."""


class FenwickTree:
    """Prefix sums over positions ``0..size`` with point additions."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * (size + 2)

    def _check(self, k):
        if not 0 <= k < len(self._tree) - 1:
            raise IndexError(f"position {k} out of range")

    def prefix_sum(self, k):
        """Return the sum of positions ``0..k``; ``k == -1`` gives 0."""
        if not -1 <= k < len(self._tree) - 1:
            raise IndexError(f"position {k} out of range")
        total = 0
        i = k + 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def add(self, k, value):
        """Add ``value`` to position ``k``."""
        self._check(k)
        i = k + 1
        while i < len(self._tree):
            self._tree[i] += value
            i += i & -i

    def range_sum(self, left, right):
        """Return the sum of positions ``left..right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def lower_bound(self, target):
        """Return the length of the shortest prefix whose sum reaches ``target``.

        Assumes all stored values are non-negative.
        """
        tree = self._tree
        pos = 0
        step = 1 << (len(tree).bit_length() - 1)
        while step and target:
            nxt = pos + step
            if nxt < len(tree) and tree[nxt] < target:
                target -= tree[nxt]
                pos = nxt
            step >>= 1
        return pos + 1