"""Segment trees for range sums."""


def _capacity(n):
    size = 1
    while size < n:
        size <<= 1
    return size


class SegmentTree:
    """Point assignment and half-open range sum."""

    def __init__(self, n):
        self._n = n
        self._size = _capacity(n)
        self._sums = [0] * (2 * self._size)

    def update(self, index, value):
        """Set position ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        i = index + self._size
        self._sums[i] = value
        i >>= 1
        while i:
            self._sums[i] = self._sums[2 * i] + self._sums[2 * i + 1]
            i >>= 1

    def query(self, left, right):
        """Return the sum over ``[left, right)``."""
        lo = max(left, 0) + self._size
        hi = min(right, self._size) + self._size
        total = 0
        while lo < hi:
            if lo & 1:
                total += self._sums[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._sums[hi]
            lo >>= 1
            hi >>= 1
        return total


class LazySegmentTree:
    """Range addition and half-open range sum with lazy propagation."""

    def __init__(self, n):
        self._size = _capacity(n)
        self._sums = [0] * (2 * self._size)
        self._lazy = [0] * (2 * self._size)

    def _apply(self, node, lo, hi, value):
        self._sums[node] += value * (hi - lo)
        self._lazy[node] += value

    def _push(self, node, lo, hi):
        pending = self._lazy[node]
        if not pending or hi - lo == 1:
            return
        mid = (lo + hi) // 2
        self._apply(2 * node + 1, lo, mid, pending)
        self._apply(2 * node + 2, mid, hi, pending)
        self._lazy[node] = 0

    def add(self, left, right, value):
        """Add ``value`` to every position in ``[left, right)``."""
        self._add(left, right, value, 0, 0, self._size)

    def _add(self, left, right, value, node, lo, hi):
        if right <= lo or hi <= left:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._add(left, right, value, 2 * node + 1, lo, mid)
        self._add(left, right, value, 2 * node + 2, mid, hi)
        self._sums[node] = self._sums[2 * node + 1] + self._sums[2 * node + 2]

    def query(self, left, right):
        """Return the sum over ``[left, right)``."""
        return self._query(left, right, 0, 0, self._size)

    def _query(self, left, right, node, lo, hi):
        if right <= lo or hi <= left:
            return 0
        if left <= lo and hi <= right:
            return self._sums[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return (self._query(left, right, 2 * node + 1, lo, mid)
                + self._query(left, right, 2 * node + 2, mid, hi))