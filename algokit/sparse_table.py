"""Sparse table for idempotent range queries."""


class SparseTable:
    """Answers inclusive range queries for an idempotent ``combine`` in O(1)."""

    def __init__(self, values, combine):
        values = list(values)
        if not values:
            raise ValueError("sparse table needs at least one value")
        self._combine = combine
        self._levels = [values]
        n = len(values)
        span = 1
        while 2 * span <= n:
            prev = self._levels[-1]
            self._levels.append([combine(prev[i], prev[i + span])
                                 for i in range(n - 2 * span + 1)])
            span *= 2

    def query(self, left, right):
        """Combine the values at positions ``left..right`` inclusive."""
        if not 0 <= left <= right < len(self._levels[0]):
            raise IndexError(f"range [{left}, {right}] out of bounds")
        j = (right - left + 1).bit_length() - 1
        row = self._levels[j]
        return self._combine(row[left], row[right - (1 << j) + 1])