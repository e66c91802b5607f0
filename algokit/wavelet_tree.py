"""Wavelet tree for order statistics and counting over array ranges."""


class _Node:
    __slots__ = ("low", "high", "prefix", "left", "right")

    def __init__(self, values, low, high):
        self.low = low
        self.high = high
        self.prefix = [0]
        self.left = self.right = None
        if low == high or not values:
            return
        mid = (low + high) // 2
        running = 0
        for v in values:
            running += v <= mid
            self.prefix.append(running)
        self.left = _Node([v for v in values if v <= mid], low, mid)
        self.right = _Node([v for v in values if v > mid], mid + 1, high)

    # Positions l and r are 1-based and inclusive below.
    def kth(self, l, r, k):
        if l > r:
            return 0
        if self.low == self.high:
            return self.low
        lb, rb = self.prefix[l - 1], self.prefix[r]
        in_left = rb - lb
        if k <= in_left:
            return self.left.kth(lb + 1, rb, k)
        return self.right.kth(l - lb, r - rb, k - in_left)

    def count_less_equal(self, l, r, k):
        if l > r or k < self.low:
            return 0
        if self.high <= k:
            return r - l + 1
        lb, rb = self.prefix[l - 1], self.prefix[r]
        return (self.left.count_less_equal(lb + 1, rb, k)
                + self.right.count_less_equal(l - lb, r - rb, k))

    def count(self, l, r, k):
        if l > r or k < self.low or k > self.high:
            return 0
        if self.low == self.high:
            return r - l + 1
        lb, rb = self.prefix[l - 1], self.prefix[r]
        if k <= (self.low + self.high) // 2:
            return self.left.count(lb + 1, rb, k)
        return self.right.count(l - lb, r - rb, k)


class WaveletTree:
    """Range queries over a fixed array of integers in ``[low, high]``.

    Query positions are 0-based and inclusive.
    """

    def __init__(self, values, low=None, high=None):
        values = list(values)
        if low is None:
            low = min(values, default=0)
        if high is None:
            high = max(values, default=low)
        if low > high:
            raise ValueError("low must not exceed high")
        for v in values:
            if not low <= v <= high:
                raise ValueError(f"value {v} outside [{low}, {high}]")
        self._n = len(values)
        self._root = _Node(values, low, high)

    def _bounds(self, left, right):
        if left < 0 or right >= self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        return left + 1, right + 1

    def kth(self, left, right, k):
        """Return the ``k``-th smallest (1-based) value in ``left..right``."""
        l, r = self._bounds(left, right)
        if not 1 <= k <= r - l + 1:
            raise ValueError(f"k={k} outside 1..{max(r - l + 1, 0)}")
        return self._root.kth(l, r, k)

    def count_less_equal(self, left, right, k):
        """Count values at most ``k`` in ``left..right``."""
        l, r = self._bounds(left, right)
        return self._root.count_less_equal(l, r, k)

    def count(self, left, right, k):
        """Count values equal to ``k`` in ``left..right``."""
        l, r = self._bounds(left, right)
        return self._root.count(l, r, k)