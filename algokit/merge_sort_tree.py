"""Merge sort trees counting values above a threshold in a range."""

import heapq
from bisect import bisect_right

from sortedcontainers import SortedList


def _capacity(n):
    size = 1
    while size < n:
        size <<= 1
    return size


def _covering_nodes(size, left, right):
    """Yield the tree nodes that exactly cover ``[left, right)``."""
    lo = max(left, 0) + size
    hi = min(right, size) + size
    while lo < hi:
        if lo & 1:
            yield lo
            lo += 1
        if hi & 1:
            hi -= 1
            yield hi
        lo >>= 1
        hi >>= 1


def _merged_levels(values, size):
    nodes = [[] for _ in range(2 * size)]
    for i, v in enumerate(values):
        nodes[size + i] = [v]
    for i in range(size - 1, 0, -1):
        nodes[i] = list(heapq.merge(nodes[2 * i], nodes[2 * i + 1]))
    return nodes


class MergeSortTree:
    """Static array answering "how many values above k in a range"."""

    def __init__(self, values):
        values = list(values)
        self._size = _capacity(len(values))
        self._nodes = _merged_levels(values, self._size)

    def count_greater(self, left, right, k):
        """Count values greater than ``k`` among positions ``[left, right)``."""
        return sum(len(self._nodes[i]) - bisect_right(self._nodes[i], k)
                   for i in _covering_nodes(self._size, left, right))


class UpdatableMergeSortTree:
    """Merge sort tree that also supports replacing single values."""

    def __init__(self, values):
        self._values = list(values)
        self._size = _capacity(len(self._values))
        self._nodes = [SortedList(node) for node in _merged_levels(self._values, self._size)]

    def update(self, index, value):
        """Replace the value at ``index`` with ``value``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        old = self._values[index]
        self._values[index] = value
        i = index + self._size
        while i:
            self._nodes[i].remove(old)
            self._nodes[i].add(value)
            i >>= 1

    def count_greater(self, left, right, k):
        """Count values greater than ``k`` among positions ``[left, right)``."""
        return sum(len(self._nodes[i]) - self._nodes[i].bisect_right(k)
                   for i in _covering_nodes(self._size, left, right))