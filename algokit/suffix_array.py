"""Suffix array with ranks and longest common prefixes."""


class SuffixArray:
    """Suffix array of a string or of a sequence of positive integers.

    ``sa`` lists suffix start positions in sorted order, ``rank`` is its
    inverse, and ``lcp[i]`` is the longest common prefix of the suffixes
    ``sa[i]`` and ``sa[i + 1]``.
    """

    def __init__(self, values):
        if isinstance(values, str):
            s = [ord(ch) for ch in values]
        else:
            s = list(values)
        if any(v <= 0 for v in s):
            raise ValueError("values must be positive")
        m = len(s)
        s.append(0)
        n = len(s)

        order = sorted(range(n), key=s.__getitem__)
        classes = [0] * n
        for prev, cur in zip(order, order[1:]):
            classes[cur] = classes[prev] + (s[cur] != s[prev])
        k = 1
        while k < n:
            keys = [(classes[i], classes[(i + k) % n]) for i in range(n)]
            order.sort(key=keys.__getitem__)
            fresh = [0] * n
            for prev, cur in zip(order, order[1:]):
                fresh[cur] = fresh[prev] + (keys[cur] != keys[prev])
            classes = fresh
            k *= 2

        self.sa = order[1:]
        self.rank = [0] * m
        for r, i in enumerate(self.sa):
            self.rank[i] = r

        self.lcp = [0] * max(m - 1, 0)
        h = 0
        for i in range(m):
            r = self.rank[i]
            if r == m - 1:
                h = 0
                continue
            j = self.sa[r + 1]
            while i + h < m and j + h < m and s[i + h] == s[j + h]:
                h += 1
            self.lcp[r] = h
            if h:
                h -= 1