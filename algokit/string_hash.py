"""Double polynomial hashing of strings with range queries."""

MOD = 10 ** 9 + 7
BASE1 = 31
BASE2 = 37


class StringHash:
    """Prefix hashes of a string under two bases; character ``a`` counts as 1."""

    def __init__(self, s):
        n = len(s)
        inv1 = pow(BASE1, MOD - 2, MOD)
        inv2 = pow(BASE2, MOD - 2, MOD)
        self._prefix = []
        self._inverse = []
        h1 = h2 = 0
        p1 = p2 = 1
        q1 = q2 = 1
        for ch in s:
            value = (ord(ch) - ord("a") + 1) % MOD
            h1 = (h1 + value * p1) % MOD
            h2 = (h2 + value * p2) % MOD
            self._prefix.append((h1, h2))
            self._inverse.append((q1, q2))
            p1 = p1 * BASE1 % MOD
            p2 = p2 * BASE2 % MOD
            q1 = q1 * inv1 % MOD
            q2 = q2 * inv2 % MOD
        self._n = n

    def value(self):
        """Hash pair of the whole string."""
        if not self._n:
            raise ValueError("empty string has no hash")
        return self._prefix[-1]

    def range_value(self, left, right):
        """Hash pair of ``s[left:right + 1]``, equal to the hash of that substring alone."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        h1, h2 = self._prefix[right]
        if left:
            b1, b2 = self._prefix[left - 1]
            h1, h2 = h1 - b1, h2 - b2
        q1, q2 = self._inverse[left]
        return h1 * q1 % MOD, h2 * q2 % MOD