"""Binomial coefficients modulo a prime and Lagrange interpolation on ``0..n-1``."""


def _inverse_factorials(limit, mod):
    fact = [1] * (limit + 1)
    for i in range(1, limit + 1):
        fact[i] = fact[i - 1] * i % mod
    return fact, [pow(f, mod - 2, mod) for f in fact]


class Binomial:
    """Tables of factorials, inverse factorials and powers of two for ``0..limit``."""

    def __init__(self, limit, mod):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self._limit = limit
        self._mod = mod
        self._fact, self._inv = _inverse_factorials(limit, mod)
        self._pow2 = [1] * (limit + 1)
        for i in range(1, limit + 1):
            self._pow2[i] = self._pow2[i - 1] * 2 % mod

    def _check(self, n):
        if not 0 <= n <= self._limit:
            raise IndexError(f"{n} outside the table 0..{self._limit}")

    def ncr(self, n, r):
        """``C(n, r)`` modulo the prime; requires ``n >= r >= 0``."""
        if not n >= r >= 0:
            raise ValueError(f"C({n}, {r}) needs n >= r >= 0")
        self._check(n)
        return self._fact[n] * self._inv[r] % self._mod * self._inv[n - r] % self._mod

    def power_of_two(self, n):
        """``2**n`` modulo the prime."""
        self._check(n)
        return self._pow2[n]


class LagrangePoly:
    """The polynomial of degree ``len(values) - 1`` with ``f(i) == values[i]``, modulo a prime."""

    def __init__(self, values, mod):
        self._mod = mod
        self._y = [v % mod for v in values]
        n = len(self._y)
        if not n:
            raise ValueError("at least one value is required")
        _, inv = _inverse_factorials(n - 1, mod)
        self._den = []
        for i in range(n):
            d = inv[n - i - 1] * inv[i] % mod
            if (n - i - 1) % 2:
                d = (mod - d) % mod
            self._den.append(d)

    def __call__(self, x):
        mod, y = self._mod, self._y
        n = len(y)
        x %= mod
        if x < n:
            return y[x]
        left = [1] * n
        for i in range(1, n):
            left[i] = left[i - 1] * (x - (i - 1)) % mod
        right = [1] * n
        for i in range(n - 2, -1, -1):
            right[i] = right[i + 1] * (x - (i + 1)) % mod
        return sum(l * r % mod * v % mod * d for l, r, v, d in zip(left, right, y, self._den)) % mod