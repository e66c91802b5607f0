"""Prime testing, segmented sieving and the Möbius function."""

from math import isqrt

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def mobius_table(limit):
    """List of ``mu(i)`` for ``0 <= i <= limit``, with ``mu(0) = 0``."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    mu = [0] * (limit + 1)
    if limit >= 1:
        mu[1] = 1
    composite = [False] * (limit + 1)
    primes = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            mu[i] = -1
        for p in primes:
            if i * p > limit:
                break
            composite[i * p] = True
            if i % p == 0:
                mu[i * p] = 0
                break
            mu[i * p] = -mu[i]
    return mu


def segmented_sieve(low, high):
    """Primality flags for every integer in ``low..high`` inclusive."""
    if low < 0:
        raise ValueError("low must be non-negative")
    if low > high:
        return []
    root = isqrt(high)
    marked = [False] * (root + 1)
    base = []
    for i in range(2, root + 1):
        if not marked[i]:
            base.append(i)
            marked[i * i::i] = [True] * len(range(i * i, root + 1, i))
    flags = [True] * (high - low + 1)
    for p in base:
        start = max(p * p, -(-low // p) * p)
        flags[start - low::p] = [False] * len(range(start, high + 1, p))
    for small in (0, 1):
        if low <= small <= high:
            flags[small - low] = False
    return flags


def _witnesses_composite(n, a, d, s):
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(1, s):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_prime(n):
    """Deterministic Miller-Rabin test, exact for all 64-bit integers."""
    if n < 2:
        return False
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _BASES:
        if n == a:
            return True
        if _witnesses_composite(n, a, d, s):
            return False
    return True