"""Coordinate compression, balanced bracket sequences and decimal long division."""

from bisect import bisect_left


def compress(values):
    """Replace each value by its rank among the distinct values."""
    values = list(values)
    distinct = sorted(set(values))
    return [bisect_left(distinct, v) for v in values]


def kth_balanced(n, k):
    """The ``k``-th (1-based, lexicographic, '(' < ')') balanced sequence of ``n`` pairs."""
    if n < 0:
        raise ValueError("n must be non-negative")
    ways = [[0] * (n + 2) for _ in range(2 * n + 1)]
    ways[0][0] = 1
    for i in range(1, 2 * n + 1):
        for j in range(n + 1):
            ways[i][j] = (ways[i - 1][j - 1] if j else 0) + ways[i - 1][j + 1]
    if not 1 <= k <= ways[2 * n][0]:
        raise ValueError(f"k={k} outside 1..{ways[2 * n][0]}")
    out = []
    depth = 0
    for i in range(2 * n):
        remaining = 2 * n - i - 1
        if depth + 1 <= n and ways[remaining][depth + 1] >= k:
            out.append("(")
            depth += 1
        else:
            out.append(")")
            if depth + 1 <= n:
                k -= ways[remaining][depth + 1]
            depth -= 1
    return "".join(out)


def next_balanced(s):
    """The next balanced sequence after ``s`` in lexicographic order, or None."""
    n = len(s)
    depth = 0
    for i in range(n - 1, -1, -1):
        depth += -1 if s[i] == "(" else 1
        if s[i] == "(" and depth > 0:
            depth -= 1
            opening = (n - i - 1 - depth) // 2
            closing = n - i - 1 - opening
            return s[:i] + ")" + "(" * opening + ")" * closing
    return None


def long_division(num, divisor):
    """Quotient of the decimal string ``num`` by ``divisor``, as a decimal string."""
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    if not num or not num.isdigit():
        raise ValueError(f"not a decimal number: {num!r}")
    remainder = 0
    digits = []
    for ch in num:
        remainder = remainder * 10 + int(ch)
        digits.append(str(remainder // divisor))
        remainder %= divisor
    return "".join(digits).lstrip("0") or "0"