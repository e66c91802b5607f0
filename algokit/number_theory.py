"""Extended Euclid, modular inverses, CRT, linear congruences and Diophantine equations."""

from math import gcd


def extended_gcd(a, b):
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``g`` the gcd."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_inverse(a, m):
    """Inverse of ``a`` modulo ``m``; ValueError if they are not coprime."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def crt(remainders, moduli):
    """Smallest non-negative ``t`` with ``t % moduli[i] == remainders[i]``, or None."""
    pairs = list(zip(remainders, moduli))
    if not pairs:
        raise ValueError("at least one congruence is required")
    rem, mod = pairs[0]
    rem %= mod
    for r, m in pairs[1:]:
        g = gcd(mod, m)
        c = r - rem
        if c % g:
            return None
        k = (c // g) * mod_inverse(mod // g, m // g) % (m // g)
        rem += mod * k
        mod = mod // g * m
        rem %= mod
    return rem


def congruence_solutions(a, b, m):
    """All ``x`` in ``0..m-1`` with ``a*x == b (mod m)``; exactly ``gcd(a, m)`` or none."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g = gcd(a, m)
    if b % g:
        return []
    a //= g
    b //= g
    step = m // g
    x = mod_inverse(a, step) * b
    return [(x + step * k) % m for k in range(g)]


def diophantine_solution(a, b, c):
    """One solution ``(x, y, g)`` of ``a*x + b*y == c`` with ``g = gcd(|a|, |b|)``, or None."""
    if a == 0 and b == 0:
        raise ValueError("a and b must not both be zero")
    g, x, y = extended_gcd(abs(a), abs(b))
    if c % g:
        return None
    x *= c // g
    y *= c // g
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return x, y, g


def _tdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def count_solutions(a, b, c, minx, maxx, miny, maxy):
    """Number of integer solutions of ``a*x + b*y == c`` inside the given box."""
    if a == 0 or b == 0:
        raise ValueError("a and b must be non-zero")
    solution = diophantine_solution(a, b, c)
    if solution is None:
        return 0
    x, y, g = solution
    a //= g
    b //= g
    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1

    def shift(cnt):
        nonlocal x, y
        x += cnt * b
        y -= cnt * a

    shift(_tdiv(minx - x, b))
    if x < minx:
        shift(sign_b)
    if x > maxx:
        return 0
    lx1 = x

    shift(_tdiv(maxx - x, b))
    if x > maxx:
        shift(-sign_b)
    rx1 = x

    shift(-_tdiv(miny - y, a))
    if y < miny:
        shift(-sign_a)
    if y > maxy:
        return 0
    lx2 = x

    shift(-_tdiv(maxy - y, a))
    if y > maxy:
        shift(sign_a)
    rx2 = x

    lx2, rx2 = min(lx2, rx2), max(lx2, rx2)
    lx = max(lx1, lx2)
    rx = min(rx1, rx2)
    if lx > rx:
        return 0
    return (rx - lx) // abs(b) + 1


def raise_x_over(x, y, x_unit, y_unit, bar, or_equal):
    """Smallest shift of a solution making ``x > bar`` (``>=`` with ``or_equal``); returns ``(x, y)``.

    A solution moves as ``x + k*x_unit``, ``y - k*y_unit``; already-satisfying
    solutions are returned unchanged. To work on ``y`` swap the roles.
    """
    if x > bar or (x == bar and or_equal):
        return x, y
    shift = (bar - x + x_unit - int(or_equal)) // x_unit
    return x + shift * x_unit, y - shift * y_unit


def lower_x_under(x, y, x_unit, y_unit, bar, or_equal):
    """Smallest shift making ``x < bar`` (``<=`` with ``or_equal``); returns ``(x, y)``."""
    if x < bar or (x == bar and or_equal):
        return x, y
    shift = (x - bar + x_unit - int(or_equal)) // x_unit
    return x - shift * x_unit, y + shift * y_unit


def min_x_over(x, y, x_unit, y_unit, bar, or_equal):
    """The solution with the smallest ``x > bar`` (``>=`` with ``or_equal``); returns ``(x, y)``."""
    if x < bar or (x == bar and not or_equal):
        shift = (bar - x + x_unit - int(or_equal)) // x_unit
        return x + shift * x_unit, y - shift * y_unit
    shift = (x - bar - int(not or_equal)) // x_unit
    return x - shift * x_unit, y + shift * y_unit


def max_x_under(x, y, x_unit, y_unit, bar, or_equal):
    """The solution with the largest ``x < bar`` (``<=`` with ``or_equal``); returns ``(x, y)``."""
    if x < bar or (x == bar and or_equal):
        shift = (bar - x - int(not or_equal)) // x_unit
        return x + shift * x_unit, y - shift * y_unit
    shift = (x - bar + x_unit - int(or_equal)) // x_unit
    return x - shift * x_unit, y + shift * y_unit