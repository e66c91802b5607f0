"""Fast Fourier and number-theoretic transforms, and convolutions built on them."""

import cmath
import math

NTT_MOD = 998244353
NTT_ROOT = 3
_NTT_MAX_LOG = 23


def _check_length(n):
    if n & (n - 1):
        raise ValueError("length must be a power of two")


def _bit_reverse(a):
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


def fft(values, invert=False):
    """Discrete Fourier transform (``e^{+2 pi i/n}`` roots); the inverse divides by ``n``."""
    a = [complex(v) for v in values]
    n = len(a)
    if not n:
        return a
    _check_length(n)
    _bit_reverse(a)
    length = 2
    while length <= n:
        half = length // 2
        ang = 2 * math.pi / length * (-1 if invert else 1)
        roots = [cmath.rect(1.0, ang * j) for j in range(half)]
        for i in range(0, n, length):
            for j, w in enumerate(roots):
                u = a[i + j]
                v = a[i + j + half] * w
                a[i + j] = u + v
                a[i + j + half] = u - v
        length *= 2
    if invert:
        a = [x / n for x in a]
    return a


def convolve_mod(a, b, mod):
    """Product of two polynomials with coefficients reduced modulo ``mod``.

    Each coefficient is split around ``sqrt(mod)`` so that floating-point
    transforms stay exact for moduli up to about ``2**30``.
    """
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = 1 << size.bit_length()
    cut = math.isqrt(mod)
    left = [0j] * n
    right = [0j] * n
    for i, v in enumerate(a):
        v %= mod
        left[i] = complex(v // cut, v % cut)
    for i, v in enumerate(b):
        v %= mod
        right[i] = complex(v // cut, v % cut)
    left = fft(left)
    right = fft(right)
    outl = [0j] * n
    outs = [0j] * n
    for i in range(n):
        j = -i & (n - 1)
        outl[j] = (left[i] + left[j].conjugate()) * right[i] / (2.0 * n)
        outs[j] = (left[i] - left[j].conjugate()) * right[i] / (2.0 * n) / 1j
    outl = fft(outl)
    outs = fft(outs)
    result = []
    for i in range(size):
        av = int(outl[i].real + 0.5)
        cv = int(outs[i].imag + 0.5)
        bv = int(outl[i].imag + 0.5) + int(outs[i].real + 0.5)
        result.append(((av % mod * cut + bv) % mod * cut + cv) % mod)
    return result


def ntt(values, invert=False):
    """Number-theoretic transform modulo 998244353 with primitive root 3."""
    a = [v % NTT_MOD for v in values]
    n = len(a)
    if not n:
        return a
    _check_length(n)
    if n > 1 << _NTT_MAX_LOG:
        raise ValueError(f"length exceeds 2**{_NTT_MAX_LOG}")
    _bit_reverse(a)
    length, lg = 2, 1
    while length <= n:
        half = length // 2
        step = (NTT_MOD - 1) >> lg
        wlen = pow(NTT_ROOT, NTT_MOD - 1 - step if invert else step, NTT_MOD)
        for i in range(0, n, length):
            w = 1
            for j in range(i, i + half):
                u = a[j]
                v = a[j + half] * w % NTT_MOD
                a[j] = (u + v) % NTT_MOD
                a[j + half] = (u - v) % NTT_MOD
                w = w * wlen % NTT_MOD
        length *= 2
        lg += 1
    if invert:
        scale = pow(n, NTT_MOD - 2, NTT_MOD)
        a = [x * scale % NTT_MOD for x in a]
    return a


def ntt_convolve(a, b):
    """Product of two polynomials modulo 998244353."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = 1
    while n < size:
        n *= 2
    fa = ntt(list(a) + [0] * (n - len(a)))
    fb = ntt(list(b) + [0] * (n - len(b)))
    return ntt([x * y % NTT_MOD for x, y in zip(fa, fb)], invert=True)[:size]