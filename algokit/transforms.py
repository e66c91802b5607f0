"""Fast Walsh-Hadamard transform over the integers modulo a prime."""


def xor_transform(values, mod, inverse=False):
    """Walsh-Hadamard transform of ``values`` modulo ``mod``; length must be a power of two."""
    a = [v % mod for v in values]
    n = len(a)
    if not a:
        return a
    if n & (n - 1):
        raise ValueError("length must be a power of two")
    step = 1
    while step < n:
        for start in range(0, n, 2 * step):
            for j in range(start, start + step):
                u, v = a[j], a[j + step]
                a[j] = (u + v) % mod
                a[j + step] = (u - v) % mod
        step *= 2
    if inverse:
        scale = pow(n, -1, mod)
        a = [x * scale % mod for x in a]
    return a


def xor_convolution(a, b, mod):
    """``c[i ^ j] += a[i] * b[j]`` modulo ``mod``, padded to a common power of two."""
    size = 1
    while size < max(len(a), len(b)):
        size *= 2
    fa = xor_transform(list(a) + [0] * (size - len(a)), mod)
    fb = xor_transform(list(b) + [0] * (size - len(b)), mod)
    return xor_transform([x * y % mod for x, y in zip(fa, fb)], mod, inverse=True)