from math import gcd

import pytest

from algokit.number_theory import (
    congruence_solutions, count_solutions, crt, diophantine_solution, extended_gcd,
    lower_x_under, max_x_under, min_x_over, mod_inverse, raise_x_over,
)


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 9), (9, 0), (12, 18)])
def test_extended_gcd_identity(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,m", [(3, 7), (10, 17), (-4, 9), (123, 1000)])
def test_mod_inverse(a, m):
    inv = mod_inverse(a, m)
    assert 0 <= inv < m
    assert a * inv % m == 1


def test_mod_inverse_missing():
    with pytest.raises(ValueError):
        mod_inverse(2, 4)


def test_crt_classic():
    assert crt([2, 3, 2], [3, 5, 7]) == 23


def test_crt_non_coprime_moduli():
    rems, mods = [3, 5], [6, 8]
    t = crt(rems, mods)
    assert all(t % m == r for r, m in zip(rems, mods))
    assert 0 <= t < 24


def test_crt_inconsistent():
    assert crt([1, 2], [2, 4]) is None


def test_crt_empty():
    with pytest.raises(ValueError):
        crt([], [])


@pytest.mark.parametrize("a,b,m", [(6, 4, 10), (14, 30, 100), (3, 1, 7), (0, 0, 5)])
def test_congruence_solutions(a, b, m):
    sols = congruence_solutions(a, b, m)
    assert len(sols) == gcd(a, m)
    assert len(set(sols)) == len(sols)
    assert all(0 <= x < m and a * x % m == b % m for x in sols)


def test_congruence_without_solution():
    assert congruence_solutions(6, 3, 10) == []


@pytest.mark.parametrize("a,b,c", [(3, 5, 1), (-4, 6, 10), (7, -3, -11), (6, 9, 12)])
def test_diophantine_solution(a, b, c):
    x, y, g = diophantine_solution(a, b, c)
    assert g == gcd(a, b)
    assert a * x + b * y == c


def test_diophantine_none():
    assert diophantine_solution(4, 6, 5) is None


def test_diophantine_zero_coefficients():
    with pytest.raises(ValueError):
        diophantine_solution(0, 0, 1)


@pytest.mark.parametrize("a,b,c", [(2, 3, 12), (-2, 3, 4), (4, 6, 10), (5, -7, 3)])
def test_count_solutions_against_enumeration(a, b, c):
    lo, hi = -10, 10
    expected = sum(1 for x in range(lo, hi + 1)
                   if (c - a * x) % b == 0 and lo <= (c - a * x) // b <= hi)
    assert count_solutions(a, b, c, lo, hi, lo, hi) == expected


def test_count_solutions_unsolvable():
    assert count_solutions(4, 6, 5, -100, 100, -100, 100) == 0


A, B = 3, 5


@pytest.mark.parametrize("or_equal", [False, True])
def test_raise_and_min_x_over(or_equal):
    bar = 12
    for fn in (raise_x_over, min_x_over):
        x, y = fn(2, -1, B, A, bar, or_equal)
        assert A * x + B * y == 1
        assert x >= bar if or_equal else x > bar
        prev = x - B
        assert prev < bar if or_equal else prev <= bar


def test_min_x_over_lowers_large_x():
    x, y = min_x_over(52, -31, B, A, 12, False)
    assert A * x + B * y == 1
    assert 12 < x <= 12 + B


@pytest.mark.parametrize("or_equal", [False, True])
def test_lower_and_max_x_under(or_equal):
    bar = 12
    for fn in (lower_x_under, max_x_under):
        x, y = fn(52, -31, B, A, bar, or_equal)
        assert A * x + B * y == 1
        assert x <= bar if or_equal else x < bar
        nxt = x + B
        assert nxt > bar if or_equal else nxt >= bar