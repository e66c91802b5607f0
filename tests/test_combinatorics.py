from math import comb

import pytest

from algokit.combinatorics import Binomial, LagrangePoly

MOD = 10 ** 9 + 7


def test_ncr_matches_math_comb():
    table = Binomial(60, MOD)
    assert all(table.ncr(n, r) == comb(n, r) % MOD for n in range(61) for r in range(n + 1))


def test_ncr_small_prime():
    table = Binomial(6, 7)
    assert table.ncr(5, 2) == comb(5, 2) % 7


def test_power_of_two():
    table = Binomial(100, MOD)
    assert all(table.power_of_two(n) == pow(2, n, MOD) for n in range(101))


def test_ncr_rejects_r_above_n():
    with pytest.raises(ValueError):
        Binomial(10, MOD).ncr(2, 3)


def test_ncr_outside_table():
    with pytest.raises(IndexError):
        Binomial(10, MOD).ncr(11, 1)


def poly(x):
    return 3 * x ** 3 - 7 * x + 11


def test_lagrange_extrapolates_cubic():
    f = LagrangePoly([poly(i) for i in range(4)], MOD)
    assert all(f(x) == poly(x) % MOD for x in (4, 10, 100, 12345))


def test_lagrange_returns_samples():
    values = [5, -1, 8]
    f = LagrangePoly(values, MOD)
    assert [f(i) for i in range(3)] == [v % MOD for v in values]


def test_lagrange_reduces_x():
    f = LagrangePoly([poly(i) for i in range(4)], MOD)
    assert f(MOD + 2) == poly(2) % MOD


def test_lagrange_constant():
    f = LagrangePoly([9], MOD)
    assert f(10 ** 12) == 9


def test_lagrange_empty():
    with pytest.raises(ValueError):
        LagrangePoly([], MOD)