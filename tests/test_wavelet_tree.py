import random

import pytest

from algokit.wavelet_tree import WaveletTree


def _random_values(seed, n, low, high):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(n)]


def test_kth_matches_sorted_slices():
    values = _random_values(71, 30, 1, 40)
    tree = WaveletTree(values, 1, 40)
    for left in range(len(values)):
        for right in range(left, len(values)):
            ordered = sorted(values[left:right + 1])
            for k in range(1, len(ordered) + 1):
                assert tree.kth(left, right, k) == ordered[k - 1]


def test_counts_match_brute_force():
    values = _random_values(72, 25, 0, 15)
    tree = WaveletTree(values)
    for left in range(len(values)):
        for right in range(left, len(values)):
            window = values[left:right + 1]
            for k in range(-1, 17):
                assert tree.count_less_equal(left, right, k) == sum(1 for v in window if v <= k)
                assert tree.count(left, right, k) == window.count(k)


def test_negative_values():
    values = _random_values(73, 20, -9, 9)
    tree = WaveletTree(values, -10, 10)
    for left in range(0, len(values), 3):
        right = len(values) - 1
        ordered = sorted(values[left:])
        assert tree.kth(left, right, 1) == ordered[0]
        assert tree.kth(left, right, len(ordered)) == ordered[-1]
        assert tree.count_less_equal(left, right, 0) == sum(1 for v in ordered if v <= 0)


def test_value_outside_range_rejected():
    with pytest.raises(ValueError):
        WaveletTree([1, 5, 11], 1, 10)


def test_bad_k_rejected():
    tree = WaveletTree([3, 1, 2])
    with pytest.raises(ValueError):
        tree.kth(0, 2, 4)
    with pytest.raises(ValueError):
        tree.kth(0, 2, 0)


def test_out_of_bounds_range_rejected():
    tree = WaveletTree([3, 1, 2])
    with pytest.raises(IndexError):
        tree.count(0, 3, 1)