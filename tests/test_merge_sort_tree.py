import random

import pytest

from algokit.merge_sort_tree import MergeSortTree, UpdatableMergeSortTree


def _brute(values, left, right, k):
    return sum(1 for v in values[left:right] if v > k)


def test_static_counts_match_brute_force():
    rng = random.Random(41)
    values = [rng.randint(-30, 30) for _ in range(27)]
    tree = MergeSortTree(values)
    for _ in range(300):
        left = rng.randrange(len(values) + 1)
        right = rng.randrange(left, len(values) + 1)
        k = rng.randint(-35, 35)
        assert tree.count_greater(left, right, k) == _brute(values, left, right, k)


def test_whole_range_below_minimum_counts_everything():
    values = [4, 1, 9, 7]
    tree = MergeSortTree(values)
    assert tree.count_greater(0, len(values), min(values) - 1) == len(values)
    assert tree.count_greater(0, len(values), max(values)) == 0


def test_updates_match_brute_force():
    rng = random.Random(42)
    values = [rng.randint(0, 50) for _ in range(18)]
    tree = UpdatableMergeSortTree(values)
    for _ in range(200):
        if rng.random() < 0.4:
            i = rng.randrange(len(values))
            v = rng.randint(0, 50)
            values[i] = v
            tree.update(i, v)
        else:
            left = rng.randrange(len(values) + 1)
            right = rng.randrange(left, len(values) + 1)
            k = rng.randint(-1, 51)
            assert tree.count_greater(left, right, k) == _brute(values, left, right, k)


def test_update_out_of_range_raises():
    tree = UpdatableMergeSortTree([1, 2])
    with pytest.raises(IndexError):
        tree.update(2, 5)