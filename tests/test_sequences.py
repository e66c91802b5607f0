import random

import pytest

from algokit.sequences import compress, kth_balanced, long_division, next_balanced


def _balanced(s):
    depth = 0
    for ch in s:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def test_compress_preserves_order():
    rng = random.Random(1)
    values = [rng.randint(-50, 50) for _ in range(40)]
    ranks = compress(values)
    assert sorted(set(ranks)) == list(range(len(set(values))))
    for a, ra in zip(values, ranks):
        for b, rb in zip(values, ranks):
            assert (a < b) == (ra < rb)


def test_first_balanced_is_fully_nested():
    assert kth_balanced(3, 1) == "(" * 3 + ")" * 3


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_kth_and_next_agree(n):
    seq = [kth_balanced(n, 1)]
    while (following := next_balanced(seq[-1])) is not None:
        seq.append(following)
    assert all(_balanced(s) and len(s) == 2 * n for s in seq)
    assert seq == sorted(set(seq))
    assert [kth_balanced(n, k) for k in range(1, len(seq) + 1)] == seq
    with pytest.raises(ValueError):
        kth_balanced(n, len(seq) + 1)


def test_last_sequence_has_no_successor():
    assert next_balanced("()()") is None


def test_kth_zero_rejected():
    with pytest.raises(ValueError):
        kth_balanced(2, 0)


@pytest.mark.parametrize("seed", range(10))
def test_long_division_matches_integer_division(seed):
    rng = random.Random(seed)
    num = str(rng.randrange(1, 10 ** 40))
    divisor = rng.randint(1, 10 ** 6)
    assert long_division(num, divisor) == str(int(num) // divisor)


def test_long_division_small_numerator():
    assert long_division("7", 9) == str(7 // 9)


def test_long_division_errors():
    with pytest.raises(ValueError):
        long_division("12", 0)
    with pytest.raises(ValueError):
        long_division("1a2", 3)