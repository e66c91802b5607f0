import random

import pytest

from algokit.xor_trie import BinaryTrie, XorTrie


def test_count_xor_less_matches_brute_force():
    rng = random.Random(5)
    values = [rng.randrange(1 << 10) for _ in range(60)]
    trie = BinaryTrie()
    for v in values:
        trie.insert(v)
    for _ in range(200):
        x = rng.randrange(1 << 11)
        k = rng.randrange(1 << 11)
        assert trie.count_xor_less(x, k) == sum(1 for v in values if v ^ x < k)


def test_remove_updates_counts():
    rng = random.Random(6)
    values = [rng.randrange(64) for _ in range(40)]
    trie = BinaryTrie()
    for v in values:
        trie.insert(v)
    for v in values[:15]:
        trie.remove(v)
    remaining = values[15:]
    for x in range(64):
        for k in (0, 1, 17, 64, 128):
            assert trie.count_xor_less(x, k) == sum(1 for v in remaining if v ^ x < k)


def test_duplicates_survive_single_removal():
    trie = BinaryTrie()
    trie.insert(7)
    trie.insert(7)
    trie.remove(7)
    assert trie.count_xor_less(7, 1) == 1


def test_remove_missing_raises_key_error():
    trie = BinaryTrie()
    trie.insert(3)
    with pytest.raises(KeyError):
        trie.remove(4)
    trie.remove(3)
    with pytest.raises(KeyError):
        trie.remove(3)


def test_insert_out_of_range_raises():
    trie = BinaryTrie()
    with pytest.raises(ValueError):
        trie.insert(-1)
    with pytest.raises(ValueError):
        trie.insert(1 << 31)


def test_max_xor_matches_brute_force():
    rng = random.Random(7)
    values = [rng.randrange(1 << 40) for _ in range(50)]
    trie = XorTrie()
    for v in values:
        trie.insert(v)
    for _ in range(100):
        x = rng.randrange(1 << 40)
        assert trie.max_xor(x) == max(x ^ v for v in values)


def test_max_xor_respects_removal():
    trie = XorTrie()
    trie.insert(5)
    trie.insert(9)
    trie.insert(9, -1)
    assert trie.max_xor(0) == 5


def test_small_max_bit():
    trie = XorTrie(3)
    values = [1, 6, 10, 12]
    for v in values:
        trie.insert(v)
    for x in range(16):
        assert trie.max_xor(x) == max(x ^ v for v in values)


def test_max_xor_empty_raises():
    trie = XorTrie()
    with pytest.raises(ValueError):
        trie.max_xor(3)
    trie.insert(4)
    trie.insert(4, -1)
    with pytest.raises(ValueError):
        trie.max_xor(3)