import os

import pytest

from algokit.suffix_array import SuffixArray


def test_banana():
    sa = SuffixArray("banana")
    assert sa.sa == [5, 3, 1, 0, 4, 2]
    assert sa.lcp == [1, 3, 0, 0, 2]


@pytest.mark.parametrize("text", ["mississippi", "abcabcabc", "aaaa", "zyx", "a"])
def test_suffixes_are_sorted(text):
    sa = SuffixArray(text)
    assert [text[i:] for i in sa.sa] == sorted(text[i:] for i in range(len(text)))


@pytest.mark.parametrize("text", ["mississippi", "abracadabra", "aaaa"])
def test_rank_is_inverse(text):
    sa = SuffixArray(text)
    assert all(sa.rank[sa.sa[r]] == r for r in range(len(text)))


@pytest.mark.parametrize("text", ["mississippi", "abracadabra", "aaaa"])
def test_lcp_matches_adjacent_suffixes(text):
    sa = SuffixArray(text)
    expected = [len(os.path.commonprefix([text[a:], text[b:]]))
                for a, b in zip(sa.sa, sa.sa[1:])]
    assert sa.lcp == expected


def test_integer_values():
    values = [3, 1, 2, 1, 2]
    sa = SuffixArray(values)
    assert [values[i:] for i in sa.sa] == sorted(values[i:] for i in range(len(values)))


def test_empty_input():
    sa = SuffixArray("")
    assert (sa.sa, sa.rank, sa.lcp) == ([], [], [])


def test_non_positive_values_rejected():
    with pytest.raises(ValueError):
        SuffixArray([1, 0, 2])