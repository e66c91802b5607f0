import pytest

from algokit.string_trie import StringTrie


@pytest.fixture
def trie():
    t = StringTrie()
    for word in ("apple", "app", "apply", "banana"):
        t.insert(word)
    return t


def test_prefix_counts(trie):
    assert trie.query("app") == 3
    assert trie.query("appl") == 2
    assert trie.query("apple") == 1
    assert trie.query("ban") == 1


def test_missing_prefix(trie):
    assert trie.query("c") == 0
    assert trie.query("applesauce") == 0


def test_removal(trie):
    trie.insert("apple", -1)
    assert trie.query("app") == 2
    assert trie.query("apple") == 0


def test_repeated_insert(trie):
    trie.insert("app", 3)
    assert trie.query("ap") == 6


def test_empty_query_counts_nothing(trie):
    assert trie.query("") == 0


def test_characters_outside_alphabet():
    t = StringTrie(2)
    t.insert("abba")
    assert t.query("ab") == 1
    with pytest.raises(ValueError):
        t.insert("abc")
    with pytest.raises(ValueError):
        StringTrie().query("A")