"""Trie over lowercase strings counting how many inserted strings pass each prefix."""


class StringTrie:
    """Multiset of strings over the first ``alphabet`` lowercase letters."""

    def __init__(self, alphabet=26):
        if not 1 <= alphabet <= 26:
            raise ValueError("alphabet must hold between 1 and 26 letters")
        self._alphabet = alphabet
        self._children = [[-1] * alphabet]
        self._count = [0]

    def _index(self, ch):
        i = ord(ch) - ord("a")
        if not 0 <= i < self._alphabet:
            raise ValueError(f"character {ch!r} outside the alphabet")
        return i

    def insert(self, s, count=1):
        """Add ``count`` copies of ``s``; a negative count removes copies."""
        node = 0
        for ch in s:
            i = self._index(ch)
            child = self._children[node][i]
            if child == -1:
                child = len(self._count)
                self._children.append([-1] * self._alphabet)
                self._count.append(0)
                self._children[node][i] = child
            node = child
            self._count[node] += count

    def query(self, s):
        """Number of stored strings that start with ``s``; 0 for the empty string."""
        node = 0
        for ch in s:
            node = self._children[node][self._index(ch)]
            if node == -1:
                return 0
        return self._count[node]