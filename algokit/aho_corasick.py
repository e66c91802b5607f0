"""Aho-Corasick automaton counting occurrences of many patterns in a text."""

from collections import deque

_ALPHABET = 26


def _letter(ch):
    i = ord(ch) - ord("a")
    if not 0 <= i < _ALPHABET:
        raise ValueError(f"character {ch!r} is not a lowercase letter")
    return i


class AhoCorasick:
    """Patterns over ``a``-``z``, each tagged with an integer id."""

    def __init__(self):
        self._children = [[-1] * _ALPHABET]
        self._ids = [[]]

    def insert(self, pattern, ident):
        """Add ``pattern`` under the id ``ident``."""
        node = 0
        for ch in pattern:
            c = _letter(ch)
            child = self._children[node][c]
            if child == -1:
                child = len(self._children)
                self._children.append([-1] * _ALPHABET)
                self._ids.append([])
                self._children[node][c] = child
            node = child
        self._ids[node].append(ident)

    def _automaton(self):
        children = self._children
        size = len(children)
        link = [0] * size
        goto = [[0] * _ALPHABET for _ in range(size)]
        order = []
        queue = deque([0])
        while queue:
            u = queue.popleft()
            order.append(u)
            for c in range(_ALPHABET):
                v = children[u][c]
                if v == -1:
                    goto[u][c] = goto[link[u]][c]
                    continue
                link[v] = 0 if u == 0 else goto[link[u]][c]
                goto[u][c] = v
                queue.append(v)
        return link, goto, order

    def match(self, text, count):
        """Occurrences in ``text`` of the patterns with ids ``0..count-1``, as a list."""
        link, goto, order = self._automaton()
        seen = [0] * len(goto)
        state = 0
        for ch in text:
            state = goto[state][_letter(ch)]
            seen[state] += 1
        for u in reversed(order):
            if u:
                seen[link[u]] += seen[u]
        result = [0] * count
        for node, idents in enumerate(self._ids):
            for ident in idents:
                if not 0 <= ident < count:
                    raise IndexError(f"pattern id {ident} outside 0..{count - 1}")
                result[ident] = seen[node]
        return result