"""Suffix automaton answering substring, count and occurrence queries."""


class SuffixAutomaton:
    """Minimal automaton recognising every substring of ``s``."""

    def __init__(self, s):
        self._len = [0]
        self._link = [-1]
        self._next = [{}]
        self._cnt = [0]
        last = 0
        for ch in s:
            last = self._extend(ch, last)
        by_length = sorted(range(1, len(self._len)), key=self._len.__getitem__, reverse=True)
        for state in by_length:
            self._cnt[self._link[state]] += self._cnt[state]

    def _new_state(self, length, link, transitions, cnt):
        self._len.append(length)
        self._link.append(link)
        self._next.append(transitions)
        self._cnt.append(cnt)
        return len(self._len) - 1

    def _extend(self, ch, last):
        length, link, nxt = self._len, self._link, self._next
        cur = self._new_state(length[last] + 1, -1, {}, 1)
        p = last
        while p != -1 and ch not in nxt[p]:
            nxt[p][ch] = cur
            p = link[p]
        if p == -1:
            link[cur] = 0
            return cur
        q = nxt[p][ch]
        if length[p] + 1 == length[q]:
            link[cur] = q
            return cur
        clone = self._new_state(length[p] + 1, link[q], dict(nxt[q]), 0)
        while p != -1 and nxt[p].get(ch) == q:
            nxt[p][ch] = clone
            p = link[p]
        link[q] = link[cur] = clone
        return cur

    def _walk(self, t):
        state = 0
        for ch in t:
            state = self._next[state].get(ch)
            if state is None:
                return None
        return state

    def contains(self, t):
        """Whether ``t`` is a substring."""
        return self._walk(t) is not None

    def count_distinct(self):
        """Number of distinct non-empty substrings."""
        return sum(self._len[i] - self._len[self._link[i]] for i in range(1, len(self._len)))

    def occurrences(self, t):
        """Number of (possibly overlapping) occurrences of ``t``."""
        state = self._walk(t)
        return 0 if state is None else self._cnt[state]

    def total_length(self):
        """Sum of the lengths of all distinct non-empty substrings."""
        total = 0
        for i in range(1, len(self._len)):
            shortest = self._len[self._link[i]] + 1
            longest = self._len[i]
            total += (longest - shortest + 1) * (longest + shortest) // 2
        return total