"""Binary tries over the bits of integers for XOR queries."""

_BITS = 30


class BinaryTrie:
    """Multiset of 31-bit non-negative integers stored bit by bit."""

    def __init__(self):
        self._children = [[-1, -1]]
        self._count = [0]

    @staticmethod
    def _check(value):
        if not 0 <= value < 1 << (_BITS + 1):
            raise ValueError(f"value {value} does not fit in {_BITS + 1} bits")

    def insert(self, value):
        """Add one copy of ``value``."""
        self._check(value)
        node = 0
        for i in range(_BITS, -1, -1):
            bit = value >> i & 1
            child = self._children[node][bit]
            if child == -1:
                child = len(self._count)
                self._children.append([-1, -1])
                self._count.append(0)
                self._children[node][bit] = child
            self._count[child] += 1
            node = child

    def remove(self, value):
        """Remove one copy of ``value``; raise KeyError if it is absent."""
        self._check(value)
        path = []
        node = 0
        for i in range(_BITS, -1, -1):
            node = self._children[node][value >> i & 1]
            if node == -1 or self._count[node] == 0:
                raise KeyError(value)
            path.append(node)
        for node in path:
            self._count[node] -= 1

    def count_xor_less(self, x, k):
        """Count stored values ``v`` with ``v ^ x < k``."""
        answer = 0
        node = 0
        for i in range(_BITS, -1, -1):
            bit_x = x >> i & 1
            children = self._children[node]
            if k >> i & 1:
                same = children[bit_x]
                if same != -1:
                    answer += self._count[same]
                node = children[bit_x ^ 1]
            else:
                node = children[bit_x]
            if node == -1:
                break
        return answer


class XorTrie:
    """Multiset of non-negative integers answering maximum-XOR queries."""

    def __init__(self, max_bit=60):
        self._max_bit = max_bit
        self._children = [[-1, -1]]
        self._count = [0]

    def _new_node(self):
        self._children.append([-1, -1])
        self._count.append(0)
        return len(self._count) - 1

    def insert(self, value, count=1):
        """Add ``count`` copies of ``value``; a negative count removes copies."""
        node = 0
        self._count[node] += count
        for i in range(self._max_bit, -1, -1):
            bit = value >> i & 1
            if self._children[node][bit] == -1:
                self._children[node][bit] = self._new_node()
            node = self._children[node][bit]
            self._count[node] += count

    def max_xor(self, x):
        """Return the largest ``x ^ v`` over stored values ``v``."""
        if not self._count[0]:
            raise ValueError("trie is empty")
        node = 0
        for i in range(self._max_bit, -1, -1):
            bit = (x >> i & 1) ^ 1
            child = self._children[node][bit]
            if child == -1 or not self._count[child]:
                bit ^= 1
            node = self._children[node][bit]
            if bit:
                x ^= 1 << i
        return x