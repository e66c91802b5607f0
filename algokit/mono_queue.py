"""Stacks and queues that track their extreme values."""


class MaxStack:
    """LIFO stack with O(1) maximum."""

    def __init__(self):
        self._items = []

    def push(self, value):
        best = value if not self._items else max(value, self._items[-1][1])
        self._items.append((value, best))

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self):
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1][0]

    def max(self):
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1][1]

    def __len__(self):
        return len(self._items)


class MaxQueue:
    """FIFO queue with amortised O(1) maximum, built from two stacks."""

    def __init__(self):
        self._incoming = MaxStack()
        self._outgoing = MaxStack()

    def push(self, value):
        self._incoming.push(value)

    def _move(self):
        if self._outgoing:
            return
        while self._incoming:
            self._outgoing.push(self._incoming.pop())

    def pop(self):
        """Remove and return the oldest value."""
        self._move()
        if not self._outgoing:
            raise IndexError("pop from empty queue")
        return self._outgoing.pop()

    def front(self):
        self._move()
        if not self._outgoing:
            raise IndexError("queue is empty")
        return self._outgoing.top()

    def max(self):
        if not self._outgoing:
            return self._incoming.max()
        if not self._incoming:
            return self._outgoing.max()
        return max(self._incoming.max(), self._outgoing.max())

    def __len__(self):
        return len(self._incoming) + len(self._outgoing)


class MinMaxQueue:
    """FIFO queue with amortised O(1) minimum and maximum."""

    def __init__(self):
        self._back = []
        self._front = []

    @staticmethod
    def _stack_push(stack, value):
        if stack:
            _, low, high = stack[-1]
            stack.append((value, min(value, low), max(value, high)))
        else:
            stack.append((value, value, value))

    def push(self, value):
        self._stack_push(self._back, value)

    def pop(self):
        """Remove and return the oldest value."""
        if not self._front:
            while self._back:
                self._stack_push(self._front, self._back.pop()[0])
        if not self._front:
            raise IndexError("pop from empty queue")
        return self._front.pop()[0]

    def _tops(self):
        tops = [stack[-1] for stack in (self._front, self._back) if stack]
        if not tops:
            raise IndexError("queue is empty")
        return tops

    def min(self):
        return min(top[1] for top in self._tops())

    def max(self):
        return max(top[2] for top in self._tops())

    def __len__(self):
        return len(self._back) + len(self._front)