import random
from collections import deque

import pytest

from algokit.mono_queue import MaxQueue, MaxStack, MinMaxQueue


def test_max_stack_tracks_maximum():
    rng = random.Random(61)
    values = [rng.randint(-50, 50) for _ in range(40)]
    stack = MaxStack()
    for v in values:
        stack.push(v)
    for n in range(len(values), 0, -1):
        assert len(stack) == n
        assert stack.max() == max(values[:n])
        assert stack.top() == values[n - 1]
        assert stack.pop() == values[n - 1]
    with pytest.raises(IndexError):
        stack.pop()


def test_max_queue_sliding_window():
    rng = random.Random(62)
    values = [rng.randint(0, 100) for _ in range(60)]
    width = 7
    queue = MaxQueue()
    maxima = []
    for i, v in enumerate(values):
        queue.push(v)
        if len(queue) > width:
            assert queue.pop() == values[i - width]
        if len(queue) == width:
            maxima.append(queue.max())
    expected = [max(values[i:i + width]) for i in range(len(values) - width + 1)]
    assert maxima == expected


def test_max_queue_is_fifo():
    queue = MaxQueue()
    for v in (3, 1, 2):
        queue.push(v)
    assert queue.front() == 3
    assert [queue.pop() for _ in range(3)] == [3, 1, 2]
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.max()


def test_min_max_queue_matches_deque():
    rng = random.Random(63)
    queue = MinMaxQueue()
    mirror = deque()
    for _ in range(150):
        for _ in range(2):
            v = rng.randint(-100, 100)
            queue.push(v)
            mirror.append(v)
        assert queue.pop() == mirror.popleft()
        assert len(queue) == len(mirror)
        assert queue.min() == min(mirror)
        assert queue.max() == max(mirror)
    for _ in range(len(mirror) - 1):
        assert queue.pop() == mirror.popleft()
        assert len(queue) == len(mirror)
        assert queue.min() == min(mirror)
        assert queue.max() == max(mirror)
    assert queue.pop() == mirror.popleft()
    assert len(queue) == 0


def test_min_max_queue_empty_raises():
    queue = MinMaxQueue()
    with pytest.raises(IndexError):
        queue.min()
    with pytest.raises(IndexError):
        queue.pop()