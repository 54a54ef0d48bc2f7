"""Bracket matching and small container types: stacks, queues and a k-th largest tracker."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable

_OPENERS = frozenset("([{")
_MATCH = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its partner in the right order.

    Any character other than ``()[]{}`` makes the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _MATCH and stack and stack[-1] == _MATCH[ch]:
            stack.pop()
        else:
            return False
    return not stack


class StackFromQueue:
    """A last-in first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: int) -> None:
        """Push ``x`` so that it sits at the front of the queue."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the most recently pushed value."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the most recently pushed value without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._queue


class QueueFromStacks:
    """A first-in first-out queue kept in two stacks with amortised O(1) operations."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from empty queue")
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the value at the front of the queue without removing it."""
        self._refill()
        if not self._outbox:
            raise IndexError("peek at empty queue")
        return self._outbox[-1]

    def empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return not self._inbox and not self._outbox


class KthLargest:
    """Track the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self._k = k
        self._heap: list[int] = []
        for num in nums:
            self._push(num)

    def _push(self, value: int) -> None:
        heapq.heappush(self._heap, value)
        if len(self._heap) > self._k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` to the stream and return the current k-th largest value."""
        self._push(val)
        return self._heap[0]