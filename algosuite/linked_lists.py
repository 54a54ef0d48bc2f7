"""Singly linked list nodes, list rearrangements and an indexable linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int
    next: Optional[ListNode] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder ``L0, L1, ..., Ln`` in place to ``L0, Ln, L1, Ln-1, ...``."""
    if head is None:
        return
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = _reverse(slow.next)
    slow.next = None
    first: Optional[ListNode] = head
    while second is not None and first is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove every value that occurs more than once from a sorted list."""
    dummy = ListNode(0, head)
    tail = dummy
    node = head
    while node is not None:
        if node.next is not None and node.next.val == node.val:
            while node.next is not None and node.next.val == node.val:
                node = node.next
            tail.next = node.next
        else:
            tail = tail.next
        node = node.next
    return dummy.next


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below ``x`` before the others, keeping relative order in each part."""
    low = ListNode(0)
    high = ListNode(0)
    low_tail, high_tail = low, high
    for node in list(_nodes(head)):
        if node.val < x:
            low_tail.next = node
            low_tail = node
        else:
            high_tail.next = node
            high_tail = node
    low_tail.next = high.next
    high_tail.next = None
    return low.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group the nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Split the list into ``k`` consecutive parts whose sizes differ by at most one.

    Earlier parts are never shorter than later ones; missing parts are ``None``.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    length = sum(1 for _ in _nodes(head))
    size, extra = divmod(length, k)
    parts: list[Optional[ListNode]] = []
    node = head
    for index in range(k):
        count = size + (1 if index < extra else 0)
        parts.append(node if count else None)
        last: Optional[ListNode] = None
        for _ in range(count):
            last = node
            node = node.next
        if last is not None:
            last.next = None
    return parts


class LinkedList:
    """A singly linked list with positional access, insertion and deletion."""

    def __init__(self) -> None:
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self._head))

    def _node_at(self, index: int) -> ListNode:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise ``IndexError`` when out of range."""
        if not 0 <= index < self._size:
            raise IndexError("linked list index out of range")
        return self._node_at(index).val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        node = ListNode(val, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        node = ListNode(val)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``; indices outside ``[0, len]`` are ignored."""
        if not 0 <= index <= self._size:
            return
        if index == 0:
            self.add_at_head(val)
        elif index == self._size:
            self.add_at_tail(val)
        else:
            previous = self._node_at(index - 1)
            previous.next = ListNode(val, previous.next)
            self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index``; indices out of range are ignored."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self._head = self._head.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(index - 1)
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1