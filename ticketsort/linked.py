"""A singly linked list of integers with merge sort and shell sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ticketsort.sorting import shell_sort


@dataclass(eq=False)
class Node:
    """One cell of a singly linked chain."""

    value: int
    next: Node | None = None


def _chain_length(head: Node | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def merge_nodes(first: Node | None, second: Node | None) -> Node | None:
    """Merge two ascending chains into one, relinking the existing nodes.

    On equal values the node from ``second`` goes first.
    """
    anchor = Node(0)
    tail = anchor
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def split_after(head: Node | None, count: int) -> Node | None:
    """Cut the chain after its ``count``-th node and return the remainder.

    A ``count`` below one leaves the chain whole and returns ``None``.
    """
    if count < 1:
        return None
    if head is None:
        raise ValueError("cannot split an empty chain")
    last = head
    for _ in range(count - 1):
        if last.next is None:
            break
        last = last.next
    rest = last.next
    last.next = None
    return rest


def _merge_sort_chain(head: Node | None) -> Node | None:
    length = _chain_length(head)
    if length <= 1:
        return head
    second = split_after(head, length // 2)
    return merge_nodes(_merge_sort_chain(head), _merge_sort_chain(second))


class LinkedList:
    """A singly linked list that appends at the tail and pops from the front."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def merge_sort(self) -> None:
        """Sort the list in place by relinking its nodes."""
        self.head = _merge_sort_chain(self.head)
        self._tail = None
        for node in self._nodes():
            self._tail = node

    def shell_sort(self) -> None:
        """Sort the list's values in place with shell sort."""
        for node, value in zip(self._nodes(), shell_sort(self)):
            node.value = value