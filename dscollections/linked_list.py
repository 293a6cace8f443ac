"""A doubly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Iterator, TextIO


class ListError(Exception):
    """Raised when a linked list operation is invalid."""


@dataclass(eq=False)
class ListNode:
    """One node of a :class:`LinkedList`."""

    value: Any
    next: ListNode | None = field(default=None, repr=False)
    prev: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list with push/pop at the tail and shift/unshift at the head."""

    def __init__(self) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self.count = 0

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[ListNode]:
        """Yield each node from head to tail; the current node may be removed."""
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def first(self) -> Any:
        """Return the head value, or None when empty."""
        return self.head.value if self.head is not None else None

    def last(self) -> Any:
        """Return the tail value, or None when empty."""
        return self.tail.value if self.tail is not None else None

    def push(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        if value is None:
            raise ListError("Value can't be None")
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            node.prev = self.tail
            self.tail = node
        self.count += 1

    def pop(self) -> Any:
        """Remove and return the tail value, or None when empty."""
        return self.remove(self.tail) if self.tail is not None else None

    def unshift(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        node = ListNode(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self.count += 1

    def shift(self) -> Any:
        """Remove and return the head value, or None when empty."""
        return self.remove(self.head) if self.head is not None else None

    def remove(self, node: ListNode | None) -> Any:
        """Unlink ``node`` and return its value."""
        if self.head is None or self.tail is None:
            raise ListError("List is empty.")
        if node is None:
            raise ListError("Node can't be None")

        if node is self.head and node is self.tail:
            self.head = self.tail = None
        elif node is self.head:
            self.head = node.next
            if self.head is None:
                raise ListError("Invalid list, somehow got a first that is None")
            self.head.prev = None
        elif node is self.tail:
            self.tail = node.prev
            if self.tail is None:
                raise ListError("Invalid list, somehow got a last that is None")
            self.tail.next = None
        else:
            after, before = node.next, node.prev
            after.prev = before
            before.next = after

        node.next = node.prev = None
        self.count -= 1
        return node.value

    def clear(self) -> None:
        """Pop every value."""
        for _ in range(self.count):
            self.pop()

    def remove_all(self) -> None:
        """Remove every node from head to tail."""
        for node in self.nodes():
            self.remove(node)

    def copy_from(self, other: LinkedList) -> None:
        """Replace this list's contents with the values of ``other``."""
        self.clear()
        for value in other:
            self.push(value)

    def join(self, other: LinkedList) -> None:
        """Append every value of ``other``."""
        for value in list(other):
            self.push(value)

    def split(self, index: int) -> tuple[LinkedList, LinkedList]:
        """Return two new lists: the first ``index`` values and the rest."""
        if index <= 0:
            raise ListError("Index must be greater than 0")
        if index >= self.count:
            raise ListError("Index can't be past the end of the list")
        left, right = LinkedList(), LinkedList()
        for position, value in enumerate(self):
            (left if position < index else right).push(value)
        return left, right

    def show(self, file: TextIO | None = None) -> None:
        """Write a header and then each value, one per line."""
        out = sys.stdout if file is None else file
        print("--- Print ---", file=out)
        for value in self:
            print(value, file=out)