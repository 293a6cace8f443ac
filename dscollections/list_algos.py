"""Sorting and insertion algorithms for :class:`LinkedList`."""

from __future__ import annotations

from typing import Any, Callable

from dscollections.linked_list import LinkedList, ListError, ListNode

Compare = Callable[[Any, Any], int]


def swap_values(a: ListNode, b: ListNode) -> None:
    """Exchange the values held by two nodes."""
    a.value, b.value = b.value, a.value


def bubble_sort(lst: LinkedList, cmp: Compare) -> None:
    """Sort ``lst`` in place by repeatedly swapping adjacent values."""
    if len(lst) <= 1:
        return
    swapped = True
    while swapped:
        swapped = False
        for node in lst.nodes():
            if node.next is not None and cmp(node.value, node.next.value) > 0:
                swap_values(node, node.next)
                swapped = True


def merge(left: LinkedList, right: LinkedList, cmp: Compare) -> LinkedList:
    """Merge two sorted lists into a new one, emptying both inputs."""
    result = LinkedList()
    while len(left) or len(right):
        if len(left) and len(right):
            if cmp(left.first(), right.first()) <= 0:
                result.push(left.shift())
            else:
                result.push(right.shift())
        elif len(left):
            result.push(left.shift())
        else:
            result.push(right.shift())
    return result


def merge_sort(lst: LinkedList, cmp: Compare) -> LinkedList:
    """Return a sorted list; a list of one value or fewer is returned as is."""
    if len(lst) <= 1:
        return lst
    left, right = lst.split(len(lst) // 2)
    return merge(merge_sort(left, cmp), merge_sort(right, cmp), cmp)


def insert_after(lst: LinkedList, node: ListNode | None, value: Any) -> None:
    """Insert ``value`` in a new node directly after ``node``."""
    if lst is None:
        raise ListError("List can't be None to insert")
    if node is None:
        raise ListError("Node can't be None to insert")
    if value is None:
        raise ListError("Value can't be None to insert")

    new_node = ListNode(value, next=node.next, prev=node)
    if node.next is not None:
        node.next.prev = new_node
    else:
        lst.tail = new_node
    node.next = new_node
    lst.count += 1


def insertion_sort(lst: LinkedList, cmp: Compare) -> LinkedList:
    """Return a new list holding the values of ``lst`` inserted in order."""
    result = LinkedList()
    for value in lst:
        if result.head is None:
            result.push(value)
            continue
        for node in result.nodes():
            if cmp(node.value, value) >= 0:
                if node.prev is not None:
                    insert_after(result, node.prev, value)
                else:
                    result.unshift(value)
                break
            if node.next is None:
                result.push(value)
                break
    return result


def node_jump(node: ListNode, jumps: int) -> ListNode:
    """Move forward ``jumps`` nodes, stopping at the last one."""
    for _ in range(jumps):
        if node.next is not None:
            node = node.next
    return node


def bottom_up_merge(
    lst: LinkedList,
    left: int,
    right: int,
    end: int,
    sorted_list: LinkedList,
    cmp: Compare,
) -> None:
    """Merge runs ``[left, right)`` and ``[right, end)`` of ``lst`` onto ``sorted_list``."""
    i, j = left, right
    while i < right or j < end:
        left_node = node_jump(lst.head, i)
        right_node = node_jump(lst.head, j)
        if i < right and cmp(left_node.value, right_node.value) < 0:
            sorted_list.push(left_node.value)
            i += 1
        elif j < end:
            sorted_list.push(right_node.value)
            j += 1
        elif i < end:
            sorted_list.push(left_node.value)
            i += 1


def bottom_up_merge_sort(lst: LinkedList, cmp: Compare) -> LinkedList:
    """Sort ``lst`` in place by merging runs of doubling width; returns ``lst``."""
    size = len(lst)
    scratch = LinkedList()
    width = 1
    while width < size:
        for i in range(0, size, 2 * width):
            bottom_up_merge(
                lst, i, min(i + width, size), min(i + 2 * width, size), scratch, cmp
            )
        lst.copy_from(scratch)
        scratch.clear()
        width *= 2
    return lst