"""Sorting and searching algorithms for :class:`DArray`."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from dscollections.darray import DArray, DArrayError

Compare = Callable[[Any, Any], int]


def _store(array: DArray, values: list[Any]) -> None:
    for i, value in enumerate(values):
        array.set(i, value)


def qsort(array: DArray, cmp: Compare) -> None:
    """Sort the elements of ``array`` in place with the built-in sort."""
    _store(array, sorted(array, key=cmp_to_key(cmp)))


def _heapify(items: list[Any], count: int, root: int, cmp: Compare) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < count and cmp(items[left], items[largest]) > 0:
            largest = left
        if right < count and cmp(items[right], items[largest]) > 0:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heapsort(array: DArray, cmp: Compare) -> None:
    """Sort the elements of ``array`` in place with a max-heap."""
    items = list(array)
    count = len(items)
    for i in range(count // 2 - 1, -1, -1):
        _heapify(items, count, i, cmp)
    for i in range(count - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        _heapify(items, i, 0, cmp)
    _store(array, items)


def _merge(left: list[Any], right: list[Any], cmp: Compare) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if cmp(left[i], right[j]) < 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _mergesort(items: list[Any], cmp: Compare) -> list[Any]:
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(_mergesort(items[:middle], cmp), _mergesort(items[middle:], cmp), cmp)


def mergesort(array: DArray, cmp: Compare) -> None:
    """Sort the elements of ``array`` in place with a top-down merge sort."""
    _store(array, _mergesort(list(array), cmp))


def sort_add(array: DArray, value: Any, cmp: Compare) -> None:
    """Push ``value`` and re-sort the array."""
    if array is None:
        raise DArrayError("Array can't be None in sort_add")
    if value is None:
        raise DArrayError("Value can't be None in sort_add")
    array.push(value)
    heapsort(array, cmp)


def find(array: DArray, to_find: Any, cmp: Compare) -> int | None:
    """Binary-search ``array`` for ``to_find``; return its index or None."""
    low, high = 0, len(array) - 1
    while low <= high:
        middle = low + (high - low) // 2
        order = cmp(to_find, array.get(middle))
        if order < 0:
            high = middle - 1
        elif order > 0:
            low = middle + 1
        else:
            return middle
    return None