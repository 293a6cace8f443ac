"""A sorted map of 32-bit keys to 32-bit values, kept in order by radix sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

UINT32_MAX = 0xFFFFFFFF


class RadixMapError(Exception):
    """Raised when a radix map operation is invalid."""


@dataclass(eq=False)
class RMElement:
    """One key/value entry of a :class:`RadixMap`."""

    key: int
    value: int

    def raw(self) -> int:
        """Return the entry packed as one 64-bit word: key in the low half."""
        return (self.key & UINT32_MAX) | ((self.value & UINT32_MAX) << 32)


def _radix_pass(elements: list[RMElement], offset: int) -> list[RMElement]:
    """Stable counting sort of ``elements`` on byte ``offset`` of the key."""
    shift = 8 * offset
    buckets: list[list[RMElement]] = [[] for _ in range(256)]
    for element in elements:
        buckets[(element.key >> shift) & 0xFF].append(element)
    return [element for bucket in buckets for element in bucket]


class RadixMap:
    """Map of unsigned 32-bit keys to values, always sorted by key.

    A map created with ``max`` slots holds at most ``max - 1`` entries.
    """

    def __init__(self, max: int) -> None:
        self.max = max
        self._contents: list[RMElement] = []

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[RMElement]:
        return iter(list(self._contents))

    def __getitem__(self, index: int) -> RMElement:
        return self._contents[index]

    def __repr__(self) -> str:
        return f"RadixMap(end={len(self._contents)}, max={self.max})"

    def sort(self) -> None:
        """Sort the entries by key with four byte-wise radix passes."""
        elements = self._contents
        for offset in range(4):
            elements = _radix_pass(elements, offset)
        self._contents = elements

    def find(self, key: int) -> RMElement | None:
        """Binary-search for an entry with ``key``; return it or None."""
        low, high = 0, len(self._contents) - 1
        while low <= high:
            middle = low + (high - low) // 2
            current = self._contents[middle].key
            if key < current:
                high = middle - 1
            elif key > current:
                low = middle + 1
            else:
                return self._contents[middle]
        return None

    def add(self, key: int, value: int) -> None:
        """Insert a new entry and re-sort the map."""
        if not 0 <= key < UINT32_MAX:
            raise RadixMapError("Key can't be equal to UINT32_MAX")
        if not 0 <= value <= UINT32_MAX:
            raise RadixMapError("Value must fit in 32 unsigned bits")
        if len(self._contents) + 1 >= self.max:
            raise RadixMapError("RadixMap is full.")
        self._contents.append(RMElement(key, value))
        self.sort()

    def delete(self, element: RMElement | None) -> None:
        """Remove ``element`` (an entry returned by :meth:`find`) from the map."""
        if not self._contents:
            raise RadixMapError("There is nothing to delete.")
        if element is None:
            raise RadixMapError("Can't delete a None element.")
        if not any(entry is element for entry in self._contents):
            raise RadixMapError("Element is not in this map.")
        element.key = UINT32_MAX
        if len(self._contents) > 1:
            self.sort()
        # The deleted entry now carries the largest key and sits at the end.
        self._contents.pop()