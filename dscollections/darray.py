"""A growable array of references with an explicit capacity."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Any, Iterator, TextIO

DEFAULT_EXPAND_RATE = 300


class DArrayError(Exception):
    """Raised when a dynamic array operation is invalid."""


class DArray:
    """Dynamic array with a fixed slot capacity that grows in steps.

    ``len()`` reports the logical end of the array; ``max`` is the
    number of slots currently allocated.
    """

    def __init__(self, element_size: int, initial_max: int) -> None:
        if initial_max <= 0:
            raise DArrayError("You must set an initial_max > 0.")
        self.element_size = element_size
        self.expand_rate = DEFAULT_EXPAND_RATE
        self._contents: list[Any] = [None] * initial_max
        self._end = 0

    @property
    def max(self) -> int:
        """Number of allocated slots."""
        return len(self._contents)

    def __len__(self) -> int:
        return self._end

    def __iter__(self) -> Iterator[Any]:
        return islice(self._contents, self._end)

    def __repr__(self) -> str:
        return f"DArray(end={self._end}, max={self.max})"

    def first(self) -> Any:
        """Return the value in slot 0."""
        return self._contents[0]

    def last(self) -> Any:
        """Return the value just before the end."""
        if self._end == 0:
            raise DArrayError("Array is empty.")
        return self._contents[self._end - 1]

    def _check_index(self, i: int, action: str) -> None:
        if i < 0 or i >= self.max:
            raise DArrayError(f"DArray attempt to {action} past max")

    def get(self, i: int) -> Any:
        """Return the value in slot ``i``."""
        self._check_index(i, "get")
        return self._contents[i]

    def set(self, i: int, value: Any) -> None:
        """Store ``value`` in slot ``i``, moving the end up to ``i`` if needed."""
        self._check_index(i, "set")
        if i > self._end:
            self._end = i
        self._contents[i] = value

    def remove(self, i: int) -> Any:
        """Empty slot ``i`` and return what it held."""
        self._check_index(i, "remove")
        value = self._contents[i]
        self._contents[i] = None
        return value

    def new(self) -> bytearray:
        """Return a fresh zero-filled element of ``element_size`` bytes."""
        if self.element_size <= 0:
            raise DArrayError("Can't use DArray_new on 0 size DArrays")
        return bytearray(self.element_size)

    def _resize(self, newsize: int) -> None:
        if newsize <= 0:
            raise DArrayError("The newsize must be > 0.")
        current = len(self._contents)
        if newsize > current:
            self._contents.extend([None] * (newsize - current))
        else:
            del self._contents[newsize:]

    def expand(self) -> None:
        """Grow the capacity by ``expand_rate`` empty slots."""
        self._resize(self.max + self.expand_rate)

    def contract(self) -> None:
        """Shrink the capacity to just past the end, but not below ``expand_rate + 1``."""
        new_size = max(self._end, self.expand_rate)
        self._resize(new_size + 1)

    def push(self, value: Any) -> None:
        """Append ``value`` at the end, expanding when the array fills up."""
        if value is None:
            raise DArrayError("Value can't be None")
        self._contents[self._end] = value
        self._end += 1
        if self._end >= self.max:
            self.expand()

    def pop(self) -> Any:
        """Remove and return the last value, contracting when appropriate."""
        if self._end - 1 < 0:
            raise DArrayError("Attempt to pop empty array.")
        value = self.remove(self._end - 1)
        self._end -= 1
        if self._end > self.expand_rate and self._end % self.expand_rate:
            self.contract()
        return value

    def clear(self) -> None:
        """Drop every stored element when the array owns its elements."""
        if self.element_size > 0:
            self._contents = [None] * len(self._contents)

    def show(self, file: TextIO | None = None) -> None:
        """Write each element up to the end, one per line."""
        out = sys.stdout if file is None else file
        for i, value in enumerate(self):
            print(f"Element {i}: {value}", file=out)