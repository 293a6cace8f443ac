# dscollections

Classic data structures with the algorithms that operate on them. Everything
is pure Python with no third-party dependencies.

## Modules

- `dscollections.darray`
  - `DArray(element_size, initial_max)`: a dynamic array of slots. `len()`
    is the logical end; the `max` property is the number of allocated slots.
    `push` appends and grows the capacity by `expand_rate` (300) slots when
    the array fills; `pop` removes from the end and contracts when the end is
    above the expand rate and not a multiple of it. Also `get`, `set`,
    `remove` (empties a slot and returns its value), `first`, `last`,
    `expand`, `contract`, `clear`, `new` (a zero-filled `bytearray` of
    `element_size` bytes) and `show(file=None)`.
  - `DArrayError`.
- `dscollections.linked_list`
  - `LinkedList`: a doubly linked list with `push`/`pop` at the tail,
    `unshift`/`shift` at the head, `first`, `last`, `remove(node)`,
    `nodes()`, `clear`, `remove_all`, `copy_from(other)`, `join(other)`,
    `split(index)` (returns two new lists) and `show(file=None)`.
    `pop` and `shift` return `None` on an empty list.
  - `ListNode`, `ListError`.
- `dscollections.list_algos`: `bubble_sort` (in place), `merge_sort`
  (returns a sorted list), `insertion_sort` (returns a new list),
  `bottom_up_merge_sort` (sorts in place and returns the list), and the
  helpers `merge`, `insert_after`, `swap_values`, `node_jump` and
  `bottom_up_merge`.
- `dscollections.darray_algos`: `qsort`, `heapsort` and `mergesort` (each
  sorts a `DArray` in place), `sort_add` (pushes a value and re-sorts) and
  `find` (binary search; returns the index or `None`).
- `dscollections.radixmap`
  - `RadixMap(max)`: a map of unsigned 32-bit keys to 32-bit values, kept
    ordered by key with a four-pass byte-wise radix sort and searched by
    binary search. It holds at most `max - 1` entries. `add(key, value)`,
    `find(key)` (returns an `RMElement` or `None`), `delete(element)`,
    `sort()`, `len()`, iteration and indexing.
  - `RMElement` with `key`, `value` and `raw()` (the entry packed into one
    64-bit word, key in the low half).
  - `RadixMapError`.

Comparison functions follow the three-way convention: they return a negative
number, zero or a positive number.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dscollections.linked_list import LinkedList
from dscollections.list_algos import merge_sort

def cmp(a, b):
    return (a > b) - (a < b)

words = LinkedList()
for word in ["wow", "abcd", "1234"]:
    words.push(word)

print(list(merge_sort(words, cmp)))   # ['1234', 'abcd', 'wow']
```

```python
from dscollections.darray import DArray
from dscollections.darray_algos import heapsort, find

def cmp(a, b):
    return (a > b) - (a < b)

array = DArray(0, 5)
for word in ["Thiago", "abcabc", "a", "Z", "1234"]:
    array.push(word)

heapsort(array, cmp)
print(list(array))                    # ['1234', 'Thiago', 'Z', 'a', 'abcabc']
print(find(array, "Z", cmp))          # 2
```

```python
from dscollections.radixmap import RadixMap

rmap = RadixMap(10)
rmap.add(42, 1)
rmap.add(7, 2)
element = rmap.find(42)
print(element.value)                  # 1
rmap.delete(element)
print(len(rmap))                      # 1
```

Invalid operations, such as popping an empty array, splitting a list at an
out-of-range index or adding to a full radix map, raise `DArrayError`,
`ListError` or `RadixMapError`.

## What it does not do

This is a library only: it has no command-line tool, and none of the
structures are persisted; they live in memory for the life of the process.