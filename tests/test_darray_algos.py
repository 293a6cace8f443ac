import pytest
from hypothesis import given, strategies as st

from dscollections.darray import DArray, DArrayError
from dscollections.darray_algos import find, heapsort, mergesort, qsort, sort_add

WORDS = ["Thiago", "abcabc", "a", "Z", "1234"]
EXPECTED = ["1234", "Thiago", "Z", "a", "abcabc"]


def strcmp(a, b):
    return (a > b) - (a < b)


def make_array(values, initial_max=5):
    array = DArray(0, initial_max)
    for value in values:
        array.push(value)
    return array


def is_sorted(array):
    items = list(array)
    return all(strcmp(a, b) <= 0 for a, b in zip(items, items[1:]))


@pytest.mark.parametrize("sort", [qsort, heapsort, mergesort])
def test_sorts_words(sort):
    words = make_array(WORDS)
    assert not is_sorted(words)
    sort(words, strcmp)
    assert is_sorted(words)
    assert list(words) == EXPECTED
    assert len(words) == 5


def test_sort_add():
    words = make_array(WORDS)
    assert not is_sorted(words)
    sort_add(words, "NewElement", strcmp)
    assert list(words) == ["1234", "NewElement", "Thiago", "Z", "a", "abcabc"]


def test_sort_add_rejects_none():
    words = make_array(WORDS)
    with pytest.raises(DArrayError):
        sort_add(words, None, strcmp)


def test_find():
    words = make_array(WORDS)
    assert find(words, "Thiago", strcmp) == 0


def test_find_in_sorted_array():
    words = make_array(WORDS)
    qsort(words, strcmp)
    assert find(words, "Z", strcmp) == 2
    assert find(words, "missing", strcmp) is None


def test_find_empty_array():
    assert find(DArray(0, 3), "x", strcmp) is None


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_sorts_agree_with_sorted(values):
    expected = sorted(values)
    for sort in (qsort, heapsort, mergesort):
        array = make_array(values, initial_max=1)
        sort(array, strcmp)
        assert list(array) == expected
        assert find(array, expected[0], strcmp) is not None
        assert array.get(find(array, expected[-1], strcmp)) == expected[-1]