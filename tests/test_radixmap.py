import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dscollections.radixmap import UINT32_MAX, RadixMap, RadixMapError, RMElement


def make_random(rmap, rng):
    for i in range(rmap.max - 1):
        rmap.add(rng.getrandbits(32) % UINT32_MAX, i)
    return rmap.max - 1


def check_order(rmap):
    keys = [element.key for element in rmap]
    return all(a <= b for a, b in zip(keys, keys[1:]))


def search_upper_half(rmap):
    entries = list(rmap)
    for element in entries[len(entries) // 2:]:
        found = rmap.find(element.key)
        if found is None or found.key != element.key:
            return False
    return True


def test_operations():
    rng = random.Random(12345)
    rmap = RadixMap(200)
    assert make_random(rmap, rng) == 199
    assert len(rmap) == 199

    rmap.sort()
    assert check_order(rmap)
    assert search_upper_half(rmap)
    assert check_order(rmap)

    while len(rmap) > 0:
        value = rmap.find(rmap[len(rmap) // 2].key)
        assert value is not None
        old_end = len(rmap)
        rmap.delete(value)
        assert len(rmap) == old_end - 1
        assert check_order(rmap)


def test_full_map_rejects_add():
    rmap = RadixMap(3)
    rmap.add(5, 1)
    rmap.add(2, 2)
    with pytest.raises(RadixMapError):
        rmap.add(7, 3)
    assert [e.key for e in rmap] == [2, 5]


def test_key_uint32_max_rejected():
    rmap = RadixMap(10)
    with pytest.raises(RadixMapError):
        rmap.add(UINT32_MAX, 0)
    assert len(rmap) == 0


def test_delete_from_empty_raises():
    rmap = RadixMap(10)
    with pytest.raises(RadixMapError):
        rmap.delete(RMElement(1, 1))


def test_delete_none_raises():
    rmap = RadixMap(10)
    rmap.add(1, 1)
    with pytest.raises(RadixMapError):
        rmap.delete(None)


def test_find_missing_returns_none():
    rmap = RadixMap(10)
    rmap.add(10, 100)
    rmap.add(30, 300)
    assert rmap.find(20) is None
    assert rmap.find(30).value == 300


def test_values_follow_keys():
    rmap = RadixMap(10)
    rmap.add(0x01000000, 1)
    rmap.add(0x00000100, 2)
    rmap.add(0x00010000, 3)
    rmap.add(0x00000001, 4)
    assert [(e.key, e.value) for e in rmap] == [
        (0x00000001, 4),
        (0x00000100, 2),
        (0x00010000, 3),
        (0x01000000, 1),
    ]


def test_raw_packs_key_low():
    assert RMElement(1, 2).raw() == 0x0000000200000001


def test_delete_removes_right_entry():
    rmap = RadixMap(10)
    for key in (4, 1, 9):
        rmap.add(key, key * 10)
    rmap.delete(rmap.find(4))
    assert [(e.key, e.value) for e in rmap] == [(1, 10), (9, 90)]


@given(st.lists(st.integers(min_value=0, max_value=UINT32_MAX - 1), max_size=50))
def test_add_keeps_sorted(keys):
    rmap = RadixMap(len(keys) + 1)
    for i, key in enumerate(keys):
        rmap.add(key, i)
    assert [e.key for e in rmap] == sorted(keys)
    for key in keys:
        assert rmap.find(key).key == key