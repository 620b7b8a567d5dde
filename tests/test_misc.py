import math

import pytest

from nekostd.misc import (
    double_bytes,
    double_of_bytes,
    float_bytes,
    float_of_bytes,
    merge_sort,
)


def test_float_bytes_big_endian_one():
    assert float_bytes(1.0, True) == b"\x3f\x80\x00\x00"


def test_double_bytes_big_endian_one():
    assert double_bytes(1, True) == b"\x3f\xf0" + b"\x00" * 6


def test_little_endian_is_reverse_of_big_endian():
    assert float_bytes(3.25, False) == float_bytes(3.25, True)[::-1]
    assert double_bytes(-7.5, False) == double_bytes(-7.5, True)[::-1]


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1024.0, 0.125])
@pytest.mark.parametrize("big", [True, False])
def test_float_round_trip(value, big):
    assert float_of_bytes(float_bytes(value, big), big) == value


@pytest.mark.parametrize("value", [0.1, -123456.789, 1e300, math.pi])
@pytest.mark.parametrize("big", [True, False])
def test_double_round_trip(value, big):
    assert double_of_bytes(double_bytes(value, big), big) == value


def test_float_overflow_becomes_infinity():
    assert float_of_bytes(float_bytes(1e300, True), True) == math.inf
    assert float_of_bytes(float_bytes(-1e300, False), False) == -math.inf


def test_float_of_bytes_wrong_length():
    with pytest.raises(ValueError):
        float_of_bytes(b"\x00\x00\x00", True)


def test_double_of_bytes_wrong_length():
    with pytest.raises(ValueError):
        double_of_bytes(b"\x00" * 4, False)


def test_float_bytes_rejects_non_bool_endianness():
    with pytest.raises(TypeError):
        float_bytes(1.0, 1)


def test_double_bytes_rejects_non_number():
    with pytest.raises(TypeError):
        double_bytes("1.0", True)


def _cmp(a, b):
    return (a > b) - (a < b)


def test_merge_sort_sorts_large_list():
    data = [(i * 37) % 101 for i in range(60)]
    expected = sorted(data)
    merge_sort(data, len(data), _cmp)
    assert data == expected


def test_merge_sort_small_list():
    data = [5, 1, 4, 2, 3]
    merge_sort(data, 5, _cmp)
    assert data == [1, 2, 3, 4, 5]


def test_merge_sort_is_stable():
    data = [((i * 7) % 5, i) for i in range(40)]
    expected = sorted(data, key=lambda p: p[0])
    merge_sort(data, len(data), lambda a, b: _cmp(a[0], b[0]))
    assert data == expected


def test_merge_sort_partial_length_leaves_tail():
    data = [9, 8, 7, 6, 5, 4, 3]
    merge_sort(data, 4, _cmp)
    assert data[:4] == [6, 7, 8, 9]
    assert data[4:] == [5, 4, 3]


def test_merge_sort_negative_length_is_noop():
    data = [3, 2, 1]
    merge_sort(data, -1, _cmp)
    assert data == [3, 2, 1]


def test_merge_sort_non_int_result_keeps_permutation():
    data = list(range(30, 0, -1))
    merge_sort(data, len(data), lambda a, b: None)
    assert sorted(data) == list(range(1, 31))


def test_merge_sort_length_too_large():
    with pytest.raises(ValueError):
        merge_sort([1, 2], 3, _cmp)


def test_merge_sort_requires_callable():
    with pytest.raises(TypeError):
        merge_sort([1, 2], 2, None)