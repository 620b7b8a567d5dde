"""IEEE float byte conversions and a stable in-place merge sort."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, MutableSequence
from typing import Any

_INSERTION_THRESHOLD = 12


def _check_number(n: object) -> float:
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError(f"expected a number, got {type(n).__name__}")
    return float(n)


def _check_bytes(data: object, size: int) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"expected bytes, got {type(data).__name__}")
    if len(data) != size:
        raise ValueError(f"expected exactly {size} bytes, got {len(data)}")
    return bytes(data)


def _struct_format(big_endian: object, code: str) -> str:
    if not isinstance(big_endian, bool):
        raise TypeError(f"expected a bool, got {type(big_endian).__name__}")
    return (">" if big_endian else "<") + code


def float_bytes(n: int | float, big_endian: bool) -> bytes:
    """Return the 4-byte IEEE single-precision representation of ``n``."""
    x = _check_number(n)
    fmt = _struct_format(big_endian, "f")
    try:
        return struct.pack(fmt, x)
    except OverflowError:
        return struct.pack(fmt, math.copysign(math.inf, x))


def double_bytes(n: int | float, big_endian: bool) -> bytes:
    """Return the 8-byte IEEE double-precision representation of ``n``."""
    x = _check_number(n)
    return struct.pack(_struct_format(big_endian, "d"), x)


def float_of_bytes(data: bytes, big_endian: bool) -> float:
    """Read a float from 4 bytes of IEEE single precision."""
    raw = _check_bytes(data, 4)
    return struct.unpack(_struct_format(big_endian, "f"), raw)[0]


def double_of_bytes(data: bytes, big_endian: bool) -> float:
    """Read a float from 8 bytes of IEEE double precision."""
    raw = _check_bytes(data, 8)
    return struct.unpack(_struct_format(big_endian, "d"), raw)[0]


class _MergeSorter:
    """Stable in-place merge sort driven by a three-way compare function."""

    def __init__(self, items: MutableSequence, cmp: Callable[[Any, Any], Any]) -> None:
        self.items = items
        self.cmp = cmp

    def compare(self, a: int, b: int) -> int:
        result = self.cmp(self.items[a], self.items[b])
        if isinstance(result, bool) or not isinstance(result, int):
            return -1
        return result

    def swap(self, a: int, b: int) -> None:
        self.items[a], self.items[b] = self.items[b], self.items[a]

    def lower(self, start: int, end: int, pivot: int) -> int:
        length = end - start
        while length > 0:
            half = length >> 1
            mid = start + half
            if self.compare(mid, pivot) < 0:
                start = mid + 1
                length -= half + 1
            else:
                length = half
        return start

    def upper(self, start: int, end: int, pivot: int) -> int:
        length = end - start
        while length > 0:
            half = length >> 1
            mid = start + half
            if self.compare(pivot, mid) < 0:
                length = half
            else:
                start = mid + 1
                length -= half + 1
        return start

    def rotate(self, start: int, mid: int, end: int) -> None:
        if start == mid or mid == end:
            return
        self.items[start:end] = list(self.items[mid:end]) + list(self.items[start:mid])

    def merge(self, start: int, pivot: int, end: int, len1: int, len2: int) -> None:
        if len1 == 0 or len2 == 0:
            return
        if len1 + len2 == 2:
            if self.compare(pivot, start) < 0:
                self.swap(pivot, start)
            return
        if len1 > len2:
            len11 = len1 >> 1
            first_cut = start + len11
            second_cut = self.lower(pivot, end, first_cut)
            len22 = second_cut - pivot
        else:
            len22 = len2 >> 1
            second_cut = pivot + len22
            first_cut = self.upper(start, pivot, second_cut)
            len11 = first_cut - start
        self.rotate(first_cut, pivot, second_cut)
        new_mid = first_cut + len22
        self.merge(start, first_cut, new_mid, len11, len22)
        self.merge(new_mid, second_cut, end, len1 - len11, len2 - len22)

    def sort(self, start: int, end: int) -> None:
        if end - start < _INSERTION_THRESHOLD:
            for i in range(start + 1, end):
                j = i
                while j > start and self.compare(j, j - 1) < 0:
                    self.swap(j - 1, j)
                    j -= 1
            return
        middle = (start + end) >> 1
        self.sort(start, middle)
        self.sort(middle, end)
        self.merge(start, middle, end, middle - start, end - middle)


def merge_sort(items: MutableSequence, length: int, cmp: Callable[[Any, Any], Any]) -> None:
    """Sort the first ``length`` items in place, stably, using ``cmp``.

    ``cmp(a, b)`` returns a negative, zero or positive integer; any result that
    is not an integer counts as "less than".
    """
    if not isinstance(items, MutableSequence):
        raise TypeError(f"expected a mutable sequence, got {type(items).__name__}")
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError("length must be an integer")
    if not callable(cmp):
        raise TypeError("cmp must be callable")
    if length > len(items):
        raise ValueError("length exceeds the number of items")
    _MergeSorter(items, cmp).sort(0, length)