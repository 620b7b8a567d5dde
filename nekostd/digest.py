"""MD5 digests of arbitrary structured values and SHA-1 of substrings."""

from __future__ import annotations

import hashlib
import inspect
import struct
from collections.abc import Mapping

from .int32 import wrap

VAR_ARGS = -1
_INT31_MIN = -(1 << 30)
_INT31_MAX = (1 << 30) - 1


def _arity(func: object) -> int:
    code = getattr(func, "__code__", None)
    bound = 0
    if code is None:
        inner = getattr(func, "__func__", None)
        code = getattr(inner, "__code__", None)
        bound = 1
    if code is None:
        return VAR_ARGS
    if code.co_flags & inspect.CO_VARARGS:
        return VAR_ARGS
    return max(code.co_argcount - bound, 0)


class _Hasher:
    """Feeds a value graph into an MD5 context, tagging non-string values."""

    def __init__(self) -> None:
        self.md5 = hashlib.md5()
        self.path: dict[int, int] = {}

    def put_uint(self, n: int) -> None:
        self.md5.update(struct.pack("<I", n & 0xFFFFFFFF))

    def feed(self, v: object) -> None:
        if v is None:
            self.put_uint(0)
        elif isinstance(v, bool):
            self.put_uint(8 if v else 16)
        elif isinstance(v, int):
            i = wrap(v)
            # Small ints are hashed in their tagged VM form, others raw.
            self.put_uint((i << 1) | 1 if _INT31_MIN <= i <= _INT31_MAX else i)
        elif isinstance(v, float):
            self.md5.update(struct.pack("<d", v))
        elif isinstance(v, str):
            self.md5.update(v.encode("utf-8"))
        elif isinstance(v, (bytes, bytearray)):
            self.md5.update(bytes(v))
        elif isinstance(v, (Mapping, list, tuple)):
            self.feed_container(v)
        elif callable(v):
            self.put_uint((_arity(v) << 3) | 4)
        else:
            self.put_uint(24)

    def feed_container(self, v: object) -> None:
        key = id(v)
        if key in self.path:
            self.put_uint((self.path[key] << 3) | 2)
            return
        self.path[key] = len(self.path)
        try:
            if isinstance(v, Mapping):
                for field, value in v.items():
                    if isinstance(field, bool) or not isinstance(field, int):
                        raise TypeError("object field ids must be integers")
                    self.put_uint(field)
                    self.feed(value)
                proto = getattr(v, "proto", None)
                if proto is not None:
                    self.feed(proto)
            else:
                self.put_uint((len(v) << 3) | 6)
                for item in reversed(v):
                    self.feed(item)
        finally:
            del self.path[key]


def make_md5(value: object) -> bytes:
    """Return the 16-byte MD5 digest of any value.

    Strings hash exactly as standard MD5. Mappings are objects keyed by integer
    field ids (with an optional ``proto`` attribute); lists and tuples are
    arrays; cycles are recognised along the current path.
    """
    hasher = _Hasher()
    hasher.feed(value)
    return hasher.md5.digest()


def make_sha1(data: str | bytes, pos: int, length: int) -> bytes:
    """Return the 20-byte SHA-1 digest of ``data[pos:pos + length]``."""
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray)):
        raw = bytes(data)
    else:
        raise TypeError(f"expected a string, got {type(data).__name__}")
    for n in (pos, length):
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError("position and length must be integers")
    if pos < 0 or length < 0 or pos + length > len(raw):
        raise ValueError("substring out of bounds")
    return hashlib.sha1(raw[pos : pos + length]).digest()