"""Binary serialization of value graphs, with shared and cyclic references."""

from __future__ import annotations

import struct
from collections.abc import Mapping

_MAX_DEPTH = 350
_INT31_MIN = -(1 << 30)
_INT31_MAX = (1 << 30) - 1
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INVALID = "Invalid serialized data"


class SerializeError(ValueError):
    """Raised when a value cannot be serialized or data cannot be read back."""


class NekoObject(dict):
    """An object: integer field ids mapped to values, with an optional prototype."""

    def __init__(self, fields=(), proto: Mapping | None = None) -> None:
        super().__init__(fields)
        self.proto = proto

    def __repr__(self) -> str:
        return f"NekoObject({dict.__repr__(self)}, proto={self.proto!r})"


def _encode_text(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    return bytes(value)


class _Writer:
    def __init__(self) -> None:
        self.out = bytearray()
        self.refs: dict[int, int] = {}
        # Keeps every referenced value alive so that ids stay unique.
        self.kept: list[object] = []
        self.depth = 0

    def put_int(self, n: int) -> None:
        self.out += struct.pack("<i", n)

    def write_ref(self, value: object) -> bool:
        """Write a back-reference if ``value`` was seen; otherwise register it."""
        k = self.refs.get(id(value))
        if k is not None:
            self.out += b"r"
            self.put_int(len(self.refs) - 1 - k)
            return True
        self.refs[id(value)] = len(self.refs)
        self.kept.append(value)
        return False

    def write(self, value: object) -> None:
        self.depth += 1
        if self.depth > _MAX_DEPTH:
            raise SerializeError("Serialization stack overflow")
        try:
            self._write(value)
        finally:
            self.depth -= 1

    def _write(self, value: object) -> None:
        if value is None:
            self.out += b"N"
        elif isinstance(value, bool):
            self.out += b"T" if value else b"F"
        elif isinstance(value, int):
            if _INT31_MIN <= value <= _INT31_MAX:
                self.out += b"i"
            elif _INT32_MIN <= value <= _INT32_MAX:
                self.out += b"I"
            else:
                raise SerializeError(f"integer {value} does not fit in 32 bits")
            self.put_int(value)
        elif isinstance(value, float):
            self.out += b"f" + struct.pack("<d", value)
        elif isinstance(value, (str, bytes, bytearray)):
            if not self.write_ref(value):
                raw = _encode_text(value)
                self.out += b"s"
                self.put_int(len(raw))
                self.out += raw
        elif isinstance(value, Mapping):
            if not self.write_ref(value):
                self._write_object(value)
        elif isinstance(value, (list, tuple)):
            if not self.write_ref(value):
                self.out += b"a"
                self.put_int(len(value))
                for item in value:
                    self.write(item)
        elif callable(value):
            raise SerializeError("Cannot Serialize function")
        else:
            raise SerializeError("Cannot Serialize Abstract")

    def _write_object(self, obj: Mapping) -> None:
        self.out += b"o"
        for field, item in obj.items():
            if isinstance(field, bool) or not isinstance(field, int):
                raise SerializeError("object field ids must be integers")
            if field == 0 or not _INT32_MIN <= field <= _INT32_MAX:
                raise SerializeError(f"invalid object field id {field}")
            self.put_int(field)
            self.write(item)
        self.put_int(0)
        proto = getattr(obj, "proto", None)
        if proto is None:
            self.out += b"z"
        else:
            if not isinstance(proto, Mapping):
                raise SerializeError("object prototype must be an object")
            self.out += b"p"
            self.write(proto)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0
        self.refs: list[object] = []

    def char(self) -> str | None:
        if self.pos >= len(self.data):
            return None
        c = self.data[self.pos]
        self.pos += 1
        return chr(c)

    def take(self, n: int) -> bytes:
        if n < 0 or self.pos + n > len(self.data):
            raise SerializeError(_INVALID)
        chunk = self.data[self.pos : self.pos + n]
        self.pos += n
        return chunk

    def get_int(self) -> int:
        return struct.unpack("<i", self.take(4))[0]

    def read(self) -> object:
        tag = self.char()
        match tag:
            case "N":
                return None
            case "T":
                return True
            case "F":
                return False
            case "i" | "I":
                return self.get_int()
            case "f":
                return struct.unpack("<d", self.take(8))[0]
            case "s":
                length = self.get_int()
                text = self.take(length).decode("utf-8", "surrogateescape")
                self.refs.append(text)
                return text
            case "o":
                return self._read_object()
            case "r":
                n = self.get_int()
                if n < 0 or n >= len(self.refs):
                    raise SerializeError(_INVALID)
                return self.refs[len(self.refs) - n - 1]
            case "a":
                n = self.get_int()
                # Every element takes at least one byte.
                if n < 0 or n > len(self.data) - self.pos:
                    raise SerializeError(_INVALID)
                items: list[object] = [None] * n
                self.refs.append(items)
                for index in range(n):
                    items[index] = self.read()
                return items
            case "h":
                return self._read_hash()
            case "p" | "L" | "x":
                raise SerializeError("serialized functions and modules need a module loader")
            case _:
                raise SerializeError(_INVALID)

    def _read_object(self) -> NekoObject:
        obj = NekoObject()
        self.refs.append(obj)
        while (field := self.get_int()) != 0:
            obj[field] = self.read()
        match self.char():
            case "p":
                proto = self.read()
                if not isinstance(proto, NekoObject):
                    raise SerializeError(_INVALID)
                obj.proto = proto
            case "z":
                pass
            case _:
                raise SerializeError(_INVALID)
        return obj

    def _read_hash(self) -> dict:
        ncells = self.get_int()
        nitems = self.get_int()
        if nitems < 0 or (nitems > 0 and ncells <= 0):
            raise SerializeError(_INVALID)
        table: dict = {}
        for _ in range(nitems):
            self.get_int()
            key = self.read()
            item = self.read()
            try:
                table[key] = item
            except TypeError as exc:
                raise SerializeError("unhashable key in serialized hash") from exc
        return table


def serialize(value: object) -> bytes:
    """Serialize a value graph to bytes.

    Handles None, bools, 32-bit ints, floats, strings and bytes, lists and
    tuples, and mappings keyed by non-zero integer field ids (``NekoObject``
    keeps a prototype). Strings, arrays and objects met twice are written as
    back-references, so sharing and cycles survive.
    """
    writer = _Writer()
    writer.write(value)
    return bytes(writer.out)


def unserialize(data: bytes) -> object:
    """Read back a value written by :func:`serialize`.

    Strings come back as ``str``; arrays as lists; objects as ``NekoObject``.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes, got {type(data).__name__}")
    reader = _Reader(bytes(data))
    try:
        return reader.read()
    except RecursionError as exc:
        raise SerializeError("serialized data nested too deeply") from exc