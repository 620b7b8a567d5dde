"""Buffered binary file I/O with explicit positions and end-of-file tracking."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO


class FileError(Exception):
    """A file operation failed; carries the operation and the file name."""

    def __init__(self, operation: str, name: str) -> None:
        super().__init__(operation, name)
        self.operation = operation
        self.name = name

    def __str__(self) -> str:
        return f"{self.operation}: {self.name}"


def _as_bytes(data: object) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes, got {type(data).__name__}")


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer")
    return value


class NekoFile:
    """An open file. Every operation on a closed file raises ValueError."""

    def __init__(self, name: str, stream: BinaryIO) -> None:
        self._name = name
        self._io: BinaryIO | None = stream
        self._eof = False

    def _stream(self) -> BinaryIO:
        if self._io is None:
            raise ValueError("file is closed")
        return self._io

    def name(self) -> str:
        """Return the name the file was opened with."""
        self._stream()
        return self._name

    def write(self, data: bytes | str, pos: int = 0, length: int | None = None) -> int:
        """Write ``length`` bytes of ``data`` starting at ``pos``; return ``length``."""
        stream = self._stream()
        raw = _as_bytes(data)
        pos = _check_int(pos, "pos")
        length = len(raw) - pos if length is None else _check_int(length, "length")
        if pos < 0 or length < 0 or pos > len(raw) or pos + length > len(raw):
            raise ValueError("position and length out of bounds")
        view = memoryview(raw)[pos : pos + length]
        try:
            while view:
                written = stream.write(view)
                if not written:
                    raise FileError("file_write", self._name)
                view = view[written:]
        except OSError as exc:
            raise FileError("file_write", self._name) from exc
        return length

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; FileError if nothing at all can be read."""
        stream = self._stream()
        size = _check_int(size, "size")
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            return b""
        try:
            data = stream.read(size)
        except OSError as exc:
            raise FileError("file_read", self._name) from exc
        if data is None:
            data = b""
        if len(data) < size:
            self._eof = True
        if not data:
            raise FileError("file_read", self._name)
        return data

    def write_char(self, c: int) -> None:
        """Write a single byte in the range 0..255."""
        c = _check_int(c, "character")
        stream = self._stream()
        if not 0 <= c <= 255:
            raise ValueError("character must be in 0..255")
        try:
            if stream.write(bytes((c,))) != 1:
                raise FileError("file_write_char", self._name)
        except OSError as exc:
            raise FileError("file_write_char", self._name) from exc

    def read_char(self) -> int:
        """Read one byte; FileError at end of file."""
        stream = self._stream()
        try:
            data = stream.read(1)
        except OSError as exc:
            raise FileError("file_read_char", self._name) from exc
        if not data:
            self._eof = True
            raise FileError("file_read_char", self._name)
        return data[0]

    def seek(self, pos: int, whence: int = os.SEEK_SET) -> None:
        """Move the file position as ``fseek`` does (0: start, 1: current, 2: end)."""
        stream = self._stream()
        pos = _check_int(pos, "pos")
        whence = _check_int(whence, "whence")
        if whence not in (os.SEEK_SET, os.SEEK_CUR, os.SEEK_END):
            raise FileError("file_seek", self._name)
        try:
            stream.seek(pos, whence)
        except (OSError, ValueError) as exc:
            raise FileError("file_seek", self._name) from exc
        self._eof = False

    def tell(self) -> int:
        """Return the current position in the file."""
        stream = self._stream()
        try:
            return stream.tell()
        except OSError as exc:
            raise FileError("file_tell", self._name) from exc

    def eof(self) -> bool:
        """Tell whether a read has run into the end of the file."""
        self._stream()
        return self._eof

    def flush(self) -> None:
        """Flush unwritten data to the file."""
        stream = self._stream()
        try:
            stream.flush()
        except OSError as exc:
            raise FileError("file_flush", self._name) from exc

    def close(self) -> None:
        """Close the file; later operations fail."""
        stream = self._stream()
        self._io = None
        stream.close()

    def __enter__(self) -> NekoFile:
        return self

    def __exit__(self, *args: object) -> None:
        if self._io is not None:
            self.close()


def _binary_mode(mode: str) -> str:
    mode = mode.replace("t", "")
    return mode if "b" in mode else mode + "b"


def file_open(name: str | os.PathLike, mode: str) -> NekoFile:
    """Open a file with an ``fopen`` mode such as ``r``, ``w``, ``a``, ``r+``."""
    if not isinstance(mode, str):
        raise TypeError("mode must be a string")
    path = os.fspath(name)
    try:
        stream = open(path, _binary_mode(mode))
    except (OSError, ValueError) as exc:
        raise FileError("file_open", str(path)) from exc
    return NekoFile(str(path), stream)


def file_contents(name: str | os.PathLike) -> bytes:
    """Return the whole content of a file."""
    path = os.fspath(name)
    try:
        with open(path, "rb") as stream:
            return stream.read()
    except OSError as exc:
        raise FileError("file_contents", str(path)) from exc


def _stdio(name: str, stream: object) -> NekoFile:
    return NekoFile(name, getattr(stream, "buffer", stream))


def stdin() -> NekoFile:
    """The standard input."""
    return _stdio("stdin", sys.stdin)


def stdout() -> NekoFile:
    """The standard output."""
    return _stdio("stdout", sys.stdout)


def stderr() -> NekoFile:
    """The standard error output."""
    return _stdio("stderr", sys.stderr)