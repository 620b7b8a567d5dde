"""String helpers: splitting, printf-style formatting, URL and base encodings."""

from __future__ import annotations

from typing import Sequence, TypeVar

Text = TypeVar("Text", str, bytes)

_DIGITS = "0123456789"
_HEX = "0123456789ABCDEF"
_URL_SAFE = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-."
)


def split(text: Text, sep: Text) -> list[Text]:
    """Split ``text`` on ``sep``.

    An empty ``text`` gives an empty list. An empty ``sep`` splits into single
    characters.
    """
    if not isinstance(text, (str, bytes)) or not isinstance(sep, (str, bytes)):
        raise TypeError("split expects two strings")
    if type(text) is not type(sep):
        raise TypeError("text and separator must be of the same type")
    if not sep:
        return [text[i : i + 1] for i in range(len(text))]
    parts: list[Text] = []
    start = 0
    while (pos := text.find(sep, start)) != -1:
        parts.append(text[start:pos])
        start = pos + len(sep)
    if text:
        parts.append(text[start:])
    return parts


def _next_param(params: object, count: int) -> tuple[object, int]:
    is_array = isinstance(params, (list, tuple))
    if count == 0 and not is_array:
        return params, 1
    if not is_array or len(params) <= count:
        raise ValueError("not enough parameters for format string")
    return params[count], count + 1


def _format_int(param: object, width: int, prec: int, spec: str) -> str:
    if isinstance(param, bool) or not isinstance(param, int):
        raise TypeError(f"%{spec} expects an integer")
    hexa = spec in "xX"
    n = param
    sign = 0
    if not hexa and n < 0:
        sign = 1
        prec -= 1
        n = -n
    digits = format(n & 0xFFFFFFFF, spec) if hexa else str(n)
    size = len(digits)
    tsize = size if size > prec else prec + sign
    return " " * max(0, width - tsize) + "-" * sign + "0" * max(0, prec - size) + digits


def _format_one(spec: str, param: object, width: int, prec: int) -> str:
    if spec == "c":
        if isinstance(param, bool) or not isinstance(param, int):
            raise TypeError("%c expects an integer")
        if not 0 <= param <= 255:
            raise ValueError("%c expects a value in 0..255")
        return chr(param)
    if spec in ("d", "x", "X"):
        return _format_int(param, width, prec, spec)
    if spec == "f":
        if not isinstance(param, float):
            raise TypeError("%f expects a float")
        return format(param, ".15g")
    if spec == "s":
        if not isinstance(param, str):
            raise TypeError("%s expects a string")
        size = len(param)
        tsize = max(size, prec)
        return " " * max(0, width - tsize) + " " * max(0, prec - size) + param
    if spec == "b":
        if not isinstance(param, bool):
            raise TypeError("%b expects a bool")
        return "true" if param else "false"
    raise ValueError(f"unknown format specifier {spec!r}")


def sprintf(fmt: str, params: object) -> str:
    """Format ``params`` with ``fmt``.

    Supports ``%s %d %x %X %c %b %f`` with optional width and precision. A
    single parameter may be passed directly; several go in a list.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    end = len(fmt)

    def peek(k: int) -> str:
        return fmt[k] if k < end else "\0"

    out: list[str] = []
    count = 0
    last = i = 0
    while i < end:
        if fmt[i] != "%":
            i += 1
            continue
        out.append(fmt[last:i])
        i += 1
        width = prec = 0
        while peek(i) in _DIGITS and peek(i) != "\0":
            width = width * 10 + int(fmt[i])
            i += 1
        if peek(i) == ".":
            i += 1
            while peek(i) in _DIGITS and peek(i) != "\0":
                prec = prec * 10 + int(fmt[i])
                i += 1
        if peek(i) == "%":
            out.append("%")
            # An escaped percent also swallows the character that follows it.
            i += 1
        else:
            param, count = _next_param(params, count)
            out.append(_format_one(peek(i), param, width, prec))
        i = min(i + 1, end)
        last = i
    out.append(fmt[last:])
    return "".join(out)


def _as_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    raise TypeError(f"expected a string, got {type(data).__name__}")


def _like(original: str | bytes, raw: bytes) -> str | bytes:
    if isinstance(original, str):
        return raw.decode("utf-8", "surrogateescape")
    return raw


def _hex_value(c: int) -> int:
    ch = chr(c)
    if ch in "0123456789abcdefABCDEF":
        return int(ch, 16)
    return -1


def url_decode(data: Text) -> Text:
    """Decode percent escapes and ``+`` as space.

    Malformed escapes are dropped, as is a truncated escape at the end.
    """
    raw = _as_bytes(data)
    out = bytearray()
    it = iter(raw)
    remaining = len(raw)
    for c in it:
        remaining -= 1
        if c == ord("+"):
            out.append(ord(" "))
        elif c == ord("%"):
            if remaining < 2:
                break
            p1, p2 = _hex_value(next(it)), _hex_value(next(it))
            remaining -= 2
            if p1 < 0 or p2 < 0:
                continue
            out.append((p1 << 4) + p2)
        else:
            out.append(c)
    return _like(data, bytes(out))


def url_encode(data: Text) -> Text:
    """Percent-escape every byte except letters, digits, ``_``, ``-`` and ``.``."""
    raw = _as_bytes(data)
    out = "".join(
        chr(c) if c in _URL_SAFE else f"%{_HEX[c >> 4]}{_HEX[c & 0xF]}" for c in raw
    )
    return out if isinstance(data, str) else out.encode("ascii")


def _base_bits(base: Sequence) -> int:
    length = len(base)
    nbits = 1
    while length > 1 << nbits:
        nbits += 1
    if nbits > 8 or length != 1 << nbits:
        raise ValueError("base length must be a power of two between 2 and 256")
    return nbits


def base_encode(data: str | bytes, base: Text) -> Text:
    """Encode ``data`` with the alphabet ``base``, whose length is a power of two."""
    if not isinstance(base, (str, bytes)):
        raise TypeError("base must be a string")
    raw = _as_bytes(data)
    nbits = _base_bits(base)
    size = (len(raw) * 8 + nbits - 1) // nbits
    mask = (1 << nbits) - 1
    source = iter(raw)
    buf = curbits = 0
    symbols = []
    for _ in range(size):
        while curbits < nbits:
            curbits += 8
            buf = (buf << 8) | next(source, 0)
        curbits -= nbits
        symbols.append(base[(buf >> curbits) & mask])
        buf &= (1 << curbits) - 1
    return "".join(symbols) if isinstance(base, str) else bytes(symbols)


def base_decode(data: Text, base: Text) -> bytes:
    """Decode ``data`` written in the alphabet ``base`` back to bytes."""
    if not isinstance(data, (str, bytes)) or not isinstance(base, (str, bytes)):
        raise TypeError("base_decode expects two strings")
    if type(data) is not type(base):
        raise TypeError("data and base must be of the same type")
    nbits = _base_bits(base)
    table = {symbol: index for index, symbol in enumerate(base)}
    size = (len(data) * nbits) // 8
    source = iter(data)
    out = bytearray()
    buf = curbits = 0
    for _ in range(size):
        while curbits < 8:
            symbol = next(source)
            if symbol not in table:
                raise ValueError(f"invalid character {symbol!r} for this base")
            curbits += nbits
            buf = (buf << nbits) | table[symbol]
        curbits -= 8
        out.append((buf >> curbits) & 0xFF)
        buf &= (1 << curbits) - 1
    return bytes(out)