"""Signed 32-bit integer arithmetic with wrap-around semantics."""

from __future__ import annotations

_INT32_MIN = -(1 << 31)
_MASK = 0xFFFFFFFF
# Plain VM integers carry 31 bits of payload.
_INT31_MIN = -(1 << 30)
_INT31_MAX = (1 << 30) - 1


def _check_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return wrap(value)


def wrap(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping on overflow."""
    return ((value - _INT32_MIN) & _MASK) + _INT32_MIN


def new(value: int | float) -> int:
    """Build a 32-bit integer from any number, truncating floats toward zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise ValueError("cannot convert a non-finite float")
        value = int(value)
    return wrap(value)


def to_int(value: int) -> int:
    """Return the value if it fits in 31 bits; raise OverflowError otherwise."""
    i = _check_int(value)
    if not _INT31_MIN <= i <= _INT31_MAX:
        raise OverflowError(f"{i} needs 32 bits")
    return i


def to_float(value: int) -> float:
    """Return the float value of the integer."""
    return float(_check_int(value))


def compare(a: int, b: int) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    x, y = _check_int(a), _check_int(b)
    return (x > y) - (x < y)


def add(a: int, b: int) -> int:
    return wrap(_check_int(a) + _check_int(b))


def sub(a: int, b: int) -> int:
    return wrap(_check_int(a) - _check_int(b))


def mul(a: int, b: int) -> int:
    return wrap(_check_int(a) * _check_int(b))


def _trunc_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def div(a: int, b: int) -> int:
    """Divide, truncating toward zero. Raises ZeroDivisionError on zero."""
    x, y = _check_int(a), _check_int(b)
    if y == 0:
        raise ZeroDivisionError("int32 division by zero")
    return wrap(_trunc_div(x, y))


def mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend. Raises ZeroDivisionError on zero."""
    x, y = _check_int(a), _check_int(b)
    if y == 0:
        raise ZeroDivisionError("int32 modulo by zero")
    return wrap(x - y * _trunc_div(x, y))


def shl(a: int, b: int) -> int:
    return wrap(_check_int(a) << (_check_int(b) & 31))


def shr(a: int, b: int) -> int:
    """Arithmetic right shift."""
    return _check_int(a) >> (_check_int(b) & 31)


def ushr(a: int, b: int) -> int:
    """Unsigned (logical) right shift."""
    return wrap((_check_int(a) & _MASK) >> (_check_int(b) & 31))


def neg(a: int) -> int:
    return wrap(-_check_int(a))


def complement(a: int) -> int:
    return wrap(~_check_int(a))


def bit_or(a: int, b: int) -> int:
    return wrap(_check_int(a) | _check_int(b))


def bit_and(a: int, b: int) -> int:
    return wrap(_check_int(a) & _check_int(b))


def bit_xor(a: int, b: int) -> int:
    return wrap(_check_int(a) ^ _check_int(b))