"""Mathematical functions on VM numbers (32-bit ints and floats)."""

from __future__ import annotations

import math

from .int32 import wrap

_INT32_MIN = -(1 << 31)
_INT32_LIMIT = 1 << 31

Number = int | float


def _check_number(n: object) -> Number:
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError(f"expected a number, got {type(n).__name__}")
    return n


def _c_int(x: float) -> int:
    """Convert a float to a 32-bit int; unrepresentable values give the minimum."""
    if not math.isfinite(x) or not -_INT32_LIMIT <= x < _INT32_LIMIT:
        return _INT32_MIN
    return int(x)


def _fceil(x: float) -> float:
    return float(math.ceil(x)) if math.isfinite(x) else x


def _ffloor(x: float) -> float:
    return float(math.floor(x)) if math.isfinite(x) else x


def _apply(func, n: object) -> float:
    x = float(_check_number(n))
    try:
        return func(x)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def pi() -> float:
    """Return the value of pi."""
    return math.pi


def atan2(a: Number, b: Number) -> float:
    return math.atan2(float(_check_number(a)), float(_check_number(b)))


def power(a: Number, b: Number) -> float:
    """Return ``a`` raised to the power ``b`` as a float."""
    x = float(_check_number(a))
    y = float(_check_number(b))
    odd_integer = y.is_integer() and int(y) % 2 == 1
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and odd_integer else math.inf
    except ValueError:
        if x == 0 and y < 0:
            return math.copysign(math.inf, x) if odd_integer else math.inf
        return math.nan


def absolute(n: Number) -> Number:
    """Return the absolute value, keeping the number's kind."""
    _check_number(n)
    if isinstance(n, int):
        return wrap(abs(n))
    return math.fabs(n)


def ceil(n: Number) -> int:
    """Return the rounded-up integer."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _c_int(_fceil(n))


def floor(n: Number) -> int:
    """Return the rounded-down integer."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _c_int(_ffloor(n))


def round_half_up(n: Number) -> int:
    """Return the nearest integer, halves rounding toward positive infinity."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _c_int(_ffloor(n + 0.5))


def fceil(n: Number) -> Number:
    """Return the rounded-up value as a float, without integer overflow."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _fceil(n)


def ffloor(n: Number) -> Number:
    """Return the rounded-down value as a float, without integer overflow."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _ffloor(n)


def fround(n: Number) -> Number:
    """Return the rounded value as a float, without integer overflow."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _ffloor(n + 0.5)


def truncate(n: Number) -> int:
    """Return the integer rounded toward zero."""
    _check_number(n)
    if isinstance(n, int):
        return n
    return _c_int(_fceil(n) if n < 0 else _ffloor(n))


def _log(x: float) -> float:
    if x == 0:
        return -math.inf
    return math.log(x)


def sqrt(n: Number) -> float:
    return _apply(math.sqrt, n)


def atan(n: Number) -> float:
    return _apply(math.atan, n)


def cos(n: Number) -> float:
    return _apply(math.cos, n)


def sin(n: Number) -> float:
    return _apply(math.sin, n)


def tan(n: Number) -> float:
    return _apply(math.tan, n)


def log(n: Number) -> float:
    return _apply(_log, n)


def exp(n: Number) -> float:
    return _apply(math.exp, n)


def acos(n: Number) -> float:
    return _apply(math.acos, n)


def asin(n: Number) -> float:
    return _apply(math.asin, n)