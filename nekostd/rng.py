"""A seeded pseudo-random number generator (a small twisted GFSR)."""

from __future__ import annotations

import os
import time as _time

from .int32 import wrap

_NSEEDS = 25
_MAX = 7
_MASK = 0xFFFFFFFF
_MAG01 = (0x0, 0x8EBFD028)
_INIT_SEEDS = (
    0x95F24DAB, 0x0B685215, 0xE76CCAE7, 0xAF3EC239, 0x715FAD23,
    0x24A590AD, 0x69E4B5EF, 0xBF456141, 0x96BC1B7B, 0xA7BDF825,
    0xC1DE75B7, 0x8858A9C9, 0x2DA87693, 0xB657F9DD, 0xFFDC8A9F,
    0x8121DA71, 0x8B823ECB, 0x885D05F5, 0x4E20CD47, 0x5A9AD5D9,
    0x512C0C03, 0xEA857CCD, 0x4CC1D30F, 0x8891A8A1, 0xA6B7AADB,
)
_BIG = 4294967296.0


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return value


def _default_seed() -> int:
    pid = os.getpid()
    micros = int(_time.time() * 1_000_000) & _MASK
    return wrap(micros ^ (pid | (pid << 16)))


class Random:
    """A pseudo-random generator; without a seed it is seeded from time and pid."""

    def __init__(self, seed: int | None = None) -> None:
        self._seeds: list[int] = []
        self._cur = 0
        self.set_seed(_default_seed() if seed is None else seed)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from the given 32-bit seed."""
        s = wrap(_check_int(seed, "seed")) & _MASK
        self._cur = 0
        self._seeds = [v ^ s for v in _INIT_SEEDS]

    def _twist(self) -> None:
        seeds = self._seeds
        for kk in range(_NSEEDS):
            other = seeds[(kk + _MAX) % _NSEEDS]
            seeds[kk] = (other ^ (seeds[kk] >> 1) ^ _MAG01[seeds[kk] & 1]) & _MASK

    def _next(self) -> int:
        pos = self._cur
        self._cur += 1
        if pos >= _NSEEDS:
            self._twist()
            self._cur = 1
            pos = 0
        y = self._seeds[pos]
        y ^= (y << 7) & 0x2B5B2500
        y ^= (y << 15) & 0xDB8B0000
        y &= _MASK
        y ^= y >> 16
        return y

    def next_int(self, limit: int) -> int:
        """Return a random integer in ``0 .. limit - 1``; 0 when ``limit <= 0``."""
        limit = _check_int(limit, "limit")
        if limit <= 0:
            return 0
        return (self._next() & 0x3FFFFFFF) % limit

    def next_float(self) -> float:
        """Return a random float in ``[0, 1)``."""
        a = self._next()
        b = self._next()
        c = self._next()
        return ((a / _BIG + b) / _BIG + c) / _BIG