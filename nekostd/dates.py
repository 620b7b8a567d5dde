"""Dates as 32-bit counts of seconds since the Unix epoch."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass

from .int32 import wrap

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"
_MAX_FORMATTED = 126

_FULL = (4, "-", 2, "-", 2, " ", 2, ":", 2, ":", 2)
_DATE = (4, "-", 2, "-", 2)
_TIME = (2, ":", 2, ":", 2)


@dataclass(frozen=True)
class Day:
    """Year, month (1-12) and day of month."""

    y: int
    m: int
    d: int


@dataclass(frozen=True)
class TimeOfDay:
    """Hours, minutes and seconds."""

    h: int
    m: int
    s: int


def _check_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _check_stamp(stamp: object) -> int:
    return wrap(_check_int(stamp))


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _scan(text: str, tokens: tuple) -> list[int]:
    """Read integer fields in the manner of scanf; unread fields stay 0."""
    count = sum(isinstance(t, int) for t in tokens)
    values: list[int] = []
    pos = 0
    for tok in tokens:
        if isinstance(tok, int):
            pos = _skip_space(text, pos)
            end = min(len(text), pos + tok)
            digits = pos + 1 if pos < end and text[pos] in "+-" else pos
            stop = digits
            while stop < end and text[stop] in "0123456789":
                stop += 1
            if stop == digits:
                break
            values.append(int(text[pos:stop]))
            pos = stop
        elif tok == " ":
            pos = _skip_space(text, pos)
        elif pos < len(text) and text[pos] == tok:
            pos += 1
        else:
            break
    return values + [0] * (count - len(values))


def _localtime(stamp: int) -> _time.struct_time:
    try:
        return _time.localtime(stamp)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"invalid date {stamp}") from exc


def _gmtime(stamp: int) -> _time.struct_time:
    try:
        return _time.gmtime(stamp)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"invalid date {stamp}") from exc


def _mktime(fields: tuple) -> int:
    try:
        return int(_time.mktime(fields))
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError("date out of range") from exc


def now() -> int:
    """Return the current date and time."""
    return wrap(int(_time.time()))


def parse(text: str | None) -> int:
    """Parse ``YYYY-MM-DD HH:MM:SS``, ``YYYY-MM-DD`` or an ``HH:MM:SS`` duration.

    ``None`` gives the current time. A duration is returned as plain seconds.
    """
    if text is None:
        return now()
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    length = len(text)
    if length == 8:
        h, m, s = _scan(text, _TIME)
        return wrap(s + m * 60 + h * 3600)
    if length == 19:
        y, mo, d, h, mi, s = _scan(text, _FULL)
    elif length == 10:
        y, mo, d = _scan(text, _DATE)
        h = mi = s = 0
    else:
        raise ValueError(f"Invalid date format : {text}")
    try:
        return wrap(_mktime((y, mo, d, h, mi, s, 0, 0, -1)))
    except ValueError:
        return -1


def _strftime(fmt: str | None, t: _time.struct_time) -> str:
    if fmt is None:
        fmt = DEFAULT_FORMAT
    if not isinstance(fmt, str):
        raise TypeError(f"expected a string, got {type(fmt).__name__}")
    result = _time.strftime(fmt, t)
    if not result or len(result.encode()) > _MAX_FORMATTED:
        raise ValueError("formatted date is empty or too long")
    return result


def format(stamp: int, fmt: str | None = None) -> str:
    """Format a date in local time with strftime; ``None`` uses the default format."""
    return _strftime(fmt, _localtime(_check_stamp(stamp)))


def utc_format(stamp: int, fmt: str | None = None) -> str:
    """Format a date in UTC with strftime; ``None`` uses the default format."""
    return _strftime(fmt, _gmtime(_check_stamp(stamp)))


def set_hour(stamp: int, h: int, m: int, s: int) -> int:
    """Return the date with its local time of day replaced."""
    t = _localtime(_check_stamp(stamp))
    fields = (t.tm_year, t.tm_mon, t.tm_mday, _check_int(h), _check_int(m),
              _check_int(s), t.tm_wday, t.tm_yday, t.tm_isdst)
    return wrap(_mktime(fields))


def set_day(stamp: int, y: int, m: int, d: int) -> int:
    """Return the date with its local year, month and day replaced."""
    t = _localtime(_check_stamp(stamp))
    fields = (_check_int(y), _check_int(m), _check_int(d), t.tm_hour, t.tm_min,
              t.tm_sec, t.tm_wday, t.tm_yday, t.tm_isdst)
    return wrap(_mktime(fields))


def get_day(stamp: int) -> Day:
    """Return the local year, month and day of a date."""
    t = _localtime(_check_stamp(stamp))
    return Day(t.tm_year, t.tm_mon, t.tm_mday)


def get_utc_day(stamp: int) -> Day:
    """Return the UTC year, month and day of a date."""
    t = _gmtime(_check_stamp(stamp))
    return Day(t.tm_year, t.tm_mon, t.tm_mday)


def get_hour(stamp: int) -> TimeOfDay:
    """Return the local hours, minutes and seconds of a date."""
    t = _localtime(_check_stamp(stamp))
    return TimeOfDay(t.tm_hour, t.tm_min, t.tm_sec)


def get_utc_hour(stamp: int) -> TimeOfDay:
    """Return the UTC hours, minutes and seconds of a date."""
    t = _gmtime(_check_stamp(stamp))
    return TimeOfDay(t.tm_hour, t.tm_min, t.tm_sec)


def get_tz(stamp: int | None = None) -> int:
    """Return the local offset from UTC in minutes at ``stamp`` (now if ``None``)."""
    raw = int(_time.time()) if stamp is None else _check_stamp(stamp)
    local = _localtime(raw)
    gmt = _gmtime(raw)
    diff = (local.tm_hour - gmt.tm_hour) * 60 + (local.tm_min - gmt.tm_min)
    if gmt.tm_year > local.tm_year or gmt.tm_yday > local.tm_yday:
        diff -= 24 * 60
    elif gmt.tm_year < local.tm_year or gmt.tm_yday < local.tm_yday:
        diff += 24 * 60
    return diff