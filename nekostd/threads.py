"""Threads with message queues, counting locks, thread-local storage and mutexes."""

from __future__ import annotations

import sys
import threading
import traceback
from collections import deque
from collections.abc import Callable
from typing import Any


def _check_bool(flag: object, what: str) -> bool:
    if not isinstance(flag, bool):
        raise TypeError(f"{what} must be a bool, got {type(flag).__name__}")
    return flag


class Deque:
    """A message queue safe for use from several threads."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._cond = threading.Condition()

    def add(self, msg: Any) -> None:
        """Add a message at the end of the queue."""
        with self._cond:
            self._items.append(msg)
            self._cond.notify()

    def push(self, msg: Any) -> None:
        """Add a message at the head of the queue."""
        with self._cond:
            self._items.appendleft(msg)
            self._cond.notify()

    def pop(self, block: bool) -> Any:
        """Take the message at the head of the queue.

        With ``block`` the call waits for a message; otherwise it returns
        ``None`` at once when the queue is empty.
        """
        block = _check_bool(block, "block")
        with self._cond:
            if not self._items:
                if not block:
                    return None
                self._cond.wait_for(lambda: bool(self._items))
            msg = self._items.popleft()
            if self._items:
                self._cond.notify()
            return msg


class Lock:
    """A lock that starts out locked and counts its releases.

    Any thread may release it; a lock released n times can be acquired n times.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._cond = threading.Condition()

    def release(self) -> None:
        """Release the lock once."""
        with self._cond:
            self._counter += 1
            self._cond.notify()

    def wait(self, timeout: int | float | None = None) -> bool:
        """Wait for a release and take it; False if ``timeout`` seconds pass first."""
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float))
        ):
            raise TypeError("timeout must be a number or None")
        with self._cond:
            if not self._cond.wait_for(lambda: self._counter > 0, timeout):
                return False
            self._counter -= 1
            if self._counter > 0:
                self._cond.notify()
            return True


class Tls:
    """A slot holding a different value in each thread; unset slots hold ``None``."""

    def __init__(self) -> None:
        self._local = threading.local()

    def get(self) -> Any:
        """Return the value set for the current thread."""
        return getattr(self._local, "value", None)

    def set(self, content: Any) -> None:
        """Set the value for the current thread; ``None`` clears it."""
        if content is None:
            self._local.__dict__.pop("value", None)
        else:
            self._local.value = content


class Mutex:
    """A re-entrant mutex; the owning thread must release it as often as it acquired it."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def acquire(self) -> None:
        """Acquire the mutex, waiting if another thread holds it."""
        self._lock.acquire()

    def try_acquire(self) -> bool:
        """Acquire the mutex if it is free or already ours; tell whether it was."""
        return self._lock.acquire(blocking=False)

    def release(self) -> None:
        """Release the mutex held by the current thread."""
        self._lock.release()


class NekoThread:
    """A thread handle with its own message queue."""

    def __init__(self) -> None:
        self._queue = Deque()
        self._thread: threading.Thread | None = None

    def send(self, msg: Any) -> None:
        """Put a message into the thread's queue."""
        self._queue.add(msg)


_current = threading.local()


def _bind(handle: NekoThread) -> None:
    _current.handle = handle


def current_thread() -> NekoThread:
    """Return the handle of the current thread, creating it if needed."""
    handle = getattr(_current, "handle", None)
    if handle is None:
        handle = NekoThread()
        _bind(handle)
    return handle


def create_thread(func: Callable[[Any], Any], param: Any) -> NekoThread:
    """Start a thread running ``func(param)`` and return its handle.

    An exception escaping ``func`` is reported on standard error.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    handle = NekoThread()

    def run() -> None:
        _bind(handle)
        try:
            func(param)
        except BaseException:
            print("An exception occurred in a neko Thread :", file=sys.stderr)
            traceback.print_exc(file=sys.stderr)

    thread = threading.Thread(target=run, daemon=True)
    handle._thread = thread
    thread.start()
    return handle


def read_message(block: bool) -> Any:
    """Read a message sent to the current thread; ``None`` if none and not blocking."""
    block = _check_bool(block, "block")
    return current_thread()._queue.pop(block)