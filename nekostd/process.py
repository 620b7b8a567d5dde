"""Starting sub-processes and talking to them over pipes."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence


class Process:
    """A child process with piped stdin, stdout and stderr.

    With ``args`` set to ``None`` the command line is run by the system shell
    as is; otherwise ``cmd`` is the program and ``args`` its arguments, which
    are passed without shell interpretation.
    """

    def __init__(self, cmd: str, args: Sequence[str] | None = None) -> None:
        if not isinstance(cmd, str):
            raise TypeError("cmd must be a string")
        if args is None:
            command: str | list[str] = cmd
            shell = True
        else:
            if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
                raise TypeError("args must be a sequence of strings")
            if not all(isinstance(a, str) for a in args):
                raise TypeError("every argument must be a string")
            command = [cmd, *args]
            shell = False
        self._popen = subprocess.Popen(
            command,
            shell=shell,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            bufsize=0,
        )
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("process I/O is closed")

    @staticmethod
    def _check_size(size: object) -> int:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("size must be an integer")
        if size < 0:
            raise ValueError("size must not be negative")
        return size

    def _read(self, stream, size: int, label: str) -> bytes:
        self._check_open()
        size = self._check_size(size)
        data = os.read(stream.fileno(), size)
        if not data:
            raise EOFError(f"process {label} is closed")
        return data

    def pid(self) -> int:
        """Return the process identifier."""
        return self._popen.pid

    def stdout_read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from stdout; EOFError once it is exhausted."""
        return self._read(self._popen.stdout, size, "stdout")

    def stderr_read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from stderr; EOFError once it is exhausted."""
        return self._read(self._popen.stderr, size, "stderr")

    def stdin_write(self, data: bytes | str) -> int:
        """Write to stdin and return the number of bytes written."""
        self._check_open()
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("data must be bytes or str")
        stdin = self._popen.stdin
        if stdin is None or stdin.closed:
            raise OSError("process stdin is closed")
        return os.write(stdin.fileno(), data)

    def stdin_close(self) -> None:
        """Close the process' standard input."""
        self._check_open()
        stdin = self._popen.stdin
        if stdin is None or stdin.closed:
            raise OSError("process stdin is already closed")
        stdin.close()

    def exit(self) -> int:
        """Wait for the process to end and return its exit code.

        Raises RuntimeError when the process was killed by a signal.
        """
        code = self._popen.wait()
        if code < 0 and os.name != "nt":
            raise RuntimeError(f"process killed by signal {-code}")
        return code

    def close(self) -> None:
        """Close the pipes to the process."""
        if self._closed:
            return
        for stream in (self._popen.stderr, self._popen.stdout, self._popen.stdin):
            if stream is not None and not stream.closed:
                stream.close()
        self._closed = True

    def kill(self) -> None:
        """Terminate the process at once."""
        self._popen.kill()

    def __enter__(self) -> Process:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()