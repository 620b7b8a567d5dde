"""Interactions with the operating system: environment, files, time and processes."""

from __future__ import annotations

import locale
import os
import platform
import stat as _stat
import struct
import subprocess
import sys
import time as _time
from dataclasses import dataclass

from .int32 import wrap

PathLike = str | os.PathLike


@dataclass(frozen=True)
class StatResult:
    """The fields reported for a file or directory by :func:`stat`."""

    gid: int
    uid: int
    atime: int
    mtime: int
    ctime: int
    dev: int
    ino: int
    mode: int
    nlink: int
    rdev: int
    size: int


def _check_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


def _path(path: object) -> str:
    if not isinstance(path, (str, os.PathLike)):
        raise TypeError(f"path must be a string, got {type(path).__name__}")
    return os.fspath(path)


def get_env(name: str) -> str | None:
    """Return an environment variable, or ``None`` if it is not set."""
    return os.environ.get(_check_str(name, "name"))


def put_env(name: str, value: str | None) -> None:
    """Set an environment variable; ``None`` removes it."""
    name = _check_str(name, "name")
    if not name or "=" in name:
        raise ValueError(f"invalid environment variable name {name!r}")
    if value is None:
        os.environ.pop(name, None)
        return
    os.environ[name] = _check_str(value, "value")


def sleep(seconds: int | float) -> None:
    """Sleep for the given number of seconds."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError("seconds must be a number")
    if seconds < 0:
        raise ValueError("cannot sleep for a negative time")
    _time.sleep(seconds)


def set_time_locale(name: str) -> bool:
    """Set the locale used for time formatting; return whether it worked."""
    name = _check_str(name, "locale name")
    try:
        locale.setlocale(locale.LC_TIME, name)
    except locale.Error:
        return False
    return True


def get_cwd() -> str:
    """Return the current working directory, always ending with a separator."""
    cwd = os.getcwd()
    if not cwd.endswith(("/", "\\")):
        cwd += "/"
    return cwd


def set_cwd(path: PathLike) -> None:
    """Change the current working directory."""
    os.chdir(_path(path))


def sys_string() -> str:
    """Return the operating system: Windows, Linux, BSD, Mac, GNU/kFreeBSD or GNU/Hurd."""
    plat = sys.platform
    if plat.startswith(("win", "cygwin", "msys")):
        return "Windows"
    if plat.startswith("gnukfreebsd"):
        return "GNU/kFreeBSD"
    if plat.startswith("linux"):
        return "Linux"
    if plat.startswith(("freebsd", "openbsd", "netbsd", "dragonfly")):
        return "BSD"
    if plat.startswith("gnu"):
        return "GNU/Hurd"
    if plat == "darwin":
        return "Mac"
    raise OSError(f"unknown system {plat!r}")


def is64() -> bool:
    """Tell whether this is a 64-bit system."""
    return struct.calcsize("P") == 8


def cpu_arch() -> str:
    """Return the CPU architecture: x86_64, x86, arm64 or arm."""
    machine = platform.machine().lower()
    if machine in ("x86_64", "amd64", "x64"):
        return "x86_64"
    if machine in ("i386", "i486", "i586", "i686", "x86"):
        return "x86"
    if machine in ("aarch64", "arm64", "armv8b", "armv8l"):
        return "arm64"
    if machine.startswith("arm"):
        return "arm"
    raise OSError(f"unknown CPU architecture {machine!r}")


def command(cmd: str) -> int:
    """Run a shell command and return its exit code.

    An empty command gives -1. On POSIX a command ended by a signal gives the
    signal number shifted left by 8 bits.
    """
    cmd = _check_str(cmd, "command")
    if not cmd:
        return -1
    code = subprocess.run(cmd, shell=True).returncode
    if code < 0:
        return (-code) << 8
    return code


def exit(code: int) -> None:
    """Exit with the given code."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError("exit code must be an integer")
    sys.exit(code)


def exists(path: PathLike) -> bool:
    """Tell whether the file or directory exists."""
    try:
        os.stat(_path(path))
    except (OSError, ValueError):
        return False
    return True


def file_delete(path: PathLike) -> None:
    """Delete a file."""
    os.unlink(_path(path))


def rename(path: PathLike, new_path: PathLike) -> None:
    """Rename a file or directory."""
    os.rename(_path(path), _path(new_path))


def stat(path: PathLike) -> StatResult:
    """Return the status of a file or directory; times are 32-bit stamps."""
    s = os.stat(_path(path))
    return StatResult(
        gid=s.st_gid,
        uid=s.st_uid,
        atime=wrap(int(s.st_atime)),
        mtime=wrap(int(s.st_mtime)),
        ctime=wrap(int(s.st_ctime)),
        dev=s.st_dev,
        ino=s.st_ino,
        mode=s.st_mode,
        nlink=s.st_nlink,
        rdev=getattr(s, "st_rdev", 0),
        size=s.st_size,
    )


_FILE_TYPES = (
    (_stat.S_ISREG, "file"),
    (_stat.S_ISDIR, "dir"),
    (_stat.S_ISCHR, "char"),
    (_stat.S_ISLNK, "symlink"),
    (_stat.S_ISBLK, "block"),
    (_stat.S_ISFIFO, "fifo"),
    (_stat.S_ISSOCK, "sock"),
)


def file_type(path: PathLike) -> str:
    """Return the kind of a file: file, dir, char, symlink, block, fifo or sock."""
    path = _path(path)
    mode = os.stat(path).st_mode
    for test, name in _FILE_TYPES:
        if test(mode):
            return name
    raise OSError(f"unknown file type for {path!r}")


def create_dir(path: PathLike, mode: int = 0o777) -> None:
    """Create a directory with the given permissions."""
    if isinstance(mode, bool) or not isinstance(mode, int):
        raise TypeError("mode must be an integer")
    os.mkdir(_path(path), mode)


def remove_dir(path: PathLike) -> None:
    """Remove an empty directory."""
    os.rmdir(_path(path))


def time() -> float:
    """Return the current time in seconds since the Unix epoch."""
    return _time.time()


def cpu_time() -> float:
    """Return the CPU time spent by this process, in seconds."""
    t = os.times()
    return t.user + t.system


def thread_cpu_time() -> float:
    """Return the CPU time spent by the current thread, in seconds."""
    return _time.thread_time()


def read_dir(path: PathLike) -> list[str]:
    """Return the entries of a directory, without ``.`` and ``..``."""
    return os.listdir(_path(path))


def full_path(path: PathLike) -> str:
    """Return the absolute path of an existing file or directory."""
    return os.path.realpath(_path(path), strict=True)


def exe_path() -> str:
    """Return the path of the running executable."""
    if sys.executable:
        return sys.executable
    fallback = os.environ.get("_")
    if fallback:
        return fallback
    raise OSError("cannot determine the executable path")


def env() -> list[tuple[str, str]]:
    """Return every (name, value) pair of the environment."""
    return list(os.environ.items())


def get_pid() -> int:
    """Return the current process identifier."""
    return os.getpid()


def _getch_posix(echo: bool) -> int:
    import termios
    import tty

    fd = sys.stdin.fileno()
    try:
        old = termios.tcgetattr(fd)
    except termios.error:
        old = None
    try:
        if old is not None:
            tty.setraw(fd)
        data = os.read(fd, 1)
    finally:
        if old is not None:
            termios.tcsetattr(fd, termios.TCSANOW, old)
    if not data:
        return -1
    if echo:
        sys.stdout.write(chr(data[0]))
        sys.stdout.flush()
    return data[0]


def getch(echo: bool) -> int:
    """Read one character from the terminal, with or without echo."""
    if not isinstance(echo, bool):
        raise TypeError("echo must be a bool")
    if os.name == "nt":
        import msvcrt

        return ord(msvcrt.getwche() if echo else msvcrt.getwch())
    return _getch_posix(echo)