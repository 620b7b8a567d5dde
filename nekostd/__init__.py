"""Runtime primitives: int32 arithmetic, math, dates, strings, digests, serialization, files, system, processes, threads and random numbers."""

__version__ = "0.1.0"

__all__ = [
    "int32",
    "numeric",
    "dates",
    "texttools",
    "digest",
    "misc",
    "process",
    "serialize",
    "files",
    "system",
    "threads",
    "rng",
]