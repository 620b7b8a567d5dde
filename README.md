# nekostd

Small runtime primitives for Python, grouped by theme. The package has no
dependencies beyond the standard library.

## Modules

- `nekostd.int32`: wrapping signed 32-bit arithmetic. `wrap`, `new`,
  `to_int` (raises `OverflowError` when the value needs more than 31 bits),
  `to_float`, `compare`, `add`, `sub`, `mul`, `div` and `mod` (truncating
  toward zero, `ZeroDivisionError` on zero), `shl`, `shr`, `ushr`, `neg`,
  `complement`, `bit_or`, `bit_and`, `bit_xor`.
- `nekostd.numeric`: `pi`, `atan2`, `power`, `absolute`, the rounding helpers
  `ceil`, `floor`, `round_half_up`, `truncate` (ints returned unchanged, floats
  converted to 32-bit ints) and `fceil`, `ffloor`, `fround` (kept as floats),
  and `sqrt`, `atan`, `cos`, `sin`, `tan`, `log`, `exp`, `acos`, `asin`.
- `nekostd.dates`: dates as 32-bit counts of seconds since 1970. `now`,
  `parse` (`"YYYY-MM-DD HH:MM:SS"`, `"YYYY-MM-DD"`, or `"HH:MM:SS"` as a
  duration in seconds; `None` gives the current time), `format` and
  `utc_format` (strftime, default `%Y-%m-%d %H:%M:%S`), `set_hour`, `set_day`,
  `get_day`/`get_utc_day` (returning a `Day`), `get_hour`/`get_utc_hour`
  (returning a `TimeOfDay`) and `get_tz` (offset from UTC in minutes).
- `nekostd.texttools`: `split`, a small `sprintf` (`%s %d %x %X %c %b %f` with
  width and precision; one parameter directly or several in a list),
  `url_encode`/`url_decode`, and `base_encode`/`base_decode` for any alphabet
  whose length is a power of two from 2 to 256.
- `nekostd.digest`: `make_md5` of any value (strings hash as plain MD5; lists,
  tuples and integer-keyed mappings are hashed structurally, cycles included)
  and `make_sha1` of a slice of a string or bytes.
- `nekostd.misc`: IEEE packing with `float_bytes`, `double_bytes`,
  `float_of_bytes`, `double_of_bytes`, and `merge_sort`, a stable in-place sort
  of the first `length` items driven by a three-way compare function.
- `nekostd.process`: `Process(cmd, args)` starts a child with piped stdin,
  stdout and stderr (through the shell when `args` is `None`). It offers
  `pid`, `stdout_read`, `stderr_read` (raising `EOFError` once exhausted),
  `stdin_write`, `stdin_close`, `exit` (raising `RuntimeError` if the child was
  killed by a signal), `kill`, `close`, and works as a context manager.
- `nekostd.serialize`: `serialize` and `unserialize` turn a value graph into
  bytes and back. Supported: `None`, bools, 32-bit ints, floats, strings and
  bytes, lists and tuples, and mappings with non-zero integer field ids.
  `NekoObject` is a mapping that carries a `proto`. Shared values and cycles
  are kept. Failures raise `SerializeError`.
- `nekostd.files`: `file_open(name, mode)` with `fopen`-style modes,
  `file_contents`, and `stdin()`, `stdout()`, `stderr()`. The returned
  `NekoFile` has `name`, `write`, `read`, `write_char`, `read_char`, `seek`,
  `tell`, `eof`, `flush`, `close`, and works as a context manager. Failures
  raise `FileError`, which carries the operation and the file name.
- `nekostd.system`: `get_env`, `put_env`, `env`, `sleep`, `set_time_locale`,
  `get_cwd`, `set_cwd`, `sys_string`, `is64`, `cpu_arch`, `command`, `exit`,
  `exists`, `file_delete`, `rename`, `stat` (returning a `StatResult`),
  `file_type`, `create_dir`, `remove_dir`, `read_dir`, `full_path`, `exe_path`,
  `time`, `cpu_time`, `thread_cpu_time`, `get_pid`, `getch`.
- `nekostd.threads`: `Deque` (`add`, `push`, `pop`), `Lock`, which starts out
  locked and counts releases (`release`, `wait`), `Tls` (`get`, `set`),
  `Mutex` (`acquire`, `try_acquire`, `release`), and threads with their own
  message queue: `create_thread`, `current_thread`, `NekoThread.send` and
  `read_message`.
- `nekostd.rng`: `Random(seed)`, a seeded generator with reproducible output,
  offering `set_seed`, `next_int(limit)` and `next_float()`.

## Install

    pip install .

## Examples

```python
from nekostd import int32, texttools, rng, serialize

int32.add(0x7FFFFFFF, 1)                           # -2147483648
texttools.sprintf("%5d|%s", [42, "ok"])            # '   42|ok'
texttools.base_encode(b"hi", b"0123456789abcdef")  # b'6869'

r = rng.Random(42)
r.next_int(100)

data = serialize.serialize([1, "two", None, True])
serialize.unserialize(data)                        # [1, 'two', None, True]
```

## What it does not do

- `serialize` refuses functions and other opaque values, and `unserialize`
  cannot read back serialized functions or objects that were saved through a
  module: there is no module loader.
- There is no networking (sockets, host lookup, polling) and no command-line
  tool; the package is a library only.

## Tests

    pip install .[test]
    pytest