# reqkit

reqkit is a set of small building blocks for writing HTTP clients in Python. It depends on nothing outside the standard library.

## What is inside

- `reqkit.types`
  - `Url` and `UserAgent` are immutable string wrappers. Each keeps its own type when you concatenate it with `+`.
  - `Header` is a mutable mapping whose keys match without regard to case. Iteration is ordered case-insensitively, and looking up a missing key gives `""`.
- `reqkit.options` holds the request option values:
  - `Timeout` stores whole milliseconds and accepts a `timedelta` or an `int`. `milliseconds()` raises `OverflowError` when the value falls outside the signed 64-bit range.
  - `Range` and `MultiRange` render as byte-range strings.
  - `Proxies` maps a protocol to a proxy host. An unknown protocol gives `""`.
  - The remaining values are `Bearer`, `Buffer`, `HttpVersion` / `HttpVersionCode`, `LimitRate`, `LowSpeed`, `ReserveSize`, `Verbose` and `UnixSocket`.
- `reqkit.callbacks` holds wrappers that pass a piece of user data to a function on every call:
  - `ReadCallback`, `WriteCallback` and `HeaderCallback`.
  - `ProgressCallback`.
  - `DebugCallback`, together with the `InfoType` enum.
- `reqkit.util` holds the parsing helpers:
  - `parse_header` reads a raw header block and returns a `ParsedHeader` holding the header map, the status line and the reason. Each status line starts a fresh map, so after a chain of redirects only the headers of the last response remain.
  - `parse_cookies` reads tab-separated cookie-jar lines and returns `Cookie` objects.
  - The module also provides `split`, `is_true`, `timestamp_to_seconds` and `secure_clear`. `secure_clear` zeroes a `bytearray` in place and then empties it.
- `reqkit.threadpool`
  - `ThreadPool` runs callables on between `min_thread_num` and `max_thread_num` worker threads. It retires threads that stay idle longer than `max_idle_time`.
  - `submit` returns a `concurrent.futures.Future`.
  - The pool also offers `start`, `stop`, `pause`, `resume` and `wait`, and it can be used as a context manager.
  - `start` on a running pool raises `RuntimeError`, and so does `stop` on a stopped one.
- `reqkit.singleton`
  - `Singleton` is a base class that gives each subclass one shared instance, created on first use through `get_instance`.
  - `exit_instance` releases the instance once. After that, `get_instance` returns `None`.

## What it does not do

reqkit sends no requests. It has no session and no transport, and nothing in it opens a network connection. The option and callback types describe a request; performing it is left to whatever HTTP machinery you pair them with.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

Header lookups ignore case:

```python
from reqkit.types import Header

header = Header({"Content-Type": "text/html"})
assert header["content-type"] == "text/html"
assert header["missing"] == ""
```

Byte ranges:

```python
from reqkit.options import Range, MultiRange

assert str(Range(2, 3)) == "2-3"
assert str(MultiRange(Range(None, 3), Range(5, 6))) == "0-3, 5-6"
```

Parsing raw response headers:

```python
from reqkit.util import parse_header

parsed = parse_header("HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n")
assert parsed.status_line == "HTTP/1.1 200 OK"
assert parsed.reason == "OK"
assert parsed.header["content-type"] == "text/html"
```

Running work on a thread pool:

```python
from reqkit.threadpool import ThreadPool

with ThreadPool(min_threads=1, max_threads=4) as pool:
    future = pool.submit(sum, [1, 2, 3])
    assert future.result() == 6
```

## Running the tests

```
pytest
```