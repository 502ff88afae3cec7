"""Request option value types."""

from __future__ import annotations

import enum
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

__all__ = [
    "Bearer",
    "Buffer",
    "HttpVersionCode",
    "HttpVersion",
    "LimitRate",
    "LowSpeed",
    "ReserveSize",
    "Verbose",
    "Range",
    "MultiRange",
    "Proxies",
    "UnixSocket",
    "Timeout",
]

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


@dataclass(frozen=True)
class Bearer:
    """A bearer token for the Authorization header."""

    token: str


@dataclass(frozen=True)
class Buffer:
    """In-memory file content to upload, with the file name to report."""

    data: bytes
    filename: Path

    def __post_init__(self) -> None:
        data = self.data
        if isinstance(data, memoryview):
            if data.itemsize != 1:
                raise TypeError("only byte buffers can be used")
        elif not isinstance(data, (bytes, bytearray)):
            raise TypeError("only byte buffers can be used")
        object.__setattr__(self, "data", bytes(data))
        object.__setattr__(self, "filename", Path(os.fspath(self.filename)))

    def __len__(self) -> int:
        return len(self.data)


class HttpVersionCode(enum.Enum):
    """The HTTP version to use for a connection."""

    VERSION_NONE = 0
    VERSION_1_0 = 1
    VERSION_1_1 = 2
    VERSION_2_0 = 3
    VERSION_2_0_TLS = 4
    VERSION_2_0_PRIOR_KNOWLEDGE = 5
    VERSION_3_0 = 6


@dataclass(frozen=True)
class HttpVersion:
    """Requested HTTP version; by default the transport decides."""

    code: HttpVersionCode = HttpVersionCode.VERSION_NONE


@dataclass(frozen=True)
class LimitRate:
    """Download and upload rate limits in bytes per second."""

    downrate: int
    uprate: int


@dataclass(frozen=True)
class LowSpeed:
    """Abort when the speed stays below ``limit`` bytes/s for ``time`` seconds."""

    limit: int
    time: int


@dataclass(frozen=True)
class ReserveSize:
    """Number of bytes to reserve for the response body up front."""

    size: int


@dataclass(frozen=True)
class Verbose:
    """Whether to enable verbose transfer output."""

    verbose: bool = True


@dataclass(frozen=True)
class Range:
    """A byte range; a missing start means 0 and a missing end means open-ended."""

    resume_from: int | None = None
    finish_at: int | None = None

    def __post_init__(self) -> None:
        if self.resume_from is None:
            object.__setattr__(self, "resume_from", 0)
        if self.finish_at is None:
            object.__setattr__(self, "finish_at", -1)

    def __str__(self) -> str:
        start = "" if self.resume_from < 0 else str(self.resume_from)
        end = "" if self.finish_at < 0 else str(self.finish_at)
        return f"{start}-{end}"


@dataclass(frozen=True, init=False)
class MultiRange:
    """Several byte ranges requested at once."""

    ranges: tuple[Range, ...] = field(default=())

    def __init__(self, *args: Range) -> None:
        object.__setattr__(self, "ranges", tuple(args))

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self.ranges)


class Proxies:
    """Proxy hosts keyed by protocol; unknown protocols map to an empty string."""

    def __init__(self, hosts: Mapping[str, str] | None = None) -> None:
        self._hosts: dict[str, str] = dict(hosts or {})

    def has(self, protocol: str) -> bool:
        return protocol in self._hosts

    def __getitem__(self, protocol: str) -> str:
        return self._hosts.get(protocol, "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Proxies):
            return NotImplemented
        return self._hosts == other._hosts

    def __repr__(self) -> str:
        return f"Proxies({self._hosts!r})"


@dataclass(frozen=True)
class UnixSocket:
    """Path of a Unix domain socket to connect through."""

    path: str

    def __str__(self) -> str:
        return self.path


def _truncated_milliseconds(duration: timedelta) -> int:
    micros = duration // timedelta(microseconds=1)
    whole = abs(micros) // 1000
    return -whole if micros < 0 else whole


class Timeout:
    """A timeout stored in whole milliseconds (truncated toward zero)."""

    __slots__ = ("ms",)

    def __init__(self, duration: timedelta | int) -> None:
        if isinstance(duration, timedelta):
            self.ms = _truncated_milliseconds(duration)
        elif isinstance(duration, int) and not isinstance(duration, bool):
            self.ms = duration
        else:
            raise TypeError("timeout must be a timedelta or an int of milliseconds")

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against a signed 64-bit range."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise OverflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return self.ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeout):
            return NotImplemented
        return self.ms == other.ms

    def __hash__(self) -> int:
        return hash(self.ms)

    def __repr__(self) -> str:
        return f"Timeout({self.ms})"