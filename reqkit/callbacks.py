"""Callback wrappers that carry a piece of user data alongside a callable."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "ReadCallback",
    "HeaderCallback",
    "WriteCallback",
    "ProgressCallback",
    "InfoType",
    "DebugCallback",
]


@dataclass
class ReadCallback:
    """Supplies upload data.

    ``callback(size, userdata)`` returns at most ``size`` bytes, an empty
    result at the end of the data, or ``None`` to abort the transfer.
    ``size`` is the total upload size, or -1 when unknown.
    """

    callback: Callable[[int, Any], bytes | None]
    userdata: Any = 0
    size: int = -1

    def __call__(self, buffer: bytearray | memoryview, size: int) -> int | None:
        """Fill ``buffer`` with the next chunk; return its length, or None to abort."""
        chunk = self.callback(size, self.userdata)
        if chunk is None:
            return None
        if len(chunk) > size:
            raise ValueError(f"read callback returned {len(chunk)} bytes, at most {size} allowed")
        buffer[: len(chunk)] = chunk
        return len(chunk)


@dataclass
class HeaderCallback:
    """Receives each response header line; a false result aborts the transfer."""

    callback: Callable[[str, Any], bool]
    userdata: Any = 0

    def __call__(self, header: str) -> bool:
        return bool(self.callback(header, self.userdata))


@dataclass
class WriteCallback:
    """Receives each chunk of the response body; a false result aborts the transfer."""

    callback: Callable[[bytes, Any], bool]
    userdata: Any = 0

    def __call__(self, data: bytes) -> bool:
        return bool(self.callback(data, self.userdata))


@dataclass
class ProgressCallback:
    """Receives transfer progress; a false result aborts the transfer."""

    callback: Callable[[int, int, int, int, Any], bool]
    userdata: Any = 0

    def __call__(self, download_total: int, download_now: int, upload_total: int, upload_now: int) -> bool:
        return bool(self.callback(download_total, download_now, upload_total, upload_now, self.userdata))


class InfoType(enum.Enum):
    """Kind of data passed to a debug callback."""

    TEXT = 0
    HEADER_IN = 1
    HEADER_OUT = 2
    DATA_IN = 3
    DATA_OUT = 4
    SSL_DATA_IN = 5
    SSL_DATA_OUT = 6


@dataclass
class DebugCallback:
    """Receives debug information about the transfer."""

    callback: Callable[[InfoType, str, Any], None]
    userdata: Any = 0

    def __call__(self, info_type: InfoType, data: str) -> None:
        self.callback(info_type, data, self.userdata)