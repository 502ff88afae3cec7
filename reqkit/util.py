"""Parsing helpers for cookie lists and raw response headers, plus small string utilities."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from reqkit.types import Header

__all__ = [
    "Cookie",
    "ParsedHeader",
    "parse_cookies",
    "parse_header",
    "split",
    "is_true",
    "timestamp_to_seconds",
    "secure_clear",
]

_TIME_MAX = 2**63 - 1
_TIME_MIN = -(2**63)
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_BLANK = re.compile(r"[\t ]")

# Column order of a tab-separated cookie-jar line.
_DOMAIN, _INCLUDE_SUBDOMAINS, _PATH, _HTTPS_ONLY, _EXPIRES, _NAME, _VALUE = range(7)
_COOKIE_FIELDS = 7


@dataclass(frozen=True)
class Cookie:
    """One cookie as stored in a cookie jar."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default_factory=lambda: datetime.fromtimestamp(0, timezone.utc))


@dataclass
class ParsedHeader:
    """Headers of the last response in a raw header block, with its status line and reason."""

    header: Header
    status_line: str = ""
    reason: str = ""


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; a trailing delimiter yields no empty final field."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = to_split.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def is_true(s: str) -> bool:
    """Return whether ``s`` equals "true", ignoring ASCII case."""
    return s.isascii() and s.lower() == "true"


def timestamp_to_seconds(st: str) -> int:
    """Parse the leading integer of ``st`` as a signed 64-bit timestamp.

    Leading whitespace and trailing text are ignored. Raises ValueError when no
    number starts the string and OverflowError when it does not fit.
    """
    match = _INTEGER_PREFIX.match(st)
    if match is None:
        raise ValueError(f"invalid timestamp: {st!r}")
    value = int(match.group(1))
    if not _TIME_MIN <= value <= _TIME_MAX:
        raise OverflowError(f"timestamp out of range: {st!r}")
    return value


def parse_cookies(raw_cookies: Iterable[str]) -> list[Cookie]:
    """Build cookies from tab-separated cookie-jar lines.

    Missing trailing columns count as empty; an empty expiry column raises ValueError.
    """
    cookies = []
    for line in raw_cookies:
        tokens = split(line, "\t")
        tokens.extend([""] * (_COOKIE_FIELDS - len(tokens)))
        expires = timestamp_to_seconds(tokens[_EXPIRES])
        cookies.append(
            Cookie(
                name=tokens[_NAME],
                value=tokens[_VALUE],
                domain=tokens[_DOMAIN],
                include_subdomains=is_true(tokens[_INCLUDE_SUBDOMAINS]),
                path=tokens[_PATH],
                https_only=is_true(tokens[_HTTPS_ONLY]),
                expires=datetime.fromtimestamp(expires, timezone.utc),
            )
        )
    return cookies


def _find_blank(text: str, start: int = 0) -> int:
    match = _BLANK.search(text, start)
    return -1 if match is None else match.start()


def parse_header(headers: str) -> ParsedHeader:
    """Parse a raw header block.

    Each status line ("HTTP/...") starts a fresh header map, so after a chain
    of redirects only the headers of the final response remain.
    """
    header = Header()
    status_line = ""
    reason = ""
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip("\t\n\r ")
            status_line = line
            first = _find_blank(line)
            second = _find_blank(line, first + 1) if first != -1 else -1
            if second != -1:
                line = line[second + 1 :]
                reason = line
            header = Header()

        if line:
            name, colon, value = line.partition(":")
            if colon:
                header[name] = value.lstrip("\t ").rstrip("\t\n\r ")

    return ParsedHeader(header=header, status_line=status_line, reason=reason)


def secure_clear(buffer: bytearray) -> None:
    """Overwrite ``buffer`` with zero bytes, then empty it."""
    if not isinstance(buffer, bytearray):
        raise TypeError("only a bytearray can be cleared in place")
    if not buffer:
        return
    buffer[:] = bytes(len(buffer))
    del buffer[:]