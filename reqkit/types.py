"""Basic value types: string holders such as URLs and user agents, and a header map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

__all__ = ["StringHolder", "Url", "UserAgent", "Header"]


def _text_of(value: object) -> str:
    if isinstance(value, StringHolder):
        return value._value
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


class StringHolder:
    """An immutable string wrapper that keeps its concrete type through concatenation.

    ``StringHolder()`` is empty, ``StringHolder(text)`` holds ``text``,
    ``StringHolder(text, length)`` holds the first ``length`` characters and
    ``StringHolder(a, b, c, ...)`` holds the concatenation of all parts.
    """

    __slots__ = ("_value",)

    def __init__(self, *args: Any) -> None:
        if len(args) == 2 and isinstance(args[1], int) and not isinstance(args[1], bool):
            text, length = args
            if length < 0:
                raise ValueError("length must not be negative")
            self._value = _text_of(text)[:length]
        else:
            self._value = "".join(_text_of(part) for part in args)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def _accepts(self, other: object) -> bool:
        return isinstance(other, str) or type(other) is type(self)

    def __add__(self, other: object) -> StringHolder:
        if not self._accepts(other):
            return NotImplemented
        return type(self)(self._value + _text_of(other))

    def __iadd__(self, other: object) -> StringHolder:
        return self.__add__(other)

    def __eq__(self, other: object) -> bool:
        if not self._accepts(other):
            return NotImplemented
        return self._value == _text_of(other)

    def __hash__(self) -> int:
        return hash(self._value)


class Url(StringHolder):
    """A request URL."""

    __slots__ = ()


class UserAgent(StringHolder):
    """A User-Agent header value."""

    __slots__ = ()


class Header(MutableMapping[str, str]):
    """A header map with case-insensitive keys, ordered case-insensitively.

    Looking up a missing key yields an empty string. Assigning to a key that is
    already present under another spelling keeps the first spelling.
    """

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def __getitem__(self, key: str) -> str:
        entry = self._items.get(key.lower())
        return "" if entry is None else entry[1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        existing = self._items.get(folded)
        name = existing[0] if existing is not None else key
        self._items[folded] = (name, value)

    def __delitem__(self, key: str) -> None:
        try:
            del self._items[key.lower()]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._items):
            yield self._items[folded][0]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._items

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._items.get(key.lower())
        return default if entry is None else entry[1]

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"