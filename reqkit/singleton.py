"""A base class giving each subclass one lazily created, thread-safe instance."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, ClassVar

__all__ = ["Singleton"]


@dataclass
class _SingletonState:
    lock: threading.Lock = field(default_factory=threading.Lock)
    instance: Any = None
    created: bool = False
    exited: bool = False


class Singleton:
    """Subclass to get one shared instance per class.

    ``get_instance`` creates the instance on first use. ``exit_instance``
    releases it once; afterwards ``get_instance`` returns None for good.
    """

    _singleton_state: ClassVar[_SingletonState] = _SingletonState()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._singleton_state = _SingletonState()

    @classmethod
    def get_instance(cls) -> Any:
        state = cls._singleton_state
        with state.lock:
            if not state.created:
                state.instance = cls()
                state.created = True
            return state.instance

    @classmethod
    def exit_instance(cls) -> None:
        state = cls._singleton_state
        with state.lock:
            if state.exited:
                return
            if state.instance is None:
                raise RuntimeError(f"{cls.__name__} has no instance to release")
            state.exited = True
            state.instance = None

    def __copy__(self) -> Any:
        raise TypeError(f"{type(self).__name__} instances cannot be copied")

    def __deepcopy__(self, memo: dict) -> Any:
        raise TypeError(f"{type(self).__name__} instances cannot be copied")