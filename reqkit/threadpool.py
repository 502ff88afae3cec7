"""A thread pool that grows on demand and retires idle threads."""

from __future__ import annotations

import enum
import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from datetime import timedelta
from typing import Any

__all__ = ["ThreadPool", "DEFAULT_MIN_THREADS", "DEFAULT_MAX_IDLE"]

DEFAULT_MIN_THREADS = 1
DEFAULT_MAX_IDLE = timedelta(milliseconds=250)


class _Status(enum.Enum):
    STOP = enum.auto()
    RUNNING = enum.auto()
    PAUSE = enum.auto()


class ThreadPool:
    """Runs submitted callables on between ``min_thread_num`` and ``max_thread_num`` threads.

    A thread that finds no work for ``max_idle_time`` exits while more than
    ``min_thread_num`` threads are alive. Submitting to a stopped pool starts it.
    """

    def __init__(
        self,
        min_threads: int = DEFAULT_MIN_THREADS,
        max_threads: int | None = None,
        max_idle: timedelta = DEFAULT_MAX_IDLE,
    ) -> None:
        self.min_thread_num = min_threads
        self.max_thread_num = (os.cpu_count() or 1) if max_threads is None else max_threads
        self.max_idle_time = max_idle
        self._status = _Status.STOP
        self._cond = threading.Condition()
        self._lifecycle = threading.Lock()
        self._tasks: deque[Callable[[], None]] = deque()
        self._threads: list[threading.Thread] = []
        self._current = 0
        self._idle = 0

    @property
    def current_thread_num(self) -> int:
        return self._current

    @property
    def idle_thread_num(self) -> int:
        return self._idle

    @property
    def is_started(self) -> bool:
        return self._status is not _Status.STOP

    @property
    def is_stopped(self) -> bool:
        return self._status is _Status.STOP

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with ``start_threads`` threads, clamped to the allowed range."""
        with self._lifecycle:
            self._start_locked(start_threads)

    def _start_locked(self, start_threads: int) -> None:
        with self._cond:
            if self._status is not _Status.STOP:
                raise RuntimeError("thread pool is already started")
            self._status = _Status.RUNNING
            low, high = self.min_thread_num, self.max_thread_num
            count = low if start_threads < low else high if start_threads > high else start_threads
            for _ in range(count):
                self._create_thread()

    def stop(self) -> None:
        """Stop the pool and join its threads; queued tasks stay for a later start."""
        with self._lifecycle:
            with self._cond:
                if self._status is _Status.STOP:
                    raise RuntimeError("thread pool is already stopped")
                self._status = _Status.STOP
                self._cond.notify_all()
                threads = list(self._threads)
            me = threading.current_thread()
            for thread in threads:
                if thread is not me:
                    thread.join()
            with self._cond:
                self._threads.clear()
                self._current = 0
                self._idle = 0
                self._cond.notify_all()

    def pause(self) -> None:
        """Keep threads from taking new tasks until resumed."""
        with self._cond:
            if self._status is _Status.RUNNING:
                self._status = _Status.PAUSE

    def resume(self) -> None:
        with self._cond:
            if self._status is _Status.PAUSE:
                self._status = _Status.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every thread is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is _Status.STOP
                or (not self._tasks and self._idle == self._current)
            )

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        if self._status is _Status.STOP:
            with self._lifecycle:
                if self._status is _Status.STOP:
                    self._start_locked(0)

        future: Future = Future()

        def task() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:  # handed to the caller through the future
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if self._idle <= 0 and self._current < self.max_thread_num:
                self._create_thread()
            self._tasks.append(task)
            self._cond.notify_all()
        return future

    def _create_thread(self) -> bool:
        # Caller holds self._cond.
        if self._current >= self.max_thread_num:
            return False
        thread = threading.Thread(target=self._worker, name="threadpool-worker", daemon=True)
        self._current += 1
        self._idle += 1
        self._threads.append(thread)
        thread.start()
        return True

    def _worker(self) -> None:
        me = threading.current_thread()
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._status is not _Status.PAUSE)
                if self._status is _Status.STOP:
                    return
                self._cond.wait_for(
                    lambda: self._status is _Status.STOP or bool(self._tasks),
                    timeout=self.max_idle_time.total_seconds(),
                )
                if self._status is _Status.STOP:
                    return
                if not self._tasks:
                    if self._current > self.min_thread_num:
                        self._current -= 1
                        self._idle -= 1
                        if me in self._threads:
                            self._threads.remove(me)
                        self._cond.notify_all()
                        return
                    continue
                task = self._tasks.popleft()
                self._idle -= 1
            try:
                task()
            finally:
                with self._cond:
                    self._idle += 1
                    self._cond.notify_all()

    def __enter__(self) -> ThreadPool:
        if self.is_stopped:
            self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        if not self.is_stopped:
            self.stop()