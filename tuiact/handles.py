"""Handles through which components read and change their hook state."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")
S = TypeVar("S")
A = TypeVar("A")
R = TypeVar("R")


class RenderRequester(Protocol):
    """Anything that can be asked to schedule another render."""

    def request_render(self) -> None: ...


class Cell(Generic[T]):
    """A value shared between renders and handles, guarded by a lock."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.RLock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._lock:
            self._value = value

    def _read(self, fn: Callable[[T], R]) -> R:
        with self._lock:
            return fn(self._value)

    def _transform(self, fn: Callable[[T], T]) -> T:
        with self._lock:
            self._value = fn(self._value)
            return self._value


class StateHandle(Generic[T]):
    """Changes a ``use_state`` value and asks for a re-render."""

    def __init__(self, cell: Cell[T], dispatcher: RenderRequester) -> None:
        self._cell = cell
        self._dispatcher = dispatcher

    def set(self, value: T) -> None:
        self._cell.set(value)
        self._dispatcher.request_render()

    def update(self, fn: Callable[[T], T]) -> None:
        """Replace the value with ``fn(current)``."""
        self._cell._transform(fn)
        self._dispatcher.request_render()


class ReducerDispatch(Generic[S, A]):
    """Feeds actions through a reducer and asks for a re-render."""

    def __init__(
        self,
        cell: Cell[S],
        reducer: Callable[[S, A], S],
        dispatcher: RenderRequester,
    ) -> None:
        self._cell = cell
        self._reducer = reducer
        self._dispatcher = dispatcher

    def dispatch(self, action: A) -> None:
        """Replace the state with ``reducer(state, action)``."""
        self._cell._transform(lambda state: self._reducer(state, action))
        self._dispatcher.request_render()

    def with_state(self, fn: Callable[[S], R]) -> R:
        return self._cell._read(fn)


class RefHandle(Generic[T]):
    """A mutable value that survives renders without triggering them."""

    def __init__(self, cell: Cell[T]) -> None:
        self._cell = cell

    def read(self, fn: Callable[[T], R]) -> R:
        return self._cell._read(fn)

    def modify(self, fn: Callable[[T], T]) -> T:
        """Replace the value with ``fn(current)`` and return the new value."""
        return self._cell._transform(fn)

    def set(self, value: Any) -> None:
        self._cell.set(value)