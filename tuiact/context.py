"""A stack of context values keyed by their type."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

T = TypeVar("T")


class ContextStack:
    """Holds provided values; the most recent value of each type wins."""

    def __init__(self) -> None:
        self._layers: Dict[type, List[Any]] = {}

    def provide(self, value: Any) -> "ContextGuard":
        """Push ``value``; the returned guard removes it again when released."""
        kind = type(value)
        self._layers.setdefault(kind, []).append(value)
        return ContextGuard(self, kind)

    def get(self, kind: Type[T]) -> Optional[T]:
        """Return the most recently provided value of exactly ``kind``, if any."""
        entries = self._layers.get(kind)
        return entries[-1] if entries else None

    def _pop(self, kind: type) -> None:
        entries = self._layers.get(kind)
        if entries:
            entries.pop()
            if not entries:
                del self._layers[kind]


class ContextGuard:
    """Withdraws a provided value on release or when its ``with`` block ends."""

    def __init__(self, stack: ContextStack, kind: type) -> None:
        self._stack = stack
        self._kind = kind
        self._released = False

    def release(self) -> None:
        if not self._released:
            self._released = True
            self._stack._pop(self._kind)

    def __enter__(self) -> "ContextGuard":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()