"""Terminal and framework events, plus a broadcast bus that fans them out."""

from __future__ import annotations

import enum
import logging
import queue
import threading
import weakref
from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 0.25
"""Default interval between tick events, in seconds."""


class KeyModifiers(enum.Flag):
    """Modifier keys held while a key or mouse event happened."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class MouseEventKind(enum.Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"


_BUTTON_KINDS = frozenset({MouseEventKind.DOWN, MouseEventKind.UP, MouseEventKind.DRAG})


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``code`` is a single character or a key name such as ``"Enter"``."""

    code: str
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a terminal cell."""

    kind: MouseEventKind
    column: int
    row: int
    button: Optional[MouseButton] = None
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.kind in _BUTTON_KINDS and self.button is None:
            raise ValueError(f"mouse event of kind {self.kind.name} needs a button")
        if self.kind not in _BUTTON_KINDS and self.button is not None:
            raise ValueError(f"mouse event of kind {self.kind.name} takes no button")


@dataclass(frozen=True)
class Resize:
    columns: int
    rows: int


@dataclass(frozen=True)
class Tick:
    """Periodic heartbeat produced by the runtime."""


@dataclass(frozen=True)
class FocusGained:
    pass


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class Paste:
    text: str


FrameworkEvent = Union[KeyEvent, MouseEvent, Resize, Tick]
TerminalEvent = Union[KeyEvent, MouseEvent, Resize, FocusGained, FocusLost, Paste]


class Subscription:
    """A receiver of events published on an :class:`EventBus`.

    Holds at most the bus's buffer size of unread events; when full, the
    oldest unread event is discarded and counted in ``dropped``.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._pending: deque = deque()
        self._ready = threading.Condition()
        self.dropped = 0

    def _deliver(self, event: FrameworkEvent) -> None:
        with self._ready:
            if len(self._pending) >= self._capacity:
                self._pending.popleft()
                self.dropped += 1
            self._pending.append(event)
            self._ready.notify()

    def try_recv(self) -> FrameworkEvent:
        """Return the next event without waiting; raise ``queue.Empty`` if none."""
        with self._ready:
            if not self._pending:
                raise queue.Empty
            return self._pending.popleft()

    def recv(self, timeout: Optional[float] = None) -> FrameworkEvent:
        """Wait for the next event; raise ``queue.Empty`` when the timeout passes."""
        with self._ready:
            if not self._ready.wait_for(lambda: bool(self._pending), timeout):
                raise queue.Empty
            return self._pending.popleft()


class EventBus:
    """Broadcasts each published event to every live subscription."""

    def __init__(self, buffer: int) -> None:
        if buffer < 1:
            raise ValueError("event bus buffer must be at least 1")
        self._buffer = buffer
        self._subscribers: "weakref.WeakSet[Subscription]" = weakref.WeakSet()
        self._lock = threading.Lock()

    def publish(self, event: FrameworkEvent) -> None:
        logger.debug("publishing framework event %r", event)
        with self._lock:
            targets = list(self._subscribers)
        for subscription in targets:
            subscription._deliver(event)

    def subscribe(self) -> Subscription:
        subscription = Subscription(self._buffer)
        with self._lock:
            self._subscribers.add(subscription)
        return subscription


def map_terminal_event(event: TerminalEvent) -> Optional[FrameworkEvent]:
    """Turn a terminal event into a framework event, or ``None`` if it is ignored."""
    if isinstance(event, (KeyEvent, MouseEvent, Resize)):
        return event
    if isinstance(event, (FocusGained, FocusLost, Paste)):
        return None
    raise TypeError(f"not a terminal event: {event!r}")


def is_ctrl_c(event: FrameworkEvent) -> bool:
    return (
        isinstance(event, KeyEvent)
        and event.code in ("c", "C")
        and KeyModifiers.CONTROL in event.modifiers
    )


def is_mouse_click(event: FrameworkEvent, button: MouseButton) -> bool:
    return (
        isinstance(event, MouseEvent)
        and event.kind is MouseEventKind.DOWN
        and event.button is button
    )


def mouse_scroll_delta(event: FrameworkEvent) -> int:
    """Return 1 for scroll up, -1 for scroll down and 0 otherwise."""
    if isinstance(event, MouseEvent):
        if event.kind is MouseEventKind.SCROLL_UP:
            return 1
        if event.kind is MouseEventKind.SCROLL_DOWN:
            return -1
    return 0


def mouse_position(event: FrameworkEvent) -> Optional[Tuple[int, int]]:
    """Return ``(column, row)`` of a mouse event, or ``None`` for other events."""
    if isinstance(event, MouseEvent):
        return (event.column, event.row)
    return None