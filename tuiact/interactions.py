"""Hit-testing of rendered buttons against mouse clicks."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict

from .events import FrameworkEvent, MouseButton, is_mouse_click, mouse_position

_CELL_LIMIT = 0xFFFF


@dataclass(frozen=True)
class Hitbox:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def contains(self, column: int, row: int) -> bool:
        right = min(self.x + self.width, _CELL_LIMIT)
        bottom = min(self.y + self.height, _CELL_LIMIT)
        return self.x <= column < right and self.y <= row < bottom


class ButtonRegistry:
    """Maps button ids to the area they were last drawn in."""

    def __init__(self) -> None:
        self._hitboxes: Dict[str, Hitbox] = {}
        self._lock = threading.Lock()

    def reset(self) -> None:
        with self._lock:
            self._hitboxes.clear()

    def record(self, button_id: str, hitbox: Hitbox) -> None:
        with self._lock:
            self._hitboxes[button_id] = hitbox

    def contains(self, button_id: str, column: int, row: int) -> bool:
        with self._lock:
            hitbox = self._hitboxes.get(button_id)
        return hitbox is not None and hitbox.contains(column, row)


_REGISTRY = ButtonRegistry()


def register_button_hitbox(button_id: str, hitbox: Hitbox) -> None:
    _REGISTRY.record(button_id, hitbox)


def reset_button_hitboxes() -> None:
    _REGISTRY.reset()


def is_button_click(event: FrameworkEvent, button_id: str) -> bool:
    """True when ``event`` is a left click inside the button's last hitbox."""
    if not is_mouse_click(event, MouseButton.LEFT):
        return False
    position = mouse_position(event)
    if position is None:
        return False
    column, row = position
    return _REGISTRY.contains(button_id, column, row)