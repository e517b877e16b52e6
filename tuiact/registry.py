"""Per-component storage of hook slots."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

R = TypeVar("R")

Cleanup = Callable[[], None]


class HookOrderError(RuntimeError):
    """Hooks were called in a different order than on an earlier render."""


class SlotKind(enum.Enum):
    VACANT = "vacant"
    STATE = "state"
    EFFECT = "effect"
    MEMO = "memo"
    REDUCER = "reducer"
    REF = "ref"
    TEXT_INPUT = "text_input"


@dataclass(frozen=True)
class HookSlot:
    """One hook's stored entry, tagged with the kind of hook that owns it."""

    kind: SlotKind = SlotKind.VACANT
    value: Any = None


@dataclass
class EffectHook:
    """Stored state of a ``use_effect`` call: its last deps and pending cleanup."""

    deps: Any = None
    has_deps: bool = False
    cleanup: Optional[Cleanup] = None

    def take_cleanup(self) -> Optional[Cleanup]:
        cleanup, self.cleanup = self.cleanup, None
        return cleanup

    def set_cleanup(self, cleanup: Optional[Cleanup]) -> None:
        self.cleanup = cleanup

    def set_deps(self, deps: Any) -> None:
        self.deps = deps
        self.has_deps = True


@dataclass
class EffectInvocation:
    """An effect waiting to run after a render."""

    component_id: Hashable
    slot_index: int
    deps: Any
    task: Callable[[Any], Optional[Cleanup]]


@dataclass
class HookStore:
    """The slots of one component, in call order."""

    slots: List[HookSlot] = field(default_factory=list)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def __enter__(self) -> "HookStore":
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._lock.release()

    def slot(self, index: int) -> HookSlot:
        """Return slot ``index``, adding vacant slots up to it as needed."""
        with self._lock:
            missing = index + 1 - len(self.slots)
            if missing > 0:
                self.slots.extend(HookSlot() for _ in range(missing))
            return self.slots[index]

    def set_slot(self, index: int, slot: HookSlot) -> None:
        with self._lock:
            self.slot(index)
            self.slots[index] = slot

    def drain(self) -> None:
        """Run pending effect cleanups, release bindings and empty the store."""
        with self._lock:
            for slot in self.slots:
                if slot.kind is SlotKind.EFFECT:
                    cleanup = slot.value.take_cleanup()
                    if cleanup is not None:
                        cleanup()
                elif slot.kind is SlotKind.TEXT_INPUT:
                    release = getattr(slot.value, "release", None)
                    if callable(release):
                        release()
            self.slots.clear()


class HookRegistry:
    """Hook stores for every mounted component."""

    def __init__(self) -> None:
        self._stores: Dict[Hashable, HookStore] = {}
        self._lock = threading.Lock()

    def store_for(self, component_id: Hashable) -> HookStore:
        with self._lock:
            store = self._stores.get(component_id)
            if store is None:
                store = self._stores[component_id] = HookStore()
            return store

    def prune(self, live: Iterable[Hashable]) -> None:
        """Drop and drain every store whose component is not in ``live``."""
        live_ids = set(live)
        with self._lock:
            dead = [cid for cid in self._stores if cid not in live_ids]
            removed = [self._stores.pop(cid) for cid in dead]
        for store in removed:
            store.drain()

    def with_effect_slot(
        self,
        component_id: Hashable,
        slot_index: int,
        fn: Callable[[EffectHook], R],
    ) -> R:
        """Call ``fn`` with the effect in the given slot, creating it if vacant."""
        store = self.store_for(component_id)
        with store:
            slot = store.slot(slot_index)
            if slot.kind is SlotKind.VACANT:
                slot = HookSlot(SlotKind.EFFECT, EffectHook())
                store.set_slot(slot_index, slot)
            elif slot.kind is not SlotKind.EFFECT:
                raise HookOrderError("effect slot type mismatch")
            return fn(slot.value)