"""The per-render scope through which a component calls its hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, List, Optional, Tuple, Type, TypeVar

from .context import ContextGuard, ContextStack
from .handles import Cell, ReducerDispatch, RefHandle, RenderRequester, StateHandle
from .registry import (
    Cleanup,
    EffectHook,
    EffectInvocation,
    HookOrderError,
    HookSlot,
    HookStore,
    SlotKind,
)

T = TypeVar("T")
S = TypeVar("S")
A = TypeVar("A")


@dataclass
class _MemoEntry:
    deps: Any
    value: Any

    def apply_or_update(self, deps: Any, compute: Callable[[], Any]) -> Any:
        if self.deps != deps:
            self.value = compute()
            self.deps = deps
        return self.value


@dataclass
class _ReducerEntry:
    cell: Cell
    reducer: Callable[[Any, Any], Any]


class Scope:
    """Hands out hook values for one component during one render.

    Hooks are matched to stored slots by call order, so a component must
    call the same hooks in the same order on every render.
    """

    def __init__(
        self,
        component_id: Hashable,
        store: HookStore,
        dispatcher: RenderRequester,
        context: ContextStack,
    ) -> None:
        self.component_id = component_id
        self.dispatcher = dispatcher
        self._store = store
        self._context = context
        self._cursor = 0
        self._pending_effects: List[EffectInvocation] = []

    def _next_index(self) -> int:
        index = self._cursor
        self._cursor += 1
        return index

    def use_state(self, init: Callable[[], T]) -> Tuple[T, StateHandle[T]]:
        index = self._next_index()
        with self._store as store:
            slot = store.slot(index)
            if slot.kind is SlotKind.VACANT:
                cell = Cell(init())
                store.set_slot(index, HookSlot(SlotKind.STATE, cell))
            elif slot.kind is SlotKind.STATE:
                cell = slot.value
            else:
                raise HookOrderError("use_state hook order mismatch")
        return cell.get(), StateHandle(cell, self.dispatcher)

    def use_effect(
        self, deps: Any, effect: Callable[[Any], Optional[Cleanup]]
    ) -> None:
        """Queue ``effect`` when this is the first render or ``deps`` changed."""
        index = self._next_index()
        with self._store as store:
            slot = store.slot(index)
            if slot.kind is SlotKind.VACANT:
                store.set_slot(index, HookSlot(SlotKind.EFFECT, EffectHook()))
                should_run = True
            elif slot.kind is SlotKind.EFFECT:
                hook: EffectHook = slot.value
                should_run = not hook.has_deps or hook.deps != deps
            else:
                raise HookOrderError("use_effect hook order mismatch")
        if should_run:
            self._pending_effects.append(
                EffectInvocation(self.component_id, index, deps, effect)
            )

    def provide_context(self, value: Any) -> ContextGuard:
        return self._context.provide(value)

    def use_context(self, kind: Type[T]) -> Optional[T]:
        return self._context.get(kind)

    def use_memo(self, deps: Any, compute: Callable[[], T]) -> T:
        """Return the cached value, recomputing it when ``deps`` changed."""
        index = self._next_index()
        with self._store as store:
            slot = store.slot(index)
            if slot.kind is SlotKind.VACANT:
                value = compute()
                store.set_slot(index, HookSlot(SlotKind.MEMO, _MemoEntry(deps, value)))
                return value
            if slot.kind is SlotKind.MEMO:
                return slot.value.apply_or_update(deps, compute)
            raise HookOrderError("use_memo hook order mismatch")

    def use_callback(self, deps: Any, factory: Callable[[], T]) -> T:
        return self.use_memo(deps, factory)

    def use_reducer(
        self, init: Callable[[], S], reducer: Callable[[S, A], S]
    ) -> Tuple[S, ReducerDispatch[S, A]]:
        """State driven by ``reducer(state, action) -> new state``; the latest reducer wins."""
        index = self._next_index()
        with self._store as store:
            slot = store.slot(index)
            if slot.kind is SlotKind.VACANT:
                entry = _ReducerEntry(Cell(init()), reducer)
                store.set_slot(index, HookSlot(SlotKind.REDUCER, entry))
            elif slot.kind is SlotKind.REDUCER:
                entry = slot.value
                entry.reducer = reducer
            else:
                raise HookOrderError("use_reducer hook order mismatch")
        dispatch = ReducerDispatch(entry.cell, entry.reducer, self.dispatcher)
        return entry.cell.get(), dispatch

    def use_ref(self, init: Callable[[], T]) -> RefHandle[T]:
        index = self._next_index()
        with self._store as store:
            slot = store.slot(index)
            if slot.kind is SlotKind.VACANT:
                cell = Cell(init())
                store.set_slot(index, HookSlot(SlotKind.REF, cell))
            elif slot.kind is SlotKind.REF:
                cell = slot.value
            else:
                raise HookOrderError("use_ref hook order mismatch")
        return RefHandle(cell)

    def take_effects(self) -> List[EffectInvocation]:
        """Return the effects queued during this render and forget them."""
        effects, self._pending_effects = self._pending_effects, []
        return effects