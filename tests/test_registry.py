import pytest

from tuiact.registry import (
    EffectHook,
    HookOrderError,
    HookRegistry,
    HookSlot,
    HookStore,
    SlotKind,
)


def test_prune_runs_effect_cleanup_and_drops_store():
    registry = HookRegistry()
    component = ((0,), "Test", None)
    flag = []
    store = registry.store_for(component)
    effect = EffectHook()
    effect.set_cleanup(lambda: flag.append(True))
    store.set_slot(0, HookSlot(SlotKind.EFFECT, effect))

    registry.prune(set())
    assert flag == [True]
    assert store.slots == []
    assert registry.store_for(component) is not store


def test_with_effect_slot_initializes_vacant_entries():
    registry = HookRegistry()
    component = ((1,), "Comp", None)

    def check(effect):
        assert effect.deps is None
        assert effect.has_deps is False
        effect.set_deps(123)

    registry.with_effect_slot(component, 2, check)

    slot = registry.store_for(component).slot(2)
    assert slot.kind is SlotKind.EFFECT
    assert slot.value.has_deps is True
    assert slot.value.deps == 123


def test_with_effect_slot_rejects_other_kinds():
    registry = HookRegistry()
    store = registry.store_for("c")
    store.set_slot(0, HookSlot(SlotKind.STATE, object()))
    with pytest.raises(HookOrderError):
        registry.with_effect_slot("c", 0, lambda effect: None)


def test_prune_keeps_live_components():
    registry = HookRegistry()
    kept = registry.store_for("kept")
    registry.store_for("gone")
    registry.prune({"kept"})
    assert registry.store_for("kept") is kept


def test_slot_grows_with_vacant_entries():
    store = HookStore()
    assert store.slot(3) == HookSlot()
    assert len(store.slots) == 4
    assert all(slot.kind is SlotKind.VACANT for slot in store.slots)


def test_drain_releases_text_input_bindings():
    class Binding:
        def __init__(self):
            self.released = False

        def release(self):
            self.released = True

    binding = Binding()
    store = HookStore()
    store.set_slot(1, HookSlot(SlotKind.TEXT_INPUT, binding))
    store.drain()
    assert binding.released is True
    assert store.slots == []


def test_take_cleanup_clears_it():
    effect = EffectHook()
    marker = lambda: None  # noqa: E731
    effect.set_cleanup(marker)
    assert effect.take_cleanup() is marker
    assert effect.take_cleanup() is None