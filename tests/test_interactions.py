from tuiact.events import KeyEvent, MouseButton, MouseEvent, MouseEventKind
from tuiact.interactions import (
    ButtonRegistry,
    Hitbox,
    is_button_click,
    register_button_hitbox,
    reset_button_hitboxes,
)


def _left_click(column, row):
    return MouseEvent(MouseEventKind.DOWN, column=column, row=row, button=MouseButton.LEFT)


def test_button_click_detects_coordinates_within_hitbox():
    reset_button_hitboxes()
    register_button_hitbox("submit", Hitbox(x=10, y=5, width=4, height=2))
    assert is_button_click(_left_click(11, 6), "submit")


def test_reset_clears_hitboxes_and_prevents_future_matches():
    reset_button_hitboxes()
    register_button_hitbox("danger", Hitbox(x=0, y=0, width=2, height=1))
    click = _left_click(1, 0)
    assert is_button_click(click, "danger")

    reset_button_hitboxes()
    assert not is_button_click(click, "danger")


def test_click_outside_or_on_far_edge_does_not_match():
    reset_button_hitboxes()
    register_button_hitbox("submit", Hitbox(x=10, y=5, width=4, height=2))
    assert not is_button_click(_left_click(14, 5), "submit")
    assert not is_button_click(_left_click(10, 7), "submit")
    assert not is_button_click(_left_click(9, 5), "submit")
    assert is_button_click(_left_click(13, 6), "submit")


def test_only_left_button_down_counts():
    reset_button_hitboxes()
    register_button_hitbox("ok", Hitbox(x=0, y=0, width=5, height=5))
    right = MouseEvent(MouseEventKind.DOWN, column=1, row=1, button=MouseButton.RIGHT)
    moved = MouseEvent(MouseEventKind.MOVED, column=1, row=1)
    assert not is_button_click(right, "ok")
    assert not is_button_click(moved, "ok")
    assert not is_button_click(KeyEvent("Enter"), "ok")


def test_unknown_button_id_never_matches():
    reset_button_hitboxes()
    register_button_hitbox("ok", Hitbox(x=0, y=0, width=5, height=5))
    assert not is_button_click(_left_click(1, 1), "cancel")


def test_recording_again_replaces_hitbox():
    registry = ButtonRegistry()
    registry.record("b", Hitbox(x=0, y=0, width=2, height=2))
    registry.record("b", Hitbox(x=20, y=20, width=2, height=2))
    assert not registry.contains("b", 1, 1)
    assert registry.contains("b", 21, 21)


def test_hitbox_saturates_at_cell_limit():
    hitbox = Hitbox(x=65534, y=0, width=10, height=1)
    assert hitbox.contains(65534, 0)
    assert not hitbox.contains(65535, 0)


def test_empty_hitbox_contains_nothing():
    assert not Hitbox().contains(0, 0)