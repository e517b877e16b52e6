from dataclasses import dataclass

from tuiact.context import ContextStack


@dataclass
class Theme:
    accent: str


@dataclass
class DarkTheme(Theme):
    pass


def test_get_returns_provided_value():
    stack = ContextStack()
    theme = Theme("cyan")
    stack.provide(theme)
    assert stack.get(Theme) is theme


def test_missing_type_returns_none():
    stack = ContextStack()
    stack.provide(Theme("cyan"))
    assert stack.get(int) is None


def test_inner_value_shadows_outer_until_released():
    stack = ContextStack()
    outer = Theme("cyan")
    inner = Theme("red")
    stack.provide(outer)
    guard = stack.provide(inner)
    assert stack.get(Theme) is inner
    guard.release()
    assert stack.get(Theme) is outer


def test_release_of_last_value_empties_type():
    stack = ContextStack()
    guard = stack.provide(Theme("cyan"))
    guard.release()
    assert stack.get(Theme) is None


def test_release_twice_pops_only_once():
    stack = ContextStack()
    outer = Theme("cyan")
    stack.provide(outer)
    guard = stack.provide(Theme("red"))
    guard.release()
    guard.release()
    assert stack.get(Theme) is outer


def test_guard_works_as_context_manager():
    stack = ContextStack()
    value = Theme("green")
    with stack.provide(value):
        assert stack.get(Theme) is value
    assert stack.get(Theme) is None


def test_values_are_keyed_by_exact_type():
    stack = ContextStack()
    dark = DarkTheme("black")
    stack.provide(dark)
    assert stack.get(Theme) is None
    assert stack.get(DarkTheme) is dark


def test_different_types_are_independent():
    stack = ContextStack()
    theme = Theme("cyan")
    stack.provide(theme)
    with stack.provide(42):
        assert stack.get(int) == 42
        assert stack.get(Theme) is theme
    assert stack.get(int) is None
    assert stack.get(Theme) is theme