# tuiact

Building blocks for React-style terminal user interfaces. The package covers:

- an event model with a broadcast bus;
- hit-testing of clickable buttons;
- a context stack keyed by type;
- hook state for components (`use_state`, `use_reducer`, `use_ref`, `use_memo`,
  `use_callback`, `use_effect`);
- the layout arithmetic that terminal widgets need.

## Installation

```
pip install tuiact
```

To run the test suite:

```
pip install "tuiact[test]"
pytest
```

## What the package does not do

`tuiact` does not draw anything to a terminal. It has no terminal backend, no
widget renderer and no application loop that reads input, publishes ticks or
re-renders components. You supply those parts yourself.

- **Render requests.** A *dispatcher* is any object with a `request_render()`
  method. The hook handles call it whenever state changes.
- **Effects.** Queued effects are not run for you. Your code decides when to
  run them.

## Modules

- `tuiact.events`: the event types and the event bus.
  - Events: `KeyEvent`, `MouseEvent` (with `MouseEventKind`, `MouseButton` and
    `KeyModifiers`), `Resize` and `Tick`. The terminal-only events are
    `FocusGained`, `FocusLost` and `Paste`.
  - `EventBus` and its `Subscription`.
  - Helpers: `map_terminal_event`, `is_ctrl_c`, `is_mouse_click`,
    `mouse_scroll_delta` and `mouse_position`.
  - `DEFAULT_TICK_RATE` is 0.25 seconds.
- `tuiact.interactions`: `Hitbox` and `ButtonRegistry`, plus the functions
  `register_button_hitbox`, `reset_button_hitboxes` and `is_button_click`.
  These functions all work on one module-wide registry.
- `tuiact.context`: `ContextStack` and `ContextGuard`.
- `tuiact.layout`: `Rect`, `Percentage` and `Ratio`, plus the widget geometry
  helpers described below.
- `tuiact.handles`: `Cell`, `StateHandle`, `ReducerDispatch` and `RefHandle`.
- `tuiact.registry`: `HookRegistry`, `HookStore`, `HookSlot`, `SlotKind`,
  `EffectHook`, `EffectInvocation` and `HookOrderError`.
- `tuiact.scope`: `Scope`, the object a component uses to call hooks.

## Events

```python
import queue

from tuiact.events import EventBus, Tick

bus = EventBus(4)
subscription = bus.subscribe()
bus.publish(Tick())
assert subscription.try_recv() == Tick()

try:
    subscription.recv(timeout=0.1)
except queue.Empty:
    pass
```

Each event is broadcast to every live subscription.

A subscription holds at most `buffer` unread events. When it is full, the
oldest unread event is discarded and counted in `subscription.dropped`.

`try_recv()` and `recv(timeout)` raise `queue.Empty` when there is nothing to
read.

`map_terminal_event` handles terminal events as follows:

- it passes key, mouse and resize events through unchanged;
- it returns `None` for focus and paste events;
- it raises `TypeError` for anything else.

## Button clicks

```python
from tuiact.events import MouseButton, MouseEvent, MouseEventKind
from tuiact.interactions import Hitbox, is_button_click, register_button_hitbox

register_button_hitbox("submit", Hitbox(x=10, y=5, width=4, height=2))
click = MouseEvent(kind=MouseEventKind.DOWN, column=11, row=6, button=MouseButton.LEFT)
assert is_button_click(click, "submit")
```

Only a left-button press inside the recorded hitbox counts as a click.

A `MouseEvent` of kind `DOWN`, `UP` or `DRAG` must carry a button. Any other
kind must not carry one. Breaking either rule raises `ValueError`.

## Context

```python
from dataclasses import dataclass

from tuiact.context import ContextStack

@dataclass
class Theme:
    accent: str

stack = ContextStack()
with stack.provide(Theme("cyan")):
    assert stack.get(Theme).accent == "cyan"
assert stack.get(Theme) is None
```

Values are looked up by their exact type. The most recently provided value
wins.

## Hooks

A `Scope` hands out hooks in call order. Each render of a component has to call
the same hooks in the same order. If a stored slot belongs to a different kind
of hook, `HookOrderError` is raised.

```python
from tuiact.context import ContextStack
from tuiact.registry import HookRegistry
from tuiact.scope import Scope

class Dispatcher:
    def __init__(self):
        self.renders = 0

    def request_render(self):
        self.renders += 1

registry = HookRegistry()
dispatcher = Dispatcher()
context = ContextStack()

def render():
    scope = Scope("Counter", registry.store_for("Counter"), dispatcher, context)
    count, set_count = scope.use_state(lambda: 0)
    total, dispatch = scope.use_reducer(lambda: 0, lambda state, n: state + n)
    scope.use_effect((), lambda d: (lambda: print("cleaned up")))
    return count, set_count, dispatch, scope.take_effects()

count, set_count, dispatch, effects = render()
set_count.update(lambda n: n + 1)   # asks the dispatcher for a render
dispatch.dispatch(5)

for effect in effects:
    cleanup = effect.task(dispatcher)

    def store(hook, effect=effect, cleanup=cleanup):
        hook.set_deps(effect.deps)
        hook.set_cleanup(cleanup)

    registry.with_effect_slot(effect.component_id, effect.slot_index, store)

count, *_ = render()                # count == 1; the effect is not queued again
registry.prune([])                  # drains the store and prints "cleaned up"
```

How each hook behaves:

- **`use_state(init)`** returns the current value and a `StateHandle`. The
  handle's `set(value)` and `update(fn)` store the new value and request a
  render.
- **`use_reducer(init, reducer)`** works with a reducer of the form
  `reducer(state, action) -> new_state`. It returns the state and a
  `ReducerDispatch`.
  - `dispatch(action)` applies the reducer and requests a render.
  - `with_state(fn)` reads the state.
  - The reducer passed on the latest render is stored for later renders.
- **`use_ref(init)`** returns a `RefHandle`. Its `read`, `modify` and `set`
  never request a render.
- **`use_memo(deps, compute)`** returns the cached value. It recomputes only
  when `deps` compares unequal to the previous deps. `use_callback` is the same
  hook.
- **`use_effect(deps, effect)`** queues an `EffectInvocation` on the first
  render, and again whenever `deps` changed since the last deps recorded with
  `EffectHook.set_deps`.
- **`provide_context(value)`** and **`use_context(kind)`** go through the
  scope's `ContextStack`.

`HookRegistry.prune(live)` drops every store whose component id is not in
`live`. Dropping a store drains it: pending effect cleanups run, and text-input
slots are released.

## Layout helpers

`tuiact.layout` holds the sizing decisions that widgets make.

Widget geometry:

- `Rect.inner()` gives the area inside a one-cell border.
- `flex_constraints(count)` gives equal `Ratio` shares for flex children.
- `desired_dimension(total, desired, padding, minimum)` picks a size and
  `modal_area(area, width, height)` centres a modal. Modals are at least 20
  columns by 6 rows.
- `toast_areas(area, has_body)` stacks toasts bottom-right, newest lowest:
  - toasts are 20 to 40 columns wide;
  - they are 5 rows high with a body and 4 rows without;
  - toasts that no longer fit are left out.

Tables and forms:

- `resolve_table_widths(header_len, first_row_len, column_widths)` picks column
  constraints:
  - percentages are capped at 100;
  - the list is truncated or padded to the column count.
- `form_label_widths(label_width)` keeps the label column between 10% and 90%.

Lists, trees and tabs:

- `clamp_highlight(index, length)` keeps a highlight within the rows.
- `active_tab_index(active, count)` keeps a tab selection within the tabs.
- `tree_row_text(depth, label, has_children, expanded)` gives the indented
  tree line, with a `v ` or `> ` marker.

Gauges and text inputs:

- `gauge_label(ratio, label)` returns the given label, or else the rounded
  percentage.
- `input_display_value(value, secure)` masks secure input with asterisks.
- `input_cursor_x(inner, render_area, value, cursor, secure)` places the cursor
  column. It measures display width with `wcwidth` and keeps the cursor inside
  the input.