import threading

from tuiact.handles import Cell, ReducerDispatch, RefHandle, StateHandle


class FakeDispatcher:
    def __init__(self):
        self.renders = 0

    def request_render(self):
        self.renders += 1


def test_cell_set_then_get_round_trips():
    cell = Cell("first")
    cell.set("second")
    assert cell.get() == "second"


def test_state_handle_set_updates_and_requests_render():
    dispatcher = FakeDispatcher()
    cell = Cell(0)
    handle = StateHandle(cell, dispatcher)
    handle.set(5)
    assert cell.get() == 5
    assert dispatcher.renders == 1


def test_state_handle_update_applies_function():
    dispatcher = FakeDispatcher()
    cell = Cell(["a"])
    handle = StateHandle(cell, dispatcher)
    handle.update(lambda items: items + ["b"])
    assert cell.get() == ["a", "b"]
    assert dispatcher.renders == 1


def test_reducer_dispatch_runs_reducer_and_renders():
    dispatcher = FakeDispatcher()
    cell = Cell(10)
    reducer = ReducerDispatch(cell, lambda state, action: state + action, dispatcher)
    reducer.dispatch(3)
    reducer.dispatch(-1)
    assert cell.get() == 12
    assert dispatcher.renders == 2
    assert reducer.with_state(lambda s: s * 2) == 24


def test_reducer_dispatch_is_safe_across_threads():
    dispatcher = FakeDispatcher()
    cell = Cell(0)
    reducer = ReducerDispatch(cell, lambda state, action: state + action, dispatcher)
    threads = [
        threading.Thread(target=lambda: [reducer.dispatch(1) for _ in range(200)])
        for _ in range(4)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert cell.get() == 4 * 200


def test_ref_handle_reads_and_modifies_without_render():
    cell = Cell(1)
    ref = RefHandle(cell)
    assert ref.modify(lambda v: v + 1) == 2
    assert ref.read(lambda v: v * 10) == 20
    ref.set(7)
    assert cell.get() == 7