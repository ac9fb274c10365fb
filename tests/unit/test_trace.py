from __future__ import annotations

import pytest

from exhaustigen.core.engine.errors import AlreadyExhausted
from exhaustigen.core.engine.state import Counter, GenState, Trace


def test_counter_room() -> None:
    assert Counter(value=0, bound=1).has_room()
    assert not Counter(value=1, bound=1).has_room()
    assert not Counter().has_room()


def test_push_starts_at_zero() -> None:
    trace = Trace()
    c = trace.push(5)
    assert (c.value, c.bound) == (0, 5)
    assert len(trace) == 1
    assert trace[0] is c


def test_last_with_room_scans_from_tail() -> None:
    trace = Trace()
    assert trace.last_with_room() is None

    trace.push(2)
    trace.push(1)
    trace.push(0)
    assert trace.last_with_room() == 1

    trace[1].value = 1
    assert trace.last_with_room() == 0


def test_pop_back_to() -> None:
    trace = Trace()
    for bound in (1, 2, 3):
        trace.push(bound)

    trace.pop_back_to(1)
    assert trace.snapshot() == ((0, 1),)

    trace.pop_back_to(1)
    assert len(trace) == 1

    with pytest.raises(IndexError):
        trace.pop_back_to(2)
    with pytest.raises(IndexError):
        trace.pop_back_to(-1)


def test_snapshot_is_detached() -> None:
    trace = Trace()
    trace.push(3)
    snap = trace.snapshot()
    trace[0].value = 2
    assert snap == ((0, 3),)


def test_state_positions_and_guard() -> None:
    state = GenState()
    assert state.current_position() == 0
    state.cursor = 2
    assert state.current_position() == 2

    state.trace.push(1)
    state.begin_pass()
    assert state.cursor == 0
    assert state.replayed == 1

    state.exhausted = True
    with pytest.raises(AlreadyExhausted):
        state.current_position()
