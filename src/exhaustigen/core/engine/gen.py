from __future__ import annotations

import operator

import structlog

from exhaustigen.core.config.settings import settings
from exhaustigen.core.engine.errors import AlreadyExhausted, SequenceProtocolViolation
from exhaustigen.core.engine.state import GenState

log = structlog.get_logger()


class Gen:
    """
    Exhaustive draw generator.

    Drive it from a "run body, then check" loop:

        gen = Gen()
        while True:
            value = body(gen)
            if not gen.advance():
                break

    Every combination of draws reachable by the body is visited exactly once,
    in depth-first order with the last draw changing fastest. Bounds are
    discovered lazily, so a later bound may depend on earlier draws.

    strict=True checks that each pass replays the previous pass's bounds up
    to the advanced position; strict=False keeps the unchecked behavior.
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        self._state = GenState()
        self._strict = settings.strict if strict is None else strict

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def passes(self) -> int:
        return self._state.passes

    @property
    def exhausted(self) -> bool:
        return self._state.exhausted

    @property
    def depth(self) -> int:
        return len(self._state.trace)

    @property
    def trace(self) -> tuple[tuple[int, int], ...]:
        return self._state.trace.snapshot()

    def draw(self, bound: int) -> int:
        """
        Return the value assigned to the next draw position, in [0, bound].

        The first visit of a position yields 0; later passes yield whatever
        the last advance left there.
        """
        bound = operator.index(bound)
        if bound < 0:
            raise ValueError("bound must be >= 0")

        state = self._state
        position = state.current_position()
        trace = state.trace

        if position == len(trace):
            state.cursor += 1
            return trace.push(bound).value

        counter = trace[position]
        if self._strict and counter.bound != bound:
            log.warning(
                "gen.protocol_violation",
                position=position,
                expected_bound=counter.bound,
                actual_bound=bound,
            )
            raise SequenceProtocolViolation(
                f"draw at position {position} requested bound {bound}, "
                f"previous pass used {counter.bound}",
                position=position,
                expected=counter.bound,
                actual=bound,
            )

        counter.bound = bound
        state.cursor += 1
        return counter.value

    def advance(self) -> bool:
        """
        Odometer step at the end of a pass.

        Increments the rightmost counter still below its bound and drops
        every counter after it. Returns False once no counter has room left;
        the generator is then exhausted for good.
        """
        state = self._state
        if state.exhausted:
            raise AlreadyExhausted("cannot advance after enumeration is exhausted")

        if self._strict and state.cursor < state.replayed:
            log.warning(
                "gen.protocol_violation",
                position=state.cursor,
                expected_draws=state.replayed,
                actual_draws=state.cursor,
            )
            raise SequenceProtocolViolation(
                f"pass made {state.cursor} draws but {state.replayed} had to be replayed",
                position=state.cursor,
                expected=state.replayed,
                actual=state.cursor,
            )

        state.passes += 1
        trace = state.trace

        index = trace.last_with_room()
        if index is None:
            state.exhausted = True
            log.debug("gen.exhausted", passes=state.passes)
            return False

        trace[index].value += 1
        trace.pop_back_to(index + 1)
        state.begin_pass()
        return True

    def is_done(self) -> bool:
        return not self.advance()
