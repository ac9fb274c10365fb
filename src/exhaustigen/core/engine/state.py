from __future__ import annotations

from dataclasses import dataclass, field

from exhaustigen.core.engine.errors import AlreadyExhausted


@dataclass(slots=True)
class Counter:
    """
    One decision point: the value drawn this pass and its inclusive bound.
    """

    value: int = 0
    bound: int = 0

    def has_room(self) -> bool:
        return self.value < self.bound


class Trace:
    """
    Array-backed trace of counters, addressed by draw position.

    Truncation is an explicit pop_back_to(index); no iterators are held
    across mutation.
    """

    def __init__(self) -> None:
        self._counters: list[Counter] = []

    def __len__(self) -> int:
        return len(self._counters)

    def __getitem__(self, index: int) -> Counter:
        return self._counters[index]

    def push(self, bound: int) -> Counter:
        counter = Counter(value=0, bound=bound)
        self._counters.append(counter)
        return counter

    def pop_back_to(self, index: int) -> None:
        if index < 0 or index > len(self._counters):
            raise IndexError(f"cannot truncate trace of length {len(self._counters)} to {index}")
        del self._counters[index:]

    def last_with_room(self) -> int | None:
        for index in range(len(self._counters) - 1, -1, -1):
            if self._counters[index].has_room():
                return index
        return None

    def snapshot(self) -> tuple[tuple[int, int], ...]:
        return tuple((c.value, c.bound) for c in self._counters)


@dataclass(slots=True)
class GenState:
    """
    Enumeration state for one session.

    - cursor: draws consumed so far in the current pass
    - replayed: trace length at the start of the current pass; positions
      below it replay counters left by the previous advance
    - passes: completed passes (advance calls)

    Guardrails:
      - current_position only valid until exhaustion is signaled
      - the cursor moves only after a draw succeeds
    """

    trace: Trace = field(default_factory=Trace)
    cursor: int = 0
    replayed: int = 0
    passes: int = 0
    exhausted: bool = False

    def current_position(self) -> int:
        if self.exhausted:
            raise AlreadyExhausted("cannot draw after enumeration is exhausted")
        return self.cursor

    def begin_pass(self) -> None:
        self.cursor = 0
        self.replayed = len(self.trace)
