from __future__ import annotations

from exhaustigen.combinators.sequences import flip, gen_comb, gen_perm, gen_subset, gen_vec
from exhaustigen.core.engine.driver import EnumerationResult, exhaust, run
from exhaustigen.core.engine.errors import (
    AlreadyExhausted,
    GenError,
    PassLimitExceeded,
    SequenceProtocolViolation,
)
from exhaustigen.core.engine.gen import Gen
from exhaustigen.core.engine.state import Counter, Trace

__all__ = [
    "AlreadyExhausted",
    "Counter",
    "EnumerationResult",
    "Gen",
    "GenError",
    "PassLimitExceeded",
    "SequenceProtocolViolation",
    "Trace",
    "exhaust",
    "flip",
    "gen_comb",
    "gen_perm",
    "gen_subset",
    "gen_vec",
    "run",
]
