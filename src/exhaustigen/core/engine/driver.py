from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

import structlog

from exhaustigen.core.config.settings import settings
from exhaustigen.core.engine.errors import PassLimitExceeded
from exhaustigen.core.engine.gen import Gen
from exhaustigen.core.logging.setup import bound_context

log = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class EnumerationResult(Generic[T]):
    """
    Values produced by one enumeration session, in pass order.
    """

    values: list[T]
    passes: int


def run(
    body: Callable[[Gen], T],
    *,
    gen: Optional[Gen] = None,
    max_passes: Optional[int] = None,
) -> EnumerationResult[T]:
    """
    Drive body through every pass until the generator is exhausted.

    The body always runs once before the first advance check. If max_passes
    (or settings.max_passes) is reached while work remains, PassLimitExceeded
    is raised.
    """
    if gen is None:
        gen = Gen()

    limit = max_passes if max_passes is not None else settings.max_passes
    if limit is not None and limit <= 0:
        raise ValueError("max_passes must be > 0")

    values: list[T] = []
    with bound_context(component="driver"):
        log.info("enumeration.started", strict=gen.strict, max_passes=limit)

        while True:
            values.append(body(gen))
            if not gen.advance():
                break
            if limit is not None and len(values) >= limit:
                log.warning("enumeration.pass_limit", passes=len(values), max_passes=limit)
                raise PassLimitExceeded(max_passes=limit)

        log.info("enumeration.finished", passes=len(values), depth=gen.depth)
    return EnumerationResult(values=values, passes=len(values))


def exhaust(
    body: Callable[[Gen], T],
    *,
    gen: Optional[Gen] = None,
    max_passes: Optional[int] = None,
) -> list[T]:
    return run(body, gen=gen, max_passes=max_passes).values
