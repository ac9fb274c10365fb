from __future__ import annotations

from typing import Sequence, TypeVar

from exhaustigen.core.engine.gen import Gen

T = TypeVar("T")


def flip(gen: Gen) -> bool:
    return gen.draw(1) == 1


def gen_vec(gen: Gen, len_bound: int, elt_bound: int) -> list[int]:
    """
    Sequence of length [0, len_bound] with each element in [0, elt_bound].

    Over a full enumeration this yields sum((elt_bound + 1) ** l) sequences
    for l in 0..len_bound.
    """
    length = gen.draw(len_bound)
    return [gen.draw(elt_bound) for _ in range(length)]


def gen_comb(gen: Gen, items: Sequence[T]) -> list[T]:
    """
    Selection with replacement: up to len(items) picks, any order, repeats allowed.

    Empty input yields [] without drawing.
    """
    size = len(items)
    if size == 0:
        return []
    count = gen.draw(size)
    return [items[gen.draw(size - 1)] for _ in range(count)]


def gen_perm(gen: Gen, items: Sequence[T]) -> list[T]:
    """
    One ordering of items; every ordering appears once over the enumeration.

    Each step picks from the remaining pool, so the bound shrinks by one.
    """
    pool = list(range(len(items)))
    out: list[T] = []
    while pool:
        out.append(items[pool.pop(gen.draw(len(pool) - 1))])
    return out


def gen_subset(gen: Gen, items: Sequence[T]) -> list[T]:
    # one flip per item, in input order
    return [item for item in items if flip(gen)]
