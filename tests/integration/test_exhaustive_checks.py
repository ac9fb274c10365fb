from __future__ import annotations

from collections import Counter as Multiset

from exhaustigen import Gen, exhaust, gen_perm, gen_subset, gen_vec, run


def _dedupe_keep_first(xs: list[int]) -> list[int]:
    seen: set[int] = set()
    out = []
    for x in xs:
        if x not in seen:
            seen.add(x)
            out.append(x)
    return out


def _dedupe_buggy(xs: list[int]) -> list[int]:
    # only drops adjacent duplicates
    return [x for i, x in enumerate(xs) if i == 0 or xs[i - 1] != x]


def test_sorted_is_ordered_permutation_for_all_small_vectors() -> None:
    def body(g: Gen) -> bool:
        v = gen_vec(g, 4, 3)
        s = sorted(v)
        return all(a <= b for a, b in zip(s, s[1:])) and Multiset(s) == Multiset(v)

    result = run(body)
    assert result.passes == sum(4**n for n in range(5))
    assert all(result.values)


def test_finds_first_counterexample_in_enumeration_order() -> None:
    def body(g: Gen):
        v = gen_vec(g, 3, 1)
        return v if _dedupe_buggy(v) != _dedupe_keep_first(v) else None

    failures = [v for v in exhaust(body) if v is not None]
    assert failures[0] == [0, 1, 0]
    assert all(len(v) == 3 for v in failures)


def test_nested_combinators_compose_exhaustively() -> None:
    def body(g: Gen) -> tuple[tuple[str, ...], tuple[str, ...]]:
        order = gen_perm(g, "abc")
        return tuple(order), tuple(gen_subset(g, order))

    values = exhaust(body)
    assert len(values) == 6 * 8
    assert len(set(values)) == 48


def test_length_dependent_element_bounds() -> None:
    # element i is bounded by i, so a length-n vector has n! variants
    def body(g: Gen) -> tuple[int, ...]:
        n = g.draw(3)
        return tuple(g.draw(i) for i in range(n))

    values = exhaust(body)
    assert len(values) == 1 + 1 + 2 + 6
    assert len(set(values)) == len(values)
