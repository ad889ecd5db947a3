"""
Property helpers for validating routine outputs.

Sorts:
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None

Trees:
    ancestors_or_self(root, node) -> list[Node]
    is_ancestor(root, upper, lower, *, proper=True) -> bool

Notes
-----
- Stability cannot be read off values alone when equal keys look the same.
  Tests that care tag items with a tie-breaker, e.g. (key, id) pairs sorted
  by key only.
- Tree helpers compare nodes by identity and treat unreachable nodes as having
  no ancestors at all.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from algolab.trees import Node

from .oracle import parent_map

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "ancestors_or_self",
    "is_ancestor",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> Optional[int]:
    """
    First index i with xs[i] > xs[i+1], or None if there is none.

        i = first_nondecreasing_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i + 1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True iff `a` and `b` hold the same multiset of values."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    value -> count in `a` minus count in `b`, for values whose counts differ.

    An empty dict means `a` and `b` are permutations of each other.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {value: d for value, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """Raise AssertionError naming the first difference between two sequences."""
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def ancestors_or_self(root: Node, node: Node) -> List[Node]:
    """
    `node` followed by its ancestors up to `root`.

    Empty if `node` is not reachable from `root`.
    """
    parents = parent_map(root)
    if node not in parents:
        return []
    chain: List[Node] = []
    current: Optional[Node] = node
    while current is not None:
        chain.append(current)
        current = parents[current]
    return chain


def is_ancestor(root: Node, upper: Node, lower: Node, *, proper: bool = True) -> bool:
    """
    True iff `upper` lies on the path from `root` to `lower`.

    With `proper=True` (default) a node is not its own ancestor.
    """
    chain = ancestors_or_self(root, lower)
    if proper:
        chain = chain[1:]
    return any(node is upper for node in chain)
