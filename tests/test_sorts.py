"""
Correctness tests for the sort routines against the oracle (Python's built-in sorted).

What we check, for every routine in algolab.algorithms.SORTS:
- `sort()` output exactly matches the oracle (strongest guarantee)
- Nondecreasing order and permutation preservation (diagnostics)
- `sort()` does not mutate its input; the in-place function does sort in place
- Determinism for a given config
- Stability where the routine is stable (insertion, bubble, shaker)
- Generic element types
"""

from __future__ import annotations

import pathlib
import random
import sys
from typing import Any, List

import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from algolab.algorithms import SORTS, bubble_sort, shaker_sort, shell_sort, straight_insertion
from algolab.algorithms.shell import gap_sequence
from algolab.validate import (
    assert_no_mutation,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_permutation,
    oracle_sort,
    permutation_counter_diff,
)

IN_PLACE = {
    "straight_insertion": straight_insertion,
    "bubble_sort": bubble_sort,
    "shaker_sort": shaker_sort,
    "shell_sort": shell_sort,
}
STABLE = ["straight_insertion", "bubble_sort", "shaker_sort"]


# ------------------------- helpers ------------------------- #


def _check_one(name: str, a: List[Any], *, config: dict | None = None) -> None:
    """Common assertion bundle for one input."""
    sort = SORTS[name].sort
    before = list(a)
    out = sort(a, config=config)

    assert_no_mutation(before, a)
    assert equals_oracle(a, out), f"{name}: output must exactly match the oracle"
    assert out == oracle_sort(a)

    i = first_nondecreasing_violation_index(out)
    assert i is None, f"{name}: not nondecreasing at i={i}: {out[i]} > {out[i + 1]}"
    assert is_permutation(a, out), (
        f"{name}: output is not a permutation of input; count diff {permutation_counter_diff(a, out)}"
    )

    assert sort(a, config=config) == out, f"{name}: must be deterministic"


# ------------------------- unit tests (deterministic) ------------------------- #


@pytest.mark.parametrize("name", sorted(SORTS))
@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        [44, 55, 12, 42, 94, 18, 6, 67],
        [94, 6, 12, 18, 42, 44, 55, 67],
        [12, 18, 42, 44, 55, 67, 94, 6],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
    ],
)
def test_unit_cases(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", sorted(IN_PLACE))
def test_sorts_in_place(name: str) -> None:
    array = [3, 1, 2]
    assert IN_PLACE[name](array) is None
    assert array == [1, 2, 3]


@pytest.mark.parametrize("name", sorted(IN_PLACE))
def test_is_generic(name: str) -> None:
    array = ["abc", "cbd", "abd"]
    IN_PLACE[name](array)
    assert array == ["abc", "abd", "cbd"]


class _Keyed:
    """Compares by key only, so equal keys stay distinguishable by tag."""

    def __init__(self, key: int, tag: str) -> None:
        self.key = key
        self.tag = tag

    def __lt__(self, other: "_Keyed") -> bool:
        return self.key < other.key

    def __gt__(self, other: "_Keyed") -> bool:
        return self.key > other.key


@pytest.mark.parametrize("name", STABLE)
def test_is_stable(name: str) -> None:
    array = [_Keyed(2, "d"), _Keyed(2, "c"), _Keyed(1, "b"), _Keyed(1, "a"), _Keyed(3, "e")]
    IN_PLACE[name](array)
    assert [x.tag for x in array] == ["b", "a", "d", "c", "e"]


@pytest.mark.parametrize("name", sorted(IN_PLACE))
def test_fuzzy_shuffles(name: str) -> None:
    rnd = random.Random(1976)
    numbers = list(range(1, 100))
    for _ in range(50):
        rnd.shuffle(numbers)
        IN_PLACE[name](numbers)
        assert numbers == list(range(1, 100))


# ------------------------- shell sort gaps ------------------------- #


@pytest.mark.parametrize(
    "n, gaps",
    [(2, [1]), (4, [1]), (8, [1, 4]), (16, [1, 4, 7]), (100, [1, 4, 7, 10, 13])],
)
def test_gap_sequence(n: int, gaps: List[int]) -> None:
    assert gap_sequence(n) == gaps


def test_shell_sort_accepts_custom_gaps() -> None:
    _check_one("shell_sort", [9, 8, 7, 6, 5, 4, 3, 2, 1, 0], config={"gaps": [1, 3]})


@pytest.mark.parametrize("gaps", [[], [2, 4], [1, 4, 4], [1, 5, 3]])
def test_shell_sort_rejects_bad_gaps(gaps: List[int]) -> None:
    with pytest.raises(ValueError):
        shell_sort([3, 2, 1], gaps)


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@settings(deadline=None, max_examples=60)
@given(st.sampled_from(sorted(SORTS)), st.lists(small_ints, min_size=0, max_size=120))
def test_property_random_small_range(name: str, a: List[int]) -> None:
    _check_one(name, a)


@settings(deadline=None, max_examples=60)
@given(
    st.sampled_from(sorted(SORTS)),
    st.lists(st.integers(min_value=0, max_value=7), min_size=0, max_size=150),
)
def test_property_many_duplicates(name: str, a: List[int]) -> None:
    _check_one(name, a)


# ------------------------- validation helpers ------------------------- #


def test_oracle_helpers_flag_a_lost_element() -> None:
    a = [3, 1, 2, 2]
    broken = [1, 2, 3, 3]
    assert equals_oracle(a, [1, 2, 2, 3])
    assert not equals_oracle(a, broken)
    assert not is_permutation(a, broken)
    assert permutation_counter_diff(a, broken) == {2: 1, 3: -1}
    assert permutation_counter_diff(a, [2, 3, 1, 2]) == {}
