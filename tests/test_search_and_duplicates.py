"""Tests for binary search and the in-place duplicate compaction."""

from __future__ import annotations

import pathlib
import sys
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from algolab.algorithms import binary_search, garbage_array_duplicates

HAYSTACK = [1, 4, 6, 7, 12, 20, 30, 34, 40, 50]


# ------------------------- binary search ------------------------- #


def test_returns_index_if_element_is_present() -> None:
    assert binary_search(30, HAYSTACK) == 6


@pytest.mark.parametrize("needle", [0, 25, 51])
def test_returns_none_if_element_is_not_present(needle: int) -> None:
    assert binary_search(needle, HAYSTACK) is None


def test_finds_both_ends() -> None:
    assert binary_search(1, HAYSTACK) == 0
    assert binary_search(50, HAYSTACK) == len(HAYSTACK) - 1


def test_empty_and_single() -> None:
    assert binary_search(3, []) is None
    assert binary_search(3, [3]) == 0
    assert binary_search(2, [3]) is None


def test_is_generic() -> None:
    assert binary_search("bcd", ["abc", "abd", "bcd", "efg"]) == 2


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(-1000, 1000), max_size=80), st.integers(-1000, 1000))
def test_property_matches_membership(xs: List[int], needle: int) -> None:
    haystack = sorted(xs)
    found = binary_search(needle, haystack)
    if needle in haystack:
        assert found is not None and haystack[found] == needle
    else:
        assert found is None


# ------------------------- duplicate compaction ------------------------- #


@pytest.mark.parametrize(
    "array, uniques",
    [
        ([], []),
        ([8], [8]),
        ([8, 8, 8, 8], [8]),
        ([1, 1, 2, 2], [1, 2]),
        ([1, 1, 2, 3, 4, 4, 4, 5], [1, 2, 3, 4, 5]),
        ([1, 2, 2, 4, 6, 6, 6, 8], [1, 2, 4, 6, 8]),
        ([1, 2, 3, 4], [1, 2, 3, 4]),
        (["a", "a", "b"], ["a", "b"]),
    ],
)
def test_compacts_uniques_into_head(array: list, uniques: list) -> None:
    n = garbage_array_duplicates(array)
    assert n == len(uniques)
    assert array[:n] == uniques


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(0, 20), max_size=60))
def test_property_head_is_sorted_set(xs: List[int]) -> None:
    array = sorted(xs)
    n = garbage_array_duplicates(array)
    assert array[:n] == sorted(set(xs))
    # Only a rearrangement: the garbage tail holds the rest.
    assert sorted(array) == sorted(xs)
