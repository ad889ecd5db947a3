"""
Sorting by straight exchange: Shakersort.

Bubblesort with two improvements:
- passes alternate direction (right-to-left, then left-to-right), so a light
  item at the heavy end no longer needs one pass per position;
- the position of the last exchange is remembered, and everything beyond it
  is known to be in order, so both bounds jump straight to it.

The number of exchanges is the same as Bubblesort's; only redundant
comparisons go away.

Public API (stable):
    shaker_sort(array) -> None             # in place
    sort(a, *, config=None) -> list        # copy, for the bench runner
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

__all__ = ["shaker_sort", "sort"]


def shaker_sort(array: MutableSequence[Any]) -> None:
    """Sort `array` in place in ascending order."""
    n = len(array)
    if n < 2:
        return

    left = 1
    right = n - 1
    last_exchange = n - 1

    while left <= right:
        # Right to left: the smallest unsorted item sinks to `left - 1`.
        for bubble in range(right, left - 1, -1):
            if array[bubble - 1] > array[bubble]:
                array[bubble], array[bubble - 1] = array[bubble - 1], array[bubble]
                last_exchange = bubble
        left = last_exchange + 1

        # Left to right: the largest unsorted item rises to `right`.
        for bubble in range(left, right + 1):
            if array[bubble - 1] > array[bubble]:
                array[bubble], array[bubble - 1] = array[bubble - 1], array[bubble]
                last_exchange = bubble
        right = last_exchange - 1


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    out = list(a)
    shaker_sort(out)
    return out
