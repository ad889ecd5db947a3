"""
Sorting by straight exchange: Bubblesort.

Each pass starts at the right end and sifts the smallest remaining item down
to position `index - 1`. After pass `index`, the head `array[:index]` is in
its final order. Swaps happen only on strict inversions, so the sort is
stable.

Public API (stable):
    bubble_sort(array) -> None             # in place
    sort(a, *, config=None) -> list        # copy, for the bench runner
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

__all__ = ["bubble_sort", "sort"]


def bubble_sort(array: MutableSequence[Any]) -> None:
    """Sort `array` in place in ascending order."""
    n = len(array)
    if n < 2:
        return

    for index in range(1, n):
        for bubble in range(n - 1, index - 1, -1):
            if array[bubble - 1] > array[bubble]:
                array[bubble], array[bubble - 1] = array[bubble - 1], array[bubble]


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    out = list(a)
    bubble_sort(out)
    return out
