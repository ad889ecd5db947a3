"""
Sorting by straight insertion.

The head `array[:index]` is the sorted destination sequence and the tail is
the source. Each step takes `array[index]` and swaps it leftwards past every
larger neighbour. Equal keys are never swapped, so the sort is stable.

Best case (already sorted): no moves. Worst case (reversed): n(n - 1) / 2
swaps.

Public API (stable):
    straight_insertion(array) -> None      # in place
    sort(a, *, config=None) -> list        # copy, for the bench runner
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

__all__ = ["straight_insertion", "sort"]


def straight_insertion(array: MutableSequence[Any]) -> None:
    """Sort `array` in place in ascending order."""
    if len(array) < 2:
        return

    for index in range(1, len(array)):
        tracker = index
        while tracker > 0 and array[tracker] < array[tracker - 1]:
            array[tracker], array[tracker - 1] = array[tracker - 1], array[tracker]
            tracker -= 1


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    out = list(a)
    straight_insertion(out)
    return out
