"""
Binary search over a sorted sequence.

Two inclusive bounds close in on the needle: every element outside
[lower, upper] is known not to be it. Each round compares the median
`(lower + upper) // 2` and moves one bound past it, so at most about log2(n)
rounds are needed. The loop ends when the median matches or when the bounds
cross, which means the whole range has been ruled out.

Public API (stable):
    binary_search(needle, array) -> int | None
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

__all__ = ["binary_search"]


def binary_search(needle: Any, array: Sequence[Any]) -> Optional[int]:
    """
    Return the index of an element equal to `needle`, or None.

    Parameters
    ----------
    needle : Any
        Value to look for. Must be comparable with the elements of `array`.
    array : Sequence
        Sorted in nondecreasing order. Not checked.

    Returns
    -------
    int | None
        Index of a matching element. With duplicates, any one of them.
    """
    lower = 0
    upper = len(array) - 1

    while lower <= upper:
        median = (lower + upper) // 2
        candidate = array[median]

        if candidate == needle:
            return median

        # Bounds are inclusive and the median is already ruled out.
        if candidate < needle:
            lower = median + 1
        else:
            upper = median - 1

    return None
