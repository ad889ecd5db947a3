"""
Compact the unique elements of a sorted sequence into its head.

Given a sorted mutable sequence, rearrange it so that its first N elements
are exactly its distinct values, in order, and return N. Whatever sits after
position N is garbage. O(n) time, O(1) extra space.

    [1, 1, 2, 3, 4, 4, 4, 5]  ->  [1, 2, 3, 4, 5, _, _, _], returns 5

`new_len` counts the unique values moved to the head so far. The first
element is always unique. Every later element is compared against the last
unique one, `array[new_len - 1]`; if it differs, it is swapped into slot
`new_len` and the head grows by one.

Public API (stable):
    garbage_array_duplicates(array) -> int
"""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = ["garbage_array_duplicates"]


def garbage_array_duplicates(array: MutableSequence[Any]) -> int:
    if len(array) < 2:
        return len(array)

    new_len = 1
    for index in range(1, len(array)):
        if array[index] != array[new_len - 1]:
            array[new_len], array[index] = array[index], array[new_len]
            new_len += 1

    return new_len
