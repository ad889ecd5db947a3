"""
Insertion sort by diminishing increment: Shellsort.

Runs straight insertion with strides taken from the gap sequence
`1, 4, 7, 10, ...` (`3x + 1`), largest gap first. The number of gaps is
`max(floor(log2(n)) - 1, 1)`, so the last pass always uses gap 1 and
finishes the job. Not stable.

Public API (stable):
    shell_sort(array) -> None              # in place
    gap_sequence(n) -> list[int]
    sort(a, *, config=None) -> list        # copy, for the bench runner

`sort` accepts `config={"gaps": [...]}` to override the gap sequence. The
sequence must be increasing and start at 1.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, MutableSequence, Optional, Sequence

__all__ = ["shell_sort", "gap_sequence", "sort"]


def gap_sequence(n: int) -> List[int]:
    """Gaps used for an array of length `n` (n >= 2), smallest first."""
    if n < 2:
        raise ValueError(f"gap sequence needs n >= 2; got {n}")
    count = max(int(math.floor(math.log2(n))) - 1, 1)
    return [3 * x + 1 for x in range(count)]


def shell_sort(array: MutableSequence[Any], gaps: Optional[Sequence[int]] = None) -> None:
    """Sort `array` in place in ascending order."""
    n = len(array)
    if n < 2:
        return

    if gaps is None:
        gaps = gap_sequence(n)
    _check_gaps(gaps)

    for gap in reversed(gaps):
        for index in range(gap, n):
            tracker = index
            while tracker >= gap and array[tracker] < array[tracker - gap]:
                array[tracker], array[tracker - gap] = array[tracker - gap], array[tracker]
                tracker -= gap


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    gaps = (config or {}).get("gaps")
    out = list(a)
    shell_sort(out, gaps)
    return out


def _check_gaps(gaps: Sequence[int]) -> None:
    if not gaps or gaps[0] != 1:
        raise ValueError(f"gap sequence must start at 1; got {list(gaps)!r}")
    if any(g <= prev for prev, g in zip(gaps, gaps[1:])):
        raise ValueError(f"gap sequence must be strictly increasing; got {list(gaps)!r}")
