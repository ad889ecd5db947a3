"""
Algorithms package public API.

Re-exports:
    - Search:
        binary_search

    - Sorts (in place):
        straight_insertion
        bubble_sort
        shaker_sort
        shell_sort

    - Problems:
        garbage_array_duplicates

    - SORTS: sort name -> module exposing `sort(a, *, config=None)`. The bench
      runner resolves configured algorithm names through it.
"""

from . import bubble, insertion, shaker, shell
from .bubble import bubble_sort
from .duplicates import garbage_array_duplicates
from .insertion import straight_insertion
from .search import binary_search
from .shaker import shaker_sort
from .shell import shell_sort

SORTS = {
    "straight_insertion": insertion,
    "bubble_sort": bubble,
    "shaker_sort": shaker,
    "shell_sort": shell,
}

__all__ = [
    "binary_search",
    "straight_insertion",
    "bubble_sort",
    "shaker_sort",
    "shell_sort",
    "garbage_array_duplicates",
    "SORTS",
]
