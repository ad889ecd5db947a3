"""
Validation utilities public API.

Re-exports:
    - Oracles:
        ORACLE_NAME
        oracle_sort
        equals_oracle
        parent_map
        oracle_ancestor

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation
        ancestors_or_self
        is_ancestor
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_ancestor, oracle_sort, parent_map
from .properties import (
    ancestors_or_self,
    assert_no_mutation,
    first_nondecreasing_violation_index,
    is_ancestor,
    is_nondecreasing,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "parent_map",
    "oracle_ancestor",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "ancestors_or_self",
    "is_ancestor",
]
