"""
Oracles: slow but obviously correct reference answers.

Sorting uses Python's built-in `sorted()` (stable, deterministic, never
mutates its input).

The ancestor oracle does what the resolver deliberately avoids: it records a
parent for every node reachable from the root, walks both targets up to the
root, and takes the first node the two root paths share. It applies the same
edge-case policy as `closest_common_ancestor`:
- a target that is the root -> None;
- the same non-root node twice -> that node;
- a target that is unreachable -> None.

Public API (stable):
    oracle_sort(a: list) -> list
    equals_oracle(a: list, out: list) -> bool
    parent_map(root: Node) -> dict[Node, Node | None]
    oracle_ancestor(root: Node, a: Node, b: Node) -> Node | None
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from algolab.trees import Node

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "parent_map", "oracle_ancestor"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` is exactly `oracle_sort(a)`."""
    return list(out) == oracle_sort(a)


def parent_map(root: Node) -> Dict[Node, Optional[Node]]:
    """
    Map every node reachable from `root` to its parent (`root` maps to None).

    Nodes hash by identity, so this is a map over node objects, not values.
    """
    parents: Dict[Node, Optional[Node]] = {root: None}
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None and child not in parents:
                parents[child] = node
                stack.append(child)
    return parents


def oracle_ancestor(root: Node, a: Node, b: Node) -> Optional[Node]:
    """
    Closest common ancestor of `a` and `b` under `root`, by explicit root paths.

    Returns
    -------
    Node | None
        The deepest node whose subtree holds both targets (either target
        itself when it lies above the other), or None per the policy in the
        module docstring.
    """
    if a is root or b is root:
        return None

    parents = parent_map(root)
    if a not in parents or b not in parents:
        return None

    above_a = set()
    node: Optional[Node] = a
    while node is not None:
        above_a.add(node)
        node = parents[node]

    node = b
    while node not in above_a:
        node = parents[node]
    return node
