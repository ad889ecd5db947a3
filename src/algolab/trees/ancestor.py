"""
Closest common ancestor of two nodes in a child-only binary tree.

Nodes know their children but not their parent, so the resolver borrows the
addressing scheme of an array-backed heap: pretend the tree is embedded in a
complete binary tree where the root has index 1, the left child of `i` is
`2i` and the right child is `2i + 1`. Then `i // 2` is always the parent of
`i`, and the common ancestor of two nodes can be computed from their indices
alone.

    h[1]                      closest_common_ancestor(h[1], h[12], h[7])
     |- h[2]                    locate:  12, 7
     |   |- h[4] ...            climb:   12 -> 6 -> 3,  7 -> 3
     |   `- h[5] ...            decode:  3 = 0b11 -> [right]
     `- h[3]                    walk:    h[1].right == h[3]
         |- h[6] (h[12], h[13])
         `- h[7] (h[14], h[15])

The four phases:

1. Locate. `index_of_two_nodes` walks the tree once, looking for both targets
   at the same time. When one target is hit, the other one is only looked for
   below it with `index_of_one_node`.
2. Equal nodes. If both targets are the same node, one index serves for both.
3. Climb. `climb` halves the larger index until the two meet.
4. Decode. `path_of` turns the meeting index into left/right turns from the
   root (odd bit = right) and `follow` walks them to the actual node.

Edge-case policy:
- either target is the root -> None (the root has no ancestor in the tree);
- both targets are the same non-root node -> that node;
- either target is unreachable from the root -> None;
- otherwise the deepest node on both root paths. When one target lies below
  the other, that is the upper target itself.

All failure causes collapse to None. `absence_cause` re-derives the reason
for callers that need it.

Both traversals use an explicit stack, so degenerate (chain-like) trees
deeper than the interpreter's recursion limit are fine.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Tuple

from .arena import Node

__all__ = [
    "Absence",
    "closest_common_ancestor",
    "absence_cause",
    "index_of_two_nodes",
    "index_of_one_node",
    "climb",
    "path_of",
    "follow",
]

logger = logging.getLogger(__name__)


class Absence(enum.Enum):
    """Why `closest_common_ancestor` returned None."""

    ROOT_IS_ARGUMENT = "root_is_argument"
    NODE_NOT_FOUND = "node_not_found"
    # Only reachable if a located index does not decode back to a node.
    PATH_DECODE_FAILURE = "path_decode_failure"


def closest_common_ancestor(root: Node, n1: Node, n2: Node) -> Optional[Node]:
    """
    Return the closest common ancestor of `n1` and `n2` under `root`.

    Parameters
    ----------
    root : Node
        Root of the tree to search.
    n1, n2 : Node
        Target nodes. They are compared by identity and need not be reachable
        from `root`; unreachable targets produce None.

    Returns
    -------
    Node | None
        The ancestor node, or None if a target is the root or is not in the
        tree.
    """
    ancestor, cause = _resolve(root, n1, n2)
    if cause is not None:
        logger.debug("no common ancestor for %r and %r under %r: %s", n1, n2, root, cause.value)
    return ancestor


def absence_cause(root: Node, n1: Node, n2: Node) -> Optional[Absence]:
    """Return why `closest_common_ancestor` gives None, or None if it does not."""
    _, cause = _resolve(root, n1, n2)
    return cause


def _resolve(root: Node, n1: Node, n2: Node) -> Tuple[Optional[Node], Optional[Absence]]:
    if n1 is root or n2 is root:
        return None, Absence.ROOT_IS_ARGUMENT

    index_1, index_2 = index_of_two_nodes(n1, n2, root)

    if n1 is n2:
        # Only one of the two searches can have matched the shared node.
        index_1 = index_2 = index_1 if index_1 is not None else index_2

    if index_1 is None or index_2 is None:
        return None, Absence.NODE_NOT_FOUND

    ancestor = follow(root, path_of(climb(index_1, index_2)))
    if ancestor is None:
        return None, Absence.PATH_DECODE_FAILURE
    return ancestor, None


# ------------------------- phase A: locate ------------------------- #


def index_of_two_nodes(
    a: Node, b: Node, node: Node, index: int = 1
) -> Tuple[Optional[int], Optional[int]]:
    """
    Heap indices of `a` and `b` in the subtree rooted at `node`.

    `node` itself has heap index `index`. The walk is pre-order, left before
    right, and the first match of each target wins. When a target is matched,
    the other one is searched only below the matching node and the walk does
    not descend further there.
    """
    found_a: Optional[int] = None
    found_b: Optional[int] = None

    stack: List[Tuple[Node, int]] = [(node, index)]
    while stack:
        current, i = stack.pop()

        if current is a:
            if found_a is None:
                found_a = i
            if found_b is None:
                found_b = _index_below(b, current, i)
        elif current is b:
            if found_b is None:
                found_b = i
            if found_a is None:
                found_a = _index_below(a, current, i)
        else:
            _push_children(stack, current, i)
            continue

        if found_a is not None and found_b is not None:
            break
        if a is b:
            break

    return found_a, found_b


def index_of_one_node(target: Node, node: Node, index: int = 1) -> Optional[int]:
    """Heap index of `target` in the subtree rooted at `node`, or None."""
    stack: List[Tuple[Node, int]] = [(node, index)]
    while stack:
        current, i = stack.pop()
        if current is target:
            return i
        _push_children(stack, current, i)
    return None


def _index_below(target: Node, node: Node, index: int) -> Optional[int]:
    left = node.left
    if left is not None:
        found = index_of_one_node(target, left, 2 * index)
        if found is not None:
            return found
    right = node.right
    if right is not None:
        return index_of_one_node(target, right, 2 * index + 1)
    return None


def _push_children(stack: List[Tuple[Node, int]], node: Node, index: int) -> None:
    # Right goes first so that left is popped first.
    right = node.right
    if right is not None:
        stack.append((right, 2 * index + 1))
    left = node.left
    if left is not None:
        stack.append((left, 2 * index))


# ------------------------- phases C and D ------------------------- #


def climb(i: int, j: int) -> int:
    """
    Move the larger of two heap indices to its parent until they meet.

    The result is the heap index of the deepest node whose subtree contains
    both positions.
    """
    if i < 1 or j < 1:
        raise ValueError(f"heap indices are 1-based; got {i} and {j}")
    while i != j:
        if i > j:
            i //= 2
        else:
            j //= 2
    return i


def path_of(index: int) -> List[bool]:
    """
    Turns from the root to heap index `index`; True means "go right".

    Index 1 (the root) has an empty path.
    """
    if index < 1:
        raise ValueError(f"heap indices are 1-based; got {index}")
    turns: List[bool] = []
    while index != 1:
        turns.append(index % 2 == 1)
        index //= 2
    turns.reverse()
    return turns


def follow(root: Node, path: List[bool]) -> Optional[Node]:
    """Walk `path` from `root`. Returns None if a required child is missing."""
    node: Optional[Node] = root
    for go_right in path:
        node = node.right if go_right else node.left
        if node is None:
            return None
    return node
