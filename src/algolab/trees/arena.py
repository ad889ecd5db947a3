"""
Arena-backed immutable binary trees.

A `Tree` owns every node it creates. Each node lives in a slot of the arena,
and the slot stores the child slots (not child objects) plus an optional
payload. The arena keeps exactly one `Node` handle per slot, so the handle a
builder receives from `Tree.node()` is the same object that `parent.left`
returns later on. That makes node identity plain Python identity:

    tree = Tree()
    a = tree.leaf()
    b = tree.leaf()
    top = tree.node(a, b)
    assert same_node(top.left, a)

Nodes have no parent links and cannot be modified after construction. Since
children must exist before their parent, trees are built bottom-up and the
structure reachable from any node is acyclic.

Public API (stable):
    Tree.node(left=None, right=None, value=None) -> Node
    Tree.leaf(value=None) -> Node
    same_node(a, b) -> bool
    heap_tree(slots: int) -> list[Node | None]
    depth_first(root: Node) -> Iterator[tuple[Node, int]]
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

__all__ = ["Node", "Tree", "same_node", "heap_tree", "depth_first"]


class Node:
    """Handle to one arena slot. Only `Tree` creates these."""

    __slots__ = ("_tree", "_slot")

    def __init__(self, tree: "Tree", slot: int) -> None:
        self._tree = tree
        self._slot = slot

    @property
    def tree(self) -> "Tree":
        return self._tree

    @property
    def slot(self) -> int:
        """Stable arena index of this node."""
        return self._slot

    @property
    def left(self) -> Optional["Node"]:
        return self._tree._child(self._tree._left[self._slot])

    @property
    def right(self) -> Optional["Node"]:
        return self._tree._child(self._tree._right[self._slot])

    @property
    def value(self) -> Any:
        return self._tree._values[self._slot]

    @property
    def is_leaf(self) -> bool:
        return self._tree._left[self._slot] is None and self._tree._right[self._slot] is None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Node(slot={self._slot})"
        return f"Node(slot={self._slot}, value={self.value!r})"


class Tree:
    """
    Append-only arena of nodes.

    Slots are never reused or rewritten; a node's children are fixed when it is
    created. The arena itself is not a rooted tree: any node can serve as the
    root of the structure reachable below it, and unlinked nodes may coexist
    with it.
    """

    def __init__(self) -> None:
        self._left: List[Optional[int]] = []
        self._right: List[Optional[int]] = []
        self._values: List[Any] = []
        self._handles: List[Node] = []

    def node(
        self,
        left: Optional[Node] = None,
        right: Optional[Node] = None,
        value: Any = None,
    ) -> Node:
        """
        Append a node with the given children and return its handle.

        Raises
        ------
        ValueError
            If a child was created by a different arena.
        """
        left_slot = self._own_slot(left, "left")
        right_slot = self._own_slot(right, "right")

        slot = len(self._handles)
        handle = Node(self, slot)
        self._left.append(left_slot)
        self._right.append(right_slot)
        self._values.append(value)
        self._handles.append(handle)
        return handle

    def leaf(self, value: Any = None) -> Node:
        return self.node(None, None, value)

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._handles))

    def __contains__(self, node: object) -> bool:
        # Arena membership only; says nothing about reachability from a root.
        return isinstance(node, Node) and node.tree is self

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self)})"

    # ------------------------- internals ------------------------- #

    def _child(self, slot: Optional[int]) -> Optional[Node]:
        if slot is None:
            return None
        return self._handles[slot]

    def _own_slot(self, child: Optional[Node], side: str) -> Optional[int]:
        if child is None:
            return None
        if not isinstance(child, Node):
            raise ValueError(f"{side} child must be a Node or None; got {child!r}")
        if child.tree is not self:
            raise ValueError(f"{side} child {child!r} belongs to a different tree")
        return child.slot


def same_node(a: Optional[Node], b: Optional[Node]) -> bool:
    """
    Identity comparison of two nodes.

    Two nodes with identical subtrees or payloads are still different nodes.
    """
    return a is b


def heap_tree(slots: int) -> List[Optional[Node]]:
    """
    Build a balanced tree addressed by 1-based heap indices.

    Returns a list `h` of length `slots` where `h[0]` is None and, for every
    `i >= 1`, `h[i]` has children `h[2i]` and `h[2i + 1]` when those slots
    exist. `h[1]` is the root. With `slots=16` this is a full tree of depth 4
    whose leaves are `h[8]..h[15]`.

    Raises
    ------
    ValueError
        If `slots < 2` (there would be no root).
    """
    if not isinstance(slots, int) or slots < 2:
        raise ValueError(f"slots must be an int >= 2; got {slots!r}")

    tree = Tree()
    h: List[Optional[Node]] = [None] * slots
    for i in range(slots - 1, 0, -1):
        left = h[2 * i] if 2 * i < slots else None
        right = h[2 * i + 1] if 2 * i + 1 < slots else None
        h[i] = tree.node(left, right, value=i)
    return h


def depth_first(root: Node) -> Iterator[Tuple[Node, int]]:
    """
    Yield `(node, heap_index)` for every node reachable from `root`, pre-order,
    left subtree before right. Uses an explicit stack.
    """
    stack: List[Tuple[Node, int]] = [(root, 1)]
    while stack:
        node, index = stack.pop()
        yield node, index
        right = node.right
        if right is not None:
            stack.append((right, 2 * index + 1))
        left = node.left
        if left is not None:
            stack.append((left, 2 * index))
