"""
Tree dataset generators for the ancestor resolver.

Currently implemented:
- shape == "complete":
    Heap-shaped tree with n nodes; node i (1-based) has children 2i, 2i+1.

- shape == "random":
    Random binary tree with n nodes, built bottom-up. Each new node adopts
    0, 1 or 2 of the subtrees built so far, under the constraint that the
    last node ends up adopting everything left, so exactly one root remains.

- shape == "degenerate":
    A chain of n nodes where every link turns left or right at random. Depth
    is n, which is what exercises the stack-based traversals.

Public API (stable):
    make_tree(n: int, spec: dict, rng: numpy.random.Generator) -> TreeDataset
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from algolab.trees import Node, Tree, heap_tree

SUPPORTED_SHAPES = {"complete", "random", "degenerate"}
__all__ = ["SUPPORTED_SHAPES", "TreeDataset", "make_tree"]


@dataclass(frozen=True)
class TreeDataset:
    tree: Tree
    root: Node
    nodes: List[Node]  # every node reachable from root; heap order for "complete"

    def __len__(self) -> int:
        return len(self.nodes)


def make_tree(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> TreeDataset:
    """
    Generate a tree of `n` nodes according to `spec` ({"shape": <name>}).

    Raises
    ------
    ValueError
        If `n < 1` or the shape is unsupported.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 1:
        raise ValueError(f"tree size n must be an int >= 1; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    shape = spec.get("shape", None)
    if shape not in SUPPORTED_SHAPES:
        raise ValueError(
            f"Unsupported tree shape: {shape!r}. Supported: {sorted(SUPPORTED_SHAPES)}"
        )

    n = int(n)
    if shape == "complete":
        h = heap_tree(n + 1)
        nodes = [node for node in h[1:] if node is not None]
        return TreeDataset(tree=nodes[0].tree, root=nodes[0], nodes=nodes)
    if shape == "random":
        return _random_tree(n, rng)
    return _degenerate_tree(n, rng)


def _random_tree(n: int, rng: np.random.Generator) -> TreeDataset:
    tree = Tree()
    pending: List[Node] = []  # roots of subtrees not adopted yet

    for i in range(n):
        remaining = n - i - 1
        # Each later node can shrink `pending` by at most one.
        low = max(0, len(pending) - remaining)
        high = min(2, len(pending))
        adopt = int(rng.integers(low, high + 1))

        children: List[Optional[Node]] = [_take(pending, rng) for _ in range(adopt)]
        if adopt == 1 and rng.integers(0, 2) == 1:
            children = [None, children[0]]
        children += [None] * (2 - len(children))

        pending.append(tree.node(children[0], children[1], value=i))

    root = pending[0]
    return TreeDataset(tree=tree, root=root, nodes=list(tree))


def _degenerate_tree(n: int, rng: np.random.Generator) -> TreeDataset:
    tree = Tree()
    turns = rng.integers(0, 2, size=n).tolist()
    node = tree.leaf(value=0)
    for i in range(1, n):
        node = tree.node(None, node, value=i) if turns[i] else tree.node(node, None, value=i)
    return TreeDataset(tree=tree, root=node, nodes=list(tree))


def _take(pending: List[Node], rng: np.random.Generator) -> Node:
    k = int(rng.integers(0, len(pending)))
    pending[k], pending[-1] = pending[-1], pending[k]
    return pending.pop()
