"""Tests for the arena-backed tree model."""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from algolab.trees import Node, Tree, depth_first, heap_tree, same_node


def test_children_are_the_handles_the_builder_holds() -> None:
    tree = Tree()
    a, b = tree.leaf(), tree.leaf()
    top = tree.node(a, b)

    assert top.left is a
    assert top.right is b
    assert same_node(top.left, a)
    assert not same_node(a, b)


def test_identity_not_structure() -> None:
    tree = Tree()
    x, y = tree.leaf(value=1), tree.leaf(value=1)

    assert not same_node(x, y)
    assert x != y
    assert len({x, y}) == 2


def test_leaf_and_payload() -> None:
    tree = Tree()
    leaf = tree.leaf(value="payload")

    assert leaf.is_leaf
    assert leaf.left is None and leaf.right is None
    assert leaf.value == "payload"
    assert "payload" in repr(leaf)


def test_slots_are_stable_and_in_creation_order() -> None:
    tree = Tree()
    nodes = [tree.leaf() for _ in range(4)]

    assert [n.slot for n in nodes] == [0, 1, 2, 3]
    assert list(tree) == nodes
    assert len(tree) == 4


def test_membership_is_per_arena() -> None:
    t1, t2 = Tree(), Tree()
    n1 = t1.leaf()

    assert n1 in t1
    assert n1 not in t2
    assert "not a node" not in t1


def test_children_must_come_from_the_same_arena() -> None:
    t1, t2 = Tree(), Tree()
    foreign = t2.leaf()

    with pytest.raises(ValueError, match="different tree"):
        t1.node(foreign, None)
    with pytest.raises(ValueError, match="right child"):
        t1.node(None, "oops")  # type: ignore[arg-type]


def test_shared_child_is_allowed() -> None:
    tree = Tree()
    shared = tree.leaf()
    p, q = tree.node(shared, None), tree.node(None, shared)

    assert p.left is q.right is shared


def test_heap_tree_layout() -> None:
    h = heap_tree(16)

    assert h[0] is None
    for i in range(1, 8):
        assert h[i].left is h[2 * i]
        assert h[i].right is h[2 * i + 1]
    for i in range(8, 16):
        assert h[i].is_leaf
        assert h[i].value == i


def test_heap_tree_partial_last_level() -> None:
    h = heap_tree(6)  # nodes 1..5

    assert h[2].left is h[4] and h[2].right is h[5]
    assert h[3].is_leaf


@pytest.mark.parametrize("slots", [0, 1, -3, "16"])
def test_heap_tree_rejects_bad_slots(slots) -> None:
    with pytest.raises(ValueError):
        heap_tree(slots)


def test_depth_first_yields_heap_indices_in_preorder() -> None:
    h = heap_tree(8)
    walked = list(depth_first(h[1]))

    assert [i for _, i in walked] == [1, 2, 4, 5, 3, 6, 7]
    assert all(node is h[i] for node, i in walked)
    assert all(isinstance(node, Node) for node, _ in walked)
