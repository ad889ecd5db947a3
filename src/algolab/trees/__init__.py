"""
Trees package public API.

Re-export the tree model and the ancestor resolver so callers can write:
    from algolab.trees import Tree, heap_tree, closest_common_ancestor
"""

from .ancestor import (
    Absence,
    absence_cause,
    climb,
    closest_common_ancestor,
    follow,
    index_of_one_node,
    index_of_two_nodes,
    path_of,
)
from .arena import Node, Tree, depth_first, heap_tree, same_node

__all__ = [
    "Node",
    "Tree",
    "same_node",
    "heap_tree",
    "depth_first",
    "Absence",
    "closest_common_ancestor",
    "absence_cause",
    "index_of_two_nodes",
    "index_of_one_node",
    "climb",
    "path_of",
    "follow",
]
