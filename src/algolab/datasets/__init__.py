"""
Datasets package public API.

Re-export the generators so callers can write:
    from algolab.datasets import make_dataset, make_tree, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_dataset
from .trees import SUPPORTED_SHAPES, TreeDataset, make_tree

__all__ = ["make_dataset", "SUPPORTED_DISTS", "make_tree", "SUPPORTED_SHAPES", "TreeDataset"]
