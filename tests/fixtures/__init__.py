"""
Test fixtures package for sumtree tests.

This package provides factory functions for creating test objects:
- sum_tree_fixtures.py: leaf factories, scenario trees, root recomputation

Usage:
    from fixtures import make_leaves, recompute_root

    def test_something():
        sums, data = make_leaves(5)
"""

from .sum_tree_fixtures import (
    int_to_data,
    make_leaves,
    make_four_leaf_tree,
    make_three_leaf_tree,
    naive_parent_index,
    recompute_root,
)

__all__ = [
    "int_to_data",
    "make_leaves",
    "make_four_leaf_tree",
    "make_three_leaf_tree",
    "naive_parent_index",
    "recompute_root",
]
