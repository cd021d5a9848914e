"""
sumtree - Merkle sum trees.

Binary hash trees over (data, sum) leaves where every internal node
commits to the hash and the exact sum of its subtree.

Usage:
    from sumtree import construct_tree, calc_root, get_proof
"""

from sumtree.merkle import (
    Node,
    SumProof,
    SumProofBundle,
    SumRoot,
    SumTreeProver,
    calc_root,
    construct_tree,
    get_proof,
    leaf_digest,
    node_digest,
    tree_root,
)

__version__ = "0.1.0"

__all__ = [
    "Node",
    "SumProof",
    "SumProofBundle",
    "SumRoot",
    "SumTreeProver",
    "calc_root",
    "construct_tree",
    "get_proof",
    "leaf_digest",
    "node_digest",
    "tree_root",
]
