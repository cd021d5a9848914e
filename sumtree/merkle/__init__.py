"""
Merkle Sum Tree and Proofs
Deterministic sum tree construction + root computation + proof extraction.

This module provides:
- Node, SumRoot, SumProof: tree vertex, root commitment, inclusion proof
- leaf_digest / node_digest: domain-separated digests
- construct_tree: full index-addressed node list
- calc_root: root commitment only
- get_proof: sibling path for one leaf
- SumTreeProver, SumProofBundle: convenience wrappers and verifier input

Canonical Commitment Rules:
1. Leaf hashing: H(0x00 || uint256(sum) || data)
2. Node hashing: H(0x01 || uint256(lsum) || lhash || uint256(rsum) || rhash)
3. Odd levels: carry the trailing node forward unchanged
4. Single leaf: root = leaf, empty proof

Usage:
    from sumtree.merkle import construct_tree, get_proof, tree_root

    nodes = construct_tree([1, 2, 3], [b"a", b"b", b"c"])
    root = tree_root(nodes)
    proof = get_proof(nodes, 2)
"""
from .sum_tree import (
    LEAF_PREFIX,
    NODE_PREFIX,
    Node,
    SumRoot,
    SumProof,
    leaf_digest,
    node_digest,
    construct_tree,
    calc_root,
    leaf_count,
    tree_root,
    get_proof,
    compute_tree_depth,
    max_proof_length,
)

from .sum_proofs import (
    SumProofBundle,
    SumTreeProver,
)


__all__ = [
    # Core types
    "Node",
    "SumRoot",
    "SumProof",
    "LEAF_PREFIX",
    "NODE_PREFIX",
    # Core functions
    "leaf_digest",
    "node_digest",
    "construct_tree",
    "calc_root",
    "leaf_count",
    "tree_root",
    "get_proof",
    "compute_tree_depth",
    "max_proof_length",
    # Convenience classes
    "SumProofBundle",
    "SumTreeProver",
]
