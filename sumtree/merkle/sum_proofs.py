"""
Merkle Sum Proofs - Convenience Wrappers
Class-based interface and verifier-facing proof bundles.

This module provides:
- SumTreeProver: Build trees, roots and proofs from (sums, data)
- SumProofBundle: The tuple an external verifier consumes for one leaf
  (root hash/sum, leaf data/sum, proof, leaf position, leaf count)

These are convenience wrappers around the functions in sum_tree.py.
"""
from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sumtree.config.runtime import DigestConfig
from sumtree.crypto.hashing import from_hex, to_hex
from sumtree.merkle.sum_tree import (
    Node,
    SumProof,
    SumRoot,
    calc_root,
    construct_tree,
    get_proof,
    leaf_count,
    tree_root,
)
from sumtree.schemas.canonical import dumps_canonical


HEX_PATTERN = r"^0x([0-9a-fA-F]{2})*$"


class SumProofBundle(BaseModel):
    """
    Everything an external verifier needs to check one leaf.

    Digests and payloads are 0x-prefixed hex strings, sums are exact
    integers. The leaf position is carried as a plain index; packing it
    into the verifier's key format is left to the verifier side.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_hash: str = Field(..., pattern=HEX_PATTERN, description="Root digest")
    root_sum: int = Field(..., ge=0, description="Root sum (total of all leaves)")
    leaf_data: str = Field(..., pattern=HEX_PATTERN, description="Leaf payload")
    leaf_sum: int = Field(..., ge=0, description="Leaf sum")
    side_nodes: list[str] = Field(
        default_factory=list,
        description="Sibling digests, leaf to root",
    )
    node_sums: list[int] = Field(
        default_factory=list,
        description="Sibling sums, same order as side_nodes",
    )
    leaf_index: int = Field(..., ge=0, description="0-based leaf position")
    leaf_count: int = Field(..., ge=1, description="Total number of leaves")

    @model_validator(mode="after")
    def _check_shape(self) -> "SumProofBundle":
        if len(self.side_nodes) != len(self.node_sums):
            raise ValueError("side_nodes and node_sums must have the same length")
        if self.leaf_index >= self.leaf_count:
            raise ValueError(
                f"leaf_index {self.leaf_index} out of range for {self.leaf_count} leaves"
            )
        for side in self.side_nodes:
            from_hex(side)
        return self

    @classmethod
    def from_tree(cls, nodes: Sequence[Node], index: int) -> "SumProofBundle":
        """Build the bundle for one leaf of an already constructed tree."""
        proof = get_proof(nodes, index)
        root = tree_root(nodes)
        leaf = nodes[index]
        return cls(
            root_hash=to_hex(root.hash),
            root_sum=root.sum,
            leaf_data=to_hex(leaf.data),
            leaf_sum=leaf.sum,
            side_nodes=[to_hex(h) for h in proof.side_nodes],
            node_sums=list(proof.node_sums),
            leaf_index=index,
            leaf_count=leaf_count(nodes),
        )

    @property
    def root(self) -> SumRoot:
        return SumRoot(hash=from_hex(self.root_hash), sum=self.root_sum)

    @property
    def proof(self) -> SumProof:
        return SumProof(
            side_nodes=tuple(from_hex(h) for h in self.side_nodes),
            node_sums=tuple(self.node_sums),
        )

    def to_canonical_json(self) -> str:
        return dumps_canonical(self)


class SumTreeProver:
    """
    Convenience class for building sum trees and proofs.

    Example:
        >>> proof = SumTreeProver.prove([1, 2, 3, 4], [b"a", b"b", b"c", b"d"], 0)
        >>> proof.node_sums
        (2, 7)
    """

    @staticmethod
    def build(
        sums: Sequence[int],
        data: Sequence[bytes],
        config: DigestConfig | None = None,
    ) -> list[Node]:
        """Build the full node list."""
        return construct_tree(sums, data, config)

    @staticmethod
    def compute_root(
        sums: Sequence[int],
        data: Sequence[bytes],
        config: DigestConfig | None = None,
    ) -> SumRoot:
        """Compute the root commitment without keeping the tree."""
        return calc_root(sums, data, config)

    @staticmethod
    def prove(
        sums: Sequence[int],
        data: Sequence[bytes],
        index: int,
        config: DigestConfig | None = None,
    ) -> SumProof:
        """
        Build the tree and extract the proof for the leaf at index.

        Raises:
            EmptyInputException, LengthMismatchException,
            IndexOutOfBoundsException
        """
        return get_proof(construct_tree(sums, data, config), index)

    @staticmethod
    def bundle(
        sums: Sequence[int],
        data: Sequence[bytes],
        index: int,
        config: DigestConfig | None = None,
    ) -> SumProofBundle:
        """Build the tree and package the verifier input for one leaf."""
        return SumProofBundle.from_tree(construct_tree(sums, data, config), index)

    @staticmethod
    def bundle_all(
        sums: Sequence[int],
        data: Sequence[bytes],
        config: DigestConfig | None = None,
    ) -> list[SumProofBundle]:
        """Build the tree once and package a bundle for every leaf."""
        nodes = construct_tree(sums, data, config)
        return [SumProofBundle.from_tree(nodes, i) for i in range(leaf_count(nodes))]


__all__ = [
    "SumProofBundle",
    "SumTreeProver",
]
