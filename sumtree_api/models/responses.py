"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_proofs import SumProofBundle
from sumtree.merkle.sum_tree import Node


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "sumtree-api"
    version: str = "v1"


class NodeModel(BaseModel):
    """Serialized tree node."""

    index: int
    hash: str
    sum: int
    left: int | None = None
    right: int | None = None
    parent: int | None = None
    data: str = "0x"

    @classmethod
    def from_node(cls, node: Node) -> "NodeModel":
        return cls(
            index=node.index,
            hash=to_hex(node.hash),
            sum=node.sum,
            left=node.left,
            right=node.right,
            parent=node.parent,
            data=to_hex(node.data),
        )


class RootResponse(BaseModel):
    """Response for POST /root endpoint."""

    ok: bool = True
    root_hash: str = Field(..., description="Root digest (0x hex)")
    root_sum: int = Field(..., description="Sum of all leaves")
    leaf_count: int = Field(..., description="Number of leaves")


class TreeResponse(BaseModel):
    """Response for POST /tree endpoint."""

    ok: bool = True
    leaf_count: int = Field(..., description="Number of leaves")
    nodes: list[NodeModel] = Field(..., description="Leaves first, root last")


class ProofResponse(BaseModel):
    """Response for POST /proof endpoint."""

    ok: bool = True
    leaf_index: int
    side_nodes: list[str] = Field(..., description="Sibling digests, leaf to root")
    node_sums: list[int] = Field(..., description="Sibling sums, leaf to root")


class BundleResponse(BaseModel):
    """Response for POST /bundle endpoint."""

    ok: bool = True
    bundle: SumProofBundle


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail
