"""
Tree Routes

Compute roots, node lists, proofs and verifier bundles from request leaves.
Domain errors (empty input, length mismatch, index out of range, bad hex,
oversized sums) propagate as SumTreeException and are mapped to 400.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_proofs import SumProofBundle
from sumtree.merkle.sum_tree import calc_root, construct_tree, get_proof
from sumtree.schemas.leaves import parse_leaves
from sumtree_api.deps import resolve_digest_config
from sumtree_api.models.requests import LeavesRequest, ProofRequest
from sumtree_api.models.responses import (
    BundleResponse,
    NodeModel,
    ProofResponse,
    RootResponse,
    TreeResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["tree"])


@router.post("/root", response_model=RootResponse)
async def compute_root(request: LeavesRequest) -> RootResponse:
    """Compute the root hash and sum."""
    sums, data = parse_leaves(request.sums, request.data)
    root = calc_root(sums, data, resolve_digest_config(request.hash_algorithm))
    logger.info(f"Computed root over {len(sums)} leaves")
    return RootResponse(
        root_hash=to_hex(root.hash),
        root_sum=root.sum,
        leaf_count=len(sums),
    )


@router.post("/tree", response_model=TreeResponse)
async def build_tree(request: LeavesRequest) -> TreeResponse:
    """Build the full node list, leaves first and root last."""
    sums, data = parse_leaves(request.sums, request.data)
    nodes = construct_tree(sums, data, resolve_digest_config(request.hash_algorithm))
    return TreeResponse(
        leaf_count=len(sums),
        nodes=[NodeModel.from_node(node) for node in nodes],
    )


@router.post("/proof", response_model=ProofResponse)
async def extract_proof(request: ProofRequest) -> ProofResponse:
    """Extract the sibling path for one leaf."""
    sums, data = parse_leaves(request.sums, request.data)
    nodes = construct_tree(sums, data, resolve_digest_config(request.hash_algorithm))
    proof = get_proof(nodes, request.index)
    return ProofResponse(
        leaf_index=request.index,
        side_nodes=[to_hex(h) for h in proof.side_nodes],
        node_sums=list(proof.node_sums),
    )


@router.post("/bundle", response_model=BundleResponse)
async def proof_bundle(request: ProofRequest) -> BundleResponse:
    """Package root, leaf, proof, leaf index and leaf count for a verifier."""
    sums, data = parse_leaves(request.sums, request.data)
    nodes = construct_tree(sums, data, resolve_digest_config(request.hash_algorithm))
    return BundleResponse(bundle=SumProofBundle.from_tree(nodes, request.index))
