"""API request and response models."""

from sumtree_api.models.requests import LeavesRequest, ProofRequest
from sumtree_api.models.responses import (
    HealthResponse,
    NodeModel,
    RootResponse,
    TreeResponse,
    ProofResponse,
    BundleResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "LeavesRequest",
    "ProofRequest",
    "HealthResponse",
    "NodeModel",
    "RootResponse",
    "TreeResponse",
    "ProofResponse",
    "BundleResponse",
    "ErrorDetail",
    "ErrorResponse",
]
