"""
API Request Models

Pydantic models for API request validation.
"""

from typing import Literal, Union

from pydantic import BaseModel, Field, StrictInt


HashAlgorithm = Literal["sha256", "sha3_256", "blake2b"]


class LeavesRequest(BaseModel):
    """Request body carrying leaf sums and data."""

    sums: list[Union[StrictInt, str]] = Field(
        ...,
        description="Leaf sums: integers, decimal strings or 0x hex strings",
    )
    data: list[str] = Field(
        ...,
        description="Leaf payloads as 0x-prefixed hex strings",
    )
    hash_algorithm: HashAlgorithm | None = Field(
        default=None,
        description="Digest algorithm (server default when omitted)",
    )


class ProofRequest(LeavesRequest):
    """Request body for proof and bundle endpoints."""

    index: StrictInt = Field(..., description="0-based leaf index")
