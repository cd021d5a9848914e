"""
Core cryptographic utilities.

Hash primitives, fixed-width sum packing and hex helpers.
"""
from .hashing import (
    sha256,
    hash_bytes,
    encode_uint,
    to_hex,
    from_hex,
)

__all__ = [
    "sha256",
    "hash_bytes",
    "encode_uint",
    "to_hex",
    "from_hex",
]
