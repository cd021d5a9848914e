"""
Hashing Utilities
Hash primitives, fixed-width integer packing and hex helpers for
Merkle sum tree digests.

This module provides:
- SHA-256 hashing for raw bytes (plus configurable 32-byte alternatives)
- Big-endian fixed-width packing of sums
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Always hash raw bytes exactly as specified
- Sums are never truncated: a value that does not fit raises
- All operations are deterministic
"""
from __future__ import annotations

import hashlib

from sumtree.schemas.errors import InvalidLeafDataException, SumOutOfRangeException


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_bytes(data: bytes, algorithm: str = "sha256") -> bytes:
    """
    Hash raw bytes with the named algorithm, always yielding 32 bytes.

    Args:
        data: Raw bytes to hash
        algorithm: One of "sha256", "sha3_256", "blake2b"

    Returns:
        32-byte digest

    Raises:
        ValueError: If the algorithm is unknown
    """
    if algorithm == "sha256":
        return sha256(data)
    if algorithm == "sha3_256":
        return hashlib.sha3_256(data).digest()
    if algorithm == "blake2b":
        return hashlib.blake2b(data, digest_size=32).digest()
    raise ValueError(f"Unsupported hash algorithm: {algorithm!r}")


def encode_uint(value: int, width: int = 32) -> bytes:
    """
    Pack a non-negative integer as a fixed-width big-endian field.

    This is the layout of a Solidity ``uint256`` under ``abi.encodePacked``
    when width is 32.

    Args:
        value: Non-negative integer
        width: Field width in bytes

    Returns:
        ``width`` bytes, most significant first

    Raises:
        InvalidLeafDataException: If value is not an int (bool rejected)
        SumOutOfRangeException: If value is negative or needs more than
            ``width`` bytes

    Example:
        >>> encode_uint(5, 4).hex()
        '00000005'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidLeafDataException(
            f"Sum must be an integer, got {type(value).__name__}"
        )
    if value < 0 or value >= 1 << (width * 8):
        raise SumOutOfRangeException(value, width)
    return value.to_bytes(width, "big")


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    "0x" alone decodes to empty bytes.

    Raises:
        InvalidLeafDataException: If string doesn't start with 0x, has odd
            length, or contains invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    if not isinstance(hex_string, str) or not hex_string.startswith("0x"):
        raise InvalidLeafDataException(
            f"Hex string must start with '0x' prefix, got: {str(hex_string)[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise InvalidLeafDataException(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise InvalidLeafDataException(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "sha256",
    "hash_bytes",
    "encode_uint",
    "to_hex",
    "from_hex",
]
