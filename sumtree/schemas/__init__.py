"""
Schemas - Errors & Canonicalization
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonicalize_value,
    dumps_canonical,
)

from .errors import (
    CanonicalizationException,
    ConfigurationException,
    EmptyInputException,
    ErrorCodes,
    IndexOutOfBoundsException,
    InvalidLeafDataException,
    LengthMismatchException,
    SumOutOfRangeException,
    SumTreeError,
    SumTreeException,
)

__all__ = [
    # Canonical serialization
    "CANONICAL_JSON_SEPARATORS",
    "canonicalize_value",
    "dumps_canonical",
    # Errors
    "ErrorCodes",
    "SumTreeError",
    "SumTreeException",
    "EmptyInputException",
    "LengthMismatchException",
    "IndexOutOfBoundsException",
    "SumOutOfRangeException",
    "InvalidLeafDataException",
    "CanonicalizationException",
    "ConfigurationException",
]
