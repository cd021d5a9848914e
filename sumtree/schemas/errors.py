"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for Merkle sum tree construction and proofs.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Tree input errors
    EMPTY_INPUT = "EMPTY_INPUT"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"
    INVALID_LEAF_DATA = "INVALID_LEAF_DATA"

    # Encoding errors
    SUM_OUT_OF_RANGE = "SUM_OUT_OF_RANGE"
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Proof errors
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"

    # Runtime errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SumTreeError(BaseModel):
    """
    Base error model for structured error communication.

    Used by the CLI (--json) and the HTTP API to report failures
    without passing exceptions across the boundary.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SumTreeException(Exception):
    """
    Base exception for all sum tree errors.

    Carries structured error information and can be converted
    to a SumTreeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUMTREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> SumTreeError:
        """Convert this exception to a SumTreeError model."""
        return SumTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputException(SumTreeException, ValueError):
    """Raised when a tree is requested over zero leaves."""

    def __init__(
        self,
        message: str = "Cannot build a sum tree from an empty leaf list",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class LengthMismatchException(SumTreeException, ValueError):
    """Raised when the sums and data sequences differ in length."""

    def __init__(
        self,
        sums_length: int,
        data_length: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["sums_length"] = sums_length
        full_details["data_length"] = data_length
        super().__init__(
            message=(
                f"Length mismatch: got {sums_length} sums "
                f"and {data_length} data items"
            ),
            code=ErrorCodes.LENGTH_MISMATCH,
            details=full_details,
            retryable=False,
        )


class IndexOutOfBoundsException(SumTreeException, IndexError):
    """Raised when a proof is requested for a leaf that does not exist."""

    def __init__(
        self,
        index: int,
        leaf_count: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["index"] = index
        full_details["leaf_count"] = leaf_count
        super().__init__(
            message=f"Leaf index {index} out of range for {leaf_count} leaves",
            code=ErrorCodes.INDEX_OUT_OF_BOUNDS,
            details=full_details,
            retryable=False,
        )


class SumOutOfRangeException(SumTreeException, ValueError):
    """Raised when a sum cannot be encoded in the fixed-width digest field."""

    def __init__(
        self,
        value: int,
        width: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["value"] = str(value)
        full_details["width_bytes"] = width
        super().__init__(
            message=(
                f"Sum {value} does not fit in an unsigned "
                f"{width * 8}-bit field"
            ),
            code=ErrorCodes.SUM_OUT_OF_RANGE,
            details=full_details,
            retryable=False,
        )


class InvalidLeafDataException(SumTreeException, ValueError):
    """Raised when a leaf payload or sum has the wrong type or bad hex."""

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_LEAF_DATA,
            details=full_details,
            retryable=False,
        )


class CanonicalizationException(SumTreeException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class ConfigurationException(SumTreeException):
    """Exception raised when runtime configuration is invalid."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )
