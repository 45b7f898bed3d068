"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy for tree construction, proof extraction and
input decoding. Defines both a Pydantic model for structured error
reporting and Python exceptions for control flow.

Verification failure is not an error: verifiers return False.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    INVALID_ELEMENT = "INVALID_ELEMENT"
    ELEMENT_NOT_FOUND = "ELEMENT_NOT_FOUND"
    EMPTY_TREE = "EMPTY_TREE"
    MERKLE_ERROR = "MERKLE_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Error model for structured error reporting.

    Used by the CLI to emit machine-readable failures without a traceback.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_ELEMENT],
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

    def to_exception(self) -> "MerkleException":
        """Convert this error model to the matching exception."""
        exc_cls = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_cls is None:
            return MerkleException(
                message=self.message,
                code=self.code,
                details=self.details,
                retryable=self.retryable,
            )
        exc = exc_cls(self.message)
        exc.details = dict(self.details)
        return exc


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle commitment errors.

    Carries structured error information and can be converted to a
    MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.MERKLE_ERROR,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidElementError(MerkleException):
    """Raised when a value is not a 32-byte element (or valid 32-byte hex)."""

    def __init__(
        self,
        message: str,
        length: int | None = None,
        position: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if length is not None:
            full_details["length"] = length
        if position is not None:
            full_details["position"] = position
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ELEMENT,
            details=full_details,
            retryable=False,
        )


class ElementNotFoundError(MerkleException):
    """Raised when a proof is requested for an element not in the tree."""

    def __init__(
        self,
        message: str,
        element: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if element:
            full_details["element"] = element
        super().__init__(
            message=message,
            code=ErrorCodes.ELEMENT_NOT_FOUND,
            details=full_details,
            retryable=False,
        )


class EmptyTreeError(MerkleException):
    """Raised when a tree is built from zero elements."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree from zero elements",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_TREE,
            details=details,
            retryable=False,
        )


_EXCEPTIONS_BY_CODE: dict[str, type[MerkleException]] = {
    ErrorCodes.INVALID_ELEMENT: InvalidElementError,
    ErrorCodes.ELEMENT_NOT_FOUND: ElementNotFoundError,
    ErrorCodes.EMPTY_TREE: EmptyTreeError,
}
