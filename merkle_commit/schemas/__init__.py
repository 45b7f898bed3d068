"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the error taxonomy. Wire models live in
merkle_commit.schemas.proof and are imported from there directly, since
they depend on the merkle package which itself raises these errors.
"""

from .errors import (
    ElementNotFoundError,
    EmptyTreeError,
    ErrorCodes,
    InvalidElementError,
    MerkleError,
    MerkleException,
)

__all__ = [
    "ElementNotFoundError",
    "EmptyTreeError",
    "ErrorCodes",
    "InvalidElementError",
    "MerkleError",
    "MerkleException",
]
