"""
Module 01 - Schemas
File: proof.py

Purpose: Wire formats for roots and inclusion proofs. Everything is
0x-prefixed hex so the payloads can be stored as JSON or handed to a
contract call unchanged.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from merkle_commit.crypto.hashing import DEFAULT_HASH_ALGORITHM, get_hasher, hasher_name
from merkle_commit.merkle.encoding import (
    decode_element,
    encode_element,
    encode_proof,
    is_element_hex,
)
from merkle_commit.merkle.merkle_proofs import verify_merkle_proof
from merkle_commit.merkle.merkle_tree import MerkleTree


HashAlgorithm = Literal["keccak256", "sha256"]


def _check_element_hex(value: str) -> str:
    if not is_element_hex(value):
        raise ValueError("must be 0x followed by 64 hex characters")
    return value.lower()


def resolve_hash_algorithm(
    tree: MerkleTree,
    hash_algorithm: Optional[str] = None,
) -> str:
    """
    Name of the hash function tree was built with.

    An explicit hash_algorithm must agree with the tree's hasher.

    Raises:
        ValueError: If the label disagrees with the tree, or the tree uses an
                    unregistered hasher and no label is given
    """
    built_with = hasher_name(tree.hasher)
    if hash_algorithm is None:
        if built_with is None:
            raise ValueError(
                "Tree was built with an unregistered hasher; pass hash_algorithm explicitly"
            )
        return built_with

    label = hash_algorithm.lower()
    if built_with is not None and label != built_with:
        raise ValueError(
            f"hash_algorithm {label!r} does not match the tree's hasher {built_with!r}"
        )
    return label


class TreeCommitment(BaseModel):
    """
    Published commitment for a tree: its root plus shape metadata.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(..., description="0x-prefixed 32-byte Merkle root")
    element_count: int = Field(..., description="Number of distinct elements", ge=1)
    depth: int = Field(..., description="Number of layers, leaves and root included", ge=1)
    hash_algorithm: HashAlgorithm = Field(default=DEFAULT_HASH_ALGORITHM)

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        return _check_element_hex(v)

    @classmethod
    def from_tree(
        cls,
        tree: MerkleTree,
        hash_algorithm: Optional[HashAlgorithm] = None,
    ) -> "TreeCommitment":
        """
        Describe a built tree.

        The hash_algorithm label defaults to the tree's own hasher.
        """
        return cls(
            root=encode_element(tree.root),
            element_count=len(tree),
            depth=tree.depth,
            hash_algorithm=resolve_hash_algorithm(tree, hash_algorithm),
        )


class InclusionProof(BaseModel):
    """
    Self-contained inclusion proof for one element.

    Holds everything a third party needs to re-verify membership:
    the element, the sibling path and the expected root.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    element: str = Field(..., description="0x-prefixed 32-byte element being proven")
    root: str = Field(..., description="0x-prefixed 32-byte root the proof is against")
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling values from leaf to root, 0x-prefixed",
    )
    hash_algorithm: HashAlgorithm = Field(default=DEFAULT_HASH_ALGORITHM)

    @field_validator("element", "root")
    @classmethod
    def validate_value(cls, v: str) -> str:
        return _check_element_hex(v)

    @field_validator("proof")
    @classmethod
    def validate_proof(cls, v: list[str]) -> list[str]:
        return [_check_element_hex(s) for s in v]

    @classmethod
    def from_tree(
        cls,
        tree: MerkleTree,
        element: bytes | str,
        hash_algorithm: Optional[HashAlgorithm] = None,
    ) -> "InclusionProof":
        """
        Extract and serialize the proof for element.

        Raises:
            InvalidElementError: If element is malformed
            ElementNotFoundError: If element is not in the tree
            ValueError: If hash_algorithm does not match the tree's hasher
        """
        raw = decode_element(element)
        return cls(
            element=encode_element(raw),
            root=encode_element(tree.root),
            proof=[encode_element(s) for s in tree.get_proof(raw)],
            hash_algorithm=resolve_hash_algorithm(tree, hash_algorithm),
        )

    @property
    def siblings(self) -> list[bytes]:
        """Proof entries as raw bytes."""
        return [decode_element(s) for s in self.proof]

    @property
    def packed_proof(self) -> str:
        """Siblings concatenated into one 0x-prefixed hex string."""
        return encode_proof(self.siblings)

    def verify(self) -> bool:
        """Replay the proof with the recorded hash algorithm."""
        return verify_merkle_proof(
            self.siblings,
            decode_element(self.root),
            decode_element(self.element),
            get_hasher(self.hash_algorithm),
        )

    def to_contract_args(self) -> tuple[str, str, str]:
        """Arguments for a checkProof(bytes proof, bytes32 root, bytes32 leaf) call."""
        return (self.packed_proof, self.root, self.element)


__all__ = [
    "HashAlgorithm",
    "resolve_hash_algorithm",
    "TreeCommitment",
    "InclusionProof",
]
