"""
Module 02 - Merkle Proof Verification
Replay of the combine rule over an inclusion proof.

This module provides:
- verify_merkle_proof: fold a proof over a candidate element and compare
  against an expected root
- MerkleProver / MerkleVerifier: class-based convenience wrappers

A proof that does not reproduce the root yields False. Exceptions are
reserved for malformed input (values that are not 32 bytes).
"""
from __future__ import annotations

from typing import Iterable, Sequence

from merkle_commit.crypto.hashing import Hasher, keccak256
from merkle_commit.merkle.combiner import combine
from merkle_commit.merkle.encoding import ELEMENT_SIZE, decode_element
from merkle_commit.merkle.merkle_tree import build_merkle_tree
from merkle_commit.schemas.errors import InvalidElementError


def _require_element(value: bytes, label: str, position: int | None = None) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)) or len(value) != ELEMENT_SIZE:
        size = len(value) if isinstance(value, (bytes, bytearray, memoryview, str)) else None
        raise InvalidElementError(
            f"{label} must be a {ELEMENT_SIZE}-byte value",
            length=size,
            position=position,
        )
    return bytes(value)


def verify_merkle_proof(
    proof: Sequence[bytes],
    root: bytes,
    element: bytes,
    hasher: Hasher = keccak256,
) -> bool:
    """
    Verify that element is committed to by root.

    Algorithm:
    1. running = element
    2. For each sibling in order: running = combine(running, sibling)
    3. Return running == root

    Args:
        proof: Sibling values, leaf to root
        root: Expected root
        element: Candidate element
        hasher: Hash function the tree was built with

    Returns:
        True if the replayed root matches, False otherwise

    Raises:
        InvalidElementError: If root, element or any sibling is not 32 bytes
    """
    running = _require_element(element, "Element")
    expected = _require_element(root, "Root")
    for position, sibling in enumerate(proof):
        running = combine(running, _require_element(sibling, "Proof entry", position), hasher)
    return running == expected


# Name used by the JavaScript library this scheme is compatible with.
check_proof = verify_merkle_proof


class MerkleProver:
    """
    Convenience class for building trees and proofs in one call.

    Example:
        >>> proof = MerkleProver.prove(elements, elements[1])
        >>> MerkleVerifier.verify(proof, MerkleProver.compute_root(elements), elements[1])
        True
    """

    @staticmethod
    def prove(
        elements: Iterable[bytes],
        element: bytes,
        hasher: Hasher = keccak256,
    ) -> list[bytes]:
        """
        Build a tree over elements and return the proof for element.

        Raises:
            InvalidElementError: If any element is malformed
            ElementNotFoundError: If element is not among elements
        """
        return build_merkle_tree(elements, hasher=hasher).get_proof(element)

    @staticmethod
    def prove_hex(
        elements: Iterable[str],
        element: str,
        hasher: Hasher = keccak256,
    ) -> list[bytes]:
        """Same as prove() for 0x-prefixed hex inputs."""
        decoded = [decode_element(e) for e in elements if e]
        return MerkleProver.prove(decoded, decode_element(element), hasher)

    @staticmethod
    def compute_root(elements: Iterable[bytes], hasher: Hasher = keccak256) -> bytes:
        """Compute the root for a collection of elements."""
        return build_merkle_tree(elements, hasher=hasher).root


class MerkleVerifier:
    """Convenience class for verifying proofs from raw or hex components."""

    @staticmethod
    def verify(
        proof: Sequence[bytes],
        root: bytes,
        element: bytes,
        hasher: Hasher = keccak256,
    ) -> bool:
        """Verify a proof. See verify_merkle_proof()."""
        return verify_merkle_proof(proof, root, element, hasher)

    @staticmethod
    def verify_hex(
        proof: Sequence[str],
        root: str,
        element: str,
        hasher: Hasher = keccak256,
    ) -> bool:
        """
        Verify a proof given as 0x-prefixed hex values.

        Raises:
            InvalidElementError: If any value is not 0x + 64 hex characters
        """
        return verify_merkle_proof(
            [decode_element(s) for s in proof],
            decode_element(root),
            decode_element(element),
            hasher,
        )


__all__ = [
    "verify_merkle_proof",
    "check_proof",
    "MerkleProver",
    "MerkleVerifier",
]
