"""
Module 02 - Merkle Tree Implementation
Canonical sorted Merkle tree construction and proof extraction.

This module provides:
- Deterministic, order-independent Merkle root computation
- Inclusion proof extraction for any member element
- Carry-forward rule for odd-length layers

Canonical Commitment Rules (Hard Contracts):
1. Elements: exactly 32 bytes each; empty placeholders are dropped
2. Element set: deduplicated by bytes, sorted ascending (unsigned bytes)
3. Parent hashing: combine(a, b) = H(sort_join(a, b))
4. Odd layers: the unpaired last node is carried forward unchanged
5. Single element: root = element
6. Empty input: EmptyTreeError (no sentinel root)

Determinism Notes:
- Input order and duplicates never affect the root
- The tree is immutable after construction and safe to share across threads
"""
from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from merkle_commit.crypto.hashing import Hasher, keccak256
from merkle_commit.merkle.combiner import combine
from merkle_commit.merkle.encoding import (
    ELEMENT_SIZE,
    ElementLike,
    decode_element,
    encode_element,
)
from merkle_commit.schemas.errors import (
    ElementNotFoundError,
    EmptyTreeError,
    InvalidElementError,
)


Layer = tuple[bytes, ...]


@dataclass(frozen=True)
class MerkleTree:
    """
    An immutable Merkle tree over a canonical element set.

    Build instances with build_merkle_tree(); the constructor trusts its
    arguments.

    Attributes:
        elements: Deduplicated, ascending-sorted 32-byte elements (layer 0)
        layers: All layers from leaves to root; layers[-1] has one entry
        hasher: Hash function used by combine()
    """
    elements: Layer
    layers: tuple[Layer, ...]
    hasher: Hasher = field(default=keccak256, compare=False, repr=False)

    @classmethod
    def from_hex(
        cls,
        values: Iterable[ElementLike | None],
        hasher: Hasher = keccak256,
    ) -> "MerkleTree":
        """Build a tree from 0x-prefixed hex strings (bytes also accepted)."""
        decoded = [decode_element(v) for v in values if v]
        return build_merkle_tree(decoded, hasher=hasher)

    @property
    def root(self) -> bytes:
        """The commitment: sole entry of the final layer."""
        return self.layers[-1][0]

    @property
    def depth(self) -> int:
        """Number of layers, leaves and root included."""
        return len(self.layers)

    def get_root(self) -> bytes:
        """Return the 32-byte root."""
        return self.root

    def index_of(self, element: bytes) -> int:
        """
        Locate element in the sorted element set.

        Raises:
            ElementNotFoundError: If element is not a member
        """
        needle = bytes(element)
        i = bisect_left(self.elements, needle)
        if i == len(self.elements) or self.elements[i] != needle:
            raise ElementNotFoundError(
                "Element not found in Merkle tree",
                element=encode_element(needle),
            )
        return i

    def get_proof(self, element: bytes) -> list[bytes]:
        """
        Return the sibling path for element, ordered leaf to root.

        Layers where the node was carried forward contribute no entry.

        Raises:
            ElementNotFoundError: If element is not a member
        """
        return extract_proof(self.index_of(element), self.layers)

    def __contains__(self, element: object) -> bool:
        if not isinstance(element, (bytes, bytearray, memoryview)):
            return False
        try:
            self.index_of(bytes(element))
        except ElementNotFoundError:
            return False
        return True

    def __len__(self) -> int:
        return len(self.elements)


def normalize_elements(elements: Iterable[bytes | None]) -> Layer:
    """
    Canonicalize raw input into the element set.

    Drops falsy placeholders, deduplicates by exact bytes, validates size,
    and sorts ascending.

    Raises:
        InvalidElementError: If any remaining value is not a 32-byte bytes-like
    """
    unique: set[bytes] = set()
    for position, element in enumerate(elements):
        if not element:
            continue
        if not isinstance(element, (bytes, bytearray, memoryview)):
            raise InvalidElementError(
                f"Elements must be {ELEMENT_SIZE}-byte values, got {type(element).__name__}; "
                "decode hex input with MerkleTree.from_hex()",
                position=position,
            )
        raw = bytes(element)
        if len(raw) != ELEMENT_SIZE:
            raise InvalidElementError(
                f"Elements must be {ELEMENT_SIZE} bytes, got {len(raw)}",
                length=len(raw),
                position=position,
            )
        unique.add(raw)
    return tuple(sorted(unique))


def next_layer(layer: Sequence[bytes], hasher: Hasher = keccak256) -> Layer:
    """
    Combine consecutive pairs of a layer into the next layer up.

    Example: [a, b, c] -> [combine(a, b), c]
    """
    return tuple(
        combine(layer[i], layer[i + 1] if i + 1 < len(layer) else None, hasher)
        for i in range(0, len(layer), 2)
    )


def build_layers(elements: Layer, hasher: Hasher = keccak256) -> tuple[Layer, ...]:
    """
    Build all layers bottom-up from a non-empty canonical element set.

    Raises:
        EmptyTreeError: If elements is empty
    """
    if not elements:
        raise EmptyTreeError()

    layers: list[Layer] = [elements]
    while len(layers[-1]) > 1:
        layers.append(next_layer(layers[-1], hasher))
    return tuple(layers)


def build_merkle_tree(
    elements: Iterable[bytes | None],
    hasher: Hasher = keccak256,
) -> MerkleTree:
    """
    Build an immutable Merkle tree from a collection of 32-byte elements.

    Args:
        elements: Raw 32-byte values in any order; duplicates and empty
                  placeholders are allowed and collapse away
        hasher: Hash function used for every internal node

    Returns:
        MerkleTree over the canonical element set

    Raises:
        InvalidElementError: If a non-placeholder value is not 32 bytes
        EmptyTreeError: If nothing remains after filtering

    Example:
        >>> tree = build_merkle_tree([b"\\x02" * 32, b"\\x01" * 32])
        >>> tree.get_proof(b"\\x01" * 32) == [b"\\x02" * 32]
        True
    """
    canonical = normalize_elements(elements)
    return MerkleTree(
        elements=canonical,
        layers=build_layers(canonical, hasher),
        hasher=hasher,
    )


def extract_proof(index: int, layers: Sequence[Sequence[bytes]]) -> list[bytes]:
    """
    Collect the sibling of index at each layer below the root.

    The sibling of index is index ^ 1; if it falls outside the layer the
    node was carried forward and nothing is appended.
    """
    proof: list[bytes] = []
    for layer in layers[:-1]:
        sibling_index = index ^ 1
        if sibling_index < len(layer):
            proof.append(layer[sibling_index])
        index //= 2
    return proof


def merkle_root(elements: Iterable[bytes | None], hasher: Hasher = keccak256) -> bytes:
    """Convenience: build a tree and return its root."""
    return build_merkle_tree(elements, hasher=hasher).root


def compute_tree_depth(num_elements: int) -> int:
    """
    Compute the number of layers for a tree of num_elements distinct elements.

    Carry-forward means no padding: each layer has ceil(n / 2) nodes.
    A single element has depth 1, two elements depth 2, three depth 3.

    Returns:
        Tree depth (0 for empty)
    """
    if num_elements <= 0:
        return 0

    depth = 1
    n = num_elements
    while n > 1:
        n = (n + 1) // 2
        depth += 1
    return depth


__all__ = [
    "Layer",
    "MerkleTree",
    "normalize_elements",
    "next_layer",
    "build_layers",
    "build_merkle_tree",
    "extract_proof",
    "merkle_root",
    "compute_tree_depth",
]
