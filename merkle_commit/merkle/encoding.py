"""
Element and proof encoding at textual boundaries.

The tree and verifier operate on raw 32-byte values. Callers holding
0x-prefixed hex (JSON payloads, CLI arguments, contract calls) convert
through these helpers.
"""
from __future__ import annotations

import re
from typing import Sequence, Union

from merkle_commit.crypto.hashing import from_hex, to_hex
from merkle_commit.schemas.errors import InvalidElementError


ELEMENT_SIZE = 32

# 0x + 64 hex characters
_ELEMENT_HEX_RE = re.compile(r"0x[0-9a-fA-F]{64}")

ElementLike = Union[bytes, bytearray, memoryview, str]


def is_element_hex(value: str) -> bool:
    """Return True if value is a 0x-prefixed 32-byte hex string."""
    return _ELEMENT_HEX_RE.fullmatch(value) is not None


def decode_element(value: ElementLike) -> bytes:
    """
    Normalize an element to 32 raw bytes.

    Bytes-like values are copied to bytes; strings must be 0x + 64 hex chars.

    Raises:
        InvalidElementError: If the value is not a 32-byte element
    """
    if isinstance(value, str):
        if not is_element_hex(value):
            raise InvalidElementError(
                f"Element hex must be 0x followed by {ELEMENT_SIZE * 2} hex characters, "
                f"got {value[:12]!r} (length {len(value)})",
                length=len(value),
            )
        return from_hex(value)

    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidElementError(
            f"Element must be bytes or a hex string, got {type(value).__name__}"
        )

    raw = bytes(value)
    if len(raw) != ELEMENT_SIZE:
        raise InvalidElementError(
            f"Element must be {ELEMENT_SIZE} bytes, got {len(raw)}",
            length=len(raw),
        )
    return raw


def encode_element(value: bytes) -> str:
    """Encode a raw element (or root) as 0x-prefixed hex."""
    return to_hex(bytes(value))


def encode_proof(proof: Sequence[bytes]) -> str:
    """
    Pack a proof into one 0x-prefixed hex string.

    Siblings are concatenated in proof order with no separators, each
    exactly 32 bytes; this is the layout MerkleProof.sol style verifiers
    read in 32-byte words.
    """
    for position, sibling in enumerate(proof):
        if len(sibling) != ELEMENT_SIZE:
            raise InvalidElementError(
                f"Proof entry {position} must be {ELEMENT_SIZE} bytes, got {len(sibling)}",
                length=len(sibling),
                position=position,
            )
    return to_hex(b"".join(bytes(s) for s in proof))


def decode_proof(packed: str) -> list[bytes]:
    """
    Split a packed 0x-prefixed proof string back into 32-byte siblings.

    Raises:
        InvalidElementError: If the payload is not valid hex or its length
            is not a multiple of 32 bytes
    """
    try:
        raw = from_hex(packed)
    except ValueError as e:
        raise InvalidElementError(f"Packed proof is not valid hex: {e}") from e
    if len(raw) % ELEMENT_SIZE != 0:
        raise InvalidElementError(
            f"Packed proof length must be a multiple of {ELEMENT_SIZE} bytes, got {len(raw)}",
            length=len(raw),
        )
    return [raw[i:i + ELEMENT_SIZE] for i in range(0, len(raw), ELEMENT_SIZE)]


__all__ = [
    "ELEMENT_SIZE",
    "ElementLike",
    "is_element_hex",
    "decode_element",
    "encode_element",
    "encode_proof",
    "decode_proof",
]
