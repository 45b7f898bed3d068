"""
Module 02 - Hashing Utilities
Hash primitives and hex helpers for Merkle commitments.

This module provides:
- Keccak-256 (Ethereum flavour, default) and SHA-256 for raw bytes
- A small registry so callers can select a hasher by name
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- keccak256 is NOT hashlib.sha3_256; the padding differs. Roots built with
  keccak256 match Solidity's keccak256(abi.encodePacked(a, b)).
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from typing import Callable

from eth_utils import keccak


Hasher = Callable[[bytes], bytes]

DEFAULT_HASH_ALGORITHM = "keccak256"


def keccak256(data: bytes) -> bytes:
    """
    Compute the Ethereum Keccak-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte Keccak-256 digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(data)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest
    """
    return hashlib.sha256(data).digest()


HASHERS: dict[str, Hasher] = {
    "keccak256": keccak256,
    "sha256": sha256,
}


def get_hasher(name: str) -> Hasher:
    """
    Look up a hash function by name.

    Raises:
        ValueError: If the name is not registered
    """
    try:
        return HASHERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown hash algorithm {name!r}, expected one of: {', '.join(sorted(HASHERS))}"
        ) from None


def hasher_name(hasher: Hasher) -> str | None:
    """Registered name of hasher, or None for an unregistered function."""
    for name, registered in HASHERS.items():
        if registered is hasher:
            return name
    return None


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

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "Hasher",
    "DEFAULT_HASH_ALGORITHM",
    "HASHERS",
    "keccak256",
    "sha256",
    "get_hasher",
    "hasher_name",
    "to_hex",
    "from_hex",
]
