"""
Common test fixtures shared by all test modules.

Provides factory functions for:
- 32-byte elements (raw and hex)
- Built Merkle trees
- A deterministic fake hasher for injection tests
"""

import hashlib
from pathlib import Path
from typing import Iterable

from merkle_commit.crypto.hashing import keccak256
from merkle_commit.merkle.merkle_tree import MerkleTree, build_merkle_tree


def make_element(seed: int | str) -> bytes:
    """Deterministic 32-byte element derived from seed."""
    return keccak256(f"element-{seed}".encode("utf-8"))


def make_element_hex(seed: int | str) -> str:
    """Deterministic element as 0x-prefixed hex."""
    return "0x" + make_element(seed).hex()


def make_elements(count: int, start: int = 0) -> list[bytes]:
    """count distinct elements in generation (not sorted) order."""
    return [make_element(i) for i in range(start, start + count)]


def make_tree(count: int, hasher=keccak256) -> MerkleTree:
    """Tree over make_elements(count)."""
    return build_merkle_tree(make_elements(count), hasher=hasher)


def fake_hasher(data: bytes) -> bytes:
    """
    Stand-in hash: tagged SHA-256, so results differ from both real hashers
    while staying 32 bytes and collision resistant.
    """
    return hashlib.sha256(b"fake:" + data).digest()


def write_elements_file(path: Path, values: Iterable[str]) -> Path:
    """Write one value per line and return the path."""
    path.write_text("\n".join(values) + "\n", encoding="utf-8")
    return path
