"""
Core cryptographic utilities.

Hash primitives used by the Merkle combiner and the hex helpers used at
textual boundaries.
"""
from .hashing import (
    DEFAULT_HASH_ALGORITHM,
    HASHERS,
    Hasher,
    keccak256,
    sha256,
    get_hasher,
    hasher_name,
    to_hex,
    from_hex,
)

__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "HASHERS",
    "Hasher",
    "keccak256",
    "sha256",
    "get_hasher",
    "hasher_name",
    "to_hex",
    "from_hex",
]
