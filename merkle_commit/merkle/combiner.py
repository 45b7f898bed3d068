"""
Module 02 - Canonical Hash Combiner
The pairwise combine rule shared by tree construction and proof replay.

Canonical Commitment Rules (Hard Contracts):
1. Pair hashing: parent = H(min(a, b) + max(a, b)), byte-lexicographic order
2. Carry-forward: a node without a partner passes through unchanged
3. No direction bits: combine(a, b) == combine(b, a)

Builder and verifier MUST both go through combine(); any divergence in
byte ordering produces a different root.
"""
from __future__ import annotations

from typing import Optional

from merkle_commit.crypto.hashing import Hasher, keccak256


def sort_join(*values: bytes) -> bytes:
    """
    Sort byte strings ascending (unsigned, byte-wise) and concatenate them.

    Python compares bytes lexicographically by unsigned byte value, which is
    the same total order as Node's Buffer.compare and Solidity's uint256
    comparison of 32-byte words.

    Example:
        >>> sort_join(b"\\x02", b"\\x01")
        b'\\x01\\x02'
    """
    return b"".join(sorted(values))


def combine(
    first: Optional[bytes],
    second: Optional[bytes],
    hasher: Hasher = keccak256,
) -> Optional[bytes]:
    """
    Combine two child values into their parent value.

    Args:
        first: One child (None or empty means absent)
        second: The other child (None or empty means absent)
        hasher: Hash function applied to the sorted 64-byte concatenation

    Returns:
        first if second is absent, second if first is absent,
        otherwise hasher(sort_join(first, second))
    """
    if not second:
        return first
    if not first:
        return second
    return hasher(sort_join(first, second))


__all__ = [
    "sort_join",
    "combine",
]
