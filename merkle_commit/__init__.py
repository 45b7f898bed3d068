"""
merkle-commit

Canonical sorted Merkle trees: order-independent roots, compact inclusion
proofs without direction bits, and a verifier that matches on-chain
MerkleProof-style contracts.
"""

from merkle_commit.merkle import (
    MerkleTree,
    build_merkle_tree,
    check_proof,
    combine,
    merkle_root,
    verify_merkle_proof,
)
from merkle_commit.schemas.errors import (
    ElementNotFoundError,
    EmptyTreeError,
    InvalidElementError,
    MerkleException,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "build_merkle_tree",
    "check_proof",
    "combine",
    "merkle_root",
    "verify_merkle_proof",
    "ElementNotFoundError",
    "EmptyTreeError",
    "InvalidElementError",
    "MerkleException",
]
