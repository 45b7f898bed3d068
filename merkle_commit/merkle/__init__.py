"""
Module 02 - Merkle Tree and Commitments
Canonical sorted Merkle tree construction + proof extraction/verification.

This module provides:
- MerkleTree / build_merkle_tree: immutable tree over a canonical element set
- combine / sort_join: the shared pair-hashing rule
- verify_merkle_proof: replay a proof against a root
- check_proof_contract_factory: adapter for on-chain verifiers

Canonical Commitment Rules:
1. Elements are 32 bytes; placeholders dropped, duplicates collapsed, sorted
2. Parent hashing: keccak256(min(a, b) + max(a, b)) by default
3. Odd layers: carry the unpaired node forward unchanged
4. Empty tree: EmptyTreeError
5. Single element: root = element

Usage:
    from merkle_commit.merkle import build_merkle_tree, verify_merkle_proof

    tree = build_merkle_tree(elements)
    proof = tree.get_proof(elements[2])
    assert verify_merkle_proof(proof, tree.root, elements[2])
"""
from .combiner import combine, sort_join

from .encoding import (
    ELEMENT_SIZE,
    decode_element,
    decode_proof,
    encode_element,
    encode_proof,
    is_element_hex,
)

from .merkle_tree import (
    MerkleTree,
    build_merkle_tree,
    compute_tree_depth,
    extract_proof,
    merkle_root,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
    check_proof,
    verify_merkle_proof,
)

from .contract_adapter import check_proof_contract_factory, contract_call_args


__all__ = [
    # Combiner
    "combine",
    "sort_join",
    # Encoding
    "ELEMENT_SIZE",
    "decode_element",
    "decode_proof",
    "encode_element",
    "encode_proof",
    "is_element_hex",
    # Tree
    "MerkleTree",
    "build_merkle_tree",
    "compute_tree_depth",
    "extract_proof",
    "merkle_root",
    # Verification
    "verify_merkle_proof",
    "check_proof",
    "MerkleProver",
    "MerkleVerifier",
    # Contract adapter
    "check_proof_contract_factory",
    "contract_call_args",
]
