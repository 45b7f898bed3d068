"""
CLI Prove Command

Extract an inclusion proof for one element.

Usage:
    merkle prove 0x<element> --elements 0x... 0x... [--file elements.txt] [--out proof.json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from merkle_commit.crypto.hashing import get_hasher
from merkle_commit.merkle.merkle_tree import MerkleTree
from merkle_commit.schemas.errors import MerkleException
from merkle_commit.schemas.proof import InclusionProof

from merkle_cli.inputs import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    collect_elements,
    hash_algorithm_for,
    wants_json,
)


logger = logging.getLogger(__name__)


def print_proof_human(proof: InclusionProof) -> None:
    """Print a proof in human-readable format."""
    print(f"element: {proof.element}")
    print(f"root: {proof.root}")
    print(f"hash_algorithm: {proof.hash_algorithm}")
    print(f"proof ({len(proof.proof)}):")
    for sibling in proof.proof:
        print(f"  {sibling}")
    print(f"packed: {proof.packed_proof}")


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        values = collect_elements(args.elements, args.file)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    algorithm = hash_algorithm_for(args)

    try:
        tree = MerkleTree.from_hex(values, hasher=get_hasher(algorithm))
        proof = InclusionProof.from_tree(tree, args.element, hash_algorithm=algorithm)
    except MerkleException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Proof for {proof.element} has {len(proof.proof)} entries")

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(proof.model_dump_json(indent=2) + "\n", encoding="utf-8")
        logger.info(f"Wrote proof to {out_path}")

    if wants_json(args):
        print(proof.model_dump_json(indent=2))
    elif not args.out:
        print_proof_human(proof)

    return EXIT_SUCCESS
