"""
CLI Root Command

Compute the Merkle root of a set of elements.

Usage:
    merkle root 0x<64 hex> 0x<64 hex> ... [--file elements.txt] [--hash sha256] [--json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace

from merkle_commit.crypto.hashing import get_hasher
from merkle_commit.merkle.merkle_tree import MerkleTree
from merkle_commit.schemas.errors import MerkleException
from merkle_commit.schemas.proof import TreeCommitment

from merkle_cli.inputs import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    collect_elements,
    hash_algorithm_for,
    wants_json,
)


logger = logging.getLogger(__name__)


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

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
    logger.info(f"Building tree over {len(values)} input values ({algorithm})")

    try:
        tree = MerkleTree.from_hex(values, hasher=get_hasher(algorithm))
    except MerkleException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    commitment = TreeCommitment.from_tree(tree, hash_algorithm=algorithm)
    logger.debug(f"Tree has {commitment.element_count} elements, depth {commitment.depth}")

    if wants_json(args):
        print(commitment.model_dump_json(indent=2))
    else:
        print(commitment.root)

    return EXIT_SUCCESS
