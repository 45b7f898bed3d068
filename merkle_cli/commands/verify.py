"""
CLI Verify Command

Verify an inclusion proof offline, either from a proof JSON file or from
components given on the command line.

Usage:
    merkle verify proof.json [--json]
    merkle verify --root 0x... --element 0x... --proof 0x... 0x... [--hash sha256]
    merkle verify --root 0x... --element 0x... --packed 0x<siblings concatenated>
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from pydantic import ValidationError

from merkle_commit.merkle.encoding import decode_proof, encode_element
from merkle_commit.schemas.errors import MerkleException
from merkle_commit.schemas.proof import InclusionProof

from merkle_cli.inputs import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    get_config,
    hash_algorithm_for,
    wants_json,
)


logger = logging.getLogger(__name__)


def load_proof_file(path: Path) -> InclusionProof:
    """Load and validate an InclusionProof JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Proof file not found: {path}")
    return InclusionProof.model_validate_json(path.read_text(encoding="utf-8"))


def check_file_algorithm(args: Namespace, proof: InclusionProof) -> None:
    """
    Compare the requested hash algorithm with the one recorded in a proof file.

    The file's label is what verification uses. An explicit --hash that
    disagrees is an error; a differing configured default only warns.

    Raises:
        ValueError: If --hash conflicts with the proof file
    """
    requested = getattr(args, "hash", None)
    if requested and requested.lower() != proof.hash_algorithm:
        raise ValueError(
            f"--hash {requested} conflicts with the proof file's "
            f"hash_algorithm {proof.hash_algorithm}"
        )

    configured = get_config(args).hash_algorithm
    if not requested and configured != proof.hash_algorithm:
        logger.warning(
            f"Proof file uses {proof.hash_algorithm}, ignoring configured {configured}"
        )


def proof_from_args(args: Namespace) -> InclusionProof:
    """
    Assemble an InclusionProof from --root/--element/--proof/--packed.

    Raises:
        ValueError: If root or element is missing
        InvalidElementError: If --packed is malformed
    """
    if not args.root or not args.element:
        raise ValueError("--root and --element are required without a proof file")

    siblings = list(args.proof or [])
    if args.packed:
        siblings.extend(encode_element(s) for s in decode_proof(args.packed))

    return InclusionProof(
        element=args.element,
        root=args.root,
        proof=siblings,
        hash_algorithm=hash_algorithm_for(args),
    )


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0=valid, 1=malformed input, 2=proof does not verify)
    """
    try:
        if args.proof_path:
            proof = load_proof_file(Path(args.proof_path))
            check_file_algorithm(args, proof)
        else:
            proof = proof_from_args(args)
    except (FileNotFoundError, ValueError, ValidationError, MerkleException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    ok = proof.verify()

    if wants_json(args):
        print(json.dumps({
            "ok": ok,
            "element": proof.element,
            "root": proof.root,
            "proof_length": len(proof.proof),
            "hash_algorithm": proof.hash_algorithm,
        }, indent=2))
    else:
        print(f"element: {proof.element}")
        print(f"root: {proof.root}")
        print(f"ok: {str(ok).lower()}")

    if ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS

    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
