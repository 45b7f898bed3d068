"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkle_cli root ELEMENT... [--file PATH] [--hash NAME] [--json]
    python -m merkle_cli prove ELEMENT [--elements ...] [--file PATH] [--out PATH] [--json]
    python -m merkle_cli verify [PROOF_JSON] [--root R --element E --proof P...] [--json]
    python -m merkle_cli config --show

Environment Variables:
    MERKLE_HASH_ALGORITHM       keccak256 (default) or sha256
    MERKLE_LOG_LEVEL            Log level (default: INFO)
    MERKLE_LOG_FILE             Also write logs to this file
    MERKLE_OUTPUT_FORMAT        human (default) or json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from merkle_commit.crypto.hashing import HASHERS
from merkle_commit.config.runtime import load_config

from merkle_cli.commands import root, prove, verify
from merkle_cli.inputs import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, get_config


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--hash",
        type=str,
        choices=sorted(HASHERS),
        default=None,
        help="Hash algorithm (default: from config, keccak256)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle",
        description="Build sorted Merkle roots, extract inclusion proofs, and verify them.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./merkle.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the Merkle root of a set of elements",
        description="Elements are 0x-prefixed 32-byte hex values; order and duplicates do not matter.",
    )
    root_parser.add_argument(
        "elements",
        nargs="*",
        help="Elements as 0x-prefixed hex",
    )
    root_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="File with one hex element per line",
    )
    _add_common_options(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Extract an inclusion proof for one element",
        description="Build the tree over --elements/--file and emit the proof for ELEMENT.",
    )
    prove_parser.add_argument(
        "element",
        type=str,
        help="Element to prove, 0x-prefixed hex",
    )
    prove_parser.add_argument(
        "--elements", "-e",
        nargs="*",
        default=None,
        help="Tree elements as 0x-prefixed hex",
    )
    prove_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="File with one hex element per line",
    )
    prove_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the proof JSON to this path",
    )
    _add_common_options(prove_parser)
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof",
        description="Verify a proof JSON file, or a proof given as --root/--element/--proof.",
    )
    verify_parser.add_argument(
        "proof_path",
        nargs="?",
        default=None,
        help="Path to a proof JSON file produced by 'prove'",
    )
    verify_parser.add_argument("--root", type=str, default=None, help="Expected root")
    verify_parser.add_argument("--element", type=str, default=None, help="Candidate element")
    verify_parser.add_argument(
        "--proof",
        nargs="*",
        default=None,
        help="Sibling values, leaf to root",
    )
    verify_parser.add_argument(
        "--packed",
        type=str,
        default=None,
        help="Siblings concatenated into one 0x-prefixed hex string",
    )
    _add_common_options(verify_parser)
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.show:
        print(json.dumps(get_config(args).to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: merkle config --show")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
