"""
merkle-commit CLI

Command-line interface for building roots, extracting proofs and
verifying them.

Usage:
    python -m merkle_cli root 0x... 0x... [--json]
    python -m merkle_cli prove 0x... --file elements.txt --out proof.json
    python -m merkle_cli verify proof.json
    python -m merkle_cli config --show
"""

__version__ = "0.1.0"
