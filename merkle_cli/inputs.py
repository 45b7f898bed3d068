"""
Shared argument handling for CLI commands.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path
from typing import Sequence

from merkle_commit.config.runtime import RuntimeConfig


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def read_elements_file(path: Path) -> list[str]:
    """
    Read one hex element per line.

    Blank lines and lines starting with # are skipped.
    """
    if not path.exists():
        raise FileNotFoundError(f"Elements file not found: {path}")

    values = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            values.append(line)
    logger.debug(f"Read {len(values)} elements from {path}")
    return values


def collect_elements(values: Sequence[str] | None, file: str | None) -> list[str]:
    """Merge elements given on the command line with those in --file."""
    collected = list(values or [])
    if file:
        collected.extend(read_elements_file(Path(file)))
    return collected


def get_config(args: Namespace) -> RuntimeConfig:
    """Config attached by main(), or defaults when a command is called directly."""
    config = getattr(args, "cli_config", None)
    return config if config is not None else RuntimeConfig()


def hash_algorithm_for(args: Namespace) -> str:
    """--hash wins over the configured algorithm."""
    return (getattr(args, "hash", None) or get_config(args).hash_algorithm).lower()


def wants_json(args: Namespace) -> bool:
    """--json wins over the configured output format."""
    return bool(getattr(args, "json", False)) or get_config(args).output_format == "json"
