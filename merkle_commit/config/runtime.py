"""
Runtime Configuration

Central configuration for hashing and CLI output.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from merkle_commit.crypto.hashing import DEFAULT_HASH_ALGORITHM, Hasher, get_hasher

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MERKLE_"

OUTPUT_FORMATS = ("human", "json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RuntimeConfig:
    """
    Runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    log_level: str = "INFO"
    log_file: Optional[str] = None
    output_format: str = "human"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Validate names at load time
        get_hasher(self.hash_algorithm)
        self.hash_algorithm = self.hash_algorithm.lower()
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}"
            )

    @property
    def hasher(self) -> Hasher:
        """The configured hash function."""
        return get_hasher(self.hash_algorithm)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLE_HASH_ALGORITHM: keccak256 or sha256
        - MERKLE_LOG_LEVEL: Log level name
        - MERKLE_LOG_FILE: Also log to this file
        - MERKLE_OUTPUT_FORMAT: human or json
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides["hash_algorithm"] = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
            overrides["output_format"] = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human").lower()

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(
            hash_algorithm=data.get("hash_algorithm", DEFAULT_HASH_ALGORITHM),
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
            output_format=data.get("output_format", "human"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        data = self.to_dict()
        data.update(overrides)
        return self.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hash_algorithm": self.hash_algorithm,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "output_format": self.output_format,
            "extra": dict(self.extra),
        }


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from an optional YAML file, then overlay env vars.

    Without an explicit path, ./merkle.yaml is used when present.
    """
    if config_path is None:
        default_path = Path.cwd() / "merkle.yaml"
        if default_path.exists():
            config_path = default_path

    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        config = RuntimeConfig()

    return config.with_env_overrides()


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: RuntimeConfig) -> None:
    """Set the default runtime configuration."""
    global _default_config
    _default_config = config
