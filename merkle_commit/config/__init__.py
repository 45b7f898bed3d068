"""
Runtime Configuration Module

Provides configuration loading and management.
"""

from .runtime import (
    RuntimeConfig,
    get_default_config,
    load_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "get_default_config",
    "load_config",
    "set_default_config",
]
