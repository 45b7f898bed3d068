"""
Pytest configuration and shared fixtures for merkle-commit tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_elements = _common.make_elements


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def elements():
    """Provide seven distinct elements (odd count exercises carry-forward)."""
    return make_elements(7)


@pytest.fixture
def tree(elements):
    """Provide a keccak256 tree over the default elements."""
    from merkle_commit.merkle.merkle_tree import build_merkle_tree
    return build_merkle_tree(elements)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove MERKLE_* variables so config tests see defaults."""
    for name in ("HASH_ALGORITHM", "LOG_LEVEL", "LOG_FILE", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"MERKLE_{name}", raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
