"""
Test fixtures package.

Provides factory functions for creating elements and trees.

Usage:
    from fixtures import make_elements, make_tree

    def test_something():
        tree = make_tree(5)
"""

from .common import (
    fake_hasher,
    make_element,
    make_element_hex,
    make_elements,
    make_tree,
    write_elements_file,
)

__all__ = [
    "fake_hasher",
    "make_element",
    "make_element_hex",
    "make_elements",
    "make_tree",
    "write_elements_file",
]
