"""
Canonical Hash Combiner Unit Tests
Tests for merkle_commit/merkle/combiner.py
"""
from merkle_commit.crypto.hashing import keccak256, sha256
from merkle_commit.merkle.combiner import combine, sort_join

from fixtures import fake_hasher, make_element


class TestSortJoin:
    """Tests for sort_join()."""

    def test_orders_ascending(self):
        """Smaller value comes first regardless of argument order."""
        low = b"\x00" * 31 + b"\x01"
        high = b"\x01" + b"\x00" * 31
        assert sort_join(high, low) == low + high
        assert sort_join(low, high) == low + high

    def test_unsigned_byte_comparison(self):
        """0x80 sorts after 0x7f (bytes are unsigned)."""
        a = b"\x7f" * 32
        b = b"\x80" * 32
        assert sort_join(b, a) == a + b

    def test_equal_values(self):
        """Equal values simply concatenate."""
        a = make_element(1)
        assert sort_join(a, a) == a + a


class TestCombine:
    """Tests for combine()."""

    def test_commutative(self):
        """combine(a, b) == combine(b, a)."""
        a, b = make_element(1), make_element(2)
        assert combine(a, b) == combine(b, a)

    def test_hashes_sorted_concatenation(self):
        """Result is hasher(min + max)."""
        a, b = make_element(1), make_element(2)
        low, high = sorted([a, b])
        assert combine(a, b) == keccak256(low + high)

    def test_second_absent_returns_first(self):
        """Missing second value carries first forward unchanged."""
        a = make_element(1)
        assert combine(a, None) == a
        assert combine(a, b"") == a

    def test_first_absent_returns_second(self):
        """Missing first value carries second forward unchanged."""
        b = make_element(2)
        assert combine(None, b) == b
        assert combine(b"", b) == b

    def test_both_absent(self):
        """Nothing in, nothing out."""
        assert combine(None, None) is None

    def test_injected_hasher(self):
        """The hasher argument is used for the pair hash."""
        a, b = make_element(1), make_element(2)
        low, high = sorted([a, b])
        assert combine(a, b, sha256) == sha256(low + high)
        assert combine(a, b, fake_hasher) == fake_hasher(low + high)
        assert combine(a, b, fake_hasher) != combine(a, b)
