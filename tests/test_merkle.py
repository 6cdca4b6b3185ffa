"""
Unit tests for Merkle root computation.
"""

import os

import pytest
from shavault.core_crypto.sha256 import sha256
from shavault.core_crypto.merkle import (
    EmptyTreeError, load_leaves, hash_pair, reduce_layer, merkle_root, merkle_root_hex,
)


def _items(*fill_bytes):
    """Build 32-byte items, each filled with one byte value."""
    return [bytes([b]) * 32 for b in fill_bytes]


class TestLeafLoading:
    """Unit tests for the leaf stage."""

    def test_even_items(self):
        """Each item is hashed in order."""
        a, b = _items(0x19, 0xf2)
        assert load_leaves([a, b]) == [sha256(a), sha256(b)]

    def test_odd_items_duplicate_last(self):
        """Odd count duplicates the last raw item before hashing."""
        a, b, c = _items(0x64, 0x3c, 0x6f)
        assert load_leaves([a, b, c]) == [sha256(a), sha256(b), sha256(c), sha256(c)]

    def test_single_item(self):
        """One item yields two identical leaves."""
        (a,) = _items(0x01)
        assert load_leaves([a]) == [sha256(a), sha256(a)]

    def test_caller_list_untouched(self):
        """Duplication happens on a private copy."""
        items = _items(1, 2, 3)
        load_leaves(items)
        assert len(items) == 3

    def test_leaves_match_reference(self, reference_sha256):
        """Leaf hashes agree with the cryptography package."""
        items = [os.urandom(32) for _ in range(6)]
        assert load_leaves(items) == [reference_sha256(i) for i in items]

    def test_parallel_preserves_order(self):
        """Thread pool leaf hashing keeps input order."""
        items = [os.urandom(32) for _ in range(17)]
        assert load_leaves(items, workers=4) == load_leaves(items)

    def test_wide_item_memoryview(self):
        """Items are hashed over their raw bytes, whatever the item format."""
        raw = bytes(range(32))
        view = memoryview(raw).cast("I")
        assert load_leaves([view]) == load_leaves([raw])
        assert merkle_root([view]) == merkle_root([raw])


class TestBranching:
    """Unit tests for parent hashing and layer reduction."""

    def test_hash_pair(self):
        """Parent is the hash of the raw 64-byte concatenation."""
        a, b = _items(0xcc, 0x1d)
        assert hash_pair(a, b) == sha256(a + b)

    def test_hash_pair_order_matters(self):
        """Left and right are not interchangeable."""
        a, b = _items(0xcc, 0x1d)
        assert hash_pair(a, b) != hash_pair(b, a)

    def test_reduce_even_layer(self):
        """Adjacent pairs are hashed left to right."""
        n = [sha256(x) for x in _items(1, 2, 3, 4)]
        assert reduce_layer(n) == [hash_pair(n[0], n[1]), hash_pair(n[2], n[3])]

    def test_reduce_odd_layer(self):
        """Odd layer duplicates its last node."""
        n = [sha256(x) for x in _items(1, 2, 3)]
        assert reduce_layer(n) == [hash_pair(n[0], n[1]), hash_pair(n[2], n[2])]


class TestMerkleRoot:
    """Unit tests for the full root computation."""

    def test_eight_items(self):
        """Balanced tree over eight items."""
        items = _items(0x5c, 0x36, 0xcd, 0xa3, 0x94, 0x30, 0x08, 0x23)
        h = [sha256(x) for x in items]
        hab = sha256(h[0] + h[1])
        hcd = sha256(h[2] + h[3])
        hef = sha256(h[4] + h[5])
        hgh = sha256(h[6] + h[7])
        expected = sha256(sha256(hab + hcd) + sha256(hef + hgh))
        assert merkle_root(items) == expected

    def test_seven_items(self):
        """Seven items duplicate the seventh at the leaf stage."""
        items = _items(0x94, 0x08, 0x30, 0x5c, 0x9f, 0xff, 0x23)
        h = [sha256(x) for x in items]
        hab = sha256(h[0] + h[1])
        hcd = sha256(h[2] + h[3])
        hef = sha256(h[4] + h[5])
        hgg = sha256(h[6] + h[6])
        expected = sha256(sha256(hab + hcd) + sha256(hef + hgg))
        assert merkle_root(items) == expected

    def test_odd_inner_layer_duplicates_last_node(self):
        """Six leaves reduce to an odd layer of three."""
        items = _items(1, 2, 3, 4, 5, 6)
        h = [sha256(x) for x in items]
        layer = [sha256(h[0] + h[1]), sha256(h[2] + h[3]), sha256(h[4] + h[5])]
        expected = sha256(sha256(layer[0] + layer[1]) + sha256(layer[2] + layer[2]))
        assert merkle_root(items) == expected

    def test_single_item(self):
        """Single item root is H(H(item) ‖ H(item))."""
        item = os.urandom(32)
        leaf = sha256(item)
        assert merkle_root([item]) == sha256(leaf + leaf)

    @pytest.mark.parametrize("n", [1, 3, 5, 7, 9, 11])
    def test_odd_count_equals_explicit_duplicate(self, n):
        """n odd items give the same root as n + 1 with the last repeated."""
        items = [os.urandom(32) for _ in range(n)]
        assert merkle_root(items) == merkle_root(items + [items[-1]])

    def test_order_matters(self):
        """Swapping two items changes the root."""
        items = _items(1, 2, 3, 4)
        swapped = [items[1], items[0]] + items[2:]
        assert merkle_root(items) != merkle_root(swapped)

    def test_parallel_root_identical(self):
        """Parallel leaf hashing gives the same root."""
        items = [os.urandom(32) for _ in range(13)]
        assert merkle_root(items, workers=4) == merkle_root(items)

    def test_hex(self):
        """Hex view matches the raw root."""
        items = _items(7, 8, 9)
        assert merkle_root_hex(items) == merkle_root(items).hex()

    def test_deterministic(self):
        """Same items always give the same root."""
        items = _items(1, 2, 3)
        assert merkle_root(items) == merkle_root(list(items))

    def test_returns_32_bytes(self):
        """Root is a 32-byte hash."""
        assert len(merkle_root(_items(1, 2))) == 32

    def test_empty_rejected(self):
        """Empty input has no root."""
        with pytest.raises(EmptyTreeError):
            merkle_root([])

    def test_empty_error_is_value_error(self):
        """EmptyTreeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            load_leaves([])
