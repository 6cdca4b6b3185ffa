"""
Integration tests for ShaVault.

Tests the public package surface and the self-test entry point.
"""

import shavault
from shavault import main as selftest
from shavault.core_crypto.sha256 import sha256
from shavault.core_crypto.hmac_sha256 import hmac_sha256
from shavault.core_crypto.merkle import merkle_root


class TestPublicAPI:
    """The four top-level operations."""

    def test_hash(self):
        """shavault.hash returns the 32-byte digest."""
        assert shavault.hash(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_hash_hex(self):
        """shavault.hash_hex returns lowercase hex."""
        assert shavault.hash_hex(b"") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_hmac(self):
        """shavault.hmac is HMAC-SHA256."""
        assert shavault.hmac(b"key", b"msg") == hmac_sha256(b"key", b"msg")

    def test_merkle_root(self):
        """shavault.merkle_root is exported."""
        items = [bytes(32), bytes([1]) * 32]
        assert shavault.merkle_root(items) == merkle_root(items)

    def test_all_exports(self):
        """__all__ lists exactly the public operations."""
        assert set(shavault.__all__) == {'hash', 'hash_hex', 'hmac', 'merkle_root'}


class TestComposition:
    """Constructions layered on each other."""

    def test_hmac_over_merkle_root(self):
        """A Merkle root can be authenticated like any message."""
        items = [sha256(bytes([i])) for i in range(5)]
        root = merkle_root(items)
        tag = hmac_sha256(b"audit-key", root)
        assert len(tag) == 32
        assert tag != hmac_sha256(b"audit-key", merkle_root(items[:4]))


class TestSelfTest:
    """The shavault-selftest entry point."""

    def test_run_self_test_passes(self, capsys):
        """Every known-answer vector passes."""
        assert selftest.run_self_test() is True
        out = capsys.readouterr().out
        assert "FAIL" not in out

    def test_main_exit_code(self, capsys):
        """main returns 0 when everything passes."""
        assert selftest.main() == 0
        assert "All tests passed!" in capsys.readouterr().out
