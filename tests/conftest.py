"""Shared fixtures: reference implementations from the cryptography package."""

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac


def _reference_sha256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def _reference_hmac(key: bytes, data: bytes) -> bytes:
    mac = crypto_hmac.HMAC(key, hashes.SHA256())
    mac.update(data)
    return mac.finalize()


@pytest.fixture
def reference_sha256():
    """SHA-256 from the cryptography package."""
    return _reference_sha256


@pytest.fixture
def reference_hmac():
    """HMAC-SHA256 from the cryptography package."""
    return _reference_hmac
