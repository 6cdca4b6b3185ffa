"""
HMAC-SHA256 (RFC 2104) on top of the from-scratch SHA-256.

    HMAC(K, m) = H((K' ⊕ opad) ‖ H((K' ⊕ ipad) ‖ m))

K' is the key normalized to exactly one block: keys longer than 64 bytes
are hashed first, shorter keys are right-padded with zero bytes.
"""

import hmac
import logging

from .sha256 import BLOCK_SIZE, DIGEST_SIZE, digest_to_hex, sha256

logger = logging.getLogger(__name__)


IPAD_BYTE = 0x36
OPAD_BYTE = 0x5c

IPAD = bytes([IPAD_BYTE]) * BLOCK_SIZE
OPAD = bytes([OPAD_BYTE]) * BLOCK_SIZE


def normalize_key(key: bytes) -> bytes:
    """
    Bring a key of any length to exactly BLOCK_SIZE bytes.

    Always returns a fresh bytes object; the caller's key is never touched.

    Args:
        key: Raw key material (may be empty)

    Returns:
        64-byte block-sized key
    """
    key = bytes(key)
    if len(key) > BLOCK_SIZE:
        logger.debug("Key of %d bytes exceeds block size, hashing it first", len(key))
        key = sha256(key)
    return key.ljust(BLOCK_SIZE, b'\x00')


def _xor_pad(key: bytes, pad: bytes) -> bytes:
    """XOR a block-sized key with a block-sized pad."""
    return bytes(k ^ p for k, p in zip(key, pad))


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    """
    Compute the HMAC-SHA256 tag of a message.

    Args:
        key: Secret key of any length, including zero
        message: Message to authenticate

    Returns:
        32-byte authentication tag

    Example:
        >>> hmac_sha256(b"key", b"The quick brown fox jumps over the lazy dog").hex()[:16]
        'f7bc83f430538424'
    """
    block_key = normalize_key(key)
    inner_key = _xor_pad(block_key, IPAD)
    outer_key = _xor_pad(block_key, OPAD)

    inner_hash = sha256(inner_key + bytes(message))
    return sha256(outer_key + inner_hash)


def hmac_sha256_hex(key: bytes, message: bytes) -> str:
    """Compute HMAC-SHA256 and return the tag as a hex string."""
    return digest_to_hex(hmac_sha256(key, message))


def verify_hmac(key: bytes, message: bytes, tag: bytes) -> bool:
    """
    Check a candidate tag against the expected HMAC-SHA256 tag.

    Uses constant-time comparison to avoid leaking how many leading
    bytes matched.

    Args:
        key: Secret key
        message: Message the tag claims to authenticate
        tag: Candidate 32-byte tag

    Returns:
        True if the tag is valid, False otherwise
    """
    tag = bytes(tag)
    if len(tag) != DIGEST_SIZE:
        return False
    return hmac.compare_digest(hmac_sha256(key, message), tag)


# Self-test when run directly
if __name__ == "__main__":
    # RFC 4231 test cases
    test_cases = [
        (b"\x0b" * 20, b"Hi There",
         "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7"),
        (b"Jefe", b"what do ya want for nothing?",
         "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"),
        (b"\xaa" * 131, b"Test Using Larger Than Block-Size Key - Hash Key First",
         "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54"),
    ]

    print("HMAC-SHA256 Implementation Test")
    print("=" * 60)

    all_passed = True
    for key, msg, expected in test_cases:
        result = hmac_sha256_hex(key, msg)
        passed = result == expected
        all_passed = all_passed and passed
        print(f"\nKey length: {len(key)}  Message: {msg[:40]}")
        print(f"Status:   {'✓ PASS' if passed else '✗ FAIL'}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
