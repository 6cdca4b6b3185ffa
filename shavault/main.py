"""
ShaVault - Self-Test Entry Point

Runs the published known-answer vectors against the from-scratch
implementations and reports PASS/FAIL for each one.
"""

import sys

from .core_crypto.sha256 import sha256, sha256_hex
from .core_crypto.hmac_sha256 import hmac_sha256_hex
from .core_crypto.merkle import merkle_root


# FIPS 180-2 examples
SHA256_VECTORS = [
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
]

# RFC 4231 test cases 1, 2 and 6
HMAC_VECTORS = [
    (b"\x0b" * 20, b"Hi There",
     "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7"),
    (b"Jefe", b"what do ya want for nothing?",
     "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"),
    (b"\xaa" * 131, b"Test Using Larger Than Block-Size Key - Hash Key First",
     "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54"),
]


def print_result(label: str, passed: bool) -> None:
    status = "✓ PASS" if passed else "✗ FAIL"
    print(f"  {status}  {label}")


def run_self_test() -> bool:
    """Run every known-answer check. Returns True if all passed."""
    all_passed = True

    print("\nSHA-256")
    for data, expected in SHA256_VECTORS:
        passed = sha256_hex(data) == expected
        all_passed = all_passed and passed
        print_result(repr(data[:32]), passed)

    print("\nHMAC-SHA256")
    for key, msg, expected in HMAC_VECTORS:
        passed = hmac_sha256_hex(key, msg) == expected
        all_passed = all_passed and passed
        print_result(f"key={len(key)} bytes, msg={msg[:24]!r}", passed)

    print("\nMerkle root")
    item = bytes(32)
    leaf = sha256(item)
    passed = merkle_root([item]) == sha256(leaf + leaf)
    all_passed = all_passed and passed
    print_result("single item", passed)

    return all_passed


def main():
    """Main entry point for the ShaVault self-test."""
    print("=" * 50)
    print("ShaVault Self-Test")
    print("=" * 50)

    all_passed = run_self_test()

    print("\n" + "=" * 50)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
