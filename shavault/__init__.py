# ShaVault
"""
SHA-256, HMAC-SHA256 and Merkle roots implemented from first principles.

Public operations:
- hash(message) -> 32-byte digest
- hash_hex(message) -> 64-character lowercase hex digest
- hmac(key, message) -> 32-byte tag
- merkle_root(items) -> 32-byte root
"""

import logging

from .core_crypto.sha256 import sha256 as hash
from .core_crypto.sha256 import sha256_hex as hash_hex
from .core_crypto.hmac_sha256 import hmac_sha256 as hmac
from .core_crypto.merkle import merkle_root

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    'hash',
    'hash_hex',
    'hmac',
    'merkle_root',
]
