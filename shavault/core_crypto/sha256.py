"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
No hashlib or third-party crypto library is involved; every stage of the
pipeline is written out here.

Pipeline:
- Padding: Pads message to multiple of 512 bits, embedding the bit length
- Parsing: Splits the padded message into blocks of sixteen 32-bit words
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds per block, chained from block to block
- Output: 256-bit (32-byte) big-endian digest
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from .primitives import (
    MASK_32,
    add32,
    big_sigma0,
    big_sigma1,
    ch,
    maj,
    small_sigma0,
    small_sigma1,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

BLOCK_SIZE = 64  # bytes per block (512 bits)
DIGEST_SIZE = 32  # bytes per digest (256 bits)
WORDS_PER_BLOCK = 16
SCHEDULE_LENGTH = 64
LENGTH_FIELD_SIZE = 8  # bytes used for the trailing bit length

# Largest message whose bit length fits in the 64-bit length field
MAX_MESSAGE_BYTES = (2 ** 64 - 1) // 8

# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL: Tuple[int, ...] = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


class MessageTooLongError(ValueError):
    """Raised when a message's bit length does not fit in 64 bits."""
    pass


# ============================================================================
# Padding
# ============================================================================

def pad_message(data: bytes) -> bytes:
    """
    Pad the message according to SHA-256 specification.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    When the 0x80 byte lands past offset 55 of the last block, the zero
    run spills into a whole extra block before the length field.

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)

    Raises:
        MessageTooLongError: If the bit length would overflow 64 bits
    """
    data = bytes(data)
    original_length = len(data)
    if original_length > MAX_MESSAGE_BYTES:
        raise MessageTooLongError(
            f"Message of {original_length} bytes exceeds the 2^64 - 1 bit limit"
        )
    original_bit_length = original_length * 8

    # Append zeros until length ≡ 448 mod 512 (56 mod 64 in bytes)
    terminated_length = original_length + 1
    padding_length = (56 - (terminated_length % BLOCK_SIZE)) % BLOCK_SIZE

    return b''.join((
        data,
        b'\x80',
        b'\x00' * padding_length,
        original_bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big'),
    ))


# ============================================================================
# Parsing
# ============================================================================

def _bytes_to_words(chunk: bytes) -> List[int]:
    """Convert a byte chunk into 32-bit words (big-endian)."""
    return [
        int.from_bytes(chunk[i:i + 4], byteorder='big')
        for i in range(0, len(chunk), 4)
    ]


def parse_blocks(padded: bytes) -> List[List[int]]:
    """
    Split a padded message into 512-bit blocks of sixteen 32-bit words.

    Args:
        padded: Output of pad_message

    Returns:
        Ordered list of blocks, each a list of 16 words

    Raises:
        ValueError: If the input length is not a multiple of 64 bytes
    """
    if len(padded) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Padded message length {len(padded)} is not a multiple of {BLOCK_SIZE}"
        )
    return [
        _bytes_to_words(padded[i:i + BLOCK_SIZE])
        for i in range(0, len(padded), BLOCK_SIZE)
    ]


# ============================================================================
# Message Schedule
# ============================================================================

def message_schedule(block: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For t from 16 to 63:
        W[t] = σ1(W[t-2]) + W[t-7] + σ0(W[t-15]) + W[t-16]   (mod 2^32)
    """
    if len(block) != WORDS_PER_BLOCK:
        raise ValueError(f"Block must have {WORDS_PER_BLOCK} words, got {len(block)}")

    w = list(block)
    for t in range(WORDS_PER_BLOCK, SCHEDULE_LENGTH):
        w.append(add32(
            small_sigma1(w[t - 2]),
            w[t - 7],
            small_sigma0(w[t - 15]),
            w[t - 16],
        ))
    return w


# ============================================================================
# Compression
# ============================================================================

def compress_block(state: Sequence[int], w: Sequence[int]) -> Tuple[int, ...]:
    """
    Perform 64 rounds of compression on the state.

    The input state is left untouched; the chained state for the next
    block is returned.

    Args:
        state: Current hash state (8 32-bit words)
        w: Message schedule (64 32-bit words)

    Returns:
        Updated hash state as a tuple of 8 words
    """
    if len(state) != 8:
        raise ValueError(f"State must have 8 words, got {len(state)}")
    if len(w) != SCHEDULE_LENGTH:
        raise ValueError(f"Schedule must have {SCHEDULE_LENGTH} words, got {len(w)}")

    # Initialize working variables
    a, b, c, d, e, f, g, h = state

    for i in range(SCHEDULE_LENGTH):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    # Feed-forward: add compressed chunk to current hash value
    return tuple(
        add32(old, new)
        for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


def compress(schedules: Iterable[Sequence[int]],
             state: Sequence[int] = H_INITIAL) -> Tuple[int, ...]:
    """
    Fold every schedule into the hash state, strictly in block order.

    Args:
        schedules: Message schedules, one per block, in message order
        state: Starting state (the SHA-256 IV unless chaining manually)

    Returns:
        Final 8-word state
    """
    current = tuple(state)
    for w in schedules:
        current = compress_block(current, w)
    return current


# ============================================================================
# Digest Serialization
# ============================================================================

def digest_to_bytes(state: Sequence[int]) -> bytes:
    """Serialize the 8-word state as 32 big-endian bytes."""
    return b''.join(word.to_bytes(4, byteorder='big') for word in state)


def digest_to_hex(digest: bytes) -> str:
    """Render a digest as lowercase hex, two digits per byte."""
    return bytes(digest).hex()


# ============================================================================
# Public API
# ============================================================================

def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    padded = pad_message(data)
    schedules = (message_schedule(block) for block in parse_blocks(padded))
    return digest_to_bytes(compress(schedules))


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character hexadecimal string
    """
    return digest_to_hex(sha256(data))


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))


def sha256_many(messages: Iterable[bytes], workers: Optional[int] = None) -> List[bytes]:
    """
    Hash independent messages, optionally on a thread pool.

    Each message gets its own private state, so the results are identical
    to hashing them one by one. Output order always matches input order.

    Args:
        messages: Messages to hash
        workers: Thread count; None or 1 hashes sequentially

    Returns:
        List of 32-byte digests
    """
    messages = list(messages)
    if workers is None or workers <= 1 or len(messages) < 2:
        return [sha256(m) for m in messages]

    logger.debug("Hashing %d messages on %d workers", len(messages), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(sha256, messages))


# Self-test when run directly
if __name__ == "__main__":
    from ..main import main
    raise SystemExit(main())
