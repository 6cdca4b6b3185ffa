"""
SHA-256 Word Primitives

Bitwise building blocks of SHA-256 as defined in FIPS 180-4, section 4.1.2.
Every function works on unsigned 32-bit words and wraps modulo 2^32;
Python integers are unbounded, so each result is masked explicitly.

Components:
- Modular addition (add32)
- Logical shift and rotations (shr, rotr, rotl)
- Boolean mixing functions (ch, maj)
- Sigma functions: big sigma for compression, small sigma for the schedule
"""

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

WORD_BITS = 32


def add32(*words: int) -> int:
    """
    Add any number of 32-bit words modulo 2^32.

    Example:
        >>> add32(0xFFFFFFFF, 0xFFFFFFFF)
        4294967294
    """
    total = 0
    for word in words:
        total += word
    return total & MASK_32


def shr(x: int, n: int) -> int:
    """Logical (zero-fill) right shift."""
    return (x & MASK_32) >> n


def rotr(x: int, n: int) -> int:
    """Right rotate a 32-bit word. The amount is taken modulo 32."""
    n %= WORD_BITS
    x &= MASK_32
    return ((x >> n) | (x << (WORD_BITS - n))) & MASK_32


def rotl(x: int, n: int) -> int:
    """Left rotate a 32-bit word. The amount is taken modulo 32."""
    n %= WORD_BITS
    x &= MASK_32
    return ((x << n) | (x >> (WORD_BITS - n))) & MASK_32


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK_32


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def small_sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)


def small_sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)
