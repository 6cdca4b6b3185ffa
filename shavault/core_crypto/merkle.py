"""
Merkle Tree Root Computation

A Merkle tree (hash tree) summarizes an ordered list of items in one hash:
- Leaf nodes are SHA-256 hashes of the raw items
- Each parent is SHA-256(left ‖ right) of its two children, no prefix
- The last remaining node is the root

Odd counts are handled by duplication:
- Leaf stage: the last RAW item is duplicated before hashing
- Reduction stage: the last node of an odd layer is duplicated

Only the current layer is kept while reducing; the tree itself is never
materialized.

Used in: Blockchain headers, batch integrity checks
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .sha256 import digest_to_hex, sha256

logger = logging.getLogger(__name__)


class EmptyTreeError(ValueError):
    """Raised when a Merkle root is requested for zero items."""
    pass


def load_leaves(items: Sequence[bytes], workers: Optional[int] = None) -> List[bytes]:
    """
    Hash every item into a leaf node, preserving order.

    If the item count is odd, the last raw item is duplicated first, so
    the returned list always has an even length of at least 2.

    Args:
        items: Ordered, non-empty sequence of data items
        workers: Thread count for hashing leaves; None or 1 is sequential

    Returns:
        List of 32-byte leaf hashes

    Raises:
        EmptyTreeError: If items is empty
    """
    stored = list(items)
    if not stored:
        raise EmptyTreeError("Cannot build Merkle tree with no leaves")

    if len(stored) % 2 == 1:
        stored.append(stored[-1])

    if workers is None or workers <= 1:
        return [sha256(item) for item in stored]

    logger.debug("Hashing %d leaves on %d workers", len(stored), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(sha256, stored))


def hash_pair(left: bytes, right: bytes) -> bytes:
    """
    Hash two child nodes to create their parent.

    Args:
        left: Left child hash
        right: Right child hash

    Returns:
        SHA-256 of the 64-byte concatenation
    """
    return sha256(bytes(left) + bytes(right))


def reduce_layer(layer: Sequence[bytes]) -> List[bytes]:
    """
    Compute the next layer up from the given one.

    The last node is duplicated when the layer is odd, then adjacent
    pairs (0-1, 2-3, ...) are hashed left to right.
    """
    nodes = list(layer)
    if len(nodes) % 2 == 1:
        nodes.append(nodes[-1])
    return [hash_pair(nodes[i], nodes[i + 1]) for i in range(0, len(nodes), 2)]


def merkle_root(items: Sequence[bytes], workers: Optional[int] = None) -> bytes:
    """
    Compute the Merkle root of an ordered sequence of items.

    A single item degenerates to H(H(item) ‖ H(item)).

    Args:
        items: Ordered, non-empty sequence of data items
        workers: Thread count for the leaf stage only

    Returns:
        32-byte root hash

    Raises:
        EmptyTreeError: If items is empty

    Example:
        >>> root = merkle_root([b"tx1", b"tx2", b"tx3"])
        >>> len(root)
        32
    """
    layer = load_leaves(items, workers=workers)
    while len(layer) > 1:
        logger.debug("Reducing Merkle layer of %d nodes", len(layer))
        layer = reduce_layer(layer)
    return layer[0]


def merkle_root_hex(items: Sequence[bytes], workers: Optional[int] = None) -> str:
    """Merkle root as a hexadecimal string."""
    return digest_to_hex(merkle_root(items, workers=workers))


# Self-test when run directly
if __name__ == "__main__":
    print("Merkle Root Implementation Test")
    print("=" * 60)

    # Test 1: Even number of leaves
    print("\n[Test 1] Even number of leaves (4)")
    leaves = [b"tx1", b"tx2", b"tx3", b"tx4"]
    root = merkle_root(leaves)
    h = [sha256(leaf) for leaf in leaves]
    expected = sha256(sha256(h[0] + h[1]) + sha256(h[2] + h[3]))
    even_ok = root == expected
    print(f"Root: {root.hex()[:32]}...  Match: {even_ok}")

    # Test 2: Odd count equals the same list with the last item repeated
    print("\n[Test 2] Odd number of leaves (5)")
    odd = [b"a", b"b", b"c", b"d", b"e"]
    odd_ok = merkle_root(odd) == merkle_root(odd + [odd[-1]])
    print(f"Root: {merkle_root_hex(odd)[:32]}...  Duplication consistent: {odd_ok}")

    # Test 3: Single leaf tree
    print("\n[Test 3] Single leaf tree")
    single_leaf = sha256(b"only_one")
    single_ok = merkle_root([b"only_one"]) == sha256(single_leaf + single_leaf)
    print(f"Match: {single_ok}")

    print("\n" + "=" * 60)
    tests_passed = even_ok and odd_ok and single_ok
    print(f"Overall: {'All tests passed!' if tests_passed else 'Some tests failed!'}")
