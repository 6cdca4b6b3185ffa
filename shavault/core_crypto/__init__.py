# Core Cryptography Module
"""
From-scratch SHA-256 and the constructions built on it:
- Word primitives (rotations, shifts, sigma functions)
- SHA-256 hashing pipeline
- HMAC-SHA256
- Merkle tree roots
"""
