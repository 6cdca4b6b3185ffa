# ShaVault Test Suite
"""
Test suite including:
- Known-answer vectors (FIPS 180-2, RFC 4231)
- Cross-checks against the cryptography package
- Invalid input handling

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
