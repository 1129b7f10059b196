"""Utilities for persistql."""

from persistql.utils.hashing import hash_query, is_sha256_hex

__all__ = [
    "hash_query",
    "is_sha256_hex",
]
