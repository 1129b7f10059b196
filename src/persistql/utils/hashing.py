"""Hashing utilities for persisted query identification."""

import hashlib
import re

_SHA256_HEX = re.compile(r"^[0-9a-f]{64}$")


def hash_query(query: str) -> str:
    """Create the persisted-query hash of a query string.

    The text is hashed exactly as sent. Clients compute the hash over
    the same bytes, so no whitespace normalization is applied.

    Args:
        query: The GraphQL query string.

    Returns:
        The lowercase hexadecimal SHA-256 digest (64 chars).
    """
    return hashlib.sha256(query.encode("utf-8")).hexdigest()


def is_sha256_hex(value: str) -> bool:
    """Check whether a value looks like a hex-encoded SHA-256 digest.

    Args:
        value: The candidate hash.

    Returns:
        True if the value is 64 lowercase hexadecimal characters.
    """
    return bool(_SHA256_HEX.match(value))
