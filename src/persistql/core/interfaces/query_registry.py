"""Query registry interface."""

from typing import Protocol


class IQueryRegistry(Protocol):
    """Contract for the hash to query text store used during resolution."""

    async def lookup(self, sha256_hash: str) -> str | None:
        """Return the query text registered for a hash.

        Args:
            sha256_hash: The persisted query hash.

        Returns:
            The registered query text, or None if unknown or evicted.
        """
        ...

    async def register(self, sha256_hash: str, query: str) -> None:
        """Store the query text for a hash.

        Registering a different text under an existing hash overwrites it.

        Args:
            sha256_hash: The persisted query hash.
            query: The query text.
        """
        ...

    async def invalidate(self, sha256_hash: str) -> bool:
        """Remove the query registered for a hash.

        Returns:
            True if a query was registered and has been removed.
        """
        ...
