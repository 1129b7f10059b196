"""Storage contract behind the persisted query registry."""

from datetime import timedelta
from typing import Protocol


class ICacheBackend(Protocol):
    """Async byte store keyed by registry keys.

    A write must be visible to the next read of the same key in the same
    process. Errors raised by an implementation propagate to the caller
    unchanged.
    """

    async def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None for a missing or expired key."""
        ...

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store bytes under a key, replacing any previous value.

        A None ``ttl`` leaves expiry to the implementation's default.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Remove a key. True means something was removed."""
        ...

    async def exists(self, key: str) -> bool:
        ...

    async def clear(self) -> None:
        """Remove everything this backend owns."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Remove keys matching a glob pattern and return how many went."""
        ...
