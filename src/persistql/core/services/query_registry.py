"""Persisted query registry - hash to query text store."""

import logging

from persistql.core.entities.apq_config import APQConfig
from persistql.core.entities.registry_key import RegistryKey
from persistql.core.interfaces.cache_backend import ICacheBackend

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"


class PersistedQueryRegistry:
    """Domain service storing registered queries in a cache backend.

    Query texts are stored under content-addressed, namespaced keys
    (``<namespace>_<sha256>``), so the registry can live in a backend
    shared with other cache regions. Backend errors are not caught.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        config: APQConfig | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            backend: The cache backend to use for storage.
            config: Optional configuration. Uses defaults if not provided.
        """
        self._backend = backend
        self._config = config or APQConfig()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._registrations = 0

    @property
    def backend(self) -> ICacheBackend:
        return self._backend

    @property
    def config(self) -> APQConfig:
        """Get the registry configuration."""
        return self._config

    @property
    def stats(self) -> dict[str, int]:
        """Get registry statistics.

        Returns:
            Dictionary with hits, misses, registrations and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "registrations": self._registrations,
            "total": self._hits + self._misses,
        }

    def key_for(self, sha256_hash: str) -> str:
        """Build the backend key of a hash.

        Args:
            sha256_hash: The persisted query hash.

        Returns:
            The namespaced cache key.
        """
        return str(RegistryKey(namespace=self._config.namespace, query_hash=sha256_hash))

    async def lookup(self, sha256_hash: str) -> str | None:
        """Return the query text registered for a hash.

        Args:
            sha256_hash: The persisted query hash.

        Returns:
            The registered query text, or None if unknown or evicted.
        """
        cached = await self._backend.get(self.key_for(sha256_hash))

        if cached is None:
            self._misses += 1
            logger.debug("Persisted query miss: %s", sha256_hash)
            return None

        self._hits += 1
        logger.debug("Persisted query hit: %s", sha256_hash)
        return cached.decode(_ENCODING)

    async def register(self, sha256_hash: str, query: str) -> None:
        """Store the query text for a hash.

        Last write wins: a different text registered under an existing
        hash replaces the previous one.

        Args:
            sha256_hash: The persisted query hash.
            query: The query text.
        """
        await self._backend.set(
            self.key_for(sha256_hash),
            query.encode(_ENCODING),
            self._config.ttl,
        )
        self._registrations += 1
        logger.debug("Registered persisted query: %s", sha256_hash)

    async def invalidate(self, sha256_hash: str) -> bool:
        """Remove the query registered for a hash.

        Args:
            sha256_hash: The persisted query hash.

        Returns:
            True if a query was registered and has been removed.
        """
        return await self._backend.delete(self.key_for(sha256_hash))

    async def clear(self) -> int:
        """Remove every registered query of this registry's namespace.

        Keys of other namespaces sharing the backend are left untouched.

        Returns:
            Number of queries removed.
        """
        count = await self._backend.delete_pattern(
            RegistryKey.pattern(self._config.namespace)
        )
        self._hits = 0
        self._misses = 0
        self._registrations = 0
        logger.debug("Cleared %d persisted queries", count)
        return count
