"""Shared persisted query storage on Redis."""

from datetime import timedelta
from typing import Optional

import redis.asyncio as redis


class RedisCacheBackend:
    """Redis cache backend shared by every worker of a deployment.

    A query registered by one process is immediately visible to all
    others. Keys live under ``<key_prefix>:`` so the registry can share a
    Redis database with other applications.

    Usage:
        backend = RedisCacheBackend("redis://localhost:6379/0")
        registry = PersistedQueryRegistry(backend)
        ...
        await backend.close()
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "persistql",
        default_ttl: Optional[int] = None,
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL. Ignored if ``client`` is given.
            key_prefix: Prefix for all keys written by this backend.
            default_ttl: Expiry in seconds for entries stored without a TTL.
                None keeps them until deleted or evicted by Redis.
            client: Already configured Redis client to use.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, key: str) -> Optional[bytes]:
        return await self._redis.get(self._namespaced(key))

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store a value, expiring after ``ttl`` or the default TTL."""
        expire = int(ttl.total_seconds()) if ttl is not None else self._default_ttl
        await self._redis.set(self._namespaced(key), value, ex=expire)

    async def delete(self, key: str) -> bool:
        return await self._redis.delete(self._namespaced(key)) > 0

    async def exists(self, key: str) -> bool:
        return await self._redis.exists(self._namespaced(key)) > 0

    async def clear(self) -> None:
        """Remove every key under this backend's prefix.

        Other keys of the Redis database are left untouched.
        """
        await self._unlink_matching(f"{self._key_prefix}:*")

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching a glob pattern relative to the prefix.

        Returns:
            Number of keys deleted.
        """
        return await self._unlink_matching(self._namespaced(pattern))

    async def _unlink_matching(self, match: str) -> int:
        # SCAN keeps Redis responsive on large databases, unlike KEYS.
        removed = 0
        batch: list[bytes] = []
        async for key in self._redis.scan_iter(match=match, count=100):
            batch.append(key)
            if len(batch) >= 100:
                removed += await self._redis.unlink(*batch)
                batch = []
        if batch:
            removed += await self._redis.unlink(*batch)
        return removed

    def _namespaced(self, key: str) -> str:
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    async def ping(self) -> bool:
        """Check that Redis answers."""
        return bool(await self._redis.ping())

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        await self.close()
