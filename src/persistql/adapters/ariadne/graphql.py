"""Persisted query GraphQL ASGI app for Ariadne."""

from typing import Any

from ariadne.asgi import GraphQL

from persistql.adapters.ariadne.handler import PersistedQueryGraphQLHTTPHandler
from persistql.core.entities.apq_config import APQConfig
from persistql.core.services.query_registry import PersistedQueryRegistry
from persistql.core.services.resolver import QueryResolver
from persistql.infrastructure.backends.memory import InMemoryCacheBackend


class PersistedQueryGraphQL(GraphQL):
    """Drop-in replacement for Ariadne's GraphQL with persisted queries.

    GET execution is enabled by default since hash-only GET requests are
    what makes persisted queries cacheable by HTTP caches. Without a
    registry, queries are kept in an in-memory backend sized by
    ``config.max_size``.

    Example::

        app = PersistedQueryGraphQL(schema, config=APQConfig.from_env())

        registry = PersistedQueryRegistry(RedisCacheBackend(redis_url))
        app = PersistedQueryGraphQL(schema, registry=registry)
    """

    def __init__(
        self,
        schema: Any,
        registry: PersistedQueryRegistry | None = None,
        config: APQConfig | None = None,
        **kwargs: Any,
    ) -> None:
        if registry is None:
            config = config or APQConfig()
            registry = PersistedQueryRegistry(
                InMemoryCacheBackend.from_config(config), config
            )

        http_handler = PersistedQueryGraphQLHTTPHandler(
            resolver=QueryResolver(registry, config or registry.config),
        )
        kwargs.setdefault("execute_get_queries", True)

        super().__init__(schema, http_handler=http_handler, **kwargs)

        self._registry = registry
        self._persisted_query_handler = http_handler

    @property
    def registry(self) -> PersistedQueryRegistry:
        return self._registry

    @property
    def registry_stats(self) -> dict[str, int]:
        return self._registry.stats
