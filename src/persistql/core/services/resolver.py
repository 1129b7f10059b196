"""Resolution of persisted query requests.

Turns the query text and persisted query hash of a request into the
query to execute, registering and validating hashes on the way. Rules
are evaluated in order, first match wins:

1. Hash sent as an extensions value (POST body or bare hash string)
   without a query: look it up, 500 if unknown.
2. Hash and query: the query must hash to the sent value (400
   otherwise); it is then registered.
3. Hash without query: look it up, 400 if unknown.
4. Query without hash: registered under its own hash when
   ``auto_register`` is enabled.
5. Nothing usable: 400.
"""

import logging

from persistql.core.entities.apq_config import APQConfig
from persistql.core.entities.graphql_request import GraphQLRequest
from persistql.core.entities.persisted_query import PersistedQueryDescriptor
from persistql.core.entities.resolved_query import (
    ExecutableQuery,
    RejectedQuery,
    ResolvedQuery,
)
from persistql.core.interfaces.query_registry import IQueryRegistry
from persistql.core.services.extension_parser import parse_extensions
from persistql.exceptions import (
    HashMismatchError,
    NoQueryProvidedError,
    PersistedQueryError,
    PersistedQueryNotFoundError,
)
from persistql.utils.hashing import hash_query, is_sha256_hex

logger = logging.getLogger(__name__)


class QueryResolver:
    """Resolves requests to executable queries using a query registry."""

    def __init__(
        self,
        registry: IQueryRegistry,
        config: APQConfig | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            registry: The registry queries are looked up in and stored to.
            config: Optional configuration. Uses defaults if not provided.
        """
        self._registry = registry
        self._config = config or APQConfig()

    @property
    def registry(self) -> IQueryRegistry:
        """Get the query registry."""
        return self._registry

    async def resolve_request(self, request: GraphQLRequest) -> ResolvedQuery:
        """Resolve a transport request.

        The hash is treated as an extensions value (rule 1) when the
        request was POSTed or the hash was sent as a bare string.

        Args:
            request: The incoming request.

        Returns:
            The query to execute or the rejection to answer with.
        """
        try:
            descriptor = parse_extensions(request.extensions)
        except PersistedQueryError as e:
            return RejectedQuery.from_error(e)

        extensions_hash = None
        if descriptor is not None and (request.is_post or descriptor.is_bare):
            extensions_hash = descriptor.sha256_hash

        return await self.resolve(request.query, descriptor, extensions_hash)

    async def resolve(
        self,
        query: str | None,
        descriptor: PersistedQueryDescriptor | None = None,
        extensions_hash: str | None = None,
    ) -> ResolvedQuery:
        """Resolve the query to execute for a request.

        Args:
            query: Query text sent with the request.
            descriptor: Parsed ``persistedQuery`` extension.
            extensions_hash: Hash sent as a bare extensions value.

        Returns:
            ExecutableQuery on success, RejectedQuery otherwise.
        """
        try:
            text = await self.resolve_or_raise(query, descriptor, extensions_hash)
        except PersistedQueryError as e:
            logger.debug("Rejected request (%d): %s", e.status_code, e.message)
            return RejectedQuery.from_error(e)
        return ExecutableQuery(text)

    async def resolve_or_raise(
        self,
        query: str | None,
        descriptor: PersistedQueryDescriptor | None = None,
        extensions_hash: str | None = None,
    ) -> str:
        """Resolve the query text to execute for a request.

        Args:
            query: Query text sent with the request.
            descriptor: Parsed ``persistedQuery`` extension.
            extensions_hash: Hash sent as a bare extensions value.

        Returns:
            The query text to execute.

        Raises:
            HashMismatchError: If the query does not hash to the sent hash.
            PersistedQueryNotFoundError: If the hash is not registered.
            NoQueryProvidedError: If neither query nor hash was sent.
        """
        if query is not None and not query.strip():
            query = None

        if extensions_hash is not None and query is None:
            return await self._lookup(extensions_hash, not_found_status=500)

        if descriptor is not None and query is not None:
            if hash_query(query) != descriptor.sha256_hash:
                logger.warning(
                    "Persisted query hash mismatch: %s", descriptor.sha256_hash
                )
                raise HashMismatchError(descriptor.sha256_hash)
            await self._registry.register(descriptor.sha256_hash, query)
            return query

        if descriptor is not None:
            return await self._lookup(descriptor.sha256_hash, not_found_status=400)

        if query is not None:
            if self._config.auto_register:
                await self._registry.register(hash_query(query), query)
            return query

        raise NoQueryProvidedError()

    async def _lookup(self, sha256_hash: str, not_found_status: int) -> str:
        query = await self._registry.lookup(sha256_hash)
        if query is None:
            if not is_sha256_hex(sha256_hash):
                logger.debug("Lookup of a non SHA-256 hash: %r", sha256_hash)
            raise PersistedQueryNotFoundError(sha256_hash, status_code=not_found_status)
        return query
