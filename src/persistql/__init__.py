"""persistql - Automatic Persisted Queries for GraphQL APIs.

Clients send the SHA-256 hash of a query instead of its full text; the
server resolves the hash to a previously registered query, validates
hashes sent alongside full queries and registers new queries on the fly.

Example with graphql-core:
    from graphql import build_schema
    from persistql import (
        GraphQLCoreExecutor,
        GraphQLRequest,
        InMemoryCacheBackend,
        JsonSerializer,
        PersistedQueryDispatcher,
        PersistedQueryRegistry,
        QueryResolver,
    )

    schema = build_schema("type Query { hello: String }")

    registry = PersistedQueryRegistry(InMemoryCacheBackend())
    dispatcher = PersistedQueryDispatcher(
        resolver=QueryResolver(registry),
        executor=GraphQLCoreExecutor(schema),
        serializer=JsonSerializer(),
    )

    # First request registers the query under its hash
    await dispatcher.dispatch(GraphQLRequest(query="{ hello }"))

    # Later requests only send the hash
    await dispatcher.dispatch(
        GraphQLRequest(
            extensions='{"persistedQuery": {"sha256Hash": "<sha256 of query>"}}'
        )
    )

Example with Ariadne:
    from persistql.adapters.ariadne import PersistedQueryGraphQL

    app = PersistedQueryGraphQL(schema, registry=registry)
"""

from persistql.core.entities import (
    APQConfig,
    DescriptorForm,
    ExecutableQuery,
    GraphQLRequest,
    GraphQLResponse,
    PersistedQueryDescriptor,
    RegistryKey,
    RejectedQuery,
    ResolvedQuery,
)
from persistql.core.interfaces import (
    ICacheBackend,
    IQueryExecutor,
    IQueryRegistry,
    ISerializer,
)
from persistql.core.services import (
    PersistedQueryDispatcher,
    PersistedQueryRegistry,
    QueryResolver,
    parse_extensions,
)
from persistql.exceptions import (
    HashMismatchError,
    MalformedExtensionsError,
    NoQueryProvidedError,
    PersistedQueryError,
    PersistedQueryNotFoundError,
    SerializationError,
)
from persistql.infrastructure import (
    GraphQLCoreExecutor,
    InMemoryCacheBackend,
    JsonSerializer,
)
from persistql.utils.hashing import hash_query

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "APQConfig",
    "DescriptorForm",
    "PersistedQueryDescriptor",
    "RegistryKey",
    "ExecutableQuery",
    "RejectedQuery",
    "ResolvedQuery",
    "GraphQLRequest",
    "GraphQLResponse",
    # Core interfaces
    "ICacheBackend",
    "IQueryRegistry",
    "IQueryExecutor",
    "ISerializer",
    # Core services
    "parse_extensions",
    "PersistedQueryRegistry",
    "QueryResolver",
    "PersistedQueryDispatcher",
    # Errors
    "PersistedQueryError",
    "MalformedExtensionsError",
    "HashMismatchError",
    "PersistedQueryNotFoundError",
    "NoQueryProvidedError",
    "SerializationError",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "GraphQLCoreExecutor",
    "JsonSerializer",
    # Hashing
    "hash_query",
]
