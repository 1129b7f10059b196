"""Core domain layer for persistql."""

from persistql.core.entities import (
    APQConfig,
    ExecutableQuery,
    GraphQLRequest,
    GraphQLResponse,
    PersistedQueryDescriptor,
    RejectedQuery,
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
)

__all__ = [
    # Entities
    "APQConfig",
    "PersistedQueryDescriptor",
    "ExecutableQuery",
    "RejectedQuery",
    "GraphQLRequest",
    "GraphQLResponse",
    # Interfaces
    "ICacheBackend",
    "IQueryRegistry",
    "IQueryExecutor",
    "ISerializer",
    # Services
    "PersistedQueryRegistry",
    "QueryResolver",
    "PersistedQueryDispatcher",
]
