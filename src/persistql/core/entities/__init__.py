"""Domain entities for persistql."""

from persistql.core.entities.apq_config import APQConfig
from persistql.core.entities.graphql_request import GraphQLRequest, GraphQLResponse
from persistql.core.entities.persisted_query import (
    DescriptorForm,
    PersistedQueryDescriptor,
)
from persistql.core.entities.registry_key import RegistryKey
from persistql.core.entities.resolved_query import (
    ExecutableQuery,
    RejectedQuery,
    ResolvedQuery,
)

__all__ = [
    "APQConfig",
    "DescriptorForm",
    "PersistedQueryDescriptor",
    "RegistryKey",
    "ExecutableQuery",
    "RejectedQuery",
    "ResolvedQuery",
    "GraphQLRequest",
    "GraphQLResponse",
]
