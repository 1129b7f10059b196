"""Infrastructure layer implementations for persistql."""

from persistql.infrastructure.backends import InMemoryCacheBackend
from persistql.infrastructure.executors import GraphQLCoreExecutor
from persistql.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryCacheBackend",
    "GraphQLCoreExecutor",
    "JsonSerializer",
]
