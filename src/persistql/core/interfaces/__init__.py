"""Core interfaces (Protocol classes) for persistql."""

from persistql.core.interfaces.cache_backend import ICacheBackend
from persistql.core.interfaces.query_executor import IQueryExecutor
from persistql.core.interfaces.query_registry import IQueryRegistry
from persistql.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "IQueryRegistry",
    "IQueryExecutor",
    "ISerializer",
]
