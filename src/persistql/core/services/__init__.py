"""Domain services for persistql."""

from persistql.core.services.dispatcher import PersistedQueryDispatcher
from persistql.core.services.extension_parser import parse_extensions
from persistql.core.services.query_registry import PersistedQueryRegistry
from persistql.core.services.resolver import QueryResolver

__all__ = [
    "parse_extensions",
    "PersistedQueryRegistry",
    "QueryResolver",
    "PersistedQueryDispatcher",
]
