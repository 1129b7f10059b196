"""Ariadne framework adapter for persistql."""

from persistql.adapters.ariadne.graphql import PersistedQueryGraphQL
from persistql.adapters.ariadne.handler import PersistedQueryGraphQLHTTPHandler

__all__ = [
    "PersistedQueryGraphQL",
    "PersistedQueryGraphQLHTTPHandler",
]
