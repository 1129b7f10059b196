"""Pytest configuration for persistql tests."""

import pytest
from graphql import GraphQLSchema, build_schema

from persistql import (
    APQConfig,
    InMemoryCacheBackend,
    PersistedQueryRegistry,
    QueryResolver,
)

TYPE_DEFS = """
    type Query {
        hello(name: String): String!
    }
"""


@pytest.fixture
def backend() -> InMemoryCacheBackend:
    """Create an empty in-memory backend."""
    return InMemoryCacheBackend(maxsize=100)


@pytest.fixture
def config() -> APQConfig:
    """Create the default persisted query configuration."""
    return APQConfig()


@pytest.fixture
def registry(
    backend: InMemoryCacheBackend, config: APQConfig
) -> PersistedQueryRegistry:
    """Create a registry over the in-memory backend."""
    return PersistedQueryRegistry(backend=backend, config=config)


@pytest.fixture
def resolver(registry: PersistedQueryRegistry, config: APQConfig) -> QueryResolver:
    """Create a resolver over the registry."""
    return QueryResolver(registry=registry, config=config)


@pytest.fixture
def schema() -> GraphQLSchema:
    """Create a small executable schema."""
    schema = build_schema(TYPE_DEFS)
    schema.query_type.fields["hello"].resolve = (  # type: ignore[union-attr]
        lambda _obj, _info, name="world": f"Hello, {name}!"
    )
    return schema
