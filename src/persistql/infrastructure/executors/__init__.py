"""GraphQL executors for persistql."""

from persistql.infrastructure.executors.graphql_core import GraphQLCoreExecutor

__all__ = ["GraphQLCoreExecutor"]
