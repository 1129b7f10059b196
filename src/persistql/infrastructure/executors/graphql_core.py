"""graphql-core executor implementation."""

from typing import Any

from graphql import GraphQLSchema, graphql


class GraphQLCoreExecutor:
    """Executes resolved queries against a graphql-core schema."""

    def __init__(self, schema: GraphQLSchema, root_value: Any | None = None) -> None:
        """Initialize the executor.

        Args:
            schema: The executable GraphQL schema.
            root_value: Optional root value passed to top-level resolvers.
        """
        self._schema = schema
        self._root_value = root_value

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
        context_value: Any | None = None,
    ) -> tuple[bool, dict[str, Any]]:
        """Execute a GraphQL query.

        A result with errors and no data means the request never reached
        execution (syntax or validation error) and is reported as failed.

        Returns:
            A ``(success, result)`` tuple with the formatted result.
        """
        result = await graphql(
            self._schema,
            query,
            root_value=self._root_value,
            context_value=context_value,
            variable_values=variables,
            operation_name=operation_name,
        )
        success = not (result.errors and result.data is None)
        return success, result.formatted
