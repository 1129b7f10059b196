"""Query executor interface."""

from typing import Any, Protocol


class IQueryExecutor(Protocol):
    """Contract for the GraphQL engine resolved queries are handed to."""

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
        context_value: Any | None = None,
    ) -> tuple[bool, dict[str, Any]]:
        """Execute a GraphQL query.

        Args:
            query: The resolved query text.
            variables: Variables passed to the operation.
            operation_name: Name of the operation to execute.
            context_value: Context passed to resolvers.

        Returns:
            A ``(success, result)`` tuple. ``success`` is False when the
            request itself was invalid; ``result`` is the JSON-ready
            response payload.
        """
        ...
