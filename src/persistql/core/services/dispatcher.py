"""Request dispatcher - persisted query resolution in front of a GraphQL engine."""

import logging
from typing import Any

from persistql.core.entities.graphql_request import GraphQLRequest, GraphQLResponse
from persistql.core.entities.resolved_query import RejectedQuery
from persistql.core.interfaces.query_executor import IQueryExecutor
from persistql.core.interfaces.serializer import ISerializer
from persistql.core.services.resolver import QueryResolver

logger = logging.getLogger(__name__)


class PersistedQueryDispatcher:
    """Framework-agnostic entry point for persisted query requests.

    Resolves each request with a QueryResolver, answers rejections
    directly and hands resolved query texts to the executor. Execution
    results are never cached.

    Usage:
        registry = PersistedQueryRegistry(InMemoryCacheBackend())
        dispatcher = PersistedQueryDispatcher(
            resolver=QueryResolver(registry),
            executor=GraphQLCoreExecutor(schema),
            serializer=JsonSerializer(),
        )

        response = await dispatcher.dispatch(
            GraphQLRequest(query="{__typename}")
        )
    """

    def __init__(
        self,
        resolver: QueryResolver,
        executor: IQueryExecutor,
        serializer: ISerializer,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            resolver: Resolver turning requests into executable queries.
            executor: GraphQL engine resolved queries are executed by.
            serializer: Encoder for execution results.
        """
        self._resolver = resolver
        self._executor = executor
        self._serializer = serializer

    async def dispatch(
        self,
        request: GraphQLRequest,
        context_value: Any | None = None,
    ) -> GraphQLResponse:
        """Resolve and execute a request.

        Args:
            request: The incoming request.
            context_value: Context passed to the executor.

        Returns:
            The rejection response, or the serialized execution result
            with status 200 (400 if the engine refused the request).
        """
        resolved = await self._resolver.resolve_request(request)

        if isinstance(resolved, RejectedQuery):
            return GraphQLResponse(
                status_code=resolved.status_code,
                body=resolved.reason,
                content_type="text/plain",
            )

        success, result = await self._executor.execute(
            resolved.text,
            variables=request.variables,
            operation_name=request.operation_name,
            context_value=context_value,
        )
        if not success:
            logger.debug("Execution of resolved query failed")

        return GraphQLResponse(
            status_code=200 if success else 400,
            body=self._serializer.serialize(result).decode("utf-8"),
        )
