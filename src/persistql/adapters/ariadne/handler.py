"""Persisted query HTTP handler for Ariadne GraphQL."""

import json
import logging
from typing import Any

from ariadne.asgi.handlers import GraphQLHTTPHandler
from ariadne.exceptions import HttpBadRequestError, HttpError
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from persistql.core.entities.graphql_request import GraphQLRequest
from persistql.core.entities.resolved_query import RejectedQuery
from persistql.core.services.resolver import QueryResolver

logger = logging.getLogger(__name__)


class PersistedQueryGraphQLHTTPHandler(GraphQLHTTPHandler):
    """HTTP handler that adds automatic persisted queries to Ariadne.

    Every request is resolved before execution:
    - Hash-only requests are answered with the registered query text.
    - Requests sending both a query and its hash register the query once
      the hash is verified.
    - Rejections (unknown hash, hash mismatch, malformed extensions) are
      returned as plain-text responses with their own status code and
      never reach the GraphQL engine.

    GET requests carrying only ``extensions`` are executed as well, as
    long as GET execution is enabled. Resolved requests are offered to
    the configured subscription handlers before plain execution.
    """

    def __init__(self, resolver: QueryResolver, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._resolver = resolver

    @property
    def resolver(self) -> QueryResolver:
        return self._resolver

    async def handle_request(self, request: Request) -> Response:
        if (
            request.method == "GET"
            and getattr(self, "execute_get_queries", False)
            and request.query_params.get("extensions")
        ):
            return await self.graphql_http_server(request)
        return await super().handle_request(request)

    async def graphql_http_server(self, request: Request) -> Response:
        try:
            data = await self.extract_data_from_request(request)
        except HttpError as error:
            return PlainTextResponse(error.message or error.status, status_code=400)

        if isinstance(data, dict):
            resolved = await self._resolver.resolve_request(
                GraphQLRequest.from_data(data, method=request.method)
            )
            if isinstance(resolved, RejectedQuery):
                logger.debug(
                    "Persisted query rejected (%d): %s",
                    resolved.status_code,
                    resolved.reason,
                )
                return PlainTextResponse(
                    resolved.reason, status_code=resolved.status_code
                )
            data = {**data, "query": resolved.text}

        subscription_handlers = getattr(self, "subscription_handlers", None) or []
        for subscription_handler in subscription_handlers:
            if subscription_handler.supports(request, data):
                return await subscription_handler.handle(request=request, data=data)

        success, result = await self.execute_graphql_query(request, data)
        return await self.create_json_response(request, result, success)

    async def extract_data_from_request(self, request: Request) -> Any:
        if request.method == "GET":
            return self.extract_data_from_get_request(request)
        return await super().extract_data_from_request(request)

    def extract_data_from_get_request(self, request: Request) -> dict[str, Any]:
        query = request.query_params.get("query", "").strip()
        operation_name = request.query_params.get("operationName", "").strip()
        variables = request.query_params.get("variables", "").strip()

        clean_variables = None
        if variables:
            try:
                clean_variables = json.loads(variables)
            except (TypeError, ValueError) as ex:
                raise HttpBadRequestError(
                    "Variables query arg is not a valid JSON"
                ) from ex

        return {
            "query": query or None,
            "operationName": operation_name or None,
            "variables": clean_variables,
            "extensions": request.query_params.get("extensions") or None,
        }
