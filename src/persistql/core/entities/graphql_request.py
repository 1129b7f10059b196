"""Transport-independent GraphQL request and response entities."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GraphQLRequest:
    """Incoming GraphQL request as seen by the persisted query layer.

    Attributes:
        query: Query text, absent for hash-only requests.
        extensions: Extensions payload. A serialized JSON string when it
            comes from a GET query string, a mapping when it was decoded
            from a JSON POST body.
        method: HTTP method the request was sent with.
        variables: Operation variables.
        operation_name: Name of the operation to execute.
    """

    query: str | None = None
    extensions: str | Mapping[str, Any] | None = None
    method: str = "GET"
    variables: dict[str, Any] | None = None
    operation_name: str | None = None

    @property
    def is_post(self) -> bool:
        """Check if the request was sent with POST."""
        return self.method.upper() == "POST"

    @classmethod
    def from_data(cls, data: Mapping[str, Any], method: str = "POST") -> "GraphQLRequest":
        """Create a request from decoded GraphQL request data.

        Args:
            data: Request data using the GraphQL-over-HTTP field names
                (``query``, ``extensions``, ``variables``, ``operationName``).
            method: HTTP method the data was received with.

        Returns:
            A new GraphQLRequest instance.
        """
        query = data.get("query")
        return cls(
            query=query if isinstance(query, str) else None,
            extensions=data.get("extensions"),
            method=method,
            variables=data.get("variables"),
            operation_name=data.get("operationName"),
        )


@dataclass(frozen=True)
class GraphQLResponse:
    """Response produced for a GraphQL request."""

    status_code: int
    body: str
    content_type: str = "application/json"
