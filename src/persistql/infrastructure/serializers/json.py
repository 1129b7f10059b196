"""JSON encoding of GraphQL response bodies."""

import json
from typing import Any

from persistql.exceptions import SerializationError


class JsonSerializer:
    """Compact JSON encoder for the ``application/json`` response body."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Encode an execution result.

        Raises:
            SerializationError: The result holds values JSON cannot represent.
        """
        try:
            return json.dumps(value, separators=(",", ":")).encode(self._encoding)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot encode response body: {exc}") from exc
