"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for encoding GraphQL results into response bodies."""

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...
