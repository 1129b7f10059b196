"""Registry key value object."""

from dataclasses import dataclass

from persistql.utils.hashing import hash_query


@dataclass(frozen=True)
class RegistryKey:
    """Immutable registry key value object.

    Content-addressed key of a registered query: the namespace of the
    registry followed by the SHA-256 of the query text.
    """

    namespace: str
    query_hash: str

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            The key as ``<namespace>_<query_hash>``.
        """
        return f"{self.namespace}_{self.query_hash}"

    @classmethod
    def from_query(cls, namespace: str, query: str) -> "RegistryKey":
        """Create a RegistryKey for a query text.

        Args:
            namespace: Registry namespace.
            query: The GraphQL query string.

        Returns:
            A new RegistryKey instance.
        """
        return cls(namespace=namespace, query_hash=hash_query(query))

    @staticmethod
    def pattern(namespace: str) -> str:
        """Glob pattern matching every key of a namespace."""
        return f"{namespace}_*"
