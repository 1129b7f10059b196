"""Persisted query configuration entity."""

import os
from dataclasses import dataclass
from datetime import timedelta

_GLOB_CHARS = frozenset("*?[")


@dataclass
class APQConfig:
    """Automatic persisted query configuration.

    Attributes:
        namespace: Prefix of every registry key. Keys are built as
            ``<namespace>_<sha256>`` so the registry can share a cache
            backend with unrelated cache regions.
        ttl: Lifetime of registered queries. None defers to the backend
            default.
        max_size: Maximum number of entries for in-memory backends.
        auto_register: Register plain queries (sent without a hash) so a
            later hash-only request for the same text succeeds.
    """

    namespace: str = "apq"
    ttl: timedelta | None = None
    max_size: int = 1000
    auto_register: bool = True

    def __post_init__(self) -> None:
        """Validate the configuration values."""
        if not self.namespace:
            raise ValueError("namespace must not be empty")
        if _GLOB_CHARS.intersection(self.namespace):
            raise ValueError(
                f"namespace must not contain glob characters: {self.namespace!r}"
            )
        if self.max_size <= 0:
            raise ValueError("max_size must be positive")

    @classmethod
    def from_env(cls, prefix: str = "PERSISTQL_") -> "APQConfig":
        """Build a configuration from environment variables.

        Reads ``<prefix>NAMESPACE``, ``<prefix>TTL`` (seconds),
        ``<prefix>MAX_SIZE`` and ``<prefix>AUTO_REGISTER``. Unset
        variables keep their defaults.

        Args:
            prefix: Prefix of the environment variable names.

        Returns:
            A new APQConfig instance.
        """
        defaults = cls()

        ttl_seconds = os.getenv(f"{prefix}TTL")
        ttl = timedelta(seconds=int(ttl_seconds)) if ttl_seconds else defaults.ttl

        return cls(
            namespace=os.getenv(f"{prefix}NAMESPACE", defaults.namespace),
            ttl=ttl,
            max_size=int(os.getenv(f"{prefix}MAX_SIZE", str(defaults.max_size))),
            auto_register=os.getenv(
                f"{prefix}AUTO_REGISTER", str(defaults.auto_register)
            ).lower()
            in ("1", "true", "yes"),
        )
