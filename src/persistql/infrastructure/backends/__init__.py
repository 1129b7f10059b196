"""Cache backends for persistql.

The Redis backend lives in ``persistql.infrastructure.backends.redis``
and requires the ``redis`` extra.
"""

from persistql.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
