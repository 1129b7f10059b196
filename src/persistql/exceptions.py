"""Exceptions raised while resolving persisted queries.

Every persisted-query error maps directly onto an HTTP response: it
carries the human-readable message sent back as the response body and
the status code to answer with.

Example:
    from persistql.exceptions import PersistedQueryError

    try:
        text = await resolver.resolve_or_raise(query, descriptor)
    except PersistedQueryError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)
"""

HASH_MISMATCH_MESSAGE = "provided sha does not match query"
NOT_FOUND_MESSAGE = "persisted query not found"
NO_QUERY_MESSAGE = "no query provided"


class PersistedQueryError(Exception):
    """Base class for all persisted-query protocol errors.

    Attributes:
        message: Human-readable error description, used as response body.
        status_code: HTTP status code to answer the request with.
    """

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class MalformedExtensionsError(PersistedQueryError):
    """The request extensions payload could not be decoded."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"malformed extensions: {detail}")


class HashMismatchError(PersistedQueryError):
    """The query text does not hash to the sha256Hash the client sent."""

    def __init__(self, sha256_hash: str) -> None:
        self.sha256_hash = sha256_hash
        super().__init__(HASH_MISMATCH_MESSAGE)


class PersistedQueryNotFoundError(PersistedQueryError):
    """No query text is registered for the requested hash.

    Lookups through a nested ``persistedQuery.sha256Hash`` descriptor are
    client errors (400). Lookups through the bare-hash POST form are
    answered with 500.
    """

    def __init__(self, sha256_hash: str, status_code: int = 400) -> None:
        self.sha256_hash = sha256_hash
        super().__init__(NOT_FOUND_MESSAGE, status_code=status_code)


class NoQueryProvidedError(PersistedQueryError):
    """Neither a query text nor a usable hash was sent."""

    def __init__(self) -> None:
        super().__init__(NO_QUERY_MESSAGE)


class SerializationError(Exception):
    """Raised when serialization or deserialization fails."""

    pass
