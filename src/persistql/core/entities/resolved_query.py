"""Resolution outcome entities."""

from dataclasses import dataclass

from persistql.exceptions import PersistedQueryError


@dataclass(frozen=True)
class ExecutableQuery:
    """A query text ready to be handed to the GraphQL engine."""

    text: str


@dataclass(frozen=True)
class RejectedQuery:
    """A request the persisted query protocol refused to execute.

    Attributes:
        reason: Response body sent back to the client.
        status_code: HTTP status code of the response.
        error: The protocol error the rejection originates from.
    """

    reason: str
    status_code: int
    error: PersistedQueryError | None = None

    @classmethod
    def from_error(cls, error: PersistedQueryError) -> "RejectedQuery":
        """Create a rejection from a protocol error.

        Args:
            error: The error raised during resolution.

        Returns:
            A new RejectedQuery carrying the error's message and status.
        """
        return cls(reason=error.message, status_code=error.status_code, error=error)


ResolvedQuery = ExecutableQuery | RejectedQuery
