"""Persisted query descriptor entity."""

from dataclasses import dataclass
from enum import Enum


class DescriptorForm(Enum):
    """Shape the persisted query hash was sent in.

    NESTED: ``{"persistedQuery": {"sha256Hash": "<hash>"}}``
    BARE: ``{"persistedQuery": "<hash>"}``
    """

    NESTED = "NESTED"
    BARE = "BARE"


@dataclass(frozen=True)
class PersistedQueryDescriptor:
    """Immutable ``persistedQuery`` extension value of a request.

    Attributes:
        sha256_hash: The hash the client refers to the query by.
        form: Which of the accepted payload shapes carried the hash.
    """

    sha256_hash: str
    form: DescriptorForm = DescriptorForm.NESTED

    @property
    def is_bare(self) -> bool:
        """Check if the hash was sent as a bare string."""
        return self.form is DescriptorForm.BARE
