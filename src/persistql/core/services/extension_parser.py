"""Parser for the ``persistedQuery`` request extension.

Two payload shapes carry a persisted query hash:

    {"persistedQuery": {"sha256Hash": "<hash>"}}   (nested, Apollo style)
    {"persistedQuery": "<hash>"}                   (bare hash)

Anything else under ``persistedQuery`` is rejected instead of coerced.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from persistql.core.entities.persisted_query import (
    DescriptorForm,
    PersistedQueryDescriptor,
)
from persistql.exceptions import MalformedExtensionsError

logger = logging.getLogger(__name__)

PERSISTED_QUERY_KEY = "persistedQuery"
SHA256_HASH_KEY = "sha256Hash"


def parse_extensions(
    raw: str | Mapping[str, Any] | None,
) -> PersistedQueryDescriptor | None:
    """Extract the persisted query descriptor from request extensions.

    Args:
        raw: The extensions payload, either serialized JSON (GET query
            string) or an already decoded mapping (JSON POST body).

    Returns:
        The descriptor, or None if the request carries no persisted query.

    Raises:
        MalformedExtensionsError: If the payload is present but does not
            have one of the accepted shapes.
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            extensions = json.loads(raw)
        except ValueError as e:
            logger.warning("Undecodable extensions payload: %s", e)
            raise MalformedExtensionsError("extensions is not valid JSON") from e
    else:
        extensions = raw

    if not isinstance(extensions, Mapping):
        raise MalformedExtensionsError("extensions must be an object")

    if PERSISTED_QUERY_KEY not in extensions:
        return None

    return _parse_persisted_query(extensions[PERSISTED_QUERY_KEY])


def _parse_persisted_query(value: Any) -> PersistedQueryDescriptor | None:
    """Decode the value stored under ``persistedQuery``.

    Args:
        value: The raw ``persistedQuery`` value.

    Returns:
        The descriptor, or None if the object carries no hash.

    Raises:
        MalformedExtensionsError: If the value has an unsupported shape.
    """
    if isinstance(value, Mapping):
        if SHA256_HASH_KEY not in value:
            return None
        sha256_hash = value[SHA256_HASH_KEY]
        if not isinstance(sha256_hash, str) or not sha256_hash:
            raise MalformedExtensionsError(
                "persistedQuery.sha256Hash must be a non-empty string"
            )
        return PersistedQueryDescriptor(sha256_hash, DescriptorForm.NESTED)

    if isinstance(value, str) and value:
        return PersistedQueryDescriptor(value, DescriptorForm.BARE)

    raise MalformedExtensionsError(
        "persistedQuery must be an object with sha256Hash or a hash string"
    )
