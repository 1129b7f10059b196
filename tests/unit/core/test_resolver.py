"""Tests for QueryResolver."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from persistql import (
    APQConfig,
    DescriptorForm,
    ExecutableQuery,
    GraphQLRequest,
    PersistedQueryDescriptor,
    PersistedQueryRegistry,
    QueryResolver,
    RejectedQuery,
    hash_query,
)
from persistql.exceptions import (
    HASH_MISMATCH_MESSAGE,
    HashMismatchError,
    MalformedExtensionsError,
    NoQueryProvidedError,
    PersistedQueryNotFoundError,
)

GOD_QUERY = "{__typename}"
GOD_HASH = hash_query(GOD_QUERY)
UNKNOWN_HASH = "0" * 64


def _nested(sha256_hash: str) -> PersistedQueryDescriptor:
    return PersistedQueryDescriptor(sha256_hash, DescriptorForm.NESTED)


class TestBareHashRule:
    """Hash sent as an extensions value without a query."""

    @pytest.mark.asyncio
    async def test_found(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        await registry.register(GOD_HASH, GOD_QUERY)

        result = await resolver.resolve(None, extensions_hash=GOD_HASH)

        assert result == ExecutableQuery(GOD_QUERY)

    @pytest.mark.asyncio
    async def test_not_found_is_500(self, resolver: QueryResolver) -> None:
        result = await resolver.resolve(None, extensions_hash=UNKNOWN_HASH)

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 500
        assert isinstance(result.error, PersistedQueryNotFoundError)

    @pytest.mark.asyncio
    async def test_takes_precedence_over_descriptor(
        self, resolver: QueryResolver
    ) -> None:
        """Test the bare-hash status applies even when a descriptor is set."""
        result = await resolver.resolve(
            None, _nested(UNKNOWN_HASH), extensions_hash=UNKNOWN_HASH
        )

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 500

    @pytest.mark.asyncio
    async def test_does_not_register(self) -> None:
        registry = MagicMock()
        registry.lookup = AsyncMock(return_value=GOD_QUERY)
        registry.register = AsyncMock()
        resolver = QueryResolver(registry)

        await resolver.resolve(None, extensions_hash=GOD_HASH)

        registry.register.assert_not_awaited()


class TestHashAndQueryRule:
    """Query sent together with its hash."""

    @pytest.mark.asyncio
    async def test_matching_hash_registers(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        result = await resolver.resolve(GOD_QUERY, _nested(GOD_HASH))

        assert result == ExecutableQuery(GOD_QUERY)
        assert await registry.lookup(GOD_HASH) == GOD_QUERY

    @pytest.mark.asyncio
    async def test_mismatch_is_rejected(self, resolver: QueryResolver) -> None:
        result = await resolver.resolve(GOD_QUERY, _nested("foobar"))

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 400
        assert result.reason == "provided sha does not match query"

    @pytest.mark.asyncio
    async def test_mismatch_with_registered_hash(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        """Test the mismatch is reported even for a known, valid hash."""
        other = "{ hello }"
        await registry.register(hash_query(other), other)

        result = await resolver.resolve(GOD_QUERY, _nested(hash_query(other)))

        assert isinstance(result, RejectedQuery)
        assert result.reason == HASH_MISMATCH_MESSAGE

    @pytest.mark.asyncio
    async def test_mismatch_does_not_poison_registry(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        await resolver.resolve("{ evil }", _nested(GOD_HASH))

        assert await registry.lookup(GOD_HASH) is None

    @pytest.mark.asyncio
    async def test_query_with_bare_hash_is_validated(
        self, resolver: QueryResolver
    ) -> None:
        descriptor = PersistedQueryDescriptor("foobar", DescriptorForm.BARE)

        result = await resolver.resolve(
            GOD_QUERY, descriptor, extensions_hash="foobar"
        )

        assert isinstance(result, RejectedQuery)
        assert result.reason == HASH_MISMATCH_MESSAGE


class TestHashOnlyRule:
    """Hash sent through a nested descriptor without a query."""

    @pytest.mark.asyncio
    async def test_found(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        await registry.register(GOD_HASH, GOD_QUERY)

        result = await resolver.resolve(None, _nested(GOD_HASH))

        assert result == ExecutableQuery(GOD_QUERY)

    @pytest.mark.asyncio
    async def test_not_found_is_400(self, resolver: QueryResolver) -> None:
        result = await resolver.resolve(None, _nested("def"))

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 400
        assert result.reason == "persisted query not found"

    @pytest.mark.asyncio
    async def test_blank_query_counts_as_absent(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        await registry.register(GOD_HASH, GOD_QUERY)

        result = await resolver.resolve("  ", _nested(GOD_HASH))

        assert result == ExecutableQuery(GOD_QUERY)


class TestQueryOnlyRule:
    """Plain query without any hash."""

    @pytest.mark.asyncio
    async def test_query_is_registered(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        result = await resolver.resolve(GOD_QUERY)

        assert result == ExecutableQuery(GOD_QUERY)
        assert await registry.lookup(GOD_HASH) == GOD_QUERY

    @pytest.mark.asyncio
    async def test_auto_register_disabled(
        self, registry: PersistedQueryRegistry
    ) -> None:
        resolver = QueryResolver(registry, APQConfig(auto_register=False))

        result = await resolver.resolve(GOD_QUERY)

        assert result == ExecutableQuery(GOD_QUERY)
        assert await registry.lookup(GOD_HASH) is None


class TestNothingProvided:
    @pytest.mark.asyncio
    async def test_rejected(self, resolver: QueryResolver) -> None:
        result = await resolver.resolve(None)

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 400
        assert result.reason == "no query provided"

    @pytest.mark.asyncio
    async def test_empty_query_rejected(self, resolver: QueryResolver) -> None:
        result = await resolver.resolve("")

        assert isinstance(result, RejectedQuery)
        assert isinstance(result.error, NoQueryProvidedError)


class TestResolveOrRaise:
    @pytest.mark.asyncio
    async def test_raises_mismatch(self, resolver: QueryResolver) -> None:
        with pytest.raises(HashMismatchError):
            await resolver.resolve_or_raise(GOD_QUERY, _nested("foobar"))

    @pytest.mark.asyncio
    async def test_returns_text(self, resolver: QueryResolver) -> None:
        assert await resolver.resolve_or_raise(GOD_QUERY) == GOD_QUERY

    @pytest.mark.asyncio
    async def test_storage_errors_propagate(self) -> None:
        registry = MagicMock()
        registry.lookup = AsyncMock(side_effect=ConnectionError("down"))
        resolver = QueryResolver(registry)

        with pytest.raises(ConnectionError):
            await resolver.resolve(None, _nested(GOD_HASH))


class TestResolveRequest:
    """Transport-level dispatch of the two client protocols."""

    @pytest.mark.asyncio
    async def test_get_nested_not_found_is_400(self, resolver: QueryResolver) -> None:
        request = GraphQLRequest(
            extensions=json.dumps({"persistedQuery": {"sha256Hash": UNKNOWN_HASH}}),
            method="GET",
        )

        result = await resolver.resolve_request(request)

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 400

    @pytest.mark.asyncio
    async def test_post_not_found_is_500(self, resolver: QueryResolver) -> None:
        request = GraphQLRequest(
            extensions={"persistedQuery": {"sha256Hash": UNKNOWN_HASH}},
            method="POST",
        )

        result = await resolver.resolve_request(request)

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 500

    @pytest.mark.asyncio
    async def test_get_bare_hash_not_found_is_500(
        self, resolver: QueryResolver
    ) -> None:
        request = GraphQLRequest(
            extensions=json.dumps({"persistedQuery": UNKNOWN_HASH}), method="GET"
        )

        result = await resolver.resolve_request(request)

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 500

    @pytest.mark.asyncio
    async def test_post_with_query_and_hash_is_validated(
        self, resolver: QueryResolver
    ) -> None:
        request = GraphQLRequest(
            query=GOD_QUERY,
            extensions={"persistedQuery": {"sha256Hash": "foobar"}},
            method="POST",
        )

        result = await resolver.resolve_request(request)

        assert isinstance(result, RejectedQuery)
        assert result.reason == HASH_MISMATCH_MESSAGE

    @pytest.mark.asyncio
    async def test_post_found(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        await registry.register(GOD_HASH, GOD_QUERY)
        request = GraphQLRequest(extensions={"persistedQuery": GOD_HASH}, method="POST")

        assert await resolver.resolve_request(request) == ExecutableQuery(GOD_QUERY)

    @pytest.mark.asyncio
    async def test_malformed_extensions_is_400(self, resolver: QueryResolver) -> None:
        request = GraphQLRequest(query=GOD_QUERY, extensions="{oops")

        result = await resolver.resolve_request(request)

        assert isinstance(result, RejectedQuery)
        assert result.status_code == 400
        assert isinstance(result.error, MalformedExtensionsError)

    @pytest.mark.asyncio
    async def test_plain_query(
        self, resolver: QueryResolver, registry: PersistedQueryRegistry
    ) -> None:
        result = await resolver.resolve_request(GraphQLRequest(query=GOD_QUERY))

        assert result == ExecutableQuery(GOD_QUERY)
        assert await registry.lookup(GOD_HASH) == GOD_QUERY
