"""Unit tests for HierarchyResolver.

Tests cover:
- Each level resolving when the chain is consistent
- The first failing link being reported (Api before Resource before Operation)
- Entities that exist under a different parent being reported as not found
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import Api, Operation, Resource
from src.domain.enums import HttpMethod


@pytest.fixture
async def catalog(api_repo, resource_repo, operation_repo):
    """Two Apis, each with one Resource, and one Operation under a1/r1."""
    await api_repo.save(Api(id="a1", name="One", version="v1", base_path="/one"))
    await api_repo.save(Api(id="a2", name="Two", version="v1", base_path="/two"))
    await resource_repo.save(Resource(id="r1", api_id="a1", name="orders"))
    await resource_repo.save(Resource(id="r2", api_id="a2", name="users"))
    await operation_repo.save(
        Operation(
            id="o1", api_id="a1", resource_id="r1", method=HttpMethod.GET, path="/x"
        )
    )


@pytest.mark.unit
@pytest.mark.usefixtures("catalog")
class TestHierarchyResolver:
    @pytest.mark.asyncio
    async def test_resolve_api(self, resolver):
        result = await resolver.resolve_api("a1")

        assert isinstance(result, Success)
        assert result.value.id == "a1"

    @pytest.mark.asyncio
    async def test_missing_api(self, resolver):
        result = await resolver.resolve_api("nope")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.API_NOT_FOUND
        assert result.error.resource_id == "nope"

    @pytest.mark.asyncio
    async def test_resolve_operation_full_chain(self, resolver):
        result = await resolver.resolve_operation("a1", "r1", "o1")

        assert isinstance(result, Success)
        assert result.value.path == "/x"

    @pytest.mark.asyncio
    async def test_missing_api_reported_before_resource(self, resolver):
        result = await resolver.resolve_operation("nope", "also-missing", "o1")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.API_NOT_FOUND

    @pytest.mark.asyncio
    async def test_resource_of_other_api_is_not_found(self, resolver):
        result = await resolver.resolve_resource("a1", "r2")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        assert result.error.resource_id == "r2"

    @pytest.mark.asyncio
    async def test_operation_under_wrong_resource_is_not_found(
        self, resolver, resource_repo
    ):
        await resource_repo.save(Resource(id="r3", api_id="a1", name="other"))

        result = await resolver.resolve_operation("a1", "r3", "o1")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.OPERATION_NOT_FOUND

    @pytest.mark.asyncio
    async def test_missing_operation(self, resolver):
        result = await resolver.resolve_operation("a1", "r1", "o-missing")

        assert isinstance(result, Failure)
        assert result.error.resource_type == "Operation"
