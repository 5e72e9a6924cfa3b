"""Unit tests for Api and Resource handlers.

Tests cover:
- CreateApi / UpdateApi: validation, Environment and Plan reference checks
- DeleteApi: cascade to Resources and Operations, idempotency
- Resource create/get/update/list and cascading delete
- ListApis full vs paged listings
"""

import pytest

from src.application.commands import (
    CreateApi,
    CreateOperation,
    CreateResource,
    DeleteApi,
    DeleteResource,
    UpdateApi,
    UpdateResource,
)
from src.application.commands.handlers.api_handlers import (
    CreateApiHandler,
    DeleteApiHandler,
    UpdateApiHandler,
)
from src.application.commands.handlers.create_operation_handler import (
    CreateOperationHandler,
)
from src.application.commands.handlers.resource_handlers import (
    CreateResourceHandler,
    DeleteResourceHandler,
    UpdateResourceHandler,
)
from src.application.queries import GetApi, GetResource, ListApis, ListResources
from src.application.queries.handlers.api_query_handlers import (
    GetApiHandler,
    ListApisHandler,
)
from src.application.queries.handlers.resource_query_handlers import (
    GetResourceHandler,
    ListResourcesHandler,
)
from src.core.enums import ErrorCode
from src.core.pagination import FullListing, PagedListing
from src.core.result import Failure, Success
from src.domain.entities import Environment, Plan
from src.domain.enums import Status


@pytest.fixture
def create_api_handler(api_repo, environment_repo, plan_repo, id_generator, logger):
    return CreateApiHandler(api_repo, environment_repo, plan_repo, id_generator, logger)


@pytest.fixture
def create_resource_handler(resolver, resource_repo, id_generator, logger):
    return CreateResourceHandler(resolver, resource_repo, id_generator, logger)


@pytest.fixture
async def directory(environment_repo, plan_repo):
    await environment_repo.save(
        Environment(
            id="env-1",
            name="sandbox",
            inbound_url="https://sandbox.example.com",
            outbound_url="http://10.0.0.1:8080",
        )
    )
    await plan_repo.save(Plan(id="plan-1", name="gold"))


async def _create_api(handler, **overrides):
    fields = {"name": "Store", "version": "v1", "base_path": "/store"}
    fields.update(overrides)
    result = await handler.handle(CreateApi(**fields))
    assert isinstance(result, Success)
    return result.value


# =============================================================================
# Api commands
# =============================================================================


@pytest.mark.unit
@pytest.mark.usefixtures("directory")
class TestCreateApiHandler:
    @pytest.mark.asyncio
    async def test_create_with_references(self, create_api_handler, api_repo):
        api = await _create_api(
            create_api_handler, environment_ids=["env-1"], plan_ids=["plan-1"]
        )

        assert api.environment_ids == ["env-1"]
        assert api.plan_ids == ["plan-1"]
        assert api.status == "active"
        assert api.id in api_repo.items

    @pytest.mark.asyncio
    async def test_missing_environment_reference(self, create_api_handler, api_repo):
        result = await create_api_handler.handle(
            CreateApi(
                name="Store",
                version="v1",
                base_path="/store",
                environment_ids=["env-1", "env-404"],
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ENVIRONMENT_NOT_FOUND
        assert result.error.resource_id == "env-404"
        assert api_repo.items == {}

    @pytest.mark.asyncio
    async def test_missing_plan_reference(self, create_api_handler):
        result = await create_api_handler.handle(
            CreateApi(name="Store", version="v1", base_path="/s", plan_ids=["p-x"])
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PLAN_NOT_FOUND

    @pytest.mark.asyncio
    async def test_invalid_base_path(self, create_api_handler):
        result = await create_api_handler.handle(
            CreateApi(name="Store", version="v1", base_path="store")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_BASE_PATH
        assert result.error.field == "base_path"

    @pytest.mark.asyncio
    async def test_shared_base_path_allowed(self, create_api_handler):
        first = await _create_api(create_api_handler)
        second = await _create_api(create_api_handler, version="v2")

        assert first.base_path == second.base_path
        assert first.id != second.id


@pytest.mark.unit
@pytest.mark.usefixtures("directory")
class TestUpdateApiHandler:
    @pytest.fixture
    def handler(self, resolver, api_repo, environment_repo, plan_repo, logger):
        return UpdateApiHandler(resolver, api_repo, environment_repo, plan_repo, logger)

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, handler, create_api_handler):
        created = await _create_api(create_api_handler)

        result = await handler.handle(
            UpdateApi(
                api_id=created.id,
                name="Store 2",
                version="v2",
                base_path="/store2",
                cors=False,
                status=Status.INACTIVE,
                plan_ids=["plan-1"],
            )
        )

        assert isinstance(result, Success)
        assert result.value.id == created.id
        assert result.value.created_at == created.created_at
        assert result.value.cors is False
        assert result.value.status == "inactive"
        assert result.value.plan_ids == ["plan-1"]

    @pytest.mark.asyncio
    async def test_update_missing_api(self, handler):
        result = await handler.handle(
            UpdateApi(api_id="nope", name="x", version="v1", base_path="/x")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.API_NOT_FOUND


@pytest.mark.unit
class TestDeleteApiHandler:
    @pytest.mark.asyncio
    async def test_delete_cascades(
        self,
        create_api_handler,
        create_resource_handler,
        resolver,
        api_repo,
        resource_repo,
        operation_repo,
        id_generator,
        logger,
    ):
        # Arrange
        api = await _create_api(create_api_handler)
        resource = (
            await create_resource_handler.handle(
                CreateResource(api_id=api.id, name="orders")
            )
        ).value
        await CreateOperationHandler(
            resolver, operation_repo, id_generator, logger
        ).handle(
            CreateOperation(
                api_id=api.id, resource_id=resource.id, method="GET", path="/x"
            )
        )
        handler = DeleteApiHandler(api_repo, resource_repo, operation_repo, logger)

        # Act
        result = await handler.handle(DeleteApi(api_id=api.id))

        # Assert
        assert result == Success(value=None)
        assert api_repo.items == {}
        assert resource_repo.items == {}
        assert operation_repo.items == {}
        deleted = [ctx for lvl, msg, ctx in logger.records if msg == "api_deleted"]
        assert deleted[0]["resources_deleted"] == 1
        assert deleted[0]["operations_deleted"] == 1

    @pytest.mark.asyncio
    async def test_delete_missing_api_is_noop(
        self, api_repo, resource_repo, operation_repo, logger
    ):
        handler = DeleteApiHandler(api_repo, resource_repo, operation_repo, logger)

        result = await handler.handle(DeleteApi(api_id="nope"))

        assert result == Success(value=None)
        assert logger.messages("debug") == ["api_delete_noop"]


# =============================================================================
# Api queries
# =============================================================================


@pytest.mark.unit
class TestApiQueries:
    @pytest.mark.asyncio
    async def test_get_api(self, create_api_handler, resolver):
        created = await _create_api(create_api_handler)

        result = await GetApiHandler(resolver).handle(GetApi(api_id=created.id))

        assert result == Success(value=created)

    @pytest.mark.asyncio
    async def test_list_full_and_paged(self, create_api_handler, api_repo):
        for index in range(3):
            await _create_api(create_api_handler, base_path=f"/s{index}")
        handler = ListApisHandler(api_repo)

        full = await handler.handle(ListApis())
        paged = await handler.handle(ListApis(page=1, limit=2))

        assert isinstance(full.value, FullListing)
        assert [api.base_path for api in full.value.items] == ["/s0", "/s1", "/s2"]
        assert isinstance(paged.value, PagedListing)
        assert [api.base_path for api in paged.value.items] == ["/s2"]
        assert paged.value.total_pages == 2


# =============================================================================
# Resources
# =============================================================================


@pytest.mark.unit
class TestResourceHandlers:
    @pytest.mark.asyncio
    async def test_create_under_missing_api(self, create_resource_handler):
        result = await create_resource_handler.handle(
            CreateResource(api_id="nope", name="orders")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.API_NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_get_update(
        self,
        create_api_handler,
        create_resource_handler,
        resolver,
        resource_repo,
        logger,
    ):
        api = await _create_api(create_api_handler)
        created = (
            await create_resource_handler.handle(
                CreateResource(api_id=api.id, name="orders", description="Orders")
            )
        ).value

        fetched = await GetResourceHandler(resolver).handle(
            GetResource(api_id=api.id, resource_id=created.id)
        )
        updated = await UpdateResourceHandler(resolver, resource_repo, logger).handle(
            UpdateResource(api_id=api.id, resource_id=created.id, name="purchases")
        )

        assert fetched == Success(value=created)
        assert isinstance(updated, Success)
        assert updated.value.name == "purchases"
        assert updated.value.description is None

    @pytest.mark.asyncio
    async def test_blank_name_rejected(
        self, create_api_handler, create_resource_handler
    ):
        api = await _create_api(create_api_handler)

        result = await create_resource_handler.handle(
            CreateResource(api_id=api.id, name="")
        )

        assert isinstance(result, Failure)
        assert result.error.field == "name"

    @pytest.mark.asyncio
    async def test_list_resources_of_missing_api(self, resolver, resource_repo):
        result = await ListResourcesHandler(resolver, resource_repo).handle(
            ListResources(api_id="nope")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.API_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_resource_cascades_to_operations_only(
        self,
        create_api_handler,
        create_resource_handler,
        resolver,
        resource_repo,
        operation_repo,
        id_generator,
        logger,
    ):
        api = await _create_api(create_api_handler)
        keep = (
            await create_resource_handler.handle(
                CreateResource(api_id=api.id, name="keep")
            )
        ).value
        drop = (
            await create_resource_handler.handle(
                CreateResource(api_id=api.id, name="drop")
            )
        ).value
        create_operation = CreateOperationHandler(
            resolver, operation_repo, id_generator, logger
        )
        for resource_id in (keep.id, drop.id):
            await create_operation.handle(
                CreateOperation(
                    api_id=api.id, resource_id=resource_id, method="GET", path="/x"
                )
            )
        handler = DeleteResourceHandler(resolver, resource_repo, operation_repo, logger)

        result = await handler.handle(
            DeleteResource(api_id=api.id, resource_id=drop.id)
        )

        assert result == Success(value=None)
        assert list(resource_repo.items) == [keep.id]
        assert [op.resource_id for op in operation_repo.items.values()] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_resource_through_wrong_api_is_noop(
        self,
        create_api_handler,
        create_resource_handler,
        resolver,
        resource_repo,
        operation_repo,
        logger,
    ):
        api = await _create_api(create_api_handler)
        other = await _create_api(create_api_handler, base_path="/other")
        resource = (
            await create_resource_handler.handle(
                CreateResource(api_id=api.id, name="orders")
            )
        ).value
        handler = DeleteResourceHandler(resolver, resource_repo, operation_repo, logger)

        result = await handler.handle(
            DeleteResource(api_id=other.id, resource_id=resource.id)
        )

        assert result == Success(value=None)
        assert resource.id in resource_repo.items
