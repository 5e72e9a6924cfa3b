"""Catalog handler dependency factories.

Request-scoped handler instances for the Api -> Resource -> Operation
hierarchy:
- Apis: create, get, list, update, delete
- Resources: create, get, list, update, delete
- Operations: create, get, list, list by Api, update, delete

Each factory receives request-scoped repositories (sharing one session)
and app-scoped services (logger, id generator).
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.application.services import HierarchyResolver
from src.core.config import settings
from src.core.container.infrastructure import get_id_generator, get_logger
from src.core.container.repositories import (
    get_api_repository,
    get_environment_repository,
    get_hierarchy_resolver,
    get_operation_repository,
    get_plan_repository,
    get_resource_repository,
)
from src.domain.protocols import (
    ApiRepository,
    EnvironmentRepository,
    OperationRepository,
    PlanRepository,
    ResourceRepository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.api_handlers import (
        CreateApiHandler,
        DeleteApiHandler,
        UpdateApiHandler,
    )
    from src.application.commands.handlers.create_operation_handler import (
        CreateOperationHandler,
    )
    from src.application.commands.handlers.delete_operation_handler import (
        DeleteOperationHandler,
    )
    from src.application.commands.handlers.resource_handlers import (
        CreateResourceHandler,
        DeleteResourceHandler,
        UpdateResourceHandler,
    )
    from src.application.commands.handlers.update_operation_handler import (
        UpdateOperationHandler,
    )
    from src.application.queries.handlers.api_query_handlers import (
        GetApiHandler,
        ListApisHandler,
    )
    from src.application.queries.handlers.get_operation_handler import (
        GetOperationHandler,
    )
    from src.application.queries.handlers.list_operations_handler import (
        ListOperationsByApiHandler,
        ListOperationsHandler,
    )
    from src.application.queries.handlers.resource_query_handlers import (
        GetResourceHandler,
        ListResourcesHandler,
    )


# ============================================================================
# Api Handler Factories
# ============================================================================


async def get_create_api_handler(
    api_repo: ApiRepository = Depends(get_api_repository),
    environment_repo: EnvironmentRepository = Depends(get_environment_repository),
    plan_repo: PlanRepository = Depends(get_plan_repository),
) -> "CreateApiHandler":
    """Get CreateApi command handler (request-scoped).

    Dependencies:
        - ApiRepository (request-scoped)
        - EnvironmentRepository, PlanRepository for reference checks
        - Uuid7IdGenerator (app-scoped singleton)
        - Logger (app-scoped singleton)

    Returns:
        CreateApiHandler instance.
    """
    from src.application.commands.handlers.api_handlers import CreateApiHandler

    return CreateApiHandler(
        api_repo=api_repo,
        environment_repo=environment_repo,
        plan_repo=plan_repo,
        id_generator=get_id_generator(),
        logger=get_logger(),
    )


async def get_get_api_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
) -> "GetApiHandler":
    """Get GetApi query handler (request-scoped)."""
    from src.application.queries.handlers.api_query_handlers import GetApiHandler

    return GetApiHandler(resolver=resolver)


async def get_list_apis_handler(
    api_repo: ApiRepository = Depends(get_api_repository),
) -> "ListApisHandler":
    """Get ListApis query handler (request-scoped)."""
    from src.application.queries.handlers.api_query_handlers import ListApisHandler

    return ListApisHandler(
        api_repo=api_repo,
        default_page_limit=settings.default_page_limit,
    )


async def get_update_api_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    api_repo: ApiRepository = Depends(get_api_repository),
    environment_repo: EnvironmentRepository = Depends(get_environment_repository),
    plan_repo: PlanRepository = Depends(get_plan_repository),
) -> "UpdateApiHandler":
    """Get UpdateApi command handler (request-scoped)."""
    from src.application.commands.handlers.api_handlers import UpdateApiHandler

    return UpdateApiHandler(
        resolver=resolver,
        api_repo=api_repo,
        environment_repo=environment_repo,
        plan_repo=plan_repo,
        logger=get_logger(),
    )


async def get_delete_api_handler(
    api_repo: ApiRepository = Depends(get_api_repository),
    resource_repo: ResourceRepository = Depends(get_resource_repository),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "DeleteApiHandler":
    """Get DeleteApi command handler (request-scoped).

    The three repositories share the request session, so the cascade
    commits or rolls back as one unit.
    """
    from src.application.commands.handlers.api_handlers import DeleteApiHandler

    return DeleteApiHandler(
        api_repo=api_repo,
        resource_repo=resource_repo,
        operation_repo=operation_repo,
        logger=get_logger(),
    )


# ============================================================================
# Resource Handler Factories
# ============================================================================


async def get_create_resource_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    resource_repo: ResourceRepository = Depends(get_resource_repository),
) -> "CreateResourceHandler":
    """Get CreateResource command handler (request-scoped)."""
    from src.application.commands.handlers.resource_handlers import (
        CreateResourceHandler,
    )

    return CreateResourceHandler(
        resolver=resolver,
        resource_repo=resource_repo,
        id_generator=get_id_generator(),
        logger=get_logger(),
    )


async def get_get_resource_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
) -> "GetResourceHandler":
    """Get GetResource query handler (request-scoped)."""
    from src.application.queries.handlers.resource_query_handlers import (
        GetResourceHandler,
    )

    return GetResourceHandler(resolver=resolver)


async def get_list_resources_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    resource_repo: ResourceRepository = Depends(get_resource_repository),
) -> "ListResourcesHandler":
    """Get ListResources query handler (request-scoped)."""
    from src.application.queries.handlers.resource_query_handlers import (
        ListResourcesHandler,
    )

    return ListResourcesHandler(
        resolver=resolver,
        resource_repo=resource_repo,
        default_page_limit=settings.default_page_limit,
    )


async def get_update_resource_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    resource_repo: ResourceRepository = Depends(get_resource_repository),
) -> "UpdateResourceHandler":
    """Get UpdateResource command handler (request-scoped)."""
    from src.application.commands.handlers.resource_handlers import (
        UpdateResourceHandler,
    )

    return UpdateResourceHandler(
        resolver=resolver,
        resource_repo=resource_repo,
        logger=get_logger(),
    )


async def get_delete_resource_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    resource_repo: ResourceRepository = Depends(get_resource_repository),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "DeleteResourceHandler":
    """Get DeleteResource command handler (request-scoped)."""
    from src.application.commands.handlers.resource_handlers import (
        DeleteResourceHandler,
    )

    return DeleteResourceHandler(
        resolver=resolver,
        resource_repo=resource_repo,
        operation_repo=operation_repo,
        logger=get_logger(),
    )


# ============================================================================
# Operation Handler Factories
# ============================================================================


async def get_create_operation_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "CreateOperationHandler":
    """Get CreateOperation command handler (request-scoped).

    Dependencies:
        - HierarchyResolver (request-scoped, chain check)
        - OperationRepository (request-scoped)
        - Uuid7IdGenerator (app-scoped singleton)
        - Logger (app-scoped singleton)

    Returns:
        CreateOperationHandler instance.

    Usage:
        @router.post("/apis/{api_id}/resources/{resource_id}/operations")
        async def create_operation(
            handler: CreateOperationHandler = Depends(get_create_operation_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.create_operation_handler import (
        CreateOperationHandler,
    )

    return CreateOperationHandler(
        resolver=resolver,
        operation_repo=operation_repo,
        id_generator=get_id_generator(),
        logger=get_logger(),
    )


async def get_get_operation_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
) -> "GetOperationHandler":
    """Get GetOperation query handler (request-scoped)."""
    from src.application.queries.handlers.get_operation_handler import (
        GetOperationHandler,
    )

    return GetOperationHandler(resolver=resolver)


async def get_list_operations_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "ListOperationsHandler":
    """Get ListOperations query handler (request-scoped)."""
    from src.application.queries.handlers.list_operations_handler import (
        ListOperationsHandler,
    )

    return ListOperationsHandler(
        resolver=resolver,
        operation_repo=operation_repo,
        default_page_limit=settings.default_page_limit,
    )


async def get_list_operations_by_api_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "ListOperationsByApiHandler":
    """Get ListOperationsByApi query handler (request-scoped)."""
    from src.application.queries.handlers.list_operations_handler import (
        ListOperationsByApiHandler,
    )

    return ListOperationsByApiHandler(
        resolver=resolver,
        operation_repo=operation_repo,
    )


async def get_update_operation_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "UpdateOperationHandler":
    """Get UpdateOperation command handler (request-scoped)."""
    from src.application.commands.handlers.update_operation_handler import (
        UpdateOperationHandler,
    )

    return UpdateOperationHandler(
        resolver=resolver,
        operation_repo=operation_repo,
        logger=get_logger(),
    )


async def get_delete_operation_handler(
    resolver: HierarchyResolver = Depends(get_hierarchy_resolver),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "DeleteOperationHandler":
    """Get DeleteOperation command handler (request-scoped)."""
    from src.application.commands.handlers.delete_operation_handler import (
        DeleteOperationHandler,
    )

    return DeleteOperationHandler(
        resolver=resolver,
        operation_repo=operation_repo,
        logger=get_logger(),
    )
