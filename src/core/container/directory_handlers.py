"""Directory handler dependency factories.

Request-scoped handler instances for the entities that sit beside the
catalog hierarchy: environments, plans and developers.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_id_generator,
    get_logger,
    get_password_service,
)
from src.core.container.repositories import (
    get_developer_repository,
    get_environment_repository,
    get_plan_repository,
)
from src.domain.protocols import (
    DeveloperRepository,
    EnvironmentRepository,
    PlanRepository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.developer_handlers import (
        CreateDeveloperHandler,
        DeleteDeveloperHandler,
    )
    from src.application.commands.handlers.environment_handlers import (
        CreateEnvironmentHandler,
        DeleteEnvironmentHandler,
    )
    from src.application.commands.handlers.plan_handlers import (
        CreatePlanHandler,
        DeletePlanHandler,
    )
    from src.application.queries.handlers.developer_query_handlers import (
        FindDeveloperByCredentialsHandler,
        GetDeveloperHandler,
        ListDevelopersHandler,
    )
    from src.application.queries.handlers.environment_query_handlers import (
        GetEnvironmentHandler,
        ListEnvironmentsHandler,
    )
    from src.application.queries.handlers.plan_query_handlers import (
        GetPlanHandler,
        ListPlansHandler,
    )


# ============================================================================
# Environment Handler Factories
# ============================================================================


async def get_create_environment_handler(
    environment_repo: EnvironmentRepository = Depends(get_environment_repository),
) -> "CreateEnvironmentHandler":
    """Get CreateEnvironment command handler (request-scoped)."""
    from src.application.commands.handlers.environment_handlers import (
        CreateEnvironmentHandler,
    )

    return CreateEnvironmentHandler(
        environment_repo=environment_repo,
        id_generator=get_id_generator(),
        logger=get_logger(),
    )


async def get_get_environment_handler(
    environment_repo: EnvironmentRepository = Depends(get_environment_repository),
) -> "GetEnvironmentHandler":
    """Get GetEnvironment query handler (request-scoped)."""
    from src.application.queries.handlers.environment_query_handlers import (
        GetEnvironmentHandler,
    )

    return GetEnvironmentHandler(environment_repo=environment_repo)


async def get_list_environments_handler(
    environment_repo: EnvironmentRepository = Depends(get_environment_repository),
) -> "ListEnvironmentsHandler":
    """Get ListEnvironments query handler (request-scoped)."""
    from src.application.queries.handlers.environment_query_handlers import (
        ListEnvironmentsHandler,
    )

    return ListEnvironmentsHandler(
        environment_repo=environment_repo,
        default_page_limit=settings.default_page_limit,
    )


async def get_delete_environment_handler(
    environment_repo: EnvironmentRepository = Depends(get_environment_repository),
) -> "DeleteEnvironmentHandler":
    """Get DeleteEnvironment command handler (request-scoped)."""
    from src.application.commands.handlers.environment_handlers import (
        DeleteEnvironmentHandler,
    )

    return DeleteEnvironmentHandler(
        environment_repo=environment_repo,
        logger=get_logger(),
    )


# ============================================================================
# Plan Handler Factories
# ============================================================================


async def get_create_plan_handler(
    plan_repo: PlanRepository = Depends(get_plan_repository),
) -> "CreatePlanHandler":
    """Get CreatePlan command handler (request-scoped)."""
    from src.application.commands.handlers.plan_handlers import CreatePlanHandler

    return CreatePlanHandler(
        plan_repo=plan_repo,
        id_generator=get_id_generator(),
        logger=get_logger(),
    )


async def get_get_plan_handler(
    plan_repo: PlanRepository = Depends(get_plan_repository),
) -> "GetPlanHandler":
    """Get GetPlan query handler (request-scoped)."""
    from src.application.queries.handlers.plan_query_handlers import GetPlanHandler

    return GetPlanHandler(plan_repo=plan_repo)


async def get_list_plans_handler(
    plan_repo: PlanRepository = Depends(get_plan_repository),
) -> "ListPlansHandler":
    """Get ListPlans query handler (request-scoped)."""
    from src.application.queries.handlers.plan_query_handlers import (
        ListPlansHandler,
    )

    return ListPlansHandler(
        plan_repo=plan_repo,
        default_page_limit=settings.default_page_limit,
    )


async def get_delete_plan_handler(
    plan_repo: PlanRepository = Depends(get_plan_repository),
) -> "DeletePlanHandler":
    """Get DeletePlan command handler (request-scoped)."""
    from src.application.commands.handlers.plan_handlers import DeletePlanHandler

    return DeletePlanHandler(plan_repo=plan_repo, logger=get_logger())


# ============================================================================
# Developer Handler Factories
# ============================================================================


async def get_create_developer_handler(
    developer_repo: DeveloperRepository = Depends(get_developer_repository),
) -> "CreateDeveloperHandler":
    """Get CreateDeveloper command handler (request-scoped).

    Dependencies:
        - DeveloperRepository (request-scoped)
        - BcryptPasswordService (app-scoped singleton)
        - Uuid7IdGenerator (app-scoped singleton)
        - Logger (app-scoped singleton)
    """
    from src.application.commands.handlers.developer_handlers import (
        CreateDeveloperHandler,
    )

    return CreateDeveloperHandler(
        developer_repo=developer_repo,
        password_service=get_password_service(),
        id_generator=get_id_generator(),
        logger=get_logger(),
    )


async def get_get_developer_handler(
    developer_repo: DeveloperRepository = Depends(get_developer_repository),
) -> "GetDeveloperHandler":
    """Get GetDeveloper query handler (request-scoped)."""
    from src.application.queries.handlers.developer_query_handlers import (
        GetDeveloperHandler,
    )

    return GetDeveloperHandler(developer_repo=developer_repo)


async def get_list_developers_handler(
    developer_repo: DeveloperRepository = Depends(get_developer_repository),
) -> "ListDevelopersHandler":
    """Get ListDevelopers query handler (request-scoped)."""
    from src.application.queries.handlers.developer_query_handlers import (
        ListDevelopersHandler,
    )

    return ListDevelopersHandler(
        developer_repo=developer_repo,
        default_page_limit=settings.default_page_limit,
    )


async def get_delete_developer_handler(
    developer_repo: DeveloperRepository = Depends(get_developer_repository),
) -> "DeleteDeveloperHandler":
    """Get DeleteDeveloper command handler (request-scoped)."""
    from src.application.commands.handlers.developer_handlers import (
        DeleteDeveloperHandler,
    )

    return DeleteDeveloperHandler(
        developer_repo=developer_repo,
        logger=get_logger(),
    )


async def get_find_developer_by_credentials_handler(
    developer_repo: DeveloperRepository = Depends(get_developer_repository),
) -> "FindDeveloperByCredentialsHandler":
    """Get FindDeveloperByCredentials query handler (request-scoped).

    Not mounted on any route; used by gateway-side credential checks.
    """
    from src.application.queries.handlers.developer_query_handlers import (
        FindDeveloperByCredentialsHandler,
    )

    return FindDeveloperByCredentialsHandler(
        developer_repo=developer_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )
