"""Repository dependency factories.

Request-scoped repository instances for catalog and directory entities.
FastAPI resolves get_db_session once per request, so every repository a
request touches shares one session and one unit of work.

Factories are annotated with the domain protocols; the SQLAlchemy
implementations are imported lazily inside each factory.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.domain.protocols import (
    ApiRepository,
    DeveloperRepository,
    EnvironmentRepository,
    OperationRepository,
    PlanRepository,
    ResourceRepository,
)

if TYPE_CHECKING:
    from src.application.services import HierarchyResolver


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_api_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ApiRepository:
    """Get Api repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        SQLAlchemy repository implementing ApiRepository.
    """
    from src.infrastructure.persistence import repositories

    return repositories.ApiRepository(session=session)


async def get_resource_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ResourceRepository:
    """Get Resource repository (request-scoped)."""
    from src.infrastructure.persistence import repositories

    return repositories.ResourceRepository(session=session)


async def get_operation_repository(
    session: AsyncSession = Depends(get_db_session),
) -> OperationRepository:
    """Get Operation repository (request-scoped)."""
    from src.infrastructure.persistence import repositories

    return repositories.OperationRepository(session=session)


async def get_environment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> EnvironmentRepository:
    """Get Environment repository (request-scoped)."""
    from src.infrastructure.persistence import repositories

    return repositories.EnvironmentRepository(session=session)


async def get_plan_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PlanRepository:
    """Get Plan repository (request-scoped)."""
    from src.infrastructure.persistence import repositories

    return repositories.PlanRepository(session=session)


async def get_developer_repository(
    session: AsyncSession = Depends(get_db_session),
) -> DeveloperRepository:
    """Get Developer repository (request-scoped)."""
    from src.infrastructure.persistence import repositories

    return repositories.DeveloperRepository(session=session)


async def get_hierarchy_resolver(
    api_repo: ApiRepository = Depends(get_api_repository),
    resource_repo: ResourceRepository = Depends(get_resource_repository),
    operation_repo: OperationRepository = Depends(get_operation_repository),
) -> "HierarchyResolver":
    """Get Api -> Resource -> Operation chain resolver (request-scoped).

    Shares the request's repositories so chain checks and writes see the
    same session state.
    """
    from src.application.services import HierarchyResolver

    return HierarchyResolver(
        api_repo=api_repo,
        resource_repo=resource_repo,
        operation_repo=operation_repo,
    )
