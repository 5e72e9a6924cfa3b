"""Environments resource handlers.

Handlers:
    list_environments   - List Environments (paged or full)
    get_environment     - Get Environment details
    create_environment  - Register an Environment
    delete_environment  - Delete an Environment (idempotent)
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateEnvironment, DeleteEnvironment
from src.application.commands.handlers.environment_handlers import (
    CreateEnvironmentHandler,
    DeleteEnvironmentHandler,
)
from src.application.queries import GetEnvironment, ListEnvironments
from src.application.queries.handlers.environment_query_handlers import (
    GetEnvironmentHandler,
    ListEnvironmentsHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_environment_handler,
    get_delete_environment_handler,
    get_get_environment_handler,
    get_list_environments_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common import PaginatedResponse, listing_response
from src.schemas.environment_schemas import (
    EnvironmentCreateRequest,
    EnvironmentResponse,
)

EnvironmentId = Annotated[str, Path(description="Environment identifier")]


async def list_environments(
    request: Request,
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    limit: Annotated[int | None, Query(description="Page size")] = None,
    handler: ListEnvironmentsHandler = Depends(get_list_environments_handler),
) -> PaginatedResponse[EnvironmentResponse] | list[EnvironmentResponse] | JSONResponse:
    """List Environments.

    GET /api/v1/environments → 200 OK
    """
    result = await handler.handle(ListEnvironments(page=page, limit=limit))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return listing_response(
        result.value, EnvironmentResponse, EnvironmentResponse.from_dto
    )


async def get_environment(
    request: Request,
    environment_id: EnvironmentId,
    handler: GetEnvironmentHandler = Depends(get_get_environment_handler),
) -> EnvironmentResponse | JSONResponse:
    """Get an Environment.

    GET /api/v1/environments/{environment_id} → 200 OK
    """
    result = await handler.handle(GetEnvironment(environment_id=environment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return EnvironmentResponse.from_dto(result.value)


async def create_environment(
    request: Request,
    response: Response,
    data: EnvironmentCreateRequest,
    handler: CreateEnvironmentHandler = Depends(get_create_environment_handler),
) -> EnvironmentResponse | JSONResponse:
    """Register an Environment.

    POST /api/v1/environments → 201 Created
    """
    command = CreateEnvironment(
        name=data.name,
        inbound_url=data.inbound_url,
        outbound_url=data.outbound_url,
        description=data.description,
        status=data.status,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    response.headers["Location"] = (
        f"{settings.api_v1_prefix}/environments/{result.value.id}"
    )
    return EnvironmentResponse.from_dto(result.value)


async def delete_environment(
    request: Request,
    environment_id: EnvironmentId,
    handler: DeleteEnvironmentHandler = Depends(get_delete_environment_handler),
) -> Response:
    """Delete an Environment.

    DELETE /api/v1/environments/{environment_id} → 204 No Content
    """
    result = await handler.handle(DeleteEnvironment(environment_id=environment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
