"""Developers resource handlers.

Developer credentials are accepted on create and never returned.

Handlers:
    list_developers   - List Developers (paged or full)
    get_developer     - Get Developer details
    create_developer  - Register a Developer
    delete_developer  - Delete a Developer (idempotent)
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateDeveloper, DeleteDeveloper
from src.application.commands.handlers.developer_handlers import (
    CreateDeveloperHandler,
    DeleteDeveloperHandler,
)
from src.application.queries import GetDeveloper, ListDevelopers
from src.application.queries.handlers.developer_query_handlers import (
    GetDeveloperHandler,
    ListDevelopersHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_developer_handler,
    get_delete_developer_handler,
    get_get_developer_handler,
    get_list_developers_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common import PaginatedResponse, listing_response
from src.schemas.developer_schemas import DeveloperCreateRequest, DeveloperResponse

DeveloperId = Annotated[str, Path(description="Developer identifier")]


async def list_developers(
    request: Request,
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    limit: Annotated[int | None, Query(description="Page size")] = None,
    handler: ListDevelopersHandler = Depends(get_list_developers_handler),
) -> PaginatedResponse[DeveloperResponse] | list[DeveloperResponse] | JSONResponse:
    """List Developers.

    GET /api/v1/developers → 200 OK
    """
    result = await handler.handle(ListDevelopers(page=page, limit=limit))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return listing_response(result.value, DeveloperResponse, DeveloperResponse.from_dto)


async def get_developer(
    request: Request,
    developer_id: DeveloperId,
    handler: GetDeveloperHandler = Depends(get_get_developer_handler),
) -> DeveloperResponse | JSONResponse:
    """Get a Developer.

    GET /api/v1/developers/{developer_id} → 200 OK
    """
    result = await handler.handle(GetDeveloper(developer_id=developer_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return DeveloperResponse.from_dto(result.value)


async def create_developer(
    request: Request,
    response: Response,
    data: DeveloperCreateRequest,
    handler: CreateDeveloperHandler = Depends(get_create_developer_handler),
) -> DeveloperResponse | JSONResponse:
    """Register a Developer.

    POST /api/v1/developers → 201 Created

    A duplicate email is 409.
    """
    command = CreateDeveloper(
        name=data.name,
        email=data.email,
        password=data.password.get_secret_value(),
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
        f"{settings.api_v1_prefix}/developers/{result.value.id}"
    )
    return DeveloperResponse.from_dto(result.value)


async def delete_developer(
    request: Request,
    developer_id: DeveloperId,
    handler: DeleteDeveloperHandler = Depends(get_delete_developer_handler),
) -> Response:
    """Delete a Developer.

    DELETE /api/v1/developers/{developer_id} → 204 No Content
    """
    result = await handler.handle(DeleteDeveloper(developer_id=developer_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
