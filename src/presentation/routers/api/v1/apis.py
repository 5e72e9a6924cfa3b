"""Apis resource handlers.

Handler functions for Api management endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_apis   - List Apis (paged or full)
    get_api     - Get Api details
    create_api  - Register an Api
    update_api  - Replace an Api's fields
    delete_api  - Delete an Api with its Resources and Operations
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateApi, DeleteApi, UpdateApi
from src.application.commands.handlers.api_handlers import (
    CreateApiHandler,
    DeleteApiHandler,
    UpdateApiHandler,
)
from src.application.queries import GetApi, ListApis
from src.application.queries.handlers.api_query_handlers import (
    GetApiHandler,
    ListApisHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_api_handler,
    get_delete_api_handler,
    get_get_api_handler,
    get_list_apis_handler,
    get_update_api_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.api_schemas import ApiCreateRequest, ApiResponse, ApiUpdateRequest
from src.schemas.common import PaginatedResponse, listing_response

ApiId = Annotated[str, Path(description="Api identifier")]


async def list_apis(
    request: Request,
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    limit: Annotated[int | None, Query(description="Page size")] = None,
    handler: ListApisHandler = Depends(get_list_apis_handler),
) -> PaginatedResponse[ApiResponse] | list[ApiResponse] | JSONResponse:
    """List Apis.

    GET /api/v1/apis → 200 OK
    """
    result = await handler.handle(ListApis(page=page, limit=limit))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return listing_response(result.value, ApiResponse, ApiResponse.from_dto)


async def get_api(
    request: Request,
    api_id: ApiId,
    handler: GetApiHandler = Depends(get_get_api_handler),
) -> ApiResponse | JSONResponse:
    """Get an Api.

    GET /api/v1/apis/{api_id} → 200 OK
    """
    result = await handler.handle(GetApi(api_id=api_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return ApiResponse.from_dto(result.value)


async def create_api(
    request: Request,
    response: Response,
    data: ApiCreateRequest,
    handler: CreateApiHandler = Depends(get_create_api_handler),
) -> ApiResponse | JSONResponse:
    """Register an Api.

    POST /api/v1/apis → 201 Created

    Every environment and plan id must reference an existing entity.
    """
    command = CreateApi(
        name=data.name,
        version=data.version,
        base_path=data.base_path,
        description=data.description,
        cors=data.cors,
        status=data.status,
        environment_ids=list(data.environment_ids),
        plan_ids=list(data.plan_ids),
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    response.headers["Location"] = f"{settings.api_v1_prefix}/apis/{result.value.id}"
    return ApiResponse.from_dto(result.value)


async def update_api(
    request: Request,
    api_id: ApiId,
    data: ApiUpdateRequest,
    handler: UpdateApiHandler = Depends(get_update_api_handler),
) -> ApiResponse | JSONResponse:
    """Replace an Api's fields.

    PUT /api/v1/apis/{api_id} → 200 OK
    """
    command = UpdateApi(
        api_id=api_id,
        name=data.name,
        version=data.version,
        base_path=data.base_path,
        description=data.description,
        cors=data.cors,
        status=data.status,
        environment_ids=list(data.environment_ids),
        plan_ids=list(data.plan_ids),
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ApiResponse.from_dto(result.value)


async def delete_api(
    request: Request,
    api_id: ApiId,
    handler: DeleteApiHandler = Depends(get_delete_api_handler),
) -> Response:
    """Delete an Api, its Resources and their Operations.

    DELETE /api/v1/apis/{api_id} → 204 No Content (also when absent)
    """
    result = await handler.handle(DeleteApi(api_id=api_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
