"""Operations resource handlers.

Handler functions for the Operation endpoints nested under an Api's
Resource. Routes are registered via ROUTE_REGISTRY in routes/registry.py,
which also attaches the Access Gate for each route.

Handlers:
    list_operations         - List a Resource's Operations (paged or full)
    get_operation           - Get one Operation through its chain
    create_operation        - Attach an Operation to a Resource
    update_operation        - Replace an Operation's method, path, description
    delete_operation        - Delete an Operation (idempotent)
    list_operations_by_api  - List every Operation of an Api
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateOperation, DeleteOperation, UpdateOperation
from src.application.commands.handlers.create_operation_handler import (
    CreateOperationHandler,
)
from src.application.commands.handlers.delete_operation_handler import (
    DeleteOperationHandler,
)
from src.application.commands.handlers.update_operation_handler import (
    UpdateOperationHandler,
)
from src.application.queries import GetOperation, ListOperations, ListOperationsByApi
from src.application.queries.handlers.get_operation_handler import (
    GetOperationHandler,
)
from src.application.queries.handlers.list_operations_handler import (
    ListOperationsByApiHandler,
    ListOperationsHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_operation_handler,
    get_delete_operation_handler,
    get_get_operation_handler,
    get_list_operations_by_api_handler,
    get_list_operations_handler,
    get_update_operation_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common import PaginatedResponse, listing_response
from src.schemas.operation_schemas import (
    OperationCreateRequest,
    OperationResponse,
    OperationUpdateRequest,
)

ApiId = Annotated[str, Path(description="Api identifier")]
ResourceId = Annotated[str, Path(description="Resource identifier")]
OperationId = Annotated[str, Path(description="Operation identifier")]
PageParam = Annotated[
    int | None, Query(description="Zero-based page index; omit both for full list")
]
LimitParam = Annotated[
    int | None, Query(description="Page size; omit both for full list")
]


async def list_operations(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    page: PageParam = None,
    limit: LimitParam = None,
    handler: ListOperationsHandler = Depends(get_list_operations_handler),
) -> PaginatedResponse[OperationResponse] | list[OperationResponse] | JSONResponse:
    """List the Operations of a Resource.

    GET /api/v1/apis/{api_id}/resources/{resource_id}/operations → 200 OK

    Without ``page`` and ``limit`` the full collection is returned as a JSON
    array; with either one, a PaginatedResponse.

    Returns:
        Page or full list of Operations.
        JSONResponse with RFC 7807 error on failure (404, 400).
    """
    query = ListOperations(
        api_id=api_id, resource_id=resource_id, page=page, limit=limit
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return listing_response(result.value, OperationResponse, OperationResponse.from_dto)


async def get_operation(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    operation_id: OperationId,
    handler: GetOperationHandler = Depends(get_get_operation_handler),
) -> OperationResponse | JSONResponse:
    """Get one Operation.

    GET /api/v1/apis/{api_id}/resources/{resource_id}/operations/{operation_id} → 200 OK

    The Operation must belong to the Resource, and the Resource to the Api;
    any broken link is 404.
    """
    query = GetOperation(
        api_id=api_id, resource_id=resource_id, operation_id=operation_id
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return OperationResponse.from_dto(result.value)


async def create_operation(
    request: Request,
    response: Response,
    api_id: ApiId,
    resource_id: ResourceId,
    data: OperationCreateRequest,
    handler: CreateOperationHandler = Depends(get_create_operation_handler),
) -> OperationResponse | JSONResponse:
    """Attach an Operation to a Resource.

    POST /api/v1/apis/{api_id}/resources/{resource_id}/operations → 201 Created

    Sets the Location header to the new Operation's URL.

    Returns:
        OperationResponse for the created Operation.
        JSONResponse with RFC 7807 error on failure (404, 400, 409).
    """
    command = CreateOperation(
        api_id=api_id,
        resource_id=resource_id,
        method=data.method,
        path=data.path,
        description=data.description,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    response.headers["Location"] = f"{settings.api_v1_prefix}{result.value.location}"
    return OperationResponse.from_dto(result.value)


async def update_operation(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    operation_id: OperationId,
    data: OperationUpdateRequest,
    handler: UpdateOperationHandler = Depends(get_update_operation_handler),
) -> OperationResponse | JSONResponse:
    """Replace an Operation's method, path and description.

    PUT /api/v1/apis/{api_id}/resources/{resource_id}/operations/{operation_id} → 200 OK
    """
    command = UpdateOperation(
        api_id=api_id,
        resource_id=resource_id,
        operation_id=operation_id,
        method=data.method,
        path=data.path,
        description=data.description,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return OperationResponse.from_dto(result.value)


async def delete_operation(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    operation_id: OperationId,
    handler: DeleteOperationHandler = Depends(get_delete_operation_handler),
) -> Response:
    """Delete an Operation.

    DELETE /api/v1/apis/{api_id}/resources/{resource_id}/operations/{operation_id} → 204

    Deleting an Operation that does not exist (or is not reachable through
    the given chain) also returns 204.
    """
    command = DeleteOperation(
        api_id=api_id, resource_id=resource_id, operation_id=operation_id
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_operations_by_api(
    request: Request,
    api_id: ApiId,
    handler: ListOperationsByApiHandler = Depends(get_list_operations_by_api_handler),
) -> list[OperationResponse] | JSONResponse:
    """List every Operation across the Resources of an Api.

    GET /api/v1/apis/{api_id}/operations → 200 OK
    """
    result = await handler.handle(ListOperationsByApi(api_id=api_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return [OperationResponse.from_dto(dto) for dto in result.value]
