"""Resources resource handlers.

Handler functions for the Resource endpoints nested under an Api.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_resources   - List an Api's Resources (paged or full)
    get_resource     - Get one Resource of an Api
    create_resource  - Attach a Resource to an Api
    update_resource  - Replace a Resource's name and description
    delete_resource  - Delete a Resource with its Operations
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateResource, DeleteResource, UpdateResource
from src.application.commands.handlers.resource_handlers import (
    CreateResourceHandler,
    DeleteResourceHandler,
    UpdateResourceHandler,
)
from src.application.queries import GetResource, ListResources
from src.application.queries.handlers.resource_query_handlers import (
    GetResourceHandler,
    ListResourcesHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_resource_handler,
    get_delete_resource_handler,
    get_get_resource_handler,
    get_list_resources_handler,
    get_update_resource_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common import PaginatedResponse, listing_response
from src.schemas.resource_schemas import (
    ResourceCreateRequest,
    ResourceResponse,
    ResourceUpdateRequest,
)

ApiId = Annotated[str, Path(description="Api identifier")]
ResourceId = Annotated[str, Path(description="Resource identifier")]


async def list_resources(
    request: Request,
    api_id: ApiId,
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    limit: Annotated[int | None, Query(description="Page size")] = None,
    handler: ListResourcesHandler = Depends(get_list_resources_handler),
) -> PaginatedResponse[ResourceResponse] | list[ResourceResponse] | JSONResponse:
    """List the Resources of an Api.

    GET /api/v1/apis/{api_id}/resources → 200 OK
    """
    result = await handler.handle(
        ListResources(api_id=api_id, page=page, limit=limit)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return listing_response(result.value, ResourceResponse, ResourceResponse.from_dto)


async def get_resource(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    handler: GetResourceHandler = Depends(get_get_resource_handler),
) -> ResourceResponse | JSONResponse:
    """Get one Resource of an Api.

    GET /api/v1/apis/{api_id}/resources/{resource_id} → 200 OK
    """
    result = await handler.handle(GetResource(api_id=api_id, resource_id=resource_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return ResourceResponse.from_dto(result.value)


async def create_resource(
    request: Request,
    response: Response,
    api_id: ApiId,
    data: ResourceCreateRequest,
    handler: CreateResourceHandler = Depends(get_create_resource_handler),
) -> ResourceResponse | JSONResponse:
    """Attach a Resource to an Api.

    POST /api/v1/apis/{api_id}/resources → 201 Created
    """
    command = CreateResource(
        api_id=api_id, name=data.name, description=data.description
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    resource = result.value
    response.headers["Location"] = (
        f"{settings.api_v1_prefix}/apis/{resource.api_id}/resources/{resource.id}"
    )
    return ResourceResponse.from_dto(resource)


async def update_resource(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    data: ResourceUpdateRequest,
    handler: UpdateResourceHandler = Depends(get_update_resource_handler),
) -> ResourceResponse | JSONResponse:
    """Replace a Resource's name and description.

    PUT /api/v1/apis/{api_id}/resources/{resource_id} → 200 OK
    """
    command = UpdateResource(
        api_id=api_id,
        resource_id=resource_id,
        name=data.name,
        description=data.description,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ResourceResponse.from_dto(result.value)


async def delete_resource(
    request: Request,
    api_id: ApiId,
    resource_id: ResourceId,
    handler: DeleteResourceHandler = Depends(get_delete_resource_handler),
) -> Response:
    """Delete a Resource and its Operations.

    DELETE /api/v1/apis/{api_id}/resources/{resource_id} → 204 No Content
    """
    result = await handler.handle(
        DeleteResource(api_id=api_id, resource_id=resource_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
