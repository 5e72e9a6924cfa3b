"""Plans resource handlers.

Handlers:
    list_plans   - List Plans (paged or full)
    get_plan     - Get Plan details
    create_plan  - Register a Plan
    delete_plan  - Delete a Plan (idempotent)
"""

from typing import Annotated

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreatePlan, DeletePlan
from src.application.commands.handlers.plan_handlers import (
    CreatePlanHandler,
    DeletePlanHandler,
)
from src.application.queries import GetPlan, ListPlans
from src.application.queries.handlers.plan_query_handlers import (
    GetPlanHandler,
    ListPlansHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_plan_handler,
    get_delete_plan_handler,
    get_get_plan_handler,
    get_list_plans_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common import PaginatedResponse, listing_response
from src.schemas.plan_schemas import PlanCreateRequest, PlanResponse

PlanId = Annotated[str, Path(description="Plan identifier")]


async def list_plans(
    request: Request,
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    limit: Annotated[int | None, Query(description="Page size")] = None,
    handler: ListPlansHandler = Depends(get_list_plans_handler),
) -> PaginatedResponse[PlanResponse] | list[PlanResponse] | JSONResponse:
    """List Plans.

    GET /api/v1/plans → 200 OK
    """
    result = await handler.handle(ListPlans(page=page, limit=limit))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return listing_response(result.value, PlanResponse, PlanResponse.from_dto)


async def get_plan(
    request: Request,
    plan_id: PlanId,
    handler: GetPlanHandler = Depends(get_get_plan_handler),
) -> PlanResponse | JSONResponse:
    """Get a Plan.

    GET /api/v1/plans/{plan_id} → 200 OK
    """
    result = await handler.handle(GetPlan(plan_id=plan_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
            is_query=True,
        )

    return PlanResponse.from_dto(result.value)


async def create_plan(
    request: Request,
    response: Response,
    data: PlanCreateRequest,
    handler: CreatePlanHandler = Depends(get_create_plan_handler),
) -> PlanResponse | JSONResponse:
    """Register a Plan.

    POST /api/v1/plans → 201 Created
    """
    command = CreatePlan(
        name=data.name,
        description=data.description,
        is_default=data.is_default,
        status=data.status,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    response.headers["Location"] = f"{settings.api_v1_prefix}/plans/{result.value.id}"
    return PlanResponse.from_dto(result.value)


async def delete_plan(
    request: Request,
    plan_id: PlanId,
    handler: DeletePlanHandler = Depends(get_delete_plan_handler),
) -> Response:
    """Delete a Plan.

    DELETE /api/v1/plans/{plan_id} → 204 No Content
    """
    result = await handler.handle(DeletePlan(plan_id=plan_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
