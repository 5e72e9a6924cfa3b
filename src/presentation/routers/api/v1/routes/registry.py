"""API Route Registry - Single Source of Truth for all routes.

This module contains ROUTE_REGISTRY, the authoritative list of all API endpoints.
The registry is used to generate FastAPI routes, Access Gate dependencies,
and OpenAPI metadata at application startup.

Registry structure:
    - 28 total endpoints across 6 entity kinds
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Every route declares the (entity kind, action) privilege it needs

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.domain.enums import Action, EntityKind
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
    permission,
)

# Import handlers from router modules
from src.presentation.routers.api.v1.apis import (
    create_api,
    delete_api,
    get_api,
    list_apis,
    update_api,
)
from src.presentation.routers.api.v1.developers import (
    create_developer,
    delete_developer,
    get_developer,
    list_developers,
)
from src.presentation.routers.api.v1.environments import (
    create_environment,
    delete_environment,
    get_environment,
    list_environments,
)
from src.presentation.routers.api.v1.operations import (
    create_operation,
    delete_operation,
    get_operation,
    list_operations,
    list_operations_by_api,
    update_operation,
)
from src.presentation.routers.api.v1.plans import (
    create_plan,
    delete_plan,
    get_plan,
    list_plans,
)
from src.presentation.routers.api.v1.resources import (
    create_resource,
    delete_resource,
    get_resource,
    list_resources,
    update_resource,
)

# Import schemas for response models
from src.schemas.api_schemas import ApiResponse
from src.schemas.common import PaginatedResponse
from src.schemas.developer_schemas import DeveloperResponse
from src.schemas.environment_schemas import EnvironmentResponse
from src.schemas.operation_schemas import OperationResponse
from src.schemas.plan_schemas import PlanResponse
from src.schemas.resource_schemas import ResourceResponse

# Errors every gated route can return
_AUTH_ERRORS = [
    ErrorSpec(status=401, description="Missing or invalid bearer token"),
    ErrorSpec(status=403, description="Role lacks the required privilege"),
]
_LIST_ERRORS = [
    ErrorSpec(status=400, description="Invalid page or limit"),
    *_AUTH_ERRORS,
]


# =============================================================================
# Route Registry (Single Source of Truth)
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Apis Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis",
        handler=list_apis,
        resource="apis",
        tags=["Apis"],
        summary="List Apis",
        description="List Apis. Supply page and/or limit for a paged response.",
        operation_id="list_apis",
        response_model=PaginatedResponse[ApiResponse] | list[ApiResponse],
        status_code=200,
        errors=_LIST_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.APIS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}",
        handler=get_api,
        resource="apis",
        tags=["Apis"],
        summary="Get Api",
        description="Get Api details by ID.",
        operation_id="get_api",
        response_model=ApiResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Api not found"), *_AUTH_ERRORS],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.APIS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/apis",
        handler=create_api,
        resource="apis",
        tags=["Apis"],
        summary="Register Api",
        description="Register an Api. Referenced environments and plans must exist.",
        operation_id="create_api",
        response_model=ApiResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="Environment or Plan not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=permission(EntityKind.APIS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/apis/{api_id}",
        handler=update_api,
        resource="apis",
        tags=["Apis"],
        summary="Update Api",
        description="Replace the mutable fields of an Api.",
        operation_id="update_api",
        response_model=ApiResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="Api, Environment or Plan not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.APIS, Action.UPDATE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/apis/{api_id}",
        handler=delete_api,
        resource="apis",
        tags=["Apis"],
        summary="Delete Api",
        description="Delete an Api with its Resources and Operations. "
        "Deleting an absent Api succeeds.",
        operation_id="delete_api",
        response_model=None,
        status_code=204,
        errors=_AUTH_ERRORS,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.APIS, Action.DELETE),
    ),
    # =========================================================================
    # Resources Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}/resources",
        handler=list_resources,
        resource="resources",
        tags=["Resources"],
        summary="List Resources",
        description="List the Resources of an Api.",
        operation_id="list_resources",
        response_model=PaginatedResponse[ResourceResponse] | list[ResourceResponse],
        status_code=200,
        errors=[ErrorSpec(status=404, description="Api not found"), *_LIST_ERRORS],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.RESOURCES, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}/resources/{resource_id}",
        handler=get_resource,
        resource="resources",
        tags=["Resources"],
        summary="Get Resource",
        description="Get a Resource that belongs to the Api.",
        operation_id="get_resource",
        response_model=ResourceResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Api or Resource not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.RESOURCES, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/apis/{api_id}/resources",
        handler=create_resource,
        resource="resources",
        tags=["Resources"],
        summary="Create Resource",
        description="Attach a Resource to an Api.",
        operation_id="create_resource",
        response_model=ResourceResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="Api not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=permission(EntityKind.RESOURCES, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/apis/{api_id}/resources/{resource_id}",
        handler=update_resource,
        resource="resources",
        tags=["Resources"],
        summary="Update Resource",
        description="Replace a Resource's name and description.",
        operation_id="update_resource",
        response_model=ResourceResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="Api or Resource not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.RESOURCES, Action.UPDATE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/apis/{api_id}/resources/{resource_id}",
        handler=delete_resource,
        resource="resources",
        tags=["Resources"],
        summary="Delete Resource",
        description="Delete a Resource with its Operations. Absent Resources succeed.",
        operation_id="delete_resource",
        response_model=None,
        status_code=204,
        errors=_AUTH_ERRORS,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.RESOURCES, Action.DELETE),
    ),
    # =========================================================================
    # Operations Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}/resources/{resource_id}/operations",
        handler=list_operations,
        resource="operations",
        tags=["Operations"],
        summary="List Operations",
        description="List the Operations of a Resource. Without page and limit "
        "the full collection is returned as an array.",
        operation_id="list_operations",
        response_model=PaginatedResponse[OperationResponse] | list[OperationResponse],
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Api or Resource not found"),
            *_LIST_ERRORS,
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.OPERATIONS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}/resources/{resource_id}/operations/{operation_id}",
        handler=get_operation,
        resource="operations",
        tags=["Operations"],
        summary="Get Operation",
        description="Get an Operation through its Api and Resource.",
        operation_id="get_operation",
        response_model=OperationResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Api, Resource or Operation not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.OPERATIONS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/apis/{api_id}/resources/{resource_id}/operations",
        handler=create_operation,
        resource="operations",
        tags=["Operations"],
        summary="Create Operation",
        description="Attach an Operation (method + path pattern) to a Resource.",
        operation_id="create_operation",
        response_model=OperationResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="Api or Resource not found"),
            ErrorSpec(status=409, description="Method and path already registered"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=permission(EntityKind.OPERATIONS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/apis/{api_id}/resources/{resource_id}/operations/{operation_id}",
        handler=update_operation,
        resource="operations",
        tags=["Operations"],
        summary="Update Operation",
        description="Replace an Operation's method, path and description.",
        operation_id="update_operation",
        response_model=OperationResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="Api, Resource or Operation not found"),
            ErrorSpec(status=409, description="Method and path already registered"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.OPERATIONS, Action.UPDATE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/apis/{api_id}/resources/{resource_id}/operations/{operation_id}",
        handler=delete_operation,
        resource="operations",
        tags=["Operations"],
        summary="Delete Operation",
        description="Delete an Operation. Absent or mis-chained ids succeed.",
        operation_id="delete_operation",
        response_model=None,
        status_code=204,
        errors=_AUTH_ERRORS,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.OPERATIONS, Action.DELETE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}/operations",
        handler=list_operations_by_api,
        resource="operations",
        tags=["Operations"],
        summary="List Api Operations",
        description="List every Operation across the Resources of an Api.",
        operation_id="list_operations_by_api",
        response_model=list[OperationResponse],
        status_code=200,
        errors=[ErrorSpec(status=404, description="Api not found"), *_AUTH_ERRORS],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.OPERATIONS, Action.READ),
    ),
    # =========================================================================
    # Environments Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/environments",
        handler=list_environments,
        resource="environments",
        tags=["Environments"],
        summary="List Environments",
        operation_id="list_environments",
        response_model=PaginatedResponse[EnvironmentResponse]
        | list[EnvironmentResponse],
        status_code=200,
        errors=_LIST_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.ENVIRONMENTS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/environments/{environment_id}",
        handler=get_environment,
        resource="environments",
        tags=["Environments"],
        summary="Get Environment",
        operation_id="get_environment",
        response_model=EnvironmentResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Environment not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.ENVIRONMENTS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/environments",
        handler=create_environment,
        resource="environments",
        tags=["Environments"],
        summary="Create Environment",
        operation_id="create_environment",
        response_model=EnvironmentResponse,
        status_code=201,
        errors=[ErrorSpec(status=400, description="Validation error"), *_AUTH_ERRORS],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=permission(EntityKind.ENVIRONMENTS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/environments/{environment_id}",
        handler=delete_environment,
        resource="environments",
        tags=["Environments"],
        summary="Delete Environment",
        operation_id="delete_environment",
        response_model=None,
        status_code=204,
        errors=_AUTH_ERRORS,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.ENVIRONMENTS, Action.DELETE),
    ),
    # =========================================================================
    # Plans Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/plans",
        handler=list_plans,
        resource="plans",
        tags=["Plans"],
        summary="List Plans",
        operation_id="list_plans",
        response_model=PaginatedResponse[PlanResponse] | list[PlanResponse],
        status_code=200,
        errors=_LIST_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.PLANS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/plans/{plan_id}",
        handler=get_plan,
        resource="plans",
        tags=["Plans"],
        summary="Get Plan",
        operation_id="get_plan",
        response_model=PlanResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Plan not found"), *_AUTH_ERRORS],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.PLANS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/plans",
        handler=create_plan,
        resource="plans",
        tags=["Plans"],
        summary="Create Plan",
        operation_id="create_plan",
        response_model=PlanResponse,
        status_code=201,
        errors=[ErrorSpec(status=400, description="Validation error"), *_AUTH_ERRORS],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=permission(EntityKind.PLANS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/plans/{plan_id}",
        handler=delete_plan,
        resource="plans",
        tags=["Plans"],
        summary="Delete Plan",
        operation_id="delete_plan",
        response_model=None,
        status_code=204,
        errors=_AUTH_ERRORS,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.PLANS, Action.DELETE),
    ),
    # =========================================================================
    # Developers Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/developers",
        handler=list_developers,
        resource="developers",
        tags=["Developers"],
        summary="List Developers",
        operation_id="list_developers",
        response_model=PaginatedResponse[DeveloperResponse] | list[DeveloperResponse],
        status_code=200,
        errors=_LIST_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.DEVELOPERS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/developers/{developer_id}",
        handler=get_developer,
        resource="developers",
        tags=["Developers"],
        summary="Get Developer",
        operation_id="get_developer",
        response_model=DeveloperResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Developer not found"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=permission(EntityKind.DEVELOPERS, Action.READ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/developers",
        handler=create_developer,
        resource="developers",
        tags=["Developers"],
        summary="Register Developer",
        description="Register a Developer. The password is stored as a bcrypt hash.",
        operation_id="create_developer",
        response_model=DeveloperResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=409, description="Email already registered"),
            *_AUTH_ERRORS,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=permission(EntityKind.DEVELOPERS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/developers/{developer_id}",
        handler=delete_developer,
        resource="developers",
        tags=["Developers"],
        summary="Delete Developer",
        operation_id="delete_developer",
        response_model=None,
        status_code=204,
        errors=_AUTH_ERRORS,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=permission(EntityKind.DEVELOPERS, Action.DELETE),
    ),
]
