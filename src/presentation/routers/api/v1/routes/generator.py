"""Turn ROUTE_REGISTRY entries into FastAPI routes.

The registry is declarative; this module is the only place that touches
``APIRouter.add_api_route``. Each entry's AuthPolicy becomes a route-level
dependency, so the Access Gate is evaluated before the endpoint function
receives its own dependencies (handlers, sessions).

Functions:
    register_routes_from_registry: Add every registry entry to a router
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_permission,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one route per registry entry.

    Args:
        router: Router that receives the routes (carries the /api/v1 prefix).
        registry: Route metadata entries, usually ROUTE_REGISTRY.

    Raises:
        ValueError: If an entry has an auth level the generator cannot map.
    """
    for entry in registry:
        router.add_api_route(
            entry.path,
            entry.handler,
            methods=[entry.method.value],
            **_route_options(entry),
        )


def _route_options(entry: RouteMetadata) -> dict[str, Any]:
    """Keyword arguments for add_api_route derived from one entry."""
    return {
        "response_model": entry.response_model,
        "status_code": entry.status_code,
        "tags": list(entry.tags),
        "summary": entry.summary,
        "description": entry.description,
        "operation_id": entry.operation_id,
        "responses": _openapi_errors(entry.errors or []) or None,
        "dependencies": _gate_dependencies(entry.auth_policy),
        "deprecated": entry.deprecated,
        "openapi_extra": {"x-idempotency": entry.idempotency.value},
    }


def _gate_dependencies(policy: AuthPolicy) -> list[Any]:
    """Dependencies that enforce an AuthPolicy.

    PUBLIC routes get none, AUTHENTICATED routes only need a valid token,
    and PERMISSION routes check the (entity kind, action) privilege, which
    itself requires a valid token.
    """
    if policy.level == AuthLevel.PUBLIC:
        return []
    if policy.level == AuthLevel.AUTHENTICATED:
        return [Depends(get_current_user)]
    if policy.level == AuthLevel.PERMISSION:
        assert policy.entity_kind is not None and policy.action is not None
        return [Depends(require_permission(policy.entity_kind, policy.action))]
    # Unknown level: refuse to register rather than expose the route
    raise ValueError(f"Unknown auth level: {policy.level}")


def _openapi_errors(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries for the documented error statuses.

    Example:
        >>> _openapi_errors([ErrorSpec(status=404, description="Api not found")])
        {404: {'description': 'Api not found'}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        documented: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            documented["model"] = error.model
        responses[error.status] = documented
    return responses
