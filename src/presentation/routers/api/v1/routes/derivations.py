"""Derive runtime views from the route metadata registry.

Functions:
    build_permission_map: Map each route to the privilege it requires
    find_ungated_routes: Routes that reach a handler without a permission check
    ensure_all_routes_gated: Startup check that every route is gated
"""

from src.domain.enums import Action, EntityKind
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    RouteMetadata,
)


def build_permission_map(
    registry: list[RouteMetadata],
) -> dict[str, tuple[EntityKind, Action]]:
    """Build the Access Gate table from the route registry.

    Endpoint keys use the format "{METHOD} /api/v1{PATH}".

    Args:
        registry: List of route metadata entries from ROUTE_REGISTRY.

    Returns:
        Dict mapping endpoint strings to (entity kind, action).

    Example:
        >>> table = build_permission_map(ROUTE_REGISTRY)
        >>> table["DELETE /api/v1/apis/{api_id}"]
        (<EntityKind.APIS: 'apis'>, <Action.DELETE: 'delete'>)
    """
    table: dict[str, tuple[EntityKind, Action]] = {}

    for entry in registry:
        policy = entry.auth_policy
        if policy.level != AuthLevel.PERMISSION:
            continue
        assert policy.entity_kind is not None and policy.action is not None
        # Router adds the /api/v1 prefix
        endpoint = f"{entry.method.value} /api/v1{entry.path}"
        table[endpoint] = (policy.entity_kind, policy.action)

    return table


def find_ungated_routes(registry: list[RouteMetadata]) -> list[str]:
    """Return "{METHOD} {PATH}" for every route without a PERMISSION policy."""
    return [
        f"{entry.method.value} {entry.path}"
        for entry in registry
        if entry.auth_policy.level != AuthLevel.PERMISSION
    ]


def ensure_all_routes_gated(
    registry: list[RouteMetadata],
) -> dict[str, tuple[EntityKind, Action]]:
    """Return the permission map, refusing a registry with ungated routes.

    Raises:
        RuntimeError: If any entry lacks a PERMISSION policy.
    """
    ungated = find_ungated_routes(registry)
    if ungated:
        raise RuntimeError(f"Routes without a permission check: {', '.join(ungated)}")
    return build_permission_map(registry)
