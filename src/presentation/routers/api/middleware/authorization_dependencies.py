"""Casbin authorization dependencies (Access Gate).

FastAPI dependencies that check the caller's roles against the Casbin
RBAC policy before any handler runs.

Architecture:
    - JWT Authentication (auth_dependencies.py): Verifies caller identity
    - Casbin Authorization (this file): Verifies (entity kind, action)

Usage:
    @router.get("/apis")
    async def list_apis(
        _: None = Depends(require_permission(EntityKind.APIS, Action.READ)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from src.core.container import get_authorization
from src.domain.enums import Action, EntityKind
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


def require_permission(
    kind: EntityKind,
    action: Action,
) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires a permission on an entity kind.

    Args:
        kind: Entity kind guarded by the route (apis, resources, ...).
        action: Action performed by the route (read, create, update, delete).

    Returns:
        Dependency function that returns the caller when allowed.

    Raises:
        HTTPException 401: If the caller is not authenticated.
        HTTPException 403: If no role of the caller grants the permission.
    """

    async def permission_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
    ) -> CurrentUser:
        allowed = await authorization.check_permission(
            roles=current_user.roles,
            resource=kind.value,
            action=action.value,
        )

        if not allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {kind.value}:{action.value}",
            )
        return current_user

    return permission_checker
