"""Access gate port.

The presentation layer asks this port whether a caller's roles grant an
(entity kind, action) privilege before any catalog handler runs. Handlers
never perform authorization themselves.

Usage:
    from src.domain.enums import Action, EntityKind

    allowed = await authz.check_permission(
        roles=current_user.roles,
        resource=EntityKind.OPERATIONS,
        action=Action.DELETE,
    )
"""

from typing import Protocol


class AuthorizationProtocol(Protocol):
    """Protocol for privilege checks.

    Implementations:
        - CasbinAdapter: Casbin RBAC enforcer backed by model.conf/policy.csv

    Error Handling:
        Checks return bool and fail closed: an enforcer error is logged and
        reported as denied.
    """

    async def check_permission(
        self,
        roles: list[str],
        resource: str,
        action: str,
    ) -> bool:
        """Check whether any of the roles grants resource/action.

        Args:
            roles: Role names carried by the caller's token.
            resource: Entity kind (apis, resources, operations, ...).
            action: Action (read, create, update, delete).

        Returns:
            bool: True if allowed, False if denied.
        """
        ...
