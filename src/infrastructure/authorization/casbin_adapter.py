"""Casbin implementation of AuthorizationProtocol.

This adapter is the access gate in front of every catalog endpoint:
- Policies and role inheritance come from policy.csv
- The RBAC model comes from model.conf
- The caller's roles come from the access token, not from storage

Following hexagonal architecture:
- Infrastructure implements domain protocol (AuthorizationProtocol)
- Domain doesn't know about Casbin
"""

from typing import TYPE_CHECKING

import casbin

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


class CasbinAdapter:
    """Casbin-based authorization adapter.

    Note:
        The enforcer is an app-scoped singleton built lazily by the
        container (see src/core/container/authorization.py).

    Attributes:
        _enforcer: Casbin Enforcer with file-backed policies.
        _logger: Structured logger.
    """

    def __init__(
        self,
        enforcer: casbin.Enforcer,
        logger: "LoggerProtocol",
    ) -> None:
        """Initialize adapter with dependencies.

        Args:
            enforcer: Loaded Casbin Enforcer.
            logger: Structured logger.
        """
        self._enforcer = enforcer
        self._logger = logger

    async def check_permission(
        self,
        roles: list[str],
        resource: str,
        action: str,
    ) -> bool:
        """Check whether any role grants resource/action.

        Role inheritance (admin → operator → viewer) is resolved by Casbin.

        Args:
            roles: Role names from the caller's token.
            resource: Entity kind (apis, resources, operations, ...).
            action: Action (read, create, update, delete).

        Returns:
            bool: True if allowed, False if denied.
        """
        try:
            allowed = any(
                self._enforcer.enforce(role, resource, action) for role in roles
            )
        except Exception as e:
            # Fail closed on enforcer errors
            self._logger.error(
                "authorization_check_error",
                error=e,
                roles=roles,
                resource=resource,
                action=action,
            )
            return False

        self._logger.info(
            "authorization_check",
            roles=roles,
            resource=resource,
            action=action,
            allowed=allowed,
        )
        return allowed
