"""Privilege components for the access gate.

A privilege is an (entity kind, action) pair such as ("operations", "read").
Roles are granted privileges in the Casbin policy file; every endpoint
declares the single privilege it needs.

Reference:
    - src/infrastructure/authorization/policy.csv

Usage:
    from src.domain.enums import Action, EntityKind

    allowed = await authz.check_permission(
        roles=current_user.roles,
        resource=EntityKind.OPERATIONS,
        action=Action.CREATE,
    )
"""

from enum import Enum


class EntityKind(str, Enum):
    """Catalog entity kinds protected by the access gate.

    String Enum:
        Values are lowercase to match Casbin policy format.
    """

    APIS = "apis"
    RESOURCES = "resources"
    OPERATIONS = "operations"
    ENVIRONMENTS = "environments"
    PLANS = "plans"
    DEVELOPERS = "developers"

    @classmethod
    def values(cls) -> list[str]:
        """Get all entity kind values as strings.

        Returns:
            list[str]: List of entity kind values.
        """
        return [kind.value for kind in cls]


class Action(str, Enum):
    """Actions that can be performed on an entity kind.

    Action Semantics:
        READ: Get and list (safe, no side effects)
        CREATE: Register a new entity
        UPDATE: Replace the mutable fields of an existing entity
        DELETE: Remove an entity (and, for Apis and Resources, what they own)
    """

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]
