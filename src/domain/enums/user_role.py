"""Operator roles recognised by the access gate.

Role hierarchy (defined in policy.csv):
    ADMIN > OPERATOR > VIEWER

- VIEWER: read every catalog entity
- OPERATOR: also create and update
- ADMIN: also delete
"""

from enum import Enum


class UserRole(str, Enum):
    """Roles carried in the access token ``roles`` claim."""

    ADMIN = "admin"
    OPERATOR = "operator"
    VIEWER = "viewer"
