"""Domain enums.

Available Enums:
    - Status: Lifecycle status of catalog entities
    - HttpMethod: Verb matched by an Operation
    - EntityKind: Entity kinds protected by the access gate
    - Action: Actions on entity kinds (read, create, update, delete)
    - UserRole: Operator roles (admin, operator, viewer)
"""

from src.domain.enums.http_method import HttpMethod
from src.domain.enums.permission import Action, EntityKind
from src.domain.enums.status import Status
from src.domain.enums.user_role import UserRole

__all__ = [
    "Action",
    "EntityKind",
    "HttpMethod",
    "Status",
    "UserRole",
]
