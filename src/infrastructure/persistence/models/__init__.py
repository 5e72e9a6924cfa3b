"""Database models for persistence layer.

These are infrastructure concerns and are never imported by the domain
layer. Repositories map them to domain entities.

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models (SQLAlchemy) live here and share their entity's name;
    repositories import them with a ``Model`` alias.
"""

from src.infrastructure.persistence.models.api import Api
from src.infrastructure.persistence.models.developer import Developer
from src.infrastructure.persistence.models.environment import Environment
from src.infrastructure.persistence.models.operation import Operation
from src.infrastructure.persistence.models.plan import Plan
from src.infrastructure.persistence.models.resource import Resource

__all__ = [
    "Api",
    "Developer",
    "Environment",
    "Operation",
    "Plan",
    "Resource",
]
