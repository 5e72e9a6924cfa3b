"""Domain entities."""

from src.domain.entities.api import Api
from src.domain.entities.developer import Developer
from src.domain.entities.environment import Environment
from src.domain.entities.operation import Operation
from src.domain.entities.plan import Plan
from src.domain.entities.resource import Resource

__all__ = [
    "Api",
    "Developer",
    "Environment",
    "Operation",
    "Plan",
    "Resource",
]
