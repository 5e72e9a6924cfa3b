"""Repository implementations (SQLAlchemy adapters).

Each class implements the matching protocol in src/domain/protocols/.
"""

from src.infrastructure.persistence.repositories.api_repository import ApiRepository
from src.infrastructure.persistence.repositories.developer_repository import (
    DeveloperRepository,
)
from src.infrastructure.persistence.repositories.environment_repository import (
    EnvironmentRepository,
)
from src.infrastructure.persistence.repositories.operation_repository import (
    OperationRepository,
)
from src.infrastructure.persistence.repositories.plan_repository import (
    PlanRepository,
)
from src.infrastructure.persistence.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "ApiRepository",
    "DeveloperRepository",
    "EnvironmentRepository",
    "OperationRepository",
    "PlanRepository",
    "ResourceRepository",
]
