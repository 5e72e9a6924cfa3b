"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import OperationRepository, LoggerProtocol
"""

# Service protocols
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.api_repository import ApiRepository
from src.domain.protocols.developer_repository import DeveloperRepository
from src.domain.protocols.environment_repository import EnvironmentRepository
from src.domain.protocols.operation_repository import OperationRepository
from src.domain.protocols.plan_repository import PlanRepository
from src.domain.protocols.resource_repository import ResourceRepository

__all__ = [
    # Service protocols
    "AuthorizationProtocol",
    "IdGeneratorProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "ApiRepository",
    "DeveloperRepository",
    "EnvironmentRepository",
    "OperationRepository",
    "PlanRepository",
    "ResourceRepository",
]
