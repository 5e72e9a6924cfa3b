"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers. They
are NOT API schemas (Pydantic models live in src/schemas).

Usage:
    from src.application.dtos import OperationResult
"""

from src.application.dtos.catalog_dtos import (
    ApiResult,
    DeveloperResult,
    EnvironmentResult,
    OperationResult,
    PlanResult,
    ResourceResult,
)

__all__ = [
    "ApiResult",
    "DeveloperResult",
    "EnvironmentResult",
    "OperationResult",
    "PlanResult",
    "ResourceResult",
]
