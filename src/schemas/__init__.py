"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import OperationCreateRequest, OperationResponse
"""

from src.schemas.api_schemas import ApiCreateRequest, ApiResponse, ApiUpdateRequest
from src.schemas.common import HealthResponse, PaginatedResponse, listing_response
from src.schemas.developer_schemas import DeveloperCreateRequest, DeveloperResponse
from src.schemas.environment_schemas import (
    EnvironmentCreateRequest,
    EnvironmentResponse,
)
from src.schemas.operation_schemas import (
    OperationCreateRequest,
    OperationResponse,
    OperationUpdateRequest,
)
from src.schemas.plan_schemas import PlanCreateRequest, PlanResponse
from src.schemas.resource_schemas import (
    ResourceCreateRequest,
    ResourceResponse,
    ResourceUpdateRequest,
)

__all__ = [
    # Common
    "HealthResponse",
    "PaginatedResponse",
    "listing_response",
    # Apis
    "ApiCreateRequest",
    "ApiUpdateRequest",
    "ApiResponse",
    # Resources
    "ResourceCreateRequest",
    "ResourceUpdateRequest",
    "ResourceResponse",
    # Operations
    "OperationCreateRequest",
    "OperationUpdateRequest",
    "OperationResponse",
    # Environments
    "EnvironmentCreateRequest",
    "EnvironmentResponse",
    # Plans
    "PlanCreateRequest",
    "PlanResponse",
    # Developers
    "DeveloperCreateRequest",
    "DeveloperResponse",
]
