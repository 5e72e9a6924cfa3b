"""Operation request and response schemas.

Pydantic schemas for Operation endpoints under
``/apis/{api_id}/resources/{resource_id}/operations``.

Field rules (path shape, method names, lengths) are enforced by the
domain entity so that every violation reports the same error codes
regardless of entry point; these schemas only check JSON types.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos import OperationResult


# =============================================================================
# Request Schemas
# =============================================================================


class OperationCreateRequest(BaseModel):
    """Request to attach an Operation to a Resource.

    Attributes:
        method: HTTP method (GET, POST, PUT, PATCH, DELETE, OPTIONS, HEAD, ALL).
        path: Path pattern, e.g. ``/accounts/{id}`` or ``/static/**``.
        description: Optional description.
    """

    method: str = Field(..., description="HTTP method", examples=["GET"])
    path: str = Field(..., description="Path pattern", examples=["/accounts/{id}"])
    description: str | None = Field(None, description="Optional description")


class OperationUpdateRequest(BaseModel):
    """Full replacement of an Operation's method, path and description."""

    method: str = Field(..., description="HTTP method", examples=["POST"])
    path: str = Field(..., description="Path pattern", examples=["/accounts"])
    description: str | None = Field(None, description="Optional description")


# =============================================================================
# Response Schemas
# =============================================================================


class OperationResponse(BaseModel):
    """Single Operation response.

    Attributes:
        id: Operation identifier.
        api_id: Owning Api.
        resource_id: Owning Resource.
        method: HTTP method.
        path: Path pattern.
        description: Optional description.
        created_at: Creation timestamp.
    """

    id: str = Field(..., description="Operation identifier")
    api_id: str = Field(..., description="Owning Api identifier")
    resource_id: str = Field(..., description="Owning Resource identifier")
    method: str = Field(..., description="HTTP method", examples=["GET"])
    path: str = Field(..., description="Path pattern")
    description: str | None = Field(None, description="Optional description")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: OperationResult) -> "OperationResponse":
        """Convert application DTO to response schema.

        Args:
            dto: OperationResult from handler.

        Returns:
            OperationResponse for API response.
        """
        return cls(
            id=dto.id,
            api_id=dto.api_id,
            resource_id=dto.resource_id,
            method=dto.method,
            path=dto.path,
            description=dto.description,
            created_at=dto.created_at,
        )
