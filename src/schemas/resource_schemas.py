"""Resource request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos import ResourceResult


class ResourceCreateRequest(BaseModel):
    """Request to attach a Resource to an Api."""

    name: str = Field(..., description="Resource name", examples=["accounts"])
    description: str | None = Field(None, description="Optional description")


class ResourceUpdateRequest(ResourceCreateRequest):
    """Full replacement of a Resource's name and description."""


class ResourceResponse(BaseModel):
    """Single Resource response."""

    id: str = Field(..., description="Resource identifier")
    api_id: str = Field(..., description="Owning Api identifier")
    name: str = Field(..., description="Resource name")
    description: str | None = Field(None, description="Optional description")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: ResourceResult) -> "ResourceResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            api_id=dto.api_id,
            name=dto.name,
            description=dto.description,
            created_at=dto.created_at,
        )
