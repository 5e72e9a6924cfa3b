"""Plan request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos import PlanResult
from src.domain.enums import Status


class PlanCreateRequest(BaseModel):
    """Request to register a subscription Plan."""

    name: str = Field(..., description="Plan name", examples=["gold"])
    description: str | None = Field(None, description="Optional description")
    is_default: bool = Field(False, description="Whether this is the default plan")
    status: Status = Field(Status.ACTIVE, description="Lifecycle status")


class PlanResponse(BaseModel):
    """Single Plan response."""

    id: str = Field(..., description="Plan identifier")
    name: str = Field(..., description="Plan name")
    description: str | None = Field(None, description="Optional description")
    is_default: bool = Field(..., description="Whether this is the default plan")
    status: str = Field(..., description="Lifecycle status")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: PlanResult) -> "PlanResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            is_default=dto.is_default,
            status=dto.status,
            created_at=dto.created_at,
        )
