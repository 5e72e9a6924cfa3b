"""Environment request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos import EnvironmentResult
from src.domain.enums import Status


class EnvironmentCreateRequest(BaseModel):
    """Request to register a deployment Environment.

    Attributes:
        name: Environment name.
        inbound_url: URL clients call (http or https).
        outbound_url: Upstream URL the gateway forwards to (http or https).
        description: Optional description.
        status: Lifecycle status.
    """

    name: str = Field(..., description="Environment name", examples=["staging"])
    inbound_url: str = Field(
        ..., description="Client-facing URL", examples=["https://api.example.com"]
    )
    outbound_url: str = Field(
        ..., description="Upstream URL", examples=["http://accounts.internal:8080"]
    )
    description: str | None = Field(None, description="Optional description")
    status: Status = Field(Status.ACTIVE, description="Lifecycle status")


class EnvironmentResponse(BaseModel):
    """Single Environment response."""

    id: str = Field(..., description="Environment identifier")
    name: str = Field(..., description="Environment name")
    inbound_url: str = Field(..., description="Client-facing URL")
    outbound_url: str = Field(..., description="Upstream URL")
    description: str | None = Field(None, description="Optional description")
    status: str = Field(..., description="Lifecycle status")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: EnvironmentResult) -> "EnvironmentResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            inbound_url=dto.inbound_url,
            outbound_url=dto.outbound_url,
            description=dto.description,
            status=dto.status,
            created_at=dto.created_at,
        )
