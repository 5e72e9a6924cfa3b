"""Api request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos import ApiResult
from src.domain.enums import Status


class ApiCreateRequest(BaseModel):
    """Request to register an Api.

    Attributes:
        name: Human-readable name (<= 80 chars).
        version: Version label (<= 20 chars).
        base_path: Path prefix, must start with ``/``.
        description: Optional description.
        cors: Whether the gateway answers CORS preflight for this Api.
        status: Lifecycle status.
        environment_ids: Environments the Api is deployed to.
        plan_ids: Plans the Api is offered under.
    """

    name: str = Field(..., description="Api name", examples=["Accounts"])
    version: str = Field(..., description="Version label", examples=["v1"])
    base_path: str = Field(..., description="Base path", examples=["/accounts"])
    description: str | None = Field(None, description="Optional description")
    cors: bool = Field(True, description="Answer CORS preflight")
    status: Status = Field(Status.ACTIVE, description="Lifecycle status")
    environment_ids: list[str] = Field(
        default_factory=list, description="Environment identifiers"
    )
    plan_ids: list[str] = Field(default_factory=list, description="Plan identifiers")


class ApiUpdateRequest(ApiCreateRequest):
    """Full replacement of an Api's fields. Id and creation date are kept."""


class ApiResponse(BaseModel):
    """Single Api response."""

    id: str = Field(..., description="Api identifier")
    name: str = Field(..., description="Api name")
    version: str = Field(..., description="Version label")
    base_path: str = Field(..., description="Base path")
    description: str | None = Field(None, description="Optional description")
    cors: bool = Field(..., description="Answer CORS preflight")
    status: str = Field(..., description="Lifecycle status", examples=["active"])
    environment_ids: list[str] = Field(..., description="Environment identifiers")
    plan_ids: list[str] = Field(..., description="Plan identifiers")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: ApiResult) -> "ApiResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            version=dto.version,
            base_path=dto.base_path,
            description=dto.description,
            cors=dto.cors,
            status=dto.status,
            environment_ids=list(dto.environment_ids),
            plan_ids=list(dto.plan_ids),
            created_at=dto.created_at,
        )
