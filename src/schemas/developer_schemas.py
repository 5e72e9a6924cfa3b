"""Developer request and response schemas.

The password is accepted on create and never echoed back; responses carry
no credential material.
"""

from datetime import datetime

from pydantic import BaseModel, Field, SecretStr

from src.application.dtos import DeveloperResult
from src.domain.enums import Status


class DeveloperCreateRequest(BaseModel):
    """Request to register a Developer.

    Attributes:
        name: Display name.
        email: Email address, unique (case-insensitive).
        password: Plaintext password (8+ characters, <= 72 bytes).
        status: Lifecycle status.
    """

    name: str = Field(..., description="Display name", examples=["Ada Lovelace"])
    email: str = Field(..., description="Email address", examples=["ada@example.com"])
    password: SecretStr = Field(..., description="Password")
    status: Status = Field(Status.ACTIVE, description="Lifecycle status")


class DeveloperResponse(BaseModel):
    """Single Developer response."""

    id: str = Field(..., description="Developer identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    status: str = Field(..., description="Lifecycle status")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: DeveloperResult) -> "DeveloperResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            status=dto.status,
            created_at=dto.created_at,
        )
