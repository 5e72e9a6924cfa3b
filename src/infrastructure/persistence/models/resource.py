"""Resource database model."""

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Resource(BaseModel):
    """Resource model.

    Fields:
        api_id: Owning Api (FK apis.id)
        name: Human-readable name
        description: Optional description

    Indexes:
        - idx_resources_api_created: (api_id, created_at) - per-Api listing
    """

    __tablename__ = "resources"

    api_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("apis.id"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(80), nullable=False)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)

    __table_args__ = (Index("idx_resources_api_created", "api_id", "created_at"),)
