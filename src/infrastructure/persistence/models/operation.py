"""Operation database model.

Operations carry both ancestor ids. ``resource_id`` backs per-Resource
listing and the uniqueness rule; ``api_id`` backs Api-wide discovery and
cascading deletes.
"""

from sqlalchemy import ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Operation(BaseModel):
    """Operation model.

    Fields:
        api_id: Owning Api (FK apis.id)
        resource_id: Owning Resource (FK resources.id)
        method: HTTP method (GET, POST, ..., ALL)
        path: Path pattern
        description: Optional description

    Indexes:
        - idx_operations_resource_created: (resource_id, created_at)
        - idx_operations_api: (api_id)
        - uq_operations_route: (resource_id, method, path) UNIQUE
    """

    __tablename__ = "operations"

    api_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("apis.id"),
        nullable=False,
    )
    resource_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("resources.id"),
        nullable=False,
    )
    method: Mapped[str] = mapped_column(String(10), nullable=False)
    path: Mapped[str] = mapped_column(String(180), nullable=False)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)

    __table_args__ = (
        UniqueConstraint("resource_id", "method", "path", name="uq_operations_route"),
        Index("idx_operations_resource_created", "resource_id", "created_at"),
        Index("idx_operations_api", "api_id"),
    )
