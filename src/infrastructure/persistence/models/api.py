"""Api database model.

Reference lists to Environments and Plans are stored as ordered JSON
arrays on the row. Resources point back at the Api through their own
``api_id`` column; nothing about them is stored here.
"""

from sqlalchemy import JSON, Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Api(BaseModel):
    """Api model.

    Fields:
        id: String primary key (from BaseModel)
        created_at: Registration timestamp (from BaseModel)
        name: Human-readable name
        version: Version label
        base_path: Path prefix (indexed, not unique)
        description: Optional description
        cors: CORS preflight flag
        status: Lifecycle status (active, inactive)
        environment_ids: Ordered JSON array of Environment ids
        plan_ids: Ordered JSON array of Plan ids

    Indexes:
        - idx_apis_base_path: (base_path) - lookup by published prefix
    """

    __tablename__ = "apis"

    name: Mapped[str] = mapped_column(String(80), nullable=False)
    version: Mapped[str] = mapped_column(String(20), nullable=False)
    base_path: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)
    cors: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    environment_ids: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )
    plan_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (Index("idx_apis_base_path", "base_path"),)
