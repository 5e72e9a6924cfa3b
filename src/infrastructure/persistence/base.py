"""Base model for all catalog tables.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- ensure_utc: Normalise datetimes read back from the store

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Usage:
    class ApiModel(BaseModel):
        __tablename__ = "apis"
        name: Mapped[str]
        # Has: id, created_at

Note:
    Identifiers are generated by the application (UUIDv7 strings) and
    stored as String(36) so the schema is identical on PostgreSQL and
    SQLite. Listing order is (created_at, id).
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL catalog tables need:
    - id: String primary key (assigned by the application)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        nullable=False,
    )

    # Set from the entity; server default covers raw inserts
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime.

    SQLite returns DateTime(timezone=True) columns without tzinfo; every
    stored value is UTC.

    Args:
        value: Datetime read from the store.

    Returns:
        Timezone-aware datetime in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
