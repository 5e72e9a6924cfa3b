"""Developer database model.

Email is unique and stored lowercase. Only the bcrypt hash of the
credential is stored.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Developer(BaseModel):
    """Developer model.

    Indexes:
        - ix_developers_email: (email) UNIQUE
    """

    __tablename__ = "developers"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
