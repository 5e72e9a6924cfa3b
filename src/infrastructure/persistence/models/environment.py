"""Environment database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Environment(BaseModel):
    """Environment model."""

    __tablename__ = "environments"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    inbound_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    outbound_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
