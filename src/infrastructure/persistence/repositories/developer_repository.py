"""Developer repository implementation.

SQLAlchemy implementation of the DeveloperRepository protocol. Emails are
stored lowercase, so lookups lowercase their argument.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.developer import Developer
from src.domain.enums.status import Status
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.developer import (
    Developer as DeveloperModel,
)


class DeveloperRepository:
    """SQLAlchemy implementation of DeveloperRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, developer_id: str) -> Developer | None:
        stmt = select(DeveloperModel).where(DeveloperModel.id == developer_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def find_by_email(self, email: str) -> Developer | None:
        """Find Developer by email (case-insensitive).

        Args:
            email: Email address.

        Returns:
            Developer entity if found, None otherwise.
        """
        stmt = select(DeveloperModel).where(DeveloperModel.email == email.lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Developer]:
        stmt = (
            select(DeveloperModel)
            .order_by(DeveloperModel.created_at, DeveloperModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_all(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(DeveloperModel)
        )
        return result.scalar_one()

    async def save(self, developer: Developer) -> None:
        """Save a Developer (create or update).

        Raises:
            IntegrityError: If another Developer already uses the email.
        """
        existing = await self._session.get(DeveloperModel, developer.id)

        if existing is None:
            self._session.add(self._to_model(developer))
        else:
            existing.name = developer.name
            existing.email = developer.email
            existing.password_hash = developer.password_hash
            existing.status = developer.status.value

        await self._session.flush()

    async def delete(self, developer_id: str) -> None:
        await self._session.execute(
            delete(DeveloperModel).where(DeveloperModel.id == developer_id)
        )
        await self._session.flush()

    def _to_entity(self, model: DeveloperModel) -> Developer:
        return Developer(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            status=Status(model.status),
            created_at=ensure_utc(model.created_at),
        )

    def _to_model(self, entity: Developer) -> DeveloperModel:
        return DeveloperModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            password_hash=entity.password_hash,
            status=entity.status.value,
            created_at=entity.created_at,
        )
