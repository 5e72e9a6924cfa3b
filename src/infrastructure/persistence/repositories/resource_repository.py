"""Resource repository implementation.

SQLAlchemy implementation of the ResourceRepository protocol.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.resource import Resource
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.resource import Resource as ResourceModel


class ResourceRepository:
    """SQLAlchemy implementation of ResourceRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, resource_id: str) -> Resource | None:
        stmt = select(ResourceModel).where(ResourceModel.id == resource_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_by_api(
        self, api_id: str, *, offset: int = 0, limit: int | None = None
    ) -> list[Resource]:
        """List Resources owned by an Api, in insertion order.

        Args:
            api_id: Owning Api.
            offset: Number of Resources to skip.
            limit: Maximum number returned (None for all).

        Returns:
            List of Resource entities.
        """
        stmt = (
            select(ResourceModel)
            .where(ResourceModel.api_id == api_id)
            .order_by(ResourceModel.created_at, ResourceModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_by_api(self, api_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(ResourceModel)
            .where(ResourceModel.api_id == api_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, resource: Resource) -> None:
        """Save a Resource (create or update)."""
        existing = await self._session.get(ResourceModel, resource.id)

        if existing is None:
            self._session.add(self._to_model(resource))
        else:
            existing.name = resource.name
            existing.description = resource.description

        await self._session.flush()

    async def delete(self, resource_id: str) -> None:
        await self._session.execute(
            delete(ResourceModel).where(ResourceModel.id == resource_id)
        )
        await self._session.flush()

    async def delete_by_api(self, api_id: str) -> int:
        """Delete every Resource owned by an Api.

        Returns:
            Number of Resources deleted.
        """
        result = await self._session.execute(
            delete(ResourceModel).where(ResourceModel.api_id == api_id)
        )
        await self._session.flush()
        return result.rowcount

    def _to_entity(self, model: ResourceModel) -> Resource:
        return Resource(
            id=model.id,
            api_id=model.api_id,
            name=model.name,
            description=model.description,
            created_at=ensure_utc(model.created_at),
        )

    def _to_model(self, entity: Resource) -> ResourceModel:
        return ResourceModel(
            id=entity.id,
            api_id=entity.api_id,
            name=entity.name,
            description=entity.description,
            created_at=entity.created_at,
        )
