"""Api repository implementation.

SQLAlchemy implementation of the ApiRepository protocol.
Maps between Api domain entity and Api database model.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.api import Api
from src.domain.enums.status import Status
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.api import Api as ApiModel


class ApiRepository:
    """SQLAlchemy implementation of ApiRepository protocol.

    **Implementation Notes**:
    - Writes flush only; the session owner commits the unit of work
    - Listings are ordered by (created_at, id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, api_id: str) -> Api | None:
        """Find Api by ID.

        Args:
            api_id: Api identifier.

        Returns:
            Api entity if found, None otherwise.
        """
        stmt = select(ApiModel).where(ApiModel.id == api_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def find_by_base_path(self, base_path: str) -> list[Api]:
        stmt = (
            select(ApiModel)
            .where(ApiModel.base_path == base_path)
            .order_by(ApiModel.created_at, ApiModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Api]:
        """List Apis in insertion order.

        Args:
            offset: Number of Apis to skip.
            limit: Maximum number returned (None for all).

        Returns:
            List of Api entities.
        """
        stmt = (
            select(ApiModel)
            .order_by(ApiModel.created_at, ApiModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_all(self) -> int:
        stmt = select(func.count()).select_from(ApiModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, api: Api) -> None:
        """Save an Api (create or update).

        Args:
            api: Api entity to save.
        """
        existing = await self._session.get(ApiModel, api.id)

        if existing is None:
            self._session.add(self._to_model(api))
        else:
            existing.name = api.name
            existing.version = api.version
            existing.base_path = api.base_path
            existing.description = api.description
            existing.cors = api.cors
            existing.status = api.status.value
            existing.environment_ids = list(api.environment_ids)
            existing.plan_ids = list(api.plan_ids)

        await self._session.flush()

    async def delete(self, api_id: str) -> None:
        """Delete an Api. Absent ids are ignored."""
        await self._session.execute(delete(ApiModel).where(ApiModel.id == api_id))
        await self._session.flush()

    def _to_entity(self, model: ApiModel) -> Api:
        """Map database model to domain entity."""
        return Api(
            id=model.id,
            name=model.name,
            version=model.version,
            base_path=model.base_path,
            description=model.description,
            cors=model.cors,
            status=Status(model.status),
            environment_ids=list(model.environment_ids or []),
            plan_ids=list(model.plan_ids or []),
            created_at=ensure_utc(model.created_at),
        )

    def _to_model(self, entity: Api) -> ApiModel:
        """Map domain entity to database model."""
        return ApiModel(
            id=entity.id,
            name=entity.name,
            version=entity.version,
            base_path=entity.base_path,
            description=entity.description,
            cors=entity.cors,
            status=entity.status.value,
            environment_ids=list(entity.environment_ids),
            plan_ids=list(entity.plan_ids),
            created_at=entity.created_at,
        )
