"""Environment repository implementation."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.environment import Environment
from src.domain.enums.status import Status
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.environment import (
    Environment as EnvironmentModel,
)


class EnvironmentRepository:
    """SQLAlchemy implementation of EnvironmentRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, environment_id: str) -> Environment | None:
        stmt = select(EnvironmentModel).where(EnvironmentModel.id == environment_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def find_by_ids(self, environment_ids: list[str]) -> list[Environment]:
        """Find the Environments whose ids are in the list (missing ids skipped)."""
        if not environment_ids:
            return []
        stmt = select(EnvironmentModel).where(EnvironmentModel.id.in_(environment_ids))
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Environment]:
        stmt = (
            select(EnvironmentModel)
            .order_by(EnvironmentModel.created_at, EnvironmentModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_all(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(EnvironmentModel)
        )
        return result.scalar_one()

    async def save(self, environment: Environment) -> None:
        existing = await self._session.get(EnvironmentModel, environment.id)

        if existing is None:
            self._session.add(self._to_model(environment))
        else:
            existing.name = environment.name
            existing.inbound_url = environment.inbound_url
            existing.outbound_url = environment.outbound_url
            existing.description = environment.description
            existing.status = environment.status.value

        await self._session.flush()

    async def delete(self, environment_id: str) -> None:
        await self._session.execute(
            delete(EnvironmentModel).where(EnvironmentModel.id == environment_id)
        )
        await self._session.flush()

    def _to_entity(self, model: EnvironmentModel) -> Environment:
        return Environment(
            id=model.id,
            name=model.name,
            inbound_url=model.inbound_url,
            outbound_url=model.outbound_url,
            description=model.description,
            status=Status(model.status),
            created_at=ensure_utc(model.created_at),
        )

    def _to_model(self, entity: Environment) -> EnvironmentModel:
        return EnvironmentModel(
            id=entity.id,
            name=entity.name,
            inbound_url=entity.inbound_url,
            outbound_url=entity.outbound_url,
            description=entity.description,
            status=entity.status.value,
            created_at=entity.created_at,
        )
