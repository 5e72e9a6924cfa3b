"""Plan repository implementation."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.plan import Plan
from src.domain.enums.status import Status
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.plan import Plan as PlanModel


class PlanRepository:
    """SQLAlchemy implementation of PlanRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, plan_id: str) -> Plan | None:
        stmt = select(PlanModel).where(PlanModel.id == plan_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def find_by_ids(self, plan_ids: list[str]) -> list[Plan]:
        if not plan_ids:
            return []
        stmt = select(PlanModel).where(PlanModel.id.in_(plan_ids))
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Plan]:
        stmt = (
            select(PlanModel)
            .order_by(PlanModel.created_at, PlanModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_all(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(PlanModel)
        )
        return result.scalar_one()

    async def save(self, plan: Plan) -> None:
        existing = await self._session.get(PlanModel, plan.id)

        if existing is None:
            self._session.add(self._to_model(plan))
        else:
            existing.name = plan.name
            existing.description = plan.description
            existing.is_default = plan.is_default
            existing.status = plan.status.value

        await self._session.flush()

    async def delete(self, plan_id: str) -> None:
        await self._session.execute(delete(PlanModel).where(PlanModel.id == plan_id))
        await self._session.flush()

    def _to_entity(self, model: PlanModel) -> Plan:
        return Plan(
            id=model.id,
            name=model.name,
            description=model.description,
            is_default=model.is_default,
            status=Status(model.status),
            created_at=ensure_utc(model.created_at),
        )

    def _to_model(self, entity: Plan) -> PlanModel:
        return PlanModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            is_default=entity.is_default,
            status=entity.status.value,
            created_at=entity.created_at,
        )
