"""Operation repository implementation.

SQLAlchemy implementation of the OperationRepository protocol.
Maps between Operation domain entity and Operation database model.

The (resource_id, method, path) unique constraint is enforced by the
database. ``save`` lets the resulting IntegrityError propagate; the
presentation layer reports it as a conflict.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.operation import Operation
from src.domain.enums.http_method import HttpMethod
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.operation import (
    Operation as OperationModel,
)


class OperationRepository:
    """SQLAlchemy implementation of OperationRepository protocol.

    **Implementation Notes**:
    - Per-Resource listings use idx_operations_resource_created
    - Writes flush only; the session owner commits
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, operation_id: str) -> Operation | None:
        """Find Operation by ID.

        Args:
            operation_id: Operation identifier.

        Returns:
            Operation entity if found, None otherwise.
        """
        stmt = select(OperationModel).where(OperationModel.id == operation_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_by_resource(
        self, resource_id: str, *, offset: int = 0, limit: int | None = None
    ) -> list[Operation]:
        """List Operations of a Resource in insertion order.

        Args:
            resource_id: Owning Resource.
            offset: Number of Operations to skip.
            limit: Maximum number returned (None for all).

        Returns:
            List of Operation entities.
        """
        stmt = (
            select(OperationModel)
            .where(OperationModel.resource_id == resource_id)
            .order_by(OperationModel.created_at, OperationModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_by_resource(self, resource_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(OperationModel)
            .where(OperationModel.resource_id == resource_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_by_api(self, api_id: str) -> list[Operation]:
        """List every Operation under an Api, in insertion order."""
        stmt = (
            select(OperationModel)
            .where(OperationModel.api_id == api_id)
            .order_by(OperationModel.created_at, OperationModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, operation: Operation) -> None:
        """Save an Operation (create or update).

        Args:
            operation: Operation entity to save.

        Raises:
            IntegrityError: If another Operation of the Resource already
                uses the same method and path.
        """
        existing = await self._session.get(OperationModel, operation.id)

        if existing is None:
            self._session.add(self._to_model(operation))
        else:
            existing.method = operation.method.value
            existing.path = operation.path
            existing.description = operation.description

        await self._session.flush()

    async def delete(self, operation_id: str) -> None:
        """Delete an Operation. Absent ids are ignored."""
        await self._session.execute(
            delete(OperationModel).where(OperationModel.id == operation_id)
        )
        await self._session.flush()

    async def delete_by_resource(self, resource_id: str) -> int:
        result = await self._session.execute(
            delete(OperationModel).where(OperationModel.resource_id == resource_id)
        )
        await self._session.flush()
        return result.rowcount

    async def delete_by_api(self, api_id: str) -> int:
        result = await self._session.execute(
            delete(OperationModel).where(OperationModel.api_id == api_id)
        )
        await self._session.flush()
        return result.rowcount

    def _to_entity(self, model: OperationModel) -> Operation:
        """Map database model to domain entity."""
        return Operation(
            id=model.id,
            api_id=model.api_id,
            resource_id=model.resource_id,
            method=HttpMethod(model.method),
            path=model.path,
            description=model.description,
            created_at=ensure_utc(model.created_at),
        )

    def _to_model(self, entity: Operation) -> OperationModel:
        """Map domain entity to database model."""
        return OperationModel(
            id=entity.id,
            api_id=entity.api_id,
            resource_id=entity.resource_id,
            method=entity.method.value,
            path=entity.path,
            description=entity.description,
            created_at=entity.created_at,
        )
