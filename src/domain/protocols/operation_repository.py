"""Operation repository protocol.

Operations carry both ancestor ids, so the store indexes them by
``resource_id`` (per-Resource listing) and by ``api_id`` (Api-wide
discovery and cascading deletes).
"""

from typing import Protocol

from src.domain.entities.operation import Operation


class OperationRepository(Protocol):
    """Protocol for Operation persistence operations.

    **Uniqueness**: the store rejects two Operations with the same
    (resource_id, method, path). The violation is raised by ``save`` and is
    not translated by the repository.
    """

    async def find_by_id(self, operation_id: str) -> Operation | None:
        """Find Operation by ID.

        Args:
            operation_id: Operation identifier.

        Returns:
            Operation entity if found, None otherwise.
        """
        ...

    async def list_by_resource(
        self, resource_id: str, *, offset: int = 0, limit: int | None = None
    ) -> list[Operation]:
        """List Operations of a Resource in insertion order.

        Args:
            resource_id: Owning Resource.
            offset: Number of Operations to skip.
            limit: Maximum number returned (None for all).
        """
        ...

    async def count_by_resource(self, resource_id: str) -> int:
        """Count Operations of a Resource."""
        ...

    async def list_by_api(self, api_id: str) -> list[Operation]:
        """List every Operation under an Api, in insertion order."""
        ...

    async def save(self, operation: Operation) -> None:
        """Save an Operation (create or update)."""
        ...

    async def delete(self, operation_id: str) -> None:
        """Delete an Operation. Absent ids are ignored."""
        ...

    async def delete_by_resource(self, resource_id: str) -> int:
        """Delete every Operation of a Resource.

        Returns:
            Number of Operations deleted.
        """
        ...

    async def delete_by_api(self, api_id: str) -> int:
        """Delete every Operation under an Api.

        Returns:
            Number of Operations deleted.
        """
        ...
