"""Api repository protocol.

Defines the interface for Api persistence. Implementations return domain
entities, never database models.
"""

from typing import Protocol

from src.domain.entities.api import Api


class ApiRepository(Protocol):
    """Protocol for Api persistence operations.

    **Ordering**: listing methods return Apis ordered by insertion
    (``created_at``, then ``id``) so pages are stable.
    """

    async def find_by_id(self, api_id: str) -> Api | None:
        """Find Api by ID.

        Args:
            api_id: Api identifier.

        Returns:
            Api entity if found, None otherwise.
        """
        ...

    async def find_by_base_path(self, base_path: str) -> list[Api]:
        """Find every Api published under a base path.

        Base paths are not unique, so this may return several Apis.
        """
        ...

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Api]:
        """List Apis in insertion order.

        Args:
            offset: Number of Apis to skip.
            limit: Maximum number returned (None for all).
        """
        ...

    async def count_all(self) -> int:
        """Count every Api."""
        ...

    async def save(self, api: Api) -> None:
        """Save an Api (create or update)."""
        ...

    async def delete(self, api_id: str) -> None:
        """Delete an Api. Absent ids are ignored."""
        ...
