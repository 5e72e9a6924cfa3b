"""Resource repository protocol."""

from typing import Protocol

from src.domain.entities.resource import Resource


class ResourceRepository(Protocol):
    """Protocol for Resource persistence operations.

    Resources are always listed within their owning Api, in insertion order.
    """

    async def find_by_id(self, resource_id: str) -> Resource | None:
        """Find Resource by ID.

        Args:
            resource_id: Resource identifier.

        Returns:
            Resource entity if found, None otherwise.
        """
        ...

    async def list_by_api(
        self, api_id: str, *, offset: int = 0, limit: int | None = None
    ) -> list[Resource]:
        """List Resources owned by an Api.

        Args:
            api_id: Owning Api.
            offset: Number of Resources to skip.
            limit: Maximum number returned (None for all).
        """
        ...

    async def count_by_api(self, api_id: str) -> int:
        """Count Resources owned by an Api."""
        ...

    async def save(self, resource: Resource) -> None:
        """Save a Resource (create or update)."""
        ...

    async def delete(self, resource_id: str) -> None:
        """Delete a Resource. Absent ids are ignored."""
        ...

    async def delete_by_api(self, api_id: str) -> int:
        """Delete every Resource owned by an Api.

        Returns:
            Number of Resources deleted.
        """
        ...
