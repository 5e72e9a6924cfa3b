"""Environment repository protocol."""

from typing import Protocol

from src.domain.entities.environment import Environment


class EnvironmentRepository(Protocol):
    """Protocol for Environment persistence operations."""

    async def find_by_id(self, environment_id: str) -> Environment | None:
        """Find Environment by ID."""
        ...

    async def find_by_ids(self, environment_ids: list[str]) -> list[Environment]:
        """Find the Environments whose ids are in the given list.

        Missing ids are silently skipped; callers compare lengths.
        """
        ...

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Environment]:
        """List Environments in insertion order."""
        ...

    async def count_all(self) -> int:
        """Count every Environment."""
        ...

    async def save(self, environment: Environment) -> None:
        """Save an Environment (create or update)."""
        ...

    async def delete(self, environment_id: str) -> None:
        """Delete an Environment. Absent ids are ignored."""
        ...
