"""Plan repository protocol."""

from typing import Protocol

from src.domain.entities.plan import Plan


class PlanRepository(Protocol):
    """Protocol for Plan persistence operations."""

    async def find_by_id(self, plan_id: str) -> Plan | None:
        """Find Plan by ID."""
        ...

    async def find_by_ids(self, plan_ids: list[str]) -> list[Plan]:
        """Find the Plans whose ids are in the given list.

        Missing ids are silently skipped; callers compare lengths.
        """
        ...

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Plan]:
        """List Plans in insertion order."""
        ...

    async def count_all(self) -> int:
        """Count every Plan."""
        ...

    async def save(self, plan: Plan) -> None:
        """Save a Plan (create or update)."""
        ...

    async def delete(self, plan_id: str) -> None:
        """Delete a Plan. Absent ids are ignored."""
        ...
