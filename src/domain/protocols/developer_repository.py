"""Developer repository protocol.

Developers are keyed by id and looked up by email when verifying
credentials. Email is unique at the store level.
"""

from typing import Protocol

from src.domain.entities.developer import Developer


class DeveloperRepository(Protocol):
    """Protocol for Developer persistence operations."""

    async def find_by_id(self, developer_id: str) -> Developer | None:
        """Find Developer by ID.

        Args:
            developer_id: Developer identifier.

        Returns:
            Developer entity if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Developer | None:
        """Find Developer by email (case-insensitive).

        Args:
            email: Email address.

        Returns:
            Developer entity if found, None otherwise.
        """
        ...

    async def list_all(
        self, *, offset: int = 0, limit: int | None = None
    ) -> list[Developer]:
        """List Developers in insertion order."""
        ...

    async def count_all(self) -> int:
        """Count every Developer."""
        ...

    async def save(self, developer: Developer) -> None:
        """Save a Developer (create or update).

        Raises:
            IntegrityError: If another Developer already uses the email.
        """
        ...

    async def delete(self, developer_id: str) -> None:
        """Delete a Developer. Absent ids are ignored."""
        ...
