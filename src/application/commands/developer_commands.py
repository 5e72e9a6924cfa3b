"""Developer commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Plaintext passwords live only in the command; handlers hash them
"""

from dataclasses import dataclass, field

from src.domain.enums.status import Status


@dataclass(frozen=True, kw_only=True)
class CreateDeveloper:
    """Register a Developer.

    Attributes:
        name: Display name.
        email: Email address (unique, case-insensitive).
        password: Plaintext password (hashed by the handler, never stored).
        status: Initial lifecycle status.

    Example:
        >>> command = CreateDeveloper(
        ...     name="Ada", email="ada@example.com", password="s3cretpass"
        ... )
    """

    name: str
    email: str
    password: str = field(repr=False)
    status: Status = Status.ACTIVE


@dataclass(frozen=True, kw_only=True)
class DeleteDeveloper:
    """Delete a Developer. Idempotent."""

    developer_id: str
