"""Api commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass, field

from src.domain.enums.status import Status


@dataclass(frozen=True, kw_only=True)
class CreateApi:
    """Register a new Api.

    Attributes:
        name: Human-readable name.
        version: Version label.
        base_path: Path prefix the Api is published under.
        description: Optional description.
        cors: Whether the gateway answers CORS preflight.
        status: Initial lifecycle status.
        environment_ids: Ordered Environment references (must exist).
        plan_ids: Ordered Plan references (must exist).
    """

    name: str
    version: str
    base_path: str
    description: str | None = None
    cors: bool = True
    status: Status = Status.ACTIVE
    environment_ids: list[str] = field(default_factory=list)
    plan_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class UpdateApi:
    """Replace the scalar fields and reference lists of an Api.

    The id and creation date are preserved.
    """

    api_id: str
    name: str
    version: str
    base_path: str
    description: str | None = None
    cors: bool = True
    status: Status = Status.ACTIVE
    environment_ids: list[str] = field(default_factory=list)
    plan_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class DeleteApi:
    """Delete an Api together with its Resources and their Operations."""

    api_id: str
