"""Plan commands (CQRS write operations)."""

from dataclasses import dataclass

from src.domain.enums.status import Status


@dataclass(frozen=True, kw_only=True)
class CreatePlan:
    """Create a subscription Plan."""

    name: str
    description: str | None = None
    is_default: bool = False
    status: Status = Status.ACTIVE


@dataclass(frozen=True, kw_only=True)
class DeletePlan:
    """Delete a Plan. Idempotent."""

    plan_id: str
