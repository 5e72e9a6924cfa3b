"""Plan queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetPlan:
    """Get a Plan by ID."""

    plan_id: str


@dataclass(frozen=True, kw_only=True)
class ListPlans:
    """List Plans, paged when page or limit is given."""

    page: int | None = None
    limit: int | None = None
