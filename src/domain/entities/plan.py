"""Plan domain entity.

A Plan is a subscription tier (rate and quota bundle) an Api is offered
under. Quota enforcement belongs to the gateway's traffic engine; the
catalog only records the Plan and which Apis reference it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums.status import Status
from src.domain.validators.functions import (
    NAME_MAX_LENGTH,
    validate_optional_text,
    validate_required_text,
)


@dataclass
class Plan:
    """Subscription plan.

    Attributes:
        id: Unique Plan identifier.
        name: Human-readable name.
        description: Optional description.
        is_default: Whether new subscriptions land on this Plan.
        status: Lifecycle status.
        created_at: When the Plan was created.
    """

    id: str
    name: str
    description: str | None = None
    is_default: bool = False
    status: Status = Status.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.name = validate_required_text(self.name, "name", NAME_MAX_LENGTH)
        self.description = validate_optional_text(self.description, "description")
