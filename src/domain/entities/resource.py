"""Resource domain entity.

A Resource groups Operations under one Api. It has no existence outside
its parent: ``api_id`` is fixed at creation and deleting the Api deletes
the Resource.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.validators.functions import (
    API_NAME_MAX_LENGTH,
    validate_optional_text,
    validate_required_text,
)


@dataclass
class Resource:
    """Path-grouping container of Operations.

    Attributes:
        id: Unique Resource identifier.
        api_id: Owning Api.
        name: Human-readable name.
        description: Optional description.
        created_at: When the Resource was created.
    """

    id: str
    api_id: str
    name: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.name = validate_required_text(self.name, "name", API_NAME_MAX_LENGTH)
        self.description = validate_optional_text(self.description, "description")

    def belongs_to(self, api_id: str) -> bool:
        """Check the Resource is owned by the given Api."""
        return self.api_id == api_id
