"""Api domain entity.

An Api is the root of the catalog hierarchy: a service definition the
gateway publishes under a base path. It owns Resources, which in turn own
Operations. Ownership is recorded on the children (``api_id``), never as
embedded collections on the Api.

Reference:
    - src/domain/entities/resource.py
    - src/domain/entities/operation.py
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums.status import Status
from src.domain.validators.functions import (
    API_NAME_MAX_LENGTH,
    API_VERSION_MAX_LENGTH,
    validate_base_path,
    validate_optional_text,
    validate_required_text,
    validate_unique_ids,
)


@dataclass
class Api:
    """Api catalog entity.

    Attributes:
        id: Unique Api identifier (immutable once assigned).
        name: Human-readable name.
        version: Version label (e.g., "v1", "2024-01").
        base_path: Path prefix the Api is published under. Indexed but not
            unique: two Apis may share a base path.
        description: Optional description.
        cors: Whether the gateway answers CORS preflight for this Api.
        status: Lifecycle status.
        environment_ids: Ordered references to Environments.
        plan_ids: Ordered references to Plans.
        created_at: When the Api was registered.

    Example:
        >>> api = Api(id="a1", name="Store", version="v1", base_path="/store")
        >>> api.status
        <Status.ACTIVE: 'active'>
    """

    id: str
    name: str
    version: str
    base_path: str
    description: str | None = None
    cors: bool = True
    status: Status = Status.ACTIVE
    environment_ids: list[str] = field(default_factory=list)
    plan_ids: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate and normalise fields.

        Raises:
            InvalidFieldError: If any field is invalid.
        """
        self.name = validate_required_text(self.name, "name", API_NAME_MAX_LENGTH)
        self.version = validate_required_text(
            self.version, "version", API_VERSION_MAX_LENGTH
        )
        self.base_path = validate_base_path(self.base_path)
        self.description = validate_optional_text(self.description, "description")
        self.environment_ids = validate_unique_ids(
            self.environment_ids, "environment_ids"
        )
        self.plan_ids = validate_unique_ids(self.plan_ids, "plan_ids")

    def is_active(self) -> bool:
        """Check if the Api is active."""
        return self.status == Status.ACTIVE
