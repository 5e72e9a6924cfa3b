"""Operation domain entity.

An Operation is a single route definition (HTTP method + path pattern)
under a Resource. It carries both ancestor ids so it can be looked up
directly, without walking the hierarchy.

Path Patterns:
    Paths are relative to the Api base path and may end in a ``/**``
    wildcard segment matching any remainder (e.g., ``/orders/**``).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums.http_method import HttpMethod
from src.domain.validators.functions import (
    parse_http_method,
    validate_operation_path,
    validate_optional_text,
)


@dataclass
class Operation:
    """Single method + path route under a Resource.

    Attributes:
        id: Unique Operation identifier.
        api_id: Owning Api (same as the owning Resource's api_id).
        resource_id: Owning Resource.
        method: HTTP method matched.
        path: Path pattern matched.
        description: Optional description.
        created_at: When the Operation was created.

    Example:
        >>> op = Operation(id="o1", api_id="a1", resource_id="r1",
        ...                method=HttpMethod.GET, path="/x")
        >>> op.location
        '/apis/a1/resources/r1/operations/o1'
    """

    id: str
    api_id: str
    resource_id: str
    method: HttpMethod
    path: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate method and path.

        Raises:
            InvalidFieldError: If method or path is invalid.
        """
        self.method = parse_http_method(self.method)
        self.path = validate_operation_path(self.path)
        self.description = validate_optional_text(self.description, "description")

    @property
    def location(self) -> str:
        """Full hierarchical path of this Operation."""
        return (
            f"/apis/{self.api_id}/resources/{self.resource_id}"
            f"/operations/{self.id}"
        )

    def belongs_to(self, api_id: str, resource_id: str) -> bool:
        """Check the Operation sits under the given Api and Resource."""
        return self.api_id == api_id and self.resource_id == resource_id
