"""Resource commands (CQRS write operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateResource:
    """Create a Resource under an Api.

    Attributes:
        api_id: Owning Api (from the request path).
        name: Human-readable name.
        description: Optional description.
    """

    api_id: str
    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateResource:
    """Replace the name and description of a Resource."""

    api_id: str
    resource_id: str
    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteResource:
    """Delete a Resource and its Operations. Idempotent."""

    api_id: str
    resource_id: str
