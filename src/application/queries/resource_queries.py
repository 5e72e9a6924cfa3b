"""Resource queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetResource:
    """Get a Resource, verifying it belongs to the Api."""

    api_id: str
    resource_id: str


@dataclass(frozen=True, kw_only=True)
class ListResources:
    """List the Resources of an Api, paged when page or limit is given."""

    api_id: str
    page: int | None = None
    limit: int | None = None
