"""Api queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetApi:
    """Get an Api by ID."""

    api_id: str


@dataclass(frozen=True, kw_only=True)
class ListApis:
    """List Apis, paged when page or limit is given."""

    page: int | None = None
    limit: int | None = None
