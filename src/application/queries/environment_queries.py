"""Environment queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetEnvironment:
    """Get an Environment by ID."""

    environment_id: str


@dataclass(frozen=True, kw_only=True)
class ListEnvironments:
    """List Environments, paged when page or limit is given."""

    page: int | None = None
    limit: int | None = None
