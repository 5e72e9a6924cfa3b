"""Operation queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They never
change state. ``page`` and ``limit`` are None when the caller did not
supply them, which selects the full (unpaginated) listing.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetOperation:
    """Get one Operation through its full (Api, Resource) chain.

    Example:
        >>> query = GetOperation(api_id="a1", resource_id="r1", operation_id="o1")
        >>> result = await handler.handle(query)
    """

    api_id: str
    resource_id: str
    operation_id: str


@dataclass(frozen=True, kw_only=True)
class ListOperations:
    """List the Operations of a Resource, paged or in full.

    Attributes:
        api_id: Owning Api.
        resource_id: Resource whose Operations to list.
        page: Zero-based page index, or None.
        limit: Page size, or None.
    """

    api_id: str
    resource_id: str
    page: int | None = None
    limit: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListOperationsByApi:
    """List every Operation across all Resources of an Api."""

    api_id: str
