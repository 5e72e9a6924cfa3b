"""Listing and pagination primitives.

A listing call returns one of two shapes:
- PagedListing: a bounded slice plus total element/page counts
- FullListing: the complete, unbounded collection

The shape is chosen by whether the caller supplied any pagination
parameter at all. Supplying neither page nor limit yields the full
collection, never a default-sized first page.

Usage:
    match resolve_page_request(query.page, query.limit):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=None):
            return Success(value=FullListing(items=items))
        case Success(value=page_request):
            return Success(value=paginate(items, page_request))
"""

import math
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_LIMIT = 20


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """Validated page request.

    Attributes:
        page: Zero-based page index.
        limit: Maximum number of items per page.
    """

    page: int
    limit: int

    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return self.page * self.limit

    @classmethod
    def create(cls, page: int, limit: int) -> Result["PageRequest", ValidationError]:
        """Build a page request, rejecting out-of-range values.

        Args:
            page: Zero-based page index (must be >= 0).
            limit: Page size (must be > 0).

        Returns:
            Success(PageRequest) or Failure(ValidationError) naming the bad field.
        """
        if page < 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PAGINATION,
                    message="Page index must be greater than or equal to 0",
                    field="page",
                )
            )
        if limit <= 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PAGINATION,
                    message="Limit must be greater than 0",
                    field="limit",
                )
            )
        return Success(value=cls(page=page, limit=limit))


def resolve_page_request(
    page: int | None,
    limit: int | None,
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
) -> Result[PageRequest | None, ValidationError]:
    """Turn optional transport parameters into a page request.

    Args:
        page: Page index as supplied by the caller, or None.
        limit: Page size as supplied by the caller, or None.
        default_limit: Page size used when only ``page`` is supplied.

    Returns:
        Success(None) when neither parameter was supplied (full listing),
        Success(PageRequest) when at least one was, or Failure(ValidationError).
    """
    if page is None and limit is None:
        return Success(value=None)
    return PageRequest.create(
        page=0 if page is None else page,
        limit=default_limit if limit is None else limit,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class PagedListing(Generic[T]):
    """Bounded page of a larger collection.

    Attributes:
        items: Items on this page (empty when the page is past the end).
        page: Zero-based page index that was requested.
        limit: Page size that was requested.
        total_elements: Size of the full matching collection.
    """

    items: list[T]
    page: int
    limit: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed for the full collection (0 when empty)."""
        return math.ceil(self.total_elements / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def map(self, fn: Callable[[T], U]) -> "PagedListing[U]":
        """Return the same page with every item converted by ``fn``."""
        return PagedListing(
            items=[fn(item) for item in self.items],
            page=self.page,
            limit=self.limit,
            total_elements=self.total_elements,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class FullListing(Generic[T]):
    """Complete, unpaginated collection.

    Attributes:
        items: Every matching item, in listing order.
    """

    items: list[T]

    def map(self, fn: Callable[[T], U]) -> "FullListing[U]":
        """Return the listing with every item converted by ``fn``."""
        return FullListing(items=[fn(item) for item in self.items])


# Tagged listing result: either a bounded page or the whole collection
type Listing[T] = PagedListing[T] | FullListing[T]


def paginate(items: Sequence[T], request: PageRequest) -> PagedListing[T]:
    """Slice an in-memory collection into one page.

    Args:
        items: The full matching collection.
        request: Validated page request.

    Returns:
        PagedListing with items ``[offset, offset + limit)`` clipped to the
        collection bounds. A page past the end yields an empty slice.
    """
    start = request.offset
    return PagedListing(
        items=list(items[start : start + request.limit]),
        page=request.page,
        limit=request.limit,
        total_elements=len(items),
    )


def page_of(items: Sequence[T], request: PageRequest, total: int) -> PagedListing[T]:
    """Wrap an already-sliced page fetched from the store.

    Args:
        items: Items the store returned for ``request``.
        request: Page request the store was queried with.
        total: Size of the full matching collection.

    Returns:
        PagedListing carrying the store's slice and count.
    """
    return PagedListing(
        items=list(items),
        page=request.page,
        limit=request.limit,
        total_elements=total,
    )


async def fetch_listing(
    page_request: PageRequest | None,
    fetch: Callable[..., Awaitable[list[T]]],
    count: Callable[[], Awaitable[int]],
) -> Listing[T]:
    """Run a store listing in the shape the page request selects.

    Args:
        page_request: Resolved page request, or None for the full listing.
        fetch: Store listing coroutine accepting ``offset``/``limit`` keywords.
        count: Store count coroutine for the same collection.

    Returns:
        FullListing when ``page_request`` is None, else a PagedListing built
        from a store-side slice and count. A page past the end is empty and
        never reaches the store, so offsets and limits larger than a SQL
        INTEGER are still answered.

    Example:
        listing = await fetch_listing(
            page_request,
            partial(repo.list_by_resource, resource_id),
            partial(repo.count_by_resource, resource_id),
        )
    """
    if page_request is None:
        return FullListing(items=await fetch())
    total = await count()
    offset = page_request.offset
    if offset >= total:
        return page_of([], page_request, total)
    # Offset is below the row count here, so the clamped limit is too
    items = await fetch(offset=offset, limit=min(page_request.limit, total - offset))
    return page_of(items, page_request, total)
