"""Common Pydantic schemas used across multiple modules.

This module contains schemas that are shared across different API endpoints:
the paginated list envelope and the health response.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from src.core.pagination import FullListing, Listing, PagedListing


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: Health status ('healthy' or 'degraded').
        version: Application version.
        database: Database connectivity ('ok' or 'unavailable').
    """

    status: str = Field(..., description="Health status of the API")
    version: str = Field(..., description="Application version")
    database: str = Field(..., description="Database connectivity")

    model_config = {
        "json_schema_extra": {
            "example": {"status": "healthy", "version": "0.1.0", "database": "ok"}
        }
    }


T = TypeVar("T")
D = TypeVar("D")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response for list endpoints.

    Returned only when the caller supplied ``page`` or ``limit``. Without
    either parameter, list endpoints return a plain JSON array.

    Type Parameters:
        T: The type of items in the list.

    Attributes:
        items: List of items for the current page.
        total: Total number of items across all pages.
        page: Current page number (0-indexed).
        limit: Number of items per page.
        pages: Total number of pages.
        has_next: Whether there is a next page available.
        has_previous: Whether there is a previous page available.
    """

    items: list[T] = Field(..., description="List of items for current page")
    total: int = Field(..., description="Total number of items", ge=0)
    page: int = Field(..., description="Current page number (0-indexed)", ge=0)
    limit: int = Field(..., description="Items per page", ge=1)
    pages: int = Field(..., description="Total number of pages", ge=0)
    has_next: bool = Field(..., description="Whether there is a next page")
    has_previous: bool = Field(..., description="Whether there is a previous page")

    @classmethod
    def from_listing(
        cls, listing: PagedListing[D], convert: Callable[[D], T]
    ) -> "PaginatedResponse[T]":
        """Create paginated response from a handler's PagedListing.

        Args:
            listing: Page returned by a list handler.
            convert: DTO -> response schema conversion.

        Returns:
            PaginatedResponse with metadata taken from the listing.
        """
        return cls(
            items=[convert(item) for item in listing.items],
            total=listing.total_elements,
            page=listing.page,
            limit=listing.limit,
            pages=listing.total_pages,
            has_next=listing.has_next,
            has_previous=listing.has_previous,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "items": [],
                "total": 45,
                "page": 0,
                "limit": 20,
                "pages": 3,
                "has_next": True,
                "has_previous": False,
            }
        }
    }


def listing_response(
    listing: Listing[D],
    schema: type[BaseModel],
    convert: Callable[[D], T],
) -> PaginatedResponse[T] | list[T]:
    """Render a listing in the shape the caller asked for.

    Args:
        listing: PagedListing or FullListing from a list handler.
        schema: Item response schema, used to parameterize the envelope.
        convert: DTO -> response schema conversion.

    Returns:
        PaginatedResponse[schema] for a PagedListing, a plain list for a
        FullListing.
    """
    match listing:
        case PagedListing():
            return PaginatedResponse[schema].from_listing(listing, convert)  # type: ignore[valid-type]
        case FullListing():
            return [convert(item) for item in listing.items]
    raise TypeError(f"Unknown listing type: {type(listing).__name__}")
