"""Resource query handlers.

Handlers:
    GetResourceHandler   - Get a Resource through its Api
    ListResourcesHandler - List an Api's Resources, paged or in full
"""

from functools import partial

from src.application.dtos import ResourceResult
from src.application.queries.resource_queries import GetResource, ListResources
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError, NotFoundError
from src.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    Listing,
    fetch_listing,
    resolve_page_request,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols.resource_repository import ResourceRepository


class GetResourceHandler:
    """Handler for GetResource query."""

    def __init__(self, resolver: HierarchyResolver) -> None:
        self._resolver = resolver

    async def handle(
        self, query: GetResource
    ) -> Result[ResourceResult, NotFoundError]:
        match await self._resolver.resolve_resource(query.api_id, query.resource_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=resource):
                return Success(value=ResourceResult.from_entity(resource))


class ListResourcesHandler:
    """Handler for ListResources query."""

    def __init__(
        self,
        resolver: HierarchyResolver,
        resource_repo: ResourceRepository,
        default_page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._resolver = resolver
        self._resource_repo = resource_repo
        self._default_page_limit = default_page_limit

    async def handle(
        self, query: ListResources
    ) -> Result[Listing[ResourceResult], DomainError]:
        """Handle ListResources query.

        Returns:
            Success(PagedListing | FullListing): Resources in insertion order.
            Failure(NotFoundError): Api missing.
            Failure(ValidationError): Invalid page or limit.
        """
        match await self._resolver.resolve_api(query.api_id):
            case Failure(error=error):
                return Failure(error=error)

        match resolve_page_request(
            query.page, query.limit, default_limit=self._default_page_limit
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=page_request):
                listing = await fetch_listing(
                    page_request,
                    partial(self._resource_repo.list_by_api, query.api_id),
                    partial(self._resource_repo.count_by_api, query.api_id),
                )
                return Success(value=listing.map(ResourceResult.from_entity))
