"""Api query handlers.

Handlers:
    GetApiHandler   - Get an Api by ID
    ListApisHandler - List Apis, paged or in full
"""

from src.application.dtos import ApiResult
from src.application.queries.api_queries import GetApi, ListApis
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError, NotFoundError
from src.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    Listing,
    fetch_listing,
    resolve_page_request,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols.api_repository import ApiRepository


class GetApiHandler:
    """Handler for GetApi query."""

    def __init__(self, resolver: HierarchyResolver) -> None:
        self._resolver = resolver

    async def handle(self, query: GetApi) -> Result[ApiResult, NotFoundError]:
        match await self._resolver.resolve_api(query.api_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=api):
                return Success(value=ApiResult.from_entity(api))


class ListApisHandler:
    """Handler for ListApis query.

    Dependencies (injected via constructor):
        - ApiRepository: Api retrieval
        - default_page_limit: Page size when only ``page`` is given
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        default_page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._api_repo = api_repo
        self._default_page_limit = default_page_limit

    async def handle(self, query: ListApis) -> Result[Listing[ApiResult], DomainError]:
        """Handle ListApis query.

        Returns:
            Success(PagedListing | FullListing): Apis in insertion order.
            Failure(ValidationError): Invalid page or limit.
        """
        match resolve_page_request(
            query.page, query.limit, default_limit=self._default_page_limit
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=page_request):
                listing = await fetch_listing(
                    page_request, self._api_repo.list_all, self._api_repo.count_all
                )
                return Success(value=listing.map(ApiResult.from_entity))
