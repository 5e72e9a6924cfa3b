"""ListOperations query handlers.

Handles requests to list the Operations of one Resource (paged or full)
and every Operation of an Api.

Listing Shape:
    Neither ``page`` nor ``limit`` supplied → FullListing (every Operation)
    Either supplied → PagedListing (store-side offset/limit + total count)
"""

from functools import partial

from src.application.dtos import OperationResult
from src.application.queries.operation_queries import (
    ListOperations,
    ListOperationsByApi,
)
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError, NotFoundError
from src.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    Listing,
    fetch_listing,
    resolve_page_request,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols.operation_repository import OperationRepository


class ListOperationsHandler:
    """Handler for ListOperations query.

    Dependencies (injected via constructor):
        - HierarchyResolver: Api/Resource chain check
        - OperationRepository: Operation retrieval
        - default_page_limit: Page size when only ``page`` is given
    """

    def __init__(
        self,
        resolver: HierarchyResolver,
        operation_repo: OperationRepository,
        default_page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._resolver = resolver
        self._operation_repo = operation_repo
        self._default_page_limit = default_page_limit

    async def handle(
        self, query: ListOperations
    ) -> Result[Listing[OperationResult], DomainError]:
        """Handle ListOperations query.

        Returns:
            Success(PagedListing | FullListing): Operations in insertion order.
            Failure(ValidationError): Invalid page or limit.
            Failure(NotFoundError): Api/Resource chain did not resolve.
        """
        match await self._resolver.resolve_resource(query.api_id, query.resource_id):
            case Failure(error=error):
                return Failure(error=error)

        page_result = resolve_page_request(
            query.page, query.limit, default_limit=self._default_page_limit
        )
        if isinstance(page_result, Failure):
            return Failure(error=page_result.error)
        page_request = page_result.value

        listing = await fetch_listing(
            page_request,
            partial(self._operation_repo.list_by_resource, query.resource_id),
            partial(self._operation_repo.count_by_resource, query.resource_id),
        )
        return Success(value=listing.map(OperationResult.from_entity))


class ListOperationsByApiHandler:
    """Handler for ListOperationsByApi query.

    Returns the union of Operations across every Resource of the Api, for
    gateway-wide route discovery.
    """

    def __init__(
        self,
        resolver: HierarchyResolver,
        operation_repo: OperationRepository,
    ) -> None:
        self._resolver = resolver
        self._operation_repo = operation_repo

    async def handle(
        self, query: ListOperationsByApi
    ) -> Result[list[OperationResult], NotFoundError]:
        match await self._resolver.resolve_api(query.api_id):
            case Failure(error=error):
                return Failure(error=error)

        operations = await self._operation_repo.list_by_api(query.api_id)
        return Success(value=[OperationResult.from_entity(op) for op in operations])
