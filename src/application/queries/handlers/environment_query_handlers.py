"""Environment query handlers."""

from src.application.dtos import EnvironmentResult
from src.application.queries.environment_queries import (
    GetEnvironment,
    ListEnvironments,
)
from src.core.errors import DomainError, NotFoundError
from src.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    Listing,
    fetch_listing,
    resolve_page_request,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import environment_not_found
from src.domain.protocols.environment_repository import EnvironmentRepository


class GetEnvironmentHandler:
    """Handler for GetEnvironment query."""

    def __init__(self, environment_repo: EnvironmentRepository) -> None:
        self._environment_repo = environment_repo

    async def handle(
        self, query: GetEnvironment
    ) -> Result[EnvironmentResult, NotFoundError]:
        environment = await self._environment_repo.find_by_id(query.environment_id)
        if environment is None:
            return Failure(error=environment_not_found(query.environment_id))
        return Success(value=EnvironmentResult.from_entity(environment))


class ListEnvironmentsHandler:
    """Handler for ListEnvironments query."""

    def __init__(
        self,
        environment_repo: EnvironmentRepository,
        default_page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._environment_repo = environment_repo
        self._default_page_limit = default_page_limit

    async def handle(
        self, query: ListEnvironments
    ) -> Result[Listing[EnvironmentResult], DomainError]:
        match resolve_page_request(
            query.page, query.limit, default_limit=self._default_page_limit
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=page_request):
                listing = await fetch_listing(
                    page_request,
                    self._environment_repo.list_all,
                    self._environment_repo.count_all,
                )
                return Success(value=listing.map(EnvironmentResult.from_entity))
