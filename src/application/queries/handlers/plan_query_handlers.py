"""Plan query handlers."""

from src.application.dtos import PlanResult
from src.application.queries.plan_queries import GetPlan, ListPlans
from src.core.errors import DomainError, NotFoundError
from src.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    Listing,
    fetch_listing,
    resolve_page_request,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import plan_not_found
from src.domain.protocols.plan_repository import PlanRepository


class GetPlanHandler:
    """Handler for GetPlan query."""

    def __init__(self, plan_repo: PlanRepository) -> None:
        self._plan_repo = plan_repo

    async def handle(self, query: GetPlan) -> Result[PlanResult, NotFoundError]:
        plan = await self._plan_repo.find_by_id(query.plan_id)
        if plan is None:
            return Failure(error=plan_not_found(query.plan_id))
        return Success(value=PlanResult.from_entity(plan))


class ListPlansHandler:
    """Handler for ListPlans query."""

    def __init__(
        self,
        plan_repo: PlanRepository,
        default_page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._plan_repo = plan_repo
        self._default_page_limit = default_page_limit

    async def handle(
        self, query: ListPlans
    ) -> Result[Listing[PlanResult], DomainError]:
        match resolve_page_request(
            query.page, query.limit, default_limit=self._default_page_limit
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=page_request):
                listing = await fetch_listing(
                    page_request, self._plan_repo.list_all, self._plan_repo.count_all
                )
                return Success(value=listing.map(PlanResult.from_entity))
