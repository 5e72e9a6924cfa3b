"""GetOperation query handler.

Returns an Operation only when the whole (Api, Resource, Operation) chain
is consistent. An Operation id that exists under another Resource is
reported as not found, never returned.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError] (explicit error handling)
- Side-effect free
"""

from src.application.dtos import OperationResult
from src.application.queries.operation_queries import GetOperation
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success


class GetOperationHandler:
    """Handler for GetOperation query.

    Dependencies (injected via constructor):
        - HierarchyResolver: Chain check and fetch
    """

    def __init__(self, resolver: HierarchyResolver) -> None:
        self._resolver = resolver

    async def handle(
        self, query: GetOperation
    ) -> Result[OperationResult, NotFoundError]:
        """Handle GetOperation query.

        Returns:
            Success(OperationResult): Operation found under the chain.
            Failure(NotFoundError): The first link that failed.
        """
        match await self._resolver.resolve_operation(
            query.api_id, query.resource_id, query.operation_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=operation):
                return Success(value=OperationResult.from_entity(operation))
