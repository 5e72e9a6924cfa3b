"""Hierarchy resolution service.

Centralizes the Api → Resource → Operation chain check used by every
hierarchical command and query handler. A lookup succeeds only when each
link exists and points at the link above it; an Operation id that exists
under a different Resource or Api is reported as not found.

Resolution Chain:
    Operation.resource_id → Resource.api_id → Api

Usage:
    resolver = HierarchyResolver(api_repo, resource_repo, operation_repo)

    result = await resolver.resolve_operation(api_id, resource_id, op_id)
    match result:
        case Success(value=operation):
            ...
        case Failure(error=error):
            ...  # NotFoundError naming the first failing link
"""

from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Api, Operation, Resource
from src.domain.errors import api_not_found, operation_not_found, resource_not_found
from src.domain.protocols.api_repository import ApiRepository
from src.domain.protocols.operation_repository import OperationRepository
from src.domain.protocols.resource_repository import ResourceRepository


class HierarchyResolver:
    """Resolves identifier chains to entities.

    Returns entities on success so handlers avoid a second fetch.

    Dependencies (injected via constructor):
        - ApiRepository
        - ResourceRepository
        - OperationRepository
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        resource_repo: ResourceRepository,
        operation_repo: OperationRepository,
    ) -> None:
        self._api_repo = api_repo
        self._resource_repo = resource_repo
        self._operation_repo = operation_repo

    async def resolve_api(self, api_id: str) -> Result[Api, NotFoundError]:
        """Resolve an Api by id.

        Returns:
            Success(Api) or Failure(NotFoundError) for the Api.
        """
        api = await self._api_repo.find_by_id(api_id)
        if api is None:
            return Failure(error=api_not_found(api_id))
        return Success(value=api)

    async def resolve_resource(
        self,
        api_id: str,
        resource_id: str,
    ) -> Result[Resource, NotFoundError]:
        """Resolve a Resource and verify it belongs to the Api.

        Returns:
            Success(Resource): Api exists and owns the Resource.
            Failure(NotFoundError): Api missing, Resource missing, or the
                Resource belongs to a different Api.
        """
        match await self.resolve_api(api_id):
            case Failure(error=error):
                return Failure(error=error)

        resource = await self._resource_repo.find_by_id(resource_id)
        if resource is None or not resource.belongs_to(api_id):
            return Failure(error=resource_not_found(resource_id))

        return Success(value=resource)

    async def resolve_operation(
        self,
        api_id: str,
        resource_id: str,
        operation_id: str,
    ) -> Result[Operation, NotFoundError]:
        """Resolve an Operation through the full chain.

        Returns:
            Success(Operation): Every link exists and is consistent.
            Failure(NotFoundError): The first link that failed.
        """
        match await self.resolve_resource(api_id, resource_id):
            case Failure(error=error):
                return Failure(error=error)

        operation = await self._operation_repo.find_by_id(operation_id)
        if operation is None or not operation.belongs_to(api_id, resource_id):
            return Failure(error=operation_not_found(operation_id))

        return Success(value=operation)
