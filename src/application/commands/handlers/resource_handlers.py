"""Resource command handlers.

Handlers:
    CreateResourceHandler - Create a Resource under an Api
    UpdateResourceHandler - Replace a Resource's name and description
    DeleteResourceHandler - Delete a Resource and its Operations
"""

from dataclasses import replace

from src.application.commands.resource_commands import (
    CreateResource,
    DeleteResource,
    UpdateResource,
)
from src.application.dtos import ResourceResult
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Resource
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.operation_repository import OperationRepository
from src.domain.protocols.resource_repository import ResourceRepository
from src.domain.validators import InvalidFieldError


class CreateResourceHandler:
    """Handler for CreateResource command."""

    def __init__(
        self,
        resolver: HierarchyResolver,
        resource_repo: ResourceRepository,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._resource_repo = resource_repo
        self._id_generator = id_generator
        self._logger = logger

    async def handle(self, cmd: CreateResource) -> Result[ResourceResult, DomainError]:
        """Handle CreateResource command.

        Returns:
            Success(ResourceResult): Created Resource.
            Failure(NotFoundError): Api missing.
            Failure(ValidationError): Name or description invalid.
        """
        match await self._resolver.resolve_api(cmd.api_id):
            case Failure(error=error):
                return Failure(error=error)

        try:
            resource = Resource(
                id=self._id_generator.new_id(),
                api_id=cmd.api_id,
                name=cmd.name,
                description=cmd.description,
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        await self._resource_repo.save(resource)

        self._logger.info(
            "resource_created", resource_id=resource.id, api_id=resource.api_id
        )
        return Success(value=ResourceResult.from_entity(resource))


class UpdateResourceHandler:
    """Handler for UpdateResource command."""

    def __init__(
        self,
        resolver: HierarchyResolver,
        resource_repo: ResourceRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._resource_repo = resource_repo
        self._logger = logger

    async def handle(self, cmd: UpdateResource) -> Result[ResourceResult, DomainError]:
        resolved = await self._resolver.resolve_resource(cmd.api_id, cmd.resource_id)
        if isinstance(resolved, Failure):
            return Failure(error=resolved.error)
        existing = resolved.value

        try:
            resource = replace(existing, name=cmd.name, description=cmd.description)
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        await self._resource_repo.save(resource)

        self._logger.info(
            "resource_updated", resource_id=resource.id, api_id=resource.api_id
        )
        return Success(value=ResourceResult.from_entity(resource))


class DeleteResourceHandler:
    """Handler for DeleteResource command.

    Idempotent. A Resource that is absent or owned by another Api is left
    alone and the call succeeds.
    """

    def __init__(
        self,
        resolver: HierarchyResolver,
        resource_repo: ResourceRepository,
        operation_repo: OperationRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._resource_repo = resource_repo
        self._operation_repo = operation_repo
        self._logger = logger

    async def handle(self, cmd: DeleteResource) -> Result[None, DomainError]:
        match await self._resolver.resolve_resource(cmd.api_id, cmd.resource_id):
            case Failure():
                self._logger.debug(
                    "resource_delete_noop",
                    resource_id=cmd.resource_id,
                    api_id=cmd.api_id,
                )
                return Success(value=None)

        operations_deleted = await self._operation_repo.delete_by_resource(
            cmd.resource_id
        )
        await self._resource_repo.delete(cmd.resource_id)

        self._logger.info(
            "resource_deleted",
            resource_id=cmd.resource_id,
            api_id=cmd.api_id,
            operations_deleted=operations_deleted,
        )
        return Success(value=None)
