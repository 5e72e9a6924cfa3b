"""UpdateOperation command handler.

Replaces the method, path and description of an existing Operation. The
Operation must be reachable through the same three-level chain GetOperation
uses. The id, hierarchy references and creation date never change.
"""

from dataclasses import replace

from src.application.commands.operation_commands import UpdateOperation
from src.application.dtos import OperationResult
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.operation_repository import OperationRepository
from src.domain.validators import InvalidFieldError


class UpdateOperationHandler:
    """Handler for UpdateOperation command."""

    def __init__(
        self,
        resolver: HierarchyResolver,
        operation_repo: OperationRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._operation_repo = operation_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateOperation
    ) -> Result[OperationResult, DomainError]:
        """Handle UpdateOperation command.

        Returns:
            Success(OperationResult): Updated Operation.
            Failure(NotFoundError): Chain did not resolve.
            Failure(ValidationError): New field values invalid.
        """
        resolved = await self._resolver.resolve_operation(
            cmd.api_id, cmd.resource_id, cmd.operation_id
        )
        if isinstance(resolved, Failure):
            return Failure(error=resolved.error)
        existing = resolved.value

        try:
            # replace() re-runs __post_init__ validation
            operation = replace(
                existing,
                method=cmd.method,
                path=cmd.path,
                description=cmd.description,
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        await self._operation_repo.save(operation)

        self._logger.info(
            "operation_updated",
            operation_id=operation.id,
            resource_id=operation.resource_id,
            api_id=operation.api_id,
        )

        return Success(value=OperationResult.from_entity(operation))
