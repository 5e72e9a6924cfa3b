"""DeleteOperation command handler.

Delete is idempotent: an Operation that is absent, or that does not sit
under the given Api and Resource, is left alone and the call still
succeeds. Nothing outside the resolved chain is ever deleted.
"""

from src.application.commands.operation_commands import DeleteOperation
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.operation_repository import OperationRepository


class DeleteOperationHandler:
    """Handler for DeleteOperation command."""

    def __init__(
        self,
        resolver: HierarchyResolver,
        operation_repo: OperationRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._operation_repo = operation_repo
        self._logger = logger

    async def handle(self, cmd: DeleteOperation) -> Result[None, DomainError]:
        """Handle DeleteOperation command.

        Returns:
            Success(None): Always, whether or not anything was deleted.
        """
        match await self._resolver.resolve_operation(
            cmd.api_id, cmd.resource_id, cmd.operation_id
        ):
            case Failure(error=error):
                self._logger.debug(
                    "operation_delete_noop",
                    operation_id=cmd.operation_id,
                    reason=error.code.value,
                )
                return Success(value=None)

        await self._operation_repo.delete(cmd.operation_id)

        self._logger.info(
            "operation_deleted",
            operation_id=cmd.operation_id,
            resource_id=cmd.resource_id,
            api_id=cmd.api_id,
        )
        return Success(value=None)
