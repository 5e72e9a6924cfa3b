"""CreateOperation command handler.

Adds a route to a Resource. The (api_id, resource_id) chain is resolved
before the input is validated, so a request against a missing Resource is
reported as not found even when its payload is also invalid.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols) and core
- Uses Result types for error handling
- Store failures (e.g., the (resource_id, method, path) uniqueness
  constraint) propagate unchanged
"""

from src.application.commands.operation_commands import CreateOperation
from src.application.dtos import OperationResult
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Operation
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.operation_repository import OperationRepository
from src.domain.validators import InvalidFieldError


class CreateOperationHandler:
    """Handler for CreateOperation command.

    Dependencies (injected via constructor):
        - HierarchyResolver: Chain check
        - OperationRepository: For persistence
        - IdGeneratorProtocol: Fresh identifiers
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        resolver: HierarchyResolver,
        operation_repo: OperationRepository,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._operation_repo = operation_repo
        self._id_generator = id_generator
        self._logger = logger

    async def handle(
        self, cmd: CreateOperation
    ) -> Result[OperationResult, DomainError]:
        """Handle CreateOperation command.

        Returns:
            Success(OperationResult): Created Operation with its location.
            Failure(NotFoundError): Api or Resource did not resolve.
            Failure(ValidationError): Method, path or description invalid.
        """
        # Step 1: Resolve the chain before touching the input
        match await self._resolver.resolve_resource(cmd.api_id, cmd.resource_id):
            case Failure(error=error):
                return Failure(error=error)

        # Step 2: Build (and validate) the entity
        try:
            operation = Operation(
                id=self._id_generator.new_id(),
                api_id=cmd.api_id,
                resource_id=cmd.resource_id,
                method=cmd.method,
                path=cmd.path,
                description=cmd.description,
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        # Step 3: Persist
        await self._operation_repo.save(operation)

        self._logger.info(
            "operation_created",
            operation_id=operation.id,
            resource_id=operation.resource_id,
            api_id=operation.api_id,
            method=operation.method.value,
            path=operation.path,
        )

        return Success(value=OperationResult.from_entity(operation))
