"""Environment command handlers."""

from src.application.commands.environment_commands import (
    CreateEnvironment,
    DeleteEnvironment,
)
from src.application.dtos import EnvironmentResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Environment
from src.domain.protocols.environment_repository import EnvironmentRepository
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.validators import InvalidFieldError


class CreateEnvironmentHandler:
    """Handler for CreateEnvironment command."""

    def __init__(
        self,
        environment_repo: EnvironmentRepository,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._environment_repo = environment_repo
        self._id_generator = id_generator
        self._logger = logger

    async def handle(
        self, cmd: CreateEnvironment
    ) -> Result[EnvironmentResult, DomainError]:
        """Handle CreateEnvironment command.

        Returns:
            Success(EnvironmentResult): Created Environment.
            Failure(ValidationError): Name or URLs invalid.
        """
        try:
            environment = Environment(
                id=self._id_generator.new_id(),
                name=cmd.name,
                inbound_url=cmd.inbound_url,
                outbound_url=cmd.outbound_url,
                description=cmd.description,
                status=cmd.status,
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        await self._environment_repo.save(environment)

        self._logger.info(
            "environment_created", environment_id=environment.id, name=environment.name
        )
        return Success(value=EnvironmentResult.from_entity(environment))


class DeleteEnvironmentHandler:
    """Handler for DeleteEnvironment command (idempotent)."""

    def __init__(
        self,
        environment_repo: EnvironmentRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._environment_repo = environment_repo
        self._logger = logger

    async def handle(self, cmd: DeleteEnvironment) -> Result[None, DomainError]:
        await self._environment_repo.delete(cmd.environment_id)
        self._logger.info("environment_deleted", environment_id=cmd.environment_id)
        return Success(value=None)
