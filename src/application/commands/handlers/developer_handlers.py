"""Developer command handlers.

Handlers:
    CreateDeveloperHandler - Register a Developer with a bcrypt credential
    DeleteDeveloperHandler - Remove a Developer (idempotent)

Security:
    - Plaintext passwords are validated, hashed, and dropped
    - Passwords never appear in logs or results
"""

from src.application.commands.developer_commands import (
    CreateDeveloper,
    DeleteDeveloper,
)
from src.application.dtos import DeveloperResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Developer
from src.domain.errors import developer_already_exists
from src.domain.protocols.developer_repository import DeveloperRepository
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.validators import InvalidFieldError, validate_password


class CreateDeveloperHandler:
    """Handler for CreateDeveloper command.

    Dependencies (injected via constructor):
        - DeveloperRepository: For persistence and the email pre-check
        - PasswordHashingProtocol: bcrypt hashing
        - IdGeneratorProtocol: Fresh identifiers
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        developer_repo: DeveloperRepository,
        password_service: PasswordHashingProtocol,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._developer_repo = developer_repo
        self._password_service = password_service
        self._id_generator = id_generator
        self._logger = logger

    async def handle(
        self, cmd: CreateDeveloper
    ) -> Result[DeveloperResult, DomainError]:
        """Handle CreateDeveloper command.

        Returns:
            Success(DeveloperResult): Registered Developer.
            Failure(ValidationError): Name, email or password invalid.
            Failure(ConflictError): Email already registered.
        """
        # Validate everything before paying for a bcrypt hash
        try:
            validate_password(cmd.password)
            developer = Developer(
                id=self._id_generator.new_id(),
                name=cmd.name,
                email=cmd.email,
                password_hash="",
                status=cmd.status,
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        if await self._developer_repo.find_by_email(developer.email) is not None:
            return Failure(error=developer_already_exists())

        developer.password_hash = self._password_service.hash_password(cmd.password)
        await self._developer_repo.save(developer)

        self._logger.info("developer_created", developer_id=developer.id)
        return Success(value=DeveloperResult.from_entity(developer))


class DeleteDeveloperHandler:
    """Handler for DeleteDeveloper command (idempotent)."""

    def __init__(
        self,
        developer_repo: DeveloperRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._developer_repo = developer_repo
        self._logger = logger

    async def handle(self, cmd: DeleteDeveloper) -> Result[None, DomainError]:
        await self._developer_repo.delete(cmd.developer_id)
        self._logger.info("developer_deleted", developer_id=cmd.developer_id)
        return Success(value=None)
