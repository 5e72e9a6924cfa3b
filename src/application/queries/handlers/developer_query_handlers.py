"""Developer query handlers.

Handlers:
    GetDeveloperHandler                - Get a Developer by ID
    ListDevelopersHandler              - List Developers, paged or in full
    FindDeveloperByCredentialsHandler  - Verify email + password

Security:
    - Unknown email and wrong password return the same error, so callers
      cannot probe which emails are registered
    - Inactive Developers cannot authenticate
"""

from src.application.dtos import DeveloperResult
from src.application.queries.developer_queries import (
    FindDeveloperByCredentials,
    GetDeveloper,
    ListDevelopers,
)
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.pagination import (
    DEFAULT_PAGE_LIMIT,
    Listing,
    fetch_listing,
    resolve_page_request,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import developer_not_found, invalid_credentials
from src.domain.protocols.developer_repository import DeveloperRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol


class GetDeveloperHandler:
    """Handler for GetDeveloper query."""

    def __init__(self, developer_repo: DeveloperRepository) -> None:
        self._developer_repo = developer_repo

    async def handle(
        self, query: GetDeveloper
    ) -> Result[DeveloperResult, NotFoundError]:
        developer = await self._developer_repo.find_by_id(query.developer_id)
        if developer is None:
            return Failure(error=developer_not_found(query.developer_id))
        return Success(value=DeveloperResult.from_entity(developer))


class ListDevelopersHandler:
    """Handler for ListDevelopers query."""

    def __init__(
        self,
        developer_repo: DeveloperRepository,
        default_page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._developer_repo = developer_repo
        self._default_page_limit = default_page_limit

    async def handle(
        self, query: ListDevelopers
    ) -> Result[Listing[DeveloperResult], DomainError]:
        match resolve_page_request(
            query.page, query.limit, default_limit=self._default_page_limit
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=page_request):
                listing = await fetch_listing(
                    page_request,
                    self._developer_repo.list_all,
                    self._developer_repo.count_all,
                )
                return Success(value=listing.map(DeveloperResult.from_entity))


class FindDeveloperByCredentialsHandler:
    """Handler for FindDeveloperByCredentials query.

    Dependencies (injected via constructor):
        - DeveloperRepository: Lookup by email
        - PasswordHashingProtocol: bcrypt verification
        - LoggerProtocol: Structured logging (never logs the password)
    """

    def __init__(
        self,
        developer_repo: DeveloperRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._developer_repo = developer_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(
        self, query: FindDeveloperByCredentials
    ) -> Result[DeveloperResult, AuthenticationError]:
        """Handle FindDeveloperByCredentials query.

        Returns:
            Success(DeveloperResult): Email known, password matches, active.
            Failure(AuthenticationError): Otherwise (INVALID_CREDENTIALS).
        """
        developer = await self._developer_repo.find_by_email(query.email.lower())

        if developer is None or not self._password_service.verify_password(
            query.password, developer.password_hash
        ):
            self._logger.warning("developer_credentials_rejected")
            return Failure(error=invalid_credentials())

        if not developer.is_active():
            self._logger.warning(
                "developer_credentials_rejected",
                developer_id=developer.id,
                reason="inactive",
            )
            return Failure(error=invalid_credentials())

        return Success(value=DeveloperResult.from_entity(developer))
