"""Api command handlers.

Handlers:
    CreateApiHandler - Register an Api
    UpdateApiHandler - Replace an Api's fields and reference lists
    DeleteApiHandler - Delete an Api and everything it owns

Environment and Plan references must resolve when they are written. They
are not re-checked later: deleting an Environment or Plan leaves existing
references in place.
"""

from dataclasses import replace

from src.application.commands.api_commands import CreateApi, DeleteApi, UpdateApi
from src.application.dtos import ApiResult
from src.application.services.hierarchy_resolver import HierarchyResolver
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Api
from src.domain.errors import environment_not_found, plan_not_found
from src.domain.protocols.api_repository import ApiRepository
from src.domain.protocols.environment_repository import EnvironmentRepository
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.operation_repository import OperationRepository
from src.domain.protocols.plan_repository import PlanRepository
from src.domain.protocols.resource_repository import ResourceRepository
from src.domain.validators import InvalidFieldError


async def _check_references(
    environment_repo: EnvironmentRepository,
    plan_repo: PlanRepository,
    environment_ids: list[str],
    plan_ids: list[str],
) -> NotFoundError | None:
    """Return a NotFoundError for the first missing reference, if any."""
    if environment_ids:
        found = {e.id for e in await environment_repo.find_by_ids(environment_ids)}
        for environment_id in environment_ids:
            if environment_id not in found:
                return environment_not_found(environment_id)
    if plan_ids:
        found = {p.id for p in await plan_repo.find_by_ids(plan_ids)}
        for plan_id in plan_ids:
            if plan_id not in found:
                return plan_not_found(plan_id)
    return None


class CreateApiHandler:
    """Handler for CreateApi command.

    Dependencies (injected via constructor):
        - ApiRepository: For persistence
        - EnvironmentRepository, PlanRepository: Reference checks
        - IdGeneratorProtocol: Fresh identifiers
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        environment_repo: EnvironmentRepository,
        plan_repo: PlanRepository,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._api_repo = api_repo
        self._environment_repo = environment_repo
        self._plan_repo = plan_repo
        self._id_generator = id_generator
        self._logger = logger

    async def handle(self, cmd: CreateApi) -> Result[ApiResult, DomainError]:
        """Handle CreateApi command.

        Returns:
            Success(ApiResult): Created Api.
            Failure(ValidationError): A field is invalid.
            Failure(NotFoundError): A referenced Environment or Plan is missing.
        """
        try:
            api = Api(
                id=self._id_generator.new_id(),
                name=cmd.name,
                version=cmd.version,
                base_path=cmd.base_path,
                description=cmd.description,
                cors=cmd.cors,
                status=cmd.status,
                environment_ids=list(cmd.environment_ids),
                plan_ids=list(cmd.plan_ids),
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        missing = await _check_references(
            self._environment_repo, self._plan_repo, api.environment_ids, api.plan_ids
        )
        if missing is not None:
            return Failure(error=missing)

        await self._api_repo.save(api)

        self._logger.info(
            "api_created", api_id=api.id, name=api.name, base_path=api.base_path
        )
        return Success(value=ApiResult.from_entity(api))


class UpdateApiHandler:
    """Handler for UpdateApi command."""

    def __init__(
        self,
        resolver: HierarchyResolver,
        api_repo: ApiRepository,
        environment_repo: EnvironmentRepository,
        plan_repo: PlanRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._api_repo = api_repo
        self._environment_repo = environment_repo
        self._plan_repo = plan_repo
        self._logger = logger

    async def handle(self, cmd: UpdateApi) -> Result[ApiResult, DomainError]:
        """Handle UpdateApi command.

        Returns:
            Success(ApiResult): Updated Api.
            Failure(NotFoundError): Api, or a referenced Environment/Plan, missing.
            Failure(ValidationError): A field is invalid.
        """
        resolved = await self._resolver.resolve_api(cmd.api_id)
        if isinstance(resolved, Failure):
            return Failure(error=resolved.error)
        existing = resolved.value

        try:
            api = replace(
                existing,
                name=cmd.name,
                version=cmd.version,
                base_path=cmd.base_path,
                description=cmd.description,
                cors=cmd.cors,
                status=cmd.status,
                environment_ids=list(cmd.environment_ids),
                plan_ids=list(cmd.plan_ids),
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        missing = await _check_references(
            self._environment_repo, self._plan_repo, api.environment_ids, api.plan_ids
        )
        if missing is not None:
            return Failure(error=missing)

        await self._api_repo.save(api)

        self._logger.info("api_updated", api_id=api.id)
        return Success(value=ApiResult.from_entity(api))


class DeleteApiHandler:
    """Handler for DeleteApi command.

    Deletes Operations, then Resources, then the Api. All three writes
    share the caller's unit of work, so they commit together.
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        resource_repo: ResourceRepository,
        operation_repo: OperationRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._api_repo = api_repo
        self._resource_repo = resource_repo
        self._operation_repo = operation_repo
        self._logger = logger

    async def handle(self, cmd: DeleteApi) -> Result[None, DomainError]:
        """Handle DeleteApi command.

        Returns:
            Success(None): Always (absent Apis are a no-op).
        """
        if await self._api_repo.find_by_id(cmd.api_id) is None:
            self._logger.debug("api_delete_noop", api_id=cmd.api_id)
            return Success(value=None)

        operations_deleted = await self._operation_repo.delete_by_api(cmd.api_id)
        resources_deleted = await self._resource_repo.delete_by_api(cmd.api_id)
        await self._api_repo.delete(cmd.api_id)

        self._logger.info(
            "api_deleted",
            api_id=cmd.api_id,
            resources_deleted=resources_deleted,
            operations_deleted=operations_deleted,
        )
        return Success(value=None)
