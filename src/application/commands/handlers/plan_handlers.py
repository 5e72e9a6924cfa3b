"""Plan command handlers."""

from src.application.commands.plan_commands import CreatePlan, DeletePlan
from src.application.dtos import PlanResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Plan
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.plan_repository import PlanRepository
from src.domain.validators import InvalidFieldError


class CreatePlanHandler:
    """Handler for CreatePlan command."""

    def __init__(
        self,
        plan_repo: PlanRepository,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._plan_repo = plan_repo
        self._id_generator = id_generator
        self._logger = logger

    async def handle(self, cmd: CreatePlan) -> Result[PlanResult, DomainError]:
        try:
            plan = Plan(
                id=self._id_generator.new_id(),
                name=cmd.name,
                description=cmd.description,
                is_default=cmd.is_default,
                status=cmd.status,
            )
        except InvalidFieldError as e:
            return Failure(error=e.to_validation_error())

        await self._plan_repo.save(plan)

        self._logger.info("plan_created", plan_id=plan.id, name=plan.name)
        return Success(value=PlanResult.from_entity(plan))


class DeletePlanHandler:
    """Handler for DeletePlan command (idempotent)."""

    def __init__(self, plan_repo: PlanRepository, logger: LoggerProtocol) -> None:
        self._plan_repo = plan_repo
        self._logger = logger

    async def handle(self, cmd: DeletePlan) -> Result[None, DomainError]:
        await self._plan_repo.delete(cmd.plan_id)
        self._logger.info("plan_deleted", plan_id=cmd.plan_id)
        return Success(value=None)
