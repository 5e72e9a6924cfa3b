"""Result types for railway-oriented programming.

Handlers return a Result instead of raising, so that every failure the
caller can act on (not found, invalid input, conflict) is part of the
signature and can be matched on.

Usage:
    async def handle(self, query: GetOperation) -> Result[OperationResult, DomainError]:
        operation = await self._operation_repo.find_by_id(query.operation_id)
        if operation is None:
            return Failure(error=NotFoundError(...))
        return Success(value=OperationResult.from_entity(operation))

    match await handler.handle(query):
        case Success(value=operation):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing why the operation failed.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
