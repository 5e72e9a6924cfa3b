"""Application layer error types.

Wraps domain errors returned by command and query handlers with the
application-level code the presentation layer maps to an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: Domain error → ApplicationError mapping
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Operation not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def to_application_error(
    error: DomainError,
    *,
    is_query: bool = False,
) -> ApplicationError:
    """Map a handler's domain error to an ApplicationError.

    Each domain error kind maps to exactly one application code, so the
    resulting HTTP status is deterministic.

    Args:
        error: Domain error from a Failure.
        is_query: Whether the error came from a query handler (affects the
            validation code only).

    Returns:
        ApplicationError wrapping the domain error.

    Example:
        >>> to_application_error(api_not_found("a1")).code
        <ApplicationErrorCode.NOT_FOUND: 'not_found'>
    """
    details: dict[str, str] | None = None

    if isinstance(error, ValidationError):
        code = (
            ApplicationErrorCode.QUERY_VALIDATION_FAILED
            if is_query
            else ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        )
    elif isinstance(error, NotFoundError):
        code = ApplicationErrorCode.NOT_FOUND
        details = {
            "resource_type": error.resource_type,
            "resource_id": error.resource_id,
        }
    elif isinstance(error, ConflictError):
        code = ApplicationErrorCode.CONFLICT
    elif isinstance(error, AuthenticationError):
        code = ApplicationErrorCode.UNAUTHORIZED
    else:
        code = (
            ApplicationErrorCode.QUERY_FAILED
            if is_query
            else ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        )

    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details=details,
    )
