"""Base domain error for Railway-Oriented Programming.

DomainError is the base of every error a handler can return. Errors travel
through the system as data inside Failure, they are never raised.

Architecture:
- Does NOT inherit from Exception (returned in Result, not raised)
- Subclassed via dataclass inheritance (see common_errors)
- The presentation layer maps each subclass to one HTTP status

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode

    return Failure(
        error=NotFoundError(
            code=ErrorCode.API_NOT_FOUND,
            message="Api not found",
            resource_type="Api",
            resource_id=api_id,
        )
    )
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
