"""Error kinds shared by every handler.

Error Types:
- ValidationError: Malformed or missing input, invalid pagination
- NotFoundError: An identifier (or identifier chain) does not resolve
- ConflictError: A uniqueness rule would be violated
- AuthenticationError: Credentials do not match

Each kind maps to exactly one transport status in the presentation layer,
so callers always receive a specific error, never a generic failure.

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode

    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_PATH,
            message="Path must start with '/'",
            field="path",
        )
    )
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the input field that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Identifier did not resolve.

    For hierarchical lookups the error names the first link of the
    (Api, Resource, Operation) chain that failed.

    Attributes:
        resource_type: Entity kind that was not found (Api, Resource, ...).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict.

    Attributes:
        resource_type: Entity kind in conflict.
        conflicting_field: Field carrying the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Credentials were rejected."""

    pass
