"""Catalog domain errors.

Message constants and NotFoundError factories for the catalog entities.
Errors are values returned in Failure, never raised.

Usage:
    from src.domain.errors import operation_not_found

    return Failure(error=operation_not_found(operation_id))
"""

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ConflictError, NotFoundError


class CatalogError:
    """Catalog error message constants."""

    API_NOT_FOUND = "Api not found"
    RESOURCE_NOT_FOUND = "Resource not found"
    OPERATION_NOT_FOUND = "Operation not found"
    ENVIRONMENT_NOT_FOUND = "Environment not found"
    PLAN_NOT_FOUND = "Plan not found"
    DEVELOPER_NOT_FOUND = "Developer not found"

    DEVELOPER_ALREADY_EXISTS = "A developer with this email already exists"
    INVALID_CREDENTIALS = "Invalid email or password"


def _not_found(
    code: ErrorCode, message: str, resource_type: str, resource_id: str
) -> NotFoundError:
    return NotFoundError(
        code=code,
        message=message,
        resource_type=resource_type,
        resource_id=resource_id,
    )


def api_not_found(api_id: str) -> NotFoundError:
    return _not_found(
        ErrorCode.API_NOT_FOUND, CatalogError.API_NOT_FOUND, "Api", api_id
    )


def resource_not_found(resource_id: str) -> NotFoundError:
    return _not_found(
        ErrorCode.RESOURCE_NOT_FOUND,
        CatalogError.RESOURCE_NOT_FOUND,
        "Resource",
        resource_id,
    )


def operation_not_found(operation_id: str) -> NotFoundError:
    return _not_found(
        ErrorCode.OPERATION_NOT_FOUND,
        CatalogError.OPERATION_NOT_FOUND,
        "Operation",
        operation_id,
    )


def environment_not_found(environment_id: str) -> NotFoundError:
    return _not_found(
        ErrorCode.ENVIRONMENT_NOT_FOUND,
        CatalogError.ENVIRONMENT_NOT_FOUND,
        "Environment",
        environment_id,
    )


def plan_not_found(plan_id: str) -> NotFoundError:
    return _not_found(
        ErrorCode.PLAN_NOT_FOUND, CatalogError.PLAN_NOT_FOUND, "Plan", plan_id
    )


def developer_not_found(developer_id: str) -> NotFoundError:
    return _not_found(
        ErrorCode.DEVELOPER_NOT_FOUND,
        CatalogError.DEVELOPER_NOT_FOUND,
        "Developer",
        developer_id,
    )


def developer_already_exists() -> ConflictError:
    return ConflictError(
        code=ErrorCode.DEVELOPER_ALREADY_EXISTS,
        message=CatalogError.DEVELOPER_ALREADY_EXISTS,
        resource_type="Developer",
        conflicting_field="email",
    )


def invalid_credentials() -> AuthenticationError:
    """Same error for unknown email and wrong password."""
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=CatalogError.INVALID_CREDENTIALS,
    )
