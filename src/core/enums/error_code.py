"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
- Authorization errors (PERMISSION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_PAGINATION = "invalid_pagination"
    INVALID_HTTP_METHOD = "invalid_http_method"
    INVALID_PATH = "invalid_path"
    INVALID_BASE_PATH = "invalid_base_path"
    INVALID_URL = "invalid_url"
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"

    # Resource errors
    API_NOT_FOUND = "api_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"
    OPERATION_NOT_FOUND = "operation_not_found"
    ENVIRONMENT_NOT_FOUND = "environment_not_found"
    PLAN_NOT_FOUND = "plan_not_found"
    DEVELOPER_NOT_FOUND = "developer_not_found"

    # Conflict errors
    DEVELOPER_ALREADY_EXISTS = "developer_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
