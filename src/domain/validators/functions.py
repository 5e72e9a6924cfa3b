"""Centralized validation functions for catalog entities.

Validators are pure functions shared by entity ``__post_init__`` hooks and
request schemas. They raise InvalidFieldError, a ValueError carrying the
offending field name and a machine-readable code, so command handlers can
turn a rejected entity into a ValidationError without re-parsing messages.
"""

import re
from urllib.parse import urlparse

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.enums.http_method import HttpMethod

API_NAME_MAX_LENGTH = 80
API_VERSION_MAX_LENGTH = 20
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200
BASE_PATH_MAX_LENGTH = 120
OPERATION_PATH_MAX_LENGTH = 180
PASSWORD_MIN_LENGTH = 8
# bcrypt only accepts the first 72 bytes
PASSWORD_MAX_BYTES = 72

WILDCARD_SEGMENT = "**"

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class InvalidFieldError(ValueError):
    """A single field failed validation.

    Attributes:
        field: Name of the field that failed.
        code: Machine-readable error code.
    """

    def __init__(
        self,
        field: str,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.code = code
        self.message = message

    def to_validation_error(self) -> ValidationError:
        """Convert to the ValidationError returned in a Failure."""
        return ValidationError(code=self.code, message=self.message, field=self.field)


def validate_required_text(value: str, field: str, max_length: int) -> str:
    """Validate a required, bounded text field.

    Args:
        value: Text to validate.
        field: Field name reported on failure.
        max_length: Maximum number of characters.

    Returns:
        The value with surrounding whitespace removed.

    Raises:
        InvalidFieldError: If the value is blank or too long.

    Example:
        >>> validate_required_text("  Orders  ", "name", 80)
        'Orders'
    """
    if value is None or not value.strip():
        raise InvalidFieldError(field, f"{field} is required")
    value = value.strip()
    if len(value) > max_length:
        raise InvalidFieldError(
            field, f"{field} cannot exceed {max_length} characters"
        )
    return value


def validate_optional_text(
    value: str | None,
    field: str,
    max_length: int = DESCRIPTION_MAX_LENGTH,
) -> str | None:
    """Validate an optional, bounded text field.

    Empty strings are normalised to None.

    Raises:
        InvalidFieldError: If the value is too long.
    """
    if value is None or not value.strip():
        return None
    if len(value) > max_length:
        raise InvalidFieldError(
            field, f"{field} cannot exceed {max_length} characters"
        )
    return value


def validate_base_path(value: str, field: str = "base_path") -> str:
    """Validate the path prefix an Api is published under.

    Raises:
        InvalidFieldError: If the path does not start with '/', contains
            whitespace, or is too long.

    Example:
        >>> validate_base_path("/store")
        '/store'
    """
    if not value or not value.startswith("/"):
        raise InvalidFieldError(
            field, "Base path must start with '/'", ErrorCode.INVALID_BASE_PATH
        )
    if len(value) > BASE_PATH_MAX_LENGTH:
        raise InvalidFieldError(
            field,
            f"Base path cannot exceed {BASE_PATH_MAX_LENGTH} characters",
            ErrorCode.INVALID_BASE_PATH,
        )
    if any(c.isspace() for c in value):
        raise InvalidFieldError(
            field, "Base path cannot contain whitespace", ErrorCode.INVALID_BASE_PATH
        )
    return value


def validate_operation_path(value: str, field: str = "path") -> str:
    """Validate an Operation path pattern.

    The wildcard segment ``**`` matches any remainder and is only allowed as
    the final segment.

    Args:
        value: Path pattern relative to the Api base path.
        field: Field name reported on failure.

    Returns:
        The path unchanged.

    Raises:
        InvalidFieldError: If the path is malformed.

    Example:
        >>> validate_operation_path("/account/**")
        '/account/**'
        >>> validate_operation_path("/**/account")
        InvalidFieldError: Wildcard '**' is only allowed as the last segment
    """
    if not value or not value.startswith("/"):
        raise InvalidFieldError(
            field, "Path must start with '/'", ErrorCode.INVALID_PATH
        )
    if len(value) > OPERATION_PATH_MAX_LENGTH:
        raise InvalidFieldError(
            field,
            f"Path cannot exceed {OPERATION_PATH_MAX_LENGTH} characters",
            ErrorCode.INVALID_PATH,
        )
    if any(c.isspace() for c in value):
        raise InvalidFieldError(
            field, "Path cannot contain whitespace", ErrorCode.INVALID_PATH
        )
    segments = value.split("/")[1:]
    for index, segment in enumerate(segments):
        if WILDCARD_SEGMENT in segment and (
            segment != WILDCARD_SEGMENT or index != len(segments) - 1
        ):
            raise InvalidFieldError(
                field,
                "Wildcard '**' is only allowed as the last segment",
                ErrorCode.INVALID_PATH,
            )
    return value


def parse_http_method(value: str | HttpMethod, field: str = "method") -> HttpMethod:
    """Parse an HTTP method name (case-insensitive).

    Raises:
        InvalidFieldError: If the name is not a supported method.

    Example:
        >>> parse_http_method("get")
        <HttpMethod.GET: 'GET'>
    """
    if isinstance(value, HttpMethod):
        return value
    try:
        return HttpMethod((value or "").strip().upper())
    except ValueError:
        raise InvalidFieldError(
            field,
            f"Unsupported method {value!r}, expected one of "
            f"{', '.join(HttpMethod.values())}",
            ErrorCode.INVALID_HTTP_METHOD,
        ) from None


def validate_http_url(value: str, field: str) -> str:
    """Validate an absolute http(s) URL.

    Raises:
        InvalidFieldError: If the scheme is not http/https or the host is missing.
    """
    parsed = urlparse(value or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidFieldError(
            field, f"{field} must be an absolute http(s) URL", ErrorCode.INVALID_URL
        )
    return value


def validate_email(value: str, field: str = "email") -> str:
    """Validate email format.

    Returns:
        Normalized email (lowercase).

    Raises:
        InvalidFieldError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    if not value or not _EMAIL_PATTERN.match(value):
        raise InvalidFieldError(
            field, f"Invalid email format: {value}", ErrorCode.INVALID_EMAIL
        )
    return value.lower()


def validate_password(value: str, field: str = "password") -> str:
    """Validate a developer password before hashing.

    Raises:
        InvalidFieldError: If the password is too short or too long for bcrypt.
    """
    if not value or len(value) < PASSWORD_MIN_LENGTH:
        raise InvalidFieldError(
            field,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            ErrorCode.INVALID_PASSWORD,
        )
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise InvalidFieldError(
            field,
            f"Password cannot exceed {PASSWORD_MAX_BYTES} bytes",
            ErrorCode.INVALID_PASSWORD,
        )
    return value


def validate_unique_ids(values: list[str], field: str) -> list[str]:
    """Validate an ordered list of identifiers has no duplicates.

    Raises:
        InvalidFieldError: If an identifier appears twice.
    """
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise InvalidFieldError(field, f"Duplicate identifier in {field}: {value}")
        seen.add(value)
    return list(values)
