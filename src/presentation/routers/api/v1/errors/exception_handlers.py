"""Global exception handlers for FastAPI application.

This module provides exception handlers that catch exceptions escaping the
route handlers and convert them to RFC 7807 Problem Details responses.

Handlers:
    http_exception_handler: Converts HTTPException to RFC 7807 format
    validation_exception_handler: Converts RequestValidationError to 400
    integrity_error_handler: Converts store constraint violations to 409
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


# HTTP status code to (title, slug) mapping for RFC 7807
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}

# First element of a pydantic error ``loc`` naming where the value came from
_REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for RFC 7807 type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    slug: str | None = None,
    title: str | None = None,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug or _get_error_slug(status_code)}",
        title=title or _get_status_title(status_code),
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        # Set by TraceMiddleware
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 7807 Problem Details response.

    Covers the 401 and 403 raised by the auth and permission dependencies,
    and framework 404/405 responses.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler or dependency.

    Returns:
        JSONResponse with RFC 7807 ProblemDetails.
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, HTTPException)

    return _problem_response(
        request,
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        # Preserve headers such as WWW-Authenticate
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 Problem Details response.

    Malformed bodies, missing fields and non-integer ``page``/``limit``
    all surface as validation failures with field-level errors.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse (400) with RFC 7807 ProblemDetails including field errors.
    """
    # Type narrowing: FastAPI registers this handler only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "path"] -> "path", ["query", "page"] -> "page"
        loc = list(error.get("loc", []))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        field_parts = [str(p) for p in loc]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return _problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed. Check 'errors' for details.",
        slug="validation-failed",
        title="Validation Failed",
        errors=field_errors or None,
    )


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert a store uniqueness or reference violation into 409.

    The request session has already rolled back by the time this runs.
    """
    get_logger().warning(
        "store_constraint_violation",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )
    return _problem_response(
        request,
        status.HTTP_409_CONFLICT,
        "The request conflicts with an existing record.",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Converts any unhandled exception into RFC 7807 Problem Details response
    without leaking internal details to API consumers.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with RFC 7807 ProblemDetails (500 Internal Server Error)
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        path=request.url.path,
        method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
