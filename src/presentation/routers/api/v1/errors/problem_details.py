"""Problem Details (RFC 7807) response bodies.

Every non-2xx response of the control plane, whether produced by a handler
Failure or by a global exception handler, is serialised through these two
models with ``exclude_none=True``.

RFC 7807: https://tools.ietf.org/html/rfc7807
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One rejected input field.

    Example:
        >>> ErrorDetail(
        ...     field="method",
        ...     code="invalid_http_method",
        ...     message="Unsupported HTTP method: FETCH",
        ... )
    """

    field: str = Field(..., description="Rejected field", examples=["method"])
    code: str = Field(
        ..., description="Machine-readable code", examples=["invalid_http_method"]
    )
    message: str = Field(..., description="Why the value was rejected")


class ProblemDetails(BaseModel):
    """RFC 7807 error body.

    ``type`` is ``{api_base_url}/errors/{slug}``; ``instance`` is the request
    path. ``errors`` is present only for input validation failures and
    ``trace_id`` only when TraceMiddleware assigned one.

    Example:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Resource not found",
        ...     instance="/api/v1/apis/a1/resources/r9/operations",
        ... )
    """

    type: str = Field(
        ...,
        description="Problem type URI",
        examples=["http://localhost:8000/errors/validation-failed"],
    )
    title: str = Field(..., description="Summary of the problem type")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(
        ..., description="What went wrong for this request", examples=["Api not found"]
    )
    instance: str = Field(
        ..., description="Request path", examples=["/api/v1/apis/a1"]
    )
    errors: list[ErrorDetail] | None = Field(
        None, description="Field errors (validation failures only)"
    )
    trace_id: str | None = Field(None, description="X-Trace-ID of the request")
