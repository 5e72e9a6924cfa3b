"""Route metadata types for the API Route Registry.

This module defines the core types for the Route Metadata Registry pattern.
The registry is the single source of truth for all API routes, generating
FastAPI routes, Access Gate dependencies, and OpenAPI metadata.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, etc.)
    HTTPMethod: HTTP method enum for routes
    AuthPolicy: Authentication/authorization policy for a route
    AuthLevel: PUBLIC, AUTHENTICATED or PERMISSION
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/apis",
        handler=create_api,
        resource="apis",
        tags=["Apis"],
        summary="Register Api",
        response_model=ApiResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.PERMISSION,
            entity_kind=EntityKind.APIS,
            action=Action.CREATE,
        ),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.domain.enums import Action, EntityKind


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        DELETE: Idempotent delete operations
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# =============================================================================
# Authentication Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (e.g., health)
        AUTHENTICATED: Requires valid JWT only
        PERMISSION: Requires valid JWT and a Casbin (entity kind, action) grant
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    PERMISSION = "permission"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level
        entity_kind: Entity kind checked by the Access Gate (PERMISSION only)
        action: Action checked by the Access Gate (PERMISSION only)
        rationale: Optional explanation for PUBLIC routes

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC, rationale="Load balancer probe")
        >>> AuthPolicy(
        ...     level=AuthLevel.PERMISSION,
        ...     entity_kind=EntityKind.OPERATIONS,
        ...     action=Action.DELETE,
        ... )
    """

    level: AuthLevel
    entity_kind: EntityKind | None = None
    action: Action | None = None
    rationale: str | None = None

    def __post_init__(self) -> None:
        if self.level == AuthLevel.PERMISSION and (
            self.entity_kind is None or self.action is None
        ):
            raise ValueError("PERMISSION policy needs entity_kind and action")


def permission(kind: EntityKind, action: Action) -> AuthPolicy:
    """Shorthand for a PERMISSION policy."""
    return AuthPolicy(level=AuthLevel.PERMISSION, entity_kind=kind, action=action)


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET) - cacheable
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry

    Reference:
        - RFC 7231 Section 4.2 (HTTP Semantics)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 409)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=404, description="Api, Resource or Operation not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to the v1 prefix (e.g., "/apis/{api_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "apis", "operations")
        tags: OpenAPI tags (e.g., ["Operations"])
        version: API version (e.g., "v1")

    OpenAPI documentation:
        summary: Short endpoint description (appears in OpenAPI UI)
        description: Detailed endpoint description (markdown supported)
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Response schema (a model, a list, or a union of both)
        status_code: Expected success status (e.g., 200, 201, 204)
        errors: List of possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level (safe, idempotent, non_idempotent)
        auth_policy: Authentication policy (public, authenticated, permission)

    Deprecation:
        deprecated: Whether endpoint is deprecated
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
