"""Operation commands (CQRS write operations).

Commands represent operator intent to change the routes of a Resource.
All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Each carries the full (api_id, resource_id) chain from the
request path so handlers can verify it before mutating anything.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateOperation:
    """Create an Operation under a Resource.

    ``method`` is carried as text and parsed by the handler so an unknown
    verb is reported as a validation failure on ``method``.

    Attributes:
        api_id: Owning Api (from the request path).
        resource_id: Owning Resource (from the request path).
        method: HTTP method name (case-insensitive).
        path: Path pattern.
        description: Optional description.

    Example:
        >>> command = CreateOperation(
        ...     api_id="a1", resource_id="r1", method="GET", path="/x"
        ... )
        >>> result = await handler.handle(command)
    """

    api_id: str
    resource_id: str
    method: str
    path: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateOperation:
    """Replace the mutable fields of an Operation.

    The id, hierarchy references and creation date are preserved.
    """

    api_id: str
    resource_id: str
    operation_id: str
    method: str
    path: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteOperation:
    """Delete an Operation. Succeeds even if it does not exist."""

    api_id: str
    resource_id: str
    operation_id: str
