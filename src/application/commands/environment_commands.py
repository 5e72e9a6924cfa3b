"""Environment commands (CQRS write operations)."""

from dataclasses import dataclass

from src.domain.enums.status import Status


@dataclass(frozen=True, kw_only=True)
class CreateEnvironment:
    """Create a deployment Environment.

    Attributes:
        name: Human-readable name.
        inbound_url: URL clients call.
        outbound_url: Upstream URL the gateway forwards to.
        description: Optional description.
        status: Initial lifecycle status.
    """

    name: str
    inbound_url: str
    outbound_url: str
    description: str | None = None
    status: Status = Status.ACTIVE


@dataclass(frozen=True, kw_only=True)
class DeleteEnvironment:
    """Delete an Environment. Idempotent."""

    environment_id: str
