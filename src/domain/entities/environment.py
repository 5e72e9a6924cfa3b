"""Environment domain entity.

An Environment is a deployment target (e.g., sandbox, production) an Api
can be published to. Apis reference Environments by id.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums.status import Status
from src.domain.validators.functions import (
    NAME_MAX_LENGTH,
    validate_http_url,
    validate_optional_text,
    validate_required_text,
)


@dataclass
class Environment:
    """Gateway deployment environment.

    Attributes:
        id: Unique Environment identifier.
        name: Human-readable name.
        inbound_url: URL clients call.
        outbound_url: Upstream URL the gateway forwards to.
        description: Optional description.
        status: Lifecycle status.
        created_at: When the Environment was created.
    """

    id: str
    name: str
    inbound_url: str
    outbound_url: str
    description: str | None = None
    status: Status = Status.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.name = validate_required_text(self.name, "name", NAME_MAX_LENGTH)
        self.inbound_url = validate_http_url(self.inbound_url, "inbound_url")
        self.outbound_url = validate_http_url(self.outbound_url, "outbound_url")
        self.description = validate_optional_text(self.description, "description")
