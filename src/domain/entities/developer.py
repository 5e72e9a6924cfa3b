"""Developer domain entity.

A Developer is a consumer of published Apis, keyed by email and a bcrypt
credential. The plaintext password never reaches the entity.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums.status import Status
from src.domain.validators.functions import (
    NAME_MAX_LENGTH,
    validate_email,
    validate_required_text,
)


@dataclass
class Developer:
    """Api consumer account.

    Attributes:
        id: Unique Developer identifier.
        name: Display name.
        email: Unique email address (stored lowercase).
        password_hash: bcrypt hash of the credential.
        status: Lifecycle status.
        created_at: When the Developer was registered.
    """

    id: str
    name: str
    email: str
    password_hash: str = field(repr=False)
    status: Status = Status.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.name = validate_required_text(self.name, "name", NAME_MAX_LENGTH)
        self.email = validate_email(self.email)

    def is_active(self) -> bool:
        """Check if the Developer may authenticate."""
        return self.status == Status.ACTIVE
