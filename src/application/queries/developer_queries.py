"""Developer queries (CQRS read operations)."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class GetDeveloper:
    """Get a Developer by ID."""

    developer_id: str


@dataclass(frozen=True, kw_only=True)
class ListDevelopers:
    """List Developers, paged when page or limit is given."""

    page: int | None = None
    limit: int | None = None


@dataclass(frozen=True, kw_only=True)
class FindDeveloperByCredentials:
    """Look a Developer up by email and verify the password.

    Used by the gateway's consumer-facing side; it has no management
    endpoint.

    Attributes:
        email: Email address (case-insensitive).
        password: Plaintext password to verify.
    """

    email: str
    password: str = field(repr=False)
