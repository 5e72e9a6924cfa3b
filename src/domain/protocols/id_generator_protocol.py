"""Identifier generator protocol.

Every catalog entity gets a fresh string identifier at creation time.
Handlers depend on this port so tests can inject predictable ids.
"""

from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Produces unique string identifiers.

    Implementations:
        - Uuid7IdGenerator: time-ordered UUIDv7 strings (production)
    """

    def new_id(self) -> str:
        """Return a new identifier, never returned before."""
        ...
