"""UUIDv7 identifier generator (adapter).

Implements IdGeneratorProtocol. UUIDv7 values are time-ordered, so ids
sort in creation order, which keeps (created_at, id) listings stable.
"""

from uuid_extensions import uuid7


class Uuid7IdGenerator:
    """Generates UUIDv7 identifiers as canonical 36-character strings."""

    def new_id(self) -> str:
        return str(uuid7())
