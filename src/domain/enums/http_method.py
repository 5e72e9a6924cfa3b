"""HTTP methods an Operation can match.

ALL is a wildcard understood by the gateway's traffic engine: the
Operation matches any verb on its path.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verb matched by an Operation."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    ALL = "ALL"

    @classmethod
    def values(cls) -> list[str]:
        """Get all method values as strings.

        Returns:
            list[str]: List of method values.
        """
        return [method.value for method in cls]
