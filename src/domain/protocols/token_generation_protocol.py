"""Access token port.

Operators call the management API with a bearer JWT. The token's ``sub``,
``email`` and ``roles`` claims identify the caller; ``roles`` drives the
access gate.

Token Strategy:
    - Short-lived HS256 JWT, stateless validation
    - Issued by operator tooling, there is no login endpoint
"""

from typing import Protocol

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 (PyJWT)

    Usage:
        result = token_service.validate_access_token(token)
        match result:
            case Success(value=payload):
                roles = payload["roles"]
            case Failure(error=error):
                ...  # 401
    """

    def generate_access_token(
        self,
        user_id: str,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate a signed access token.

        Args:
            user_id: Caller identifier (``sub`` claim).
            email: Caller email address.
            roles: Role names (e.g., ["operator"]).

        Returns:
            Encoded JWT.
        """
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int | list[str]], str]:
        """Validate a token and return its payload.

        Returns:
            Success with the claims dict, or Failure with a short reason
            ("token_expired", "invalid_token", ...). Never raises.
        """
        ...
