"""JWT access token service (adapter).

Implements TokenGenerationProtocol with PyJWT and HMAC-SHA256. Operator
tooling issues tokens; the management API only validates them.

Security:
    - HS256 with a secret of at least 32 bytes
    - ``exp`` and signature checked on every request
    - ``sub``, ``email`` and ``roles`` are required claims
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success

_REQUIRED_CLAIMS = ["sub", "exp", "roles"]


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id="ops-1", email="ops@example.com", roles=["operator"]
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 30,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing secret (at least 32 bytes).
            expiration_minutes: Token lifetime in minutes.
            algorithm: HMAC algorithm name.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

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
            roles: Role names checked by the access gate.

        Returns:
            Encoded JWT (header.payload.signature).
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": user_id,
            "email": email,
            "roles": roles,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int | list[str]], str]:
        """Validate a token and extract its claims.

        Returns:
            Success(payload), or Failure("token_expired" | "invalid_token").
        """
        try:
            payload: dict[str, str | int | list[str]] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(error="token_expired")
        except InvalidTokenError:
            return Failure(error="invalid_token")

        if not isinstance(payload.get("roles"), list):
            return Failure(error="invalid_token")

        return Success(value=payload)
