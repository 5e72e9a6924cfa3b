"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating JWT access tokens.
Every catalog and directory route depends on get_current_user, directly or
through the permission check in authorization_dependencies.py.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": current_user.user_id}
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# HTTP Bearer token extractor. A missing header is reported as 401 by
# get_current_user rather than by the scheme itself.
bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller information from JWT.

    Attributes:
        user_id: Caller identifier (from JWT 'sub' claim).
        email: Caller email address (from JWT 'email' claim).
        roles: Caller roles (from JWT 'roles' claim), checked by the
            Casbin Access Gate.
        token_jti: JWT unique identifier, if present.
    """

    user_id: str
    email: str
    roles: list[str]
    token_jti: str | None = None


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated caller from JWT token.

    Args:
        credentials: Bearer token from Authorization header, if any.
        token_service: JWT token service (injected).

    Returns:
        CurrentUser with identity and roles from a valid JWT.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_UNAUTHORIZED_HEADERS,
        )

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                jti_raw = payload.get("jti")
                return CurrentUser(
                    user_id=str(payload["sub"]),
                    email=str(payload.get("email", "")),
                    roles=[str(role) for role in payload["roles"]],
                    token_jti=str(jti_raw) if jti_raw else None,
                )
            except (KeyError, TypeError) as e:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid token payload",
                    headers=_UNAUTHORIZED_HEADERS,
                ) from e

        case Failure(error=error):
            # Token invalid or expired - error is a string
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error,
                headers=_UNAUTHORIZED_HEADERS,
            )

    raise HTTPException(  # pragma: no cover
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers=_UNAUTHORIZED_HEADERS,
    )


# Type alias for cleaner route signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
