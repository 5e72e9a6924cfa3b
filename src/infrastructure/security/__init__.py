"""Security infrastructure adapters.

- BcryptPasswordService: Developer credential hashing
- JWTService: Operator access token generation/validation
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
]
