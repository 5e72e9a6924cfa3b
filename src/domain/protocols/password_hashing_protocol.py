"""Password hashing port.

Developer credentials are hashed before they reach the entity and are
verified when looking a Developer up by email and password.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost factor
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            Hash string (bcrypt format: $2b$12$...). The same password
            yields a different hash each call (random salt).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns:
            True if the password matches, False otherwise (including a
            malformed hash).
        """
        ...
