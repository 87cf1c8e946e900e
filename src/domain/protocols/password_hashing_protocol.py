"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("s3cret-Pass")
        password_service.verify_password("s3cret-Pass", password_hash)  # True
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt per call).

        Raises:
            ValueError: If the password is too long to hash without truncation.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns:
            True if password matches hash, False otherwise. A malformed hash
            yields False rather than an exception.
        """
        ...
