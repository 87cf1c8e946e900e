"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Cost factor from settings (BCRYPT_ROUNDS, default 12)
    - Random salt per hash
    - Constant-time verification
    - Passwords longer than 72 UTF-8 bytes are refused, never truncated
"""

import bcrypt

# bcrypt cannot hash more than 72 bytes of input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("s3cret-Pass")
        password_service.verify_password("s3cret-Pass", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt log2 rounds. Low values are only for tests.

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4-31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            Bcrypt hash string ($2b$<cost>$...), 60 characters.

        Raises:
            ValueError: If the password is longer than 72 UTF-8 bytes.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            msg = f"Password must not exceed {BCRYPT_MAX_BYTES} bytes"
            raise ValueError(msg)

        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash. False otherwise, including when
            the stored hash is not in bcrypt format or the password is too
            long to have been hashed.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            # Invalid hash format
            return False
