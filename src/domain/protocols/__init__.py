"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, TokenGenerationProtocol
    from src.domain.protocols import UserRepository, PermissionRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import (
    AccessTokenClaims,
    TokenGenerationProtocol,
)

# Repository protocols
from src.domain.protocols.permission_repository import PermissionRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "AccessTokenClaims",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "PermissionRepository",
    "UserRepository",
]
