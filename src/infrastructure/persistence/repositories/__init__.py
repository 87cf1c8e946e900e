"""Repository implementations (SQLAlchemy adapters for domain protocols)."""

from src.infrastructure.persistence.repositories.permission_repository import (
    PermissionRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "PermissionRepository",
    "UserRepository",
]
